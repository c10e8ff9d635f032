"""
Utility functions for Streamlit UI
"""

from typing import Dict, Tuple
import matplotlib.pyplot as plt
import matplotlib
from matplotlib.figure import Figure
import pandas as pd

matplotlib.rcParams['font.family'] = ['DejaVu Sans', 'sans-serif']

# 戦略ごとの色
STRATEGY_COLORS: Dict[str, str] = {
    "stay": "#4C78A8",
    "switch": "#F58518",
}


def create_win_rate_chart(
    stats: Dict[str, Dict[str, float]],
    title: str = "Win Rate by Strategy",
    figsize: Tuple[float, float] = (6, 5)
) -> Figure:
    """
    戦略ごとの勝率の棒グラフ（95%信頼区間のエラーバー付き）を作成

    Args:
        stats: SimulationResults.compute_statistics() の戻り値
        title: グラフタイトル
        figsize: 図のサイズ

    Returns:
        Matplotlibのfigureオブジェクト
    """
    fig, ax = plt.subplots(figsize=figsize)

    names = list(stats.keys())
    rates = [stats[n]["win_rate"] for n in names]
    lower = [stats[n]["win_rate"] - stats[n]["ci_low"] for n in names]
    upper = [stats[n]["ci_high"] - stats[n]["win_rate"] for n in names]

    bars = ax.bar(
        names,
        rates,
        yerr=[lower, upper],
        capsize=8,
        edgecolor="black",
        alpha=0.8,
        color=[STRATEGY_COLORS.get(n, "#54A24B") for n in names],
    )
    for bar, rate in zip(bars, rates):
        ax.annotate(
            f"{rate:.3f}",
            (bar.get_x() + bar.get_width() / 2, rate),
            xytext=(0, 4),
            textcoords="offset points",
            ha="center",
        )

    # 理論値
    ax.axhline(1 / 3, color="gray", linestyle=":", linewidth=1)
    ax.axhline(2 / 3, color="gray", linestyle=":", linewidth=1)

    ax.set_ylim(0, 1)
    ax.set_ylabel("Win rate")
    ax.set_title(title)
    ax.grid(axis='y', alpha=0.3)
    fig.tight_layout()

    return fig


def create_convergence_chart(
    cumulative: pd.DataFrame,
    title: str = "Cumulative Win Rate",
    figsize: Tuple[float, float] = (10, 5)
) -> Figure:
    """
    累積勝率の推移グラフを作成

    Args:
        cumulative: SimulationResults.cumulative_win_rates() の戻り値
        title: グラフタイトル
        figsize: 図のサイズ

    Returns:
        Matplotlibのfigureオブジェクト
    """
    fig, ax = plt.subplots(figsize=figsize)

    for column in cumulative.columns:
        ax.plot(
            cumulative.index,
            cumulative[column],
            label=column,
            color=STRATEGY_COLORS.get(column),
            linewidth=1.5,
        )

    ax.axhline(1 / 3, color="gray", linestyle="--", linewidth=1, label="1/3")
    ax.axhline(2 / 3, color="gray", linestyle="-.", linewidth=1, label="2/3")

    ax.set_ylim(0, 1)
    ax.set_xlabel("Games played")
    ax.set_ylabel("Win rate")
    ax.set_title(title)
    ax.legend()
    ax.grid(alpha=0.3)
    fig.tight_layout()

    return fig


def format_number(value: float, decimals: int = 1) -> str:
    """
    数値をフォーマット

    Args:
        value: 数値
        decimals: 小数点以下桁数

    Returns:
        フォーマットされた文字列
    """
    if decimals == 0:
        return f"{value:,.0f}"
    else:
        return f"{value:,.{decimals}f}"
