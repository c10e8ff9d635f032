"""
Display component for Streamlit UI
"""

import streamlit as st
import matplotlib.pyplot as plt

from monty_core.config import SimulationConfig
from monty_core.simulation import SimulationEngine
from app.utils import create_win_rate_chart, create_convergence_chart, format_number


def render_results(config: SimulationConfig) -> None:
    """
    シミュレーションを実行し結果を表示

    Args:
        config: シミュレーション設定
    """
    # 実行条件サマリ
    st.subheader("Execution Settings")
    col1, col2 = st.columns(2)
    col1.metric("Games", f"{config.n_games:,}")
    col2.metric(
        "Random Seed",
        config.random_seed if config.random_seed is not None else "None"
    )

    st.markdown("---")

    # プログレスバー
    progress_bar = st.progress(0)
    status_text = st.empty()
    update_every = max(1, config.n_games // 100)

    def progress_callback(current: int, total: int) -> None:
        if current != total and current % update_every:
            return
        progress = current / total if total > 0 else 0
        progress_bar.progress(progress)
        status_text.text(f"Running... {current}/{total} games completed")

    # シミュレーション実行
    try:
        engine = SimulationEngine(config, progress_callback=progress_callback)
        results = engine.run()
    except Exception as e:
        st.error(f"Simulation failed: {e}")
        return

    status_text.text("Completed!")
    progress_bar.progress(1.0)

    st.markdown("---")

    # 統計量
    stats = results.compute_statistics()

    st.subheader("Results Summary")
    for name, label in (("stay", "Stay"), ("switch", "Switch")):
        s = stats[name]
        st.markdown(f"**{label}**")
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Wins", format_number(s["wins"], 0))
        col2.metric("Losses", format_number(s["losses"], 0))
        col3.metric("Win Rate", format_number(s["win_rate"], 3))
        col4.metric("95% CI", f"{s['ci_low']:.3f} - {s['ci_high']:.3f}")

    best = results.best_strategy()
    st.info(f"Best strategy: **{best.value}** (win rate {results.win_rate(best):.3f})")

    # 割合表
    st.markdown("**Outcome Proportions** (rows sum to 1)")
    st.dataframe(
        results.proportion_table(config.decimals),
        use_container_width=True
    )

    st.markdown("---")

    # グラフ（左右に並べて表示）
    st.subheader("Charts")
    col_left, col_right = st.columns(2)

    with col_left:
        fig = create_win_rate_chart(stats)
        st.pyplot(fig)
        plt.close(fig)

    with col_right:
        fig_conv = create_convergence_chart(results.cumulative_win_rates())
        st.pyplot(fig_conv)
        plt.close(fig_conv)

    st.markdown("---")

    # ラウンド別結果テーブル
    st.subheader("Round Results")

    df = results.to_wide_dataframe()
    display_df = df.rename(columns={
        "round_id": "Round",
        "prize_door": "Car Door",
        "first_pick": "First Pick",
        "opened_door": "Opened Door",
        "stay_door": "Stay Door",
        "switch_door": "Switch Door",
        "stay": "Stay",
        "switch": "Switch",
    })

    st.dataframe(display_df, use_container_width=True, hide_index=True)

    # 結果の要約テキスト
    st.download_button(
        label="Download Summary (TXT)",
        data=results.get_summary_text(),
        file_name="monty_hall_summary.txt",
        mime="text/plain",
        use_container_width=True
    )
