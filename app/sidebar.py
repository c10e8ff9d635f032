"""
Sidebar component for Streamlit UI
"""

from typing import Tuple
import streamlit as st

from monty_core.config import SimulationConfig


def render_sidebar() -> Tuple[SimulationConfig | None, bool]:
    """
    サイドバーをレンダリング

    Returns:
        (設定オブジェクト or None, 実行ボタンが押されたか)
    """
    st.sidebar.header("Simulation Settings")

    # ゲーム数
    n_games = st.sidebar.number_input(
        "Number of Games",
        min_value=1,
        max_value=1_000_000,
        value=100,
        step=100,
        help="Number of Monty Hall rounds to simulate"
    )

    # 割合表の表示桁数
    decimals = st.sidebar.selectbox(
        "Decimals in Proportion Table",
        options=[1, 2, 3, 4],
        index=1,
        help="Rounding of the stay/switch proportion table"
    )

    # Random seed（オプション）
    use_seed = st.sidebar.checkbox(
        "Use fixed random seed",
        value=False,
        help="Enable for reproducible results"
    )
    random_seed: int | None = None
    if use_seed:
        random_seed = st.sidebar.number_input(
            "Random Seed",
            min_value=0,
            max_value=2**31 - 1,
            value=42,
            step=1
        )

    st.sidebar.markdown("---")

    # 実行ボタン
    run_clicked = st.sidebar.button(
        "Run Simulation",
        type="primary",
        use_container_width=True
    )

    if run_clicked:
        try:
            config = SimulationConfig(
                n_games=int(n_games),
                random_seed=int(random_seed) if random_seed is not None else None,
                decimals=int(decimals),
            )
            return config, True
        except ValueError as e:
            st.sidebar.error(f"Configuration Error: {e}")
            return None, False

    return None, False
