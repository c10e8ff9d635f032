"""
Streamlit application entry point for Monty Hall Simulator
"""

import streamlit as st

from app.sidebar import render_sidebar
from app.display import render_results


def main() -> None:
    """Streamlitアプリのエントリーポイント"""

    # ページ設定
    st.set_page_config(
        page_title="Monty Hall Simulator",
        page_icon=":door:",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    # タイトル
    st.title("Monty Hall Simulator")
    st.markdown(
        "**Monte Carlo comparison of the stay and switch strategies**"
    )

    st.markdown("---")

    # サイドバーでパラメータ入力
    config, run_clicked = render_sidebar()

    # メイン領域
    if run_clicked:
        if config is not None:
            render_results(config)
        else:
            st.error(
                "Configuration error. Please check the sidebar settings."
            )
    else:
        # 初期表示
        st.info(
            "Configure simulation parameters in the sidebar and click "
            "**Run Simulation** to start."
        )

        with st.expander("How to Use", expanded=True):
            st.markdown("""
            ### The Game

            1. A car is hidden behind one of three doors, goats behind the other two.
            2. The contestant picks a door.
            3. The host, who knows where the car is, opens another door with a goat.
            4. The contestant either **stays** with the first pick or **switches**
               to the remaining closed door.

            ### Simulation

            Each game is played once and both strategies are scored on the
            same doors, the same first pick and the same opened door.

            ### Metrics

            - **Win Rate**: share of games won by each strategy
            - **95% CI**: exact binomial confidence interval of the win rate
            - **Outcome Proportions**: WIN / LOSE shares per strategy
            """)


if __name__ == "__main__":
    main()
