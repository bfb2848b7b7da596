"""DungeonMind - Main Application Entry Point.

Run with:
    streamlit run src/dungeonmind/ui/app.py

The TurnController lives in ``st.session_state`` so the match survives
Streamlit reruns. While an AI side is active the page runs one side turn
per rerun, which keeps the board and log updating between batches.
"""

from __future__ import annotations

import streamlit as st

from dungeonmind.core.config import get_settings
from dungeonmind.core.logging import configure_logging, get_logger
from dungeonmind.dm import ScenarioGenerator, TacticalAdvisor
from dungeonmind.engine import TurnController
from dungeonmind.models import Side
from dungeonmind.ui.components import (
    AdventureLog,
    BoardGrid,
    ControlPanel,
    UnitRoster,
    render_turn_banner,
)
from dungeonmind.ui.theme import apply_theme


logger = get_logger(__name__)

CONTROLLER_KEY = "turn_controller"


def get_controller() -> TurnController:
    """Get the session's TurnController, creating it on first access."""
    if CONTROLLER_KEY not in st.session_state:
        settings = get_settings()
        configure_logging(level=settings.log_level)
        st.session_state[CONTROLLER_KEY] = TurnController(
            TacticalAdvisor(settings=settings.ai),
            ScenarioGenerator(settings=settings.ai),
            settings=settings.game,
        )
        logger.info("Session controller created")
    return st.session_state[CONTROLLER_KEY]


# =============================================================================
# Main Page
# =============================================================================


def main() -> None:
    """Render the battlefield and drive AI turns."""
    settings = get_settings()
    st.set_page_config(
        page_title=settings.ui.page_title,
        page_icon=settings.ui.page_icon,
        layout="wide",
        initial_sidebar_state="expanded",
    )
    apply_theme()

    controller = get_controller()
    ControlPanel(controller, default_theme=settings.game.default_theme).render()

    st.markdown("## ⚔️ DungeonMind")
    render_turn_banner(controller)

    left, board, right = st.columns([1, 3, 2])
    roster = controller.state.roster
    with left:
        UnitRoster(roster.heroes(), Side.HERO).render()
        UnitRoster(roster.enemies(), Side.ENEMY).render()
    with board:
        BoardGrid(controller).render()
    with right:
        AdventureLog(controller.log).render()

    if controller.state.entities and controller.is_ai_turn and not controller.state.is_game_over:
        with st.spinner("The AI is plotting..."):
            report = controller.run_side_turn()
        if report is not None:
            st.rerun()


if __name__ == "__main__":
    main()
