"""Reusable UI components for the Streamlit interface.

Components read the TurnController's projection and route button presses
back into it; none of them touch the GameState directly.
"""

from __future__ import annotations

import html
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import streamlit as st

from dungeonmind.core.constants import GRID_SIZE
from dungeonmind.core.logging import get_logger
from dungeonmind.models import Entity, Position, Side
from dungeonmind.ui.theme import render_hp_bar, render_log_entry


if TYPE_CHECKING:
    from dungeonmind.engine import TurnController
    from dungeonmind.models import LogEvent

logger = get_logger(__name__)

EMPTY_CELL = "·"


def cell_label(entity: Entity | None) -> str:
    """Glyph shown on a board cell."""
    return entity.emoji if entity is not None else EMPTY_CELL


def cell_help(entity: Entity | None, position: Position) -> str:
    """Tooltip shown on a board cell."""
    if entity is None:
        return f"Empty {position}"
    return f"{entity.name} ({entity.side}) HP {entity.hp}/{entity.max_hp} {position}"


class BaseComponent(ABC):
    """Abstract base class for UI components."""

    @abstractmethod
    def render(self) -> None:
        """Render the component."""
        raise NotImplementedError("Subclasses must implement render")


class BoardGrid(BaseComponent):
    """The 10x10 battlefield as a grid of buttons.

    Clicks are forwarded to ``TurnController.click_tile``; cells are
    disabled whenever the controller is not waiting on the player.
    """

    def __init__(self, controller: TurnController) -> None:
        self.controller = controller

    def render(self) -> None:
        roster = self.controller.state.roster
        selected = self.controller.selected_id
        interactive = self.controller.awaiting_hero_input

        for y in range(GRID_SIZE):
            columns = st.columns(GRID_SIZE, gap="small")
            for x, column in enumerate(columns):
                position = Position(x=x, y=y)
                entity = roster.at(position)
                with column:
                    st.button(
                        cell_label(entity),
                        key=f"cell_{x}_{y}",
                        help=cell_help(entity, position),
                        type="primary" if entity is not None and entity.id == selected else "secondary",
                        disabled=not interactive,
                        on_click=self.controller.click_tile,
                        args=(position,),
                        use_container_width=True,
                    )


class UnitRoster(BaseComponent):
    """Living units of one side with HP bars."""

    def __init__(self, entities: tuple[Entity, ...], side: Side) -> None:
        self.entities = entities
        self.side = side

    def render(self) -> None:
        title = "🛡️ Heroes" if self.side is Side.HERO else "💀 Enemies"
        st.markdown(f"#### {title}")
        if not self.entities:
            st.caption("None standing.")
            return

        for entity in self.entities:
            st.markdown(
                f'<div class="unit-card {self.side}">'
                f"{entity.emoji} <strong>{html.escape(entity.name)}</strong> "
                f'<span style="color: #A1A1A1;">{entity.entity_class} · {entity.hp}/{entity.max_hp}</span>'
                f"{render_hp_bar(entity.hp, entity.max_hp)}"
                "</div>",
                unsafe_allow_html=True,
            )


class AdventureLog(BaseComponent):
    """Adventure log, newest entries first."""

    def __init__(self, events: tuple[LogEvent, ...], *, limit: int = 100) -> None:
        self.events = events
        self.limit = limit

    def render(self) -> None:
        st.markdown("#### 📜 Adventure Log")
        recent = self.events[-self.limit :][::-1]
        with st.container(height=420):
            if not recent:
                st.caption("Nothing has happened yet.")
            for event in recent:
                st.markdown(render_log_entry(event), unsafe_allow_html=True)


class ControlPanel(BaseComponent):
    """Sidebar controls: theme, new scenario, auto-heroes, end turn."""

    def __init__(self, controller: TurnController, *, default_theme: str) -> None:
        self.controller = controller
        self.default_theme = default_theme

    def render(self) -> None:
        controller = self.controller
        with st.sidebar:
            st.markdown("### ⚔️ Encounter")
            theme = st.text_input("Theme", value=self.default_theme, key="scenario_theme")
            if st.button(
                "🎲 New Scenario",
                type="primary",
                disabled=controller.is_busy,
                use_container_width=True,
            ):
                with st.spinner("The Dungeon Master is preparing the encounter..."):
                    controller.new_scenario(theme.strip() or self.default_theme)
                st.rerun()

            st.divider()
            auto = st.toggle("🤖 AI controls heroes", value=controller.auto_heroes)
            if auto != controller.auto_heroes:
                controller.set_auto_heroes(auto)
                st.rerun()

            st.button(
                "⏭️ End Hero Turn",
                disabled=not controller.awaiting_hero_input,
                on_click=controller.end_hero_turn,
                use_container_width=True,
            )

            if controller.awaiting_hero_input:
                if controller.selected_id:
                    st.caption("Click a free cell to move or an adjacent enemy to attack.")
                else:
                    st.caption("Click a hero to select it.")


def render_turn_banner(controller: TurnController) -> None:
    """Show whose turn it is, or the match result."""
    state = controller.state
    if not state.entities:
        text = "Start a new scenario to begin."
    elif state.is_game_over:
        text = "🏆 Victory!" if state.winner is Side.HERO else "☠️ Defeat"
    else:
        who = "Heroes" if state.active_side is Side.HERO else "Enemies"
        mode = "AI" if controller.is_ai_turn else "Your move"
        text = f"Turn {state.turn} · {who} · {mode}"
    st.markdown(f'<div class="turn-banner">{text}</div>', unsafe_allow_html=True)


__all__ = [
    "EMPTY_CELL",
    "cell_label",
    "cell_help",
    "BaseComponent",
    "BoardGrid",
    "UnitRoster",
    "AdventureLog",
    "ControlPanel",
    "render_turn_banner",
]
