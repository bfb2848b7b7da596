"""DungeonMind Theme - Dark Dungeon Aesthetic.

Palette, CSS, and small HTML renderers shared by the board, the unit
roster, and the adventure log.
"""

from __future__ import annotations

import html

import streamlit as st

from dungeonmind.models import LogCategory, LogEvent


# =============================================================================
# Color Palette
# =============================================================================


class Colors:
    """Dark fantasy palette with readable contrast."""

    CRIMSON = "#DC2626"
    AMBER = "#D97706"
    EMERALD = "#10B981"
    SKY = "#3B82F6"

    BG_DARK = "#0F0F0F"
    BG_CARD = "#1A1A1A"
    BG_CELL = "#1F2937"

    TEXT_PRIMARY = "#FAFAFA"
    TEXT_SECONDARY = "#A1A1A1"
    TEXT_MUTED = "#737373"

    BORDER = "#333333"

    HP_HEALTHY = "#22C55E"
    HP_WOUNDED = "#F59E0B"
    HP_CRITICAL = "#EF4444"


LOG_COLORS: dict[LogCategory, str] = {
    LogCategory.INFO: Colors.TEXT_SECONDARY,
    LogCategory.COMBAT: Colors.CRIMSON,
    LogCategory.AI: Colors.EMERALD,
}


# =============================================================================
# Main CSS
# =============================================================================


THEME_CSS = """
<style>
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
    .stDeployButton {display: none;}

    .main .block-container {
        padding: 1.5rem 2rem;
        max-width: 1300px;
    }

    /* Board cells */
    div[data-testid="stHorizontalBlock"] button {
        min-height: 3rem;
        font-size: 1.5rem;
        padding: 0;
    }

    .unit-card {
        background: #1A1A1A;
        border: 1px solid #333333;
        border-radius: 6px;
        padding: 0.5rem 0.75rem;
        margin-bottom: 0.5rem;
    }
    .unit-card.hero { border-left: 4px solid #3B82F6; }
    .unit-card.enemy { border-left: 4px solid #DC2626; }

    .hp-bar {
        background: #333333;
        border-radius: 4px;
        height: 8px;
        overflow: hidden;
        margin-top: 4px;
    }
    .hp-fill { height: 100%; }
    .hp-fill.healthy { background: #22C55E; }
    .hp-fill.wounded { background: #F59E0B; }
    .hp-fill.critical { background: #EF4444; }

    .log-entry {
        font-family: monospace;
        font-size: 0.85rem;
        margin: 2px 0;
    }
    .log-turn { color: #737373; margin-right: 6px; }

    .turn-banner {
        text-align: center;
        font-size: 1.1rem;
        font-weight: 600;
        padding: 0.5rem;
        border-radius: 6px;
        background: #1A1A1A;
        border: 1px solid #333333;
    }
</style>
"""


def apply_theme() -> None:
    """Apply the DungeonMind theme to the current page."""
    st.markdown(THEME_CSS, unsafe_allow_html=True)


# =============================================================================
# Renderers
# =============================================================================


def hp_level(current: int, maximum: int) -> str:
    """Classify remaining HP as healthy, wounded, or critical."""
    pct = (current / maximum * 100) if maximum > 0 else 0
    if pct > 50:
        return "healthy"
    return "wounded" if pct > 25 else "critical"


def render_hp_bar(current: int, maximum: int) -> str:
    """Build an HP bar as HTML."""
    pct = (current / maximum * 100) if maximum > 0 else 0
    return (
        f'<div class="hp-bar"><div class="hp-fill {hp_level(current, maximum)}" '
        f'style="width: {pct:.0f}%;"></div></div>'
    )


def render_log_entry(event: LogEvent) -> str:
    """Build one adventure log line as HTML, colored by category."""
    color = LOG_COLORS.get(event.category, Colors.TEXT_PRIMARY)
    return (
        f'<div class="log-entry"><span class="log-turn">[T{event.turn}]</span>'
        f'<span style="color: {color};">{html.escape(event.message)}</span></div>'
    )


__all__ = [
    "Colors",
    "LOG_COLORS",
    "THEME_CSS",
    "apply_theme",
    "hp_level",
    "render_hp_bar",
    "render_log_entry",
]
