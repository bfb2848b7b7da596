"""Streamlit user interface for DungeonMind.

Submodules:
    app: Main Streamlit application
    components: Board, roster, log, and control panel
    theme: Visual styling and HTML renderers

Usage:
    Run the application with:
        streamlit run src/dungeonmind/ui/app.py

    Or from an installed package:
        dungeonmind
"""

from __future__ import annotations


def run_app() -> None:
    """Launch the Streamlit application in a subprocess."""
    import subprocess
    import sys
    from pathlib import Path

    app_path = Path(__file__).parent / "app.py"
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)], check=False)


__all__ = [
    "run_app",
]
