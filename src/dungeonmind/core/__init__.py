"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DungeonMindError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        GameEngineError and subclasses: Engine misuse.
        AIControlError and subclasses: Model interaction failures.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from dungeonmind.core.config import (
    AIProviderSettings,
    GameSettings,
    Settings,
    UISettings,
    clear_settings_cache,
    get_settings,
)
from dungeonmind.core.exceptions import (
    AIConnectionError,
    AIControlError,
    AIRateLimitError,
    AIResponseError,
    ConfigurationError,
    DiceRollError,
    DungeonMindError,
    GameEngineError,
    InvalidGameStateError,
    TurnManagementError,
)
from dungeonmind.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "DungeonMindError",
    "ConfigurationError",
    "GameEngineError",
    "InvalidGameStateError",
    "DiceRollError",
    "TurnManagementError",
    "AIControlError",
    "AIConnectionError",
    "AIResponseError",
    "AIRateLimitError",
    # Configuration
    "Settings",
    "AIProviderSettings",
    "GameSettings",
    "UISettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
