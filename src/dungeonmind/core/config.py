"""Configuration management for DungeonMind.

Centralized configuration using pydantic-settings, supporting environment
variables, .env files, and runtime overrides. API keys are held as
SecretStr.

Example:
    >>> from dungeonmind.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.flavor_text_chance
    0.3

Environment Variables:
    DUNGEONMIND_OPENROUTER_API_KEY: OpenRouter API key
    DUNGEONMIND_OPENAI_API_KEY: OpenAI API key
    DUNGEONMIND_MODEL: Model identifier used for generation and tactics
    DUNGEONMIND_GAME_PACING_DELAY_SECONDS: Delay between applied actions
    DUNGEONMIND_GAME_FLAVOR_TEXT_CHANCE: Probability of logging flavor text
    DUNGEONMIND_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dungeonmind.core.constants import DEFAULT_MANUAL_MOVE_RANGE
from dungeonmind.core.exceptions import ConfigurationError


class AIProviderSettings(BaseSettings):
    """Configuration for AI provider connections.

    Attributes:
        openrouter_api_key: OpenRouter API key (primary).
        openai_api_key: OpenAI API key, also accepted by OpenRouter.
        default_provider: Which endpoint the client talks to.
        model: Model identifier for scenario generation and tactics.
        scenario_temperature: Sampling temperature for roster generation.
        tactics_temperature: Sampling temperature for action batches.
        max_retries: Maximum number of API retry attempts.
        timeout_seconds: API request timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEONMIND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openrouter_api_key: SecretStr | None = Field(
        default=None,
        description="OpenRouter API key (primary)",
    )
    openai_api_key: SecretStr | None = Field(
        default=None,
        description="OpenAI API key",
    )
    default_provider: Literal["openrouter", "openai"] = Field(
        default="openrouter",
        description="Default AI provider to use",
    )
    model: str = Field(
        default="google/gemini-2.5-flash",
        description="Model used for scenarios and tactics",
    )
    scenario_temperature: float = Field(
        default=0.9,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for scenario generation",
    )
    tactics_temperature: float = Field(
        default=0.4,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for tactical batches",
    )
    max_retries: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Maximum API retry attempts",
    )
    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        le=300,
        description="API request timeout",
    )

    @model_validator(mode="after")
    def validate_api_key_for_provider(self) -> "AIProviderSettings":
        """Ensure the default provider has a valid API key configured.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If the OpenAI provider is selected without a key.
        """
        # A missing OpenRouter key is tolerated: collaborators fall back locally.
        if self.default_provider == "openai" and not self.openai_api_key:
            raise ConfigurationError(
                "OpenAI is set as default provider but OPENAI_API_KEY is not configured",
                config_key="openai_api_key",
            )
        return self

    def resolve_api_key(self) -> str | None:
        """Return the plain API key for the configured provider, if any."""
        if self.default_provider == "openai":
            key = self.openai_api_key
        else:
            key = self.openrouter_api_key or self.openai_api_key
        return key.get_secret_value() if key else None


class GameSettings(BaseSettings):
    """Configuration for match behavior.

    Attributes:
        pacing_delay_seconds: Delay between applied actions in a batch.
        flavor_text_chance: Probability that flavor text reaches the log.
        auto_heroes: Whether the hero side is driven by the AI by default.
        max_sub_turns: Cap on side turns run by a single auto-play loop.
        manual_move_range: Manhattan range of a manual move.
        default_theme: Theme offered for a new scenario.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEONMIND_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    pacing_delay_seconds: float = Field(
        default=0.8,
        ge=0.0,
        le=10.0,
        description="Delay between applied actions",
    )
    flavor_text_chance: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Probability of logging an action's flavor text",
    )
    auto_heroes: bool = Field(
        default=False,
        description="Let the AI control the hero party",
    )
    max_sub_turns: int = Field(
        default=200,
        ge=1,
        description="Maximum side turns per auto-play run",
    )
    manual_move_range: int = Field(
        default=DEFAULT_MANUAL_MOVE_RANGE,
        ge=1,
        le=18,
        description="Manhattan range for manual moves",
    )
    default_theme: str = Field(
        default="Goblin Ambush",
        description="Default scenario theme",
    )


class UISettings(BaseSettings):
    """Configuration for the Streamlit UI.

    Attributes:
        page_title: Browser page title.
        page_icon: Browser page icon.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEONMIND_UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    page_title: str = Field(
        default="DungeonMind",
        description="Browser page title",
    )
    page_icon: str = Field(
        default="⚔️",
        description="Browser page icon",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        ai: AI provider settings.
        game: Match settings.
        ui: UI settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEONMIND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="DungeonMind",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    ai: AIProviderSettings = Field(default_factory=AIProviderSettings)
    game: GameSettings = Field(default_factory=GameSettings)
    ui: UISettings = Field(default_factory=UISettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If required configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "AIProviderSettings",
    "GameSettings",
    "UISettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
