"""Chat completion access for the AI game master.

Both collaborators (scenario generation and tactical batches) ask a chat
model for a JSON document. This module owns the client construction,
retry policy, error mapping, and JSON extraction so the collaborators
only deal with prompts and payload mapping.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from dungeonmind.core.config import AIProviderSettings, get_settings
from dungeonmind.core.exceptions import (
    AIConnectionError,
    AIRateLimitError,
    AIResponseError,
)
from dungeonmind.core.logging import get_logger


if TYPE_CHECKING:
    from openai import OpenAI
    from openai.types.chat import ChatCompletion

logger = get_logger(__name__)

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


def get_openrouter_client(settings: AIProviderSettings | None = None) -> "OpenAI":
    """Create an OpenAI client for the configured provider.

    Args:
        settings: AI provider settings. Defaults to the application settings.

    Returns:
        Configured OpenAI client.

    Raises:
        AIConnectionError: If no API key is configured or openai is missing.
    """
    settings = settings or get_settings().ai
    api_key = settings.resolve_api_key()
    if not api_key:
        raise AIConnectionError(
            "API key not configured. Set DUNGEONMIND_OPENROUTER_API_KEY",
            provider=settings.default_provider,
        )

    try:
        from openai import OpenAI
    except ImportError as exc:
        raise AIConnectionError(
            "openai package not installed. Install with: pip install openai",
            provider=settings.default_provider,
        ) from exc

    if settings.default_provider == "openai":
        return OpenAI(api_key=api_key, timeout=settings.timeout_seconds)

    return OpenAI(
        api_key=api_key,
        base_url=OPENROUTER_BASE_URL,
        timeout=settings.timeout_seconds,
        default_headers={
            "HTTP-Referer": "https://github.com/dungeonmind",
            "X-Title": "DungeonMind",
        },
    )


def parse_json_payload(response: str) -> Any:
    """Parse JSON from model output, tolerating markdown code fences.

    Args:
        response: Raw response text.

    Returns:
        The decoded JSON value.

    Raises:
        AIResponseError: If the text is not valid JSON.
    """
    text = response.strip()
    if text.startswith("```"):
        lines = text.split("\n")
        if lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        text = "\n".join(lines)

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise AIResponseError(
            f"Failed to parse JSON from model response: {exc}",
            details={"response_preview": text[:500]},
        ) from exc


class JSONChatModel:
    """Requests JSON documents from a chat model.

    Connection failures and rate limits are retried with exponential
    backoff; every other failure is raised immediately as an
    AIControlError subclass.

    Attributes:
        settings: AI provider settings.
    """

    def __init__(
        self,
        *,
        client: Any | None = None,
        settings: AIProviderSettings | None = None,
    ) -> None:
        """Initialize the chat model wrapper.

        Args:
            client: Preconfigured OpenAI-compatible client. Built lazily
                from settings when omitted.
            settings: AI provider settings.
        """
        self.settings = settings or get_settings().ai
        self._client = client

    @property
    def model(self) -> str:
        return self.settings.model

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = get_openrouter_client(self.settings)
        return self._client

    def _request(self, client: Any, system_prompt: str, user_message: str, temperature: float) -> str:
        """Make one chat completion call and return its text."""
        from openai import APIConnectionError, APIStatusError, RateLimitError

        provider = self.settings.default_provider
        try:
            response: ChatCompletion = client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_message},
                ],
                temperature=temperature,
                max_tokens=2048,
            )
        except RateLimitError as exc:
            raise AIRateLimitError(
                f"Rate limit exceeded: {exc}",
                model=self.model,
                provider=provider,
            ) from exc
        except APIConnectionError as exc:
            raise AIConnectionError(
                f"Failed to connect to AI provider: {exc}",
                model=self.model,
                provider=provider,
            ) from exc
        except APIStatusError as exc:
            raise AIResponseError(
                f"AI API error: {exc}",
                model=self.model,
                provider=provider,
                details={"status_code": exc.status_code},
            ) from exc
        except Exception as exc:
            raise AIResponseError(
                f"AI request failed: {exc}",
                model=self.model,
                provider=provider,
            ) from exc

        text = response.choices[0].message.content if response.choices else None
        if not text:
            raise AIResponseError("No text returned from AI", model=self.model, provider=provider)

        logger.debug("Chat response received", model=self.model, response_length=len(text))
        return text

    def complete_json(
        self,
        system_prompt: str,
        user_message: str,
        *,
        temperature: float,
    ) -> Any:
        """Ask the model for a JSON document.

        Args:
            system_prompt: System instruction.
            user_message: User turn content.
            temperature: Sampling temperature.

        Returns:
            The decoded JSON value.

        Raises:
            AIControlError: If the call fails after retries or the reply is not JSON.
        """
        client = self._get_client()
        retrying = Retrying(
            retry=retry_if_exception_type((AIConnectionError, AIRateLimitError)),
            stop=stop_after_attempt(self.settings.max_retries + 1),
            wait=wait_exponential(multiplier=1, min=2, max=10),
            reraise=True,
        )
        text = retrying(self._request, client, system_prompt, user_message, temperature)
        return parse_json_payload(text)


__all__ = [
    "OPENROUTER_BASE_URL",
    "get_openrouter_client",
    "parse_json_payload",
    "JSONChatModel",
]
