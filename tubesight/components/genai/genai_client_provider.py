"""
Holds the Google Gen AI client shared by the TubeSight services.

The credential is checked once, when the provider is built. A missing key does
not raise at construction time: the resulting ``ConfigurationError`` is kept on
the provider and raised by ``get_client()``, so every operation fails before it
reaches the network.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from google import genai

from tubesight.entities.errors import ConfigurationError

if TYPE_CHECKING:
    from google.genai import Client


MISSING_API_KEY_MESSAGE = "API Key missing."


class GenAIClientProvider:
    def __init__(
        self,
        api_key: str | None,
        logger: logging.Logger | None = None,
        client: Any | None = None,
    ) -> None:
        """
        Args:
            api_key: Gemini API key. Empty or None leaves the provider unconfigured.
            logger: Logger instance
            client: Optional pre-built client (e.g. a test double). Still requires
                a non-empty api_key.
        """
        self.logger = logger or logging.getLogger("GenAIClientProvider")
        self._api_key = (api_key or "").strip()
        self._client: Client | Any | None = client

        self.configuration_error: ConfigurationError | None = None
        if not self._api_key:
            self.configuration_error = ConfigurationError(MISSING_API_KEY_MESSAGE)
            self.logger.warning("Gemini API key is not configured")

    @property
    def is_configured(self) -> bool:
        return self.configuration_error is None

    def get_client(self) -> Client:
        """
        Return the Gen AI client, creating it on first use.

        Raises:
            ConfigurationError: If no API key was provided.
        """
        if self.configuration_error is not None:
            raise ConfigurationError(str(self.configuration_error))

        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
            self.logger.info("Initialized Gemini API client")
        return self._client
