from unittest.mock import MagicMock, patch

import pytest

from tubesight.components.genai.genai_client_provider import (
    MISSING_API_KEY_MESSAGE,
    GenAIClientProvider,
)
from tubesight.entities.errors import ConfigurationError


class TestGenAIClientProvider:
    @pytest.mark.parametrize("api_key", [None, "", "   "])
    def test_missing_key_is_recorded_at_construction(self, api_key) -> None:
        with patch(
            "tubesight.components.genai.genai_client_provider.genai.Client"
        ) as MockClient:
            provider = GenAIClientProvider(api_key=api_key)

            assert not provider.is_configured
            assert isinstance(provider.configuration_error, ConfigurationError)

            with pytest.raises(ConfigurationError) as exc_info:
                provider.get_client()

        assert str(exc_info.value) == MISSING_API_KEY_MESSAGE
        MockClient.assert_not_called()

    def test_client_created_lazily_and_cached(self) -> None:
        with patch(
            "tubesight.components.genai.genai_client_provider.genai.Client"
        ) as MockClient:
            provider = GenAIClientProvider(api_key="secret")
            MockClient.assert_not_called()

            first = provider.get_client()
            second = provider.get_client()

        MockClient.assert_called_once_with(api_key="secret")
        assert first is second

    def test_injected_client_is_used(self) -> None:
        fake_client = MagicMock()

        provider = GenAIClientProvider(api_key="secret", client=fake_client)

        assert provider.get_client() is fake_client

    def test_injected_client_still_requires_key(self) -> None:
        provider = GenAIClientProvider(api_key="", client=MagicMock())

        with pytest.raises(ConfigurationError):
            provider.get_client()
