import logging
import os
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from tubesight.bootstrap import components
from tubesight.bootstrap.bootstrapper import bootstrap_services
from tubesight.bootstrap.components import Components
from tubesight.components.configuration.settings import Settings
from tubesight.components.genai.genai_client_provider import GenAIClientProvider
from tubesight.components.logger.logger import Logger
from tubesight.components.playback.seek_notifier import SeekNotifier
from tubesight.entities.errors import ConfigurationError
from tubesight.services.AnalysisService.analysis_service import AnalysisService
from tubesight.services.ChatService.chat_service import ChatService
from tubesight.services.PresentationService.presentation_service import (
    PresentationService,
)


@pytest.fixture(autouse=True)
def reset_components() -> Iterator[None]:
    Components.reset()
    yield
    Components.reset()


@pytest.mark.unit
class TestComponentsOTELEnvVarsValidation:
    """Test suite for OpenTelemetry/Langfuse environment variables validation."""

    def test_otel_validation_raises_error_when_endpoint_not_set(self, monkeypatch):
        """Test that OTEL validation raises RuntimeError when OTEL_EXPORTER_OTLP_ENDPOINT is not set."""
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_ENDPOINT", raising=False)
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_HEADERS", raising=False)
        monkeypatch.delenv("LANGFUSE_PUBLIC_KEY", raising=False)
        monkeypatch.delenv("LANGFUSE_SECRET_KEY", raising=False)

        with pytest.raises(RuntimeError) as exc_info:
            components._validate_otel_env_vars()

        assert "OTEL_EXPORTER_OTLP_ENDPOINT" in str(exc_info.value)
        assert "not set or is empty" in str(exc_info.value)

    def test_otel_validation_raises_error_when_headers_not_set(self, monkeypatch):
        """Test that OTEL validation raises RuntimeError when headers are not set."""
        monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "https://example.com/otlp")
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_HEADERS", raising=False)
        monkeypatch.delenv("LANGFUSE_PUBLIC_KEY", raising=False)
        monkeypatch.delenv("LANGFUSE_SECRET_KEY", raising=False)

        with pytest.raises(RuntimeError) as exc_info:
            components._validate_otel_env_vars()

        assert "OTEL_EXPORTER_OTLP_HEADERS" in str(exc_info.value)

    def test_otel_validation_succeeds_with_direct_headers(self, monkeypatch):
        """Test that OTEL validation succeeds when headers are provided directly."""
        monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "https://example.com/otlp")
        monkeypatch.setenv("OTEL_EXPORTER_OTLP_HEADERS", "Authorization=Basic dGVzdA==")

        components._validate_otel_env_vars()

    def test_otel_validation_succeeds_with_langfuse_keys(self, monkeypatch):
        """Test that OTEL validation is skipped when Langfuse native variables are set."""
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_ENDPOINT", raising=False)
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_HEADERS", raising=False)
        monkeypatch.setenv("LANGFUSE_PUBLIC_KEY", "pk-test")
        monkeypatch.setenv("LANGFUSE_SECRET_KEY", "sk-test")
        monkeypatch.setenv("LANGFUSE_BASE_URL", "https://cloud.langfuse.com")

        components._validate_otel_env_vars()

        assert "OTEL_EXPORTER_OTLP_HEADERS" not in os.environ


@pytest.mark.unit
class TestTracingSetup:
    def test_tracing_disabled_skips_instrumentation(self):
        with patch.object(components, "GoogleGenAIInstrumentor") as MockInstrumentor:
            components._setup_tracing(Settings(tracing_enabled=False))

        MockInstrumentor.assert_not_called()

    def test_tracing_skipped_under_tests(self):
        with patch.object(components, "GoogleGenAIInstrumentor") as MockInstrumentor:
            components._setup_tracing(Settings(tracing_enabled=True))

        MockInstrumentor.assert_not_called()

    def test_tracing_enabled_instruments_sdk(self, monkeypatch):
        monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "https://example.com/otlp")
        monkeypatch.setenv("OTEL_EXPORTER_OTLP_HEADERS", "Authorization=Basic dGVzdA==")

        with (
            patch.object(components, "_is_test_environment", return_value=False),
            patch.object(components, "GoogleGenAIInstrumentor") as MockInstrumentor,
        ):
            components._setup_tracing(Settings(tracing_enabled=True))

        MockInstrumentor.return_value.instrument.assert_called_once()


@pytest.mark.unit
class TestComponents:
    def test_registers_components(self):
        settings = Settings(gemini_api_key="test-key")

        container = Components("development", settings)

        assert container.get_component(Settings) is settings
        assert isinstance(container.get_component(Logger), Logger)
        assert isinstance(container.get_component(SeekNotifier), SeekNotifier)
        provider = container.get_component(GenAIClientProvider)
        assert provider.is_configured

    def test_container_is_cached_per_environment(self):
        settings = Settings(gemini_api_key="a")
        first = Components("development", settings)

        assert Components("development") is first
        assert Components("development", Settings(gemini_api_key="a")) is first
        assert first.get_env() == "development"
        assert first.get_settings() is settings

    def test_cached_environment_rejects_different_settings(self):
        Components("development", Settings(gemini_api_key="a"))

        with pytest.raises(ValueError, match="different settings"):
            Components("development", Settings(gemini_api_key="b"))

    def test_other_environment_gets_its_own_settings(self):
        development = Components("development", Settings(gemini_api_key="a"))
        staging = Components("staging", Settings(gemini_api_key="b"))

        assert development is not staging
        assert staging.get_settings().gemini_api_key == "b"

    def test_invalid_environment(self):
        with pytest.raises(ValueError):
            Components("qa", Settings())

    def test_unknown_component(self):
        container = Components("development", Settings())

        with pytest.raises(ValueError):
            container.get_component(MagicMock)

    def test_missing_api_key_leaves_provider_unconfigured(self):
        container = Components("staging", Settings(gemini_api_key=""))

        provider = container.get_component(GenAIClientProvider)

        assert not provider.is_configured
        with pytest.raises(ConfigurationError):
            provider.get_client()


@pytest.mark.unit
class TestBootstrapServices:
    def test_bootstrap_builds_all_services(self):
        settings = Settings(
            gemini_api_key="test-key",
            chat_model_name="gemini-chat",
            image_model_name="gemini-image",
        )

        services = bootstrap_services(env="production", settings=settings)

        assert isinstance(services.analysis, AnalysisService)
        assert isinstance(services.chat, ChatService)
        assert isinstance(services.presentation, PresentationService)
        assert services.chat.model_name == "gemini-chat"
        assert services.presentation.image_model_name == "gemini-image"
        assert isinstance(services.analysis.logger, logging.Logger)

    def test_bootstrap_rejects_conflicting_settings(self):
        first = bootstrap_services(
            env="development",
            settings=Settings(gemini_api_key="test-key", chat_model_name="first"),
        )

        with pytest.raises(ValueError):
            bootstrap_services(
                env="development",
                settings=Settings(gemini_api_key="test-key", chat_model_name="second"),
            )

        again = bootstrap_services(env="development")
        assert first.chat.model_name == again.chat.model_name == "first"
