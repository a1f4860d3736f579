import os
import sys
from threading import Lock
from typing import Any, TypeVar, cast

from dotenv import load_dotenv
from openinference.instrumentation.google_genai import GoogleGenAIInstrumentor

from tubesight.components.configuration.settings import Settings
from tubesight.components.genai.genai_client_provider import GenAIClientProvider
from tubesight.components.logger.logger import Logger
from tubesight.components.playback.seek_notifier import SeekNotifier


load_dotenv()


def _is_test_environment() -> bool:
    """
    Check if we are running in a test environment.

    Returns:
        True if running under pytest or if TESTING env var is set, False otherwise.
    """
    if any("pytest" in arg for arg in sys.argv):
        return True

    if os.getenv("TESTING", "").lower() in ("true", "1", "yes"):
        return True

    return False


def _validate_otel_env_vars() -> None:
    """
    Validate OpenTelemetry/Langfuse environment variables for instrumentation.

    Two configurations are accepted:

    1.  **Langfuse Native Integration:** `LANGFUSE_PUBLIC_KEY`, `LANGFUSE_SECRET_KEY`
        and `LANGFUSE_BASE_URL` are all set.

    2.  **Manual OpenTelemetry Configuration:** otherwise `OTEL_EXPORTER_OTLP_ENDPOINT`
        and `OTEL_EXPORTER_OTLP_HEADERS` must both be set.

    Raises:
        RuntimeError: If neither configuration is complete.
    """
    otel_endpoint: str = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "").strip()
    otel_headers: str = os.getenv("OTEL_EXPORTER_OTLP_HEADERS", "").strip()

    langfuse_public_key: str = os.getenv("LANGFUSE_PUBLIC_KEY", "").strip()
    langfuse_secret_key: str = os.getenv("LANGFUSE_SECRET_KEY", "").strip()
    langfuse_base_url: str = os.getenv("LANGFUSE_BASE_URL", "").strip()

    if langfuse_public_key and langfuse_secret_key and langfuse_base_url:
        return

    if not otel_endpoint:
        raise RuntimeError(
            "OTEL_EXPORTER_OTLP_ENDPOINT environment variable is not set or is empty. "
            "Please set the OTEL_EXPORTER_OTLP_ENDPOINT environment variable with a valid OTLP endpoint URL."
        )

    if not otel_headers:
        raise RuntimeError(
            "OTEL_EXPORTER_OTLP_HEADERS environment variable is not set or is empty, "
            "and LANGFUSE_PUBLIC_KEY/LANGFUSE_SECRET_KEY/LANGFUSE_BASE_URL are not all available. "
            "Please set OTEL_EXPORTER_OTLP_HEADERS (e.g., 'Authorization=Basic <base64_credentials>') "
            "or provide the Langfuse variables."
        )


def _setup_tracing(settings: Settings) -> None:
    if not settings.tracing_enabled or _is_test_environment():
        return

    _validate_otel_env_vars()
    GoogleGenAIInstrumentor().instrument()


T = TypeVar("T")


class ComponentsMeta(type):
    _instances: dict[tuple[type, str], "Components"] = {}
    _lock: Lock = Lock()

    def __call__(cls, *args, **kwargs):
        env = args[0] if args else kwargs.get("env")
        if env is None:
            raise ValueError("Environment must be provided")

        settings = args[1] if len(args) > 1 else kwargs.get("settings")
        env_key = str(env)
        key = (cls, env_key)
        with cls._lock:
            if key not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[key] = instance
            elif (
                settings is not None
                and settings != cls._instances[key].get_settings()
            ):
                raise ValueError(
                    f"Components for {env_key!r} already exist with different settings"
                )
        return cls._instances[key]

    def reset(cls) -> None:
        """Forget cached containers (used by tests)."""
        with cls._lock:
            cls._instances.clear()


class Components(metaclass=ComponentsMeta):
    def __init__(self, env: str, settings: Settings | None = None) -> None:
        self.__env: str = env
        self.__settings: Settings = settings or Settings()
        self.__components: dict[type[Any], Any] = self.__bootstrap_components()

    def __bootstrap_components(self) -> dict[type[Any], Any]:
        if self.__env in {"development", "staging", "production"}:
            return self.__get_components()

        raise ValueError(f"Invalid environment: {self.__env}")

    def __get_components(self) -> dict[type[Any], Any]:
        settings = self.__settings

        logger = Logger(log_format=settings.log_format, log_level=settings.log_level)
        _setup_tracing(settings)

        client_provider = GenAIClientProvider(
            api_key=settings.gemini_api_key,
            logger=logger.get_logger("GenAIClientProvider"),
        )

        components: dict[type[Any], Any] = {
            Settings: settings,
            Logger: logger,
            GenAIClientProvider: client_provider,
            SeekNotifier: SeekNotifier(logger=logger.get_logger("SeekNotifier")),
        }

        return components

    def get_component(self, component_name: type[T]) -> T:
        if component_name not in self.__components:
            raise ValueError(f"Component {component_name} not found")

        return cast(T, self.__components[component_name])

    def get_env(self) -> str:
        return self.__env

    def get_settings(self) -> Settings:
        return self.__settings
