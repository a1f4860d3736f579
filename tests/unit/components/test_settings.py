import pytest

from tubesight.components.configuration.settings import MAX_VIDEO_BYTES, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY", "CHAT_MODEL_NAME"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.gemini_api_key == ""
        assert not settings.has_api_key
        assert settings.analysis_model_name == "gemini-2.5-flash"
        assert settings.image_model_name == "gemini-2.5-flash-image"
        assert settings.analysis_thinking_budget == 10240
        assert settings.chat_thinking_budget == 8192
        assert settings.planning_thinking_budget == 12288
        assert settings.max_video_bytes == MAX_VIDEO_BYTES == 150 * 1024 * 1024
        assert settings.tracing_enabled is False

    @pytest.mark.parametrize("env_name", ["GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY"])
    def test_api_key_aliases(self, monkeypatch, env_name: str) -> None:
        monkeypatch.setenv(env_name, "from-env")

        settings = Settings(_env_file=None)

        assert settings.gemini_api_key == "from-env"
        assert settings.has_api_key

    def test_model_override_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("CHAT_MODEL_NAME", "gemini-2.5-pro")

        assert Settings(_env_file=None).chat_model_name == "gemini-2.5-pro"

    def test_blank_key_is_not_configured(self) -> None:
        assert not Settings(_env_file=None, gemini_api_key="   ").has_api_key
