"""
Application settings loaded from the environment and an optional ``.env`` file.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MAX_VIDEO_BYTES: int = 150 * 1024 * 1024


class Settings(BaseSettings):
    """TubeSight configuration."""

    # Provider credential (sensitive)
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY"),
        description="API key for the Gemini API",
    )

    # Models
    analysis_model_name: str = Field(default="gemini-2.5-flash")
    chat_model_name: str = Field(default="gemini-2.5-flash")
    planning_model_name: str = Field(default="gemini-2.5-flash")
    image_model_name: str = Field(default="gemini-2.5-flash-image")

    # Thinking budgets (tokens)
    analysis_thinking_budget: int = Field(default=10240, ge=0)
    chat_thinking_budget: int = Field(default=8192, ge=0)
    planning_thinking_budget: int = Field(default=12288, ge=0)

    max_video_bytes: int = Field(
        default=MAX_VIDEO_BYTES,
        ge=1,
        description="Largest video file accepted before conversion",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Tracing (Langfuse / OpenTelemetry)
    tracing_enabled: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key.strip())
