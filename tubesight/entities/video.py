from enum import StrEnum
from typing import Literal, TypedDict, cast


class VideoPayload(TypedDict):
    """Video file content encoded as base64 for transport."""

    base64: str
    file_name: str | None
    mime_type: str
    size_bytes: int


class AnalysisMode(StrEnum):
    SUMMARY = "summary"
    KEY_TAKEAWAYS = "key_takeaways"
    SENTIMENT = "sentiment"
    TECHNICAL = "technical"
    QA = "qa"


Language = Literal["fr", "en"]

LANGUAGES: tuple[str, ...] = ("fr", "en")


def validate_language(language: str) -> Language:
    if language not in LANGUAGES:
        raise ValueError(
            f"Unsupported language: {language!r} (expected one of {', '.join(LANGUAGES)})"
        )
    return cast(Language, language)
