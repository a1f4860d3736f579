"""Request settings and helpers shared by the Gemini-backed services."""

from __future__ import annotations

import base64
import binascii

from google.genai import errors, types

from tubesight.entities.errors import InvalidVideoPayloadError
from tubesight.entities.video import VideoPayload


SAFETY_SETTINGS: list[types.SafetySetting] = [
    types.SafetySetting(
        category=category,
        threshold=types.HarmBlockThreshold.BLOCK_ONLY_HIGH,
    )
    for category in (
        types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
        types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
        types.HarmCategory.HARM_CATEGORY_HARASSMENT,
    )
]

PAYLOAD_TOO_LARGE_STATUS = 413


def build_video_part(payload: VideoPayload) -> types.Part:
    """
    Decode the base64 payload into an inline video part.

    Raises:
        InvalidVideoPayloadError: If the payload is empty or not valid base64.
    """
    data = payload.get("base64") or ""
    if not data.strip():
        raise InvalidVideoPayloadError("Video payload is empty.")

    try:
        video_bytes = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidVideoPayloadError("Video payload is not valid base64.") from e

    if not video_bytes:
        raise InvalidVideoPayloadError("Video payload is empty.")

    return types.Part.from_bytes(data=video_bytes, mime_type=payload["mime_type"])


def is_payload_too_large(error: Exception) -> bool:
    if isinstance(error, errors.APIError):
        return error.code == PAYLOAD_TOO_LARGE_STATUS
    return str(PAYLOAD_TOO_LARGE_STATUS) in str(error)


def provider_message(error: Exception) -> str:
    """Best human-readable message carried by a provider exception."""
    if isinstance(error, errors.APIError) and error.message:
        return error.message
    return str(error)
