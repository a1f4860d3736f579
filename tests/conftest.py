"""
Pytest configuration and fixtures for the test suite.

This file is automatically loaded by pytest before running tests.
It disables Langfuse tracing to prevent sending traces during test runs.
"""

import base64
import logging
import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Disable Langfuse tracing before any test modules import Langfuse
os.environ["LANGFUSE_TRACING_ENABLED"] = "false"
os.environ["TESTING"] = "true"

_langfuse_logger = logging.getLogger("langfuse")
_langfuse_logger.setLevel(logging.CRITICAL)
_langfuse_logger.propagate = False

from tubesight.components.genai.genai_client_provider import (  # noqa: E402
    GenAIClientProvider,
)
from tubesight.entities.video import VideoPayload  # noqa: E402


VIDEO_BYTES = b"\x00\x00\x00\x18ftypmp42fake-video-content"


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("TubeSightTest")


@pytest.fixture
def video_payload() -> VideoPayload:
    return {
        "base64": base64.b64encode(VIDEO_BYTES).decode("ascii"),
        "file_name": "clip.mp4",
        "mime_type": "video/mp4",
        "size_bytes": len(VIDEO_BYTES),
    }


@pytest.fixture
def mock_genai_client() -> MagicMock:
    """A stand-in for google.genai.Client with async model calls."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    client.aio.models.generate_content_stream = AsyncMock()
    return client


@pytest.fixture
def client_provider(
    mock_genai_client: MagicMock, logger: logging.Logger
) -> GenAIClientProvider:
    return GenAIClientProvider(
        api_key="test-key", logger=logger, client=mock_genai_client
    )


@pytest.fixture
def unconfigured_provider(
    mock_genai_client: MagicMock, logger: logging.Logger
) -> GenAIClientProvider:
    return GenAIClientProvider(api_key="", logger=logger, client=mock_genai_client)
