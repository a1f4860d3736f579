"""
Turn a video file into a VideoPayload.

The size ceiling is enforced before the file is read, so oversized uploads are
never loaded into memory.
"""

import asyncio
import base64
import logging
import mimetypes
from pathlib import Path

from tubesight.components.configuration.settings import MAX_VIDEO_BYTES
from tubesight.entities.errors import ConversionError, VideoTooLargeError
from tubesight.entities.video import VideoPayload


_logger = logging.getLogger(__name__)


def encode_video_bytes(
    data: bytes,
    mime_type: str,
    file_name: str | None = None,
) -> VideoPayload:
    if not data:
        raise ConversionError("Video file is empty.")
    if not mime_type or not mime_type.startswith("video/"):
        raise ConversionError(f"Unsupported mime type: {mime_type or 'unknown'}")

    return {
        "base64": base64.b64encode(data).decode("ascii"),
        "file_name": file_name,
        "mime_type": mime_type,
        "size_bytes": len(data),
    }


async def read_video_file(
    path: str | Path,
    mime_type: str | None = None,
    max_bytes: int = MAX_VIDEO_BYTES,
) -> VideoPayload:
    """
    Read and encode a video file.

    Args:
        path: Location of the video file
        mime_type: Explicit MIME type; guessed from the file name when omitted
        max_bytes: Size ceiling checked before reading

    Raises:
        VideoTooLargeError: If the file is larger than max_bytes
        ConversionError: If the file cannot be read, is empty or is not a video
    """
    video_path = Path(path)
    resolved_mime = mime_type or mimetypes.guess_type(video_path.name)[0]

    try:
        size_bytes = video_path.stat().st_size
    except OSError as e:
        raise ConversionError(f"Failed to process video file: {e}") from e

    if size_bytes > max_bytes:
        _logger.warning("Rejected video %s (%d bytes)", video_path.name, size_bytes)
        raise VideoTooLargeError(size_bytes, max_bytes)

    try:
        data = await asyncio.to_thread(video_path.read_bytes)
    except OSError as e:
        raise ConversionError(f"Failed to process video file: {e}") from e

    payload = encode_video_bytes(data, resolved_mime or "", file_name=video_path.name)
    _logger.info(
        "Encoded video %s (%s, %d bytes)",
        video_path.name,
        payload["mime_type"],
        payload["size_bytes"],
    )
    return payload
