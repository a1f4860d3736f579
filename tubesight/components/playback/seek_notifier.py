from __future__ import annotations

import logging
from collections.abc import Callable

from tubesight.utils.timestamps import parse_timestamp

SeekCallback = Callable[[int], None]


class SeekNotifier:
    """Lets the video player subscribe to seek requests raised from answer text."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("SeekNotifier")
        self._subscribers: list[SeekCallback] = []

    def subscribe(self, callback: SeekCallback) -> Callable[[], None]:
        """Register callback; the returned function removes it again."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def seek(self, position: str | int) -> int:
        """
        Notify subscribers of a seek to position (seconds or "m:ss").

        Returns:
            The position in seconds.
        """
        seconds = parse_timestamp(position) if isinstance(position, str) else position
        if seconds < 0:
            raise ValueError(f"Seek position must not be negative, got {seconds}")

        self.logger.debug(
            "Seeking to %ss (%d subscribers)", seconds, len(self._subscribers)
        )
        for callback in list(self._subscribers):
            callback(seconds)
        return seconds
