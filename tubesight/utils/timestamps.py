import re

TIMESTAMP_PATTERN = re.compile(r"\b(?:\d{1,2}:)?\d{1,2}:\d{2}\b")


def find_timestamps(text: str) -> list[str]:
    """Return the m:ss and h:mm:ss tokens found in a model answer, in order."""
    return TIMESTAMP_PATTERN.findall(text or "")


def parse_timestamp(token: str) -> int:
    """
    Convert "m:ss" or "h:mm:ss" to seconds. Fields after the first must be below 60.

    Raises:
        ValueError: If the token is not a timestamp.
    """
    if not TIMESTAMP_PATTERN.fullmatch(token.strip()):
        raise ValueError(f"Invalid timestamp: {token!r}")

    leading, *rest = (int(part) for part in token.strip().split(":"))
    if any(field > 59 for field in rest):
        raise ValueError(f"Minutes and seconds must be below 60: {token!r}")

    seconds = leading
    for field in rest:
        seconds = seconds * 60 + field
    return seconds
