from typing import Literal, NotRequired, TypedDict


class ChatMessage(TypedDict):
    """Conversation message exchanged with the video chat."""

    id: str
    role: Literal["user", "model"]
    text: str
    timestamp: float
    is_error: NotRequired[bool]
