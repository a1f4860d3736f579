from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from tubesight.entities.message import ChatMessage
from tubesight.entities.video import Language, VideoPayload


class ChatServiceInterface(ABC):
    @abstractmethod
    def stream_chat_message(
        self,
        payload: VideoPayload,
        history: list[ChatMessage],
        new_message: str,
    ) -> AsyncIterator[str]:
        """
        Stream the assistant reply to new_message as text fragments.

        The full reply is the concatenation of the fragments in order.
        """

    @abstractmethod
    async def reply(
        self,
        payload: VideoPayload,
        history: list[ChatMessage],
        new_message: str,
        language: Language = "en",
    ) -> list[ChatMessage]:
        """
        Run one chat turn and return the messages to append to the history.

        A failed turn keeps any partial reply and adds a separate error message.
        """
