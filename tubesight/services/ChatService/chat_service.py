"""
ChatService: multi-turn chat grounded in an uploaded video.

Every turn rebuilds the full transcript: a user turn carrying the video, a model
turn acknowledging it, the prior history, then the new user message. The video
is re-sent on each turn.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import AsyncIterator
from typing import Literal

from google.genai import types
from langfuse import observe

from tubesight.components.genai.genai_client_provider import GenAIClientProvider
from tubesight.entities.errors import (
    ChatStreamError,
    ConfigurationError,
    TubeSightError,
)
from tubesight.entities.message import ChatMessage
from tubesight.entities.video import Language, VideoPayload, validate_language
from tubesight.services.ChatService.chat_service_interface import (
    ChatServiceInterface,
)
from tubesight.services.generation_config import (
    SAFETY_SETTINGS,
    build_video_part,
    provider_message,
)


CHAT_SYSTEM_INSTRUCTION = """You are TubeSight.
LANGUAGE RULE: If the user speaks English, reply in English. If the user speaks French, reply in French.
INTELLIGENCE: Think step-by-step. Don't hallucinate. Use specific video evidence."""

VIDEO_CONTEXT_TEXT = "Here is the video file context."
VIDEO_READY_TEXT = "I have analyzed the video. I am ready to answer questions."
CHAT_STREAM_FAILED_MESSAGE = "Message stream failed."

WELCOME_MESSAGE_ID = "init"

WELCOME_TEXT: dict[str, str] = {
    "fr": "Bonjour ! Je suis prêt. Posez-moi n'importe quelle question sur le contenu de la vidéo.",
    "en": "Hello! I am ready. Ask me anything about the video content.",
}

ERROR_TEXT: dict[str, str] = {
    "fr": "Désolé, j'ai rencontré une erreur lors de l'analyse. Veuillez réessayer.",
    "en": "Sorry, I encountered an error during analysis. Please try again.",
}


def _new_message(
    role: Literal["user", "model"],
    text: str,
    message_id: str | None = None,
    is_error: bool = False,
) -> ChatMessage:
    message: ChatMessage = {
        "id": message_id or str(uuid.uuid4()),
        "role": role,
        "text": text,
        "timestamp": time.time(),
    }
    if is_error:
        message["is_error"] = True
    return message


def build_welcome_message(language: Language = "en") -> ChatMessage:
    """Greeting shown when a chat starts. Never replayed to the model."""
    validate_language(language)
    return _new_message("model", WELCOME_TEXT[language], message_id=WELCOME_MESSAGE_ID)


def build_chat_contents(
    payload: VideoPayload,
    history: list[ChatMessage],
    new_message: str,
) -> list[types.Content]:
    """Build the provider transcript: 2 priming turns, the history, the new message."""
    contents: list[types.Content] = [
        types.Content(
            role="user",
            parts=[
                build_video_part(payload),
                types.Part.from_text(text=VIDEO_CONTEXT_TEXT),
            ],
        ),
        types.Content(
            role="model",
            parts=[types.Part.from_text(text=VIDEO_READY_TEXT)],
        ),
    ]

    for msg in history:
        contents.append(
            types.Content(
                role=msg["role"],
                parts=[types.Part.from_text(text=msg["text"])],
            )
        )

    contents.append(
        types.Content(role="user", parts=[types.Part.from_text(text=new_message)])
    )
    return contents


class ChatService(ChatServiceInterface):
    def __init__(
        self,
        client_provider: GenAIClientProvider,
        model_name: str,
        thinking_budget: int,
        logger: logging.Logger,
    ) -> None:
        self.client_provider = client_provider
        self.model_name = model_name
        self.thinking_budget = thinking_budget
        self.logger = logger

        self.logger.info("ChatService initialized. Model: %s", self.model_name)

    def _build_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=CHAT_SYSTEM_INSTRUCTION,
            thinking_config=types.ThinkingConfig(thinking_budget=self.thinking_budget),
            safety_settings=SAFETY_SETTINGS,
        )

    async def stream_chat_message(
        self,
        payload: VideoPayload,
        history: list[ChatMessage],
        new_message: str,
    ) -> AsyncIterator[str]:
        """
        Stream the reply as text fragments, in the order the provider sends them.

        Closing the generator (or cancelling the consuming task) stops the
        stream and releases the underlying connection.

        Raises:
            ConfigurationError: If the API key is missing, before any request
            InvalidVideoPayloadError: If the payload is empty
            ChatStreamError: If the provider fails before or during the stream
        """
        client = self.client_provider.get_client()
        contents = build_chat_contents(payload, history, new_message)

        self.logger.info(
            "Streaming chat reply (history: %d messages, transcript: %d turns)",
            len(history),
            len(contents),
        )

        response_stream: AsyncIterator[types.GenerateContentResponse] | None = None
        try:
            response_stream = await client.aio.models.generate_content_stream(
                model=self.model_name,
                contents=contents,
                config=self._build_config(),
            )
            async for chunk in response_stream:
                if chunk.text:
                    yield chunk.text
        except Exception as e:
            self.logger.error("Gemini chat stream error: %s", e, exc_info=True)
            raise ChatStreamError(
                provider_message(e) or CHAT_STREAM_FAILED_MESSAGE
            ) from e
        finally:
            aclose = getattr(response_stream, "aclose", None)
            if aclose is not None:
                await aclose()

    @observe()
    async def reply(
        self,
        payload: VideoPayload,
        history: list[ChatMessage],
        new_message: str,
        language: Language = "en",
    ) -> list[ChatMessage]:
        """
        Run one chat turn and return the new messages for the history.

        Returns:
            [user message, model reply] on success. On a failed stream the model
            reply is kept only if it already had text, followed by an error
            message flagged with is_error.

        Raises:
            ConfigurationError: If the API key is missing
            ValueError: If language is not supported
        """
        validate_language(language)

        user_message = _new_message("user", new_message)
        model_message = _new_message("model", "")

        api_history = [msg for msg in history if msg["id"] != WELCOME_MESSAGE_ID]

        fragments: list[str] = []
        try:
            async for fragment in self.stream_chat_message(
                payload, api_history, new_message
            ):
                fragments.append(fragment)
        except ConfigurationError:
            raise
        except TubeSightError as e:
            model_message["text"] = "".join(fragments)
            self.logger.warning(
                "Chat turn failed after %d characters: %s",
                len(model_message["text"]),
                e,
            )
            messages = [user_message]
            if model_message["text"]:
                messages.append(model_message)
            messages.append(_new_message("model", ERROR_TEXT[language], is_error=True))
            return messages

        model_message["text"] = "".join(fragments)
        return [user_message, model_message]
