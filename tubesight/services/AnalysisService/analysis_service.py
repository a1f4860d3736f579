"""
AnalysisService: single-shot video analysis with Gemini.

One request per call: the inline video, a user prompt carrying the notes, and a
system instruction chosen by the analysis mode.
"""

from __future__ import annotations

import logging

from google.genai import types
from langfuse import observe

from tubesight.components.genai.genai_client_provider import GenAIClientProvider
from tubesight.entities.errors import AnalysisFailedError, PayloadTooLargeError
from tubesight.entities.video import AnalysisMode, VideoPayload
from tubesight.services.AnalysisService.analysis_service_interface import (
    AnalysisResult,
    AnalysisServiceInterface,
)
from tubesight.services.AnalysisService.prompts import (
    build_analysis_prompt,
    build_system_instruction,
)
from tubesight.services.generation_config import (
    SAFETY_SETTINGS,
    build_video_part,
    is_payload_too_large,
    provider_message,
)


EMPTY_ANALYSIS_TEXT = "Analysis complete, but no text returned."
PAYLOAD_TOO_LARGE_MESSAGE = "Video file too large. Please try a shorter clip."
ANALYSIS_FAILED_MESSAGE = "Video analysis failed."


class AnalysisService(AnalysisServiceInterface):
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

        self.logger.info("AnalysisService initialized. Model: %s", self.model_name)

    def _build_config(self, mode: AnalysisMode) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=build_system_instruction(mode),
            thinking_config=types.ThinkingConfig(thinking_budget=self.thinking_budget),
            safety_settings=SAFETY_SETTINGS,
        )

    @observe()
    async def analyze_video(
        self,
        payload: VideoPayload,
        user_notes: str | None,
        mode: AnalysisMode | str,
    ) -> AnalysisResult:
        """
        Analyze the uploaded video.

        Args:
            payload: Base64 video and its MIME type
            user_notes: Optional free-text context; also decides the reply language
            mode: Analysis lens

        Returns:
            AnalysisResult with the markdown text

        Raises:
            ConfigurationError: If the API key is missing
            InvalidVideoPayloadError: If the payload is empty
            PayloadTooLargeError: If the provider rejects the request size
            AnalysisFailedError: For any other provider failure
        """
        client = self.client_provider.get_client()
        analysis_mode = AnalysisMode(mode)

        contents = [
            types.Content(
                role="user",
                parts=[
                    build_video_part(payload),
                    types.Part.from_text(
                        text=build_analysis_prompt(analysis_mode, user_notes)
                    ),
                ],
            )
        ]

        self.logger.info(
            "Analyzing video (%s, %d bytes) with mode '%s'",
            payload["mime_type"],
            payload.get("size_bytes", 0),
            analysis_mode.value,
        )

        try:
            response = await client.aio.models.generate_content(
                model=self.model_name,
                contents=contents,
                config=self._build_config(analysis_mode),
            )
        except Exception as e:
            self.logger.error("Gemini API error during analysis: %s", e, exc_info=True)
            if is_payload_too_large(e):
                raise PayloadTooLargeError(PAYLOAD_TOO_LARGE_MESSAGE) from e
            raise AnalysisFailedError(
                provider_message(e) or ANALYSIS_FAILED_MESSAGE
            ) from e

        text = response.text if response else None
        if not text:
            self.logger.warning("Analysis returned no text")
            return {"text": EMPTY_ANALYSIS_TEXT}

        self.logger.info("Analysis completed: %d characters", len(text))
        return {"text": text}
