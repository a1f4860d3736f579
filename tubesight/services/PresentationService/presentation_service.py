"""
PresentationService: two-phase slide deck generation.

Phase 1 asks the text model for a JSON slide plan constrained by a schema.
Phase 2 illustrates every planned slide concurrently with the image model.
Image failures are isolated per slide; planning failures abort the whole call.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import Any

from google.genai import types
from langfuse import observe
from pydantic import TypeAdapter, ValidationError

from tubesight.components.genai.genai_client_provider import GenAIClientProvider
from tubesight.entities.errors import PresentationPlanningError
from tubesight.entities.slide import PresentationRequest, SlideData, SlidePlan
from tubesight.entities.video import VideoPayload
from tubesight.services.PresentationService.presentation_service_interface import (
    PresentationServiceInterface,
)
from tubesight.services.PresentationService.prompts import (
    SLIDE_PLAN_SCHEMA,
    build_image_prompt,
    build_planning_prompt,
)
from tubesight.services.generation_config import build_video_part


PLANNING_FAILED_MESSAGE = "Failed to plan presentation."

_slide_plans_adapter = TypeAdapter(list[SlidePlan])


def _extract_image(response: Any) -> tuple[str, str | None]:
    """Return (base64 data, mime type) of the first inline image, or ("", None)."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return "", None

    content = candidates[0].content
    parts = content.parts if content and content.parts else []
    for part in parts:
        inline_data = part.inline_data
        if inline_data and inline_data.data:
            encoded = base64.b64encode(inline_data.data).decode("ascii")
            return encoded, inline_data.mime_type
    return "", None


class PresentationService(PresentationServiceInterface):
    def __init__(
        self,
        client_provider: GenAIClientProvider,
        planning_model_name: str,
        image_model_name: str,
        planning_thinking_budget: int,
        logger: logging.Logger,
    ) -> None:
        self.client_provider = client_provider
        self.planning_model_name = planning_model_name
        self.image_model_name = image_model_name
        self.planning_thinking_budget = planning_thinking_budget
        self.logger = logger

        self.logger.info(
            "PresentationService initialized. Planning model: %s, Image model: %s",
            self.planning_model_name,
            self.image_model_name,
        )

    async def _plan_slides(
        self,
        client: Any,
        payload: VideoPayload,
        request: PresentationRequest,
    ) -> list[SlidePlan]:
        """
        Phase 1: ask the text model for the slide plan.

        Raises:
            PresentationPlanningError: On provider failure, empty or unparsable
                output, or fewer plans than requested.
        """
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=SLIDE_PLAN_SCHEMA,
            thinking_config=types.ThinkingConfig(
                thinking_budget=self.planning_thinking_budget
            ),
        )
        contents = [
            types.Content(
                role="user",
                parts=[
                    build_video_part(payload),
                    types.Part.from_text(text=build_planning_prompt(request)),
                ],
            )
        ]

        try:
            response = await client.aio.models.generate_content(
                model=self.planning_model_name,
                contents=contents,
                config=config,
            )
            json_text = response.text if response else None
            if not json_text:
                raise ValueError("No JSON response")
            plans = _slide_plans_adapter.validate_json(json_text)
        except (ValidationError, ValueError) as e:
            self.logger.error("Presentation plan could not be parsed: %s", e)
            raise PresentationPlanningError(PLANNING_FAILED_MESSAGE) from e
        except Exception as e:
            self.logger.error("Presentation planning failed: %s", e, exc_info=True)
            raise PresentationPlanningError(PLANNING_FAILED_MESSAGE) from e

        if len(plans) < request.slide_count:
            self.logger.error(
                "Presentation plan has %d slides, %d requested",
                len(plans),
                request.slide_count,
            )
            raise PresentationPlanningError(PLANNING_FAILED_MESSAGE)

        if len(plans) > request.slide_count:
            self.logger.warning(
                "Presentation plan has %d slides, keeping the first %d",
                len(plans),
                request.slide_count,
            )
        return plans[: request.slide_count]

    async def _illustrate_slide(
        self,
        client: Any,
        index: int,
        plan: SlidePlan,
        request: PresentationRequest,
    ) -> SlideData:
        """Phase 2 for one slide. Never raises for provider failures."""
        image_base64 = ""
        image_mime_type: str | None = None

        try:
            response = await client.aio.models.generate_content(
                model=self.image_model_name,
                contents=[
                    types.Content(
                        role="user",
                        parts=[
                            types.Part.from_text(text=build_image_prompt(plan, request))
                        ],
                    )
                ],
            )
            image_base64, image_mime_type = _extract_image(response)
            if not image_base64:
                self.logger.warning("No image returned for slide %d", index)
        except Exception as e:
            self.logger.warning(
                "Failed to generate image for slide %d: %s", index, e, exc_info=True
            )

        return {
            "id": f"slide-{index}",
            "title": plan.title,
            "bullet_points": list(plan.bullet_points),
            "image_base64": image_base64,
            "image_mime_type": image_mime_type,
            "notes": plan.notes,
        }

    @observe()
    async def generate_presentation(
        self,
        payload: VideoPayload,
        request: PresentationRequest,
    ) -> list[SlideData]:
        """
        Generate an illustrated slide deck for the video.

        Args:
            payload: Base64 video and its MIME type
            request: Deck options (instructions, audience, style, colors, count, language)

        Returns:
            Exactly request.slide_count slides, ordered as planned

        Raises:
            ValueError: If slide_count is lower than 1
            ConfigurationError: If the API key is missing
            InvalidVideoPayloadError: If the payload is empty
            PresentationPlanningError: If phase 1 fails
        """
        if request.slide_count < 1:
            raise ValueError(f"slide_count must be at least 1, got {request.slide_count}")

        client = self.client_provider.get_client()

        self.logger.info(
            "Planning %d-slide presentation (language: %s)",
            request.slide_count,
            request.language,
        )
        plans = await self._plan_slides(client, payload, request)

        self.logger.info("Generating %d slide images", len(plans))
        slides = await asyncio.gather(
            *(
                self._illustrate_slide(client, index, plan, request)
                for index, plan in enumerate(plans)
            )
        )

        failed = sum(1 for slide in slides if not slide["image_base64"])
        if failed:
            self.logger.warning(
                "Presentation generated with %d of %d slides missing images",
                failed,
                len(slides),
            )
        return list(slides)
