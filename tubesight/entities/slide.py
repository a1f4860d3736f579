from dataclasses import dataclass
from typing import TypedDict

from pydantic import BaseModel, ConfigDict, Field

from tubesight.entities.video import Language, validate_language


class SlidePlan(BaseModel):
    """Narrative plan for one slide, as returned by the planning model."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    bullet_points: list[str] = Field(alias="bulletPoints")
    notes: str
    image_prompt: str = Field(alias="imagePrompt")


class SlideData(TypedDict):
    """Finished slide handed back to the caller."""

    id: str
    title: str
    bullet_points: list[str]
    image_base64: str
    image_mime_type: str | None
    notes: str


@dataclass(frozen=True)
class PresentationRequest:
    instructions: str = ""
    audience: str = ""
    style: str = "Professional"
    color_theme: str = "Corporate Blue"
    slide_count: int = 3
    language: Language = "en"

    def __post_init__(self) -> None:
        validate_language(self.language)
