"""Prompts and response schema for presentation planning and illustration."""

from google.genai import types

from tubesight.entities.slide import PresentationRequest, SlidePlan


LANGUAGE_NAMES: dict[str, str] = {"fr": "FRENCH", "en": "ENGLISH"}

SLIDE_PLAN_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "title": types.Schema(type=types.Type.STRING),
            "bulletPoints": types.Schema(
                type=types.Type.ARRAY,
                items=types.Schema(type=types.Type.STRING),
            ),
            "notes": types.Schema(type=types.Type.STRING),
            "imagePrompt": types.Schema(type=types.Type.STRING),
        },
        required=["title", "bulletPoints", "notes", "imagePrompt"],
    ),
)


def build_planning_prompt(request: PresentationRequest) -> str:
    language_name = LANGUAGE_NAMES[request.language]
    return f"""You are a professional presentation designer.
Analyze this video and create a cohesive {request.slide_count}-slide deck.

CONTEXT:
- Instructions: {request.instructions or "Summarize key points."}
- Audience: {request.audience or "General"}
- Visual Style: {request.style or "Modern"}
- Theme: {request.color_theme or "Corporate"}

REQUIREMENTS:
1. **Narrative Flow**: Tell a story (Intro -> Body -> Conclusion).
2. **LANGUAGE**: ALL OUTPUT TEXT MUST BE IN {language_name}.
3. **Speaker Notes**: Write brief oral presentation notes for each slide in {language_name}.
4. **Visuals**: Create a distinct image prompt (in English for the generator) for each slide.
5. **Titles**: Concise, compelling, under 8 words.

OUTPUT FORMAT: JSON Array.
"""


def build_image_prompt(plan: SlidePlan, request: PresentationRequest) -> str:
    return (
        f"{plan.image_prompt}. Style: {request.style}. Colors: {request.color_theme}. "
        "High quality, 4k, text-free, abstract presentation background."
    )
