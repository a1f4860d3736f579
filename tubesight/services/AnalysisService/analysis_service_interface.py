from abc import ABC, abstractmethod
from typing import TypedDict

from tubesight.entities.video import AnalysisMode, VideoPayload


class AnalysisResult(TypedDict):
    text: str


class AnalysisServiceInterface(ABC):
    @abstractmethod
    async def analyze_video(
        self,
        payload: VideoPayload,
        user_notes: str | None,
        mode: AnalysisMode | str,
    ) -> AnalysisResult:
        """
        Run a single-shot analysis of the video through the selected lens.

        Returns:
            The model's markdown answer.
        """
