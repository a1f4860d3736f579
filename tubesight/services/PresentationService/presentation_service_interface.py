from abc import ABC, abstractmethod

from tubesight.entities.slide import PresentationRequest, SlideData
from tubesight.entities.video import VideoPayload


class PresentationServiceInterface(ABC):
    @abstractmethod
    async def generate_presentation(
        self,
        payload: VideoPayload,
        request: PresentationRequest,
    ) -> list[SlideData]:
        """
        Plan a slide deck from the video, then illustrate every slide.

        Returns exactly request.slide_count slides in plan order. A slide whose
        image could not be generated has an empty image_base64.
        """
