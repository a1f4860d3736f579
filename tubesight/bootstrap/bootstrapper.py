from dataclasses import dataclass

from tubesight.components.configuration.settings import Settings
from tubesight.dependencies.components import get_components
from tubesight.dependencies.services import (
    get_analysis_service,
    get_chat_service,
    get_presentation_service,
)
from tubesight.services.AnalysisService.analysis_service_interface import (
    AnalysisServiceInterface,
)
from tubesight.services.ChatService.chat_service_interface import (
    ChatServiceInterface,
)
from tubesight.services.PresentationService.presentation_service_interface import (
    PresentationServiceInterface,
)


@dataclass(frozen=True)
class TubeSightServices:
    analysis: AnalysisServiceInterface
    chat: ChatServiceInterface
    presentation: PresentationServiceInterface


def bootstrap_services(
    env: str = "development",
    settings: Settings | None = None,
) -> TubeSightServices:
    """
    Build the services for env.

    Raises:
        ValueError: If env was already bootstrapped with different settings
    """
    components = get_components(env=env, settings=settings)
    return TubeSightServices(
        analysis=get_analysis_service(components),
        chat=get_chat_service(components),
        presentation=get_presentation_service(components),
    )
