from tubesight.bootstrap.components import Components
from tubesight.components.configuration.settings import Settings
from tubesight.components.genai.genai_client_provider import GenAIClientProvider
from tubesight.components.logger.logger import Logger
from tubesight.services.AnalysisService.analysis_service import AnalysisService
from tubesight.services.AnalysisService.analysis_service_interface import (
    AnalysisServiceInterface,
)
from tubesight.services.ChatService.chat_service import ChatService
from tubesight.services.ChatService.chat_service_interface import (
    ChatServiceInterface,
)
from tubesight.services.PresentationService.presentation_service import (
    PresentationService,
)
from tubesight.services.PresentationService.presentation_service_interface import (
    PresentationServiceInterface,
)


def get_analysis_service(components: Components) -> AnalysisServiceInterface:
    settings = components.get_component(Settings)
    return AnalysisService(
        client_provider=components.get_component(GenAIClientProvider),
        model_name=settings.analysis_model_name,
        thinking_budget=settings.analysis_thinking_budget,
        logger=components.get_component(Logger).get_logger("AnalysisService"),
    )


def get_chat_service(components: Components) -> ChatServiceInterface:
    settings = components.get_component(Settings)
    return ChatService(
        client_provider=components.get_component(GenAIClientProvider),
        model_name=settings.chat_model_name,
        thinking_budget=settings.chat_thinking_budget,
        logger=components.get_component(Logger).get_logger("ChatService"),
    )


def get_presentation_service(components: Components) -> PresentationServiceInterface:
    settings = components.get_component(Settings)
    return PresentationService(
        client_provider=components.get_component(GenAIClientProvider),
        planning_model_name=settings.planning_model_name,
        image_model_name=settings.image_model_name,
        planning_thinking_budget=settings.planning_thinking_budget,
        logger=components.get_component(Logger).get_logger("PresentationService"),
    )
