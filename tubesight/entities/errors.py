class TubeSightError(Exception):
    """Base error for the TubeSight service layer."""


class ConfigurationError(TubeSightError):
    """Raised when the provider credential is missing."""


class InvalidVideoPayloadError(TubeSightError):
    """Raised when an operation receives an empty video payload."""


class ConversionError(TubeSightError):
    """Raised when a video file cannot be turned into a payload."""


class VideoTooLargeError(ConversionError):
    def __init__(self, size_bytes: int, max_bytes: int) -> None:
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        super().__init__(
            f"Video file exceeds size limit: {size_bytes} bytes (max {max_bytes})"
        )


class ProviderError(TubeSightError):
    """Base error for failures reported by the generative model provider."""


class PayloadTooLargeError(ProviderError):
    """Raised when the provider rejects the request as too large."""


class AnalysisFailedError(ProviderError):
    pass


class ChatStreamError(ProviderError):
    pass


class PresentationPlanningError(ProviderError):
    pass
