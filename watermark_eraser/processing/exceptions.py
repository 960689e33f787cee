class ProcessingError(Exception):
    """Raised when removing the watermark through the AI provider fails."""


class NoImageReturnedError(ProcessingError):
    """Raised when the provider response carries no embedded image."""


class ProcessingFailedError(ProcessingError):
    """Raised for any transport or provider failure during a request."""


class RemoteServiceError(ProcessingError):
    """Raised by provider adapters when the call fails due to network/API issues."""
