class SessionError(Exception):
    """Base exception for actions the editing session cannot perform."""


class NoImageUploadedError(SessionError):
    """Raised when watermark removal is requested before any upload."""


class RequestInFlightError(SessionError):
    """Raised when watermark removal is requested while one is already running."""


class NoResultError(SessionError):
    """Raised when a download is requested before a result exists."""
