class TransferError(Exception):
    """Base exception for encoding and decoding image payloads."""


class InvalidInputError(TransferError):
    """Raised when the selected file is not an image or a data URI is malformed."""


class FileReadError(TransferError):
    """Raised when the uploaded file cannot be read."""


class EmptyPayloadError(TransferError):
    """Raised when a payload to decode is empty."""
