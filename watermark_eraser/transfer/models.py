from dataclasses import dataclass
from typing import Protocol


class UploadSource(Protocol):
    """Anything that looks like an uploaded file (FastAPI's UploadFile does)."""

    filename: str | None
    content_type: str | None

    async def read(self) -> bytes: ...


@dataclass(frozen=True)
class UploadedImage:
    """Image selected by the user, kept as received."""

    raw_bytes: bytes
    media_type: str
    file_name: str
    displayable_form: str


@dataclass(frozen=True)
class EncodedImage:
    """Transport form of an image: base64 payload plus declared media type."""

    payload: str
    media_type: str


@dataclass(frozen=True)
class DownloadArtifact:
    """File produced for the user when downloading a result."""

    file_name: str
    content: bytes
    media_type: str = "image/png"
