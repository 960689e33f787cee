import pytest

# Only the magic numbers matter here; nothing decodes pixels.
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"


class FakeUpload:
    """Stands in for FastAPI's UploadFile."""

    def __init__(
        self,
        filename: str | None,
        content_type: str | None,
        data: bytes = b"",
        error: Exception | None = None,
    ) -> None:
        self.filename = filename
        self.content_type = content_type
        self._data = data
        self._error = error
        self.read_calls = 0

    async def read(self) -> bytes:
        self.read_calls += 1
        if self._error is not None:
            raise self._error
        return self._data


@pytest.fixture()
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture()
def jpeg_bytes() -> bytes:
    return JPEG_BYTES


@pytest.fixture()
def photo_upload() -> FakeUpload:
    """A JPEG photo selected by the user."""
    return FakeUpload("photo.jpg", "image/jpeg", JPEG_BYTES)


@pytest.fixture()
def pdf_upload() -> FakeUpload:
    """A non-image document selected by the user."""
    return FakeUpload("doc.pdf", "application/pdf", b"%PDF-1.4 test")


@pytest.fixture()
def make_upload() -> type[FakeUpload]:
    return FakeUpload
