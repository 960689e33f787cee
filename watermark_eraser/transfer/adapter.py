import base64
import binascii

from watermark_eraser.logging.logger import Log
from watermark_eraser.transfer.exceptions import (
    EmptyPayloadError,
    FileReadError,
    InvalidInputError,
)
from watermark_eraser.transfer.models import EncodedImage, UploadedImage, UploadSource

IMAGE_MEDIA_PREFIX = "image/"
RESULT_MEDIA_TYPE = "image/png"


def is_image_media_type(media_type: str | None) -> bool:
    return bool(media_type) and media_type.lower().startswith(IMAGE_MEDIA_PREFIX)


def download_file_name(original_name: str | None) -> str:
    """Build the download name: watermark_removed_{original or 'image'}.png"""
    return f"watermark_removed_{original_name or 'image'}.png"


class TransferAdapter:
    """Moves images between the user's upload, the AI provider and the page."""

    async def read_upload(self, source: UploadSource) -> UploadedImage:
        """Read an uploaded file into an UploadedImage.

        The declared type is checked before any bytes are read.

        Raises:
            InvalidInputError: if the declared type is not an image type.
            FileReadError: if reading fails or the file is empty.
        """
        media_type = source.content_type or ""
        file_name = source.filename or "image"
        if not is_image_media_type(media_type):
            raise InvalidInputError(
                f"'{file_name}' is not an image (declared type '{media_type}')"
            )
        try:
            raw_bytes = await source.read()
        except Exception as exc:
            raise FileReadError(f"Failed to read '{file_name}': {exc}") from exc
        if not raw_bytes:
            raise FileReadError(f"'{file_name}' is empty")

        Log.info(f"Read {len(raw_bytes)} bytes from '{file_name}' ({media_type})")
        payload = base64.b64encode(raw_bytes).decode("ascii")
        return UploadedImage(
            raw_bytes=raw_bytes,
            media_type=media_type,
            file_name=file_name,
            displayable_form=self.decode(payload, media_type),
        )

    def encode(self, image: UploadedImage) -> EncodedImage:
        """Encode an uploaded image into its base64 transport form.

        Raises:
            InvalidInputError: if the declared type is not an image type.
        """
        if not is_image_media_type(image.media_type):
            raise InvalidInputError(
                f"Declared type '{image.media_type}' is not an image type"
            )
        return EncodedImage(
            payload=base64.b64encode(image.raw_bytes).decode("ascii"),
            media_type=image.media_type,
        )

    def decode(self, payload: str, media_type: str = RESULT_MEDIA_TYPE) -> str:
        """Format a base64 payload as a data URI the page can display.

        Raises:
            EmptyPayloadError: if payload is empty.
        """
        if not payload:
            raise EmptyPayloadError("Cannot decode an empty payload")
        return f"data:{media_type};base64,{payload}"

    def to_bytes(self, displayable_form: str) -> bytes:
        """Recover raw bytes from a base64 data URI.

        Raises:
            InvalidInputError: if the URI is not a base64 data URI.
        """
        header, sep, payload = displayable_form.partition(",")
        if not sep or not header.startswith("data:") or not header.endswith(";base64"):
            raise InvalidInputError("Not a base64 data URI")
        if not payload:
            raise EmptyPayloadError("Data URI carries no payload")
        try:
            return base64.b64decode(payload, validate=True)
        except binascii.Error as exc:
            raise InvalidInputError(f"Invalid base64 payload: {exc}") from exc
