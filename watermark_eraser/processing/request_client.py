"""Single-shot watermark removal requests against an AI image provider."""

from pathlib import Path

from watermark_eraser.logging.logger import Log
from watermark_eraser.processing.client_base import BaseImageEditClient
from watermark_eraser.processing.exceptions import (
    NoImageReturnedError,
    ProcessingFailedError,
)
from watermark_eraser.processing.models import ContentPart
from watermark_eraser.processing.prompt_loader import load_instruction


def first_image_payload(parts: list[ContentPart]) -> str | None:
    """Return the payload of the first part carrying image data, if any."""
    for part in parts:
        if part.has_image:
            return part.inline_data.data
    return None


class ProcessingRequestClient:
    """Sends one image with the fixed removal instruction and returns the edited image.

    One attempt per call: no retry, no backoff. Timeouts are left to the
    provider adapter's transport.
    """

    def __init__(
        self,
        *,
        client: BaseImageEditClient,
        model: str,
        instruction_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._instruction = load_instruction(instruction_path)

    @property
    def instruction(self) -> str:
        return self._instruction

    async def submit(self, payload: str, media_type: str) -> str:
        """Submit a base64 image and return the base64 payload of the edited image.

        Raises:
            NoImageReturnedError: if the response holds no image part.
            ProcessingFailedError: on any transport or provider failure.
        """
        Log.info(f"Submitting {media_type} image ({len(payload)} base64 chars) to {self._model}")
        try:
            parts = await self._client.edit_image(
                model=self._model,
                instruction=self._instruction,
                payload=payload,
                media_type=media_type,
            )
        except Exception as exc:
            Log.exception(f"AI provider request failed: {exc}")
            raise ProcessingFailedError("Failed to process image with the AI provider") from None

        result = first_image_payload(parts)
        if result is None:
            Log.warning(f"AI provider returned {len(parts)} parts and no image")
            raise NoImageReturnedError("The AI provider did not return a processed image")
        Log.info(f"AI provider returned an image ({len(result)} base64 chars)")
        return result
