from abc import ABC, abstractmethod

from watermark_eraser.processing.models import ContentPart


class BaseImageEditClient(ABC):
    """Contract for provider-specific image editing clients."""

    @abstractmethod
    async def edit_image(
        self,
        *,
        model: str,
        instruction: str,
        payload: str,
        media_type: str,
    ) -> list[ContentPart]:
        """Send one image + instruction and return the response parts in order.

        Args:
            model: Provider model identifier.
            instruction: Natural-language edit instruction.
            payload: Base64-encoded source image.
            media_type: Declared media type of the source image.

        Raises:
            RemoteServiceError: on network or provider API failures.
        """
