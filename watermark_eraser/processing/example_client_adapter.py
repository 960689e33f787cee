"""Example image editing client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseImageEditClient and register the provider in ProcessingClientFactory.
"""

from watermark_eraser.processing.client_base import BaseImageEditClient
from watermark_eraser.processing.models import ContentPart, InlineData


class ExampleClientAdapter(BaseImageEditClient):
    """Example adapter that hands the source image back unchanged.

    No network calls. Useful for local development and tests.
    """

    async def edit_image(
        self,
        *,
        model: str,
        instruction: str,
        payload: str,
        media_type: str,
    ) -> list[ContentPart]:
        _ = model, instruction
        return [
            ContentPart(text="example adapter: image returned unchanged"),
            ContentPart(inline_data=InlineData(mime_type=media_type, data=payload)),
        ]
