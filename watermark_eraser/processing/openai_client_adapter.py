import base64

import httpx
import openai

from watermark_eraser.processing.client_base import BaseImageEditClient
from watermark_eraser.processing.exceptions import RemoteServiceError
from watermark_eraser.processing.models import ContentPart, InlineData

_EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
}


class OpenAIClientAdapter(BaseImageEditClient):
    """Image editing adapter built on the OpenAI images edit API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def edit_image(
        self,
        *,
        model: str,
        instruction: str,
        payload: str,
        media_type: str,
    ) -> list[ContentPart]:
        file_name = f"image.{_EXTENSIONS.get(media_type, 'png')}"
        try:
            response = await self._client.images.edit(
                model=model,
                image=(file_name, base64.b64decode(payload), media_type),
                prompt=instruction,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise RemoteServiceError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise RemoteServiceError(f"AI provider API error: {exc}") from exc

        return [
            ContentPart(
                text=image.revised_prompt,
                inline_data=(
                    InlineData(mime_type="image/png", data=image.b64_json)
                    if image.b64_json
                    else None
                ),
            )
            for image in response.data or []
        ]
