from typing import Any

import httpx

from watermark_eraser.processing.client_base import BaseImageEditClient
from watermark_eraser.processing.exceptions import RemoteServiceError
from watermark_eraser.processing.models import ContentPart, InlineData


class GeminiClientAdapter(BaseImageEditClient):
    """Image editing adapter for the Gemini generateContent REST API."""

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def edit_image(
        self,
        *,
        model: str,
        instruction: str,
        payload: str,
        media_type: str,
    ) -> list[ContentPart]:
        body = {
            "contents": [
                {
                    "parts": [
                        {"inlineData": {"data": payload, "mimeType": media_type}},
                        {"text": instruction},
                    ]
                }
            ],
            "generationConfig": {"responseModalities": ["IMAGE"]},
        }
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                headers={"x-goog-api-key": self._api_key},
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(f"/models/{model}:generateContent", json=body)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RemoteServiceError(
                f"AI provider API error: {exc.response.status_code} {exc.response.text}"
            ) from exc
        except httpx.HTTPError as exc:
            raise RemoteServiceError(f"AI provider network error: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise RemoteServiceError(f"AI provider returned invalid JSON: {exc}") from exc
        return self._parse_parts(data)

    @staticmethod
    def _parse_parts(data: dict[str, Any]) -> list[ContentPart]:
        candidates = data.get("candidates") or []
        if not isinstance(candidates, list) or not candidates:
            return []
        content = candidates[0].get("content") or {}
        parts: list[ContentPart] = []
        for raw in content.get("parts") or []:
            inline = raw.get("inlineData")
            parts.append(
                ContentPart(
                    text=raw.get("text"),
                    inline_data=(
                        InlineData(
                            mime_type=inline.get("mimeType", ""),
                            data=inline.get("data", ""),
                        )
                        if inline
                        else None
                    ),
                )
            )
        return parts
