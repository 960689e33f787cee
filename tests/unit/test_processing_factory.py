"""Tests for ProcessingClientFactory."""

from unittest.mock import patch

import pytest

from watermark_eraser.config.exceptions import ConfigurationError
from watermark_eraser.config.settings import Settings
from watermark_eraser.processing.factory import ProcessingClientFactory
from watermark_eraser.processing.request_client import ProcessingRequestClient


class TestProcessingClientFactory:
    @pytest.mark.asyncio
    async def test_example_provider_needs_no_key(self) -> None:
        settings = Settings(image_provider="example", api_key="")
        client = ProcessingClientFactory.create(settings)
        assert isinstance(client, ProcessingRequestClient)
        assert await client.submit("QUJD", "image/png") == "QUJD"

    def test_uses_gemini_settings(self) -> None:
        settings = Settings(
            image_provider="gemini",
            api_key="gemini-key",
            gemini_base_url="https://gemini.test/v1beta",
            request_timeout_seconds=42,
        )
        with patch("watermark_eraser.processing.factory.GeminiClientAdapter") as mock_adapter:
            client = ProcessingClientFactory.create(settings)
        assert isinstance(client, ProcessingRequestClient)
        mock_adapter.assert_called_once_with(
            api_key="gemini-key",
            base_url="https://gemini.test/v1beta",
            timeout_seconds=42,
        )

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            image_provider="OpenAI",
            api_key="openai-key",
            openai_base_url="https://proxy.test/v1",
        )
        with patch("watermark_eraser.processing.factory.OpenAIClientAdapter") as mock_adapter:
            ProcessingClientFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=120.0,
            base_url="https://proxy.test/v1",
        )

    @pytest.mark.parametrize("provider", ["gemini", "openai"])
    def test_missing_api_key_is_fatal(self, provider: str) -> None:
        settings = Settings(image_provider=provider, api_key="  ")
        with pytest.raises(ConfigurationError, match="API_KEY"):
            ProcessingClientFactory.create(settings)

    def test_unknown_provider_raises_value_error(self) -> None:
        settings = Settings(image_provider="unknown", api_key="k")
        with pytest.raises(ValueError, match="Unknown image provider"):
            ProcessingClientFactory.create(settings)
