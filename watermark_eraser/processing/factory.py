from typing import ClassVar

from watermark_eraser.config.exceptions import ConfigurationError
from watermark_eraser.config.settings import Settings
from watermark_eraser.processing.client_base import BaseImageEditClient
from watermark_eraser.processing.example_client_adapter import ExampleClientAdapter
from watermark_eraser.processing.gemini_client_adapter import GeminiClientAdapter
from watermark_eraser.processing.openai_client_adapter import OpenAIClientAdapter
from watermark_eraser.processing.request_client import ProcessingRequestClient


class ProcessingClientFactory:
    """Creates the request client for the configured image provider."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("gemini", "openai", "example")

    @classmethod
    def create(cls, settings: Settings) -> ProcessingRequestClient:
        """Create a configured request client from application settings.

        Raises:
            ValueError: for an unknown provider.
            ConfigurationError: if a networked provider has no API key.
        """
        provider = settings.image_provider.lower()
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown image provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        return ProcessingRequestClient(
            client=cls._create_adapter(provider, settings),
            model=cls._resolve_model_name(provider, settings),
        )

    @classmethod
    def _create_adapter(cls, provider: str, settings: Settings) -> BaseImageEditClient:
        if provider == "example":
            return ExampleClientAdapter()
        api_key = cls._require_api_key(provider, settings)
        if provider == "openai":
            return OpenAIClientAdapter(
                api_key=api_key,
                timeout_seconds=settings.request_timeout_seconds,
                base_url=settings.openai_base_url,
            )
        return GeminiClientAdapter(
            api_key=api_key,
            base_url=settings.gemini_base_url,
            timeout_seconds=settings.request_timeout_seconds,
        )

    @classmethod
    def _require_api_key(cls, provider: str, settings: Settings) -> str:
        key = settings.api_key.strip()
        if not key:
            raise ConfigurationError(
                f"API_KEY environment variable not set (required for image_provider={provider})"
            )
        return key

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.gemini_model_name,
            "openai": settings.openai_model_name,
            "example": "example",
        }
        return key_map[provider]
