from watermark_eraser.processing.client_base import BaseImageEditClient
from watermark_eraser.processing.factory import ProcessingClientFactory
from watermark_eraser.processing.request_client import ProcessingRequestClient

__all__ = ["BaseImageEditClient", "ProcessingClientFactory", "ProcessingRequestClient"]
