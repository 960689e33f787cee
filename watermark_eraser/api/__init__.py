from watermark_eraser.api.http_api import create_app

__all__ = ["create_app"]
