import uvicorn

from watermark_eraser.api.http_api import create_app
from watermark_eraser.config.exceptions import ConfigurationError
from watermark_eraser.config.settings import Settings
from watermark_eraser.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> build provider client and app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        app = create_app(settings)
    except ConfigurationError as exc:
        Log.error(f"Startup failed: {exc}")
        raise SystemExit(1) from exc

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
