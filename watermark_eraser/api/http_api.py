"""HTTP surface for the watermark eraser.

Routes:
- `GET /`: the single page.
- `GET /api/session`: current session snapshot.
- `POST /api/upload`: select an image (multipart field `file`).
- `POST /api/remove-watermark`: send the current image to the AI provider.
- `GET /api/download`: edited image as a PNG attachment.
- `POST /api/reset`: clear the session.

Every JSON reply carries the session snapshot. Failures reply with
`{"detail": <user-facing message>, "session": <snapshot>}`; provider errors
all share one message and the cause only goes to the log.

Routes that touch the session are coroutines, so the session is only ever
used from the event loop.
"""

from pathlib import Path
from urllib.parse import quote

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.encoders import jsonable_encoder
from fastapi.responses import FileResponse, JSONResponse, Response

from watermark_eraser.config.settings import Settings
from watermark_eraser.logging.logger import Log
from watermark_eraser.processing.exceptions import ProcessingError
from watermark_eraser.processing.factory import ProcessingClientFactory
from watermark_eraser.processing.request_client import ProcessingRequestClient
from watermark_eraser.session.exceptions import (
    NoImageUploadedError,
    NoResultError,
    RequestInFlightError,
)
from watermark_eraser.session.session import WatermarkSession
from watermark_eraser.transfer.exceptions import TransferError

INDEX_PAGE = Path(__file__).parent / "static" / "index.html"


def _session(request: Request) -> WatermarkSession:
    return request.app.state.session


def _snapshot(session: WatermarkSession) -> dict[str, object]:
    return jsonable_encoder(session.snapshot())


def _failure(session: WatermarkSession, status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "session": _snapshot(session)},
    )


def create_app(
    settings: Settings,
    request_client: ProcessingRequestClient | None = None,
) -> FastAPI:
    """Build the app and its single editing session.

    Raises:
        ConfigurationError: if the configured provider has no API key.
    """
    if request_client is None:
        request_client = ProcessingClientFactory.create(settings)

    app = FastAPI(title="Watermark Eraser")
    app.state.settings = settings
    app.state.session = WatermarkSession(request_client)
    Log.info(f"Watermark eraser ready (provider={settings.image_provider}, env={settings.app_env})")

    @app.get("/", include_in_schema=False)
    def index() -> FileResponse:
        return FileResponse(INDEX_PAGE, media_type="text/html")

    @app.get("/api/session")
    async def get_session(request: Request) -> JSONResponse:
        return JSONResponse(_snapshot(_session(request)))

    @app.post("/api/upload")
    async def upload(request: Request, file: UploadFile = File(...)) -> JSONResponse:
        session = _session(request)
        try:
            await session.upload(file)
        except TransferError:
            return _failure(session, 400, session.error or "")
        finally:
            await file.close()
        return JSONResponse(_snapshot(session))

    @app.post("/api/remove-watermark")
    async def remove_watermark(request: Request) -> JSONResponse:
        session = _session(request)
        try:
            await session.remove_watermark()
        except NoImageUploadedError as exc:
            return _failure(session, 400, str(exc))
        except RequestInFlightError as exc:
            return _failure(session, 409, str(exc))
        except (ProcessingError, TransferError):
            return _failure(session, 502, session.error or "")
        return JSONResponse(_snapshot(session))

    @app.get("/api/download")
    async def download(request: Request) -> Response:
        session = _session(request)
        try:
            artifact = session.download()
        except NoResultError as exc:
            return _failure(session, 404, str(exc))
        except TransferError as exc:
            Log.error(f"Stored result could not be decoded: {exc}")
            return _failure(session, 500, "The processed image could not be downloaded.")
        return Response(
            content=artifact.content,
            media_type=artifact.media_type,
            headers={
                "Content-Disposition": (
                    f"attachment; filename*=UTF-8''{quote(artifact.file_name)}"
                )
            },
        )

    @app.post("/api/reset")
    async def reset(request: Request) -> JSONResponse:
        session = _session(request)
        session.reset()
        return JSONResponse(_snapshot(session))

    return app
