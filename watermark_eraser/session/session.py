from watermark_eraser.logging.logger import Log
from watermark_eraser.processing.exceptions import ProcessingError
from watermark_eraser.processing.request_client import ProcessingRequestClient
from watermark_eraser.session.exceptions import (
    NoImageUploadedError,
    NoResultError,
    RequestInFlightError,
)
from watermark_eraser.session.models import ProcessingResult, RequestState, SessionSnapshot
from watermark_eraser.transfer.adapter import TransferAdapter, download_file_name
from watermark_eraser.transfer.exceptions import FileReadError, InvalidInputError, TransferError
from watermark_eraser.transfer.models import DownloadArtifact, UploadedImage, UploadSource

INVALID_INPUT_MESSAGE = "Please upload a valid image file."
FILE_READ_MESSAGE = "Error reading the image file."
NO_IMAGE_MESSAGE = "Please upload an image first."
PROCESSING_FAILED_MESSAGE = "Could not process the image. Please try again."


class WatermarkSession:
    """Upload / remove / download / reset state machine for a single user.

    States: IDLE -> IN_FLIGHT -> SUCCEEDED | FAILED. Only one request may be
    in flight. Every accepted upload and every reset bumps the upload
    generation; a response that completes under an older generation is
    dropped, so a result always belongs to the current image.
    """

    def __init__(
        self,
        request_client: ProcessingRequestClient,
        transfer: TransferAdapter | None = None,
    ) -> None:
        self._request_client = request_client
        self._transfer = transfer if transfer is not None else TransferAdapter()
        self._image: UploadedImage | None = None
        self._result: ProcessingResult | None = None
        self._state = RequestState.IDLE
        self._error: str | None = None
        self._generation = 0
        self._in_flight_generation: int | None = None

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def image(self) -> UploadedImage | None:
        return self._image

    @property
    def result(self) -> ProcessingResult | None:
        return self._result

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def can_submit(self) -> bool:
        return self._image is not None and self._state is not RequestState.IN_FLIGHT

    async def upload(self, source: UploadSource) -> UploadedImage:
        """Replace the current image with a newly selected file.

        On failure the previous image, result and state are left as they were.
        """
        try:
            image = await self._transfer.read_upload(source)
        except InvalidInputError as exc:
            Log.warning(f"Rejected upload: {exc}")
            self._error = INVALID_INPUT_MESSAGE
            raise
        except FileReadError as exc:
            Log.error(f"Upload could not be read: {exc}")
            self._error = FILE_READ_MESSAGE
            raise

        self._generation += 1
        self._image = image
        self._result = None
        self._error = None
        if self._state is not RequestState.IN_FLIGHT:
            self._state = RequestState.IDLE
        Log.info(f"Accepted upload '{image.file_name}' (generation {self._generation})")
        return image

    async def remove_watermark(self) -> ProcessingResult | None:
        """Send the current image to the provider and store the edited image.

        Returns None when the image was replaced or the session reset while
        the request was running.

        Raises:
            NoImageUploadedError: if nothing has been uploaded.
            RequestInFlightError: if a request is already running.
            ProcessingError: if the provider call fails or returns no image.
            TransferError: if the returned payload is not valid base64.
        """
        if self._image is None:
            self._error = NO_IMAGE_MESSAGE
            raise NoImageUploadedError(NO_IMAGE_MESSAGE)
        if self._state is RequestState.IN_FLIGHT:
            raise RequestInFlightError("A watermark removal request is already running")

        generation = self._generation
        image = self._image
        self._state = RequestState.IN_FLIGHT
        self._in_flight_generation = generation
        self._error = None
        self._result = None

        try:
            encoded = self._transfer.encode(image)
            payload = await self._request_client.submit(encoded.payload, encoded.media_type)
            displayable_form = self._transfer.decode(payload)
            # Download must be able to turn the result back into bytes.
            self._transfer.to_bytes(displayable_form)
        except (TransferError, ProcessingError) as exc:
            if self._is_stale(generation):
                return None
            Log.error(f"Watermark removal failed for '{image.file_name}': {exc}")
            self._in_flight_generation = None
            self._state = RequestState.FAILED
            self._error = PROCESSING_FAILED_MESSAGE
            raise
        else:
            if self._is_stale(generation):
                return None
            self._in_flight_generation = None
            self._result = ProcessingResult(displayable_form=displayable_form)
            self._state = RequestState.SUCCEEDED
            Log.info(f"Watermark removed from '{image.file_name}'")
            return self._result
        finally:
            if self._in_flight_generation == generation:
                self._release_interrupted(generation, image)

    def _release_interrupted(self, generation: int, image: UploadedImage) -> None:
        """Leave IN_FLIGHT after an unexpected error or cancellation."""
        Log.error(f"Watermark removal for '{image.file_name}' ended without an outcome")
        self._in_flight_generation = None
        if generation == self._generation:
            self._state = RequestState.FAILED
            self._error = PROCESSING_FAILED_MESSAGE
        else:
            self._state = RequestState.IDLE

    def download(self) -> DownloadArtifact:
        """Return the edited image as a PNG file named after the upload."""
        if self._result is None:
            raise NoResultError("No processed image to download")
        file_name = self._image.file_name if self._image is not None else None
        return DownloadArtifact(
            file_name=download_file_name(file_name),
            content=self._transfer.to_bytes(self._result.displayable_form),
        )

    def reset(self) -> None:
        self._generation += 1
        self._image = None
        self._result = None
        self._error = None
        self._state = RequestState.IDLE
        Log.info("Session reset")

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self._state,
            file_name=self._image.file_name if self._image is not None else None,
            original_image=self._image.displayable_form if self._image is not None else None,
            processed_image=self._result.displayable_form if self._result is not None else None,
            error=self._error,
            can_submit=self.can_submit,
            can_download=self._result is not None,
        )

    def _is_stale(self, generation: int) -> bool:
        if generation == self._generation:
            return False
        Log.warning("Discarding watermark removal outcome for a replaced image")
        if self._in_flight_generation == generation:
            self._in_flight_generation = None
            self._state = RequestState.IDLE
        return True
