from dataclasses import dataclass
from enum import Enum


class RequestState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ProcessingResult:
    """Edited image ready for display; always image/png."""

    displayable_form: str


@dataclass(frozen=True)
class SessionSnapshot:
    """What the page needs to render the current session."""

    state: RequestState
    file_name: str | None
    original_image: str | None
    processed_image: str | None
    error: str | None
    can_submit: bool
    can_download: bool
