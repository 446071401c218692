"""Errors surfaced by the application layer."""

from subway_routing.domain.models.errors import (
    NoPathError,
    PathErrorKind,
    PathRequestError,
    SameStationError,
    StationNotFoundError,
    UnknownStationError,
)
from subway_routing.domain.models.responses import ErrorDetails


class PathCalculateException(Exception):
    """The single error raised to callers when a path cannot be calculated.

    Callers tell failures apart by ``kind`` or by the message, never by the
    internal error type (available as ``__cause__``).
    """

    def __init__(self, message: str, kind: PathErrorKind) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    @classmethod
    def from_error(cls, error: PathRequestError) -> "PathCalculateException":
        """Translate a request-time domain error into a caller-facing message."""
        if isinstance(error, StationNotFoundError):
            message = f"존재하지 않는 역입니다. (id: {error.station_id})"
        elif isinstance(error, SameStationError):
            message = f"출발역과 도착역이 같습니다. (id: {error.station_id})"
        elif isinstance(error, UnknownStationError):
            message = f"노선에 등록되지 않은 역입니다. (id: {error.station_id})"
        elif isinstance(error, NoPathError):
            message = (
                f"출발역과 도착역이 연결되어 있지 않습니다. "
                f"(id: {error.source_id} -> {error.target_id})"
            )
        else:
            message = str(error)
        return cls(message, error.kind)

    def to_error_details(self) -> ErrorDetails:
        """Describe this failure as a bad request."""
        return ErrorDetails(status_code=400, reason=self.message, kind=self.kind)
