"""Error taxonomy for the subway routing domain."""

from enum import StrEnum


class PathErrorKind(StrEnum):
    """Categories of request-time path calculation failures."""

    SAME_STATION = "same_station"
    UNKNOWN_STATION = "unknown_station"
    NO_PATH = "no_path"
    STATION_NOT_FOUND = "station_not_found"


class SubwayRoutingError(Exception):
    """Base class for all domain errors."""


class InvalidDistanceError(SubwayRoutingError):
    """Raised when a distance is not a positive whole number."""


class InvalidFareError(SubwayRoutingError):
    """Raised when a fare amount is negative."""


class InvalidSectionError(SubwayRoutingError):
    """Raised when a section connects a station to itself or is owned twice."""


class InvalidAgeError(SubwayRoutingError):
    """Raised when a rider age is negative."""


class PathRequestError(SubwayRoutingError):
    """Base class for request-time failures, each tagged with a kind."""

    kind: PathErrorKind


class SameStationError(PathRequestError):
    """Raised when source and target are the same station."""

    kind = PathErrorKind.SAME_STATION

    def __init__(self, station_id: int) -> None:
        self.station_id = station_id
        super().__init__(f"Source and target are the same station: {station_id}")


class UnknownStationError(PathRequestError):
    """Raised when a station id is not a vertex of the subway graph."""

    kind = PathErrorKind.UNKNOWN_STATION

    def __init__(self, station_id: int) -> None:
        self.station_id = station_id
        super().__init__(f"Station {station_id} is not part of any line")


class NoPathError(PathRequestError):
    """Raised when two known stations are not connected."""

    kind = PathErrorKind.NO_PATH

    def __init__(self, source_id: int, target_id: int) -> None:
        self.source_id = source_id
        self.target_id = target_id
        super().__init__(f"No path between station {source_id} and station {target_id}")


class StationNotFoundError(PathRequestError):
    """Raised when the station lookup does not know a station id."""

    kind = PathErrorKind.STATION_NOT_FOUND

    def __init__(self, station_id: int) -> None:
        self.station_id = station_id
        super().__init__(f"Station not found: {station_id}")
