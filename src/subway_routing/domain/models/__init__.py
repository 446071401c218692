"""Domain models for subway path finding and fares."""

from subway_routing.domain.models.distance import Distance
from subway_routing.domain.models.errors import (
    InvalidAgeError,
    InvalidDistanceError,
    InvalidFareError,
    InvalidSectionError,
    NoPathError,
    PathErrorKind,
    PathRequestError,
    SameStationError,
    StationNotFoundError,
    SubwayRoutingError,
    UnknownStationError,
)
from subway_routing.domain.models.fare import Fare
from subway_routing.domain.models.fare_breakdown import FareBreakdown
from subway_routing.domain.models.fare_policy import FarePolicy
from subway_routing.domain.models.line import Line, Section
from subway_routing.domain.models.path import PathRequest, PathResult, ShortestPath
from subway_routing.domain.models.responses import (
    ErrorDetails,
    PathResponse,
    StationResponse,
)
from subway_routing.domain.models.rider_context import (
    Anonymous,
    Authenticated,
    RiderContext,
)
from subway_routing.domain.models.station import Station
from subway_routing.domain.models.subway_graph import SubwayEdge, SubwayGraph

__all__ = [
    "Anonymous",
    "Authenticated",
    "Distance",
    "ErrorDetails",
    "Fare",
    "FareBreakdown",
    "FarePolicy",
    "InvalidAgeError",
    "InvalidDistanceError",
    "InvalidFareError",
    "InvalidSectionError",
    "Line",
    "NoPathError",
    "PathErrorKind",
    "PathRequest",
    "PathRequestError",
    "PathResponse",
    "PathResult",
    "RiderContext",
    "SameStationError",
    "Section",
    "ShortestPath",
    "Station",
    "StationNotFoundError",
    "StationResponse",
    "SubwayEdge",
    "SubwayGraph",
    "SubwayRoutingError",
    "UnknownStationError",
]
