"""Path request and result domain models."""

from dataclasses import dataclass, field

from subway_routing.domain.models.distance import Distance
from subway_routing.domain.models.fare import Fare
from subway_routing.domain.models.line import Line
from subway_routing.domain.models.responses import PathResponse, StationResponse
from subway_routing.domain.models.station import Station


@dataclass(frozen=True)
class PathRequest:
    """Request for the shortest path between two station ids."""

    source_id: int
    target_id: int


@dataclass(frozen=True)
class ShortestPath:
    """Output of the path finder: stations in travel order and lines ridden."""

    stations: tuple[Station, ...]
    distance: Distance
    lines: tuple[Line, ...] = field(default=())

    @property
    def station_ids(self) -> list[int]:
        return [station.id for station in self.stations]


@dataclass(frozen=True)
class PathResult:
    """A computed path with its total distance and fare."""

    stations: tuple[Station, ...]
    distance: Distance
    fare: Fare
    lines: tuple[Line, ...] = field(default=())

    def to_response(self) -> PathResponse:
        """Build the outward-facing view of this result."""
        return PathResponse(
            stations=[StationResponse(id=s.id, name=s.name) for s in self.stations],
            distance=self.distance.value,
            fare=self.fare.amount,
        )
