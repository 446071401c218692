"""Domain layer - core business models and ports."""

from subway_routing.domain.models import (
    Distance,
    Fare,
    Line,
    PathRequest,
    PathResult,
    Section,
    Station,
)
from subway_routing.domain.ports import (
    LineRepository,
    StationRepository,
)

__all__ = [
    "Distance",
    "Fare",
    "Line",
    "LineRepository",
    "PathRequest",
    "PathResult",
    "Section",
    "Station",
    "StationRepository",
]
