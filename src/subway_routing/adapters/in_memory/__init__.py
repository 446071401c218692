"""In-memory repository adapters."""

from subway_routing.adapters.in_memory.in_memory_line_repository import InMemoryLineRepository
from subway_routing.adapters.in_memory.in_memory_station_repository import (
    InMemoryStationRepository,
)

__all__ = [
    "InMemoryLineRepository",
    "InMemoryStationRepository",
]
