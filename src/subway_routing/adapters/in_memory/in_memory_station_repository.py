"""In-memory station repository adapter."""

from collections.abc import Iterable

from subway_routing.domain.models.station import Station
from subway_routing.domain.ports.station_repository import StationRepository


class InMemoryStationRepository(StationRepository):
    """Station repository backed by a dict keyed by station id."""

    def __init__(self, stations: Iterable[Station] = ()) -> None:
        """Initialize with the known stations."""
        self._stations = {station.id: station for station in stations}

    def find_by_id(self, station_id: int) -> Station | None:
        """Find a station by its id."""
        return self._stations.get(station_id)

    def find_all(self) -> list[Station]:
        """Return every known station in insertion order."""
        return list(self._stations.values())

    def find_all_by_id_in(self, station_ids: Iterable[int]) -> list[Station]:
        """Return the known stations among ``station_ids``, skipping unknown ids."""
        wanted = set(station_ids)
        return [station for station_id, station in self._stations.items() if station_id in wanted]
