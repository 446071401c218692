"""Station repository port."""

from collections.abc import Iterable
from typing import Protocol

from subway_routing.domain.models.station import Station


class StationRepository(Protocol):
    """Port for retrieving stations."""

    def find_by_id(self, station_id: int) -> Station | None:
        """Find a station by its id."""
        ...

    def find_all(self) -> list[Station]:
        """Return every known station."""
        ...

    def find_all_by_id_in(self, station_ids: Iterable[int]) -> list[Station]:
        """Return the stations whose ids are in ``station_ids``, in any order."""
        ...
