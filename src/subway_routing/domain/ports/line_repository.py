"""Line repository port."""

from collections.abc import Iterable
from typing import Protocol

from subway_routing.domain.models.line import Line


class LineRepository(Protocol):
    """Port for retrieving lines together with their sections."""

    def find_by_id(self, name: str) -> Line | None:
        """Find a line by its name."""
        ...

    def find_all(self) -> list[Line]:
        """Return every line of the network."""
        ...

    def find_all_by_id_in(self, names: Iterable[str]) -> list[Line]:
        """Return the lines whose names are in ``names``, in any order."""
        ...
