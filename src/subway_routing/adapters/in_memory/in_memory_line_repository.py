"""In-memory line repository adapter."""

from collections.abc import Iterable

from subway_routing.domain.models.line import Line
from subway_routing.domain.ports.line_repository import LineRepository


class InMemoryLineRepository(LineRepository):
    """Line repository backed by a dict keyed by line name."""

    def __init__(self, lines: Iterable[Line] = ()) -> None:
        """Initialize with the lines of the network."""
        self._lines = {line.name: line for line in lines}

    def find_by_id(self, name: str) -> Line | None:
        """Find a line by its name."""
        return self._lines.get(name)

    def find_all(self) -> list[Line]:
        """Return every line in insertion order."""
        return list(self._lines.values())

    def find_all_by_id_in(self, names: Iterable[str]) -> list[Line]:
        """Return the known lines among ``names``."""
        wanted = set(names)
        return [line for name, line in self._lines.items() if name in wanted]
