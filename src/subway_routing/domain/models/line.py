"""Line and section domain models."""

import weakref
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from subway_routing.domain.models.distance import Distance
from subway_routing.domain.models.errors import InvalidSectionError
from subway_routing.domain.models.fare import Fare
from subway_routing.domain.models.station import Station


@dataclass(eq=False)
class Section:
    """A direct connection between two stations of one line.

    Sections are stored with a direction (up -> down) but are travelled in
    both directions. The owning line is held as a weak reference and is
    set when the section is handed to a ``Line``.
    """

    up_station: Station
    down_station: Station
    distance: Distance
    _line_ref: "weakref.ReferenceType[Line] | None" = field(
        default=None, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.distance, Distance):
            self.distance = Distance(self.distance)
        if self.up_station == self.down_station:
            raise InvalidSectionError(
                f"Section must connect two different stations, got {self.up_station.id} twice"
            )

    @property
    def line(self) -> "Line | None":
        """The line owning this section, if it is still alive."""
        if self._line_ref is None:
            return None
        return self._line_ref()

    def attach_to(self, line: "Line") -> None:
        """Record ``line`` as the owner of this section."""
        owner = self.line
        if owner is not None and owner is not line:
            raise InvalidSectionError(
                f"Section {self.up_station.name}-{self.down_station.name} "
                f"already belongs to {owner.name}"
            )
        self._line_ref = weakref.ref(line)


@dataclass(eq=False, init=False)
class Line:
    """A named chain of sections with a fare surcharge."""

    name: str
    surcharge: Fare
    _sections: list[Section] = field(repr=False)

    def __init__(
        self, name: str, surcharge: Fare | int = 0, sections: Iterable[Section] = ()
    ) -> None:
        self.name = name
        self.surcharge = surcharge if isinstance(surcharge, Fare) else Fare(surcharge)
        self._sections = []
        for section in sections:
            self.add_section(section)

    def add_section(self, section: Section) -> None:
        """Take ownership of ``section``."""
        section.attach_to(self)
        self._sections.append(section)

    def sections(self) -> Iterator[Section]:
        """Yield the sections in chain order, starting at the up terminus.

        Each call returns a fresh single-pass iterator. Sections that do not
        fit the chain are yielded afterwards in storage order.
        """
        down_stations = {section.down_station for section in self._sections}
        by_up_station = {section.up_station: section for section in self._sections}

        current = next(
            (s for s in self._sections if s.up_station not in down_stations), None
        )
        yielded: set[Section] = set()
        while current is not None and current not in yielded:
            yielded.add(current)
            yield current
            current = by_up_station.get(current.down_station)

        for section in self._sections:
            if section not in yielded:
                yield section

    def stations(self) -> Iterator[Station]:
        """Yield the stations of the line from the up terminus."""
        first = True
        for section in self.sections():
            if first:
                yield section.up_station
                first = False
            yield section.down_station

    def total_distance(self) -> Distance | None:
        """Sum of all section distances, or None for a line without sections."""
        total: Distance | None = None
        for section in self.sections():
            total = section.distance if total is None else total + section.distance
        return total
