"""Distance value type."""

from dataclasses import dataclass
from functools import total_ordering

from subway_routing.domain.models.errors import InvalidDistanceError


@total_ordering
@dataclass(frozen=True)
class Distance:
    """A positive whole-number distance between stations (kilometers)."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidDistanceError(f"Distance must be an integer, got {self.value!r}")
        if self.value <= 0:
            raise InvalidDistanceError(f"Distance must be positive, got {self.value}")

    def __add__(self, other: "Distance") -> "Distance":
        if not isinstance(other, Distance):
            return NotImplemented
        return Distance(self.value + other.value)

    def __lt__(self, other: "Distance") -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.value < other.value

    def __int__(self) -> int:
        return self.value
