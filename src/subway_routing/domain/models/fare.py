"""Fare value type."""

from dataclasses import dataclass
from functools import total_ordering

from subway_routing.domain.models.errors import InvalidFareError


@total_ordering
@dataclass(frozen=True)
class Fare:
    """A non-negative monetary amount (won)."""

    amount: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidFareError(f"Fare must be an integer, got {self.amount!r}")
        if self.amount < 0:
            raise InvalidFareError(f"Fare must not be negative, got {self.amount}")

    def __add__(self, other: "Fare") -> "Fare":
        if not isinstance(other, Fare):
            return NotImplemented
        return Fare(self.amount + other.amount)

    def __lt__(self, other: "Fare") -> bool:
        if not isinstance(other, Fare):
            return NotImplemented
        return self.amount < other.amount

    def __int__(self) -> int:
        return self.amount
