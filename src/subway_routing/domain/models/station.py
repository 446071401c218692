"""Station domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Station:
    """Represents a subway station. Two stations are equal when their ids are."""

    id: int
    name: str = field(compare=False)
