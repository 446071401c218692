"""Rider context: who is travelling, as far as fares are concerned."""

from dataclasses import dataclass

from subway_routing.domain.models.errors import InvalidAgeError


@dataclass(frozen=True)
class Anonymous:
    """A rider without a resolved identity. No age discount applies."""


@dataclass(frozen=True)
class Authenticated:
    """A logged-in rider whose age drives the fare discount."""

    age: int

    def __post_init__(self) -> None:
        if self.age < 0:
            raise InvalidAgeError(f"Age must not be negative, got {self.age}")


RiderContext = Anonymous | Authenticated
