"""Contracts for the path finding and fare calculation seams."""

from subway_routing.domain.contracts.fare_calculator import FareCalculatorProtocol
from subway_routing.domain.contracts.path_finder import PathFinderProtocol

__all__ = [
    "FareCalculatorProtocol",
    "PathFinderProtocol",
]
