"""Application services."""

from subway_routing.application.services.fare_calculator import FareCalculator
from subway_routing.application.services.path_finder import DijkstraPathFinder
from subway_routing.application.services.path_service import PathService
from subway_routing.application.services.subway_graph_builder import SubwayGraphBuilder

__all__ = [
    "DijkstraPathFinder",
    "FareCalculator",
    "PathService",
    "SubwayGraphBuilder",
]
