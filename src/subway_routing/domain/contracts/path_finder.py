"""Protocol for shortest path search."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from subway_routing.domain.models.path import ShortestPath
    from subway_routing.domain.models.subway_graph import SubwayGraph


class PathFinderProtocol(Protocol):
    """Protocol for finding the shortest path through a built subway graph."""

    def find(self, graph: "SubwayGraph", source_id: int, target_id: int) -> "ShortestPath":
        """Find the shortest path between two stations.

        Args:
            graph: The request-scoped subway graph.
            source_id: Id of the departure station.
            target_id: Id of the arrival station.

        Returns:
            The stations in travel order, total distance and lines ridden.

        Raises:
            SameStationError: If both ids are equal.
            UnknownStationError: If an id is not a station of the graph.
            NoPathError: If the stations are not connected.
        """
        ...
