"""Shortest path search over the subway graph."""

import logging

import networkx as nx

from subway_routing.domain.models.errors import (
    NoPathError,
    SameStationError,
    UnknownStationError,
)
from subway_routing.domain.models.line import Line
from subway_routing.domain.models.path import ShortestPath
from subway_routing.domain.models.subway_graph import SubwayEdge, SubwayGraph

logger = logging.getLogger(__name__)


class DijkstraPathFinder:
    """Finds the shortest path by total distance using Dijkstra's algorithm.

    networkx settles equal-distance candidates in insertion order, so the
    result is stable for a graph built from the same lines in the same order.
    Between parallel edges the shorter one is ridden; on equal length the
    line with the lower surcharge wins, then the first inserted.
    """

    def find(self, graph: SubwayGraph, source_id: int, target_id: int) -> ShortestPath:
        """Find the shortest path from ``source_id`` to ``target_id``."""
        if source_id == target_id:
            raise SameStationError(source_id)
        for station_id in (source_id, target_id):
            if station_id not in graph:
                raise UnknownStationError(station_id)

        try:
            _, station_ids = nx.single_source_dijkstra(
                graph.nx_graph, source_id, target_id, weight=SubwayGraph.WEIGHT
            )
        except nx.NetworkXNoPath as e:
            raise NoPathError(source_id, target_id) from e

        hops = [
            self._choose_edge(graph, from_id, to_id)
            for from_id, to_id in zip(station_ids, station_ids[1:], strict=False)
        ]

        distance = hops[0].distance
        for hop in hops[1:]:
            distance = distance + hop.distance

        lines: list[Line] = []
        for hop in hops:
            if hop.line not in lines:
                lines.append(hop.line)

        path = ShortestPath(
            stations=tuple(graph.station(station_id) for station_id in station_ids),
            distance=distance,
            lines=tuple(lines),
        )
        logger.debug(
            f"Shortest path {source_id} -> {target_id}: "
            f"{[s.name for s in path.stations]} ({distance.value}km) "
            f"via {[line.name for line in lines]}"
        )
        return path

    @staticmethod
    def _choose_edge(graph: SubwayGraph, from_id: int, to_id: int) -> SubwayEdge:
        """Pick the edge ridden between two adjacent stations of the path."""
        return min(
            graph.edges_between(from_id, to_id),
            key=lambda edge: (edge.distance.value, edge.line.surcharge.amount),
        )

