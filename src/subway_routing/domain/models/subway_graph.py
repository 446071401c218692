"""Weighted multigraph of the subway network."""

from dataclasses import dataclass

import networkx as nx

from subway_routing.domain.models.distance import Distance
from subway_routing.domain.models.line import Line, Section
from subway_routing.domain.models.station import Station


@dataclass(frozen=True)
class SubwayEdge:
    """One traversable section as seen from one of its stations."""

    neighbor: Station
    distance: Distance
    line: Line
    section: Section


class SubwayGraph:
    """Undirected multigraph keyed by station id.

    Every section is one edge weighted by its distance and tagged with its
    line. Parallel edges between the same pair of stations are kept, in
    insertion order.
    """

    WEIGHT = "weight"

    def __init__(self) -> None:
        self._graph = nx.MultiGraph()

    def add_station(self, station: Station) -> None:
        if station.id not in self._graph:
            self._graph.add_node(station.id, station=station)

    def add_section(self, section: Section, line: Line) -> None:
        self.add_station(section.up_station)
        self.add_station(section.down_station)
        self._graph.add_edge(
            section.up_station.id,
            section.down_station.id,
            weight=section.distance.value,
            distance=section.distance,
            line=line,
            section=section,
        )

    def __contains__(self, station_id: object) -> bool:
        return station_id in self._graph

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def section_count(self) -> int:
        return self._graph.number_of_edges()

    @property
    def nx_graph(self) -> nx.MultiGraph:
        """The underlying networkx graph. Callers must not mutate it."""
        return self._graph

    def station(self, station_id: int) -> Station:
        """Return the station stored for ``station_id``. Raises KeyError if unknown."""
        return self._graph.nodes[station_id]["station"]

    def stations(self) -> list[Station]:
        return [data["station"] for _, data in self._graph.nodes(data=True)]

    def edges_of(self, station_id: int) -> list[SubwayEdge]:
        """Return every edge touching ``station_id`` in insertion order."""
        edges = []
        for _, neighbor_id, data in self._graph.edges(station_id, data=True):
            edges.append(
                SubwayEdge(
                    neighbor=self.station(neighbor_id),
                    distance=data["distance"],
                    line=data["line"],
                    section=data["section"],
                )
            )
        return edges

    def edges_between(self, first_id: int, second_id: int) -> list[SubwayEdge]:
        """Return the parallel edges between two stations in insertion order."""
        if not self._graph.has_edge(first_id, second_id):
            return []
        neighbor = self.station(second_id)
        return [
            SubwayEdge(
                neighbor=neighbor,
                distance=data["distance"],
                line=data["line"],
                section=data["section"],
            )
            for data in self._graph[first_id][second_id].values()
        ]
