"""Path service: the use case tying lookup, graph search and fares together."""

import logging

from subway_routing.application.errors import PathCalculateException
from subway_routing.application.services.fare_calculator import FareCalculator
from subway_routing.application.services.path_finder import DijkstraPathFinder
from subway_routing.application.services.subway_graph_builder import SubwayGraphBuilder
from subway_routing.domain.contracts.fare_calculator import FareCalculatorProtocol
from subway_routing.domain.contracts.path_finder import PathFinderProtocol
from subway_routing.domain.models.errors import (
    PathRequestError,
    SameStationError,
    StationNotFoundError,
)
from subway_routing.domain.models.path import PathRequest, PathResult, ShortestPath
from subway_routing.domain.models.responses import PathResponse
from subway_routing.domain.models.rider_context import RiderContext
from subway_routing.domain.models.station import Station
from subway_routing.domain.ports.line_repository import LineRepository
from subway_routing.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class PathService:
    """Calculates the shortest path between two stations and its fare.

    Every call builds a fresh graph from the current lines and keeps no
    state between calls.
    """

    def __init__(
        self,
        station_repository: StationRepository,
        line_repository: LineRepository,
        path_finder: PathFinderProtocol | None = None,
        fare_calculator: FareCalculatorProtocol | None = None,
        graph_builder: SubwayGraphBuilder | None = None,
    ) -> None:
        """Initialize with the station and line lookups.

        The path finder, fare calculator and graph builder default to the
        standard implementations with the default fare policy.
        """
        self._station_repository = station_repository
        self._line_repository = line_repository
        self._path_finder = path_finder or DijkstraPathFinder()
        self._fare_calculator = fare_calculator or FareCalculator()
        self._graph_builder = graph_builder or SubwayGraphBuilder()

    def calculate_path(self, rider: RiderContext, request: PathRequest) -> PathResponse:
        """Calculate the path for ``request`` and return the caller-facing view.

        Raises:
            PathCalculateException: If the request cannot be served.
        """
        return self.find_path(rider, request).to_response()

    def find_path(self, rider: RiderContext, request: PathRequest) -> PathResult:
        """Calculate the path for ``request`` as a domain result.

        Raises:
            PathCalculateException: If the request cannot be served.
        """
        try:
            return self._find_path(rider, request)
        except PathRequestError as e:
            logger.warning(
                f"Rejected path request {request.source_id} -> {request.target_id}: {e}"
            )
            raise PathCalculateException.from_error(e) from e

    def _find_path(self, rider: RiderContext, request: PathRequest) -> PathResult:
        source = self._get_station(request.source_id)
        target = self._get_station(request.target_id)
        if source == target:
            raise SameStationError(source.id)

        graph = self._graph_builder.build(self._line_repository.find_all())
        path = self._path_finder.find(graph, source.id, target.id)
        fare = self._fare_calculator.calculate(path.distance, path.lines, rider)

        return PathResult(
            stations=self._hydrate_stations(path),
            distance=path.distance,
            fare=fare,
            lines=path.lines,
        )

    def _get_station(self, station_id: int) -> Station:
        station = self._station_repository.find_by_id(station_id)
        if station is None:
            raise StationNotFoundError(station_id)
        return station

    def _hydrate_stations(self, path: ShortestPath) -> tuple[Station, ...]:
        """Look up the path's stations and put them in travel order."""
        found = {
            station.id: station
            for station in self._station_repository.find_all_by_id_in(path.station_ids)
        }
        return tuple(found.get(station.id, station) for station in path.stations)
