"""Tests for the Dijkstra path finder."""

import random

import pytest

from subway_routing.application.services import DijkstraPathFinder, SubwayGraphBuilder
from subway_routing.domain.models import (
    Distance,
    Line,
    NoPathError,
    SameStationError,
    Section,
    ShortestPath,
    Station,
    SubwayGraph,
    UnknownStationError,
)
from tests.network_fixtures import (
    GANGNAM,
    GYODAE,
    NAMBU_TERMINAL,
    YANGJAE,
    build_scenario_network,
)


def _find(lines: list[Line], source_id: int, target_id: int) -> ShortestPath:
    graph = SubwayGraphBuilder().build(lines)
    return DijkstraPathFinder().find(graph, source_id, target_id)


def _brute_force_distance(graph: SubwayGraph, source_id: int, target_id: int) -> int | None:
    """Minimum distance over every simple path, or None when unreachable."""
    best: int | None = None

    def walk(station_id: int, visited: set[int], total: int) -> None:
        nonlocal best
        if station_id == target_id:
            best = total if best is None else min(best, total)
            return
        for edge in graph.edges_of(station_id):
            if edge.neighbor.id not in visited:
                walk(edge.neighbor.id, visited | {edge.neighbor.id}, total + edge.distance.value)

    walk(source_id, {source_id}, 0)
    return best


def _random_lines(seed: int, station_count: int = 7, section_count: int = 9) -> list[Line]:
    rng = random.Random(seed)
    stations = [Station(i, f"역{i}") for i in range(1, station_count + 1)]
    lines = []
    for number in range(section_count):
        up, down = rng.sample(stations, 2)
        section = Section(up, down, rng.randint(1, 9))
        lines.append(Line(f"{number}호선", rng.choice([0, 100, 200, 1000]), [section]))
    return lines


def test_direct_line_is_the_shortest_path() -> None:
    """Given 강남 and 양재, when finding the path, then the direct 신분당선 section is used."""
    network = build_scenario_network()

    path = _find(network.lines, GANGNAM, YANGJAE)

    assert [s.name for s in path.stations] == ["강남역", "양재역"]
    assert path.distance == Distance(10)
    assert [line.name for line in path.lines] == ["신분당선"]


def test_path_with_transfer_uses_both_lines() -> None:
    """Given 강남 and 남부터미널, when finding the path, then it goes through 교대 on two lines."""
    network = build_scenario_network()

    path = _find(network.lines, GANGNAM, NAMBU_TERMINAL)

    assert [s.name for s in path.stations] == ["강남역", "교대역", "남부터미널역"]
    assert path.distance == Distance(8)
    assert [line.name for line in path.lines] == ["이호선", "삼호선"]


def test_path_against_section_direction() -> None:
    """Given a path running against the stored section direction, when finding it, then it is found."""
    network = build_scenario_network()

    path = _find(network.lines, YANGJAE, GYODAE)

    assert [s.id for s in path.stations] == [YANGJAE, NAMBU_TERMINAL, GYODAE]
    assert path.distance == Distance(5)
    assert [line.name for line in path.lines] == ["삼호선"]


def test_same_station_fails() -> None:
    """Given equal source and target, when finding the path, then SameStationError is raised."""
    network = build_scenario_network()

    with pytest.raises(SameStationError):
        _find(network.lines, GANGNAM, GANGNAM)


def test_same_unknown_station_still_fails_as_same_station() -> None:
    """Given equal ids absent from the graph, when finding the path, then SameStationError wins."""
    with pytest.raises(SameStationError):
        _find([], 99, 99)


@pytest.mark.parametrize(("source_id", "target_id"), [(99, GANGNAM), (GANGNAM, 99)])
def test_unknown_station_fails(source_id: int, target_id: int) -> None:
    """Given a station id that is not in the graph, when finding the path, then UnknownStationError is raised."""
    network = build_scenario_network()

    with pytest.raises(UnknownStationError) as exc_info:
        _find(network.lines, source_id, target_id)
    assert exc_info.value.station_id == 99


def test_empty_graph_reports_unknown_station() -> None:
    """Given no lines, when finding any path, then UnknownStationError is raised."""
    with pytest.raises(UnknownStationError):
        _find([], GANGNAM, YANGJAE)


def test_disconnected_stations_fail_with_no_path() -> None:
    """Given stations on disconnected lines, when finding the path, then NoPathError is raised."""
    a, b, c, d = (Station(i, name) for i, name in enumerate("ABCD", start=1))
    lines = [Line("1호선", 0, [Section(a, b, 3)]), Line("2호선", 0, [Section(c, d, 4)])]

    with pytest.raises(NoPathError):
        _find(lines, 1, 4)


def test_lighter_parallel_edge_determines_line() -> None:
    """Given two lines between the same stations, when finding the path, then the shorter one is ridden."""
    a, b = Station(1, "A"), Station(2, "B")
    local = Line("완행", 0, [Section(a, b, 6)])
    express = Line("급행", 900, [Section(b, a, 4)])

    path = _find([local, express], 1, 2)

    assert path.distance == Distance(4)
    assert [line.name for line in path.lines] == ["급행"]


def test_equal_parallel_edges_prefer_lower_surcharge() -> None:
    """Given equally long parallel edges, when finding the path, then the cheaper line is ridden."""
    a, b = Station(1, "A"), Station(2, "B")
    premium = Line("프리미엄", 900, [Section(a, b, 5)])
    regular = Line("일반", 100, [Section(a, b, 5)])

    path = _find([premium, regular], 1, 2)

    assert [line.name for line in path.lines] == ["일반"]


def test_result_is_deterministic_for_equal_length_paths() -> None:
    """Given several equally short paths, when finding repeatedly, then the same one is returned."""
    network = build_scenario_network()

    results = {
        tuple(s.id for s in _find(network.lines, GANGNAM, YANGJAE).stations) for _ in range(20)
    }

    assert results == {(GANGNAM, YANGJAE)}


@pytest.mark.parametrize("seed", range(25))
def test_distance_matches_brute_force_enumeration(seed: int) -> None:
    """Given a small random network, when finding paths, then the distance is the true minimum."""
    lines = _random_lines(seed)
    graph = SubwayGraphBuilder().build(lines)
    finder = DijkstraPathFinder()
    station_ids = sorted(s.id for s in graph.stations())

    for source_id in station_ids:
        for target_id in station_ids:
            if source_id == target_id:
                continue
            expected = _brute_force_distance(graph, source_id, target_id)
            if expected is None:
                with pytest.raises(NoPathError):
                    finder.find(graph, source_id, target_id)
                continue

            path = finder.find(graph, source_id, target_id)
            assert path.distance.value == expected
            assert path.stations[0].id == source_id
            assert path.stations[-1].id == target_id
            assert len(path.stations) >= 2
