"""Builds the request-scoped subway graph from the network's lines."""

import logging
from collections.abc import Iterable

from subway_routing.domain.models.line import Line
from subway_routing.domain.models.subway_graph import SubwayGraph

logger = logging.getLogger(__name__)


class SubwayGraphBuilder:
    """Turns every line's sections into one weighted multigraph."""

    def build(self, lines: Iterable[Line]) -> SubwayGraph:
        """Build a graph with one edge per section.

        Each line's section sequence is consumed exactly once. Sections of
        different lines between the same stations stay separate edges.
        """
        graph = SubwayGraph()
        line_count = 0
        for line in lines:
            line_count += 1
            for section in line.sections():
                graph.add_section(section, line)

        logger.debug(
            f"Built subway graph from {line_count} line(s): "
            f"{len(graph)} station(s), {graph.section_count} section(s)"
        )
        return graph
