# -*- coding: utf-8 -*-
"""Shortest-path search over a routing graph.

Query points are first *anchored* to their nearest graph node, then
Dijkstra's algorithm runs between the two anchors. Each query allocates its
own distance/predecessor maps and priority queue, so concurrent queries on
the same (frozen) graph don't interfere.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from typing import TYPE_CHECKING

from campus_nav.enums import RouteStatus
from campus_nav.geo_utils import distance
from campus_nav.geo_utils import path_length
from campus_nav.routing.models import RouteResult

if TYPE_CHECKING:
    from campus_nav.geo_utils import GeoPoint
    from campus_nav.routing.models import Node
    from campus_nav.routing.models import RoutingGraph

logger = logging.getLogger(__name__)


class DijkstraSolver:
    """Nearest-node anchoring and Dijkstra search on a routing graph."""

    def __init__(self, graph: RoutingGraph) -> None:
        self.graph = graph

    @property
    def name(self) -> str:
        """Human-readable name of the solver (for logging / UI)."""
        return self.__class__.__name__

    def nearest_node(self, point: GeoPoint) -> Node | None:
        """Return the node closest to ``point``, or None on an empty graph.

        Ties go to the node created first.
        """
        if self.graph.is_empty:
            return None
        return min(self.graph, key=lambda node: distance(node.point, point))

    def _search(self, start: Node, end: Node) -> list[GeoPoint] | None:
        distances: dict[str, float] = {start.key: 0.0}
        previous: dict[str, str] = {}
        # The counter keeps heap ordering stable among equal distances
        counter = itertools.count()
        queue: list[tuple[float, int, str]] = [(0.0, next(counter), start.key)]

        while queue:
            current_distance, _, current_key = heapq.heappop(queue)

            if current_key == end.key:
                path: list[GeoPoint] = []
                step: str | None = current_key
                while step is not None:
                    path.append(self.graph.nodes[step].point)
                    step = previous.get(step)
                path.reverse()
                return path

            # Stale entry: a shorter distance was recorded after this push
            if current_distance > distances.get(current_key, math.inf):
                continue

            for edge in self.graph.nodes[current_key].edges:
                candidate = current_distance + edge.weight
                if candidate < distances.get(edge.destination_key, math.inf):
                    distances[edge.destination_key] = candidate
                    previous[edge.destination_key] = current_key
                    heapq.heappush(
                        queue, (candidate, next(counter), edge.destination_key)
                    )

        return None

    def route(self, start: GeoPoint, end: GeoPoint) -> RouteResult:
        """Compute the shortest path between two arbitrary points.

        Args:
            start: Query start point, anchored to its nearest node
            end: Query end point, anchored to its nearest node

        Returns:
            A RouteResult; ``status`` tells apart an empty graph
            (NO_DATA) from anchors in different components (UNREACHABLE)
        """
        start_node = self.nearest_node(start)
        end_node = self.nearest_node(end)
        if start_node is None or end_node is None:
            logger.debug("No route: routing graph is empty")
            return RouteResult.not_found(RouteStatus.NO_DATA)

        path = self._search(start_node, end_node)
        if path is None:
            logger.debug(
                "No route: %s and %s are not connected", start_node.key, end_node.key
            )
            return RouteResult.not_found(RouteStatus.UNREACHABLE)

        return RouteResult(
            status=RouteStatus.FOUND,
            points=path,
            distance_m=path_length(path),
        )

    def shortest_path(self, start: GeoPoint, end: GeoPoint) -> list[GeoPoint] | None:
        """Shortest path as a list of points, or None if there is none.

        When both points anchor to the same node the path is that single
        node's point.
        """
        result = self.route(start, end)
        return result.points if result.found else None
