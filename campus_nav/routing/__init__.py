# -*- coding: utf-8 -*-
"""Routing graph construction and shortest-path search.

Usage::

    from campus_nav.features import parse_feature_collection
    from campus_nav.routing import DijkstraSolver
    from campus_nav.routing import build_routing_graph

    graph = build_routing_graph(parse_feature_collection(text))
    path = DijkstraSolver(graph).shortest_path(start, end)
"""

from campus_nav.routing.builder import add_polyline
from campus_nav.routing.builder import build_routing_graph
from campus_nav.routing.builder import node_key
from campus_nav.routing.dijkstra import DijkstraSolver
from campus_nav.routing.models import Edge
from campus_nav.routing.models import Node
from campus_nav.routing.models import RouteResult
from campus_nav.routing.models import RoutingGraph

__all__ = [
    "DijkstraSolver",
    "Edge",
    "Node",
    "RouteResult",
    "RoutingGraph",
    "add_polyline",
    "build_routing_graph",
    "node_key",
]
