# -*- coding: utf-8 -*-
"""Data structures for the routing graph.

Nodes own their outgoing edges and edges refer back to nodes, so both get
their identity from a precomputed key only: a node is its coordinate key,
an edge is its ``(origin_key, destination_key)`` pair. Edges hold node keys
rather than node objects, so comparing or hashing either never walks the
cyclic structure.
"""

from __future__ import annotations

from collections.abc import Iterator
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import TYPE_CHECKING

from campus_nav.enums import RouteStatus
from campus_nav.errors import GraphFrozenError
from campus_nav.geo_utils import distance

if TYPE_CHECKING:
    from campus_nav.geo_utils import GeoPoint


@dataclass(frozen=True)
class Edge:
    """A directed edge between two nodes, weighted in meters."""

    origin_key: str
    destination_key: str
    weight: float = field(compare=False)

    @property
    def key(self) -> tuple[str, str]:
        return (self.origin_key, self.destination_key)


@dataclass(eq=False, frozen=True)
class Node:
    """A graph node at a unique coordinate.

    Attributes:
        key: Coordinate-derived identifier (see ``routing.builder.node_key``)
        point: Location of the node
        edges: Outgoing edges, in creation order (read-only; edges are
            added through ``RoutingGraph.add_edge``)
    """

    key: str
    point: GeoPoint
    _edges: tuple[Edge, ...] = field(default=(), init=False, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def degree(self) -> int:
        return len(self._edges)

    def _connect(self, edge: Edge) -> None:
        object.__setattr__(self, "_edges", (*self._edges, edge))


class RoutingGraph:
    """An undirected weighted graph of walkable path segments.

    Every physical segment is stored as a pair of directed edges (A->B and
    B->A). The graph is the single owner of its nodes; it is mutated only
    while being built and becomes read-only once :meth:`freeze` is called.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        self._edge_count: int = 0
        self._frozen: bool = False

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __repr__(self) -> str:
        return (
            f"RoutingGraph(nodes={len(self._nodes)}, edges={self._edge_count}, "
            f"frozen={self._frozen})"
        )

    # -----------------------------
    # Properties
    # -----------------------------

    @property
    def nodes(self) -> Mapping[str, Node]:
        """Read-only view of ``key -> Node``."""
        return MappingProxyType(self._nodes)

    @property
    def edge_count(self) -> int:
        """Number of directed edges (twice the number of segments)."""
        return self._edge_count

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def is_empty(self) -> bool:
        return not self._nodes

    def node_keys(self) -> set[str]:
        return set(self._nodes)

    def get(self, key: str) -> Node | None:
        return self._nodes.get(key)

    # -----------------------------
    # Construction
    # -----------------------------

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Routing graph is read-only once built")

    def add_node(self, key: str, point: GeoPoint) -> Node:
        """Return the node for ``key``, creating it if it doesn't exist.

        Raises:
            GraphFrozenError: If the graph has been frozen
        """
        self._check_mutable()
        if (node := self._nodes.get(key)) is None:
            node = self._nodes[key] = Node(key=key, point=point)
        return node

    def add_edge(self, from_node: Node, to_node: Node) -> float:
        """Connect two nodes in both directions.

        Returns:
            The weight given to both edges (distance in meters)

        Raises:
            GraphFrozenError: If the graph has been frozen
        """
        self._check_mutable()
        weight = distance(from_node.point, to_node.point)
        from_node._connect(Edge(from_node.key, to_node.key, weight))  # noqa: SLF001
        to_node._connect(Edge(to_node.key, from_node.key, weight))  # noqa: SLF001
        self._edge_count += 2
        return weight

    def freeze(self) -> RoutingGraph:
        """Make the graph read-only and return it."""
        self._frozen = True
        return self


@dataclass(frozen=True)
class RouteResult:
    """Outcome of a shortest-path query.

    Attributes:
        status: Whether a path was found and, if not, why
        points: Path from the start anchor to the end anchor (empty when
            no path was found)
        distance_m: Length of the path in meters
    """

    status: RouteStatus
    points: list[GeoPoint] = field(default_factory=list)
    distance_m: float = 0.0

    @property
    def found(self) -> bool:
        return self.status is RouteStatus.FOUND

    @classmethod
    def not_found(cls, status: RouteStatus) -> RouteResult:
        return cls(status=status)
