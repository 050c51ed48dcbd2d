"""Adapter exposing NetworkX graphs through :class:`GraphView`."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

import networkx as nx

from .view import DEFAULT_EDGE_WEIGHT, AttributeLookup, EdgeRef


@dataclass
class NetworkXGraph:
    """Lightweight read-only wrapper around any :mod:`networkx` graph.

    Vertices and edges are reported in the wrapped graph's own iteration
    order. Edges are yielded as :class:`EdgeRef` values so multigraph keys
    survive and each edge can be used as a lookup key. ``weighted`` decides
    whether the graph reports itself as weighted; the weight of an edge is
    read from its ``weight`` data key.
    """

    graph: nx.Graph
    weighted: bool = False
    weight: str = "weight"

    @property
    def is_directed(self) -> bool:
        return self.graph.is_directed()

    @property
    def is_weighted(self) -> bool:
        return self.weighted

    def vertices(self) -> Iterable[Any]:
        """Iterate over node identifiers."""

        return self.graph.nodes

    def edges(self) -> Iterable[EdgeRef]:
        """Iterate over edges as :class:`EdgeRef` handles."""

        if self.graph.is_multigraph():
            for source, target, key in self.graph.edges(keys=True):
                yield EdgeRef(source, target, key)
        else:
            for source, target in self.graph.edges():
                yield EdgeRef(source, target)

    def edge_source(self, edge: EdgeRef) -> Any:
        return edge.source

    def edge_target(self, edge: EdgeRef) -> Any:
        return edge.target

    def edge_weight(self, edge: EdgeRef) -> float:
        """Return the weight stored on ``edge`` or the default weight."""

        data = self._edge_data(edge) or {}
        value = data.get(self.weight)
        return DEFAULT_EDGE_WEIGHT if value is None else float(value)

    def vertex_attribute_lookup(self) -> AttributeLookup:
        """Return a lookup reading attributes from node data."""

        def lookup(vertex: Any, key: str) -> Optional[Any]:
            if vertex not in self.graph:
                return None
            return self.graph.nodes[vertex].get(key)

        return lookup

    def edge_attribute_lookup(self) -> AttributeLookup:
        """Return a lookup reading attributes from edge data."""

        def lookup(edge: EdgeRef, key: str) -> Optional[Any]:
            data = self._edge_data(edge)
            if data is None:
                return None
            return data.get(key)

        return lookup

    def _edge_data(self, edge: EdgeRef) -> Optional[dict]:
        if self.graph.is_multigraph():
            return self.graph.get_edge_data(edge.source, edge.target, key=edge.key)
        return self.graph.get_edge_data(edge.source, edge.target)
