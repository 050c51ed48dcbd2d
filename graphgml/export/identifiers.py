"""Per-export assignment of identifiers to graph elements."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from graphgml.graph.view import EdgeIdProvider, IdProvider


@dataclass
class IdentifierAssigner:
    """Cache vertex ids for the duration of a single export.

    The first lookup of a vertex asks ``vertex_id_provider`` and the answer is
    reused from then on, so assignment order is first-lookup order. Edge ids
    are optional: ``edge_id`` returns ``None`` when no edge provider is
    configured or when the provider itself answers ``None``.
    """

    vertex_id_provider: IdProvider
    edge_id_provider: Optional[EdgeIdProvider] = None
    _vertex_ids: Dict[Any, str] = field(default_factory=dict, init=False, repr=False)

    def vertex_id(self, vertex: Any) -> str:
        if vertex not in self._vertex_ids:
            self._vertex_ids[vertex] = str(self.vertex_id_provider(vertex))
        return self._vertex_ids[vertex]

    def edge_id(self, edge: Any) -> Optional[str]:
        if self.edge_id_provider is None:
            return None
        identifier = self.edge_id_provider(edge)
        return None if identifier is None else str(identifier)

    def assign_all(self, vertices: Iterable[Any]) -> int:
        """Assign ids to ``vertices`` in iteration order and return how many were seen."""

        count = 0
        for vertex in vertices:
            self.vertex_id(vertex)
            count += 1
        return count
