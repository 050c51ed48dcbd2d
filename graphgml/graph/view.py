"""Read-only graph interface consumed by the exporters."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Optional, Protocol

DEFAULT_EDGE_WEIGHT = 1.0

IdProvider = Callable[[Any], str]
EdgeIdProvider = Callable[[Any], Optional[str]]
AttributeLookup = Callable[[Any, str], Optional[Any]]


class GraphView(Protocol):
    """Minimal query surface an exporter needs from a graph."""

    @property
    def is_directed(self) -> bool:  # pragma: no cover - interface
        ...

    @property
    def is_weighted(self) -> bool:  # pragma: no cover - interface
        ...

    def vertices(self) -> Iterable[Any]:  # pragma: no cover - interface
        ...

    def edges(self) -> Iterable[Any]:  # pragma: no cover - interface
        ...

    def edge_source(self, edge: Any) -> Any:  # pragma: no cover - interface
        ...

    def edge_target(self, edge: Any) -> Any:  # pragma: no cover - interface
        ...

    def edge_weight(self, edge: Any) -> float:  # pragma: no cover - interface
        ...


@dataclass(frozen=True)
class EdgeRef:
    """Hashable handle for an edge of an adapted graph."""

    source: Hashable
    target: Hashable
    key: Optional[Hashable] = None

    def __str__(self) -> str:
        return f"({self.source} : {self.target})"
