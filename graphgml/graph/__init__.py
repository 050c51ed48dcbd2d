"""Graph subpackage containing the query interface and its adapters."""

from .ids import IntegerIdProvider, StringIdProvider
from .store import NetworkXGraph
from .view import (
    DEFAULT_EDGE_WEIGHT,
    AttributeLookup,
    EdgeIdProvider,
    EdgeRef,
    GraphView,
    IdProvider,
)

__all__ = [
    "AttributeLookup",
    "DEFAULT_EDGE_WEIGHT",
    "EdgeIdProvider",
    "EdgeRef",
    "GraphView",
    "IdProvider",
    "IntegerIdProvider",
    "NetworkXGraph",
    "StringIdProvider",
]
