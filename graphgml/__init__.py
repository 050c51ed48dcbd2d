"""graphgml package initialization.

This module exposes the GML exporter and the graph adapters it consumes.
"""

from .export import GmlExporter, GraphExporter, Parameter
from .graph import NetworkXGraph

__all__ = ["GmlExporter", "GraphExporter", "NetworkXGraph", "Parameter"]
