"""Exporters rendering graphs as GML text."""

from .gml import CREATOR, VERSION, GmlExporter
from .graph_exporter import GraphExporter
from .identifiers import IdentifierAssigner
from .parameters import ExportParameters, Parameter
from .quoting import escape_text, quote

__all__ = [
    "CREATOR",
    "ExportParameters",
    "GmlExporter",
    "GraphExporter",
    "IdentifierAssigner",
    "Parameter",
    "VERSION",
    "escape_text",
    "quote",
]
