"""Plain-text GML exporter."""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, TextIO, Union

import networkx as nx

from graphgml.graph.ids import IntegerIdProvider
from graphgml.graph.store import NetworkXGraph
from graphgml.graph.view import AttributeLookup, EdgeIdProvider, GraphView, IdProvider

from .identifiers import IdentifierAssigner
from .parameters import ExportParameters, Parameter
from .quoting import quote

LOGGER = logging.getLogger(__name__)

CREATOR = "JGraphT GML Exporter"
VERSION = "1"
LABEL_ATTRIBUTE_KEY = "label"

_DELIM = " "
_TAB1 = "\t"
_TAB2 = "\t\t"


@dataclass
class GmlExporter:
    """Render a graph as a GML document.

    ``vertex_id_provider`` maps a vertex to the token written after ``id``,
    ``source`` and ``target``. When it is omitted every export starts a fresh
    :class:`~graphgml.graph.ids.IntegerIdProvider`, numbering vertices from
    zero in iteration order. ``edge_id_provider`` is optional; edges without
    an id get no ``id`` field. ``vertex_attributes`` and ``edge_attributes``
    are consulted for the ``label`` key only; a raw :mod:`networkx` graph
    falls back to its node and edge data for whichever lookup is unset.
    """

    vertex_id_provider: Optional[IdProvider] = None
    edge_id_provider: Optional[EdgeIdProvider] = None
    vertex_attributes: Optional[AttributeLookup] = None
    edge_attributes: Optional[AttributeLookup] = None
    parameters: ExportParameters = field(default_factory=ExportParameters)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "GmlExporter":
        """Create an exporter whose parameters come from ``GRAPHGML_PARAMETERS``."""

        from graphgml.config import parameters_from_env

        kwargs.setdefault("parameters", parameters_from_env())
        return cls(**kwargs)

    def is_parameter_set(self, flag: Union[Parameter, str]) -> bool:
        return self.parameters.is_set(flag)

    def set_parameter(self, flag: Union[Parameter, str], value: bool) -> None:
        self.parameters.set(flag, value)

    def export(self, graph: Union[GraphView, nx.Graph], sink: TextIO) -> None:
        """Write ``graph`` to ``sink`` and flush it.

        Errors raised by ``sink`` propagate unchanged and leave a truncated
        document behind.
        """

        vertex_attributes = self.vertex_attributes
        edge_attributes = self.edge_attributes
        if isinstance(graph, nx.Graph):
            graph = NetworkXGraph(graph)
            # fall back to node and edge data for lookups the caller left unset
            if vertex_attributes is None:
                vertex_attributes = graph.vertex_attribute_lookup()
            if edge_attributes is None:
                edge_attributes = graph.edge_attribute_lookup()
        ids = IdentifierAssigner(
            self.vertex_id_provider or IntegerIdProvider(),
            self.edge_id_provider,
        )
        # assign ids in vertex iteration order before any edge references them
        vertex_count = ids.assign_all(graph.vertices())
        LOGGER.debug(
            "Exporting GML document: %d vertices, directed=%s, parameters=%s",
            vertex_count,
            graph.is_directed,
            [flag.value for flag in self.parameters.enabled()],
        )

        try:
            self._write_header(sink)
            self._line(sink, "graph")
            self._line(sink, "[")
            self._line(sink, _TAB1 + "label" + _DELIM + self._quoted(""))
            self._line(sink, _TAB1 + "directed" + _DELIM + ("1" if graph.is_directed else "0"))
            self._write_vertices(sink, graph, ids, vertex_attributes)
            edge_count = self._write_edges(sink, graph, ids, edge_attributes)
            self._line(sink, "]")
            sink.flush()
        except OSError as exc:
            LOGGER.debug("GML export aborted by sink failure: %s", exc)
            raise

        LOGGER.debug("GML export completed: %d vertices, %d edges", vertex_count, edge_count)

    def export_to_string(self, graph: Union[GraphView, nx.Graph]) -> str:
        """Return the document for ``graph`` as a string."""

        buffer = io.StringIO()
        self.export(graph, buffer)
        return buffer.getvalue()

    def export_to_file(self, graph: Union[GraphView, nx.Graph], path: Union[str, Path]) -> None:
        """Write the document for ``graph`` to ``path`` as UTF-8."""

        with open(path, "w", encoding="utf-8", newline="") as handle:
            self.export(graph, handle)

    def _quoted(self, value: str) -> str:
        return quote(value, escape=self.parameters.escape_strings_as_text)

    def _write_header(self, sink: TextIO) -> None:
        self._line(sink, "Creator" + _DELIM + self._quoted(CREATOR))
        self._line(sink, "Version" + _DELIM + VERSION)

    def _write_vertices(
        self,
        sink: TextIO,
        graph: GraphView,
        ids: IdentifierAssigner,
        attributes: Optional[AttributeLookup],
    ) -> None:
        export_labels = self.parameters.export_vertex_labels

        for vertex in graph.vertices():
            self._line(sink, _TAB1 + "node")
            self._line(sink, _TAB1 + "[")
            self._line(sink, _TAB2 + "id" + _DELIM + ids.vertex_id(vertex))
            if export_labels:
                label = self._label(vertex, attributes)
                self._line(sink, _TAB2 + "label" + _DELIM + self._quoted(label))
            self._line(sink, _TAB1 + "]")

    def _write_edges(
        self,
        sink: TextIO,
        graph: GraphView,
        ids: IdentifierAssigner,
        attributes: Optional[AttributeLookup],
    ) -> int:
        export_labels = self.parameters.export_edge_labels
        # weights are only meaningful when the graph itself is weighted
        export_weights = self.parameters.export_edge_weights and graph.is_weighted

        count = 0
        for edge in graph.edges():
            self._line(sink, _TAB1 + "edge")
            self._line(sink, _TAB1 + "[")
            edge_id = ids.edge_id(edge)
            if edge_id is not None:
                self._line(sink, _TAB2 + "id" + _DELIM + edge_id)
            self._line(sink, _TAB2 + "source" + _DELIM + ids.vertex_id(graph.edge_source(edge)))
            self._line(sink, _TAB2 + "target" + _DELIM + ids.vertex_id(graph.edge_target(edge)))
            if export_labels:
                label = self._label(edge, attributes)
                self._line(sink, _TAB2 + "label" + _DELIM + self._quoted(label))
            if export_weights:
                weight = repr(float(graph.edge_weight(edge)))
                self._line(sink, _TAB2 + "weight" + _DELIM + weight)
            self._line(sink, _TAB1 + "]")
            count += 1
        return count

    @staticmethod
    def _label(element: Any, lookup: Optional[AttributeLookup]) -> str:
        value = lookup(element, LABEL_ATTRIBUTE_KEY) if lookup is not None else None
        return str(element) if value is None else str(value)

    @staticmethod
    def _line(sink: TextIO, text: str) -> None:
        sink.write(text + "\n")
