"""Graph export utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import networkx as nx

from graphgml.graph.store import NetworkXGraph

from .gml import GmlExporter
from .parameters import Parameter


@dataclass
class GraphExporter:
    """Serialize an in-memory :mod:`networkx` graph to a portable representation.

    Node and edge data dicts act as the attribute stores, so a ``label``
    entry becomes the exported label when labels are requested.
    """

    graph: nx.Graph
    weighted: bool = False

    def export(self, *, format: Literal["gml"] = "gml", **flags: bool) -> str:
        """Export the graph to the requested ``format``.

        ``flags`` are :class:`Parameter` names, e.g. ``export_vertex_labels=True``.
        """

        if format != "gml":
            raise ValueError(f"Unsupported export format: {format}")

        view = NetworkXGraph(self.graph, weighted=self.weighted)
        exporter = GmlExporter(
            vertex_attributes=view.vertex_attribute_lookup(),
            edge_attributes=view.edge_attribute_lookup(),
        )
        for name, value in flags.items():
            exporter.set_parameter(Parameter.parse(name), value)
        return exporter.export_to_string(view)
