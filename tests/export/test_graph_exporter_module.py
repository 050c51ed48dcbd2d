"""Tests for :mod:`graphgml.export.graph_exporter`."""

from __future__ import annotations

import networkx as nx
import pytest

from graphgml.export.graph_exporter import GraphExporter


def test_graph_exporter_rejects_unknown_format():
    exporter = GraphExporter(graph=nx.MultiDiGraph())
    with pytest.raises(ValueError):
        exporter.export(format="unsupported")


def test_graph_exporter_rejects_unknown_flag():
    exporter = GraphExporter(graph=nx.Graph())
    with pytest.raises(ValueError):
        exporter.export(export_colours=True)


def test_graph_exporter_uses_data_dicts_as_attributes():
    graph = nx.DiGraph()
    graph.add_node("plan_1", label="Plan")
    graph.add_node("step_1")
    graph.add_edge("plan_1", "step_1", label="CONTAINS", weight=0.5)

    output = GraphExporter(graph, weighted=True).export(
        export_vertex_labels=True,
        export_edge_labels=True,
        export_edge_weights=True,
    )

    assert '\t\tid 0\n\t\tlabel "Plan"\n' in output
    assert '\t\tid 1\n\t\tlabel "step_1"\n' in output
    assert '\t\tsource 0\n\t\ttarget 1\n\t\tlabel "CONTAINS"\n\t\tweight 0.5\n' in output
