"""Tests for :mod:`graphgml.graph.ids` and :mod:`graphgml.graph.view`."""

from __future__ import annotations

from graphgml.graph.ids import IntegerIdProvider, StringIdProvider
from graphgml.graph.view import EdgeRef


def test_integer_provider_numbers_in_first_request_order():
    provider = IntegerIdProvider()
    assert provider("b") == "0"
    assert provider("a") == "1"
    assert provider("b") == "0"


def test_integer_provider_honours_start():
    provider = IntegerIdProvider(start=1)
    assert [provider(item) for item in ("x", "y")] == ["1", "2"]


def test_string_provider_uses_display_string():
    assert StringIdProvider()(42) == "42"


def test_edge_ref_display_string_and_hashing():
    edge = EdgeRef("A", "B")
    assert str(edge) == "(A : B)"
    assert {edge: 1}[EdgeRef("A", "B")] == 1
    assert EdgeRef("A", "B", key=0) != EdgeRef("A", "B", key=1)
