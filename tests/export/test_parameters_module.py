"""Tests for :mod:`graphgml.export.parameters`."""

from __future__ import annotations

import pytest

from graphgml.export.parameters import ExportParameters, Parameter


def test_defaults_are_all_unset():
    parameters = ExportParameters()
    assert not any(parameters.is_set(flag) for flag in Parameter)
    assert parameters.enabled() == []


def test_set_is_independent_and_last_write_wins():
    parameters = ExportParameters()
    parameters.set(Parameter.EXPORT_EDGE_WEIGHTS, True)
    parameters.set(Parameter.EXPORT_VERTEX_LABELS, True)
    parameters.set(Parameter.EXPORT_VERTEX_LABELS, False)
    parameters.set(Parameter.EXPORT_VERTEX_LABELS, True)

    assert parameters.is_set(Parameter.EXPORT_VERTEX_LABELS)
    assert parameters.is_set(Parameter.EXPORT_EDGE_WEIGHTS)
    assert not parameters.is_set(Parameter.EXPORT_EDGE_LABELS)
    assert parameters.enabled() == [Parameter.EXPORT_VERTEX_LABELS, Parameter.EXPORT_EDGE_WEIGHTS]


def test_parse_accepts_names_case_insensitively():
    assert Parameter.parse("ESCAPE_STRINGS_AS_TEXT") is Parameter.ESCAPE_STRINGS_AS_TEXT
    assert Parameter.parse(" export-edge-labels ") is Parameter.EXPORT_EDGE_LABELS
    assert Parameter.parse(Parameter.EXPORT_EDGE_WEIGHTS) is Parameter.EXPORT_EDGE_WEIGHTS


def test_parse_rejects_unknown_names():
    with pytest.raises(ValueError):
        Parameter.parse("export_everything")
