"""Boolean toggles controlling optional sections of an exported document."""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import List, Union


class Parameter(str, Enum):
    """Flags understood by :class:`~graphgml.export.gml.GmlExporter`."""

    EXPORT_VERTEX_LABELS = "export_vertex_labels"
    EXPORT_EDGE_LABELS = "export_edge_labels"
    EXPORT_EDGE_WEIGHTS = "export_edge_weights"
    ESCAPE_STRINGS_AS_TEXT = "escape_strings_as_text"

    @classmethod
    def parse(cls, value: Union["Parameter", str]) -> "Parameter":
        """Return the flag matching ``value``, ignoring case and surrounding blanks."""

        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown export parameter: {value!r}") from None


@dataclass
class ExportParameters:
    """Named boolean fields, one per :class:`Parameter`."""

    export_vertex_labels: bool = False
    export_edge_labels: bool = False
    export_edge_weights: bool = False
    escape_strings_as_text: bool = False

    def is_set(self, flag: Union[Parameter, str]) -> bool:
        return bool(getattr(self, Parameter.parse(flag).value))

    def set(self, flag: Union[Parameter, str], value: bool) -> None:
        setattr(self, Parameter.parse(flag).value, bool(value))

    def enabled(self) -> List[Parameter]:
        """Return the flags currently switched on, in declaration order."""

        return [Parameter(item.name) for item in fields(self) if getattr(self, item.name)]
