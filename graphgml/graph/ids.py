"""Identifier providers mapping graph elements to string ids."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class IntegerIdProvider:
    """Hand out consecutive integers in first-request order."""

    start: int = 0
    _ids: Dict[Any, str] = field(default_factory=dict, init=False, repr=False)

    def __call__(self, element: Any) -> str:
        identifier = self._ids.get(element)
        if identifier is None:
            identifier = str(self.start + len(self._ids))
            self._ids[element] = identifier
        return identifier


class StringIdProvider:
    """Use the element's display string as its id."""

    def __call__(self, element: Any) -> str:
        return str(element)

