"""Dependency collection.

Dependency classifiers are called with an ``is_first`` flag that is True
until the first node carrying a dependency classifier has been processed.
This keeps a single statement from reporting the same dependency once per
visited sub-node. It is a heuristic: it holds for simple call expressions
and nothing in it understands the grammar.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .descriptor import DependencyFn
from .models import DependencyRef


class DependencyCollector:
    """Collects opaque dependency references into a report's bag."""

    def __init__(self, dependencies: list[DependencyRef]):
        self._dependencies = dependencies
        self._is_first = True

    @property
    def is_first(self) -> bool:
        return self._is_first

    def collect(self, node: Any, classifier: DependencyFn) -> None:
        """Run a dependency classifier for one node and keep what it returns.

        Sequences are concatenated, single objects appended, and scalars or
        None ignored.
        """
        found = classifier(node, self._is_first)

        if isinstance(found, (list, tuple)):
            self._dependencies.extend(found)
        elif _is_reference(found):
            self._dependencies.append(found)

        self._is_first = False


def _is_reference(value: Any) -> bool:
    if value is None or isinstance(value, (str, bytes, bool, int, float)):
        return False
    return isinstance(value, Mapping) or hasattr(value, "__dict__") or hasattr(value, "__slots__")
