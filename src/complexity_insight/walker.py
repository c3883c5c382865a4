"""Walker contract.

A walker knows one grammar's tree shape. It visits every node once, asks its
syntax classifiers for a descriptor (see ``metrics.descriptor``) and reports
to the callbacks; it also announces function scopes in lexical order.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


class WalkerCallbacks(Protocol):
    """Callback surface handed to ``Walker.walk``."""

    def process_node(self, node: Any, syntax: Any) -> None: ...

    def create_scope(self, name: Optional[str], extent: Any, param_count: int) -> None: ...

    def pop_scope(self) -> None: ...


@runtime_checkable
class Walker(Protocol):
    """Anything with a ``walk(tree, settings, callbacks)`` method."""

    def walk(self, tree: Any, settings: Mapping[str, Any], callbacks: WalkerCallbacks) -> None: ...
