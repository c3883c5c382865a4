"""Syntax descriptors: what a single visited node contributes to the metrics.

A grammar-specific classifier hands the accumulator one descriptor per node.
Every field may be a fixed value or a computation over the node, so each raw
field is wrapped once into a ``Fixed`` or ``Computed`` variant when the
descriptor is built and resolved uniformly afterwards.

Example:
    >>> descriptor = SyntaxDescriptor.coerce({
    ...     "lloc": 1,
    ...     "cyclomatic": lambda node: 1 if node["alternate"] else 0,
    ...     "operators": [{"identifier": "if"}],
    ... })
    >>> descriptor.cyclomatic.resolve({"alternate": None})
    0
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from ..logging_config import get_logger

logger = get_logger(__name__)

DependencyFn = Callable[[Any, bool], Any]


@dataclass(frozen=True)
class Fixed:
    """A contribution that does not depend on the node."""

    value: Any

    def resolve(self, node: Any) -> Any:
        return self.value


@dataclass(frozen=True)
class Computed:
    """A contribution computed from the node."""

    fn: Callable[[Any], Any]

    def resolve(self, node: Any) -> Any:
        return self.fn(node)


NodeValue = Union[Fixed, Computed]


def as_node_value(raw: Any) -> NodeValue:
    """Wrap a raw descriptor field: callables become Computed, anything else Fixed."""
    if isinstance(raw, (Fixed, Computed)):
        return raw
    if callable(raw):
        return Computed(raw)
    return Fixed(raw)


def as_count(value: Any) -> Union[int, float]:
    """Coerce a resolved contribution to a number, 0 when it is not one.

    Booleans, non-finite floats and non-numbers all count as 0.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return 0
    if not math.isfinite(value):
        return 0
    return value


def resolve_count(value: NodeValue, node: Any) -> Union[int, float]:
    """Resolve a lloc/cyclomatic field against a node."""
    return as_count(value.resolve(node))


@dataclass(frozen=True)
class HalsteadToken:
    """One operator or operand occurrence a node may contribute.

    Attributes:
        identifier: Name recorded for the occurrence
        filter: Optional predicate; the occurrence counts only when it returns True
    """

    identifier: NodeValue
    filter: Optional[Computed] = None

    def applies(self, node: Any) -> bool:
        return self.filter is None or self.filter.resolve(node) is True

    @classmethod
    def coerce(cls, raw: Any) -> Optional[HalsteadToken]:
        """Build a token from ``{"identifier": ..., "filter": ...}``.

        Mappings are read by key, other objects through the ``identifier``
        and ``filter`` attributes. Returns None for scalar entries. A
        non-callable filter is ignored.
        """
        if isinstance(raw, HalsteadToken):
            return raw
        if raw is None or isinstance(raw, (str, bytes, bool, numbers.Number)):
            logger.debug(f"Skipping malformed token entry {raw!r}")
            return None

        if isinstance(raw, Mapping):
            raw_identifier = raw.get("identifier")
            raw_filter = raw.get("filter")
        else:
            raw_identifier = getattr(raw, "identifier", None)
            raw_filter = getattr(raw, "filter", None)

        if isinstance(raw_filter, Computed):
            token_filter: Optional[Computed] = raw_filter
        elif callable(raw_filter):
            token_filter = Computed(raw_filter)
        else:
            token_filter = None

        return cls(identifier=as_node_value(raw_identifier), filter=token_filter)


def _coerce_tokens(raw: Any) -> Optional[tuple[HalsteadToken, ...]]:
    # None marks a malformed list: the accumulator skips it entirely
    if not isinstance(raw, (list, tuple)):
        return None
    tokens = (HalsteadToken.coerce(item) for item in raw)
    return tuple(token for token in tokens if token is not None)


@dataclass(frozen=True)
class SyntaxDescriptor:
    """Per-node contributions supplied by a grammar-specific classifier.

    Attributes:
        lloc: Logical lines of code contributed by the node
        cyclomatic: Additional independent paths introduced by the node
        operators: Operator occurrences (None when the classifier gave a non-list)
        operands: Operand occurrences (None when the classifier gave a non-list)
        dependencies: Optional ``fn(node, is_first) -> ref | list[ref] | None``
    """

    lloc: NodeValue = field(default=Fixed(0))
    cyclomatic: NodeValue = field(default=Fixed(0))
    operators: Optional[tuple[HalsteadToken, ...]] = ()
    operands: Optional[tuple[HalsteadToken, ...]] = ()
    dependencies: Optional[DependencyFn] = None

    @classmethod
    def build(
        cls,
        lloc: Any = 0,
        cyclomatic: Any = 0,
        operators: Any = (),
        operands: Any = (),
        dependencies: Optional[DependencyFn] = None,
    ) -> SyntaxDescriptor:
        """Build a descriptor from raw field values."""
        return cls(
            lloc=as_node_value(lloc),
            cyclomatic=as_node_value(cyclomatic),
            operators=_coerce_tokens(operators),
            operands=_coerce_tokens(operands),
            dependencies=dependencies if callable(dependencies) else None,
        )

    @classmethod
    def coerce(cls, raw: Any) -> SyntaxDescriptor:
        """Normalize whatever the classifier returned into a descriptor.

        Mappings use the keys ``lloc``, ``cyclomatic``, ``operators``,
        ``operands`` and ``dependencies``; other objects are read through
        attributes of the same names. Missing fields contribute nothing.
        """
        if isinstance(raw, SyntaxDescriptor):
            return raw
        if raw is None:
            return cls()

        if isinstance(raw, Mapping):
            get = raw.get
        else:

            def get(key: str, default: Any = None) -> Any:
                return getattr(raw, key, default)

        return cls.build(
            lloc=get("lloc", 0),
            cyclomatic=get("cyclomatic", 0),
            operators=get("operators"),
            operands=get("operands"),
            dependencies=get("dependencies"),
        )
