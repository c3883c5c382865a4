"""Report models for complexity metrics.

A ModuleReport holds one FunctionReport per function scope the walker
announces, plus a synthetic ``aggregate`` FunctionReport covering the whole
module. Accumulation fills in the raw counters (logical lines, cyclomatic
paths, Halstead occurrences); finalization fills in the derived fields.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from ..logging_config import get_logger

logger = get_logger(__name__)

# Opaque value produced by a grammar's dependency classifier.
DependencyRef = Any


@dataclass(frozen=True)
class SourceExtent:
    """Inclusive line range of a module or function.

    Attributes:
        start_line: First line (1-indexed)
        end_line: Last line (1-indexed)
    """

    start_line: int
    end_line: int

    @property
    def physical_lines(self) -> int:
        return self.end_line - self.start_line + 1

    @classmethod
    def from_loc(cls, loc: Any) -> Optional[SourceExtent]:
        """Build an extent from a walker location value.

        Accepts ``{"start": {"line": n}, "end": {"line": m}}`` or any object
        exposing ``start.line`` and ``end.line``. Returns None when the value
        carries no usable line information.
        """
        if loc is None or isinstance(loc, SourceExtent):
            return loc

        start = _lookup(loc, "start")
        end = _lookup(loc, "end")
        start_line = _as_line(_lookup(start, "line"))
        end_line = _as_line(_lookup(end, "line"))

        if start_line is None or end_line is None:
            return None
        return cls(start_line=start_line, end_line=end_line)


def _lookup(value: Any, key: str) -> Any:
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get(key)
    return getattr(value, key, None)


def _as_line(value: Any) -> Optional[int]:
    # Integral floats (3.0) count as line numbers
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    if not math.isfinite(value) or value != int(value):
        return None
    return int(value)


@dataclass
class SourceLines:
    """Logical and physical line counts."""

    logical: int = 0
    physical: Optional[int] = None


@dataclass
class HalsteadItemState:
    """Occurrences of one Halstead category (operators or operands).

    Attributes:
        distinct: Distinct-item counter
        total: Total occurrences recorded
        identifiers: One entry per recorded occurrence, in traversal order
    """

    distinct: int = 0
    total: int = 0
    identifiers: list[str] = field(default_factory=list)

    def record(self, identifier: str) -> None:
        """Record one occurrence.

        ``distinct`` advances with every occurrence, duplicates included, so
        ``distinct == total`` always holds for accumulated state.
        """
        self.identifiers.append(identifier)
        self.distinct += 1
        self.total += 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "distinct": self.distinct,
            "total": self.total,
            "identifiers": list(self.identifiers),
        }


@dataclass
class HalsteadState:
    """Halstead counters plus the metrics derived from them.

    The derived fields stay at 0 until the finalization pass runs.
    """

    operators: HalsteadItemState = field(default_factory=HalsteadItemState)
    operands: HalsteadItemState = field(default_factory=HalsteadItemState)

    length: int = 0
    vocabulary: int = 0
    difficulty: float = 0.0
    volume: float = 0.0
    effort: float = 0.0
    bugs: float = 0.0
    time: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "operators": self.operators.to_dict(),
            "operands": self.operands.to_dict(),
            "length": self.length,
            "vocabulary": self.vocabulary,
            "difficulty": self.difficulty,
            "volume": self.volume,
            "effort": self.effort,
            "bugs": self.bugs,
            "time": self.time,
        }


@dataclass
class FunctionReport:
    """Metrics for one function scope, or for the whole module (aggregate).

    Attributes:
        name: Function name (None for the aggregate and anonymous functions)
        sloc: Logical and physical line counts
        cyclomatic: Independent paths, starting at 1 for the entry path
        halstead: Halstead counters and derived metrics
        params: Parameter count (running total of all functions for the aggregate)
        line: First line of the scope, when the walker supplied an extent
        cyclomatic_density: cyclomatic / logical lines * 100, set on finalization
    """

    name: Optional[str] = None
    sloc: SourceLines = field(default_factory=SourceLines)
    cyclomatic: int = 1
    halstead: HalsteadState = field(default_factory=HalsteadState)
    params: int = 0
    line: Optional[int] = None
    cyclomatic_density: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        sloc: dict[str, Any] = {"logical": self.sloc.logical}
        if self.sloc.physical is not None:
            sloc["physical"] = self.sloc.physical

        result: dict[str, Any] = {
            "name": self.name,
            "sloc": sloc,
            "cyclomatic": self.cyclomatic,
            "cyclomaticDensity": self.cyclomatic_density,
            "halstead": self.halstead.to_dict(),
            "params": self.params,
        }
        if self.line is not None:
            result["line"] = self.line
        return result


@dataclass
class ModuleReport:
    """Complete metrics for one translation unit.

    Attributes:
        aggregate: Module-wide totals
        functions: One report per function scope, in scope-entry order
        dependencies: Opaque references collected from dependency classifiers
        maintainability: Maintainability index, set on finalization
        loc: Average logical lines per function
        cyclomatic: Average cyclomatic complexity per function
        effort: Average Halstead effort per function
        params: Average parameter count per function
    """

    aggregate: FunctionReport
    functions: list[FunctionReport] = field(default_factory=list)
    dependencies: list[DependencyRef] = field(default_factory=list)
    maintainability: float = 0.0
    loc: float = 0.0
    cyclomatic: float = 0.0
    effort: float = 0.0
    params: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "aggregate": self.aggregate.to_dict(),
            "functions": [fn.to_dict() for fn in self.functions],
            "dependencies": list(self.dependencies),
            "maintainability": self.maintainability,
            "loc": self.loc,
            "cyclomatic": self.cyclomatic,
            "effort": self.effort,
            "params": self.params,
        }


def create_function_report(
    name: Optional[str], extent: Any = None, param_count: int = 0
) -> FunctionReport:
    """Allocate a report for a function scope.

    Args:
        name: Function name, if any
        extent: SourceExtent or walker location value; sets ``line`` and
            ``sloc.physical`` when it carries line information
        param_count: Number of declared parameters

    Returns:
        Fresh FunctionReport with zeroed counters and cyclomatic 1
    """
    report = FunctionReport(name=name, params=param_count)

    lines = SourceExtent.from_loc(extent)
    if lines is not None:
        logger.debug(f"Calculating line information for {name!r}: {lines}")
        report.line = lines.start_line
        report.sloc.physical = lines.physical_lines

    return report


def create_module_report(extent: Any = None) -> ModuleReport:
    """Allocate a module report whose aggregate spans ``extent``."""
    return ModuleReport(aggregate=create_function_report(None, extent, 0))
