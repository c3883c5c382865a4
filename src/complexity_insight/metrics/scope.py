"""Scope tracking for nested function reports.

The walker announces function scopes in lexical pre-order. Each announced
scope gets its own FunctionReport which becomes the target of subsequent
node events until the matching exit; with no scope open, events target the
module aggregate.
"""

from __future__ import annotations

from typing import Any, Optional

from ..logging_config import get_logger
from .models import FunctionReport, ModuleReport, create_function_report

logger = get_logger(__name__)


class ScopeStack:
    """Stack of open function scopes for one analysis."""

    def __init__(self, report: ModuleReport):
        self._report = report
        self._stack: list[FunctionReport] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def current_function(self) -> Optional[FunctionReport]:
        """Innermost open function, or None at module level."""
        return self._stack[-1] if self._stack else None

    def current_target(self) -> FunctionReport:
        """Report that receives the next event."""
        return self._stack[-1] if self._stack else self._report.aggregate

    def enter_scope(
        self, name: Optional[str], extent: Any = None, param_count: int = 0
    ) -> FunctionReport:
        """Open a function scope and make its report the current target."""
        function_report = create_function_report(name, extent, param_count)

        self._report.functions.append(function_report)
        self._report.aggregate.params += param_count

        self._stack.append(function_report)
        return function_report

    def exit_scope(self) -> None:
        """Close the innermost scope.

        Unbalanced exits leave the stack empty, so the aggregate stays the target.
        """
        if not self._stack:
            logger.warning("Scope exit without a matching scope entry; ignoring")
            return
        self._stack.pop()
