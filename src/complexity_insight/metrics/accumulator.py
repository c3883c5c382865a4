"""Event-driven metric accumulation.

An AnalysisContext owns everything one analysis mutates: the module report,
the scope stack and the dependency collector. The walker drives it through
three callbacks:

    process_node(node, syntax)              once per visited node
    create_scope(name, extent, param_count) on entering a function scope
    pop_scope()                             on leaving it

Logical lines and cyclomatic contributions land on the module aggregate and
on the innermost open function. Halstead occurrences land only on the
current target (innermost function, or the aggregate at module level).
"""

from __future__ import annotations

from typing import Any, Optional

from ..logging_config import get_logger
from .descriptor import HalsteadToken, SyntaxDescriptor, resolve_count
from .dependencies import DependencyCollector
from .models import HalsteadItemState, ModuleReport, create_module_report
from .scope import ScopeStack

logger = get_logger(__name__)


class AnalysisContext:
    """Per-analysis accumulation state and the walker callback surface."""

    CALLBACKS = ("process_node", "create_scope", "pop_scope")

    def __init__(self, extent: Any = None):
        self.report: ModuleReport = create_module_report(extent)
        self.scopes = ScopeStack(self.report)
        self.dependencies = DependencyCollector(self.report.dependencies)

    def __getitem__(self, name: str) -> Any:
        # Walkers written against the mapping form look callbacks up by name
        if name not in self.CALLBACKS:
            raise KeyError(name)
        return getattr(self, name)

    def process_node(self, node: Any, syntax: Any) -> None:
        """Fold one node's contributions into the report."""
        descriptor = SyntaxDescriptor.coerce(syntax)

        self._add_lloc(resolve_count(descriptor.lloc, node))
        self._add_cyclomatic(resolve_count(descriptor.cyclomatic, node))
        self._record_halstead(node, descriptor.operators, "operators")
        self._record_halstead(node, descriptor.operands, "operands")

        if descriptor.dependencies is not None:
            self.dependencies.collect(node, descriptor.dependencies)

    def create_scope(self, name: Optional[str], extent: Any = None, param_count: int = 0) -> None:
        self.scopes.enter_scope(name, extent, param_count)

    def pop_scope(self) -> None:
        self.scopes.exit_scope()

    def _add_lloc(self, amount: Any) -> None:
        self.report.aggregate.sloc.logical += amount
        function = self.scopes.current_function
        if function is not None:
            function.sloc.logical += amount

    def _add_cyclomatic(self, amount: Any) -> None:
        self.report.aggregate.cyclomatic += amount
        function = self.scopes.current_function
        if function is not None:
            function.cyclomatic += amount

    def _record_halstead(
        self, node: Any, tokens: Optional[tuple[HalsteadToken, ...]], kind: str
    ) -> None:
        if tokens is None:
            logger.debug(f"Skipping malformed {kind} list for node {type(node).__name__}")
            return

        for token in tokens:
            identifier = token.identifier.resolve(node)
            if token.applies(node):
                state: HalsteadItemState = getattr(self.scopes.current_target().halstead, kind)
                state.record(identifier)
