"""Public API for Complexity Insight.

Example:
    >>> from complexity_insight import analyse
    >>>
    >>> report = analyse(tree, walker)
    >>> [fn.name for fn in report.functions]
    ['main', 'helper']
    >>> report.maintainability <= 171
    True
    >>>
    >>> # Normalized maintainability index (0-100)
    >>> report = analyse(tree, walker, {"newmi": True})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from .config import AnalysisSettings, default_settings
from .exceptions import InvalidSyntaxTreeError, InvalidWalkerError
from .logging_config import get_logger
from .metrics import AnalysisContext, ModuleReport, calculate_metrics
from .walker import Walker

logger = get_logger(__name__)


def analyse(tree: Any, walker: Any, options: Optional[Any] = None) -> ModuleReport:
    """Compute complexity metrics for one syntax tree.

    The walker traverses the tree once, reporting to a fresh AnalysisContext;
    the finalization pass then derives Halstead metrics, cyclomatic density,
    module averages and the maintainability index.

    Args:
        tree: Syntax tree root; its ``loc`` (key or attribute), when present,
            gives the module's line extent
        walker: Object with ``walk(tree, settings, callbacks)``
        options: Settings mapping or AnalysisSettings, handed to the walker
            unchanged; anything else selects the defaults

    Returns:
        Fully populated ModuleReport

    Raises:
        InvalidSyntaxTreeError: If tree is missing or a scalar
        InvalidWalkerError: If walker is missing or has no callable walk
        MaintainabilityError: If the average cyclomatic complexity is zero
    """
    _check_tree(tree)
    _check_walker(walker)

    if isinstance(options, AnalysisSettings):
        settings: Mapping[str, Any] = options.to_dict()
    elif isinstance(options, Mapping):
        settings = options
    else:
        settings = default_settings()

    context = AnalysisContext(_tree_extent(tree))

    logger.debug(f"Walking the syntax tree ({type(tree).__name__}) with {type(walker).__name__}")
    walker.walk(tree, settings, context)

    return calculate_metrics(context.report, newmi=bool(settings.get("newmi", False)))


def _check_tree(tree: Any) -> None:
    if tree is None or isinstance(tree, (str, bytes, bool, int, float)):
        raise InvalidSyntaxTreeError(tree)


def _check_walker(walker: Any) -> None:
    if walker is None:
        raise InvalidWalkerError(walker, "walker is missing")
    if not isinstance(walker, Walker) or not callable(walker.walk):
        raise InvalidWalkerError(walker, "walk method is missing or not callable")


def _tree_extent(tree: Any) -> Any:
    if isinstance(tree, Mapping):
        return tree.get("loc")
    return getattr(tree, "loc", None)
