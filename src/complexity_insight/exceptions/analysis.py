"""Analysis-related exceptions: caller preconditions and fatal metric conditions."""

from typing import Any

from .base import ComplexityInsightError


class AnalysisError(ComplexityInsightError):
    """Base class for analysis-related errors."""

    pass


class PreconditionError(AnalysisError):
    """Raised before traversal when the analysis inputs are unusable."""

    pass


class InvalidSyntaxTreeError(PreconditionError):
    """Raised when the syntax tree is missing or is not a tree-like object."""

    def __init__(self, tree: Any):
        super().__init__(
            "Invalid syntax tree",
            details={"type": type(tree).__name__},
        )
        self.tree = tree


class InvalidWalkerError(PreconditionError):
    """Raised when the walker is missing or lacks a callable ``walk`` method."""

    def __init__(self, walker: Any, reason: str):
        super().__init__(
            f"Invalid walker: {reason}",
            details={"type": type(walker).__name__, "reason": reason},
        )
        self.walker = walker
        self.reason = reason


class MaintainabilityError(AnalysisError):
    """Raised when the maintainability index cannot be computed.

    Only reachable when a walker or classifier drives the average cyclomatic
    complexity to zero, which the report model never does on its own.
    """

    def __init__(self, average_cyclomatic: float):
        super().__init__(
            "Encountered function with cyclomatic complexity zero!",
            details={"average_cyclomatic": str(average_cyclomatic)},
        )
        self.average_cyclomatic = average_cyclomatic
