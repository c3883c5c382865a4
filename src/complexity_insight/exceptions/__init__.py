"""Exception hierarchy for Complexity Insight."""

from .analysis import (
    AnalysisError,
    InvalidSyntaxTreeError,
    InvalidWalkerError,
    MaintainabilityError,
    PreconditionError,
)
from .base import ComplexityInsightError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "ComplexityInsightError",
    "AnalysisError",
    "PreconditionError",
    "InvalidSyntaxTreeError",
    "InvalidWalkerError",
    "MaintainabilityError",
    "ConfigurationError",
    "InvalidConfigError",
]
