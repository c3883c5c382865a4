"""Metric accumulation and finalization for a single translation unit."""

from .accumulator import AnalysisContext
from .descriptor import Computed, Fixed, HalsteadToken, SyntaxDescriptor
from .maintainability import calculate_maintainability_index, calculate_metrics
from .models import (
    FunctionReport,
    HalsteadItemState,
    HalsteadState,
    ModuleReport,
    SourceExtent,
    SourceLines,
    create_function_report,
    create_module_report,
)

__all__ = [
    "AnalysisContext",
    "Computed",
    "Fixed",
    "HalsteadToken",
    "SyntaxDescriptor",
    "calculate_maintainability_index",
    "calculate_metrics",
    "FunctionReport",
    "HalsteadItemState",
    "HalsteadState",
    "ModuleReport",
    "SourceExtent",
    "SourceLines",
    "create_function_report",
    "create_module_report",
]
