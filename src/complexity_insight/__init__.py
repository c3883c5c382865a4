"""
Complexity Insight - Static complexity metrics for a single translation unit

Logical lines of code, cyclomatic complexity, Halstead software-science
metrics and the maintainability index, accumulated from the events of a
pluggable, grammar-specific tree walker.
"""

__version__ = "0.1.0"

from .api import analyse
from .config import AnalysisSettings, load_settings
from .metrics import FunctionReport, ModuleReport, SyntaxDescriptor
from .walker import Walker, WalkerCallbacks

__all__ = [
    "analyse",  # Main entry point
    "AnalysisSettings",
    "load_settings",
    "FunctionReport",
    "ModuleReport",
    "SyntaxDescriptor",
    "Walker",
    "WalkerCallbacks",
]
