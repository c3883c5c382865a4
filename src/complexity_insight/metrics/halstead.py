"""Halstead software-science metrics and cyclomatic density.

Reference: M. H. Halstead, "Elements of Software Science", 1977.

    n1, n2 = distinct operators, distinct operands
    N1, N2 = total operators, total operands

    length     N = N1 + N2
    vocabulary n = n1 + n2
    difficulty D = (n1 / 2) * (N2 / n2)     (N2 / n2 taken as 1 when n2 = 0)
    volume     V = N * log2(n)
    effort     E = D * V
    bugs       B = V / 3000
    time       T = E / 18                   (seconds, Stroud number 18)

Arithmetic follows IEEE semantics: degenerate inputs produce 0, inf or nan
instead of raising.
"""

import numpy as np

from .models import FunctionReport, HalsteadState

BUGS_DIVISOR = 3000
STROUD_NUMBER = 18


def calculate_halstead_metrics(halstead: HalsteadState) -> None:
    """Fill in the derived fields of a Halstead state in place.

    A state with no recorded operators or operands gets all-zero metrics.
    """
    operators = halstead.operators
    operands = halstead.operands

    halstead.length = operators.total + operands.total
    if halstead.length == 0:
        _nil_halstead_metrics(halstead)
        return

    halstead.vocabulary = operators.distinct + operands.distinct

    operand_ratio = 1 if operands.distinct == 0 else operands.total / operands.distinct
    halstead.difficulty = (operators.distinct / 2) * operand_ratio

    with np.errstate(divide="ignore", invalid="ignore"):
        halstead.volume = float(halstead.length * np.log2(np.float64(halstead.vocabulary)))

    halstead.effort = halstead.difficulty * halstead.volume
    halstead.bugs = halstead.volume / BUGS_DIVISOR
    halstead.time = halstead.effort / STROUD_NUMBER


def _nil_halstead_metrics(halstead: HalsteadState) -> None:
    halstead.vocabulary = 0
    halstead.difficulty = 0
    halstead.volume = 0
    halstead.effort = 0
    halstead.bugs = 0
    halstead.time = 0


def calculate_cyclomatic_density(report: FunctionReport) -> None:
    """Set cyclomatic paths per hundred logical lines.

    Zero logical lines give inf (or nan for 0/0); consumers must expect
    non-finite values for empty bodies.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        density = np.float64(report.cyclomatic) / np.float64(report.sloc.logical) * 100
    report.cyclomatic_density = float(density)
