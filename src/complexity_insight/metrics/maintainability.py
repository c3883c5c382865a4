"""Finalization pass: derived metrics, module averages, maintainability index.

Maintainability index (Oman & Hagemeister, 1992, without comment weight):

    MI = 171 - 3.42 * ln(E_avg) - 0.23 * ln(G_avg) - 16.2 * ln(LOC_avg)

clamped to at most 171. The normalized variant rescales to
max(0, MI * 100 / 171), so it always lies in [0, 100].
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..exceptions import MaintainabilityError
from ..logging_config import get_logger
from .halstead import calculate_cyclomatic_density, calculate_halstead_metrics
from .models import FunctionReport, ModuleReport

logger = get_logger(__name__)

MI_BASE = 171.0
EFFORT_WEIGHT = 3.42
CYCLOMATIC_WEIGHT = 0.23
LOC_WEIGHT = 16.2


@dataclass(frozen=True)
class ModuleAverages:
    """Per-function averages feeding the maintainability index."""

    loc: float
    cyclomatic: float
    effort: float
    params: float


def calculate_metrics(report: ModuleReport, newmi: bool = False) -> ModuleReport:
    """Run the finalization pass over a fully accumulated report.

    Args:
        report: Report populated by a complete traversal
        newmi: Use the normalized (0-100) maintainability index

    Returns:
        The same report, with derived fields, averages and maintainability set

    Raises:
        MaintainabilityError: If the average cyclomatic complexity is zero
    """
    logger.debug(f"calculate_metrics: {len(report.functions)} functions found.")

    for function_report in report.functions:
        _finalize_function(function_report)
    _finalize_function(report.aggregate)

    averages = compute_averages(report)

    report.maintainability = calculate_maintainability_index(
        averages.effort, averages.cyclomatic, averages.loc, newmi
    )
    report.loc = averages.loc
    report.cyclomatic = averages.cyclomatic
    report.effort = averages.effort
    report.params = averages.params

    return report


def _finalize_function(function_report: FunctionReport) -> None:
    calculate_cyclomatic_density(function_report)
    calculate_halstead_metrics(function_report.halstead)


def compute_averages(report: ModuleReport) -> ModuleAverages:
    """Average logical lines, cyclomatic, effort and params over functions.

    A module without functions contributes its aggregate as the single data
    point. Halstead metrics must already be calculated.
    """
    contributors = report.functions or [report.aggregate]

    samples = np.array(
        [
            [fn.sloc.logical, fn.cyclomatic, fn.halstead.effort, fn.params]
            for fn in contributors
        ],
        dtype=np.float64,
    )
    loc, cyclomatic, effort, params = samples.sum(axis=0) / len(contributors)

    return ModuleAverages(
        loc=float(loc),
        cyclomatic=float(cyclomatic),
        effort=float(effort),
        params=float(params),
    )


def calculate_maintainability_index(
    average_effort: float,
    average_cyclomatic: float,
    average_loc: float,
    newmi: bool = False,
) -> float:
    """Compute the maintainability index from module averages.

    Zero effort or zero logical lines drive a logarithm to -inf, which the
    clamp turns into the maximum score.

    Raises:
        MaintainabilityError: If average_cyclomatic is zero
    """
    if average_cyclomatic == 0:
        raise MaintainabilityError(average_cyclomatic)

    with np.errstate(divide="ignore", invalid="ignore"):
        maintainability = (
            MI_BASE
            - EFFORT_WEIGHT * np.log(np.float64(average_effort))
            - CYCLOMATIC_WEIGHT * np.log(np.float64(average_cyclomatic))
            - LOC_WEIGHT * np.log(np.float64(average_loc))
        )

    if maintainability > MI_BASE:
        maintainability = MI_BASE

    if newmi:
        maintainability = max(0.0, (maintainability * 100) / MI_BASE)

    return float(maintainability)
