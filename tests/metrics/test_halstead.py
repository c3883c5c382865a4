"""Tests for complexity_insight.metrics.halstead."""

import math

from complexity_insight.metrics.halstead import (
    calculate_cyclomatic_density,
    calculate_halstead_metrics,
)
from complexity_insight.metrics.models import (
    HalsteadItemState,
    HalsteadState,
    create_function_report,
)


def _state(n1, N1, n2, N2):
    return HalsteadState(
        operators=HalsteadItemState(distinct=n1, total=N1, identifiers=["op"] * N1),
        operands=HalsteadItemState(distinct=n2, total=N2, identifiers=["x"] * N2),
    )


class TestHalsteadMetrics:
    """Tests for derived Halstead metrics."""

    def test_zero_length_is_all_zero(self):
        state = HalsteadState()
        calculate_halstead_metrics(state)
        assert state.length == 0
        for name in ["vocabulary", "difficulty", "volume", "effort", "bugs", "time"]:
            assert getattr(state, name) == 0

    def test_known_values(self):
        """n1=4, N1=8, n2=2, N2=6."""
        state = _state(4, 8, 2, 6)
        calculate_halstead_metrics(state)

        assert state.length == 14
        assert state.vocabulary == 6
        assert abs(state.difficulty - 6.0) < 1e-10  # (4/2) * (6/2)
        assert abs(state.volume - 14 * math.log2(6)) < 1e-10
        assert abs(state.effort - 6.0 * 14 * math.log2(6)) < 1e-9
        assert abs(state.bugs - state.volume / 3000) < 1e-12
        assert abs(state.time - state.effort / 18) < 1e-10

    def test_no_operands_uses_unit_ratio(self):
        state = _state(2, 2, 0, 0)
        calculate_halstead_metrics(state)
        assert state.difficulty == 1.0
        assert abs(state.volume - 2.0) < 1e-10

    def test_single_token_has_zero_volume(self):
        state = _state(1, 1, 0, 0)
        calculate_halstead_metrics(state)
        assert state.vocabulary == 1
        assert state.volume == 0.0
        assert state.effort == 0.0

    def test_recorded_occurrences(self):
        """Operators {+, +} and operands {x, y}, every occurrence counted as distinct."""
        state = HalsteadState()
        for identifier in ["+", "+"]:
            state.operators.record(identifier)
        for identifier in ["x", "y"]:
            state.operands.record(identifier)

        calculate_halstead_metrics(state)

        assert state.vocabulary == 4
        assert state.difficulty == 1.0
        assert abs(state.volume - 8.0) < 1e-10


class TestCyclomaticDensity:
    """Tests for cyclomatic density."""

    def test_density(self):
        report = create_function_report("f")
        report.sloc.logical = 4
        report.cyclomatic = 2
        calculate_cyclomatic_density(report)
        assert report.cyclomatic_density == 50.0

    def test_zero_logical_lines_is_infinite(self):
        report = create_function_report("f")
        calculate_cyclomatic_density(report)
        assert math.isinf(report.cyclomatic_density)

    def test_zero_over_zero_is_nan(self):
        report = create_function_report("f")
        report.cyclomatic = 0
        calculate_cyclomatic_density(report)
        assert math.isnan(report.cyclomatic_density)
