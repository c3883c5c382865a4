"""Tests for complexity_insight.metrics.scope."""

import logging

from complexity_insight.metrics.models import create_module_report
from complexity_insight.metrics.scope import ScopeStack


class TestScopeStack:
    """Tests for scope entry, exit and target resolution."""

    def test_empty_stack_targets_aggregate(self):
        report = create_module_report()
        scopes = ScopeStack(report)
        assert scopes.current_target() is report.aggregate
        assert scopes.current_function is None

    def test_enter_scope_registers_function(self):
        report = create_module_report()
        scopes = ScopeStack(report)

        fn = scopes.enter_scope("f", None, 3)

        assert report.functions == [fn]
        assert report.aggregate.params == 3
        assert scopes.current_target() is fn

    def test_nested_scopes(self):
        report = create_module_report()
        scopes = ScopeStack(report)

        outer = scopes.enter_scope("outer", None, 1)
        inner = scopes.enter_scope("inner", None, 2)
        assert scopes.current_target() is inner
        assert scopes.depth == 2

        scopes.exit_scope()
        assert scopes.current_target() is outer

        scopes.exit_scope()
        assert scopes.current_target() is report.aggregate

        # Popping never removes a report
        assert report.functions == [outer, inner]
        assert report.aggregate.params == 3

    def test_sibling_scopes_keep_entry_order(self):
        report = create_module_report()
        scopes = ScopeStack(report)
        for name in ["a", "b", "c"]:
            scopes.enter_scope(name, None, 0)
            scopes.exit_scope()
        assert [fn.name for fn in report.functions] == ["a", "b", "c"]

    def test_unbalanced_exit_keeps_aggregate(self, caplog):
        report = create_module_report()
        scopes = ScopeStack(report)

        with caplog.at_level(logging.WARNING, logger="complexity_insight"):
            scopes.exit_scope()

        assert scopes.current_target() is report.aggregate
        assert "without a matching scope entry" in caplog.text
