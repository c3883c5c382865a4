#!/usr/bin/env python3
"""
Example: Basic usage of Complexity Insight as a Python library

Complexity Insight knows no grammar of its own. This example plugs in a
small walker for Python's own ``ast`` module and prints per-function metrics.

    python examples/basic_usage.py path/to/module.py
"""

import ast
import sys
from pathlib import Path

from complexity_insight import analyse

SCOPE_NODES = (ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda)


def _loc(node):
    return {"start": {"line": node.lineno}, "end": {"line": node.end_lineno}}


def _op_name(op):
    return type(op).__name__


def syntax_table(settings):
    """Per-node-type descriptors; some branch counts depend on the settings."""
    return {
        "FunctionDef": {
            "lloc": 1,
            "operators": [{"identifier": "def"}],
            "operands": [{"identifier": lambda node: node.name}],
        },
        "AsyncFunctionDef": {
            "lloc": 1,
            "operators": [{"identifier": "async def"}],
            "operands": [{"identifier": lambda node: node.name}],
        },
        "Lambda": {"operators": [{"identifier": "lambda"}]},
        "If": {
            "lloc": 1,
            "cyclomatic": 1,
            "operators": [
                {"identifier": "if"},
                {"identifier": "else", "filter": lambda node: bool(node.orelse)},
            ],
        },
        "IfExp": {"cyclomatic": 1, "operators": [{"identifier": "?:"}]},
        "For": {"lloc": 1, "cyclomatic": 1 if settings.get("forin") else 0,
                "operators": [{"identifier": "for"}]},
        "While": {"lloc": 1, "cyclomatic": 1, "operators": [{"identifier": "while"}]},
        "ExceptHandler": {
            "lloc": 1,
            "cyclomatic": 1 if settings.get("trycatch") else 0,
            "operators": [{"identifier": "except"}],
        },
        "match_case": {
            "lloc": 1,
            "cyclomatic": 1 if settings.get("switchcase") else 0,
            "operators": [{"identifier": "case"}],
        },
        "BoolOp": {
            "cyclomatic": lambda node: (
                len(node.values) - 1
                if isinstance(node.op, ast.And) or settings.get("logicalor")
                else 0
            ),
            "operators": [{"identifier": lambda node: _op_name(node.op)}],
        },
        "Return": {"lloc": 1, "operators": [{"identifier": "return"}]},
        "Assign": {"lloc": 1, "operators": [{"identifier": "="}]},
        "AugAssign": {"lloc": 1, "operators": [{"identifier": lambda node: _op_name(node.op) + "="}]},
        "Expr": {"lloc": 1},
        "BinOp": {"operators": [{"identifier": lambda node: _op_name(node.op)}]},
        "UnaryOp": {"operators": [{"identifier": lambda node: _op_name(node.op)}]},
        "Compare": {"operators": [{"identifier": lambda node: _op_name(node.ops[0])}]},
        "Call": {"operators": [{"identifier": "()"}]},
        "Name": {"operands": [{"identifier": lambda node: node.id}]},
        "Constant": {"operands": [{"identifier": lambda node: repr(node.value)}]},
        "Import": {
            "lloc": 1,
            "dependencies": lambda node, is_first: [
                {"line": node.lineno, "path": alias.name, "type": "import"} for alias in node.names
            ],
        },
        "ImportFrom": {
            "lloc": 1,
            "dependencies": lambda node, is_first: {
                "line": node.lineno,
                "path": "." * node.level + (node.module or ""),
                "type": "import",
            },
        },
    }


class PythonAstWalker:
    """Pre-order walker over ``ast`` trees."""

    def walk(self, tree, settings, callbacks):
        table = syntax_table(settings)
        self._visit(tree, table, callbacks)

    def _visit(self, node, table, callbacks):
        is_scope = isinstance(node, SCOPE_NODES)
        if is_scope:
            name = getattr(node, "name", "<lambda>")
            callbacks.create_scope(name, _loc(node), len(node.args.args))

        callbacks.process_node(node, table.get(type(node).__name__))
        for child in ast.iter_child_nodes(node):
            self._visit(child, table, callbacks)

        if is_scope:
            callbacks.pop_scope()


def main(argv):
    path = Path(argv[1]) if len(argv) > 1 else Path(__file__)
    report = analyse(ast.parse(path.read_text(encoding="utf-8")), PythonAstWalker())

    for fn in report.functions:
        print(
            f"{fn.name} (line {fn.line}): lloc={fn.sloc.logical} "
            f"cyclomatic={fn.cyclomatic} effort={fn.halstead.effort:.1f}"
        )
    print(f"Maintainability: {report.maintainability:.1f}")
    print(f"Dependencies: {', '.join(dep['path'] for dep in report.dependencies)}")


if __name__ == "__main__":
    main(sys.argv)
