"""Tests for the Python ast walker in examples/basic_usage.py."""

import ast
import runpy
import textwrap
from pathlib import Path

import pytest

from complexity_insight import analyse

EXAMPLE = Path(__file__).resolve().parents[1] / "examples" / "basic_usage.py"

SOURCE = textwrap.dedent(
    """\
    import os
    from . import util

    def pick(a, b):
        if a > b or a == 0:
            return a + b
        return b
    """
)


@pytest.fixture(scope="module")
def walker():
    namespace = runpy.run_path(str(EXAMPLE), run_name="example")
    return namespace["PythonAstWalker"]()


class TestPythonAstWalker:
    """Analyse real Python source through the example walker."""

    def test_function_metrics(self, walker):
        report = analyse(ast.parse(SOURCE), walker)

        (pick,) = report.functions
        assert pick.name == "pick"
        assert pick.params == 2
        assert pick.line == 4
        assert pick.sloc.physical == 4
        # def, if, two returns
        assert pick.sloc.logical == 4
        # entry path + if + "or"
        assert pick.cyclomatic == 3
        assert pick.halstead.operators.identifiers[:3] == ["def", "if", "Or"]

    def test_module_metrics(self, walker):
        report = analyse(ast.parse(SOURCE), walker)

        assert report.aggregate.sloc.logical == 6
        assert report.dependencies == [
            {"line": 1, "path": "os", "type": "import"},
            {"line": 2, "path": ".", "type": "import"},
        ]

    def test_logicalor_setting(self, walker):
        options = {"logicalor": False, "switchcase": True, "forin": False, "trycatch": False}
        report = analyse(ast.parse(SOURCE), walker, options)
        assert report.functions[0].cyclomatic == 2
