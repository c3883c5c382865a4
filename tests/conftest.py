"""Shared test fixtures: scripted and tree walkers driving the callbacks."""

import pytest


class ScriptedWalker:
    """Replays a fixed list of events against the callbacks.

    Events:
        ("node", node, syntax)
        ("enter", name, extent, param_count)
        ("exit",)
    """

    def __init__(self, events):
        self.events = list(events)
        self.calls = []

    def walk(self, tree, settings, callbacks):
        self.calls.append((tree, settings))
        for event in self.events:
            kind, args = event[0], event[1:]
            if kind == "node":
                callbacks.process_node(*args)
            elif kind == "enter":
                callbacks.create_scope(*args)
            elif kind == "exit":
                callbacks.pop_scope()
            else:
                raise ValueError(f"Unknown event: {kind}")


class TreeWalker:
    """Pre-order walker over dict trees ``{"type", "children", ...}``.

    ``syntax`` maps node types to descriptors. Nodes of type "function"
    open a scope named by their "name" key.
    """

    def __init__(self, syntax):
        self.syntax = syntax

    def walk(self, tree, settings, callbacks):
        self._visit(tree, callbacks)

    def _visit(self, node, callbacks):
        is_scope = node["type"] == "function"
        if is_scope:
            callbacks.create_scope(node.get("name"), node.get("loc"), len(node.get("params", [])))

        callbacks.process_node(node, self.syntax.get(node["type"], {}))
        for child in node.get("children", []):
            self._visit(child, callbacks)

        if is_scope:
            callbacks.pop_scope()


@pytest.fixture
def scripted_walker():
    """Factory for ScriptedWalker instances."""
    return ScriptedWalker


@pytest.fixture
def empty_tree():
    """Module tree with no children and no location."""
    return {"type": "module", "children": []}


@pytest.fixture
def js_like_syntax():
    """A tiny classifier table in the shape a JavaScript grammar would use."""
    return {
        "module": {},
        "function": {
            "lloc": 1,
            "operators": [{"identifier": "function"}],
            "operands": [{"identifier": lambda node: node.get("name")}],
        },
        "if": {
            "lloc": 1,
            "cyclomatic": 1,
            "operators": [
                {"identifier": "if"},
                {"identifier": "else", "filter": lambda node: node.get("alternate") is True},
            ],
        },
        "binary": {
            "operators": [{"identifier": lambda node: node["operator"]}],
        },
        "identifier": {
            "operands": [{"identifier": lambda node: node["name"]}],
        },
        "return": {
            "lloc": 1,
            "operators": [{"identifier": "return"}],
        },
        "call": {
            "lloc": lambda node: 1,
            "operators": [{"identifier": "()"}],
            "dependencies": lambda node, is_first: (
                {"line": node["line"], "path": node["path"], "type": "cjs"}
                if node.get("callee") == "require"
                else None
            ),
        },
    }


@pytest.fixture
def tree_walker(js_like_syntax):
    """TreeWalker over the JavaScript-like classifier table."""
    return TreeWalker(js_like_syntax)


@pytest.fixture
def sample_module():
    """Module: a require() call plus two functions, one nested inside the other."""
    return {
        "type": "module",
        "loc": {"start": {"line": 1}, "end": {"line": 20}},
        "children": [
            {"type": "call", "callee": "require", "path": "./lib", "line": 1},
            {
                "type": "function",
                "name": "outer",
                "params": ["a", "b"],
                "loc": {"start": {"line": 3}, "end": {"line": 18}},
                "children": [
                    {
                        "type": "if",
                        "alternate": True,
                        "children": [
                            {
                                "type": "binary",
                                "operator": "+",
                                "children": [
                                    {"type": "identifier", "name": "a"},
                                    {"type": "identifier", "name": "b"},
                                ],
                            }
                        ],
                    },
                    {
                        "type": "function",
                        "name": "inner",
                        "params": [],
                        "loc": {"start": {"line": 10}, "end": {"line": 12}},
                        "children": [
                            {
                                "type": "return",
                                "children": [{"type": "identifier", "name": "a"}],
                            }
                        ],
                    },
                ],
            },
        ],
    }
