"""Small AST helpers shared by the detector and the extractor."""

from __future__ import annotations

import ast

FunctionNode = ast.FunctionDef | ast.AsyncFunctionDef


def dotted_name(node: ast.expr) -> str | None:
    """Return ``a.b.c`` for Name/Attribute chains, None for anything else."""
    parts: list[str] = []
    while isinstance(node, ast.Attribute):
        parts.append(node.attr)
        node = node.value
    if not isinstance(node, ast.Name):
        return None
    parts.append(node.id)
    return ".".join(reversed(parts))


def is_test_function(node: ast.stmt) -> bool:
    return isinstance(node, FunctionNode) and node.name.startswith("test")


def is_unittest_class(node: ast.ClassDef) -> bool:
    """Check if a class derives from a ``*TestCase`` base.

    Matches ``unittest.TestCase``, ``TestCase``, ``IsolatedAsyncioTestCase``
    and project-specific bases such as ``APITestCase``.
    """
    for base in node.bases:
        name = dotted_name(base)
        if name and name.rsplit(".", 1)[-1].endswith("TestCase"):
            return True
    return False


def is_pytest_class(node: ast.ClassDef) -> bool:
    """Check if pytest would collect the class (``Test*`` without ``__init__``)."""
    if not node.name.startswith("Test"):
        return False
    return not any(isinstance(item, FunctionNode) and item.name == "__init__" for item in node.body)


def imports_module(tree: ast.Module, module: str) -> bool:
    """Check if the module imports ``module`` anywhere in its body."""
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            if any(alias.name.split(".")[0] == module for alias in node.names):
                return True
        elif isinstance(node, ast.ImportFrom):
            if node.module and node.module.split(".")[0] == module and node.level == 0:
                return True
    return False
