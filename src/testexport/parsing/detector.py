"""Test framework detection for parsed Python modules."""

from __future__ import annotations

import ast

from testexport.core.models import Framework
from testexport.parsing.nodes import (
    imports_module,
    is_pytest_class,
    is_test_function,
    is_unittest_class,
)


def _classes(tree: ast.Module) -> list[ast.ClassDef]:
    return [node for node in ast.walk(tree) if isinstance(node, ast.ClassDef)]


def _has_plain_pytest_tests(tree: ast.Module) -> bool:
    """Module-level test functions or Test* classes with test methods."""
    for node in tree.body:
        if is_test_function(node):
            return True
        if isinstance(node, ast.ClassDef) and is_pytest_class(node):
            if any(is_test_function(item) for item in node.body):
                return True
    return False


def detect_framework(tree: ast.Module) -> Framework | None:
    """Detect which test framework a module is written for.

    Priority:
    1. An explicit ``pytest`` import wins (pytest also runs unittest classes).
    2. ``TestCase`` subclasses mean unittest.
    3. Bare ``test_*`` functions / ``Test*`` classes mean plain pytest style.

    Returns:
        The detected Framework, or None when the module holds no tests.
    """
    if imports_module(tree, "pytest"):
        return Framework.PYTEST

    if any(is_unittest_class(cls) for cls in _classes(tree)):
        return Framework.UNITTEST

    if _has_plain_pytest_tests(tree):
        return Framework.PYTEST

    return None
