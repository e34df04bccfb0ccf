"""Extract test-case records from parsed Python test modules."""

from __future__ import annotations

import ast
from collections.abc import Iterable

from testexport.core.models import Framework, TestCase
from testexport.parsing.nodes import (
    FunctionNode,
    dotted_name,
    is_pytest_class,
    is_test_function,
    is_unittest_class,
)

# Marks that configure a test rather than describe it
IGNORED_MARKS = frozenset({"parametrize", "usefixtures", "filterwarnings"})

_MARK_PREFIXES = ("pytest.mark.", "mark.")

UNITTEST_DECORATOR_LABELS = {
    "skip": "skip",
    "skipIf": "skip",
    "skipUnless": "skip",
    "expectedFailure": "xfail",
}


def _merge(*groups: Iterable[str]) -> tuple[str, ...]:
    """Concatenate label groups, dropping duplicates but keeping first-seen order."""
    merged: dict[str, None] = {}
    for group in groups:
        merged.update(dict.fromkeys(group))
    return tuple(merged)


def label_from_expr(expr: ast.expr) -> str | None:
    """Turn a decorator or mark expression into a label.

    ``@pytest.mark.slow`` and ``@pytest.mark.slow(...)`` give ``slow``;
    ``@unittest.skip(...)`` gives ``skip``; ``@unittest.expectedFailure``
    gives ``xfail``.
    """
    target = expr.func if isinstance(expr, ast.Call) else expr
    name = dotted_name(target)
    if not name:
        return None

    for prefix in _MARK_PREFIXES:
        if name.startswith(prefix):
            mark = name[len(prefix) :].split(".")[0]
            return None if mark in IGNORED_MARKS else mark

    if name.startswith("unittest."):
        name = name[len("unittest.") :]
    return UNITTEST_DECORATOR_LABELS.get(name)


def labels_from_decorators(decorators: list[ast.expr]) -> tuple[str, ...]:
    labels = (label_from_expr(decorator) for decorator in decorators)
    return _merge(label for label in labels if label)


def pytestmark_labels(body: list[ast.stmt]) -> tuple[str, ...]:
    """Labels assigned through a ``pytestmark = ...`` statement in a module or class body."""
    labels: list[str] = []
    for stmt in body:
        if not isinstance(stmt, ast.Assign):
            continue
        if not any(isinstance(t, ast.Name) and t.id == "pytestmark" for t in stmt.targets):
            continue
        value = stmt.value
        marks = value.elts if isinstance(value, (ast.List, ast.Tuple)) else [value]
        for mark in marks:
            label = label_from_expr(mark)
            if label:
                labels.append(label)
    return _merge(labels)


class _Collector:
    """Walks one module and emits TestCase records in definition order."""

    def __init__(self, file_path: str, framework: Framework):
        self.file_path = file_path
        self.framework = framework
        self.cases: list[TestCase] = []

    def collect(self, tree: ast.Module) -> list[TestCase]:
        module_labels = pytestmark_labels(tree.body)
        for node in tree.body:
            if self.framework is Framework.PYTEST and is_test_function(node):
                self._add(node, suites=(), inherited=module_labels)
            elif isinstance(node, ast.ClassDef):
                self._visit_class(node, suites=(), inherited=module_labels)
        return self.cases

    def _collects_class(self, node: ast.ClassDef) -> bool:
        if self.framework is Framework.UNITTEST:
            return is_unittest_class(node)
        return is_pytest_class(node) or is_unittest_class(node)

    def _visit_class(self, node: ast.ClassDef, suites: tuple[str, ...], inherited: tuple[str, ...]):
        if not self._collects_class(node):
            return

        labels = _merge(inherited, labels_from_decorators(node.decorator_list), pytestmark_labels(node.body))
        suites = (*suites, node.name)

        for item in node.body:
            if is_test_function(item):
                self._add(item, suites=suites, inherited=labels)
            elif isinstance(item, ast.ClassDef):
                self._visit_class(item, suites=suites, inherited=labels)

    def _add(self, node: FunctionNode, suites: tuple[str, ...], inherited: tuple[str, ...]):
        self.cases.append(
            TestCase(
                name=node.name,
                file=self.file_path,
                labels=_merge(inherited, labels_from_decorators(node.decorator_list)),
                suites=suites,
                line=node.lineno,
            )
        )


def extract_test_cases(tree: ast.Module, file_path: str, framework: Framework) -> list[TestCase]:
    """Extract test cases from a parsed module.

    Args:
        tree: Parsed module.
        file_path: Absolute path recorded on every TestCase.
        framework: Framework the module was detected as.

    Returns:
        Test cases in definition order (empty if the module has none).
    """
    return _Collector(file_path, framework).collect(tree)
