"""Tests for test-case extraction from parsed modules."""

from __future__ import annotations

import ast

from testexport.core.models import Framework
from testexport.parsing.extractor import extract_test_cases, label_from_expr
from tests.factories import PYTEST_MODULE, UNITTEST_MODULE

FILE = "/project/tests/test_mod.py"


def _extract(source: str, framework: Framework = Framework.PYTEST):
    return extract_test_cases(ast.parse(source), FILE, framework)


class TestPytestExtraction:
    """Tests for pytest-style modules."""

    def test_collects_functions_and_methods_in_order(self):
        cases = _extract(PYTEST_MODULE)
        assert [c.name for c in cases] == ["test_alpha", "test_beta", "test_gamma"]

    def test_records_file_and_line(self):
        cases = _extract("def test_x():\n    pass\n")
        assert cases[0].file == FILE
        assert cases[0].line == 1

    def test_suites_for_class_methods(self):
        cases = _extract(PYTEST_MODULE)
        assert cases[0].suites == ()
        assert cases[2].suites == ("TestGroup",)

    def test_labels_from_marks_and_pytestmark(self):
        """Module pytestmark is inherited; own marks follow."""
        cases = {c.name: c for c in _extract(PYTEST_MODULE)}
        assert cases["test_alpha"].labels == ("integration", "slow")
        assert cases["test_beta"].labels == ("integration",)
        assert cases["test_gamma"].labels == ("integration", "smoke")

    def test_async_tests_are_collected(self):
        cases = _extract("import pytest\n\nasync def test_async():\n    pass\n")
        assert [c.name for c in cases] == ["test_async"]

    def test_non_test_functions_are_ignored(self):
        source = "def helper():\n    pass\n\ndef test_real():\n    pass\n"
        assert [c.name for c in _extract(source)] == ["test_real"]

    def test_class_with_init_is_skipped(self):
        """pytest does not collect Test* classes that define __init__."""
        source = (
            "class TestWithInit:\n"
            "    def __init__(self):\n"
            "        pass\n"
            "    def test_x(self):\n"
            "        pass\n"
        )
        assert _extract(source) == []

    def test_non_test_class_is_skipped(self):
        source = "class Helper:\n    def test_x(self):\n        pass\n"
        assert _extract(source) == []

    def test_nested_classes(self):
        source = (
            "import pytest\n\n"
            "@pytest.mark.api\n"
            "class TestOuter:\n"
            "    class TestInner:\n"
            "        @pytest.mark.slow\n"
            "        def test_deep(self):\n"
            "            pass\n"
        )
        cases = _extract(source)
        assert len(cases) == 1
        assert cases[0].suites == ("TestOuter", "TestInner")
        assert cases[0].labels == ("api", "slow")

    def test_ignored_marks_and_duplicates(self):
        source = (
            "import pytest\n\n"
            "pytestmark = [pytest.mark.slow, pytest.mark.filterwarnings('ignore')]\n\n"
            "@pytest.mark.parametrize('x', [1, 2])\n"
            "@pytest.mark.usefixtures('db')\n"
            "@pytest.mark.slow\n"
            "@pytest.mark.xfail(reason='flaky')\n"
            "def test_x(x):\n"
            "    pass\n"
        )
        cases = _extract(source)
        assert cases[0].labels == ("slow", "xfail")

    def test_unittest_classes_in_pytest_module(self):
        source = "import pytest\nimport unittest\n\nclass Legacy(unittest.TestCase):\n    def test_old(self):\n        pass\n"
        cases = _extract(source)
        assert [(c.suites, c.name) for c in cases] == [(("Legacy",), "test_old")]


class TestUnittestExtraction:
    """Tests for unittest-style modules."""

    def test_collects_test_methods_only(self):
        cases = _extract(UNITTEST_MODULE, Framework.UNITTEST)
        assert [c.name for c in cases] == ["test_add", "test_divide"]

    def test_suite_is_class_name(self):
        cases = _extract(UNITTEST_MODULE, Framework.UNITTEST)
        assert all(c.suites == ("CalculatorTest",) for c in cases)

    def test_skip_decorator_becomes_label(self):
        cases = {c.name: c for c in _extract(UNITTEST_MODULE, Framework.UNITTEST)}
        assert cases["test_add"].labels == ()
        assert cases["test_divide"].labels == ("skip",)

    def test_module_functions_are_ignored(self):
        source = "import unittest\n\ndef test_loose():\n    pass\n\nclass A(unittest.TestCase):\n    def test_x(self):\n        pass\n"
        assert [c.name for c in _extract(source, Framework.UNITTEST)] == ["test_x"]

    def test_class_decorators_are_inherited(self):
        source = (
            "import unittest\n\n"
            "@unittest.skipIf(True, 'win only')\n"
            "class A(unittest.TestCase):\n"
            "    @unittest.expectedFailure\n"
            "    def test_x(self):\n"
            "        pass\n"
        )
        assert _extract(source, Framework.UNITTEST)[0].labels == ("skip", "xfail")


class TestLabelFromExpr:
    """Tests for single decorator/mark conversion."""

    def _label(self, expr: str):
        return label_from_expr(ast.parse(expr, mode="eval").body)

    def test_bare_mark(self):
        assert self._label("pytest.mark.slow") == "slow"

    def test_called_mark(self):
        assert self._label("pytest.mark.timeout(10)") == "timeout"

    def test_imported_mark(self):
        assert self._label("mark.smoke") == "smoke"

    def test_ignored_mark(self):
        assert self._label("pytest.mark.parametrize('a', [1])") is None

    def test_unrelated_decorator(self):
        assert self._label("functools.lru_cache") is None

    def test_non_name_expression(self):
        assert self._label("decorators[0]") is None
