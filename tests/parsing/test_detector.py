"""Tests for framework detection."""

from __future__ import annotations

import ast

import pytest

from testexport.core.models import Framework
from testexport.parsing.detector import detect_framework
from tests.factories import NO_TESTS_MODULE, PYTEST_MODULE, UNITTEST_MODULE


def _detect(source: str) -> Framework | None:
    return detect_framework(ast.parse(source))


class TestDetectFramework:
    """Tests for detect_framework."""

    def test_pytest_import(self):
        assert _detect(PYTEST_MODULE) is Framework.PYTEST

    def test_unittest_testcase(self):
        assert _detect(UNITTEST_MODULE) is Framework.UNITTEST

    def test_no_tests_returns_none(self):
        assert _detect(NO_TESTS_MODULE) is None

    def test_empty_module_returns_none(self):
        assert _detect("") is None

    @pytest.mark.parametrize(
        "source",
        [
            "from unittest import TestCase\n\nclass A(TestCase):\n    pass\n",
            "import unittest\n\nclass A(unittest.IsolatedAsyncioTestCase):\n    pass\n",
            "from rest_framework.test import APITestCase\n\nclass A(APITestCase):\n    pass\n",
        ],
    )
    def test_testcase_subclasses(self, source):
        """Any *TestCase base marks a unittest module."""
        assert _detect(source) is Framework.UNITTEST

    def test_pytest_import_wins_over_testcase(self):
        """pytest runs unittest classes too, so an explicit import decides."""
        source = "import pytest\nimport unittest\n\nclass A(unittest.TestCase):\n    def test_x(self):\n        pass\n"
        assert _detect(source) is Framework.PYTEST

    def test_from_pytest_import(self):
        assert _detect("from pytest import fixture\n") is Framework.PYTEST

    def test_plain_test_functions(self):
        """Bare test functions without imports are pytest-style."""
        assert _detect("def test_x():\n    assert 1\n") is Framework.PYTEST

    def test_plain_test_class(self):
        source = "class TestThing:\n    def test_x(self):\n        pass\n"
        assert _detect(source) is Framework.PYTEST

    def test_test_class_without_tests_is_not_enough(self):
        source = "class TestThing:\n    def helper(self):\n        pass\n"
        assert _detect(source) is None

    def test_relative_import_named_pytest_is_ignored(self):
        assert _detect("from .pytest import helper\n") is None
