"""Pydantic schemas for the collector's load endpoint."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from testexport.core.models import Framework, TestCase

LANGUAGE = "python"


class LoadEntry(BaseModel):
    """One test as sent to the collector."""

    name: str
    suites: list[str] = Field(default_factory=list)
    labels: list[str] = Field(default_factory=list)
    file: str
    line: int | None = None

    @classmethod
    def from_test_case(cls, test_case: TestCase) -> LoadEntry:
        return cls(**test_case.to_dict())


class LoadRequest(BaseModel):
    """Body of ``POST /api/load``."""

    framework: str | None = None
    language: str = LANGUAGE
    tests: list[LoadEntry] = Field(default_factory=list)


def build_request_body(test_cases: Sequence[TestCase], framework: Framework | None) -> str:
    """Serialize a batch of test cases tagged with the run's framework."""
    request = LoadRequest(
        framework=framework.value if framework else None,
        tests=[LoadEntry.from_test_case(tc) for tc in test_cases],
    )
    return request.model_dump_json()
