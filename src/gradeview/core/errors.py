"""Exceptions raised by the gradeview core."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import TestCase, TestCaseType


class GradeViewError(Exception):
    """Base class for gradeview errors."""


class DuplicateResultError(GradeViewError):
    """A grading run holds more than one result for the same test case."""

    def __init__(self, test_case: "TestCase") -> None:
        super().__init__(f"Duplicate result for test case '{test_case.label()}'")
        self.test_case = test_case


class CatalogOrderingError(GradeViewError):
    """Identifiers within one test case type cannot be ordered."""

    def __init__(self, case_type: "TestCaseType", detail: str) -> None:
        super().__init__(
            f"Test case identifiers of type '{case_type.value}' are not mutually comparable: {detail}"
        )
        self.case_type = case_type
