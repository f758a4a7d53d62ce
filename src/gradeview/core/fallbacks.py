"""Text fallbacks for hint and output columns."""
from __future__ import annotations

from typing import Optional

from .models import TestCase, TestResult

OUTPUT_FALLBACK_ORDER = ("output", "failure", "error")


def resolve_hint(test_case: TestCase, result: Optional[TestResult]) -> str:
    """Hint from the result when the grader sent one, else the catalog hint."""

    candidates = (result.messages.hint if result is not None else None, test_case.hint)
    for value in candidates:
        if value and value.strip():
            return value
    return ""


def resolve_output(result: Optional[TestResult]) -> str:
    """Output shown to tutors: output, then failure, then error message."""

    if result is None:
        return ""
    for kind in OUTPUT_FALLBACK_ORDER:
        value = getattr(result.messages, kind)
        if value and value.strip():
            return value
    return ""
