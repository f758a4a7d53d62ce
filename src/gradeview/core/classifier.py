"""Map results to display categories."""
from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from .models import TestResult


class ResultCategory(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    UNKNOWN = "unknown"


# Bootstrap classes used to highlight a result row.
CATEGORY_CLASSES = {
    ResultCategory.PASS: ("bg-success", "text-success"),
    ResultCategory.FAIL: ("bg-danger", "text-danger"),
    ResultCategory.UNKNOWN: (),
}


def classify(result: Optional[TestResult]) -> ResultCategory:
    if result is None:
        return ResultCategory.UNKNOWN
    return ResultCategory.PASS if result.passed else ResultCategory.FAIL


def highlight_classes(result: Optional[TestResult]) -> Tuple[str, ...]:
    return CATEGORY_CLASSES[classify(result)]
