"""Lookup of grading results keyed by test case."""
from __future__ import annotations

from typing import Dict, Optional

from gradeview.logging import get_logger

from .errors import DuplicateResultError
from .models import GradingRun, TestCase, TestResult

logger = get_logger(__name__)

ResultIndex = Dict[TestCase, TestResult]


def build_index(grading_run: Optional[GradingRun], *, strict: bool = False) -> ResultIndex:
    """Map every result in ``grading_run`` to the test case it refers to.

    Cases are compared by value, so two catalog cases sharing an identifier
    but differing in any other field keep separate results. A run must not
    report the same case twice. By default the later result overwrites the
    earlier one; ``strict=True`` raises :class:`DuplicateResultError` instead.
    """

    if grading_run is None:
        return {}
    index: ResultIndex = {}
    for result in grading_run.test_results:
        test_case = result.test_case
        if test_case in index:
            if strict:
                raise DuplicateResultError(test_case)
            logger.warning(
                "Duplicate result for test case %s; keeping the later one",
                test_case.label(),
            )
        index[test_case] = result
    logger.debug("Indexed %d result(s)", len(index))
    return index
