from __future__ import annotations

import pytest

from gradeview.core import GradingRun, ResultMessages, TestCase, TestCaseType, TestResult
from gradeview.logging import reset_logging


@pytest.fixture(autouse=True)
def clean_logging():
    """Give every test a fresh gradeview logger configuration."""

    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def scenario():
    """Two public cases listed out of identifier order; the second one fails."""

    case1 = TestCase(identifier=2, type=TestCaseType.PUBLIC)
    case2 = TestCase(identifier=1, type=TestCaseType.PUBLIC)
    result1 = TestResult(
        test_case=case1, passed=False, messages=ResultMessages(failure="assert error")
    )
    result2 = TestResult(test_case=case2, passed=True)
    catalog = {TestCaseType.PUBLIC: [case1, case2]}
    run = GradingRun(test_results=(result2, result1))
    return catalog, run, (case1, result1), (case2, result2)
