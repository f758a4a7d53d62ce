from __future__ import annotations

from gradeview.core import GradingRun, TestCase, TestCaseType, TestResult
from gradeview.core.failures import first_failure_per_type
from gradeview.core.grouping import build_typed_result_table


def test_scenario_first_failure(scenario) -> None:
    catalog, run, (case1, result1), _ = scenario
    failures = first_failure_per_type(build_typed_result_table(catalog, run))
    entry = failures[TestCaseType.PUBLIC]
    assert entry is not None
    assert (entry.test_case, entry.result) == (case1, result1)


def test_earliest_failure_is_reported() -> None:
    cases = [TestCase(identifier=i, type=TestCaseType.PUBLIC) for i in (1, 2, 3)]
    # Arrival order differs from catalog order.
    run = GradingRun(
        test_results=(
            TestResult(test_case=cases[2], passed=False),
            TestResult(test_case=cases[1], passed=False),
            TestResult(test_case=cases[0], passed=True),
        )
    )
    failures = first_failure_per_type(build_typed_result_table({TestCaseType.PUBLIC: cases}, run))
    assert failures[TestCaseType.PUBLIC].test_case is cases[1]


def test_no_failure_maps_to_none() -> None:
    passing = TestCase(identifier=1, type=TestCaseType.PUBLIC)
    ungraded = TestCase(identifier=2, type=TestCaseType.PRIVATE)
    catalog = {
        TestCaseType.PUBLIC: [passing],
        TestCaseType.PRIVATE: [ungraded],
        TestCaseType.EVALUATION: [],
    }
    run = GradingRun(test_results=(TestResult(test_case=passing, passed=True),))
    failures = first_failure_per_type(build_typed_result_table(catalog, run))
    assert failures == {
        TestCaseType.PUBLIC: None,
        TestCaseType.PRIVATE: None,
        TestCaseType.EVALUATION: None,
    }
