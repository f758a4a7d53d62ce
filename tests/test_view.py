from __future__ import annotations

from gradeview.core import ResultCategory, TestCaseType
from gradeview.core.view import TypeSummary, build_result_view


def test_scenario_view(scenario) -> None:
    catalog, run, (case1, result1), (case2, _) = scenario
    view = build_result_view(catalog, run)
    rows = view.rows[TestCaseType.PUBLIC]
    assert [row.test_case for row in rows] == [case2, case1]
    assert rows[0].category is ResultCategory.PASS
    assert rows[1].category is ResultCategory.FAIL
    assert rows[1].output == "assert error"
    assert rows[1].css_classes == ("bg-danger", "text-danger")
    assert view.first_failures[TestCaseType.PUBLIC].result is result1
    assert view.has_failures
    assert view.summary()[TestCaseType.PUBLIC] == TypeSummary(total=2, passed=1, failed=1, ungraded=0)


def test_view_without_run(scenario) -> None:
    catalog, _, _, _ = scenario
    view = build_result_view(catalog, None)
    assert not view.has_failures
    assert all(row.category is ResultCategory.UNKNOWN for row in view.rows[TestCaseType.PUBLIC])
    assert view.summary()[TestCaseType.PUBLIC].ungraded == 2
