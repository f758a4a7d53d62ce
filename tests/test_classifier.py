from gradeview.core import TestCase, TestCaseType, TestResult
from gradeview.core.classifier import ResultCategory, classify, highlight_classes

_CASE = TestCase(identifier=1, type=TestCaseType.PUBLIC)


def test_classify_categories() -> None:
    assert classify(None) is ResultCategory.UNKNOWN
    assert classify(TestResult(test_case=_CASE, passed=True)) is ResultCategory.PASS
    assert classify(TestResult(test_case=_CASE, passed=False)) is ResultCategory.FAIL


def test_highlight_classes() -> None:
    assert highlight_classes(None) == ()
    assert highlight_classes(TestResult(test_case=_CASE, passed=True)) == ("bg-success", "text-success")
    assert highlight_classes(TestResult(test_case=_CASE, passed=False)) == ("bg-danger", "text-danger")
