"""Row-level view model combining the core helpers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .classifier import ResultCategory, classify, highlight_classes
from .fallbacks import resolve_hint, resolve_output
from .failures import first_failure_per_type
from .grouping import build_typed_result_table
from .models import (
    CaseCatalog,
    CaseEntry,
    FirstFailurePerType,
    GradingRun,
    TestCase,
    TestCaseType,
    TestResult,
    TypedResultTable,
)


@dataclass(frozen=True)
class CaseRow:
    """Everything a renderer needs for one test case row."""

    test_case: TestCase
    result: Optional[TestResult]
    category: ResultCategory
    hint: str
    output: str
    css_classes: Tuple[str, ...]

    @classmethod
    def from_entry(cls, entry: CaseEntry) -> "CaseRow":
        return cls(
            test_case=entry.test_case,
            result=entry.result,
            category=classify(entry.result),
            hint=resolve_hint(entry.test_case, entry.result),
            output=resolve_output(entry.result),
            css_classes=highlight_classes(entry.result),
        )


@dataclass(frozen=True)
class TypeSummary:
    total: int
    passed: int
    failed: int
    ungraded: int


@dataclass(frozen=True)
class ResultView:
    table: TypedResultTable
    first_failures: FirstFailurePerType
    rows: Dict[TestCaseType, Tuple[CaseRow, ...]]

    def summary(self) -> Dict[TestCaseType, TypeSummary]:
        counts: Dict[TestCaseType, TypeSummary] = {}
        for case_type, rows in self.rows.items():
            categories = [row.category for row in rows]
            counts[case_type] = TypeSummary(
                total=len(rows),
                passed=categories.count(ResultCategory.PASS),
                failed=categories.count(ResultCategory.FAIL),
                ungraded=categories.count(ResultCategory.UNKNOWN),
            )
        return counts

    @property
    def has_failures(self) -> bool:
        return any(entry is not None for entry in self.first_failures.values())


def build_result_view(
    catalog: CaseCatalog,
    grading_run: Optional[GradingRun],
    *,
    strict: bool = False,
) -> ResultView:
    table = build_typed_result_table(catalog, grading_run, strict=strict)
    rows = {
        case_type: tuple(CaseRow.from_entry(entry) for entry in entries)
        for case_type, entries in table.items()
    }
    return ResultView(table=table, first_failures=first_failure_per_type(table), rows=rows)
