"""Core models and helpers exposed at the package level."""
from .classifier import CATEGORY_CLASSES, ResultCategory, classify, highlight_classes
from .errors import CatalogOrderingError, DuplicateResultError, GradeViewError
from .failures import first_failure_per_type
from .fallbacks import resolve_hint, resolve_output
from .grouping import build_typed_result_table
from .index import build_index
from .models import (
    CaseCatalog,
    CaseEntry,
    FirstFailurePerType,
    GradingRun,
    ResultMessages,
    TestCase,
    TestCaseType,
    TestResult,
    TypedResultTable,
)
from .view import CaseRow, ResultView, TypeSummary, build_result_view

__all__ = [
    "CATEGORY_CLASSES",
    "CaseCatalog",
    "CaseEntry",
    "CaseRow",
    "CatalogOrderingError",
    "DuplicateResultError",
    "FirstFailurePerType",
    "GradeViewError",
    "GradingRun",
    "ResultCategory",
    "ResultMessages",
    "ResultView",
    "TestCase",
    "TestCaseType",
    "TestResult",
    "TypeSummary",
    "TypedResultTable",
    "build_index",
    "build_result_view",
    "build_typed_result_table",
    "classify",
    "first_failure_per_type",
    "highlight_classes",
    "resolve_hint",
    "resolve_output",
]
