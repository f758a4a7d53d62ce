"""Core dataclasses shared across gradeview subsystems."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

Identifier = Union[int, str]


class TestCaseType(str, Enum):
    """Visibility class of a test case; also the grouping key."""

    __test__ = False

    PUBLIC = "public"
    PRIVATE = "private"
    EVALUATION = "evaluation"


@dataclass(frozen=True)
class TestCase:
    """Catalog entry describing one check, independent of any run."""

    __test__ = False

    identifier: Identifier
    type: TestCaseType
    hint: Optional[str] = None

    @property
    def key(self) -> Tuple[TestCaseType, Identifier]:
        """Address of the case in catalog and grading run files."""
        return (self.type, self.identifier)

    def label(self) -> str:
        return f"{self.type.value}:{self.identifier}"


MESSAGE_KINDS: Tuple[str, ...] = ("hint", "output", "failure", "error")


@dataclass(frozen=True)
class ResultMessages:
    """Text produced by the grader for one result. Every kind is optional."""

    hint: Optional[str] = None
    output: Optional[str] = None
    failure: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ResultMessages":
        if not data:
            return cls()
        values: Dict[str, Optional[str]] = {}
        for kind in MESSAGE_KINDS:
            value = data.get(kind)
            values[kind] = None if value is None else str(value)
        return cls(**values)

    def as_dict(self) -> Dict[str, str]:
        return {
            kind: getattr(self, kind)
            for kind in MESSAGE_KINDS
            if getattr(self, kind) is not None
        }


@dataclass(frozen=True)
class TestResult:
    """Outcome of running one test case in one grading run."""

    __test__ = False

    test_case: TestCase
    passed: bool
    messages: ResultMessages = field(default_factory=ResultMessages)


@dataclass(frozen=True)
class GradingRun:
    """All results produced for one submission attempt."""

    test_results: Tuple[TestResult, ...] = tuple()


CaseCatalog = Mapping[TestCaseType, Sequence[TestCase]]


@dataclass(frozen=True)
class CaseEntry:
    """A catalog case paired with its result, if the run produced one."""

    test_case: TestCase
    result: Optional[TestResult] = None

    @property
    def graded(self) -> bool:
        return self.result is not None

    @property
    def failed(self) -> bool:
        return self.result is not None and not self.result.passed


TypedResultTable = Dict[TestCaseType, Tuple[CaseEntry, ...]]
FirstFailurePerType = Dict[TestCaseType, Optional[CaseEntry]]
