"""Headline failure per test case type."""
from __future__ import annotations

from typing import Iterable, Optional

from .models import CaseEntry, FirstFailurePerType, TypedResultTable


def first_failure(entries: Iterable[CaseEntry]) -> Optional[CaseEntry]:
    for entry in entries:
        if entry.failed:
            return entry
    return None


def first_failure_per_type(table: TypedResultTable) -> FirstFailurePerType:
    """First graded, failing entry of each type in table order, else ``None``."""

    return {case_type: first_failure(entries) for case_type, entries in table.items()}
