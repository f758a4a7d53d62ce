"""Join the case catalog with grading results, grouped by type."""
from __future__ import annotations

from typing import Optional

from gradeview.logging import get_logger

from .errors import CatalogOrderingError
from .index import build_index
from .models import CaseCatalog, CaseEntry, GradingRun, TypedResultTable

logger = get_logger(__name__)


def build_typed_result_table(
    catalog: CaseCatalog,
    grading_run: Optional[GradingRun],
    *,
    strict: bool = False,
) -> TypedResultTable:
    """Pair every catalog case with its result (or ``None``), per type.

    Entries are sorted by identifier; equal identifiers keep catalog order.
    Types keep the catalog's iteration order. Cases without a result are
    still listed so they show up before grading finishes.
    """

    index = build_index(grading_run, strict=strict)
    table: TypedResultTable = {}
    for case_type, cases in catalog.items():
        entries = [CaseEntry(test_case=case, result=index.get(case)) for case in cases]
        try:
            entries.sort(key=lambda entry: entry.test_case.identifier)
        except TypeError as exc:
            raise CatalogOrderingError(case_type, str(exc)) from exc
        table[case_type] = tuple(entries)
        logger.debug(
            "Type %s: %d case(s), %d graded",
            case_type.value,
            len(entries),
            sum(1 for entry in entries if entry.graded),
        )
    return table
