"""JSON reporter emitting a schema-validated view payload."""
from __future__ import annotations

import datetime
import json
from pathlib import Path
from typing import Any, Dict, Optional

import click
from jsonschema import Draft7Validator

from gradeview.core.view import CaseRow, ResultView

from .schema import REPORT_SCHEMA, SCHEMA_VERSION

_validator = Draft7Validator(REPORT_SCHEMA)


def build_payload(view: ResultView) -> Dict[str, Any]:
    summary = view.summary()
    types: Dict[str, Any] = {}
    for case_type, rows in view.rows.items():
        counts = summary[case_type]
        failure = view.first_failures.get(case_type)
        types[case_type.value] = {
            "summary": {
                "total": counts.total,
                "passed": counts.passed,
                "failed": counts.failed,
                "ungraded": counts.ungraded,
            },
            "first_failure": _row_payload(CaseRow.from_entry(failure)) if failure is not None else None,
            "cases": [_row_payload(row) for row in rows],
        }
    generated = datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at": generated.isoformat().replace("+00:00", "Z"),
        "types": types,
    }


def _row_payload(row: CaseRow) -> Dict[str, Any]:
    return {
        "id": row.test_case.identifier,
        "category": row.category.value,
        "passed": row.result.passed if row.result is not None else None,
        "hint": row.hint,
        "output": row.output,
        "classes": list(row.css_classes),
    }


class JsonReporter:
    """Writes the view as JSON to ``path`` or stdout."""

    def __init__(self, *, path: Optional[str] = None) -> None:
        self._path = path

    def render(self, view: ResultView) -> None:
        payload = build_payload(view)
        _validator.validate(payload)
        text = json.dumps(payload, indent=2)
        if self._path:
            target = Path(self._path)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        else:
            click.echo(text)
