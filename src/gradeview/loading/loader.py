"""YAML loader and validation for catalog and grading run files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml
from jsonschema import Draft7Validator

from gradeview.core.models import (
    CaseCatalog,
    GradingRun,
    Identifier,
    ResultMessages,
    TestCase,
    TestCaseType,
    TestResult,
)
from gradeview.logging import get_logger

from .schema import CATALOG_SCHEMA, GRADING_RUN_SCHEMA

logger = get_logger(__name__)

_catalog_validator = Draft7Validator(CATALOG_SCHEMA)
_run_validator = Draft7Validator(GRADING_RUN_SCHEMA)


def load_catalog(path: str) -> CaseCatalog:
    """Load and validate a case catalog file."""
    raw = _read_yaml(path)
    return parse_catalog(raw)


def load_grading_run(path: str, catalog: CaseCatalog) -> Optional[GradingRun]:
    """Load a grading run file; ``None`` when the file reports no grading yet."""
    raw = _read_yaml(path)
    return parse_grading_run(raw, catalog)


def parse_catalog(raw: Any) -> CaseCatalog:
    _validate(_catalog_validator, raw, "Catalog")
    catalog: Dict[TestCaseType, Tuple[TestCase, ...]] = {}
    for type_name, entries in raw["cases"].items():
        case_type = TestCaseType(type_name)
        catalog[case_type] = tuple(
            TestCase(identifier=_identifier(entry["id"]), type=case_type, hint=entry.get("hint"))
            for entry in entries or []
        )
    _catalog_keys(catalog)
    logger.debug(
        "Loaded catalog with %d case(s) across %d type(s)",
        sum(len(cases) for cases in catalog.values()),
        len(catalog),
    )
    return catalog


def parse_grading_run(raw: Any, catalog: CaseCatalog) -> Optional[GradingRun]:
    _validate(_run_validator, raw, "Grading run")
    entries = raw.get("results")
    if entries is None:
        logger.debug("Grading run has no results yet")
        return None
    known = _catalog_keys(catalog)
    results: List[TestResult] = []
    for position, entry in enumerate(entries):
        key = (TestCaseType(entry["type"]), _identifier(entry["id"]))
        test_case = known.get(key)
        if test_case is None:
            raise ValueError(
                f"results/{position}: no test case '{key[0].value}:{key[1]}' in the catalog"
            )
        results.append(
            TestResult(
                test_case=test_case,
                passed=entry["passed"],
                messages=ResultMessages.from_mapping(entry.get("messages")),
            )
        )
    return GradingRun(test_results=tuple(results))


def _read_yaml(path: str) -> Any:
    file_path = Path(path).expanduser().resolve()
    return yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}


def _validate(validator: Draft7Validator, raw: Any, label: str) -> None:
    if not isinstance(raw, Mapping):
        raise ValueError(f"{label} file must contain a mapping at the top level")
    errors = sorted(validator.iter_errors(raw), key=lambda e: [str(part) for part in e.path])
    if errors:
        messages = "; ".join(
            f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors
        )
        raise ValueError(f"{label} schema validation failed: {messages}")


def _identifier(value: Any) -> Identifier:
    # The schema's "integer" also admits integral floats such as 1.0
    if isinstance(value, float):
        return int(value)
    return value


def _catalog_keys(catalog: CaseCatalog) -> Dict[Tuple[TestCaseType, Identifier], TestCase]:
    """Index catalog cases by file address; addresses must be unique."""
    keys: Dict[Tuple[TestCaseType, Identifier], TestCase] = {}
    for cases in catalog.values():
        for case in cases:
            if case.key in keys:
                raise ValueError(f"Duplicate test case '{case.label()}' in the catalog")
            keys[case.key] = case
    return keys
