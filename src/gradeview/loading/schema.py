"""JSON schemas for catalog and grading run documents."""
from __future__ import annotations

from gradeview.core.models import MESSAGE_KINDS, TestCaseType

_IDENTIFIER = {"type": ["integer", "string"]}
_TYPE_NAMES = [case_type.value for case_type in TestCaseType]

CATALOG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "gradeview case catalog",
    "type": "object",
    "required": ["cases"],
    "properties": {
        "cases": {
            "type": "object",
            "propertyNames": {"enum": _TYPE_NAMES},
            "additionalProperties": {
                "type": ["array", "null"],
                "items": {
                    "type": "object",
                    "required": ["id"],
                    "properties": {
                        "id": _IDENTIFIER,
                        "hint": {"type": ["string", "null"]},
                    },
                    "additionalProperties": False,
                },
            },
        },
    },
}

GRADING_RUN_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "gradeview grading run",
    "type": "object",
    "properties": {
        "results": {
            "type": ["array", "null"],
            "items": {
                "type": "object",
                "required": ["type", "id", "passed"],
                "properties": {
                    "type": {"enum": _TYPE_NAMES},
                    "id": _IDENTIFIER,
                    "passed": {"type": "boolean"},
                    "messages": {
                        "type": ["object", "null"],
                        "properties": {kind: {"type": ["string", "null"]} for kind in MESSAGE_KINDS},
                    },
                },
            },
        },
    },
}
