"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

_ENTRY = {
    "type": "object",
    "required": ["id", "category", "passed", "hint", "output"],
    "properties": {
        "id": {"type": ["integer", "string"]},
        "category": {"enum": ["pass", "fail", "unknown"]},
        "passed": {"type": ["boolean", "null"]},
        "hint": {"type": "string"},
        "output": {"type": "string"},
        "classes": {"type": "array", "items": {"type": "string"}},
    },
}

REPORT_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "gradeview report",
    "type": "object",
    "required": ["schema_version", "generated_at", "types"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "types": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "required": ["summary", "first_failure", "cases"],
                "properties": {
                    "summary": {
                        "type": "object",
                        "required": ["total", "passed", "failed", "ungraded"],
                        "properties": {
                            "total": {"type": "integer"},
                            "passed": {"type": "integer"},
                            "failed": {"type": "integer"},
                            "ungraded": {"type": "integer"},
                        },
                    },
                    "first_failure": {"oneOf": [{"type": "null"}, _ENTRY]},
                    "cases": {"type": "array", "items": _ENTRY},
                },
            },
        },
    },
}
