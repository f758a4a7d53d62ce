"""Reporting exports."""
from .json_reporter import JsonReporter, build_payload
from .schema import REPORT_SCHEMA, SCHEMA_VERSION
from .terminal import TerminalReporter

__all__ = [
    "JsonReporter",
    "REPORT_SCHEMA",
    "SCHEMA_VERSION",
    "TerminalReporter",
    "build_payload",
]
