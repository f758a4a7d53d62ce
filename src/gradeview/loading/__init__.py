"""YAML loaders for case catalogs and grading runs."""

from .loader import load_catalog, load_grading_run, parse_catalog, parse_grading_run

__all__ = [
    "load_catalog",
    "load_grading_run",
    "parse_catalog",
    "parse_grading_run",
]
