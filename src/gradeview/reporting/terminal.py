"""Terminal reporter rendering a result view."""
from __future__ import annotations

import click
from colorama import Fore, Style, init as colorama_init

from gradeview.core.classifier import ResultCategory
from gradeview.core.models import TestCaseType
from gradeview.core.view import CaseRow, ResultView

CATEGORY_COLORS = {
    ResultCategory.PASS: Fore.GREEN,
    ResultCategory.FAIL: Fore.RED,
    ResultCategory.UNKNOWN: "",
}

CATEGORY_LABELS = {
    ResultCategory.PASS: "PASS",
    ResultCategory.FAIL: "FAIL",
    ResultCategory.UNKNOWN: "-",
}


_COLORAMA_READY = False


def _init_colorama() -> None:
    global _COLORAMA_READY
    if _COLORAMA_READY:
        return
    colorama_init()
    _COLORAMA_READY = True


class TerminalReporter:
    """Human-readable reporter that writes to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color
        if use_color:
            _init_colorama()

    def render(self, view: ResultView) -> None:
        summary = view.summary()
        for case_type, rows in view.rows.items():
            counts = summary[case_type]
            click.echo(
                self._styled(
                    f"{_heading(case_type)}: total={counts.total} passed={counts.passed} "
                    f"failed={counts.failed} ungraded={counts.ungraded}",
                    Fore.CYAN,
                )
            )
            failure = view.first_failures.get(case_type)
            if failure is not None:
                click.echo(
                    self._styled(f"  first failure: {failure.test_case.identifier}", Fore.RED)
                )
            for row in rows:
                self._print_row(row)

    def _print_row(self, row: CaseRow) -> None:
        label = f"{CATEGORY_LABELS[row.category]:<5}"
        click.echo(f"  {self._styled(label, CATEGORY_COLORS[row.category])} {row.test_case.identifier}")
        if row.hint:
            click.echo(f"      hint: {row.hint}")
        if row.output:
            click.echo(f"      output: {row.output}")

    def _styled(self, text: str, color: str) -> str:
        if not self._use_color or not color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"


def _heading(case_type: TestCaseType) -> str:
    return f"{case_type.value.capitalize()} tests"
