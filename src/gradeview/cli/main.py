"""CLI entry point for gradeview."""
from __future__ import annotations

import sys
from typing import Optional

import click

from gradeview import __version__
from gradeview.core.view import build_result_view
from gradeview.loading import load_catalog, load_grading_run
from gradeview.logging import enable_debug_logging, get_logger
from gradeview.reporting import JsonReporter, TerminalReporter

logger = get_logger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"gradeview {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the gradeview version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for gradeview."""

    if verbose:
        enable_debug_logging()
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="YAML file listing the test cases by type.",
)
@click.option(
    "--run",
    "run_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with the grading run results (omit when not graded yet).",
)
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option("--strict", is_flag=True, help="Reject grading runs with duplicate results.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def report(
    state: CliState,
    catalog_path: str,
    run_path: Optional[str],
    report_format: str,
    report_path: Optional[str],
    strict: bool,
    no_color: bool,
) -> None:
    """Show test cases with their grading results."""

    try:
        catalog = load_catalog(catalog_path)
        grading_run = load_grading_run(run_path, catalog) if run_path else None
        view = build_result_view(catalog, grading_run, strict=strict)
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc
    if report_format == "json":
        JsonReporter(path=report_path).render(view)
    else:
        TerminalReporter(use_color=not no_color).render(view)
    logger.debug("Rendered %s report (verbose=%s)", report_format, state.verbose)
    raise click.exceptions.Exit(1 if view.has_failures else 0)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="gradeview", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
