from __future__ import annotations

import json
from unittest import mock

from jsonschema import Draft7Validator

from gradeview.core.view import build_result_view
from gradeview.reporting import REPORT_SCHEMA, JsonReporter, TerminalReporter, build_payload, terminal


def test_json_payload_matches_schema(scenario) -> None:
    catalog, run, _, _ = scenario
    payload = build_payload(build_result_view(catalog, run))
    Draft7Validator(REPORT_SCHEMA).validate(payload)
    public = payload["types"]["public"]
    assert [case["id"] for case in public["cases"]] == [1, 2]
    assert public["first_failure"]["id"] == 2
    assert public["first_failure"]["output"] == "assert error"
    assert public["summary"] == {"total": 2, "passed": 1, "failed": 1, "ungraded": 0}
    assert payload["generated_at"].endswith("Z")


def test_json_reporter_writes_file(scenario, tmp_path) -> None:
    catalog, _, _, _ = scenario
    output_path = tmp_path / "out" / "report.json"
    JsonReporter(path=str(output_path)).render(build_result_view(catalog, None))
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["types"]["public"]["first_failure"] is None
    assert all(case["category"] == "unknown" for case in payload["types"]["public"]["cases"])


def test_terminal_reporter_renders_rows(scenario, capsys) -> None:
    catalog, run, _, _ = scenario
    TerminalReporter(use_color=False).render(build_result_view(catalog, run))
    output = capsys.readouterr().out
    assert "Public tests: total=2 passed=1 failed=1 ungraded=0" in output
    assert "first failure: 2" in output
    assert "PASS  1" in output
    assert "FAIL  2" in output
    assert "output: assert error" in output


def test_terminal_reporter_initialises_colorama_once(monkeypatch) -> None:
    monkeypatch.setattr(terminal, "_COLORAMA_READY", False)
    with mock.patch.object(terminal, "colorama_init") as mock_init:
        TerminalReporter(use_color=True)
        TerminalReporter(use_color=True)
        mock_init.assert_called_once()


def test_terminal_reporter_without_color_skips_colorama(monkeypatch) -> None:
    monkeypatch.setattr(terminal, "_COLORAMA_READY", False)
    with mock.patch.object(terminal, "colorama_init") as mock_init:
        TerminalReporter(use_color=False)
        mock_init.assert_not_called()
