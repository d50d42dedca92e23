import io
import json
import sys

import pytest

import linksmith
from linksmith import process
from linksmith.cli import main as cli_main
from linksmith.logging import configure_logging
from linksmith.processor import process as namespaced_process


@pytest.fixture(autouse=True)
def _silence_logging_afterwards():
    yield
    configure_logging("")


def test_linksmith_namespace_exports_process():
    assert namespaced_process is process
    assert hasattr(linksmith, "WebLinkProcessor")
    assert hasattr(linksmith, "ValidationResult")


def test_linksmith_cli_help_runs(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["linksmith"])
    assert cli_main() == 0
    output = capsys.readouterr().out
    assert "linksmith CLI" in output


def test_linksmith_cli_version_runs(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["linksmith", "--version"])
    assert cli_main() == 0
    output = capsys.readouterr().out.strip()
    assert output


def test_linksmith_cli_parse_prints_json(capsys):
    assert cli_main(["parse", '<https://example.org/>; rel="self"']) == 0
    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert payload["links"][0]["target"] == "https://example.org/"
    assert payload["report"]["issues"] == []
    assert captured.err == ""


def test_linksmith_cli_parse_returns_1_on_errors(capsys):
    assert cli_main(["parse", "<https://a/>; rel=self, <not a url>; rel=item"]) == 1
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["links"]) == 1
    assert payload["report"]["issues"][0]["code"] == "invalid_target"
    assert payload["report"]["issues"][0]["link_index"] == 1


def test_linksmith_cli_parse_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("<https://example.org/m>; rel=describedby\n"))
    assert cli_main(["parse", "--profile", "signposting"]) == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["report"]["issues"][0]["code"] == "signposting_missing_type"


def test_linksmith_cli_allow_parameter_enables_strict_mode(capsys):
    assert cli_main(["parse", "<https://a/>; rel=self; foo=1", "--allow-parameter", "bar"]) == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["report"]["issues"][0]["parameter"] == "foo"


def test_linksmith_cli_verbose_emits_info_logs(capsys):
    assert cli_main(["-v", "parse", "<https://a/>; rel=self"]) == 0
    captured = capsys.readouterr()
    assert '"links"' in captured.out
    assert "INFO | linksmith" in captured.err


def test_linksmith_cli_log_level_debug_emits_debug_logs(capsys):
    assert cli_main(["--log-level", "DEBUG", "parse", "<https://a/>; rel=self"]) == 0
    captured = capsys.readouterr()
    assert "DEBUG | linksmith" in captured.err


def test_linksmith_cli_explicit_log_level_overrides_verbose(capsys):
    assert cli_main(["--log-level", "ERROR", "-vv", "parse", "<https://a/>; rel=self"]) == 0
    captured = capsys.readouterr()
    assert "DEBUG | linksmith" not in captured.err
    assert "INFO | linksmith" not in captured.err
