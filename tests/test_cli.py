from __future__ import annotations

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from readtext import __version__
from readtext.cli import ExitCode, app, configure_logging
from readtext.errors import InputValidationError
from readtext.orchestration import ExecutionOutcome

runner = CliRunner()

_DOCUMENT = """
containers:
  - text: "This text is very strong."
    formatting:
      - tag: strong
        startIndex: 13
        endIndex: 99
        attributes: {id: elem-id}
""".strip()


@pytest.fixture(autouse=True)
def reset_logging_state() -> None:
    """Ensure each test runs with a clean logging configuration."""

    configure_logging._configured = False  # type: ignore[attr-defined]
    configure_logging._level = logging.INFO  # type: ignore[attr-defined]
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    yield
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    configure_logging._configured = False  # type: ignore[attr-defined]
    configure_logging._level = logging.INFO  # type: ignore[attr-defined]


@pytest.fixture
def document(tmp_path: Path) -> Path:
    path = tmp_path / "page.yaml"
    path.write_text(_DOCUMENT, encoding="utf-8")
    return path


def _normalize(output: str) -> str:
    """Collapse whitespace to simplify assertions across Rich formatting."""

    return " ".join(output.split())


def test_root_help_lists_commands() -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == int(ExitCode.SUCCESS)
    normalized = _normalize(result.output)
    assert "check" in normalized
    assert "--quiet" in normalized


def test_version_flag_prints_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == int(ExitCode.SUCCESS)
    assert __version__ in result.output


def test_check_requires_document_argument() -> None:
    result = runner.invoke(app, ["check"])

    assert result.exit_code == int(ExitCode.INVALID_INPUT)


def test_check_renders_report(document: Path) -> None:
    result = runner.invoke(app, ["check", str(document)])

    assert result.exit_code == int(ExitCode.SUCCESS)
    output = result.output
    assert "Document page.yaml decoded as UTF-8 YAML." in output
    assert "Text Containers Report" in output
    assert "'strong' element's endIndex position larger than text." in _normalize(output)


def test_check_strict_exit_code(document: Path) -> None:
    result = runner.invoke(app, ["check", str(document), "--strict"])

    assert result.exit_code == int(ExitCode.BOUNDS_CORRECTED)


def test_check_wide_shows_attributes(document: Path) -> None:
    result = runner.invoke(app, ["check", str(document), "--wide"])

    assert result.exit_code == int(ExitCode.SUCCESS)
    assert "id=elem-id" in result.output


def test_quiet_flag_hides_summary(document: Path) -> None:
    result = runner.invoke(app, ["--quiet", "check", str(document)])

    assert result.exit_code == int(ExitCode.SUCCESS)
    assert "decoded as" not in _normalize(result.output)
    assert "Text Containers Report" in result.output
    assert getattr(configure_logging, "_level", logging.INFO) == logging.WARNING


def test_check_reports_parse_failure(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("[1, 2", encoding="utf-8")

    result = runner.invoke(app, ["check", str(broken)])

    assert result.exit_code == int(ExitCode.PARSE_ERROR)
    assert "Text Containers Report" not in result.output


def test_check_rejects_missing_config(document: Path, tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["check", str(document), "--config", str(tmp_path / "missing.yaml")],
    )

    assert result.exit_code == int(ExitCode.INVALID_INPUT)


def test_check_handles_input_validation_error(
    monkeypatch: pytest.MonkeyPatch,
    document: Path,
) -> None:
    def _raise_validation(path: Path, description: str) -> Path:
        raise InputValidationError("Invalid input", remediation="Provide correct files")

    monkeypatch.setattr("readtext.cli._validate_file", _raise_validation)

    result = runner.invoke(app, ["check", str(document)], catch_exceptions=False)

    assert result.exit_code == int(ExitCode.INVALID_INPUT)
    combined = _normalize(result.output)
    assert "Invalid input" in combined
    assert "Provide correct files" in combined


def test_check_forwards_flags(monkeypatch: pytest.MonkeyPatch, document: Path) -> None:
    recorded: dict[str, object] = {}

    def _fake_run_check(path: Path, **kwargs: object) -> ExecutionOutcome:
        recorded["path"] = path
        recorded.update(kwargs)
        return ExecutionOutcome(exit_code=ExitCode.SUCCESS, status="success", message="ok")

    monkeypatch.setattr("readtext.cli.run_check", _fake_run_check)

    result = runner.invoke(
        app,
        ["check", str(document), "--clamp-all", "--clamp-negative"],
    )

    assert result.exit_code == int(ExitCode.SUCCESS)
    assert recorded["path"] == document.resolve()
    assert recorded["clamp_all"] is True
    assert recorded["clamp_negative"] is True
    assert recorded["config_path"] is None
