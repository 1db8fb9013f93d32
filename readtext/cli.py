from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from . import __version__
from .errors import InputValidationError
from .exit_codes import ExitCode
from .orchestration import run_check
from .reporting import render_containers_report

APP_NAME = "readtext"
_LOG_FORMAT = "%(message)s"

app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(*, quiet: bool = False) -> None:
    """Initialise application-wide logging."""

    level = logging.WARNING if quiet else logging.INFO
    root = logging.getLogger()

    if getattr(configure_logging, "_configured", False):
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)
        configure_logging._level = level
        return

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    configure_logging._configured = True
    configure_logging._level = level


def _validate_file(path: Path, description: str) -> Path:
    """Ensure the provided file path exists and is a regular file."""

    candidate = path.expanduser()
    try:
        resolved = candidate.resolve()
    except OSError:
        resolved = candidate

    if not resolved.exists() or not resolved.is_file():
        raise InputValidationError(
            message=f"{description.capitalize()} path {_quote_path(resolved)} does not exist or is not a file.",
            remediation=f"Verify the {description} path and ensure the file is readable.",
        )
    return resolved


def _is_quiet_mode() -> bool:
    return getattr(configure_logging, "_level", logging.INFO) == logging.WARNING


def _quote_path(path: Path) -> str:
    value = str(path)
    if " " in value:
        return f'"{value}"'
    return value


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Reduce log output to warnings and errors.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the Readtext version and exit.",
    ),
) -> None:
    """Configure logging and handle global options."""

    configure_logging(quiet=quiet)

    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ExitCode.SUCCESS))

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ExitCode.SUCCESS))


@app.command("check")
def check(
    document: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="JSON or YAML document holding text containers and their formatting spans.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings YAML file (defaults to config/readtext.yaml when present).",
    ),
    clamp_all: bool = typer.Option(
        False,
        "--clamp-all",
        help="Correct every out-of-range span instead of only the first per position.",
    ),
    clamp_negative: bool = typer.Option(
        False,
        "--clamp-negative",
        help="Also clamp negative offsets to the start of the text.",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with a non-zero status when any offset had to be corrected.",
    ),
    wide: bool = typer.Option(
        False,
        "--wide",
        help="Render the report with span attributes.",
    ),
) -> None:
    """Build text containers from DOCUMENT and report offset corrections."""

    logger = logging.getLogger("readtext.cli")
    quiet_mode = _is_quiet_mode()

    try:
        document_path = _validate_file(document, "document")
        config_path = _validate_file(config, "settings") if config is not None else None
    except InputValidationError as exc:
        logger.error(str(exc))
        if exc.remediation:
            logger.error("Remediation: %s", exc.remediation)
        raise typer.Exit(code=int(ExitCode.INVALID_INPUT)) from exc

    outcome = run_check(
        document_path,
        config_path=config_path,
        clamp_all=clamp_all,
        clamp_negative=clamp_negative,
        strict=strict,
        quiet=quiet_mode,
        wide=wide,
    )

    printed_message = False
    if outcome.message and outcome.report is not None and not quiet_mode:
        typer.echo(outcome.message)
        printed_message = True

    if outcome.report is not None:
        if printed_message:
            typer.echo("")
        typer.echo(render_containers_report(outcome.report))

    raise typer.Exit(code=int(outcome.exit_code))


def entrypoint() -> None:
    """Execute the Typer application."""

    app()


__all__ = ["app", "entrypoint", "configure_logging", "ExitCode"]
