"""Execution orchestrator for Readtext CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from readtext.configuration import BoundsPolicy, load_settings
from readtext.errors import DocumentParseError, InputValidationError, ReadtextError
from readtext.exit_codes import ExitCode
from readtext.ingestion import ContainerDocument, load_containers
from readtext.reporting import ReportEnvelope, ReportRenderOptions

logger = logging.getLogger("readtext.orchestration.runner")


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of invoking the orchestration pipeline."""

    exit_code: ExitCode
    status: str
    message: str | None = None
    remediation: str | None = None
    report: ReportEnvelope | None = None


_ERROR_MAPPINGS: tuple[
    tuple[type[ReadtextError], ExitCode, str, str | None],
    ...,
] = (
    (
        InputValidationError,
        ExitCode.INVALID_INPUT,
        "Input validation failed.",
        "Double-check the document and settings paths and file permissions.",
    ),
    (
        DocumentParseError,
        ExitCode.PARSE_ERROR,
        "Failed to parse the container document.",
        "Ensure the document is JSON or YAML holding text and formatting entries.",
    ),
)


def run_check(
    document_path: Path,
    *,
    config_path: Path | None = None,
    clamp_all: bool = False,
    clamp_negative: bool = False,
    strict: bool = False,
    quiet: bool = False,
    wide: bool = False,
) -> ExecutionOutcome:
    """Load a container document, apply bounds correction and build the report."""

    try:
        policy = _resolve_policy(config_path, clamp_all=clamp_all, clamp_negative=clamp_negative)
        document = load_containers(document_path, policy=policy)
    except ReadtextError as error:
        return handle_domain_error(error)
    except Exception as error:  # pragma: no cover - defensive
        logger.exception("Unexpected error occurred while checking the document.")
        return ExecutionOutcome(
            exit_code=ExitCode.UNEXPECTED_ERROR,
            status="failure",
            message=str(error) or "An unexpected error occurred while checking the document.",
            remediation="Inspect the logs above for details before retrying.",
        )

    corrections = document.diagnostic_count
    logger.info(
        "Checked container document",
        extra={
            "document": document.source.display_name,
            "container_count": len(document.containers),
            "correction_count": corrections,
            "clamp_all": policy.clamp_all,
            "clamp_negative": policy.clamp_negative,
        },
    )

    report = ReportEnvelope(
        containers=document.containers,
        render_options=ReportRenderOptions(quiet=quiet, wide=wide),
        source_display=document.source.display_name,
    )

    exit_code = ExitCode.SUCCESS
    status = "success"
    if strict and corrections:
        exit_code = ExitCode.BOUNDS_CORRECTED
        status = "corrected"

    return ExecutionOutcome(
        exit_code=exit_code,
        status=status,
        message=_summarize(document, policy),
        report=report,
    )


def _resolve_policy(
    config_path: Path | None,
    *,
    clamp_all: bool,
    clamp_negative: bool,
) -> BoundsPolicy:
    """Merge command line flags over the configured bounds policy."""

    settings = load_settings(config_path)
    if settings.source is not None:
        logger.info("Loaded settings", extra={"settings_path": str(settings.source)})

    return replace(
        settings.bounds,
        clamp_all=settings.bounds.clamp_all or clamp_all,
        clamp_negative=settings.bounds.clamp_negative or clamp_negative,
    )


def _summarize(document: ContainerDocument, policy: BoundsPolicy) -> str:
    span_total = sum(len(container.formatting) for container in document.containers)
    scope = "every offending span" if policy.clamp_all else "the first offending span"
    lines = [
        (
            f"Document {document.source.display_name} decoded as "
            f"{document.source.display_encoding} {document.source.display_format}."
        ),
        (
            f"Checked {len(document.containers)} containers with {span_total} formatting spans; "
            f"applied {document.diagnostic_count} corrections ({scope} per position)."
        ),
    ]
    return "\n".join(lines)


def handle_domain_error(error: ReadtextError) -> ExecutionOutcome:
    """Translate a domain error into an execution outcome and log remediation hints."""

    exit_code, default_message, default_remediation = _map_error(error)
    message = error.message or default_message
    remediation = error.remediation or default_remediation

    logger.error(message, extra={"exit_code": int(exit_code)})
    if remediation:
        logger.error("Remediation: %s", remediation)

    return ExecutionOutcome(
        exit_code=exit_code,
        status="failure",
        message=message,
        remediation=remediation,
    )


def _map_error(error: ReadtextError) -> tuple[ExitCode, str, str | None]:
    for error_type, exit_code, message, remediation in _ERROR_MAPPINGS:
        if isinstance(error, error_type):
            return exit_code, message, remediation

    return (
        ExitCode.UNEXPECTED_ERROR,
        "An unexpected error occurred while checking the document.",
        "Enable INFO logging and retry. If the issue persists, open a bug ticket with the logs.",
    )


__all__ = ["ExecutionOutcome", "handle_domain_error", "run_check"]
