"""Settings loading for bounds correction and related behaviour."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from readtext.errors import InputValidationError

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[2] / "config" / "readtext.yaml"

_BOUNDS_KEYS = ("clamp_all", "clamp_negative")


@dataclass(frozen=True)
class BoundsPolicy:
    """Switches controlling how out-of-range span offsets are corrected."""

    clamp_all: bool = False
    clamp_negative: bool = False


@dataclass(frozen=True)
class ReadtextSettings:
    """Resolved configuration for a Readtext run."""

    bounds: BoundsPolicy = field(default_factory=BoundsPolicy)
    source: Path | None = None


def load_settings(path: Path | None = None) -> ReadtextSettings:
    """Load settings from *path*, or from the default location when it exists.

    An explicit *path* must exist. A missing default file yields built-in
    defaults.
    """

    if path is None:
        if not DEFAULT_SETTINGS_PATH.is_file():
            return ReadtextSettings()
        resolved = DEFAULT_SETTINGS_PATH
    else:
        resolved = _resolve_path(path)

    payload = _load_yaml(resolved)
    bounds = _parse_bounds(payload.get("bounds"), resolved)
    return ReadtextSettings(bounds=bounds, source=resolved)


def _resolve_path(path: Path) -> Path:
    candidate = path.expanduser()
    try:
        resolved = candidate.resolve()
    except OSError:
        resolved = candidate

    if not resolved.exists() or not resolved.is_file():
        raise InputValidationError(
            message=f"Settings file {resolved} does not exist or is not a file.",
            remediation="Verify the path or remove the --config option.",
        )
    return resolved


def _load_yaml(path: Path) -> dict:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputValidationError(
            message=f"Unable to read settings file {path}.",
            remediation="Check file permissions and retry.",
        ) from exc

    try:
        loaded = yaml.safe_load(raw_text) or {}
    except yaml.YAMLError as exc:
        raise InputValidationError(
            message=f"Settings file {path} contains invalid YAML.",
            remediation="Ensure the file follows the documented schema.",
        ) from exc

    if not isinstance(loaded, dict):
        raise InputValidationError(
            message=f"Settings file {path} must define a mapping at the root level.",
            remediation="Provide a 'bounds' mapping with clamp_all / clamp_negative flags.",
        )
    return loaded


def _parse_bounds(data: object, source: Path) -> BoundsPolicy:
    if data is None:
        return BoundsPolicy()
    if not isinstance(data, Mapping):
        raise InputValidationError(
            message=f"'bounds' in {source} must be a mapping.",
            remediation="Example: bounds: { clamp_all: false, clamp_negative: false }.",
        )

    unknown = sorted(str(key) for key in data if key not in _BOUNDS_KEYS)
    if unknown:
        raise InputValidationError(
            message=f"Unknown bounds settings in {source}: {', '.join(unknown)}.",
            remediation=f"Supported keys are {', '.join(_BOUNDS_KEYS)}.",
        )

    flags: dict[str, bool] = {}
    for key in _BOUNDS_KEYS:
        value = data.get(key, False)
        if not isinstance(value, bool):
            raise InputValidationError(
                message=f"Setting 'bounds.{key}' in {source} must be true or false.",
                remediation="Use YAML booleans (true / false) for bounds flags.",
            )
        flags[key] = value
    return BoundsPolicy(**flags)


__all__ = [
    "BoundsPolicy",
    "DEFAULT_SETTINGS_PATH",
    "ReadtextSettings",
    "load_settings",
]
