"""Analyzer settings loading.

Settings come from an optional YAML file, then environment variables
(a ``.env`` file is honoured through python-dotenv). Non-strict loading
logs problems and keeps defaults; strict loading raises
``ConfigValidationError``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from core.errors import ConfigValidationError
from core.run_artifacts import DEFAULT_REPORT_DIR

logger = logging.getLogger(__name__)

ENV_PREFIX = "CXXHIER_"

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class AnalyzerSettings:
    """Runtime knobs for a multi-unit analysis."""

    encoding: str = "utf-8"
    max_workers: Optional[int] = None
    continue_on_error: bool = True
    log_level: str = "INFO"
    report_dir: str = DEFAULT_REPORT_DIR


def _parse_bool(raw: Any) -> Optional[bool]:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    return None


def _parse_workers(raw: Any) -> Optional[int]:
    """Return a positive worker count, ``None`` for sequential, or raise ValueError."""
    if raw is None:
        return None
    text = str(raw).strip().lower()
    if text in {"", "none", "0"}:
        return None
    value = int(text)
    if value < 0:
        raise ValueError(f"max_workers must be >= 0, got {value}")
    return value


def _fail(msg: str, strict: bool) -> None:
    if strict:
        raise ConfigValidationError(msg)
    logger.warning("%s; keeping default", msg)


def _apply_values(
    settings: AnalyzerSettings,
    values: dict[str, Any],
    source: str,
    strict: bool,
) -> AnalyzerSettings:
    changes: dict[str, Any] = {}

    if "encoding" in values:
        encoding = str(values["encoding"]).strip()
        if encoding:
            changes["encoding"] = encoding
        else:
            _fail(f"{source}: encoding must not be empty", strict)

    if "max_workers" in values:
        try:
            changes["max_workers"] = _parse_workers(values["max_workers"])
        except ValueError as exc:
            _fail(f"{source}: invalid max_workers ({exc})", strict)

    if "continue_on_error" in values:
        flag = _parse_bool(values["continue_on_error"])
        if flag is None:
            _fail(f"{source}: continue_on_error must be a boolean", strict)
        else:
            changes["continue_on_error"] = flag

    if "log_level" in values:
        level = str(values["log_level"]).strip().upper()
        if level in _VALID_LOG_LEVELS:
            changes["log_level"] = level
        else:
            _fail(f"{source}: unknown log_level '{values['log_level']}'", strict)

    if "report_dir" in values:
        report_dir = str(values["report_dir"]).strip()
        if report_dir:
            changes["report_dir"] = report_dir
        else:
            _fail(f"{source}: report_dir must not be empty", strict)

    return replace(settings, **changes)


def _load_settings_payload(path: str, strict: bool) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except FileNotFoundError as exc:
        msg = f"Settings file not found: {path}"
        if strict:
            raise ConfigValidationError(msg) from exc
        logger.warning("%s; continuing with defaults", msg)
        return {}
    except yaml.YAMLError as exc:
        msg = f"Failed to parse settings YAML at {path}: {exc}"
        if strict:
            raise ConfigValidationError(msg) from exc
        logger.warning("%s; continuing with defaults", msg)
        return {}

    if payload is None:
        return {}
    if not isinstance(payload, dict):
        msg = f"Unexpected settings payload type: {type(payload).__name__}"
        if strict:
            raise ConfigValidationError(msg)
        logger.warning("%s; continuing with defaults", msg)
        return {}

    # Settings may live at the top level or under an ``analyzer`` key.
    section = payload.get("analyzer", payload)
    if not isinstance(section, dict):
        msg = "'analyzer' section must be a mapping"
        if strict:
            raise ConfigValidationError(msg)
        logger.warning("%s; continuing with defaults", msg)
        return {}
    return section


def _env_values() -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key in ("encoding", "max_workers", "continue_on_error", "log_level", "report_dir"):
        raw = os.getenv(ENV_PREFIX + key.upper())
        if raw is not None:
            values[key] = raw
    return values


def load_analyzer_settings(
    path: Optional[str] = None,
    strict: bool = False,
    use_env: bool = True,
) -> AnalyzerSettings:
    """Load settings from ``path`` (YAML) then apply ``CXXHIER_*`` overrides."""
    settings = AnalyzerSettings()
    if path is not None:
        payload = _load_settings_payload(path, strict=strict)
        settings = _apply_values(settings, payload, source=path, strict=strict)

    if use_env:
        load_dotenv()
        settings = _apply_values(
            settings, _env_values(), source="environment", strict=strict
        )

    logger.debug("Analyzer settings resolved: %s", settings)
    return settings
