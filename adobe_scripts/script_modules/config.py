"""Configuration loading: JSON config file plus CLI overrides."""
from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import ValidationError
from returns.io import IOFailure, IOResult, IOSuccess
from returns.result import Failure, Result, Success
from returns.unsafe import unsafe_perform_io

from adobe_scripts.script_modules import io_ops
from adobe_scripts.script_modules.errors import ScriptError
from adobe_scripts.script_modules.types import AutomationConfig

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


def build_config(
    values: Mapping[str, object],
    overrides: Mapping[str, object] | None = None,
) -> Result[AutomationConfig, ScriptError]:
    """Validate config values (pure function).

    Override entries whose value is None are ignored, so unset CLI
    options never mask file values.
    """
    merged = dict(values)
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value
    try:
        return Success(AutomationConfig.model_validate(merged))
    except ValidationError as exc:
        return Failure(
            ScriptError(
                stage="config.build_config",
                error_type="ConfigValidationError",
                message=f"Invalid configuration: {exc}",
                context={"fields": sorted(merged)},
            ),
        )


def parse_config(
    text: str,
    overrides: Mapping[str, object] | None = None,
) -> Result[AutomationConfig, ScriptError]:
    """Parse a JSON config document and validate it (pure function)."""
    try:
        values = json.loads(text)
    except json.JSONDecodeError as exc:
        return Failure(
            ScriptError(
                stage="config.parse_config",
                error_type="ConfigParseError",
                message=f"Config is not valid JSON: {exc}",
                context={"snippet": text[:100]},
            ),
        )
    if not isinstance(values, dict):
        return Failure(
            ScriptError(
                stage="config.parse_config",
                error_type="ConfigParseError",
                message="Config must be a JSON object",
                context={"type": type(values).__name__},
            ),
        )
    return build_config(values, overrides)


def load_config(
    path: Path | None,
    overrides: Mapping[str, object] | None = None,
) -> IOResult[AutomationConfig, ScriptError]:
    """Load config from a JSON file (if given) and apply overrides."""
    if path is None:
        result = build_config({}, overrides)
    else:
        read_result = io_ops.read_file(path)
        if isinstance(read_result, IOFailure):
            return read_result
        text = unsafe_perform_io(read_result.unwrap())
        result = parse_config(text, overrides)

    if isinstance(result, Failure):
        return IOFailure(result.failure())
    return IOSuccess(result.unwrap())
