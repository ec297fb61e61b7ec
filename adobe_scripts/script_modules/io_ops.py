"""I/O boundary module -- ALL filesystem and stderr access goes through here.

This is the single mock point for the test suite. Script assembly never
touches the filesystem directly; it calls io_ops functions.
"""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from returns.io import IOFailure, IOResult, IOSuccess

from adobe_scripts.script_modules.errors import ScriptError

if TYPE_CHECKING:
    from pathlib import Path


def path_exists(path: Path) -> bool:
    """Check if a regular file exists. Mockable seam."""
    return path.is_file()


def read_file(path: Path) -> IOResult[str, ScriptError]:
    """Read file contents. Returns IOResult, never raises."""
    try:
        return IOSuccess(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return IOFailure(
            ScriptError(
                stage="io_ops.read_file",
                error_type="FileNotFoundError",
                message=f"File not found: {path}",
                context={"path": str(path)},
            ),
        )
    except PermissionError:
        return IOFailure(
            ScriptError(
                stage="io_ops.read_file",
                error_type="PermissionError",
                message=f"Permission denied: {path}",
                context={"path": str(path)},
            ),
        )
    except (OSError, UnicodeDecodeError) as exc:
        return IOFailure(
            ScriptError(
                stage="io_ops.read_file",
                error_type=type(exc).__name__,
                message=f"Error reading {path}: {exc}",
                context={"path": str(path)},
            ),
        )


def write_script_file(
    path: Path,
    content: str,
) -> IOResult[Path, ScriptError]:
    """Write generated script text to path. Returns IOResult, never raises.

    The destination directory must already exist; it is never created,
    so a bad adobe_scripts_path leaves nothing behind.
    """
    directory = path.parent
    if not directory.is_dir():
        return IOFailure(
            ScriptError(
                stage="io_ops.write_script_file",
                error_type="InvalidDirectoryError",
                message=f"The path ({directory}) is not valid.",
                context={"directory": str(directory)},
            ),
        )
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        return IOFailure(
            ScriptError(
                stage="io_ops.write_script_file",
                error_type="ScriptWriteError",
                message=f"Failed to write script {path}: {exc}",
                context={
                    "path": str(path),
                    "os_error": type(exc).__name__,
                },
            ),
        )
    return IOSuccess(path)


def write_stderr(
    message: str,
) -> IOResult[None, ScriptError]:
    """Write message to stderr (fail-open diagnostics).

    Returns IOSuccess(None) or IOFailure on error.
    """
    try:
        sys.stderr.write(message)
    except OSError as exc:
        return IOFailure(
            ScriptError(
                stage="io_ops.write_stderr",
                error_type="StderrWriteError",
                message=(
                    f"Failed to write to stderr: {exc}"
                ),
                context={
                    "original_message": message,
                },
            ),
        )
    return IOSuccess(None)
