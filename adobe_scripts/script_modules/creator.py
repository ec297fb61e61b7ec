"""Script file creation: body resolution, assembly and persistence.

Pipeline per call (no shared state between calls):

    resolve body -> serialize args -> broadcast -> build text -> write

Only the final write can fail. Missing or unreadable source scripts fall
through to the next candidate and finally to an empty body.
"""
from __future__ import annotations

import asyncio
import re
from pathlib import PurePath
from typing import TYPE_CHECKING

from returns.io import IOFailure
from returns.unsafe import unsafe_perform_io

from adobe_scripts.script_modules import io_ops
from adobe_scripts.script_modules.broadcast import build_broadcast_script
from adobe_scripts.script_modules.builder import EMPTY_BODY, ScriptBuilder
from adobe_scripts.script_modules.types import script_extension
from adobe_scripts.script_modules.variables import serialize_variables

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from returns.io import IOResult

    from adobe_scripts.script_modules.errors import ScriptError
    from adobe_scripts.script_modules.types import AutomationConfig

_FILENAME_WITH_EXTENSION = re.compile(r"[-_\w]+[.]\w+$")
_EXTENSION = re.compile(r"\.\w+$")


def command_name(command: str) -> str:
    """Strip directories and the extension: "tools/resize.js" -> "resize"."""
    return _EXTENSION.sub("", PurePath(command).name)


def _under(base: Path, command: str) -> Path:
    """Join command onto base, never leaving base.

    The root of an absolute command and ".." segments are dropped:
    "/abs/x.js" -> base/abs/x.js, "../x.js" -> base/x.js.
    """
    command_path = PurePath(command)
    parts = command_path.parts[1:] if command_path.anchor else command_path.parts
    return base.joinpath(*(p for p in parts if p != ".."))


def builtin_script_path(config: AutomationConfig, command: str) -> Path:
    """Location of the bundled script for command and the configured app."""
    return _under(config.builtin_scripts_path / config.app, f"{command}.js")


def custom_script_path(config: AutomationConfig, command: str) -> Path:
    """Location of the user script; bare commands get a .js extension."""
    if _FILENAME_WITH_EXTENSION.search(command):
        return _under(config.js_path, command)
    return _under(config.js_path, f"{command}.js")


def _read_source(path: Path, label: str) -> str | None:
    """Read a candidate body source; None when missing or unreadable."""
    if not io_ops.path_exists(path):
        return None
    read_result = io_ops.read_file(path)
    if isinstance(read_result, IOFailure):
        error = unsafe_perform_io(read_result.failure())
        io_ops.write_stderr(
            f"{label} script file skipped: {error}\n",
        )
        return None
    io_ops.write_stderr(f"{label} script file found: {path}\n")
    return unsafe_perform_io(read_result.unwrap())


def resolve_body(
    config: AutomationConfig,
    command: str,
    *,
    use_builtin_script: bool,
) -> str:
    """Pick the script body: built-in, then custom, then empty placeholder."""
    if use_builtin_script:
        builtin = _read_source(
            builtin_script_path(config, command), "Built-in",
        )
        if builtin is not None:
            return builtin

    custom = _read_source(custom_script_path(config, command), "Custom")
    if custom is not None:
        return custom

    return EMPTY_BODY


def render_script(
    config: AutomationConfig,
    command: str,
    *,
    use_builtin_script: bool = False,
    args: Mapping[str, object] | None = None,
) -> str:
    """Assemble the full script text for command without writing it."""
    body = resolve_body(
        config, command, use_builtin_script=use_builtin_script,
    )
    variables = serialize_variables(args)
    broadcast = build_broadcast_script(
        config.app, config.host, config.port, command,
    )
    return (
        ScriptBuilder()
        .set_name(command_name(command))
        .set_variables(variables)
        .set_body(body)
        .set_broadcast(broadcast)
        .build()
    )


def script_output_path(config: AutomationConfig, command: str) -> Path:
    """Destination of the generated script in the Adobe scripts folder."""
    filename = f"{command_name(command)}.{script_extension(config.app)}"
    return config.adobe_scripts_path / filename


def create_script(
    config: AutomationConfig,
    command: str,
    *,
    use_builtin_script: bool = False,
    args: Mapping[str, object] | None = None,
) -> IOResult[Path, ScriptError]:
    """Generate the script for command and write it for the host app.

    Returns IOSuccess(path of the written file), or IOFailure when the
    destination directory is missing or the write fails.
    """
    content = render_script(
        config,
        command,
        use_builtin_script=use_builtin_script,
        args=args,
    )
    return io_ops.write_script_file(
        script_output_path(config, command), content,
    )


async def create_script_async(
    config: AutomationConfig,
    command: str,
    *,
    use_builtin_script: bool = False,
    args: Mapping[str, object] | None = None,
) -> IOResult[Path, ScriptError]:
    """Run create_script in a worker thread, keeping the event loop free."""
    return await asyncio.to_thread(
        create_script,
        config,
        command,
        use_builtin_script=use_builtin_script,
        args=args,
    )
