#!/usr/bin/env python3
"""Generate an Adobe command script with a completion broadcast.

Writes <adobe-scripts-path>/<command>.<jsx|jsfl> for the host application
to run. The script declares the --arg variables, runs the command body
(built-in, custom or empty) and then notifies the listener at host:port.

Usage:
    adobe-create resize --app photoshop --arg width=800 --arg height=600
    adobe-create open --app animate --builtin --arg filePath=/tmp/a.fla
    adobe-create resize --config automation.json --dry-run
"""
from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import click
from returns.io import IOFailure
from returns.result import Failure, Result, Success
from returns.unsafe import unsafe_perform_io

from adobe_scripts.script_modules import io_ops
from adobe_scripts.script_modules.config import load_config
from adobe_scripts.script_modules.creator import create_script, render_script
from adobe_scripts.script_modules.errors import ScriptError
from adobe_scripts.script_modules.types import SCRIPT_EXTENSIONS

if TYPE_CHECKING:
    from collections.abc import Sequence

_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")


def parse_arg_value(raw: str) -> object:
    """Parse a --arg value: JSON when it parses, plain text otherwise.

    "800" -> 800, "true" -> True, "[1,2]" -> [1, 2], "null" -> None,
    "red" -> "red".
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_args(
    pairs: Sequence[str],
) -> Result[dict[str, object], ScriptError]:
    """Parse NAME=VALUE pairs into an ordered argument mapping (pure)."""
    args: dict[str, object] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep or not _IDENTIFIER.match(name):
            return Failure(
                ScriptError(
                    stage="adobe_create.parse_args",
                    error_type="InvalidArgumentError",
                    message=(
                        f"Invalid --arg '{pair}':"
                        " expected NAME=VALUE with NAME"
                        " a valid identifier"
                    ),
                    context={"arg": pair},
                ),
            )
        args[name] = parse_arg_value(raw)
    return Success(args)


def _fail(error: ScriptError) -> NoReturn:
    io_ops.write_stderr(f"{error}\n")
    sys.exit(1)


@click.command()
@click.argument("command")
@click.option(
    "--app",
    type=click.Choice(sorted(SCRIPT_EXTENSIONS)),
    default=None,
    help="Target Adobe application (overrides config)",
)
@click.option(
    "--builtin",
    is_flag=True,
    help="Prefer the bundled script for COMMAND when one exists",
)
@click.option(
    "--arg",
    "arg_pairs",
    multiple=True,
    help="Script variable as NAME=VALUE (repeatable, JSON values allowed)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="JSON config file",
)
@click.option("--host", default=None, help="Broadcast listener host")
@click.option("--port", default=None, type=int, help="Broadcast listener port")
@click.option(
    "--js-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Directory holding custom command scripts",
)
@click.option(
    "--adobe-scripts-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Directory the Adobe application loads scripts from",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the generated script instead of writing it",
)
def main(  # noqa: PLR0913
    command: str,
    app: str | None,
    builtin: bool,
    arg_pairs: tuple[str, ...],
    config_path: Path | None,
    host: str | None,
    port: int | None,
    js_path: Path | None,
    adobe_scripts_path: Path | None,
    dry_run: bool,
) -> None:
    """Generate the script for COMMAND and print where it was written."""
    config_result = load_config(
        config_path,
        {
            "app": app,
            "host": host,
            "port": port,
            "js_path": js_path,
            "adobe_scripts_path": adobe_scripts_path,
        },
    )
    if isinstance(config_result, IOFailure):
        _fail(unsafe_perform_io(config_result.failure()))
    config = unsafe_perform_io(config_result.unwrap())

    args_result = parse_args(arg_pairs)
    if isinstance(args_result, Failure):
        _fail(args_result.failure())
    args = args_result.unwrap()

    if dry_run:
        click.echo(
            render_script(
                config, command, use_builtin_script=builtin, args=args,
            ),
        )
        return

    result = create_script(
        config, command, use_builtin_script=builtin, args=args,
    )
    if isinstance(result, IOFailure):
        _fail(unsafe_perform_io(result.failure()))
    click.echo(str(unsafe_perform_io(result.unwrap())))


if __name__ == "__main__":
    main()
