"""Completion broadcast fragments, one dialect per host scripting engine.

Each fragment, run by the host application after the command body, sends
exactly one JSON line to the listener at host:port:

    {"command":"<command>","app":"<app>","status":"complete"}

Photoshop, Illustrator and InDesign run ExtendScript, which ships a Socket
object. Animate runs JSFL, which has none, so its fragment stages the
message in a temp file and hands it to the OS socket client.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from adobe_scripts.script_modules.types import AdobeAppName

    BroadcastBuilder = Callable[[str, int, str], str]


def _js_string(value: str) -> str:
    """Render a double-quoted JS string literal."""
    return json.dumps(value)


def _command_declaration(command: str) -> str:
    """Declare `command` already escaped for the JSON message body."""
    return f"    var command = {_js_string(json.dumps(command)[1:-1])};"


def _message_expression(app_expression: str) -> str:
    """JS expression building the completion message at runtime."""
    return (
        "'{\"command\":\"' + command"
        " + '\",\"app\":\"' + " + app_expression
        + " + '\",\"status\":\"complete\"}'"
    )


def build_bridge_talk_broadcast_script(
    host: str,
    port: int,
    command: str,
) -> str:
    """Build the ExtendScript completion broadcast (Photoshop, Illustrator, InDesign)."""
    lines = [
        "(function () {",
        _command_declaration(command),
        "    var message = "
        + _message_expression("BridgeTalk.appName") + ";",
        "    var connection = new Socket();",
        f"    if (connection.open({_js_string(f'{host}:{port}')}, \"UTF-8\")) {{",
        "        connection.writeln(message);",
        "        connection.close();",
        "    }",
        "}());",
    ]
    return "\n".join(lines)


def build_animate_broadcast_script(
    host: str,
    port: int,
    command: str,
) -> str:
    """Build the JSFL completion broadcast (Animate).

    The message goes through a temp file under fl.configURI: `nc` sends it
    on macOS, a PowerShell TcpClient on Windows. The file is removed
    afterwards.
    """
    nc_prefix = f'nc -w 1 {host} {port} < "'
    ps_prefix = (
        'powershell -NoProfile -Command "'
        f"$client = New-Object Net.Sockets.TcpClient('{host}', {port}); "
        "$bytes = [IO.File]::ReadAllBytes('"
    )
    ps_suffix = (
        "'); $client.GetStream().Write($bytes, 0, $bytes.Length); "
        '$client.Close()"'
    )
    lines = [
        "(function () {",
        _command_declaration(command),
        "    var message = "
        + _message_expression(_js_string("animate")) + ";",
        '    var messageURI = fl.configURI + "broadcast-"'
        ' + new Date().getTime() + ".json";',
        '    if (!FLfile.write(messageURI, message + "\\n")) {',
        "        return;",
        "    }",
        "    var messagePath = FLfile.uriToPlatformPath(messageURI);",
        '    if (fl.version.indexOf("WIN") === 0) {',
        "        FLfile.runCommandLine("
        f"{_js_string(ps_prefix)} + messagePath + {_js_string(ps_suffix)});",
        "    } else {",
        "        FLfile.runCommandLine("
        f"{_js_string(nc_prefix)} + messagePath + '\"');",
        "    }",
        "    FLfile.remove(messageURI);",
        "}());",
    ]
    return "\n".join(lines)


def select_broadcast_builder(app: AdobeAppName) -> BroadcastBuilder:
    """Pick the broadcast dialect for the target application.

    Animate is the only JSFL host; every other app runs ExtendScript.
    """
    if app == "animate":
        return build_animate_broadcast_script
    return build_bridge_talk_broadcast_script


def build_broadcast_script(
    app: AdobeAppName,
    host: str,
    port: int,
    command: str,
) -> str:
    """Build the completion broadcast fragment for the target application."""
    return select_broadcast_builder(app)(host, port, command)
