"""Shared type definitions for Adobe script generation."""
from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

AdobeAppName = Literal["animate", "photoshop", "illustrator", "indesign"]

ScriptFileType = Literal["jsfl", "jsx"]

# Must stay keyed by every AdobeAppName.
SCRIPT_EXTENSIONS: MappingProxyType[AdobeAppName, ScriptFileType] = (
    MappingProxyType(
        {
            "animate": "jsfl",
            "photoshop": "jsx",
            "illustrator": "jsx",
            "indesign": "jsx",
        }
    )
)

BUILTIN_SCRIPTS_PATH = Path(__file__).resolve().parent.parent / "builtin_scripts"

DEFAULT_JS_PATH = Path("scripts")
DEFAULT_HOST = "localhost"
# Host names and IPv4 addresses only; the host is spliced into shell
# command lines by the Animate broadcast.
HOST_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9.-]*$"
DEFAULT_PORT = 5000


def script_extension(app: AdobeAppName) -> ScriptFileType:
    """Return the script file extension the host application loads."""
    return SCRIPT_EXTENSIONS[app]


class AutomationConfig(BaseModel):
    """Configuration consumed by every script generation call.

    Frozen: one instance is shared read-only by concurrent calls.
    """

    model_config = ConfigDict(frozen=True)

    app: AdobeAppName
    js_path: Path = DEFAULT_JS_PATH
    adobe_scripts_path: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()),
    )
    builtin_scripts_path: Path = BUILTIN_SCRIPTS_PATH
    host: str = Field(default=DEFAULT_HOST, pattern=HOST_PATTERN)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)


# --- Argument values ---


@dataclass(frozen=True)
class Absent:
    """Argument with no value; declared but left uninitialized."""


@dataclass(frozen=True)
class Text:
    """String argument, rendered as a quoted string literal."""

    value: str


@dataclass(frozen=True)
class Scalar:
    """Number, boolean or any other value rendered as a literal."""

    value: object


@dataclass(frozen=True)
class ListValue:
    """Ordered list argument, rendered as an array literal."""

    items: tuple[object, ...]


ArgumentValue = Absent | Text | Scalar | ListValue


def argument_value(raw: object) -> ArgumentValue:
    """Tag a raw Python value with its argument kind.

    Already-tagged values pass through unchanged.
    """
    if isinstance(raw, (Absent, Text, Scalar, ListValue)):
        return raw
    if raw is None:
        return Absent()
    if isinstance(raw, str):
        return Text(raw)
    if isinstance(raw, (list, tuple)):
        return ListValue(tuple(raw))
    return Scalar(raw)
