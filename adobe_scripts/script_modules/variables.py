"""Argument serialization into script variable declarations."""
from __future__ import annotations

import json
from typing import TYPE_CHECKING

from adobe_scripts.script_modules.types import (
    Absent,
    ListValue,
    Text,
    argument_value,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def _literal(value: object) -> str:
    """Render a value as a compact JSON literal (valid ExtendScript/JSFL).

    Values JSON cannot encode (tuple keys, cycles) fall back to their
    quoted string form. Nesting too deep to encode becomes a fixed
    marker, since str() would recurse just as deep.
    """
    try:
        return json.dumps(value, separators=(",", ":"), default=str)
    except RecursionError:
        return json.dumps(f"<{type(value).__name__} nested too deeply>")
    except (TypeError, ValueError):
        return json.dumps(str(value))


def serialize_variable(name: str, raw: object) -> str:
    """Render a single `var` declaration for one argument."""
    value = argument_value(raw)
    if isinstance(value, Absent):
        return f"var {name};"
    if isinstance(value, Text):
        return f"var {name}={_literal(value.value)};"
    if isinstance(value, ListValue):
        return f"var {name}={_literal(list(value.items))};"
    return f"var {name}={_literal(value.value)};"


def serialize_variables(args: Mapping[str, object] | None) -> str:
    """Render one declaration per argument, newline-joined, in input order.

    Returns an empty string for None or an empty mapping. Never raises.
    """
    if not args:
        return ""
    return "\n".join(
        serialize_variable(name, raw) for name, raw in args.items()
    )
