"""Error types for Adobe script generation."""
from __future__ import annotations

from dataclasses import dataclass, field

_MAX_CONTEXT_LEN = 300


@dataclass(frozen=True)
class ScriptError:
    """Structured error for script generation failures.

    stage names the function that failed (e.g. "io_ops.write_script_file"),
    error_type is a short machine-readable tag.
    """

    stage: str
    error_type: str
    message: str
    context: dict[str, object] = field(default_factory=dict)

    def __str__(self) -> str:
        """One-line form for stderr: "<error_type>: <message> (<context>)"."""
        line = f"{self.error_type}: {self.message}"
        if not self.context:
            return line
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        if len(details) > _MAX_CONTEXT_LEN:
            details = details[: _MAX_CONTEXT_LEN - 3] + "..."
        return f"{line} ({details})"
