"""Script text builder: name header, variables, body, broadcast."""
from __future__ import annotations

from dataclasses import dataclass, replace

EMPTY_BODY = '"";'


@dataclass(frozen=True)
class ScriptBuilder:
    """Immutable accumulator for the four script sections.

    Setters return a NEW builder (last write wins), so calls chain:

        ScriptBuilder().set_name("resize").set_body(body).build()
    """

    name: str | None = None
    variables: str = ""
    body: str = ""
    broadcast: str = ""

    def set_name(self, name: str) -> ScriptBuilder:
        """Return new builder with the command name replaced."""
        return replace(self, name=name)

    def set_variables(self, variables: str) -> ScriptBuilder:
        """Return new builder with the variable declarations replaced."""
        return replace(self, variables=variables)

    def set_body(self, body: str) -> ScriptBuilder:
        """Return new builder with the body replaced."""
        return replace(self, body=body)

    def set_broadcast(self, broadcast: str) -> ScriptBuilder:
        """Return new builder with the broadcast fragment replaced."""
        return replace(self, broadcast=broadcast)

    def build(self) -> str:
        """Join the sections in order, skipping empty ones.

        Raises:
            ValueError: If no name was set.
        """
        if not self.name:
            msg = "Script name must be set before build()"
            raise ValueError(msg)
        sections = [
            f"// command: {self.name}",
            self.variables,
            self.body,
            self.broadcast,
        ]
        return "\n".join(s for s in sections if s)
