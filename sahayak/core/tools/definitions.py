"""Tool definitions for Sahayak.

A ToolDefinition describes a side-effecting function the model may call:
model-facing name and description, input and output shapes, and the bound
handler. Each flow exposes a closed set of tools keyed by an Enum.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type, Union

from pydantic import BaseModel

from sahayak.core.errors import ProtocolError
from sahayak.core.schema import json_schema


@dataclass(frozen=True)
class ToolContext:
    """Caller-supplied side-channel data available to tool handlers.

    Never serialized into the model-visible conversation.
    """

    access_token: Optional[str] = field(default=None, repr=False)

    def require_access_token(self) -> str:
        """Bearer token, or ValueError if the caller supplied none."""
        if not self.access_token:
            raise ValueError("Missing access token in flow state.")
        return self.access_token


ToolHandler = Callable[[BaseModel, ToolContext], Union[Awaitable[Any], Any]]


@dataclass(frozen=True)
class ToolDefinition:
    """A callable tool bound to its handler."""

    name: str
    description: str
    input_model: Type[BaseModel]
    handler: ToolHandler
    output_model: Optional[Type[BaseModel]] = None

    def parameters_schema(self) -> Dict[str, Any]:
        """JSON schema of the tool's arguments, as shown to the model."""
        return json_schema(self.input_model)


class ToolSet:
    """Closed set of tools for one flow.

    Maps every member of a flow's tool-name Enum to exactly one definition.
    Dispatch is a lookup by name; names outside the Enum are protocol violations.

    Args:
        names: Enum whose values are the model-facing tool names
        definitions: Definition per Enum member
    """

    def __init__(self, names: Type[Enum], definitions: Dict[Enum, ToolDefinition]):
        missing = [member.value for member in names if member not in definitions]
        if missing:
            raise ValueError(f"No definition bound for tools: {', '.join(missing)}")

        for member, definition in definitions.items():
            if definition.name != member.value:
                raise ValueError(
                    f"Tool '{member.value}' is bound to a definition named '{definition.name}'"
                )

        self.names = names
        self._definitions = dict(definitions)

    def resolve(self, name: str) -> ToolDefinition:
        """Get the definition for a model-requested tool name.

        Raises:
            ProtocolError: If the model requested a tool outside this set
        """
        try:
            member = self.names(name)
        except ValueError:
            raise ProtocolError(
                f"Model requested unknown tool '{name}'",
                context={"tool_name": name, "available": [m.value for m in self.names]},
            )
        return self._definitions[member]

    @property
    def definitions(self) -> List[ToolDefinition]:
        return [self._definitions[member] for member in self.names]

    def __contains__(self, name: object) -> bool:
        return any(member.value == name for member in self.names)

    def __len__(self) -> int:
        return len(self._definitions)
