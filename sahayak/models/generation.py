"""Generation models for Sahayak.

Transient request/response records exchanged between flows, the tool loop, and
the generation client. Nothing here outlives a single request.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, Sequence, Type, Union

from pydantic import BaseModel

from sahayak.core.errors import GenerationError

if TYPE_CHECKING:
    from sahayak.core.prompts import RenderedPrompt
    from sahayak.core.tools.definitions import ToolDefinition


class Modality(str, Enum):
    """Response modalities a generation call may request."""

    TEXT = "TEXT"
    IMAGE = "IMAGE"
    AUDIO = "AUDIO"


@dataclass(frozen=True)
class ToolCall:
    """A model-initiated request to run a tool."""

    name: str
    args: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None


@dataclass(frozen=True)
class ToolResult:
    """A tool's output, fed back to the model."""

    name: str
    output: Dict[str, Any]
    id: Optional[str] = None


@dataclass
class Turn:
    """One step of tool-loop history after the initial prompt.

    role is "model" (the model requested tools) or "tool" (results returned to it).
    raw_content keeps the provider's own content object so it can be replayed verbatim.
    """

    role: str
    tool_calls: List[ToolCall] = field(default_factory=list)
    tool_results: List[ToolResult] = field(default_factory=list)
    text: Optional[str] = None
    raw_content: Any = None


@dataclass
class GenerationResult:
    """What a single model call produced."""

    text: str = ""
    data: Optional[Dict[str, Any]] = None
    media: Optional[str] = None
    media_mime_type: Optional[str] = None
    tool_calls: List[ToolCall] = field(default_factory=list)
    finish_reason: Optional[str] = None
    raw_content: Any = None

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)

    def require_data(self) -> Dict[str, Any]:
        """Structured payload, or GenerationError if the model returned none."""
        if self.data is None:
            raise GenerationError(
                "Model returned no structured output",
                context={"finish_reason": self.finish_reason},
            )
        return self.data

    def require_media(self) -> str:
        """Media data URI, or GenerationError if the model returned none."""
        if not self.media:
            raise GenerationError(
                "Model returned no media",
                context={"finish_reason": self.finish_reason},
            )
        return self.media

    def require_text(self) -> str:
        """Non-empty text, or GenerationError if the model returned none."""
        if not self.text or not self.text.strip():
            raise GenerationError(
                "Model returned no text",
                context={"finish_reason": self.finish_reason},
            )
        return self.text


class GenerationClient(Protocol):
    """Anything that can send a prompt to a model and return a GenerationResult."""

    async def generate(
        self,
        prompt: Union["RenderedPrompt", str],
        *,
        model: Optional[str] = None,
        output_schema: Optional[Type[BaseModel]] = None,
        tools: Optional[Sequence["ToolDefinition"]] = None,
        modalities: Optional[Sequence[Modality]] = None,
        voice: Optional[str] = None,
        history: Optional[Sequence[Turn]] = None,
        system_instruction: Optional[str] = None,
    ) -> GenerationResult:
        ...
