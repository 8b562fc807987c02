"""Tool definitions and the tool invocation loop for Sahayak."""

from sahayak.core.tools.definitions import ToolContext, ToolDefinition, ToolHandler, ToolSet
from sahayak.core.tools.loop import LoopOutcome, LoopState, ToolInvocation, ToolInvocationLoop

__all__ = [
    "ToolContext",
    "ToolDefinition",
    "ToolHandler",
    "ToolSet",
    "LoopOutcome",
    "LoopState",
    "ToolInvocation",
    "ToolInvocationLoop",
]
