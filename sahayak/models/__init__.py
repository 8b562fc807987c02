"""Models for Sahayak.

Organized by domain:
- generation: Model call results, tool calls, and loop history
- flows: Input and output shapes of every flow
- tools: Argument and result shapes of the model-callable tools
"""

from sahayak.models.generation import (
    GenerationClient,
    GenerationResult,
    Modality,
    ToolCall,
    ToolResult,
    Turn,
)

__all__ = [
    "GenerationClient",
    "GenerationResult",
    "Modality",
    "ToolCall",
    "ToolResult",
    "Turn",
]
