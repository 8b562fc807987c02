"""Tool invocation loop for Sahayak.

Runs the request → tool call → tool result → final answer protocol between a
generation client and a flow's closed ToolSet.
"""

import asyncio
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Type, Union

from pydantic import BaseModel

from sahayak.config import Config
from sahayak.core.errors import ProtocolError, ToolExecutionError, ValidationError
from sahayak.core.logging import logger
from sahayak.core.prompts import RenderedPrompt
from sahayak.core.schema import validate
from sahayak.core.tools.definitions import ToolContext, ToolSet
from sahayak.models.generation import GenerationClient, GenerationResult, ToolCall, ToolResult, Turn


class LoopState(str, Enum):
    AWAITING_MODEL = "awaiting_model"
    TOOL_REQUESTED = "tool_requested"
    TOOL_EXECUTING = "tool_executing"
    FINALIZED = "finalized"


@dataclass(frozen=True)
class ToolInvocation:
    """Record of one executed tool call."""

    tool_name: str
    args: Dict[str, Any]
    output: Any
    execution_time_ms: float


@dataclass
class LoopOutcome:
    """Final model answer plus every tool invocation that led to it."""

    final: GenerationResult
    invocations: List[ToolInvocation] = field(default_factory=list)
    turns: int = 0

    def calls_to(self, tool_name: str) -> List[ToolInvocation]:
        return [inv for inv in self.invocations if inv.tool_name == tool_name]

    def was_called(self, tool_name: str) -> bool:
        return bool(self.calls_to(tool_name))

    def output_of(self, tool_name: str) -> Any:
        """Output of the most recent call to a tool.

        Raises:
            ProtocolError: If the model never invoked the tool
        """
        calls = self.calls_to(tool_name)
        if not calls:
            raise ProtocolError(
                f"Model finished without invoking required tool '{tool_name}'",
                context={"tool_name": tool_name, "invoked": [inv.tool_name for inv in self.invocations]},
            )
        return calls[-1].output


class ToolInvocationLoop:
    """Drives a model through tool calls until it produces a final answer.

    Each model turn either requests tools (every requested call is executed in
    order and the results fed back) or answers without tool calls, which ends
    the loop. The loop is bounded by max_turns.

    Args:
        client: Generation client used for every model turn
        tools: The closed set of tools the model may call
        max_turns: Upper bound on model turns (default from Config)
    """

    def __init__(self, client: GenerationClient, tools: ToolSet, max_turns: Optional[int] = None):
        self.client = client
        self.tools = tools
        self.max_turns = max_turns if max_turns is not None else Config.max_tool_turns()
        self.state = LoopState.AWAITING_MODEL
        self.states: List[LoopState] = []

    async def run(
        self,
        prompt: Union[RenderedPrompt, str],
        *,
        context: Optional[ToolContext] = None,
        output_schema: Optional[Type[BaseModel]] = None,
        model: Optional[str] = None,
        system_instruction: Optional[str] = None,
    ) -> LoopOutcome:
        """Run the loop to completion.

        Args:
            prompt: Rendered prompt that opens the conversation
            context: Side-channel data for tool handlers (never shown to the model)
            output_schema: Shape the final answer must carry, if any
            model: Model override
            system_instruction: Optional system instruction

        Returns:
            LoopOutcome with the final result and all invocations

        Raises:
            GenerationError: If a model call fails
            ToolExecutionError: If a tool's arguments are invalid or its handler fails
            ProtocolError: If the model requests an unknown tool or never finishes
        """
        context = context or ToolContext()
        history: List[Turn] = []
        invocations: List[ToolInvocation] = []

        for turn in range(1, self.max_turns + 1):
            self._transition(LoopState.AWAITING_MODEL)
            result = await self.client.generate(
                prompt,
                model=model,
                output_schema=output_schema,
                tools=self.tools.definitions,
                history=history,
                system_instruction=system_instruction,
            )

            if not result.has_tool_calls:
                self._transition(LoopState.FINALIZED)
                logger.info("tool_loop_finished", turns=turn, invocations=len(invocations))
                return LoopOutcome(final=result, invocations=invocations, turns=turn)

            self._transition(LoopState.TOOL_REQUESTED)
            results: List[ToolResult] = []
            for call in result.tool_calls:
                invocation = await self.execute(call, context)
                invocations.append(invocation)
                results.append(ToolResult(name=call.name, output=_as_response(invocation.output), id=call.id))

            history.append(
                Turn(role="model", tool_calls=list(result.tool_calls), text=result.text or None, raw_content=result.raw_content)
            )
            history.append(Turn(role="tool", tool_results=results))

        raise ProtocolError(
            f"Model did not produce a final answer within {self.max_turns} turns",
            context={"max_turns": self.max_turns, "invocations": len(invocations)},
        )

    async def execute(self, call: ToolCall, context: ToolContext) -> ToolInvocation:
        """Validate arguments, run the handler, validate its output.

        Raises:
            ProtocolError: If the tool is not in this loop's ToolSet
            ToolExecutionError: If arguments, handler, or output fail
        """
        definition = self.tools.resolve(call.name)
        self._transition(LoopState.TOOL_EXECUTING)
        start_time = time.time()

        try:
            args = validate(definition.input_model, call.args)
        except ValidationError as e:
            raise ToolExecutionError(
                call.name,
                f"Invalid arguments for tool '{call.name}': {e.message}",
                context={"errors": e.errors},
                cause=e,
            ) from e

        try:
            if asyncio.iscoroutinefunction(definition.handler):
                output = await definition.handler(args, context)
            else:
                output = await asyncio.to_thread(definition.handler, args, context)
        except Exception as e:
            logger.warning(
                "tool_failed",
                tool=call.name,
                error=str(e),
                error_type=type(e).__name__,
                execution_time_ms=(time.time() - start_time) * 1000,
            )
            raise ToolExecutionError(call.name, f"Tool '{call.name}' failed: {e}", cause=e) from e

        if definition.output_model is not None:
            try:
                output = validate(definition.output_model, output)
            except ValidationError as e:
                raise ToolExecutionError(
                    call.name,
                    f"Tool '{call.name}' returned invalid output: {e.message}",
                    context={"errors": e.errors},
                    cause=e,
                ) from e

        execution_time = (time.time() - start_time) * 1000
        logger.info("tool_executed", tool=call.name, execution_time_ms=execution_time)

        return ToolInvocation(
            tool_name=call.name,
            args=args.model_dump(by_alias=True),
            output=output,
            execution_time_ms=execution_time,
        )

    def _transition(self, state: LoopState) -> None:
        self.state = state
        self.states.append(state)


def _as_response(output: Any) -> Dict[str, Any]:
    """Function responses must be JSON objects."""
    if isinstance(output, BaseModel):
        return output.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(output, dict):
        return output
    return {"result": output}
