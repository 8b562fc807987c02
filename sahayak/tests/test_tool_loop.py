"""Unit tests for the tool invocation loop."""

from enum import Enum
from typing import Any, Dict, List

import pytest
from pydantic import BaseModel

from sahayak.core.errors import ProtocolError, ToolExecutionError
from sahayak.core.tools import LoopState, ToolContext, ToolDefinition, ToolInvocationLoop, ToolSet
from sahayak.models.generation import GenerationResult, ToolCall
from sahayak.tests.fakes import FakeGenerationClient, final, tool_call


class EchoArgs(BaseModel):
    word: str


class EchoResult(BaseModel):
    echoed: str


class EchoTool(str, Enum):
    ECHO = "echo"
    SECRET = "whoAmI"


def build_tools(record: List[Dict[str, Any]]) -> ToolSet:
    async def echo(args: EchoArgs, context: ToolContext) -> Dict[str, Any]:
        record.append({"tool": "echo", "word": args.word})
        return {"echoed": args.word}

    def who_am_i(args: EchoArgs, context: ToolContext) -> Dict[str, Any]:
        record.append({"tool": "whoAmI", "token": context.require_access_token()})
        return {"echoed": "ok"}

    return ToolSet(
        EchoTool,
        {
            EchoTool.ECHO: ToolDefinition("echo", "Echo a word", EchoArgs, echo, EchoResult),
            EchoTool.SECRET: ToolDefinition("whoAmI", "Use the caller's token", EchoArgs, who_am_i, EchoResult),
        },
    )


class TestLoopTermination:
    """Test the loop stops after the model's final answer."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("n", [0, 1, 3])
    async def test_exactly_n_executions(self, n):
        """Test N tool requests give exactly N executions."""
        record: List[Dict[str, Any]] = []
        client = FakeGenerationClient(*[tool_call("echo", word=f"w{i}") for i in range(n)], final(text="done"))
        loop = ToolInvocationLoop(client, build_tools(record), max_turns=10)

        outcome = await loop.run("Say things")

        assert len(record) == n
        assert len(outcome.invocations) == n
        assert len(client.calls) == n + 1
        assert outcome.turns == n + 1
        assert outcome.final.text == "done"
        assert loop.state == LoopState.FINALIZED

    @pytest.mark.asyncio
    async def test_model_that_never_finishes_hits_max_turns(self):
        """Test max_turns stops a model that never finishes."""
        record: List[Dict[str, Any]] = []
        client = FakeGenerationClient(*[tool_call("echo", word="again") for _ in range(3)])
        loop = ToolInvocationLoop(client, build_tools(record), max_turns=3)

        with pytest.raises(ProtocolError) as exc_info:
            await loop.run("Loop forever")

        assert exc_info.value.context["max_turns"] == 3
        assert len(record) == 3

    @pytest.mark.asyncio
    async def test_sibling_calls_in_one_turn_all_execute(self):
        """Test every call in one turn executes."""
        record: List[Dict[str, Any]] = []
        turn = GenerationResult(tool_calls=[ToolCall("echo", {"word": "a"}), ToolCall("echo", {"word": "b"})])
        client = FakeGenerationClient(turn, final())

        outcome = await ToolInvocationLoop(client, build_tools(record), max_turns=5).run("Two at once")

        assert [r["word"] for r in record] == ["a", "b"]
        assert [inv.args for inv in outcome.invocations] == [{"word": "a"}, {"word": "b"}]


class TestLoopHistory:
    """Test tool results are fed back to the model."""

    @pytest.mark.asyncio
    async def test_results_returned_in_history(self):
        """Test results are fed back in history."""
        client = FakeGenerationClient(tool_call("echo", call_id="c1", word="hi"), final())

        await ToolInvocationLoop(client, build_tools([]), max_turns=5).run("Echo hi")

        assert client.calls[0]["history"] == []
        model_turn, tool_turn = client.calls[1]["history"]
        assert model_turn.role == "model"
        assert model_turn.tool_calls[0].name == "echo"
        assert tool_turn.role == "tool"
        assert tool_turn.tool_results[0].output == {"echoed": "hi"}
        assert tool_turn.tool_results[0].id == "c1"

    @pytest.mark.asyncio
    async def test_tools_declared_on_every_turn(self):
        """Test tools are declared on every turn."""
        client = FakeGenerationClient(tool_call("echo", word="x"), final())

        await ToolInvocationLoop(client, build_tools([]), max_turns=5).run("Echo")

        for call in client.calls:
            assert [tool.name for tool in call["tools"]] == ["echo", "whoAmI"]

    @pytest.mark.asyncio
    async def test_state_transitions(self):
        """Test loop state transitions."""
        client = FakeGenerationClient(tool_call("echo", word="x"), final())
        loop = ToolInvocationLoop(client, build_tools([]), max_turns=5)

        await loop.run("Echo")

        assert loop.states == [
            LoopState.AWAITING_MODEL,
            LoopState.TOOL_REQUESTED,
            LoopState.TOOL_EXECUTING,
            LoopState.AWAITING_MODEL,
            LoopState.FINALIZED,
        ]


class TestSideChannelContext:
    """Test credentials reach handlers without entering the conversation."""

    @pytest.mark.asyncio
    async def test_token_reaches_handler_only(self):
        """Test the token reaches handlers only."""
        record: List[Dict[str, Any]] = []
        client = FakeGenerationClient(tool_call("whoAmI", word="me"), final())

        outcome = await ToolInvocationLoop(client, build_tools(record), max_turns=5).run(
            "Who am I?", context=ToolContext(access_token="secret-token")
        )

        assert record == [{"tool": "whoAmI", "token": "secret-token"}]
        assert outcome.invocations[0].args == {"word": "me"}
        for call in client.calls:
            assert "secret-token" not in call["prompt"].text
            for turn in call["history"]:
                assert "secret-token" not in repr(turn)

    def test_context_repr_hides_token(self):
        """Test ToolContext repr hides the token."""
        assert "secret-token" not in repr(ToolContext(access_token="secret-token"))

    @pytest.mark.asyncio
    async def test_missing_token_is_tool_failure(self):
        """Test missing token is a tool failure."""
        client = FakeGenerationClient(tool_call("whoAmI", word="me"))

        with pytest.raises(ToolExecutionError) as exc_info:
            await ToolInvocationLoop(client, build_tools([]), max_turns=5).run("Who am I?")

        assert exc_info.value.tool_name == "whoAmI"
        assert "Missing access token" in exc_info.value.message


class TestLoopFailures:
    """Test protocol and tool failures abort the loop."""

    @pytest.mark.asyncio
    async def test_unknown_tool_is_protocol_error(self):
        """Test unknown tool is a ProtocolError."""
        client = FakeGenerationClient(tool_call("deleteEverything"))

        with pytest.raises(ProtocolError) as exc_info:
            await ToolInvocationLoop(client, build_tools([]), max_turns=5).run("Go")

        assert exc_info.value.context["tool_name"] == "deleteEverything"

    @pytest.mark.asyncio
    async def test_invalid_arguments_wrapped(self):
        """Test invalid arguments become ToolExecutionError."""
        client = FakeGenerationClient(tool_call("echo", wrong="field"))

        with pytest.raises(ToolExecutionError) as exc_info:
            await ToolInvocationLoop(client, build_tools([]), max_turns=5).run("Go")

        assert exc_info.value.tool_name == "echo"
        assert exc_info.value.context["errors"][0]["field"] == "word"

    @pytest.mark.asyncio
    async def test_handler_failure_not_retried(self):
        """Test handler failures are not retried."""
        calls: List[str] = []

        async def explode(args: EchoArgs, context: ToolContext) -> Dict[str, Any]:
            calls.append(args.word)
            raise RuntimeError("Google Forms API request failed with status 500")

        tools = ToolSet(
            EchoTool,
            {
                EchoTool.ECHO: ToolDefinition("echo", "Echo", EchoArgs, explode),
                EchoTool.SECRET: ToolDefinition("whoAmI", "Who", EchoArgs, explode),
            },
        )
        client = FakeGenerationClient(tool_call("echo", word="x"), final())

        with pytest.raises(ToolExecutionError) as exc_info:
            await ToolInvocationLoop(client, tools, max_turns=5).run("Go")

        assert calls == ["x"]
        assert len(client.calls) == 1
        assert isinstance(exc_info.value.cause, RuntimeError)

    @pytest.mark.asyncio
    async def test_invalid_tool_output_wrapped(self):
        """Test invalid tool output becomes ToolExecutionError."""
        async def wrong_shape(args: EchoArgs, context: ToolContext) -> Dict[str, Any]:
            return {"unexpected": True}

        tools = ToolSet(
            EchoTool,
            {
                EchoTool.ECHO: ToolDefinition("echo", "Echo", EchoArgs, wrong_shape, EchoResult),
                EchoTool.SECRET: ToolDefinition("whoAmI", "Who", EchoArgs, wrong_shape),
            },
        )

        with pytest.raises(ToolExecutionError):
            await ToolInvocationLoop(FakeGenerationClient(tool_call("echo", word="x")), tools, max_turns=5).run("Go")


class TestLoopOutcome:
    """Test outcome lookups."""

    @pytest.mark.asyncio
    async def test_output_of_returns_latest_validated_output(self):
        """Test output_of returns the latest validated output."""
        client = FakeGenerationClient(tool_call("echo", word="first"), tool_call("echo", word="second"), final())

        outcome = await ToolInvocationLoop(client, build_tools([]), max_turns=5).run("Go")

        assert outcome.output_of("echo") == EchoResult(echoed="second")
        assert outcome.was_called("echo")
        assert len(outcome.calls_to("echo")) == 2

    @pytest.mark.asyncio
    async def test_output_of_uncalled_tool_is_protocol_error(self):
        """Test output_of an uncalled tool is a ProtocolError."""
        outcome = await ToolInvocationLoop(FakeGenerationClient(final(text="no tools")), build_tools([]), max_turns=5).run("Go")

        with pytest.raises(ProtocolError):
            outcome.output_of("whoAmI")


class TestToolSet:
    """Test closed tool sets."""

    def test_every_member_needs_definition(self):
        """Test every enum member needs a definition."""
        async def noop(args, context):
            return {}

        with pytest.raises(ValueError):
            ToolSet(EchoTool, {EchoTool.ECHO: ToolDefinition("echo", "Echo", EchoArgs, noop)})

    def test_definition_name_must_match_member(self):
        """Test definition names match enum members."""
        async def noop(args, context):
            return {}

        with pytest.raises(ValueError):
            ToolSet(
                EchoTool,
                {
                    EchoTool.ECHO: ToolDefinition("echo", "Echo", EchoArgs, noop),
                    EchoTool.SECRET: ToolDefinition("somethingElse", "Who", EchoArgs, noop),
                },
            )

    def test_membership(self):
        """Test membership and length."""
        tools = build_tools([])

        assert "echo" in tools
        assert "other" not in tools
        assert len(tools) == 2
