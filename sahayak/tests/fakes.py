"""Test doubles for the generation client and Google REST calls."""

import base64
from typing import Any, Dict, List, Optional

from sahayak.core.prompts import RenderedPrompt
from sahayak.models.generation import GenerationResult, ToolCall

PNG_DATA_URI = "data:image/png;base64," + base64.b64encode(b"\x89PNG\r\n\x1a\nfake").decode()


class FakeGenerationClient:
    """Generation client scripted with queued results. Records every call."""

    def __init__(self, *results: Any):
        self.results: List[Any] = list(results)
        self.calls: List[Dict[str, Any]] = []

    def queue(self, *results: Any) -> "FakeGenerationClient":
        self.results.extend(results)
        return self

    async def generate(self, prompt, **kwargs) -> GenerationResult:
        if isinstance(prompt, str):
            prompt = RenderedPrompt.from_text(prompt)
        kwargs["history"] = list(kwargs.get("history") or [])
        self.calls.append({"prompt": prompt, **kwargs})

        if not self.results:
            raise AssertionError(f"Unexpected generation call #{len(self.calls)}")
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def prompts(self) -> List[str]:
        return [call["prompt"].text for call in self.calls]


def tool_call(name: str, call_id: Optional[str] = None, **args: Any) -> GenerationResult:
    """A model turn requesting one tool."""
    return GenerationResult(tool_calls=[ToolCall(name=name, args=args, id=call_id)])


def final(data: Optional[Dict[str, Any]] = None, text: str = "") -> GenerationResult:
    """A model turn with no tool calls."""
    return GenerationResult(text=text, data=data, finish_reason="STOP")


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, payload: Optional[Dict[str, Any]] = None, text: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.text = text or (str(payload) if payload is not None else "")
        self.content = self.text.encode()

    def json(self) -> Dict[str, Any]:
        return self._payload or {}
