"""Error taxonomy for Sahayak flows.

Every failure inside a flow surfaces as one of these typed errors. None of them
are retried; the enclosing flow aborts and the error propagates to the caller.
"""

from typing import Any, Dict, List, Optional


class SahayakError(Exception):
    """Base class for all flow errors.

    Args:
        message: Human readable description
        context: Optional structured details (flow name, tool name, ...)
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.context = dict(context or {})
        self.cause = cause
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for API responses and logs."""
        payload: Dict[str, Any] = {
            "success": False,
            "error": self.message,
            "error_type": self.__class__.__name__,
        }
        if self.context:
            payload["context"] = self.context
        return payload

    def __str__(self) -> str:
        cause_str = f" (caused by: {self.cause})" if self.cause else ""
        return f"{self.message}{cause_str}"


class ValidationError(SahayakError):
    """A value does not conform to its declared shape.

    ``errors`` holds one ``{"field", "rule", "message"}`` entry per violation.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, str]]] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        self.errors = errors or []
        super().__init__(message, context=context, cause=cause)

    @property
    def fields(self) -> List[str]:
        """Names of the offending fields."""
        return [error["field"] for error in self.errors]

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class TemplateError(SahayakError):
    """A prompt template cannot be rendered with the given fields."""


class GenerationError(SahayakError):
    """The remote model call failed or returned no usable result."""


class ToolExecutionError(SahayakError):
    """A bound tool function raised while the model was driving it."""

    def __init__(
        self,
        tool_name: str,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        self.tool_name = tool_name
        context = dict(context or {})
        context.setdefault("tool_name", tool_name)
        super().__init__(message, context=context, cause=cause)


class ProtocolError(SahayakError):
    """The model did not follow the protocol a flow requires.

    Raised when the model never calls a required tool, calls a tool the flow
    does not know, omits a required structured field, or never finalizes.
    """
