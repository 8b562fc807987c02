"""Error-to-HTTP mapping for Sahayak API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sahayak.core.errors import (
    GenerationError,
    ProtocolError,
    SahayakError,
    TemplateError,
    ToolExecutionError,
    ValidationError,
)


def status_code_for(error: SahayakError) -> int:
    """HTTP status for a flow error.

    Caller input that fails its shape is a 422; a model answer that fails its
    shape is an upstream failure like any other remote error.

    Examples:
        >>> status_code_for(ValidationError("bad", context={"stage": "input"}))
        422
        >>> status_code_for(ProtocolError("no form"))
        502
    """
    if isinstance(error, ValidationError):
        return 422 if error.context.get("stage", "input") == "input" else 502
    if isinstance(error, TemplateError):
        return 500
    if isinstance(error, (GenerationError, ToolExecutionError, ProtocolError)):
        return 502
    return 500


async def sahayak_error_handler(request: Request, exc: SahayakError) -> JSONResponse:
    return JSONResponse(status_code=status_code_for(exc), content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SahayakError, sahayak_error_handler)
