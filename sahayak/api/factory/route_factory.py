"""Route factory for Sahayak API.

Factory pattern for creating FastAPI route handlers with consistent middleware.
"""

import time
from typing import Any, Callable, Dict, Optional

from fastapi import Body, Depends
from fastapi.responses import JSONResponse

from sahayak.api.dependencies import get_generation_client
from sahayak.api.middleware import APILoggingMiddleware
from sahayak.core.errors import SahayakError
from sahayak.models.generation import GenerationClient


class RouteFactory:
    """Factory for creating flow route handlers.

    Applies consistent logging to all routes. Errors propagate as SahayakError
    and are mapped to HTTP responses by the app's exception handler.
    """

    def __init__(self, logging_middleware: Optional[APILoggingMiddleware] = None):
        """Initialize route factory.

        Args:
            logging_middleware: APILoggingMiddleware instance (optional)
        """
        self.logging = logging_middleware or APILoggingMiddleware()

    def create_flow_route(self, flow_name: str, flow_config: Dict[str, Any]) -> Callable:
        """Create a FastAPI route handler for a flow.

        Args:
            flow_name: Name of the flow (e.g., "lesson-plan")
            flow_config: Flow configuration dictionary with:
                - flow: Flow class to instantiate per request
                - type: Flow type (content, media, tools)
                - doc: Flow documentation string

        Returns:
            Async route handler function

        Example:
            >>> factory = RouteFactory()
            >>> route = factory.create_flow_route("local-content", {
            ...     "flow": LocalContentFlow,
            ...     "type": "content",
            ...     "doc": "Generate local content"
            ... })
        """

        async def handler(
            request_data: Dict[str, Any] = Body(...),
            client: Optional[GenerationClient] = Depends(get_generation_client),
        ):
            start_time = time.time()
            flow = flow_config["flow"](client)

            try:
                result = await flow.run(request_data)
            except SahayakError as e:
                self.logging.log_call(
                    flow_name=flow_name,
                    flow_type=flow_config["type"],
                    success=False,
                    processing_ms=int((time.time() - start_time) * 1000),
                    error_type=type(e).__name__,
                    error_message=e.message,
                )
                raise

            self.logging.log_call(
                flow_name=flow_name,
                flow_type=flow_config["type"],
                success=True,
                processing_ms=int((time.time() - start_time) * 1000),
            )
            return JSONResponse(content=result.model_dump(mode="json", exclude_none=True))

        # Set handler metadata
        handler.__doc__ = flow_config["doc"]
        handler.__name__ = f"{flow_name.replace('-', '_')}_route"
        return handler
