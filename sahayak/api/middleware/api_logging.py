"""API call logging middleware for Sahayak API.

Provides reusable flow-call logging for FastAPI routes. Request bodies are never
logged since they can carry OAuth tokens and document payloads.
"""

from typing import Optional

from sahayak.core.logging import logger


class APILoggingMiddleware:
    """Middleware for logging flow calls as structured events."""

    def log_call(
        self,
        flow_name: str,
        flow_type: str,
        success: bool,
        processing_ms: int,
        error_type: Optional[str] = None,
        error_message: Optional[str] = None,
    ) -> None:
        """Log a flow call.

        Args:
            flow_name: Name of the flow called
            flow_type: Type of flow (content, media, tools)
            success: Whether call succeeded
            processing_ms: Processing time in milliseconds
            error_type: Error class name if failed
            error_message: Error message if failed
        """
        if success:
            logger.info("api_call", flow=flow_name, flow_type=flow_type, success=True, processing_ms=processing_ms)
        else:
            logger.warning(
                "api_call",
                flow=flow_name,
                flow_type=flow_type,
                success=False,
                processing_ms=processing_ms,
                error_type=error_type,
                error=error_message,
            )
