"""Middleware for Sahayak API."""

from sahayak.api.middleware.api_logging import APILoggingMiddleware
from sahayak.api.middleware.request_id import request_id_middleware

__all__ = ["APILoggingMiddleware", "request_id_middleware"]
