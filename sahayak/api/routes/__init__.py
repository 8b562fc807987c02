"""Routes for Sahayak API."""

from sahayak.api.routes import classroom, flows, system

__all__ = ["classroom", "flows", "system"]
