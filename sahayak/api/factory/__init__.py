"""Route factory for Sahayak API.

Provides factory pattern for creating FastAPI route handlers.
"""

from sahayak.api.factory.route_factory import RouteFactory

__all__ = ["RouteFactory"]
