"""FastAPI application factory for Sahayak API."""

from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from sahayak import __version__
from sahayak.api.errors import register_exception_handlers
from sahayak.api.middleware import request_id_middleware
from sahayak.api.routes import classroom, flows, system
from sahayak.api.routes.flows import register_flow_routes
from sahayak.models.generation import GenerationClient


def create_app(
    flows_registry: Optional[Dict[str, Any]] = None,
    generation_client: Optional[GenerationClient] = None,
) -> FastAPI:
    """Create and configure FastAPI app. Factory pattern for testability."""
    app = FastAPI(
        title="sahayak-ai",
        description=(
            "Teaching assistant API: differentiated worksheets, local-language content, "
            "visual aids, narrated stories, lesson plans, and Google Forms quizzes."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware
    app.middleware("http")(request_id_middleware)
    register_exception_handlers(app)

    # Register routes
    app.include_router(system.router)
    app.include_router(flows.router)
    app.include_router(classroom.router)

    # Register dynamic flow routes (if flows registry provided)
    if flows_registry:
        register_flow_routes(app, flows_registry)
        app.state.flows_registry = flows_registry

    # None lets flows create the shared Gemini client lazily
    app.state.generation_client = generation_client

    def custom_openapi():
        """Generate custom OpenAPI schema. Cached after first call."""
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Sahayak AI API",
            version=__version__,
            description="Prompt flows for teachers: content, media, and Google Workspace tools",
            routes=app.routes,
        )

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    setattr(app, "openapi", custom_openapi)

    return app
