"""Modal deployment wrapper for Sahayak API.

Usage:
    Development: modal serve sahayak/modal_app.py
    Production: modal deploy sahayak/modal_app.py
"""

import modal

from sahayak.api import create_app
from sahayak.flows.registry import get_flows_registry

app = modal.App("sahayak-ai")

# Build image with all dependencies
image = (
    modal.Image.debian_slim(python_version="3.12")
    .pip_install(
        # Core FastAPI
        "fastapi>=0.100.0",
        "pydantic>=2.0.0",
        "uvicorn>=0.23.0",
        # Logging
        "structlog>=24.4.0",
        # AI/ML
        "google-genai>=1.47.0",
        # HTTP clients
        "requests>=2.31",
    )
    .add_local_python_source("sahayak")
)


@app.function(
    image=image,
    secrets=[
        modal.Secret.from_name("gemini-secret"),  # GOOGLE_GENERATIVE_AI_API_KEY
    ],
    timeout=120,
    scaledown_window=120,
    max_containers=10,
)
@modal.asgi_app()
def api():
    """Sahayak FastAPI application with flows registry.

    Returns:
        FastAPI app instance with all 8 flows registered
    """
    return create_app(flows_registry=get_flows_registry())
