"""Main entry point for Sahayak API.

Initializes FastAPI app with FLOWS registry and makes it runnable standalone.

Usage:
    Development: uvicorn sahayak.main:app --reload --port 8000
    Production: uvicorn sahayak.main:app --host 0.0.0.0 --port 8000 --workers 4
"""

from sahayak.api import create_app
from sahayak.flows.registry import get_flows_registry

# Initialize FastAPI app with FLOWS registry
app = create_app(flows_registry=get_flows_registry())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sahayak.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
