"""FastAPI dependencies for Sahayak API.

Dependency injection functions for route handlers.
"""

from typing import Any, Dict, Optional

from fastapi import Header, HTTPException, Request

from sahayak.models.generation import GenerationClient


def get_flows_registry(request: Request) -> Dict[str, Any]:
    """Get FLOWS registry from app state.

    Note:
        Returns empty dict if flows_registry not set in app.state.
        Set via: app.state.flows_registry = {...}
    """
    return getattr(request.app.state, "flows_registry", {})


def get_generation_client(request: Request) -> Optional[GenerationClient]:
    """Get the generation client from app state.

    None means flows create the shared Gemini client on first use.
    """
    return getattr(request.app.state, "generation_client", None)


def get_access_token(authorization: Optional[str] = Header(None)) -> str:
    """Extract the Google OAuth bearer token from the Authorization header.

    Raises:
        HTTPException: 401 if the header is missing or not a bearer token
    """
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Missing bearer token in Authorization header")
    return token.strip()
