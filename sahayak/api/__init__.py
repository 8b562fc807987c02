"""HTTP API for Sahayak."""

from sahayak.api.app import create_app

__all__ = ["create_app"]
