"""Google Workspace (Forms, Classroom) integration module."""

from sahayak.integrations.google.client import GoogleApiClient, GoogleApiError

__all__ = ["GoogleApiClient", "GoogleApiError"]
