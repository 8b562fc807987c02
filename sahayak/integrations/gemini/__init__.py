"""Gemini integration module."""

from sahayak.integrations.gemini.client import GeminiClient, extract_json_object

__all__ = ["GeminiClient", "extract_json_object"]
