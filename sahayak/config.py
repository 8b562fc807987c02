"""Configuration management for Sahayak.

Centralizes all environment variable access for better testability and maintainability.
"""

import os
from typing import Optional


class Config:
    """Application configuration loaded from environment variables."""

    # Gemini AI API
    @staticmethod
    def gemini_api_key() -> Optional[str]:
        """Get Gemini API key from environment."""
        return os.getenv("GOOGLE_GENERATIVE_AI_API_KEY") or os.getenv("GEMINI_API_KEY")

    # Model selection (one model per modality)
    @staticmethod
    def text_model() -> str:
        """Get the model used for text and structured generation."""
        return os.getenv("SAHAYAK_TEXT_MODEL", "gemini-2.5-flash")

    @staticmethod
    def image_model() -> str:
        """Get the model used for image generation."""
        return os.getenv("SAHAYAK_IMAGE_MODEL", "gemini-2.0-flash-preview-image-generation")

    @staticmethod
    def tts_model() -> str:
        """Get the model used for speech synthesis."""
        return os.getenv("SAHAYAK_TTS_MODEL", "gemini-2.5-flash-preview-tts")

    @staticmethod
    def tts_voice() -> str:
        """Get the prebuilt voice used for story narration."""
        return os.getenv("SAHAYAK_TTS_VOICE", "Algenib")

    # Tool loop
    DEFAULT_MAX_TOOL_TURNS = 8

    @staticmethod
    def max_tool_turns() -> int:
        """Get the maximum number of model turns in a tool-calling loop.

        Falls back to the default for a missing, malformed or non-positive value.
        """
        try:
            turns = int(os.getenv("SAHAYAK_MAX_TOOL_TURNS", Config.DEFAULT_MAX_TOOL_TURNS))
        except ValueError:
            return Config.DEFAULT_MAX_TOOL_TURNS
        return turns if turns >= 1 else Config.DEFAULT_MAX_TOOL_TURNS

    # Helper methods
    @staticmethod
    def is_configured() -> bool:
        """Check if all required configuration is present."""
        return bool(Config.gemini_api_key())

    @staticmethod
    def get_missing_config() -> list[str]:
        """Get list of missing required configuration keys."""
        missing = []
        if not Config.gemini_api_key():
            missing.append("GEMINI_API_KEY or GOOGLE_GENERATIVE_AI_API_KEY")
        return missing


# Singleton instance for easy access
config = Config()
