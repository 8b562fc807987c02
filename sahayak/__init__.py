"""Sahayak AI: prompt-flow orchestration for teacher content generation."""

__version__ = "0.1.0"
