"""Prompt templating module for Sahayak.

Provides prompt templates and the resolver that renders them against flow input.
"""

from sahayak.core.prompts.template_resolver import (
    MediaPart,
    PromptTemplate,
    RenderedPrompt,
    TemplateResolver,
    TextPart,
    render,
)

__all__ = [
    "MediaPart",
    "PromptTemplate",
    "RenderedPrompt",
    "TemplateResolver",
    "TextPart",
    "render",
]
