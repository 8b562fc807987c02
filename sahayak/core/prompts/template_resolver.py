"""Prompt template resolver for Sahayak.

Handles variable substitution, conditional regions, and media references for flow prompts.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

from sahayak.core.errors import TemplateError
from sahayak.utils.data_uri import parse_data_uri

CONDITIONAL_PATTERN = re.compile(
    r"\{\{#if\s+([A-Za-z_][\w.]*)\s*\}\}(.*?)(?:\{\{else\}\}(.*?))?\{\{/if\}\}", re.DOTALL
)
MEDIA_PATTERN = re.compile(r"\{\{media\s+url=([A-Za-z_][\w.]*)\s*\}\}")
PLACEHOLDER_PATTERN = re.compile(r"\{\{\{?\s*([A-Za-z_][\w.]*)\s*\}?\}\}")


@dataclass(frozen=True)
class PromptTemplate:
    """Static prompt text with {{placeholders}}, {{#if}} regions and {{media url=...}} references."""

    name: str
    template: str


@dataclass(frozen=True)
class TextPart:
    """A run of rendered prompt text."""

    text: str


@dataclass(frozen=True)
class MediaPart:
    """Binary content embedded by reference (never inlined as text)."""

    field: str
    mime_type: str
    data: bytes


PromptPart = Union[TextPart, MediaPart]


@dataclass(frozen=True)
class RenderedPrompt:
    """Ordered text and media parts produced from a PromptTemplate."""

    template_name: str
    parts: Tuple[PromptPart, ...]

    @property
    def text(self) -> str:
        """All text parts joined, media references omitted."""
        return "".join(part.text for part in self.parts if isinstance(part, TextPart))

    @property
    def media(self) -> List[MediaPart]:
        """Media parts in prompt order."""
        return [part for part in self.parts if isinstance(part, MediaPart)]

    @classmethod
    def from_text(cls, text: str, template_name: str = "inline") -> "RenderedPrompt":
        """Wrap plain text (e.g. the output of an earlier stage) as a prompt."""
        return cls(template_name=template_name, parts=(TextPart(text),))


class TemplateResolver:
    """Resolves prompt templates against validated flow input.

    Pure functions with no side effects for easy testing: the same template and
    fields always render to the same prompt.
    """

    @staticmethod
    def render(template: PromptTemplate, fields: Dict[str, Any]) -> RenderedPrompt:
        """Render a template into text and media parts.

        Args:
            template: PromptTemplate to render
            fields: Validated flow input (field name -> value)

        Returns:
            RenderedPrompt with media references split out as MediaPart entries

        Raises:
            TemplateError: If a placeholder has no value or a media field is not a data URI

        Examples:
            >>> t = PromptTemplate("greet", "Hello {{name}}!")
            >>> TemplateResolver.render(t, {"name": "Asha"}).text
            'Hello Asha!'
        """
        body = TemplateResolver.resolve_conditionals(template.template, fields)

        parts: List[PromptPart] = []
        cursor = 0
        for match in MEDIA_PATTERN.finditer(body):
            parts.append(TextPart(TemplateResolver.substitute_variables(body[cursor:match.start()], fields, template.name)))
            parts.append(TemplateResolver._media_part(match.group(1), fields, template.name))
            cursor = match.end()
        parts.append(TextPart(TemplateResolver.substitute_variables(body[cursor:], fields, template.name)))

        return RenderedPrompt(template_name=template.name, parts=TemplateResolver._merge(parts))

    @staticmethod
    def resolve_conditionals(template: str, fields: Dict[str, Any]) -> str:
        """Keep the {{#if}} branch whose controlling field is present, drop the other."""

        def choose(match: "re.Match[str]") -> str:
            if TemplateResolver.evaluate_condition(match.group(1), fields):
                return match.group(2)
            return match.group(3) or ""

        return CONDITIONAL_PATTERN.sub(choose, template)

    @staticmethod
    def substitute_variables(text: str, fields: Dict[str, Any], template_name: str = "inline") -> str:
        """Substitute {{variable}} and {{{variable}}} placeholders with field values.

        Raises:
            TemplateError: If a placeholder has no corresponding field
        """

        def replace(match: "re.Match[str]") -> str:
            path = match.group(1)
            value = TemplateResolver._resolve_path(path, fields)
            if value is None:
                raise TemplateError(
                    f"Template '{template_name}' references '{path}' but no value was provided",
                    context={"template": template_name, "placeholder": path},
                )
            return TemplateResolver._format_value(value)

        return PLACEHOLDER_PATTERN.sub(replace, text)

    @staticmethod
    def evaluate_condition(path: str, fields: Dict[str, Any]) -> bool:
        """A condition holds when its field is present and non-empty."""
        value = TemplateResolver._resolve_path(path, fields)
        if isinstance(value, str):
            return bool(value.strip())
        return bool(value)

    @staticmethod
    def _resolve_path(path: str, context: Dict[str, Any]) -> Any:
        """Resolve dot-notation path in context.

        Examples:
            >>> TemplateResolver._resolve_path("story.topic", {"story": {"topic": "rivers"}})
            'rivers'
            >>> TemplateResolver._resolve_path("story.missing", {"story": {}})
        """
        value: Any = context
        for part in path.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                return None

            if value is None:
                return None

        return value

    @staticmethod
    def _format_value(value: Any) -> str:
        """Textual form of a field value."""
        if isinstance(value, (list, tuple)):
            return ", ".join(str(item) for item in value)
        return str(value)

    @staticmethod
    def _media_part(path: str, fields: Dict[str, Any], template_name: str) -> MediaPart:
        value = TemplateResolver._resolve_path(path, fields)
        if value is None:
            raise TemplateError(
                f"Template '{template_name}' references media '{path}' but no value was provided",
                context={"template": template_name, "placeholder": path},
            )
        try:
            mime_type, data = parse_data_uri(value)
        except (TypeError, ValueError) as e:
            raise TemplateError(
                f"Media field '{path}' is not a base64 data URI",
                context={"template": template_name, "placeholder": path},
                cause=e,
            ) from e
        return MediaPart(field=path, mime_type=mime_type, data=data)

    @staticmethod
    def _merge(parts: List[PromptPart]) -> Tuple[PromptPart, ...]:
        """Drop empty text runs and join adjacent ones."""
        merged: List[PromptPart] = []
        for part in parts:
            if isinstance(part, TextPart):
                if not part.text:
                    continue
                if merged and isinstance(merged[-1], TextPart):
                    merged[-1] = TextPart(merged[-1].text + part.text)
                    continue
            merged.append(part)
        return tuple(merged)


def render(template: PromptTemplate, fields: Dict[str, Any]) -> RenderedPrompt:
    """Module-level shortcut for TemplateResolver.render."""
    return TemplateResolver.render(template, fields)
