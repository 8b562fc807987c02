"""Gemini AI client for Sahayak.

Sends rendered prompts to Gemini models (text, structured, image, speech, tool
calling) and normalizes responses into GenerationResult.
"""

import asyncio
import base64
import json
from typing import Any, Dict, List, Optional, Sequence, Type, Union

from pydantic import BaseModel

from sahayak.config import Config
from sahayak.core.errors import GenerationError
from sahayak.core.logging import logger
from sahayak.core.prompts import MediaPart, RenderedPrompt
from sahayak.core.schema import json_schema, schema_hint
from sahayak.core.tools.definitions import ToolDefinition
from sahayak.models.generation import GenerationResult, Modality, ToolCall, Turn
from sahayak.utils.data_uri import to_data_uri

STRUCTURED_WITH_TOOLS_INSTRUCTION = (
    "When you have finished calling tools, reply with ONLY a JSON object "
    "(no markdown, no commentary) that conforms to this JSON schema:\n{schema}"
)


class GeminiClient:
    """Gemini generation client.

    Singleton-like pattern to avoid recreating clients. The underlying SDK is
    synchronous, so every call runs in a worker thread.
    """

    _instance: Optional['GeminiClient'] = None
    _lock = asyncio.Lock()

    def __init__(self, api_key: Optional[str] = None):
        """Initialize Gemini client.

        Args:
            api_key: Optional API key. If not provided, reads from environment.

        Raises:
            GenerationError: If API key not found in environment
        """
        if api_key is None:
            api_key = Config.gemini_api_key()

        if not api_key:
            raise GenerationError(
                "Gemini API key required. Set GOOGLE_GENERATIVE_AI_API_KEY or GEMINI_API_KEY environment variable."
            )

        self.api_key = api_key
        self.safety_settings = [
            {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_ONLY_HIGH"},
            {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_ONLY_HIGH"},
            {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "threshold": "BLOCK_ONLY_HIGH"},
            {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "threshold": "BLOCK_ONLY_HIGH"}
        ]
        self._init_genai()

    def _init_genai(self) -> None:
        """Initialize Google GenAI client.

        Raises:
            GenerationError: If Gemini client initialization fails
        """
        try:
            from google import genai
            from google.genai import types
            self.client = genai.Client(api_key=self.api_key)
            self.types = types
        except Exception as e:
            raise GenerationError(f"Failed to initialize Gemini client: {str(e)}", cause=e)

    @classmethod
    async def get_instance(cls, api_key: Optional[str] = None) -> 'GeminiClient':
        """Get or create singleton instance with lazy API key loading."""
        async with cls._lock:
            if cls._instance is None:
                cls._instance = cls(api_key)
            return cls._instance

    async def generate(
        self,
        prompt: Union[RenderedPrompt, str],
        *,
        model: Optional[str] = None,
        output_schema: Optional[Type[BaseModel]] = None,
        tools: Optional[Sequence[ToolDefinition]] = None,
        modalities: Optional[Sequence[Modality]] = None,
        voice: Optional[str] = None,
        history: Optional[Sequence[Turn]] = None,
        system_instruction: Optional[str] = None,
    ) -> GenerationResult:
        """Send one request to Gemini.

        Args:
            prompt: Rendered prompt (text and media parts) or plain text
            model: Model name (defaults to Config.text_model())
            output_schema: Shape of the structured answer, if one is expected
            tools: Tools the model may call in this turn
            modalities: Requested response modalities (e.g. TEXT + IMAGE)
            voice: Prebuilt voice name for speech output
            history: Earlier tool-call turns of this conversation
            system_instruction: Optional system instruction

        Returns:
            GenerationResult with text, structured data, media, and tool calls

        Raises:
            GenerationError: If the request fails or the model returns no candidates
        """
        if isinstance(prompt, str):
            prompt = RenderedPrompt.from_text(prompt)

        model_name = model or Config.text_model()
        contents = self._build_contents(prompt, history or [])
        config = self._build_config(
            output_schema=output_schema,
            tools=tools,
            modalities=modalities,
            voice=voice,
            system_instruction=system_instruction,
        )

        try:
            response = await asyncio.to_thread(
                self.client.models.generate_content,
                model=model_name,
                contents=contents,
                config=config,
            )
        except Exception as e:
            logger.error("generation_failed", model=model_name, template=prompt.template_name, error=str(e))
            raise GenerationError(
                f"Gemini generation failed: {str(e)}",
                context={"model": model_name, "template": prompt.template_name},
                cause=e,
            ) from e

        result = self._parse_response(response, output_schema=output_schema, expects_tools=bool(tools))
        logger.info(
            "generation_completed",
            model=model_name,
            template=prompt.template_name,
            tool_calls=len(result.tool_calls),
            has_media=result.media is not None,
            finish_reason=result.finish_reason,
        )
        return result

    def _build_contents(self, prompt: RenderedPrompt, history: Sequence[Turn]) -> List[Any]:
        """Initial user turn followed by any tool-call history."""
        types = self.types

        parts = []
        for part in prompt.parts:
            if isinstance(part, MediaPart):
                parts.append(types.Part.from_bytes(data=part.data, mime_type=part.mime_type))
            else:
                parts.append(types.Part.from_text(text=part.text))
        contents = [types.Content(role="user", parts=parts)]

        for turn in history:
            if turn.role == "model":
                if turn.raw_content is not None:
                    contents.append(turn.raw_content)
                    continue
                contents.append(types.Content(
                    role="model",
                    parts=[
                        types.Part(function_call=types.FunctionCall(id=call.id, name=call.name, args=call.args))
                        for call in turn.tool_calls
                    ],
                ))
            else:
                contents.append(types.Content(
                    role="user",
                    parts=[
                        types.Part(function_response=types.FunctionResponse(
                            id=result.id, name=result.name, response=result.output
                        ))
                        for result in turn.tool_results
                    ],
                ))
        return contents

    def _build_config(
        self,
        output_schema: Optional[Type[BaseModel]],
        tools: Optional[Sequence[ToolDefinition]],
        modalities: Optional[Sequence[Modality]],
        voice: Optional[str],
        system_instruction: Optional[str],
    ) -> Any:
        types = self.types
        kwargs: Dict[str, Any] = {}
        instruction = system_instruction or ""

        if tools:
            kwargs["tools"] = [types.Tool(function_declarations=[
                types.FunctionDeclaration(
                    name=tool.name,
                    description=tool.description,
                    parameters_json_schema=tool.parameters_schema(),
                )
                for tool in tools
            ])]
            kwargs["automatic_function_calling"] = types.AutomaticFunctionCallingConfig(disable=True)
            # JSON mode cannot be combined with function calling
            if output_schema is not None:
                hint = STRUCTURED_WITH_TOOLS_INSTRUCTION.format(schema=schema_hint(output_schema))
                instruction = f"{instruction}\n\n{hint}" if instruction else hint
        elif output_schema is not None:
            kwargs["response_mime_type"] = "application/json"
            kwargs["response_json_schema"] = json_schema(output_schema)

        if modalities:
            kwargs["response_modalities"] = [Modality(m).value for m in modalities]
        else:
            kwargs["safety_settings"] = self.safety_settings

        if voice:
            kwargs["speech_config"] = types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice)
                )
            )

        if instruction:
            kwargs["system_instruction"] = instruction

        return types.GenerateContentConfig(**kwargs)

    def _parse_response(
        self,
        response: Any,
        output_schema: Optional[Type[BaseModel]],
        expects_tools: bool,
    ) -> GenerationResult:
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            feedback = getattr(response, "prompt_feedback", None)
            block_reason = getattr(feedback, "block_reason", None)
            raise GenerationError(
                "Gemini returned no candidates",
                context={"block_reason": str(block_reason) if block_reason else None},
            )

        candidate = candidates[0]
        content = getattr(candidate, "content", None)
        texts: List[str] = []
        tool_calls: List[ToolCall] = []
        media: Optional[str] = None
        media_mime_type: Optional[str] = None

        for part in getattr(content, "parts", None) or []:
            if getattr(part, "thought", False):
                continue

            function_call = getattr(part, "function_call", None)
            if function_call is not None:
                tool_calls.append(ToolCall(
                    name=function_call.name,
                    args=dict(function_call.args or {}),
                    id=getattr(function_call, "id", None),
                ))
                continue

            inline = getattr(part, "inline_data", None)
            if inline is not None and inline.data:
                raw = inline.data
                data = raw if isinstance(raw, bytes) else base64.b64decode(raw)
                media_mime_type = inline.mime_type or "application/octet-stream"
                media = to_data_uri(media_mime_type, data)
                continue

            if getattr(part, "text", None):
                texts.append(part.text)

        text = "".join(texts)
        data = None
        if output_schema is not None and not tool_calls:
            data = self._structured_payload(response, text)

        finish_reason = getattr(candidate, "finish_reason", None)
        return GenerationResult(
            text=text,
            data=data,
            media=media,
            media_mime_type=media_mime_type,
            tool_calls=tool_calls,
            finish_reason=getattr(finish_reason, "name", None) or (str(finish_reason) if finish_reason else None),
            raw_content=content if expects_tools else None,
        )

    @staticmethod
    def _structured_payload(response: Any, text: str) -> Optional[Dict[str, Any]]:
        """Structured answer from the SDK's parsed field, or the JSON object in the text."""
        parsed = getattr(response, "parsed", None)
        if isinstance(parsed, BaseModel):
            return parsed.model_dump(by_alias=True)
        if isinstance(parsed, dict):
            return parsed
        return extract_json_object(text)


def extract_json_object(text: str) -> Optional[Dict[str, Any]]:
    """Pull the outermost JSON object out of model text (tolerates markdown fences).

    Examples:
        >>> extract_json_object('```json\\n{"a": 1}\\n```')
        {'a': 1}
        >>> extract_json_object("no json here")
    """
    if not text:
        return None
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        value = json.loads(text[start:end + 1])
    except json.JSONDecodeError:
        return None
    return value if isinstance(value, dict) else None
