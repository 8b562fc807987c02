"""Interactive story flow.

Each call produces the next short story segment plus its narration. The caller
keeps continuity by re-submitting the story so far as previousContext.
"""

from typing import Any, Dict

from sahayak.config import Config
from sahayak.core.prompts import PromptTemplate, RenderedPrompt
from sahayak.flows.base import Flow
from sahayak.models.flows import InteractiveStoryInput, InteractiveStoryOutput, StorySegment
from sahayak.models.generation import Modality
from sahayak.utils.audio import pcm_to_wav_data_uri
from sahayak.utils.data_uri import parse_data_uri

PROMPT = PromptTemplate(
    name="interactiveStoryPrompt",
    template="""You are a master storyteller for children. Create a short, engaging story segment in {{{language}}}.

Topic: {{{topic}}}

{{#if previousContext}}
This is the story so far:
"{{{previousContext}}}"

A student suggested this should happen next: "{{{studentSuggestion}}}"
Incorporate the student's suggestion into the next part of the story. Keep it simple and continue the narrative.
{{else}}
Start a new, simple story based on the topic. Keep the first part very short, about two or three sentences, and end with a question asking what should happen next.
{{/if}}

Your response should only be the next part of the story.
""",
)

WAV_MIME_TYPES = ("audio/wav", "audio/x-wav", "audio/wave")


class InteractiveStoryFlow(Flow):
    name = "interactive-story"
    description = "Generate the next narrated segment of a classroom story."
    input_model = InteractiveStoryInput
    output_model = InteractiveStoryOutput

    def prompt_fields(self, data: InteractiveStoryInput) -> Dict[str, Any]:
        fields = super().prompt_fields(data)
        if fields.get("studentSuggestion") is None:
            fields["studentSuggestion"] = ""
        return fields

    async def execute(self, data: InteractiveStoryInput) -> Dict[str, Any]:
        segment = await self.generate_structured(PROMPT, self.prompt_fields(data), StorySegment)
        audio = await self.narrate(segment.storySegment)
        return {"storySegment": segment.storySegment, "audioDataUri": audio}

    async def narrate(self, text: str) -> str:
        """Speak text with the configured voice and return a WAV data URI."""
        client = await self.get_client()
        result = await client.generate(
            RenderedPrompt.from_text(text, template_name="interactiveStoryNarration"),
            model=Config.tts_model(),
            modalities=[Modality.AUDIO],
            voice=Config.tts_voice(),
        )
        mime_type, audio = parse_data_uri(result.require_media())
        if mime_type in WAV_MIME_TYPES:
            return result.media
        return pcm_to_wav_data_uri(audio)
