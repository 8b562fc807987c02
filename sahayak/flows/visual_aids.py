"""Visual aids flow.

Two stages: a text model turns the teacher's description into an image
instruction, then the image model draws it. Only the image is returned.
"""

from typing import Any, Dict

from sahayak.config import Config
from sahayak.core.prompts import PromptTemplate, RenderedPrompt, render
from sahayak.flows.base import Flow
from sahayak.models.flows import VisualAidsInput, VisualAidsOutput
from sahayak.models.generation import Modality

PROMPT = PromptTemplate(
    name="designVisualAidsPrompt",
    template="""You are an expert visual aid designer for educational purposes. Generate an accurate and clear image for a teacher.

Subject: {{{subject}}}
Style: {{{style}}}
Description: {{{description}}}

If the style is 'Simple Line Drawing' or 'Diagram/Chart', create an image that can be easily replicated on a blackboard.
For other styles, create a high-quality, illustrative image suitable for teaching.""",
)


class VisualAidsFlow(Flow):
    name = "visual-aids"
    description = "Design a blackboard-friendly drawing or chart from a description."
    input_model = VisualAidsInput
    output_model = VisualAidsOutput

    async def execute(self, data: VisualAidsInput) -> Dict[str, Any]:
        client = await self.get_client()

        instruction = await client.generate(render(PROMPT, self.prompt_fields(data)))
        image = await client.generate(
            RenderedPrompt.from_text(instruction.require_text(), template_name="designVisualAidsImage"),
            model=Config.image_model(),
            modalities=[Modality.TEXT, Modality.IMAGE],
        )
        return {"image": image.require_media()}
