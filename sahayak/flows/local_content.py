"""Local content flow.

Generates hyper-local, culturally relevant content in the teacher's language.
"""

from typing import Any, Dict

from sahayak.core.prompts import PromptTemplate
from sahayak.flows.base import Flow
from sahayak.models.flows import LocalContentInput, LocalContentOutput

PROMPT = PromptTemplate(
    name="generateLocalContentPrompt",
    template="""You are an AI assistant designed to generate hyper-local content for teachers in their local language.

A teacher has requested the following content in {{{language}}}:
{{request}}

Generate culturally relevant and simple content based on the request.
Ensure that the content is appropriate for use in a multi-grade classroom setting.
Do not include any harmful or inappropriate content.
Respond in {{{language}}}.""",
)


class LocalContentFlow(Flow):
    name = "local-content"
    description = "Generate hyper-local content in a local language."
    input_model = LocalContentInput
    output_model = LocalContentOutput

    async def execute(self, data: LocalContentInput) -> Dict[str, Any]:
        output = await self.generate_structured(PROMPT, self.prompt_fields(data), LocalContentOutput)
        return output.model_dump()
