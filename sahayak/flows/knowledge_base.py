"""Instant knowledge base flow.

Explains a student's question simply, with analogies, in the local language.
"""

from typing import Any, Dict

from sahayak.core.prompts import PromptTemplate
from sahayak.flows.base import Flow
from sahayak.models.flows import KnowledgeBaseInput, KnowledgeBaseOutput

PROMPT = PromptTemplate(
    name="instantKnowledgeBasePrompt",
    template="""You are an expert in explaining complex topics in simple terms, using analogies that are easy to understand for students.

A student has asked the following question in their local language ({{{localLanguage}}}):
{{{question}}}

Provide a simple, accurate explanation in the same local language, using analogies to help them understand the concept. Focus on making it very simple to understand.

Explanation:""",
)


class KnowledgeBaseFlow(Flow):
    name = "knowledge-base"
    description = "Explain a complex student question simply, with analogies."
    input_model = KnowledgeBaseInput
    output_model = KnowledgeBaseOutput

    async def execute(self, data: KnowledgeBaseInput) -> Dict[str, Any]:
        output = await self.generate_structured(PROMPT, self.prompt_fields(data), KnowledgeBaseOutput)
        return output.model_dump()
