"""Differentiated materials flow.

Turns one textbook page (image or document data URI) into a worksheet per grade level.
"""

from typing import Any, Dict

from sahayak.core.prompts import PromptTemplate
from sahayak.flows.base import Flow
from sahayak.models.flows import DifferentiatedMaterialsInput, DifferentiatedMaterialsOutput

PROMPT = PromptTemplate(
    name="createDifferentiatedMaterialsPrompt",
    template="""You are an expert teacher specializing in creating differentiated learning materials for multi-grade classrooms.

You will use the provided document content (from a textbook page image, PDF, or DOCX) and the list of grade levels to generate tailored worksheets for each grade level.

Create worksheets that are appropriate for each grade level, with questions and activities that align with their learning level.

Document Content: {{media url=documentContent}}
Grade Levels: {{{gradeLevels}}}

Output the worksheets in JSON format. The JSON should be an array of objects, with each object containing the gradeLevel and the worksheetContent.
""",
)


class DifferentiatedMaterialsFlow(Flow):
    name = "differentiated-materials"
    description = "Generate one worksheet per grade level from a textbook page."
    input_model = DifferentiatedMaterialsInput
    output_model = DifferentiatedMaterialsOutput

    async def execute(self, data: DifferentiatedMaterialsInput) -> Dict[str, Any]:
        output = await self.generate_structured(PROMPT, self.prompt_fields(data), DifferentiatedMaterialsOutput)
        return output.model_dump()
