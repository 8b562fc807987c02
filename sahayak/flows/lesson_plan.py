"""Lesson plan flow.

Tool-augmented: the model searches for educational resources, then writes a
sectioned lesson plan that weaves them in.
"""

from enum import Enum
from typing import Any, Dict, Optional

from sahayak.core.prompts import PromptTemplate, render
from sahayak.core.schema import validate
from sahayak.core.tools import ToolInvocationLoop, ToolSet
from sahayak.flows.base import Flow
from sahayak.models.flows import LessonPlanInput, LessonPlanOutput
from sahayak.models.generation import GenerationClient
from sahayak.tools import SEARCH_EDUCATIONAL_RESOURCES

PROMPT = PromptTemplate(
    name="lessonPlanPrompt",
    template="""You are an expert curriculum developer. Your task is to create a detailed lesson plan based on the provided topic, grade level, and objectives.

Topic: {{{topic}}}
Grade Level: {{{gradeLevel}}}
Learning Objectives: {{{objectives}}}

1.  First, use the 'searchEducationalResources' tool to find 2-3 relevant online resources (articles, videos, activities) for the given topic and grade level.
2.  Then, create a comprehensive lesson plan with a suitable title.
3.  The lesson plan should be divided into logical sections (e.g., Introduction, Direct Instruction, Guided Practice, Independent Activity, Assessment).
4.  For each section, provide a clear description and estimate the time required in minutes.
5.  Integrate the resources you found into the appropriate sections of the lesson plan. For instance, a video could be in the introduction, and an online article could be part of the guided practice.

Your final output must be a structured JSON object conforming to the output schema.
""",
)


class LessonPlanTool(str, Enum):
    SEARCH_RESOURCES = "searchEducationalResources"


def lesson_plan_tools() -> ToolSet:
    return ToolSet(LessonPlanTool, {LessonPlanTool.SEARCH_RESOURCES: SEARCH_EDUCATIONAL_RESOURCES})


class LessonPlanFlow(Flow):
    name = "lesson-plan"
    description = "Create a sectioned lesson plan with searched online resources."
    input_model = LessonPlanInput
    output_model = LessonPlanOutput

    def __init__(
        self,
        client: Optional[GenerationClient] = None,
        tools: Optional[ToolSet] = None,
        max_turns: Optional[int] = None,
    ):
        super().__init__(client)
        self.tools = tools or lesson_plan_tools()
        self.max_turns = max_turns

    async def execute(self, data: LessonPlanInput) -> Dict[str, Any]:
        loop = ToolInvocationLoop(await self.get_client(), self.tools, max_turns=self.max_turns)
        outcome = await loop.run(render(PROMPT, self.prompt_fields(data)), output_schema=LessonPlanOutput)

        # The plan must be grounded in a search, even if it found nothing
        outcome.output_of(LessonPlanTool.SEARCH_RESOURCES.value)

        plan = validate(LessonPlanOutput, outcome.final.require_data())
        return plan.model_dump(mode="json", exclude_none=True)
