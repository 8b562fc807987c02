"""Quiz flow.

Writes quiz text on a topic, then hands it to the Google Form quiz flow for publishing.
"""

from typing import Any, Dict, Optional

from sahayak.core.prompts import PromptTemplate
from sahayak.core.tools import ToolSet
from sahayak.flows.base import Flow
from sahayak.flows.google_form_quiz import GoogleFormQuizFlow
from sahayak.models.flows import QuizContent, QuizInput, QuizOutput
from sahayak.models.generation import GenerationClient

PROMPT = PromptTemplate(
    name="generateQuizPrompt",
    template="""You are an expert quiz creator for educational purposes.
Generate a multiple-choice quiz in {{{language}}} about the following topic: {{{topic}}}.
The quiz should have exactly {{{numQuestions}}} questions.
For each question, provide 4 options.
The quiz should be titled "Quiz on {{{topic}}}".

Return the entire quiz as a single string.
""",
)


class QuizFlow(Flow):
    name = "quiz"
    description = "Generate a topic quiz and publish it as a Google Form."
    input_model = QuizInput
    output_model = QuizOutput

    def __init__(
        self,
        client: Optional[GenerationClient] = None,
        form_tools: Optional[ToolSet] = None,
        max_turns: Optional[int] = None,
    ):
        super().__init__(client)
        self.form_tools = form_tools
        self.max_turns = max_turns

    def prompt_fields(self, data: QuizInput) -> Dict[str, Any]:
        return data.model_dump(exclude={"accessToken"})

    async def execute(self, data: QuizInput) -> Dict[str, Any]:
        quiz = await self.generate_structured(PROMPT, self.prompt_fields(data), QuizContent)

        publisher = GoogleFormQuizFlow(await self.get_client(), tools=self.form_tools, max_turns=self.max_turns)
        published = await publisher.run({
            "worksheetContent": quiz.quizContent,
            "language": data.language,
            "accessToken": data.accessToken,
        })
        return {"formUrl": published.formUrl, "quizContent": quiz.quizContent}
