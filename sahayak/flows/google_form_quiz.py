"""Google Form quiz flow.

Drives the model through createGoogleForm then addQuestionsToForm and returns
the public form URL. The caller's access token reaches the tools through
ToolContext and is never rendered into the prompt.
"""

from enum import Enum
from typing import Any, Dict, Optional

from sahayak.core.errors import ProtocolError
from sahayak.core.prompts import PromptTemplate, render
from sahayak.core.tools import ToolContext, ToolInvocationLoop, ToolSet
from sahayak.flows.base import Flow
from sahayak.models.flows import GoogleFormQuizInput, GoogleFormQuizOutput
from sahayak.models.generation import GenerationClient
from sahayak.tools import ADD_QUESTIONS_TO_FORM, CREATE_GOOGLE_FORM

PROMPT = PromptTemplate(
    name="createGoogleFormQuizPrompt",
    template="""Based on the following worksheet content, generate a 5-question multiple-choice quiz in {{{language}}}.
The quiz should be titled "Quiz".
For each question, provide 4 options.

Publish the quiz as a Google Form: first call 'createGoogleForm' with the quiz title, then call 'addQuestionsToForm' with the returned formId and all of the questions.

Worksheet Content:
{{{worksheetContent}}}
""",
)


class FormTool(str, Enum):
    CREATE_FORM = "createGoogleForm"
    ADD_QUESTIONS = "addQuestionsToForm"


def form_tools() -> ToolSet:
    return ToolSet(
        FormTool,
        {
            FormTool.CREATE_FORM: CREATE_GOOGLE_FORM,
            FormTool.ADD_QUESTIONS: ADD_QUESTIONS_TO_FORM,
        },
    )


class GoogleFormQuizFlow(Flow):
    name = "google-form-quiz"
    description = "Publish a multiple-choice quiz built from worksheet content as a Google Form."
    input_model = GoogleFormQuizInput
    output_model = GoogleFormQuizOutput

    def __init__(
        self,
        client: Optional[GenerationClient] = None,
        tools: Optional[ToolSet] = None,
        max_turns: Optional[int] = None,
    ):
        super().__init__(client)
        self.tools = tools or form_tools()
        self.max_turns = max_turns

    def prompt_fields(self, data: GoogleFormQuizInput) -> Dict[str, Any]:
        return data.model_dump(exclude={"accessToken"})

    async def execute(self, data: GoogleFormQuizInput) -> Dict[str, Any]:
        loop = ToolInvocationLoop(await self.get_client(), self.tools, max_turns=self.max_turns)
        outcome = await loop.run(
            render(PROMPT, self.prompt_fields(data)),
            context=ToolContext(access_token=data.accessToken),
        )

        created = outcome.output_of(FormTool.CREATE_FORM.value)
        if not created.formUrl:
            raise ProtocolError(
                "createGoogleForm returned no form URL",
                context={"formId": created.formId},
            )
        return {"formUrl": created.formUrl}
