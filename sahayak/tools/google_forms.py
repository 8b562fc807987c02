"""Google Forms tools.

createGoogleForm and addQuestionsToForm, called by the model during the quiz
flows. The bearer token arrives through ToolContext, never as a model argument.
"""

from typing import Any, Dict, List

from sahayak.core.tools import ToolContext, ToolDefinition
from sahayak.integrations.google import GoogleApiClient
from sahayak.models.tools import (
    AddQuestionsArgs,
    BatchUpdateResult,
    CreatedForm,
    CreateFormArgs,
    FormQuestion,
)


def build_question_requests(questions: List[FormQuestion]) -> List[Dict[str, Any]]:
    """One required multiple-choice createItem request per question, at consecutive indexes."""
    return [
        {
            "createItem": {
                "item": {
                    "title": question.title,
                    "questionItem": {
                        "question": {
                            "required": True,
                            "choiceQuestion": {
                                "type": "RADIO",
                                "options": [{"value": option} for option in question.options],
                            },
                        },
                    },
                },
                "location": {"index": index},
            }
        }
        for index, question in enumerate(questions)
    ]


def create_google_form(args: CreateFormArgs, context: ToolContext) -> Dict[str, Any]:
    """Create an empty form and return its id and public responder URL."""
    client = GoogleApiClient(context.require_access_token())
    form = client.create_form(args.title)
    return {"formId": form.get("formId"), "formUrl": form.get("responderUri")}


def add_questions_to_form(args: AddQuestionsArgs, context: ToolContext) -> Dict[str, Any]:
    """Batch-insert multiple-choice questions into an existing form."""
    client = GoogleApiClient(context.require_access_token())
    return client.batch_update_form(args.formId, build_question_requests(args.questions))


CREATE_GOOGLE_FORM = ToolDefinition(
    name="createGoogleForm",
    description="Creates a new Google Form with a given title and returns the form ID and URL.",
    input_model=CreateFormArgs,
    output_model=CreatedForm,
    handler=create_google_form,
)

ADD_QUESTIONS_TO_FORM = ToolDefinition(
    name="addQuestionsToForm",
    description="Adds a batch of questions to a Google Form. Requires the formId returned by createGoogleForm.",
    input_model=AddQuestionsArgs,
    output_model=BatchUpdateResult,
    handler=add_questions_to_form,
)
