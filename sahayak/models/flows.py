"""Flow input and output models for Sahayak.

Field names follow the JSON contract each flow exposes to its caller.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from sahayak.models.tools import EducationalResource
from sahayak.utils.data_uri import require_data_uri


# Differentiated materials
class DifferentiatedMaterialsInput(BaseModel):
    """Input for differentiated-materials flow."""
    documentContent: str = Field(
        ...,
        description=(
            "A photo of a textbook page or document text, as a data URI that must include a MIME type "
            "and use Base64 encoding. Expected format: 'data:<mimetype>;base64,<encoded_data>'."
        ),
    )
    gradeLevels: List[str] = Field(
        ...,
        min_length=1,
        description="Grade levels to generate materials for (list or comma-separated string)",
    )

    @field_validator("documentContent")
    @classmethod
    def _require_data_uri(cls, value: str) -> str:
        return require_data_uri(value)

    @field_validator("gradeLevels", mode="before")
    @classmethod
    def _split_grade_levels(cls, value: Union[str, List[str]]) -> List[str]:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            return [str(grade).strip() for grade in value if str(grade).strip()]
        return value

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"documentContent": "data:image/png;base64,iVBORw0KGgo=", "gradeLevels": "Grade 2, Grade 4"}
            ]
        }
    }


class Worksheet(BaseModel):
    gradeLevel: str = Field(..., min_length=1, description="The grade level of the worksheet.")
    worksheetContent: str = Field(
        ..., min_length=1, description="The content of the worksheet for the specified grade level."
    )


class DifferentiatedMaterialsOutput(BaseModel):
    worksheets: List[Worksheet] = Field(
        ...,
        min_length=1,
        description="An array of worksheets, each tailored to a specific grade level.",
    )


# Local content
class LocalContentInput(BaseModel):
    """Input for local-content flow."""
    language: str = Field(..., min_length=1, description="The local language to generate content in.")
    request: str = Field(
        ...,
        min_length=20,
        max_length=500,
        description="The teacher's request (e.g., 'Create a story in Marathi about farmers to explain different soil types').",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"language": "Marathi", "request": "Create a story about farmers to explain different soil types"}
            ]
        }
    }


class LocalContentOutput(BaseModel):
    content: str = Field(..., min_length=1, description="The generated hyper-local content in the specified language.")


# Visual aids
class VisualAidsInput(BaseModel):
    """Input for visual-aids flow."""
    description: str = Field(..., min_length=1, description="The description of the visual aid to generate.")
    subject: str = Field(..., min_length=1, description="The subject (e.g., Biology, Physics).")
    style: str = Field(
        ..., min_length=1, description="The artistic style of the image (e.g., Simple Line Drawing, Photorealistic)."
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"description": "water cycle diagram", "subject": "Science", "style": "Simple Line Drawing"}
            ]
        }
    }


class VisualAidsOutput(BaseModel):
    image: str = Field(..., description="A data URI containing the generated image.")

    @field_validator("image")
    @classmethod
    def _require_data_uri(cls, value: str) -> str:
        return require_data_uri(value)


# Interactive story
class InteractiveStoryInput(BaseModel):
    """Input for interactive-story flow. Continuity is carried by the caller via previousContext."""
    topic: str = Field(..., min_length=3, description="The topic or theme for the story.")
    language: str = Field("English", min_length=2, description="The language for the story.")
    previousContext: Optional[str] = Field(None, description="The story context from previous turns.")
    studentSuggestion: Optional[str] = Field(
        None, description="A suggestion from a student on what should happen next."
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"topic": "A brave little sparrow", "language": "English"},
                {
                    "topic": "A brave little sparrow",
                    "language": "English",
                    "previousContext": "Once upon a time a sparrow lived by the river. What happens next?",
                    "studentSuggestion": "a dragon appears",
                },
            ]
        }
    }


class StorySegment(BaseModel):
    storySegment: str = Field(..., min_length=1, description="The next segment of the story.")


class InteractiveStoryOutput(StorySegment):
    audioDataUri: str = Field(..., description="A data URI containing the narrated audio of the story segment.")

    @field_validator("audioDataUri")
    @classmethod
    def _require_data_uri(cls, value: str) -> str:
        return require_data_uri(value)


# Lesson plan
class LessonPlanInput(BaseModel):
    """Input for lesson-plan flow."""
    topic: str = Field(..., min_length=3, description='The main topic for the lesson (e.g., "Photosynthesis").')
    gradeLevel: str = Field(..., min_length=1, description='The grade level for the students (e.g., "5th Grade").')
    objectives: str = Field(
        ...,
        min_length=10,
        description="A comma-separated list of learning objectives.",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "topic": "Photosynthesis",
                    "gradeLevel": "5th Grade",
                    "objectives": "Understand the role of sunlight, Explain the inputs and outputs",
                }
            ]
        }
    }


class LessonSection(BaseModel):
    sectionTitle: str = Field(..., min_length=1, description='Title of the lesson section (e.g., "Introduction").')
    durationMinutes: Union[int, float] = Field(..., ge=0, description="Estimated duration of this section in minutes.")
    description: str = Field(..., min_length=1, description="Activities or content for this section.")
    resources: Optional[List[EducationalResource]] = Field(
        None, description="A list of online resources for this section."
    )


class LessonPlanOutput(BaseModel):
    lessonTitle: str = Field(..., min_length=1)
    lessonPlan: List[LessonSection] = Field(..., min_length=1)


# Google Form quiz
class GoogleFormQuizInput(BaseModel):
    """Input for google-form-quiz flow. accessToken is handed to tools only, never to the model."""
    worksheetContent: str = Field(..., min_length=1, description="The text content of the worksheet to base the quiz on.")
    language: str = Field("English", min_length=1, description="The language for the quiz questions and options.")
    accessToken: str = Field(..., min_length=1, description="The user's Google OAuth access token.")


class GoogleFormQuizOutput(BaseModel):
    formUrl: str = Field(..., min_length=1, description="The URL of the created Google Form quiz.")


# Quiz
class QuizInput(BaseModel):
    """Input for quiz flow."""
    topic: str = Field(..., min_length=3, description="The topic for the quiz.")
    numQuestions: int = Field(..., ge=1, le=10, description="The number of questions to generate.")
    language: str = Field("English", min_length=2, description="The language for the quiz.")
    accessToken: str = Field(..., min_length=1, description="The user's Google OAuth access token.")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"topic": "photosynthesis", "numQuestions": 5, "language": "English", "accessToken": "ya29..."}
            ]
        }
    }


class QuizContent(BaseModel):
    quizContent: str = Field(
        ..., min_length=1, description="The full content of the quiz with questions and multiple choice options."
    )


class QuizOutput(BaseModel):
    formUrl: str = Field(..., min_length=1, description="The URL of the created Google Form quiz.")
    quizContent: str = Field(..., min_length=1, description="The raw text content of the generated quiz.")


# Knowledge base
class KnowledgeBaseInput(BaseModel):
    """Input for knowledge-base flow."""
    question: str = Field(..., min_length=10, description="The complex question from the student.")
    localLanguage: str = Field(..., min_length=2, description="The local language of the teacher and students.")

    model_config = {
        "json_schema_extra": {
            "examples": [{"question": "Why is the sky blue during the day?", "localLanguage": "Hindi"}]
        }
    }


class KnowledgeBaseOutput(BaseModel):
    explanation: str = Field(
        ...,
        min_length=1,
        description="A simple, accurate explanation in the local language, with easy-to-understand analogies.",
    )
