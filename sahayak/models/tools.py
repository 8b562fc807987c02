"""Argument and result models for model-callable tools."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

_HTTP_URL = TypeAdapter(HttpUrl)


class ResourceType(str, Enum):
    VIDEO = "video"
    ARTICLE = "article"
    ACTIVITY = "activity"


class EducationalResource(BaseModel):
    title: str
    url: str = Field(..., description="Absolute http(s) link to the resource.", json_schema_extra={"format": "uri"})
    type: ResourceType

    @field_validator("url")
    @classmethod
    def _require_http_url(cls, value: str) -> str:
        # Checked as a URL, kept as the caller-facing string
        try:
            _HTTP_URL.validate_python(value)
        except PydanticValidationError:
            raise ValueError("must be an absolute http(s) URL")
        return value


class ResourceSearchArgs(BaseModel):
    query: str = Field(..., description='The search query, e.g., "photosynthesis for 5th graders"')


class ResourceSearchResult(BaseModel):
    resources: List[EducationalResource] = Field(default_factory=list)


class CreateFormArgs(BaseModel):
    title: str = Field(..., min_length=1, description="The title of the Google Form.")


class CreatedForm(BaseModel):
    formId: str
    formUrl: Optional[str] = None


class FormQuestion(BaseModel):
    title: str = Field(..., min_length=1, description="The question text.")
    options: List[str] = Field(
        ..., min_length=1, description="An array of choices for the multiple-choice question."
    )


class AddQuestionsArgs(BaseModel):
    formId: str = Field(..., min_length=1, description="The ID returned by createGoogleForm.")
    questions: List[FormQuestion] = Field(..., min_length=1)


class BatchUpdateResult(BaseModel):
    """Forms batchUpdate response; fields are passed through untouched."""
    model_config = {"extra": "allow"}

    replies: List[Dict[str, Any]] = Field(default_factory=list)
