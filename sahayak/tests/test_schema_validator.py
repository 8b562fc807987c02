"""Unit tests for schema validation."""

import pytest

from sahayak.core.errors import ValidationError
from sahayak.core.schema import json_schema, schema_hint, validate
from sahayak.models.flows import DifferentiatedMaterialsInput, LessonPlanOutput, LocalContentInput, QuizInput


class TestValidate:
    """Test validate() against flow shapes."""

    def test_valid_mapping_returns_model(self):
        """Test valid mapping returns a model."""
        data = validate(LocalContentInput, {"language": "Marathi", "request": "A story about soil types for farmers"})

        assert data.language == "Marathi"
        assert data.request == "A story about soil types for farmers"

    def test_accepts_json_string(self):
        """Test JSON string input."""
        data = validate(QuizInput, '{"topic": "photosynthesis", "numQuestions": 3, "accessToken": "tok"}')

        assert data.numQuestions == 3
        assert data.language == "English"

    def test_revalidates_model_instance(self):
        """Test model instances are revalidated."""
        original = validate(QuizInput, {"topic": "rivers", "numQuestions": 2, "accessToken": "tok"})

        assert validate(QuizInput, original) == original

    def test_missing_required_field_names_field(self):
        """Test missing required field."""
        with pytest.raises(ValidationError) as exc_info:
            validate(LocalContentInput, {"language": "Hindi"})

        assert exc_info.value.fields == ["request"]
        assert exc_info.value.errors[0]["rule"] == "missing"

    def test_length_constraint_violation(self):
        """Test length constraint violation."""
        with pytest.raises(ValidationError) as exc_info:
            validate(LocalContentInput, {"language": "Hindi", "request": "too short"})

        assert exc_info.value.errors[0]["field"] == "request"
        assert exc_info.value.errors[0]["rule"] == "string_too_short"

    def test_range_constraint_violation(self):
        """Test range constraint violation."""
        with pytest.raises(ValidationError) as exc_info:
            validate(QuizInput, {"topic": "rivers", "numQuestions": 11, "accessToken": "tok"})

        assert exc_info.value.fields == ["numQuestions"]
        assert "numQuestions" in exc_info.value.message

    def test_reports_every_offending_field(self):
        """Test every offending field is reported."""
        with pytest.raises(ValidationError) as exc_info:
            validate(QuizInput, {"topic": "ab", "numQuestions": 0})

        assert set(exc_info.value.fields) == {"topic", "numQuestions", "accessToken"}

    def test_nested_field_path_is_dotted(self):
        """Test nested field paths."""
        with pytest.raises(ValidationError) as exc_info:
            validate(LessonPlanOutput, {"lessonTitle": "Plants", "lessonPlan": [{"sectionTitle": "Intro"}]})

        assert "lessonPlan.0.durationMinutes" in exc_info.value.fields
        assert "lessonPlan.0.description" in exc_info.value.fields

    def test_enum_constraint_violation(self):
        """Test enum constraint violation."""
        plan = {
            "lessonTitle": "Plants",
            "lessonPlan": [{
                "sectionTitle": "Intro",
                "durationMinutes": 10,
                "description": "Watch a video",
                "resources": [{"title": "x", "url": "https://example.com", "type": "podcast"}],
            }],
        }

        with pytest.raises(ValidationError) as exc_info:
            validate(LessonPlanOutput, plan)

        assert exc_info.value.fields == ["lessonPlan.0.resources.0.type"]

    def test_resource_url_must_be_http_url(self):
        """Test that a lesson resource with a non-URL link fails output validation."""
        plan = {
            "lessonTitle": "Plants",
            "lessonPlan": [{
                "sectionTitle": "Intro",
                "durationMinutes": 10,
                "description": "Watch a video",
                "resources": [{"title": "x", "url": "see the video above", "type": "video"}],
            }],
        }

        with pytest.raises(ValidationError) as exc_info:
            validate(LessonPlanOutput, plan)

        assert exc_info.value.fields == ["lessonPlan.0.resources.0.url"]

    def test_resource_url_kept_as_given(self):
        """Test that a valid resource URL is returned as the original string."""
        url = "https://www.youtube.com/watch?v=D1Ymc31__xM"
        plan = validate(LessonPlanOutput, {
            "lessonTitle": "Plants",
            "lessonPlan": [{
                "sectionTitle": "Intro",
                "durationMinutes": 10,
                "description": "Watch a video",
                "resources": [{"title": "Video", "url": url, "type": "video"}],
            }],
        })

        assert plan.model_dump(mode="json")["lessonPlan"][0]["resources"][0]["url"] == url

    def test_error_dict_lists_errors(self):
        """Test error serialization."""
        with pytest.raises(ValidationError) as exc_info:
            validate(LocalContentInput, {})

        payload = exc_info.value.to_dict()
        assert payload["success"] is False
        assert payload["error_type"] == "ValidationError"
        assert {e["field"] for e in payload["errors"]} == {"language", "request"}


class TestGradeLevels:
    """Test grade-level normalization on differentiated materials input."""

    def test_comma_separated_string_is_split(self, png_data_uri):
        """Test comma-separated grades are split."""
        data = validate(DifferentiatedMaterialsInput, {"documentContent": png_data_uri, "gradeLevels": "Grade 2, Grade 4"})

        assert data.gradeLevels == ["Grade 2", "Grade 4"]

    def test_empty_grade_list_rejected(self, png_data_uri):
        """Test empty grade list."""
        with pytest.raises(ValidationError) as exc_info:
            validate(DifferentiatedMaterialsInput, {"documentContent": png_data_uri, "gradeLevels": []})

        assert exc_info.value.fields == ["gradeLevels"]

    def test_blank_grade_string_rejected(self, png_data_uri):
        """Test blank grade string."""
        with pytest.raises(ValidationError) as exc_info:
            validate(DifferentiatedMaterialsInput, {"documentContent": png_data_uri, "gradeLevels": " , "})

        assert exc_info.value.fields == ["gradeLevels"]

    def test_document_must_be_data_uri(self):
        """Test document must be a data URI."""
        with pytest.raises(ValidationError) as exc_info:
            validate(DifferentiatedMaterialsInput, {"documentContent": "just text", "gradeLevels": ["3"]})

        assert exc_info.value.fields == ["documentContent"]


class TestSchemaHelpers:
    """Test JSON schema helpers."""

    def test_json_schema_lists_required_fields(self):
        """Test JSON schema required fields."""
        schema = json_schema(LocalContentInput)

        assert set(schema["required"]) == {"language", "request"}

    def test_schema_hint_is_stable(self):
        """Test schema hint is stable."""
        assert schema_hint(LessonPlanOutput) == schema_hint(LessonPlanOutput)
        assert '"lessonTitle"' in schema_hint(LessonPlanOutput)
