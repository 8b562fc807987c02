"""Flow registry for Sahayak.

Centralizes all flow definitions with metadata for routing and documentation.
"""

from typing import Any, Dict, Optional

from sahayak.flows.base import Flow
from sahayak.flows.differentiated_materials import DifferentiatedMaterialsFlow
from sahayak.flows.google_form_quiz import GoogleFormQuizFlow
from sahayak.flows.interactive_story import InteractiveStoryFlow
from sahayak.flows.knowledge_base import KnowledgeBaseFlow
from sahayak.flows.lesson_plan import LessonPlanFlow
from sahayak.flows.local_content import LocalContentFlow
from sahayak.flows.quiz import QuizFlow
from sahayak.flows.visual_aids import VisualAidsFlow
from sahayak.models.generation import GenerationClient


FLOWS: Dict[str, Dict[str, Any]] = {
    # CONTENT FLOWS - single generation call, no tools
    "differentiated-materials": {
        "flow": DifferentiatedMaterialsFlow,
        "type": "content",
        "tag": "Worksheets",
        "doc": "Create one worksheet per grade level from a textbook page.\n\n- **documentContent**: Page as a base64 data URI\n- **gradeLevels**: List or comma-separated grades",
    },
    "local-content": {
        "flow": LocalContentFlow,
        "type": "content",
        "tag": "Local Content",
        "doc": "Generate culturally relevant content in a local language.\n\n- **language**: Target language\n- **request**: What to create (20-500 characters)",
    },
    "knowledge-base": {
        "flow": KnowledgeBaseFlow,
        "type": "content",
        "tag": "Knowledge Base",
        "doc": "Explain a student's question simply, with analogies.\n\n- **question**: The question (min 10 characters)\n- **localLanguage**: Language to answer in",
    },
    # MEDIA FLOWS - image or audio output
    "visual-aids": {
        "flow": VisualAidsFlow,
        "type": "media",
        "tag": "Visual Aids",
        "doc": "Design a drawing or chart for the blackboard.\n\n- **description**: What to draw\n- **subject**: School subject\n- **style**: e.g. Simple Line Drawing",
    },
    "interactive-story": {
        "flow": InteractiveStoryFlow,
        "type": "media",
        "tag": "Stories",
        "doc": "Generate the next narrated story segment.\n\n- **topic**: Story topic\n- **language**: Story language (default: English)\n- **previousContext**: Story so far (optional)\n- **studentSuggestion**: What happens next (optional)",
    },
    # TOOL FLOWS - model drives external tools
    "lesson-plan": {
        "flow": LessonPlanFlow,
        "type": "tools",
        "tag": "Lesson Planning",
        "doc": "Create a sectioned lesson plan with online resources.\n\n- **topic**: Lesson topic\n- **gradeLevel**: Student grade\n- **objectives**: Learning objectives",
    },
    "google-form-quiz": {
        "flow": GoogleFormQuizFlow,
        "type": "tools",
        "tag": "Quizzes",
        "doc": "Publish a quiz built from worksheet content as a Google Form.\n\n- **worksheetContent**: Source text\n- **language**: Quiz language (default: English)\n- **accessToken**: Google OAuth token",
    },
    "quiz": {
        "flow": QuizFlow,
        "type": "tools",
        "tag": "Quizzes",
        "doc": "Generate a topic quiz and publish it as a Google Form.\n\n- **topic**: Quiz topic\n- **numQuestions**: 1-10\n- **language**: Quiz language (default: English)\n- **accessToken**: Google OAuth token",
    },
}


def get_flows_registry() -> Dict[str, Dict[str, Any]]:
    """Get the complete flows registry."""
    return FLOWS


def create_flow(name: str, client: Optional[GenerationClient] = None) -> Flow:
    """Instantiate a registered flow.

    Raises:
        KeyError: If no flow is registered under name
    """
    return FLOWS[name]["flow"](client)
