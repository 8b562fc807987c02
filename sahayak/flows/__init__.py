"""Flow definitions for Sahayak.

Eight named pipelines, each an input → output transformation over the
generation client and, where needed, the tool invocation loop.
"""

from sahayak.flows.base import Flow
from sahayak.flows.differentiated_materials import DifferentiatedMaterialsFlow
from sahayak.flows.google_form_quiz import GoogleFormQuizFlow
from sahayak.flows.interactive_story import InteractiveStoryFlow
from sahayak.flows.knowledge_base import KnowledgeBaseFlow
from sahayak.flows.lesson_plan import LessonPlanFlow
from sahayak.flows.local_content import LocalContentFlow
from sahayak.flows.quiz import QuizFlow
from sahayak.flows.registry import FLOWS, create_flow, get_flows_registry
from sahayak.flows.visual_aids import VisualAidsFlow

__all__ = [
    "Flow",
    "DifferentiatedMaterialsFlow",
    "GoogleFormQuizFlow",
    "InteractiveStoryFlow",
    "KnowledgeBaseFlow",
    "LessonPlanFlow",
    "LocalContentFlow",
    "QuizFlow",
    "VisualAidsFlow",
    "FLOWS",
    "create_flow",
    "get_flows_registry",
]
