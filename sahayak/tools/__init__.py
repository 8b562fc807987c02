"""Model-callable tools and Google Workspace helpers for Sahayak.

- resource_search: educational resource lookup for lesson planning
- google_forms: form creation and question insertion for quizzes
- google_classroom: course listing and announcements
"""

from sahayak.tools.google_forms import ADD_QUESTIONS_TO_FORM, CREATE_GOOGLE_FORM
from sahayak.tools.resource_search import SEARCH_EDUCATIONAL_RESOURCES

__all__ = [
    "ADD_QUESTIONS_TO_FORM",
    "CREATE_GOOGLE_FORM",
    "SEARCH_EDUCATIONAL_RESOURCES",
]
