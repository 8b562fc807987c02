"""Google Classroom tools.

Lists a teacher's active courses and posts generated content as announcements.
"""

from typing import Any, Dict, List

from sahayak.integrations.google import GoogleApiClient


def list_active_courses(access_token: str) -> List[Dict[str, Any]]:
    """Active courses visible to the token's owner, reduced to id/name/section/link."""
    client = GoogleApiClient(access_token)
    courses = client.list_courses(course_states="ACTIVE").get("courses", [])
    return [
        {
            "id": course.get("id"),
            "name": course.get("name"),
            "section": course.get("section"),
            "alternateLink": course.get("alternateLink"),
        }
        for course in courses
    ]


def post_announcement(access_token: str, course_id: str, text: str) -> Dict[str, Any]:
    """Post text to a course stream as an announcement."""
    client = GoogleApiClient(access_token)
    return client.create_announcement(course_id, text)
