"""Google Classroom routes for Sahayak API.

Lets a teacher pick a course and share generated content (quiz links, stories)
as an announcement. The OAuth token comes from the Authorization header.
"""

import asyncio

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from sahayak.api.dependencies import get_access_token
from sahayak.core.errors import ToolExecutionError
from sahayak.tools.google_classroom import list_active_courses, post_announcement

router = APIRouter(prefix="/classroom", tags=["Google Classroom"])


class AnnouncementRequest(BaseModel):
    """Request for posting an announcement to a course."""
    text: str = Field(..., min_length=1, description="Announcement text (e.g. a quiz link)")


@router.get("/courses")
async def get_courses(access_token: str = Depends(get_access_token)):
    """List the caller's active Google Classroom courses."""
    try:
        courses = await asyncio.to_thread(list_active_courses, access_token)
    except Exception as e:
        raise ToolExecutionError("listClassroomCourses", f"Failed to list courses: {e}", cause=e) from e
    return {"success": True, "courses": courses, "total": len(courses)}


@router.post("/courses/{course_id}/announcements")
async def create_announcement(
    course_id: str,
    request: AnnouncementRequest,
    access_token: str = Depends(get_access_token),
):
    """Post an announcement to a Google Classroom course."""
    try:
        announcement = await asyncio.to_thread(post_announcement, access_token, course_id, request.text)
    except Exception as e:
        raise ToolExecutionError("postClassroomAnnouncement", f"Failed to post announcement: {e}", cause=e) from e
    return {"success": True, "announcement": announcement}
