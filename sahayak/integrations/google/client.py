"""Google Workspace REST client for Sahayak.

Thin bearer-token wrapper over the Google Forms and Classroom REST APIs.
Tokens are supplied per call and never stored beyond the client instance.
"""

from typing import Any, Dict, Optional

import requests

from sahayak.core.logging import logger

FORMS_API_BASE = "https://forms.googleapis.com/v1"
CLASSROOM_API_BASE = "https://classroom.googleapis.com/v1"
DEFAULT_TIMEOUT = 30


class GoogleApiError(Exception):
    """A Google REST call returned a non-2xx status."""

    def __init__(self, service: str, status_code: int, body: str = ""):
        self.service = service
        self.status_code = status_code
        self.body = body
        super().__init__(f"Google {service} API request failed with status {status_code}")


class GoogleApiClient:
    """Synchronous client for one caller's access token.

    Args:
        access_token: Google OAuth bearer token
        timeout: Per-request timeout in seconds
    """

    def __init__(self, access_token: str, timeout: int = DEFAULT_TIMEOUT):
        if not access_token:
            raise ValueError("Missing access token in flow state.")
        self._access_token = access_token
        self.timeout = timeout

    def request(
        self,
        service: str,
        method: str,
        url: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Send an authorized request and return the decoded JSON body.

        Raises:
            GoogleApiError: If the response status is not 2xx
        """
        response = requests.request(
            method,
            url,
            json=json,
            params=params,
            headers={
                "Authorization": f"Bearer {self._access_token}",
                "Content-Type": "application/json",
            },
            timeout=self.timeout,
        )

        if not 200 <= response.status_code < 300:
            logger.warning("google_api_error", service=service, status_code=response.status_code, body=response.text[:500])
            raise GoogleApiError(service, response.status_code, response.text)

        if not response.content:
            return {}
        return response.json()

    # Forms
    def create_form(self, title: str) -> Dict[str, Any]:
        return self.request("Forms", "POST", f"{FORMS_API_BASE}/forms", json={"info": {"title": title}})

    def batch_update_form(self, form_id: str, requests_: list) -> Dict[str, Any]:
        return self.request(
            "Forms", "POST", f"{FORMS_API_BASE}/forms/{form_id}:batchUpdate", json={"requests": requests_}
        )

    # Classroom
    def list_courses(self, course_states: str = "ACTIVE") -> Dict[str, Any]:
        return self.request(
            "Classroom", "GET", f"{CLASSROOM_API_BASE}/courses", params={"courseStates": course_states}
        )

    def create_announcement(self, course_id: str, text: str) -> Dict[str, Any]:
        return self.request(
            "Classroom", "POST", f"{CLASSROOM_API_BASE}/courses/{course_id}/announcements", json={"text": text}
        )
