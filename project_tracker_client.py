"""Project Tracker API client.

This module defines a small client wrapper around the Project Tracker
HTTP API.  It is meant for scripts, bots and other services that need
to read or update backlogs without speaking HTTP themselves.  The
client uses the ``requests`` library internally.

Every public method returns a tuple ``(data, error)``:

* on success ``data`` holds the ``data`` member of the response
  envelope and ``error`` is ``None``;
* on failure ``data`` is ``None`` (or an empty list for listings) and
  ``error`` is a dictionary with keys ``status_code`` and ``message``.
  ``status_code`` is ``None`` when the request never reached the
  server.

Example::

    api = ProjectTrackerAPI(base_url="http://localhost:8080")
    backlog, error = api.create_backlog("Q3", "Platform work")
    story, error = api.create_story(backlog["id"], "Login with SSO", effort_origin=5)
    api.update_story_status(story["id"], "IN_PROGRESS")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class ProjectTrackerAPI:
    """Client for interacting with the Project Tracker API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.  ``None`` leaves
                the timeout to the session.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request and unwrap the response envelope.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/backlogs``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            kwargs: Dict[str, Any] = {"json": json_body}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            response = self.session.request(method=method, url=url, **kwargs)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400 or not isinstance(payload, dict) or not payload.get("success"):
            message = ""
            if isinstance(payload, dict):
                message = payload.get("error") or ""
            if not message:
                message = response.text or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        return payload.get("data"), None

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Service information
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", "/health")

    def dashboard(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Return totals and status histograms for stories and subtasks."""
        return self._request("GET", "/api/dashboard")

    # ------------------------------------------------------------------
    # Backlogs
    # ------------------------------------------------------------------
    def list_backlogs(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        return self._list("/api/backlogs")

    def create_backlog(
        self, title: str, description: str = ""
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request(
            "POST", "/api/backlogs", json_body={"title": title, "description": description}
        )

    def get_backlog(self, backlog_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/api/backlogs/{backlog_id}")

    # ------------------------------------------------------------------
    # Stories
    # ------------------------------------------------------------------
    def list_stories(self, backlog_id: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Return the stories of a backlog.

        An unknown backlog yields an empty list without an error.
        """
        return self._list(f"/api/backlogs/{backlog_id}/stories")

    def create_story(
        self, backlog_id: str, title: str, **fields: Any
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a story.

        Args:
            backlog_id: Backlog the story belongs to.
            title: Story title.
            **fields: Optional ``description``, ``jira_url``,
                ``effort_origin``, ``pic``, ``plan_start`` and ``plan_end``
                (ISO strings for the dates).
        """
        body = {"backlog_id": backlog_id, "title": title, **fields}
        return self._request("POST", "/api/stories", json_body=body)

    def get_story(self, story_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/api/stories/{story_id}")

    def update_story_status(
        self, story_id: str, status: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("PUT", f"/api/stories/{story_id}/status", json_body={"status": status})

    # ------------------------------------------------------------------
    # Subtasks
    # ------------------------------------------------------------------
    def list_subtasks(self, story_id: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        return self._list(f"/api/stories/{story_id}/subtasks")

    def create_subtask(
        self, story_id: str, title: str, **fields: Any
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        body = {"story_id": story_id, "title": title, **fields}
        return self._request("POST", "/api/subtasks", json_body=body)

    def get_subtask(self, subtask_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/api/subtasks/{subtask_id}")

    def update_subtask_status(
        self, subtask_id: str, status: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("PUT", f"/api/subtasks/{subtask_id}/status", json_body={"status": status})
