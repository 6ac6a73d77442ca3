"""
Async client for the remote applications backend.
Every admin call takes the AdminSession explicitly; the client itself holds no credentials.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from schemas.application import ApplicationRecord
from services.session import AdminSession

logger = logging.getLogger(__name__)

APPLICATIONS_PATH = "/api/applications"
SUBMIT_PATH = "/application/formsubmit"


class BackendError(Exception):
    """Request reached the backend (or tried to) and did not succeed."""

    def __init__(self, message: str, status_code: Optional[int] = None, data: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.data = data


class SessionExpired(BackendError):
    """Backend answered 401 to an authenticated call."""


class BackendUnavailable(BackendError):
    """Transport failure or a body that is not valid JSON."""


def _json(r: httpx.Response) -> Any:
    try:
        return r.json()
    except ValueError as e:
        raise BackendUnavailable("Invalid JSON from backend", status_code=r.status_code) from e


class BackendClient:
    def __init__(self, http: httpx.AsyncClient, login_path: str = "/api/admin/login"):
        self.http = http
        self.login_path = login_path

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self.http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise BackendUnavailable(str(e)) from e

    async def _authed(self, session: AdminSession, method: str, path: str) -> httpx.Response:
        return await self._request(method, path, headers=session.auth_headers())

    async def submit_application(self, payload: dict[str, Any]) -> dict[str, Any]:
        r = await self._request("POST", SUBMIT_PATH, json=payload)
        data = _json(r)
        if not r.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            logger.warning("Submission rejected: %s %s", r.status_code, message)
            raise BackendError(message or "Unable to submit application", status_code=r.status_code, data=data)
        return data if isinstance(data, dict) else {"data": data}

    async def login(self, username: str, password: str) -> str:
        r = await self._request("POST", self.login_path, json={"username": username, "password": password})
        data = _json(r)
        token = data.get("token") if isinstance(data, dict) else None
        if not r.is_success or not token:
            message = data.get("message") if isinstance(data, dict) else None
            raise BackendError(message or "Invalid credentials", status_code=r.status_code)
        return token

    async def list_applications(self, session: AdminSession) -> list[ApplicationRecord]:
        r = await self._authed(session, "GET", APPLICATIONS_PATH)
        if r.status_code == 401:
            raise SessionExpired("Session expired", status_code=401)
        if not r.is_success:
            logger.warning("List applications returned %s", r.status_code)
            raise BackendError("Failed to load applications", status_code=r.status_code)
        data = _json(r)
        if not isinstance(data, list):
            raise BackendError("Failed to load applications", status_code=r.status_code)
        records: list[ApplicationRecord] = []
        for item in data:
            try:
                records.append(ApplicationRecord.model_validate(item))
            except ValidationError as e:
                # One malformed row should not hide the rest of the list
                logger.warning("Skipping unreadable application row: %s", e)
        return records

    async def delete_application(self, session: AdminSession, app_id: str) -> None:
        r = await self._authed(session, "DELETE", f"{APPLICATIONS_PATH}/{app_id}")
        if not r.is_success:
            logger.warning("Delete %s returned %s", app_id, r.status_code)
            raise BackendError("Failed to delete", status_code=r.status_code)
        logger.info("Deleted application %s", app_id)

    async def fetch_application_pdf(self, session: AdminSession, app_id: str) -> bytes:
        r = await self._authed(session, "GET", f"{APPLICATIONS_PATH}/{app_id}/pdf")
        if not r.is_success:
            logger.warning("PDF for %s returned %s", app_id, r.status_code)
            raise BackendError("Failed to download PDF", status_code=r.status_code)
        return r.content


def pdf_filename(app_id: str) -> str:
    return f"application_{app_id}.pdf"
