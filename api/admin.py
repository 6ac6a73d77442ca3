from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import RedirectResponse, Response

from api.deps import get_admin_session, get_backend
from api.rendering import render
from services.backend import (
    BackendClient,
    BackendError,
    BackendUnavailable,
    SessionExpired,
    pdf_filename,
)
from services.dashboard import DashboardState
from services.session import AdminSession
from utils.flash import flash

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

LOGIN_URL = "/admin/login"
MSG_APPLICATION_NOT_FOUND = "Application not found"


def _to_login() -> RedirectResponse:
    return RedirectResponse(LOGIN_URL, status_code=303)


def _dashboard_url(q: str = "", category: str = "", view: str = "") -> str:
    params = {k: v for k, v in (("q", q), ("category", category), ("view", view)) if v}
    return "/admin" + (f"?{urlencode(params)}" if params else "")


def _render_dashboard(request: Request, state: DashboardState, notifications: Optional[list] = None):
    return render(
        request,
        "admin/dashboard.html",
        {"state": state},
        notifications=notifications,
    )


async def _load(backend: BackendClient, session: AdminSession) -> DashboardState:
    """Fetch the list; SessionExpired propagates so callers can log out."""
    return DashboardState(await backend.list_applications(session))


@router.get("/login")
async def login_page(request: Request, session: AdminSession = Depends(get_admin_session)):
    if session.is_authenticated:
        return RedirectResponse("/admin", status_code=303)
    return render(request, "admin/login.html", {"username": ""})


@router.post("/login")
async def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    backend: BackendClient = Depends(get_backend),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        token = await backend.login(username, password)
    except BackendUnavailable:
        error = "Server not responding"
    except BackendError as e:
        error = e.message
    else:
        session.login(token)
        logger.info("Admin login")
        return RedirectResponse("/admin", status_code=303)
    return render(
        request,
        "admin/login.html",
        {"username": username},
        status_code=401,
        notifications=[{"title": "Login Failed", "message": error, "variant": "destructive"}],
    )


@router.post("/logout")
async def logout(request: Request, session: AdminSession = Depends(get_admin_session)):
    session.clear()
    flash(request.session, "Logged Out", "You have been logged out.")
    return _to_login()


@router.get("")
async def dashboard(
    request: Request,
    q: str = "",
    category: str = "",
    view: str = "",
    backend: BackendClient = Depends(get_backend),
    session: AdminSession = Depends(get_admin_session),
):
    if not session.is_authenticated:
        return _to_login()
    notifications = []
    try:
        state = await _load(backend, session)
    except SessionExpired:
        session.clear()
        return _to_login()
    except BackendError:
        state = DashboardState()
        notifications.append({"title": "Error", "message": "Failed to load applications", "variant": "destructive"})
    state.search_term = q
    state.category = category
    if view:
        selected = state.find(view)
        if selected is not None:
            state.view(selected)
    return _render_dashboard(request, state, notifications)


@router.get("/applications/{application_id}/delete")
async def confirm_delete(
    request: Request,
    application_id: str,
    q: str = "",
    category: str = "",
    backend: BackendClient = Depends(get_backend),
    session: AdminSession = Depends(get_admin_session),
):
    """First step of delete: ask for explicit confirmation."""
    if not session.is_authenticated:
        return _to_login()
    try:
        state = await _load(backend, session)
    except SessionExpired:
        session.clear()
        return _to_login()
    except BackendError:
        flash(request.session, "Error", "Failed to load applications", "destructive")
        return RedirectResponse(_dashboard_url(q, category), status_code=303)
    application = state.find(application_id)
    if application is None:
        raise HTTPException(status_code=404, detail=MSG_APPLICATION_NOT_FOUND)
    return render(
        request,
        "admin/confirm_delete.html",
        {"application": application, "q": q, "category": category},
    )


@router.post("/applications/{application_id}/delete")
async def delete_application(
    request: Request,
    application_id: str,
    confirm: str = Form("no"),
    q: str = Form(""),
    category: str = Form(""),
    backend: BackendClient = Depends(get_backend),
    session: AdminSession = Depends(get_admin_session),
):
    """Second step of delete: only an explicit "yes" issues the DELETE."""
    if not session.is_authenticated:
        return _to_login()
    if confirm != "yes":
        return RedirectResponse(_dashboard_url(q, category, view=application_id), status_code=303)

    try:
        await backend.delete_application(session, application_id)
    except BackendUnavailable:
        flash(request.session, "Error", "Server not responding", "destructive")
        return RedirectResponse(_dashboard_url(q, category, view=application_id), status_code=303)
    except BackendError:
        flash(request.session, "Error", "Failed to delete", "destructive")
        return RedirectResponse(_dashboard_url(q, category, view=application_id), status_code=303)

    # Redirect so a browser refresh does not repeat the DELETE; the detail view is closed
    flash(request.session, "Deleted", "Application removed.")
    return RedirectResponse(_dashboard_url(q, category), status_code=303)


@router.get("/applications/{application_id}/pdf")
async def download_pdf(
    request: Request,
    application_id: str,
    q: str = "",
    category: str = "",
    backend: BackendClient = Depends(get_backend),
    session: AdminSession = Depends(get_admin_session),
):
    if not session.is_authenticated:
        return _to_login()
    try:
        content = await backend.fetch_application_pdf(session, application_id)
    except BackendError:
        flash(request.session, "Error", "Failed to download PDF", "destructive")
        return RedirectResponse(_dashboard_url(q, category), status_code=303)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{pdf_filename(application_id)}"'},
    )
