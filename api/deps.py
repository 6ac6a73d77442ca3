from fastapi import Request

from services.backend import BackendClient
from services.session import AdminSession


def get_backend(request: Request) -> BackendClient:
    """Backend client created in the app lifespan."""
    return request.app.state.backend


def get_admin_session(request: Request) -> AdminSession:
    return AdminSession(request.session)
