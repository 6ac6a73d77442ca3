from typing import Any, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from config import BASE_DIR, settings
from utils.flash import consume_flashes

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def render(
    request: Request,
    name: str,
    context: Optional[dict[str, Any]] = None,
    status_code: int = 200,
    notifications: Optional[list[dict[str, str]]] = None,
):
    """Render a page with settings and any pending notifications (queued flashes first)."""
    ctx: dict[str, Any] = {"settings": settings}
    ctx.update(context or {})
    ctx["notifications"] = consume_flashes(request.session) + list(notifications or [])
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)
