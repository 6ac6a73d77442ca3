from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from api.deps import get_backend
from api.rendering import render
from schemas.application import (
    GENDER_CHOICES,
    LOAN_CATEGORY_CHOICES,
    blank_form,
    validate_application,
)
from services.backend import BackendClient
from services.intake import submit_application
from utils.flash import flash

router = APIRouter(tags=["pages"])


async def _form_values(request: Request) -> dict[str, Any]:
    form = await request.form()
    values = blank_form()
    values.update({k: v for k, v in form.items() if isinstance(v, str)})
    return values


def _render_form(request: Request, values: dict[str, Any], errors: dict[str, str], **kwargs: Any):
    return render(
        request,
        "loan_form.html",
        {
            "values": values,
            "errors": errors,
            "genders": GENDER_CHOICES,
            "loan_categories": LOAN_CATEGORY_CHOICES,
        },
        **kwargs,
    )


@router.get("/")
async def index(request: Request):
    return render(request, "index.html")


@router.get("/loan-form")
async def loan_form(request: Request):
    return _render_form(request, blank_form(), {})


@router.post("/apply/validate")
async def validate_form(request: Request):
    """Field-level validation for the live form; re-run on every change."""
    values = await _form_values(request)
    _, errors = validate_application(values)
    return {"valid": not errors, "errors": errors}


@router.post("/loan-form")
async def submit_loan_form(request: Request, backend: BackendClient = Depends(get_backend)):
    values = await _form_values(request)
    form, errors = validate_application(values)
    if form is None:
        return _render_form(request, values, errors, status_code=422)

    result = await submit_application(backend, form)
    if not result.ok:
        # Keep what the user typed so they can correct and resubmit
        return _render_form(
            request,
            values,
            {},
            notifications=[{"title": result.title, "message": result.message, "variant": "destructive"}],
        )

    flash(request.session, result.title, result.message)
    return RedirectResponse("/thank-you", status_code=303)


@router.get("/thank-you")
async def thank_you(request: Request):
    return render(request, "thank_you.html")
