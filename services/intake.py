"""
Application intake: category substitution, address reshape, and the single submit call.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from schemas.application import ADDRESS_FIELDS, ApplicationForm, SubmissionResult
from services.backend import BackendClient, BackendError, BackendUnavailable

logger = logging.getLogger(__name__)

ADDRESS_LABELS = {
    "doorNo": "Door No",
    "houseName": "House",
    "village": "Village",
    "district": "District",
    "state": "State",
    "pincode": "Pincode",
}

MSG_SUBMITTED = "Your loan application was submitted successfully!"
MSG_SERVER_ERROR = "Something went wrong. Please try again later."


def format_address(parts: Mapping[str, Any]) -> str:
    """Join present address parts as 'Label: value' in fixed order; blanks are omitted."""
    out = []
    for key in ADDRESS_FIELDS:
        value = parts.get(key)
        if value is None or str(value) == "":
            continue
        out.append(f"{ADDRESS_LABELS[key]}: {value}")
    return ", ".join(out)


def reshape_address(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of payload with the structured address parts replaced by one 'address' string."""
    address = format_address(payload)
    out = {k: v for k, v in payload.items() if k not in ADDRESS_FIELDS}
    out["address"] = address
    return out


def apply_other_category(payload: Mapping[str, Any]) -> dict[str, Any]:
    out = dict(payload)
    other = out.get("loanCategoryOther")
    if out.get("loanCategory") == "other" and other and other.strip():
        out["loanCategory"] = other
    return out


def build_submission(form: ApplicationForm) -> dict[str, Any]:
    """Wire payload for a validated form. Category substitution runs before the reshape."""
    return reshape_address(apply_other_category(form.to_wire()))


async def submit_application(backend: BackendClient, form: ApplicationForm) -> SubmissionResult:
    payload = build_submission(form)
    try:
        data = await backend.submit_application(payload)
    except BackendUnavailable:
        return SubmissionResult(ok=False, title="Server Error", message=MSG_SERVER_ERROR)
    except BackendError as e:
        return SubmissionResult(ok=False, title="Submission Failed", message=e.message)
    logger.info("Application submitted (id=%s)", data.get("_id") or data.get("id"))
    return SubmissionResult(ok=True, title="Application Submitted", message=MSG_SUBMITTED, data=data)
