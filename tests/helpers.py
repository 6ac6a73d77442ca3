"""Shared fixtures for the test modules."""
from __future__ import annotations

from typing import Any

from schemas.application import ApplicationRecord


def valid_form_data(**overrides: Any) -> dict[str, Any]:
    data = {
        "name": "Ramesh Kumar",
        "phoneNumber": "9876543210",
        "primaryContactNumber": "9876543211",
        "dateOfBirth": "1990-04-12",
        "gender": "male",
        "loanCategory": "personal",
        "loanCategoryOther": "",
        "doorNo": "4",
        "houseName": "Sai Nilaya",
        "village": "Hosur",
        "district": "Bangalore Rural",
        "state": "Karnataka",
        "pincode": "560001",
        "referralName1": "Suresh",
        "referralPhone1": "9123456780",
        "referralName2": "Lakshmi",
        "referralPhone2": "9123456781",
    }
    data.update(overrides)
    return data


def record(app_id: str, name: str, loan_category: str, **extra: Any) -> ApplicationRecord:
    return ApplicationRecord.model_validate(
        {"_id": app_id, "name": name, "loanCategory": loan_category, **extra}
    )
