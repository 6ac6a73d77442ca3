from schemas.application import (
    ApplicationForm,
    ApplicationRecord,
    SubmissionResult,
    blank_form,
    validate_application,
)

__all__ = [
    "ApplicationForm",
    "ApplicationRecord",
    "SubmissionResult",
    "blank_form",
    "validate_application",
]
