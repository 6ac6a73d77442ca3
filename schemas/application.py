from __future__ import annotations

from datetime import date, datetime
from typing import Any, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

Gender = Literal["male", "female", "other"]
LoanCategory = Literal["personal", "housing", "business", "vehicle-old", "vehicle-new", "other"]

GENDER_CHOICES: list[tuple[str, str]] = [
    ("male", "Male"),
    ("female", "Female"),
    ("other", "Other"),
]

LOAN_CATEGORY_CHOICES: list[tuple[str, str]] = [
    ("personal", "Personal Loan"),
    ("housing", "Housing Loan"),
    ("business", "Business Loan"),
    ("vehicle-old", "Vehicle Loan (Old)"),
    ("vehicle-new", "Vehicle Loan (New)"),
    ("other", "Other"),
]

# Wire order of the structured address parts
ADDRESS_FIELDS = ("doorNo", "houseName", "village", "district", "state", "pincode")

# Wire field names in form order; used for blank form defaults
FORM_FIELDS = (
    "name",
    "phoneNumber",
    "primaryContactNumber",
    "dateOfBirth",
    "gender",
    "loanCategory",
    "loanCategoryOther",
    *ADDRESS_FIELDS,
    "referralName1",
    "referralPhone1",
    "referralName2",
    "referralPhone2",
)


class ApplicationForm(BaseModel):
    """Intake form as typed by the applicant (structured address variant)."""

    name: str = Field(..., min_length=2)
    phone_number: str = Field(..., min_length=10, alias="phoneNumber")
    primary_contact_number: str = Field(..., min_length=10, alias="primaryContactNumber")
    date_of_birth: date = Field(..., alias="dateOfBirth")
    gender: Gender
    loan_category: LoanCategory = Field(..., alias="loanCategory")
    loan_category_other: Optional[str] = Field("", alias="loanCategoryOther")

    door_no: Optional[str] = Field("", alias="doorNo")
    house_name: Optional[str] = Field("", alias="houseName")
    village: str = Field(..., min_length=2)
    district: str = Field(..., min_length=2)
    state: str = Field(..., min_length=2)
    pincode: str = Field(..., min_length=5)

    referral_name1: str = Field(..., min_length=2, alias="referralName1")
    referral_phone1: str = Field(..., min_length=10, alias="referralPhone1")
    referral_name2: str = Field(..., min_length=2, alias="referralName2")
    referral_phone2: str = Field(..., min_length=10, alias="referralPhone2")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("date_of_birth", "gender", "loan_category", mode="before")
    @classmethod
    def _blank_is_missing(cls, v: Any) -> Any:
        # HTML selects and date inputs post "" when untouched
        if isinstance(v, str) and not v.strip():
            raise ValueError("Required")
        return v

    @field_validator("loan_category_other", "door_no", "house_name", mode="before")
    @classmethod
    def _none_to_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    def to_wire(self) -> dict[str, Any]:
        """Flat camelCase payload, dateOfBirth as ISO date."""
        return self.model_dump(mode="json", by_alias=True)


def _message(err: dict[str, Any]) -> str:
    kind = err.get("type", "")
    ctx = err.get("ctx") or {}
    if kind == "missing":
        return "Required"
    if kind == "string_too_short":
        return f"Must be at least {ctx.get('min_length')} characters"
    if kind == "literal_error":
        return "Select a valid option"
    if kind.startswith("date_"):
        return "Enter a valid date"
    if kind == "value_error":
        return str(ctx.get("error") or err.get("msg", "Invalid value"))
    return err.get("msg", "Invalid value")


def validate_application(data: dict[str, Any]) -> tuple[Optional[ApplicationForm], dict[str, str]]:
    """
    Validate a candidate form payload (wire keys).
    Returns (form, {}) when valid, otherwise (None, {field: message}) with the first error per field.
    """
    try:
        return ApplicationForm.model_validate(data), {}
    except ValidationError as e:
        errors: dict[str, str] = {}
        for err in e.errors():
            loc = err.get("loc") or ("__root__",)
            field = str(loc[0])
            errors.setdefault(field, _message(err))
        return None, errors


def blank_form() -> dict[str, str]:
    """Empty defaults for every form field."""
    return {f: "" for f in FORM_FIELDS}


class ApplicationRecord(BaseModel):
    """Application as returned by the backend list endpoint. Lenient: rows are displayed, not edited."""

    id: str = Field(..., validation_alias=AliasChoices("_id", "id"))
    name: str = ""
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    primary_contact_number: Optional[str] = Field(None, alias="primaryContactNumber")
    date_of_birth: Optional[str] = Field(None, alias="dateOfBirth")
    gender: Optional[str] = None
    loan_category: str = Field("", alias="loanCategory")
    loan_category_other: Optional[str] = Field(None, alias="loanCategoryOther")
    address: Optional[str] = None
    referral_name1: Optional[str] = Field(None, alias="referralName1")
    referral_phone1: Optional[str] = Field(None, alias="referralPhone1")
    referral_name2: Optional[str] = Field(None, alias="referralName2")
    referral_phone2: Optional[str] = Field(None, alias="referralPhone2")
    submitted_at: Optional[datetime] = Field(None, alias="submittedAt")

    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, v: Any) -> Any:
        if isinstance(v, dict) and "$oid" in v:
            return v["$oid"]
        return str(v) if v is not None else v

    @field_validator("name", "loan_category", mode="before")
    @classmethod
    def _null_to_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def _dob_to_str(cls, v: Any) -> Any:
        if v is None:
            return None
        return str(v)[:10]

    @field_validator("submitted_at", mode="before")
    @classmethod
    def _blank_timestamp(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def detail_rows(self) -> list[tuple[str, Optional[str]]]:
        """Label/value pairs for the detail panel, in display order."""
        return [
            ("Full Name", self.name),
            ("Phone Number", self.phone_number),
            ("Primary Contact", self.primary_contact_number),
            ("Gender", self.gender),
            ("DOB", self.date_of_birth),
            ("Loan Category", self.loan_category),
            ("Loan Category Other", self.loan_category_other),
            ("Address", self.address),
            ("Referral Name 1", self.referral_name1),
            ("Referral Phone 1", self.referral_phone1),
            ("Referral Name 2", self.referral_name2),
            ("Referral Phone 2", self.referral_phone2),
        ]

    def submitted_on(self, fmt: str) -> str:
        """Submission date in the server's local time zone."""
        return self.submitted_at.astimezone().strftime(fmt) if self.submitted_at else "-"


class SubmissionResult(BaseModel):
    ok: bool
    title: str
    message: str
    data: Optional[dict[str, Any]] = None
