"""
Tests for the intake form schema.
Run from project root: python -m pytest tests/test_validation.py -v
"""
import unittest
from datetime import date, datetime, timezone

from schemas.application import ApplicationRecord, blank_form, validate_application
from tests.helpers import valid_form_data


class TestValidateApplication(unittest.TestCase):
    def test_valid_form(self):
        """Complete payload -> normalized form, no errors."""
        form, errors = validate_application(valid_form_data())
        self.assertEqual(errors, {})
        self.assertIsNotNone(form)
        self.assertEqual(form.date_of_birth, date(1990, 4, 12))
        self.assertEqual(form.loan_category, "personal")

    def test_blank_form_reports_every_required_field(self):
        """Untouched form -> one message per required field, keyed by wire name."""
        form, errors = validate_application(blank_form())
        self.assertIsNone(form)
        for field in (
            "name",
            "phoneNumber",
            "primaryContactNumber",
            "dateOfBirth",
            "gender",
            "loanCategory",
            "village",
            "district",
            "state",
            "pincode",
            "referralName1",
            "referralPhone1",
            "referralName2",
            "referralPhone2",
        ):
            self.assertIn(field, errors)
        for optional in ("loanCategoryOther", "doorNo", "houseName"):
            self.assertNotIn(optional, errors)

    def test_minimum_lengths(self):
        form, errors = validate_application(
            valid_form_data(name="R", phoneNumber="98765", pincode="5600", referralName2="L")
        )
        self.assertIsNone(form)
        self.assertEqual(errors["name"], "Must be at least 2 characters")
        self.assertEqual(errors["phoneNumber"], "Must be at least 10 characters")
        self.assertEqual(errors["pincode"], "Must be at least 5 characters")
        self.assertEqual(errors["referralName2"], "Must be at least 2 characters")
        self.assertEqual(len(errors), 4)

    def test_missing_key_is_required(self):
        data = valid_form_data()
        del data["village"]
        _, errors = validate_application(data)
        self.assertEqual(errors, {"village": "Required"})

    def test_unknown_enum_values_rejected(self):
        _, errors = validate_application(valid_form_data(gender="unknown", loanCategory="gold"))
        self.assertEqual(errors["gender"], "Select a valid option")
        self.assertEqual(errors["loanCategory"], "Select a valid option")

    def test_bad_date(self):
        _, errors = validate_application(valid_form_data(dateOfBirth="12/04/1990x"))
        self.assertIn("dateOfBirth", errors)

    def test_other_category_text_has_no_constraint(self):
        """loanCategoryOther may be empty even when 'other' is selected."""
        form, errors = validate_application(valid_form_data(loanCategory="other", loanCategoryOther=""))
        self.assertEqual(errors, {})
        self.assertEqual(form.loan_category_other, "")

    def test_to_wire_is_camel_case(self):
        form, _ = validate_application(valid_form_data())
        wire = form.to_wire()
        self.assertEqual(wire["dateOfBirth"], "1990-04-12")
        self.assertEqual(wire["referralPhone2"], "9123456781")
        self.assertNotIn("date_of_birth", wire)


class TestApplicationRecord(unittest.TestCase):
    def test_accepts_mongo_style_id(self):
        rec = ApplicationRecord.model_validate({"_id": "abc123", "name": "Asha", "loanCategory": "housing"})
        self.assertEqual(rec.id, "abc123")
        self.assertEqual(rec.loan_category, "housing")

    def test_accepts_plain_id_and_submitted_at(self):
        rec = ApplicationRecord.model_validate(
            {"id": 7, "name": "Asha", "loanCategory": "housing", "submittedAt": "2024-05-01T10:00:00Z"}
        )
        self.assertEqual(rec.id, "7")
        self.assertEqual(rec.submitted_on("%d/%m/%Y"), "01/05/2024")

    def test_numbers_and_blank_timestamp_tolerated(self):
        rec = ApplicationRecord.model_validate(
            {"_id": "x", "name": "Asha", "phoneNumber": 9876543210, "referralPhone1": 9123456780, "submittedAt": "  "}
        )
        self.assertEqual(rec.phone_number, "9876543210")
        self.assertEqual(rec.referral_phone1, "9123456780")
        self.assertIsNone(rec.submitted_at)

    def test_submitted_on_uses_local_time(self):
        """Late-evening UTC submissions are shown on the local calendar day."""
        rec = ApplicationRecord.model_validate({"_id": "x", "name": "Asha", "submittedAt": "2024-05-01T23:30:00Z"})
        expected = datetime(2024, 5, 1, 23, 30, tzinfo=timezone.utc).astimezone().strftime("%d/%m/%Y")
        self.assertEqual(rec.submitted_on("%d/%m/%Y"), expected)

    def test_missing_fields_render_as_dash(self):
        rec = ApplicationRecord.model_validate({"_id": "x", "name": "Asha"})
        self.assertEqual(rec.submitted_on("%d/%m/%Y"), "-")
        rows = dict(rec.detail_rows())
        self.assertIsNone(rows["Loan Category Other"])
        self.assertEqual(rows["Full Name"], "Asha")


if __name__ == "__main__":
    unittest.main()
