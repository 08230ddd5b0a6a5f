"""Test field validation and normalization."""
import pytest

from hospital_forms.core.errors import ValidationError
from hospital_forms.services.forms import APPOINTMENTS, CONTACT, HEALTH_PACKAGES
from hospital_forms.services.intake import validate_payload
from hospital_forms.utils.validation import is_valid_email, is_valid_phone, parse_age


@pytest.mark.parametrize("email", ["asha@example.com", "a.b+c@mail.example.co.in"])
def test_valid_emails_accepted(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["asha", "asha@example", "@example.com", "a sha@example.com"])
def test_invalid_emails_rejected(email):
    assert not is_valid_email(email)


def test_phone_must_be_exactly_ten_digits():
    assert is_valid_phone("9876543210")
    assert is_valid_phone(" 9876543210 ")
    assert not is_valid_phone("12345")
    assert not is_valid_phone("98765432101")
    assert not is_valid_phone("98765-43210")


@pytest.mark.parametrize("value,expected", [(34, 34), ("34", 34), (" 7 ", 7), (1, 1), (120, 120), (34.0, 34)])
def test_parse_age_accepts_integers_in_range(value, expected):
    assert parse_age(value) == expected


@pytest.mark.parametrize("value", [0, 121, -3, "abc", "3.5", 3.5, True, None])
def test_parse_age_rejects_out_of_range_or_non_integer(value):
    assert parse_age(value) is None


def test_missing_fields_are_all_reported_in_schema_order():
    """Every missing required field is named, not just the first one."""
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(APPOINTMENTS, {"name": "Asha", "email": "asha@example.com"})

    assert exc_info.value.fields == ["phone", "age", "gender", "department", "doctor", "date", "time"]
    assert "Missing required field(s)" in exc_info.value.message


def test_presence_check_runs_before_format_check():
    """A malformed email does not hide a missing field."""
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(CONTACT, {"name": "Ravi", "email": "not-an-email", "message": "Hi"})

    assert exc_info.value.fields == ["subject"]


def test_format_errors_name_offending_fields():
    payload = {"name": "Meera", "email": "meera@", "mobile": "12345", "date": "2025-04-12"}

    with pytest.raises(ValidationError) as exc_info:
        validate_payload(HEALTH_PACKAGES, payload)

    assert exc_info.value.fields == ["email", "mobile"]
    assert "10-digit mobile" in exc_info.value.message


def test_optional_phone_is_validated_when_present():
    payload = {"name": "Ravi", "email": "ravi@example.com", "subject": "Hi", "message": "Hello", "phone": "555"}

    with pytest.raises(ValidationError) as exc_info:
        validate_payload(CONTACT, payload)

    assert exc_info.value.fields == ["phone"]


def test_non_scalar_value_is_a_format_error():
    payload = {"name": {"first": "Ravi"}, "email": "ravi@example.com", "subject": "Hi", "message": "Hello"}

    with pytest.raises(ValidationError) as exc_info:
        validate_payload(CONTACT, payload)

    assert exc_info.value.fields == ["name"]


def test_normalization_trims_and_lowercases(inquiry_payload):
    clean = validate_payload(HEALTH_PACKAGES, inquiry_payload)

    assert clean["email"] == "meera.iyer@example.com"
    assert clean["mobile"] == "9123456780"
    assert clean["package_name"] == "Executive Health Check"


def test_absent_optional_fields_become_empty_strings(contact_payload):
    clean = validate_payload(CONTACT, contact_payload)

    assert clean["phone"] == ""
    assert clean["message"] == "Hello\nWhat are the visiting hours?"


def test_age_is_stored_as_int(appointment_payload):
    appointment_payload["age"] = "34"

    clean = validate_payload(APPOINTMENTS, appointment_payload)

    assert clean["age"] == 34


def test_phone_digits_must_be_ascii():
    """Arabic-Indic or Devanagari digits are not a phone number."""
    assert not is_valid_phone("٩" * 10)
    assert not is_valid_phone("९८७६५४३२१०")


@pytest.mark.parametrize("value", ["1" * 5000, "٣٤", "0034"])
def test_parse_age_rejects_long_or_non_ascii_strings(value):
    assert parse_age(value) is None


def test_non_ascii_mobile_is_a_format_error(inquiry_payload):
    inquiry_payload["mobile"] = "٩" * 10

    with pytest.raises(ValidationError) as exc_info:
        validate_payload(HEALTH_PACKAGES, inquiry_payload)

    assert exc_info.value.fields == ["mobile"]


def test_oversized_age_string_is_a_format_error(appointment_payload):
    appointment_payload["age"] = "1" * 5000

    with pytest.raises(ValidationError) as exc_info:
        validate_payload(APPOINTMENTS, appointment_payload)

    assert exc_info.value.fields == ["age"]
    assert "between 1 and 120" in exc_info.value.message


def test_blank_and_null_values_count_as_missing(contact_payload):
    contact_payload["subject"] = "   "
    contact_payload["message"] = None

    with pytest.raises(ValidationError) as exc_info:
        validate_payload(CONTACT, contact_payload)

    assert exc_info.value.fields == ["subject", "message"]


def test_numeric_text_values_are_kept_as_strings(contact_payload):
    contact_payload["subject"] = 42

    clean = validate_payload(CONTACT, contact_payload)

    assert clean["subject"] == "42"


def test_camel_case_package_name_is_reported_by_its_wire_name():
    payload = {"name": "Meera", "email": "meera@example.com", "mobile": "9123456780",
               "date": "2025-04-12", "packageName": ["Gold"]}

    with pytest.raises(ValidationError) as exc_info:
        validate_payload(HEALTH_PACKAGES, payload)

    assert exc_info.value.fields == ["packageName"]
    assert exc_info.value.message == "Please provide a valid packageName."
