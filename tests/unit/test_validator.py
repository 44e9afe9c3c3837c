import pytest

from backend.core.exceptions import FieldValidationError, RequiredFieldMissingError
from backend.registration import SubmissionValidator


def test_all_present_fields_are_accepted_verbatim(catalog):
    validator = SubmissionValidator(catalog)

    result = validator.validate(["college", "year"], {"college": " X ", "year": "2", "extra": "ignored"}, None)

    assert result.accepted == {"college": " X ", "year": "2"}
    assert result.dropped == []


def test_missing_field_reports_first_only_by_default(catalog):
    validator = SubmissionValidator(catalog)

    with pytest.raises(RequiredFieldMissingError) as excinfo:
        validator.validate(["a", "b", "c"], {"a": "x"}, None)

    assert excinfo.value.fields == ["b"]
    assert excinfo.value.code == "REQUIRED_FIELD_MISSING"
    assert "b" in excinfo.value.message


def test_missing_fields_can_be_reported_together(catalog):
    validator = SubmissionValidator(catalog, report_all_missing=True)

    with pytest.raises(RequiredFieldMissingError) as excinfo:
        validator.validate(["a", "b", "c"], {"a": "x"}, None)

    assert excinfo.value.fields == ["b", "c"]


def test_immutable_field_without_stored_value_is_accepted(catalog):
    validator = SubmissionValidator(catalog)

    result = validator.validate(["prn"], {"prn": "123456"}, {"email": "ada@example.com"})

    assert result.accepted == {"prn": "123456"}


def test_immutable_field_with_stored_value_is_dropped(catalog):
    validator = SubmissionValidator(catalog)

    result = validator.validate(
        ["prn", "college"],
        {"prn": "999999", "college": "Y"},
        {"prn": "123456", "college": "X"},
    )

    assert result.accepted == {"college": "Y"}
    assert result.dropped == ["prn"]


def test_empty_stored_value_does_not_lock_field(catalog):
    validator = SubmissionValidator(catalog)

    result = validator.validate(["prn"], {"prn": "123456"}, {"prn": ""})

    assert result.accepted == {"prn": "123456"}


def test_all_fields_locked_yields_empty_acceptance(catalog):
    validator = SubmissionValidator(catalog)

    result = validator.validate(["prn"], {"prn": "000000"}, {"prn": "123456"})

    assert result.accepted == {}
    assert result.dropped == ["prn"]


def test_duplicate_required_names_are_processed_once(catalog):
    validator = SubmissionValidator(catalog)

    result = validator.validate(["college", "college"], {"college": "X"}, None)

    assert result.accepted == {"college": "X"}


def test_regex_not_enforced_by_default(catalog):
    validator = SubmissionValidator(catalog)

    result = validator.validate(["prn", "year"], {"prn": "not-a-number", "year": "9"}, None)

    assert result.accepted == {"prn": "not-a-number", "year": "9"}


def test_enforced_regex_rejects_bad_text(catalog):
    validator = SubmissionValidator(catalog, enforce_regex=True)

    with pytest.raises(FieldValidationError) as excinfo:
        validator.validate(["prn"], {"prn": "12ab"}, None)

    assert excinfo.value.field == "prn"


def test_enforced_options_reject_unknown_choice(catalog):
    validator = SubmissionValidator(catalog, enforce_regex=True)

    with pytest.raises(FieldValidationError) as excinfo:
        validator.validate(["year"], {"year": "9"}, None)

    assert excinfo.value.field == "year"


def test_enforced_default_regex_requires_non_empty_value(catalog):
    validator = SubmissionValidator(catalog, enforce_regex=True)

    with pytest.raises(FieldValidationError):
        validator.validate(["tshirtSize"], {"tshirtSize": ""}, None)


def test_needs_profile_only_when_an_immutable_field_is_required(catalog):
    validator = SubmissionValidator(catalog)

    assert validator.needs_profile(["college", "year"]) is False
    assert validator.needs_profile(["college", "prn"]) is True


def test_filter_writable_ignores_required_list(catalog):
    validator = SubmissionValidator(catalog)

    result = validator.filter_writable({"prn": "654321", "phone": "5551234567"}, {"prn": "123456"})

    assert result.accepted == {"phone": "5551234567"}
    assert result.dropped == ["prn"]
