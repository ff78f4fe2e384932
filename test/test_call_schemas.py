"""
Tests for call models, the draft and the validation schema.
"""

import pytest
from pydantic import ValidationError

from helpdesk.calls.models import Call, CallPriority, CallStatus
from helpdesk.calls.schemas import CallDraft, CallSubmission, ValidationResult, validate_draft


class TestCall:
    """Tests for the Call record."""

    def test_enum_values_parse(self) -> None:
        call = Call(
            id="CALL-100",
            caller_name="Ann",
            priority="critical",
            status="on-hold",
            date_created="2024-03-01T10:00:00Z",
        )
        assert call.priority is CallPriority.CRITICAL
        assert call.status is CallStatus.ON_HOLD
        assert call.issue_image is None

    @pytest.mark.parametrize("field, value", [("priority", "urgent"), ("status", "pending")])
    def test_unknown_enum_values_rejected(self, field, value) -> None:
        data = {
            "id": "CALL-100",
            "caller_name": "Ann",
            "date_created": "2024-03-01T10:00:00Z",
            field: value,
        }
        with pytest.raises(ValidationError):
            Call(**data)

    def test_call_is_immutable(self, sample_calls) -> None:
        with pytest.raises(ValidationError):
            sample_calls[0].caller_name = "Someone else"

    def test_empty_caller_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Call(id="CALL-1", caller_name="", date_created="2024-03-01T10:00:00Z")


class TestCallDraft:
    """Tests for the mutable draft."""

    def test_defaults(self) -> None:
        draft = CallDraft()
        assert draft.priority == "medium"
        assert draft.status == "new"
        assert draft.issue_image is None

    def test_from_call(self, sample_calls) -> None:
        draft = CallDraft.from_call(sample_calls[3])
        assert draft.caller_name == "Emily Davis"
        assert draft.priority == "critical"
        assert draft.status == "in-progress"

    def test_copy_is_independent(self) -> None:
        draft = CallDraft(caller_name="Ann")
        clone = draft.copy()
        clone.caller_name = "Bob"
        assert draft.caller_name == "Ann"


class TestValidateDraft:
    """Tests for draft validation rules."""

    def test_valid_draft(self, valid_draft) -> None:
        result = validate_draft(valid_draft)
        assert result.is_valid
        assert result.errors == []

    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("caller_name", "A", "Caller name is required"),
            ("caller_email", "a@", "Please enter a valid email address"),
            ("caller_email", "plainaddress", "Please enter a valid email address"),
            ("caller_email", "Al Smith <a@b.com>", "Please enter a valid email address"),
            ("caller_email", "<a@b.com>", "Please enter a valid email address"),
            ("caller_phone", "123456789", "Please enter a valid phone number"),
            ("issue_description", "too short", "Please provide a detailed description"),
            ("priority", "urgent", "Please select a valid priority"),
        ],
    )
    def test_field_rules(self, valid_draft, field, value, message) -> None:
        setattr(valid_draft, field, value)

        result = validate_draft(valid_draft)

        assert not result.is_valid
        assert result.field_errors == {field: message}

    @pytest.mark.parametrize(
        "field, value",
        [
            ("caller_name", "Al"),
            ("caller_phone", "1234567890"),
            ("issue_description", "0123456789"),
        ],
    )
    def test_boundary_lengths_pass(self, valid_draft, field, value) -> None:
        setattr(valid_draft, field, value)
        assert validate_draft(valid_draft).is_valid

    def test_submission_schema_defaults(self) -> None:
        submission = CallSubmission(
            caller_name="Al",
            caller_email="a@b.com",
            caller_phone="1234567890",
            issue_description="printer is broken today",
        )
        assert submission.priority is CallPriority.MEDIUM
        assert submission.status == "new"


class TestValidationResult:
    """Tests for the mutable validation result."""

    def test_add_error_flips_valid(self) -> None:
        result = ValidationResult()
        result.add_error("caller_name", "Caller name is required")
        assert result.is_valid is False

    def test_errors_returns_copy(self) -> None:
        result = ValidationResult()
        result.add_error("caller_name", "first")
        result.errors.clear()
        assert len(result.errors) == 1

    def test_field_errors_keeps_first_message(self) -> None:
        result = ValidationResult()
        result.add_error("caller_phone", "first")
        result.add_error("caller_phone", "second")
        assert result.field_errors == {"caller_phone": "first"}
