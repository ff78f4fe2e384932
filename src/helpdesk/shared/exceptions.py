"""
Custom exceptions for the help desk core.
"""

from typing import Any


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Draft failed validation; details maps field name to message."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message, "VALIDATION_ERROR")
        self.details = details or {}


class SubmissionError(AppError):
    """The host submit handler failed."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message, "SUBMISSION_FAILED")
        self.cause = cause


class InvalidSortFieldError(AppError):
    """Requested sort column is not a sortable call attribute."""

    def __init__(self, field: Any, valid_fields: list[str]) -> None:
        super().__init__(
            f"Cannot sort by '{field}'. Sortable fields: {', '.join(valid_fields)}",
            "INVALID_SORT_FIELD",
        )
        self.field = field
        self.valid_fields = valid_fields


class CallNotFoundError(AppError):
    """Call not found."""

    def __init__(self, call_id: str) -> None:
        super().__init__(f"Call with ID {call_id} not found", "CALL_NOT_FOUND")
        self.call_id = call_id
