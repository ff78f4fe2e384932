"""
Call draft and validation schema.

The draft is the mutable, not-yet-validated projection of a Call that the form
edits. CallSubmission is the pydantic schema a draft must satisfy before it
is handed to the host.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import TYPE_CHECKING, Any, Dict, List

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from helpdesk.calls.models import CallPriority

if TYPE_CHECKING:
    from helpdesk.calls.models import Call


# Message shown under each field when its rule fails
FIELD_MESSAGES: dict[str, str] = {
    "caller_name": "Caller name is required",
    "caller_email": "Please enter a valid email address",
    "caller_phone": "Please enter a valid phone number",
    "issue_description": "Please provide a detailed description",
    "priority": "Please select a valid priority",
    "status": "Please select a status",
    "issue_image": "Invalid image",
}

DRAFT_FIELDS = (
    "caller_name",
    "caller_email",
    "caller_phone",
    "issue_description",
    "priority",
    "status",
    "issue_image",
)


@dataclass
class CallDraft:
    """Form values while the user is editing; anything may be empty or invalid."""

    caller_name: str = ""
    caller_email: str = ""
    caller_phone: str = ""
    issue_description: str = ""
    priority: str = CallPriority.MEDIUM.value
    status: str = "new"
    issue_image: str | None = None

    @classmethod
    def from_call(cls, call: Call) -> CallDraft:
        """Prefill a draft from an existing call for editing."""
        return cls(
            caller_name=call.caller_name,
            caller_email=call.caller_email,
            caller_phone=call.caller_phone,
            issue_description=call.issue_description,
            priority=call.priority.value,
            status=call.status.value,
            issue_image=call.issue_image,
        )

    def copy(self) -> CallDraft:
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class CallSubmission(BaseModel):
    """Rules a draft must pass before submission."""

    caller_name: str = Field(..., min_length=2, description="Caller name")
    caller_email: EmailStr = Field(..., description="Caller email address")
    caller_phone: str = Field(..., min_length=10, description="Caller phone number")
    issue_description: str = Field(
        ...,
        min_length=10,
        description="Detailed description of the issue",
    )
    priority: CallPriority = Field(
        default=CallPriority.MEDIUM,
        description="Call priority",
    )
    status: str = Field(default="new", description="Call status (free-form)")
    issue_image: str | None = Field(default=None, description="Screenshot data URI")

    @field_validator("caller_email", mode="before")
    @classmethod
    def reject_display_name(cls, v: Any) -> Any:
        """Only a bare address is accepted, not the "Name <addr>" form."""
        if isinstance(v, str) and ("<" in v or ">" in v):
            raise ValueError("email must be a bare address")
        return v


@dataclass
class ValidationResult:
    """
    Outcome of validating a draft.

    - default is_valid=True
    - add_error() flips is_valid=False and appends {"field": ..., "message": ...}
    - errors property returns a COPY
    """

    is_valid: bool = True
    _errors: List[Dict[str, str]] = field(default_factory=list, repr=False)

    def add_error(self, field: str, message: str) -> None:
        self.is_valid = False
        self._errors.append({"field": field, "message": message})

    @property
    def errors(self) -> List[Dict[str, str]]:
        return list(self._errors)

    @property
    def field_errors(self) -> Dict[str, str]:
        """First message per field."""
        found: Dict[str, str] = {}
        for error in self._errors:
            found.setdefault(error["field"], error["message"])
        return found


def validate_draft(draft: CallDraft) -> ValidationResult:
    """Check a draft against CallSubmission, one message per failing field."""
    result = ValidationResult()
    try:
        CallSubmission.model_validate(draft.to_dict())
    except PydanticValidationError as exc:
        seen: set[str] = set()
        for error in exc.errors():
            name = str(error["loc"][0]) if error.get("loc") else "__root__"
            if name in seen:
                continue
            seen.add(name)
            result.add_error(name, FIELD_MESSAGES.get(name, error.get("msg", "Invalid value")))
    return result
