"""
Call record domain model.

A Call is immutable once created: edits produce a whole new record that the
host swaps in, deletes are delegated to the host.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CallPriority(str, Enum):
    """Call priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class CallStatus(str, Enum):
    """Call workflow status."""

    NEW = "new"
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    ON_HOLD = "on-hold"
    RESOLVED = "resolved"
    CLOSED = "closed"


class Call(BaseModel):
    """A support call as displayed in the call list."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Opaque identifier, unique within a collection",
    )
    caller_name: str = Field(
        ...,
        min_length=1,
        description="Name of the person who reported the issue",
    )
    caller_email: str = Field(
        default="",
        description="Caller email address",
    )
    caller_phone: str = Field(
        default="",
        description="Caller phone number",
    )
    issue_description: str = Field(
        default="",
        description="Free-text description of the problem",
    )
    priority: CallPriority = Field(
        default=CallPriority.MEDIUM,
        description="Call priority",
    )
    status: CallStatus = Field(
        default=CallStatus.NEW,
        description="Call status",
    )
    date_created: str = Field(
        ...,
        description="Creation timestamp as an ISO-8601 string",
    )
    issue_image: str | None = Field(
        default=None,
        description="Screenshot as a base64 data URI",
    )
