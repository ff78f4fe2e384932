"""
Row formatting for the call list: badges, truncated descriptions, dates.
"""

from dataclasses import dataclass
from datetime import datetime

from helpdesk.calls.models import Call, CallPriority, CallStatus
from helpdesk.config import get_settings


@dataclass(frozen=True)
class Badge:
    variant: str
    label: str


PRIORITY_BADGES: dict[CallPriority, Badge] = {
    CallPriority.LOW: Badge("outline", "Low"),
    CallPriority.MEDIUM: Badge("secondary", "Medium"),
    CallPriority.HIGH: Badge("default", "High"),
    CallPriority.CRITICAL: Badge("destructive", "Critical"),
}

STATUS_BADGES: dict[CallStatus, Badge] = {
    CallStatus.NEW: Badge("outline", "New"),
    CallStatus.OPEN: Badge("outline", "Open"),
    CallStatus.IN_PROGRESS: Badge("secondary", "In Progress"),
    CallStatus.ON_HOLD: Badge("secondary", "On Hold"),
    CallStatus.RESOLVED: Badge("default", "Resolved"),
    CallStatus.CLOSED: Badge("destructive", "Closed"),
}


def truncate_text(text: str, max_length: int) -> str:
    """Cut text to max_length characters and mark the cut with '...'."""
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}..."


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z'."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return None


def format_date(value: str) -> str:
    """Render a timestamp as e.g. 'Jun 15, 2023, 09:30 AM'.

    Unparseable values are shown as given.
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    return f"{parsed:%b} {parsed.day}, {parsed.year}, {parsed:%I:%M %p}"


@dataclass(frozen=True)
class CallRow:
    """Display values for one table row."""

    id: str
    caller_name: str
    description: str
    priority: Badge
    status: Badge
    date_created: str


def to_row(call: Call, preview_length: int | None = None) -> CallRow:
    if preview_length is None:
        preview_length = get_settings().description_preview_length
    return CallRow(
        id=call.id,
        caller_name=call.caller_name,
        description=truncate_text(call.issue_description, preview_length),
        priority=PRIORITY_BADGES[call.priority],
        status=STATUS_BADGES[call.status],
        date_created=format_date(call.date_created),
    )
