"""
In-memory sample calls for development and demos.
"""

from helpdesk.calls.models import Call, CallPriority, CallStatus


def _call(
    call_id: str,
    name: str,
    description: str,
    priority: CallPriority,
    status: CallStatus,
    created: str,
) -> Call:
    slug = name.lower().replace(" ", ".")
    return Call(
        id=call_id,
        caller_name=name,
        caller_email=f"{slug}@example.com",
        caller_phone="555-010-" + call_id[-4:].replace("-", "0"),
        issue_description=description,
        priority=priority,
        status=status,
        date_created=created,
    )


SAMPLE_CALLS: tuple[Call, ...] = (
    _call(
        "CALL-001",
        "John Smith",
        'Unable to access email account. Getting "invalid credentials" error despite using correct password.',
        CallPriority.HIGH,
        CallStatus.OPEN,
        "2023-06-15T09:30:00Z",
    ),
    _call(
        "CALL-002",
        "Sarah Johnson",
        "Printer not connecting to network. Was working yesterday but now shows offline status.",
        CallPriority.MEDIUM,
        CallStatus.IN_PROGRESS,
        "2023-06-14T14:45:00Z",
    ),
    _call(
        "CALL-003",
        "Michael Brown",
        "New employee needs software installation and account setup.",
        CallPriority.LOW,
        CallStatus.OPEN,
        "2023-06-14T11:20:00Z",
    ),
    _call(
        "CALL-004",
        "Emily Davis",
        "Server down affecting entire accounting department. Urgent assistance required.",
        CallPriority.CRITICAL,
        CallStatus.IN_PROGRESS,
        "2023-06-15T08:15:00Z",
    ),
    _call(
        "CALL-005",
        "Robert Wilson",
        "Monitor displaying distorted colors after recent office move.",
        CallPriority.LOW,
        CallStatus.RESOLVED,
        "2023-06-13T16:30:00Z",
    ),
    _call(
        "CALL-006",
        "Jennifer Taylor",
        "Need assistance with Excel formula for quarterly report.",
        CallPriority.MEDIUM,
        CallStatus.CLOSED,
        "2023-06-12T13:45:00Z",
    ),
    _call(
        "CALL-007",
        "David Martinez",
        "VPN connection issues when working remotely. Cannot access internal resources.",
        CallPriority.HIGH,
        CallStatus.OPEN,
        "2023-06-15T10:05:00Z",
    ),
    _call(
        "CALL-008",
        "Lisa Anderson",
        "Need to restore files accidentally deleted from shared drive.",
        CallPriority.HIGH,
        CallStatus.RESOLVED,
        "2023-06-14T09:20:00Z",
    ),
    _call(
        "CALL-009",
        "James Thompson",
        "Laptop battery not charging, needs replacement.",
        CallPriority.MEDIUM,
        CallStatus.IN_PROGRESS,
        "2023-06-13T11:50:00Z",
    ),
    _call(
        "CALL-010",
        "Patricia Garcia",
        "Cannot access shared calendar after recent password change.",
        CallPriority.LOW,
        CallStatus.OPEN,
        "2023-06-14T15:30:00Z",
    ),
    _call(
        "CALL-011",
        "Thomas Wright",
        "Need to set up video conferencing for board meeting tomorrow.",
        CallPriority.HIGH,
        CallStatus.RESOLVED,
        "2023-06-13T14:15:00Z",
    ),
    _call(
        "CALL-012",
        "Nancy Lee",
        "Outlook calendar not syncing with mobile device.",
        CallPriority.MEDIUM,
        CallStatus.OPEN,
        "2023-06-15T11:40:00Z",
    ),
)
