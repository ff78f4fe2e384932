"""
Call list and call form core.
"""

from helpdesk.calls.form import CallForm, FormState
from helpdesk.calls.interface import (
    CallFormHost,
    CallTableHost,
    ClipboardItem,
    RowAction,
    RowEvent,
)
from helpdesk.calls.models import Call, CallPriority, CallStatus
from helpdesk.calls.schemas import CallDraft, CallSubmission, ValidationResult, validate_draft
from helpdesk.calls.table import (
    CallFilter,
    CallTable,
    Page,
    SortDirection,
    SortField,
    TableState,
    paginate,
    set_page,
    set_sort,
    sorted_view,
)

__all__ = [
    "Call",
    "CallDraft",
    "CallFilter",
    "CallForm",
    "CallFormHost",
    "CallPriority",
    "CallStatus",
    "CallSubmission",
    "CallTable",
    "CallTableHost",
    "ClipboardItem",
    "FormState",
    "Page",
    "RowAction",
    "RowEvent",
    "SortDirection",
    "SortField",
    "TableState",
    "ValidationResult",
    "paginate",
    "set_page",
    "set_sort",
    "sorted_view",
    "validate_draft",
]
