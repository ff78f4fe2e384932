"""
Call list sorting, filtering and pagination.

Table state is an explicit immutable value passed into pure functions; each
operation returns a new state. CallTable is a thin holder around that state
for hosts that prefer an object.

Sorting compares the raw attribute value. Priority and status therefore sort
alphabetically by their label ("critical" < "high" < "low" < "medium"), not
by severity or workflow order.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable, Sequence

from helpdesk.calls.interface import CallTableHost, RowAction, RowEvent
from helpdesk.calls.models import Call, CallPriority, CallStatus
from helpdesk.config import get_settings
from helpdesk.shared.exceptions import InvalidSortFieldError
from helpdesk.shared.logging import get_logger, log_with_context

logger = get_logger(__name__)


class SortField(str, Enum):
    """Call attributes the table can sort by."""

    ID = "id"
    CALLER_NAME = "caller_name"
    PRIORITY = "priority"
    STATUS = "status"
    DATE_CREATED = "date_created"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class CallFilter:
    """Narrows the list before sorting. The default filter matches everything."""

    search: str = ""
    priority: CallPriority | None = None
    status: CallStatus | None = None

    @property
    def is_empty(self) -> bool:
        return not self.search.strip() and self.priority is None and self.status is None

    def matches(self, call: Call) -> bool:
        if self.priority is not None and call.priority != self.priority:
            return False
        if self.status is not None and call.status != self.status:
            return False
        needle = self.search.strip().lower()
        if not needle:
            return True
        haystack = (call.id, call.caller_name, call.issue_description)
        return any(needle in value.lower() for value in haystack)


@dataclass(frozen=True)
class TableState:
    """Sort, page and filter state of one call table."""

    sort_field: SortField = SortField.DATE_CREATED
    sort_direction: SortDirection = SortDirection.DESC
    page: int = 1
    page_size: int = 10
    filter: CallFilter = field(default_factory=CallFilter)

    @classmethod
    def default(cls) -> "TableState":
        """Initial state using the configured page size."""
        return cls(page_size=get_settings().page_size)


@dataclass(frozen=True)
class Page:
    """One page of the call list plus everything the pager needs."""

    rows: tuple[Call, ...]
    page: int
    page_size: int
    total: int
    total_pages: int
    start: int
    end: int
    has_previous: bool
    has_next: bool
    page_numbers: tuple[int, ...] = ()
    show_ellipsis: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def summary(self) -> str:
        if self.total == 0:
            return "No calls found."
        return f"Showing {self.start} to {self.end} of {self.total} entries"


def coerce_sort_field(value: Any) -> SortField:
    """Accept a SortField or its string value."""
    if isinstance(value, SortField):
        return value
    try:
        return SortField(value)
    except ValueError:
        raise InvalidSortFieldError(value, [f.value for f in SortField]) from None


def set_sort(state: TableState, sort_field: Any) -> TableState:
    """Toggle direction on the active column, otherwise sort the new column ascending.

    The current page is kept as is, even if it no longer exists.
    """
    target = coerce_sort_field(sort_field)
    if target is state.sort_field:
        return replace(state, sort_direction=state.sort_direction.toggled())
    return replace(state, sort_field=target, sort_direction=SortDirection.ASC)


def set_page(state: TableState, page: int) -> TableState:
    """Move to a page. Bounds are enforced by the pager controls, not here."""
    return replace(state, page=page)


def set_filter(state: TableState, call_filter: CallFilter) -> TableState:
    """Apply a new filter and go back to the first page."""
    return replace(state, filter=call_filter, page=1)


def total_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if total else 0


def sort_key(call: Call, sort_field: SortField) -> Any:
    value = getattr(call, sort_field.value)
    if isinstance(value, Enum):
        return value.value
    return "" if value is None else value


def filter_calls(calls: Iterable[Call], call_filter: CallFilter) -> list[Call]:
    if call_filter.is_empty:
        return list(calls)
    return [call for call in calls if call_filter.matches(call)]


def sorted_view(state: TableState, calls: Iterable[Call]) -> list[Call]:
    """Stable sort of the calls by the active column; the input is left untouched."""
    return sorted(
        calls,
        key=lambda call: sort_key(call, state.sort_field),
        reverse=state.sort_direction is SortDirection.DESC,
    )


def page_window(page: int, pages: int, width: int = 5) -> tuple[tuple[int, ...], bool]:
    """Page numbers shown by the pager, centred on the current page when possible.

    Returns the numbers and whether a trailing ellipsis follows them.
    """
    if pages <= 0:
        return (), False
    half = width // 2
    if pages <= width:
        first = 1
    elif page <= half + 1:
        first = 1
    elif page >= pages - half:
        first = pages - width + 1
    else:
        first = page - half
    last = min(pages, first + width - 1)
    numbers = tuple(range(first, last + 1))
    return numbers, pages > width and page < pages - half


def paginate(state: TableState, calls: Sequence[Call], width: int | None = None) -> Page:
    """Filter, sort and slice the collection for the current page."""
    if width is None:
        width = get_settings().page_window

    visible = sorted_view(state, filter_calls(calls, state.filter))
    total = len(visible)
    pages = total_pages(total, state.page_size)

    offset = (state.page - 1) * state.page_size
    rows = tuple(visible[offset:offset + state.page_size]) if offset >= 0 else ()
    numbers, ellipsis = page_window(state.page, pages, width)

    return Page(
        rows=rows,
        page=state.page,
        page_size=state.page_size,
        total=total,
        total_pages=pages,
        start=offset + 1 if rows else 0,
        end=offset + len(rows) if rows else 0,
        has_previous=state.page > 1,
        has_next=state.page < pages,
        page_numbers=numbers,
        show_ellipsis=ellipsis,
    )


class CallTable:
    """Holds one table's state and forwards row activations to the host."""

    def __init__(
        self,
        calls: Sequence[Call] = (),
        host: CallTableHost | None = None,
        state: TableState | None = None,
    ) -> None:
        self._calls: tuple[Call, ...] = tuple(calls)
        self._host = host
        self._state = state or TableState.default()

    @property
    def state(self) -> TableState:
        return self._state

    @property
    def calls(self) -> tuple[Call, ...]:
        return self._calls

    def set_calls(self, calls: Sequence[Call]) -> None:
        """Replace the host-owned collection; sort and page are kept."""
        self._calls = tuple(calls)

    def sort_by(self, sort_field: Any) -> TableState:
        self._state = set_sort(self._state, sort_field)
        log_with_context(
            logger,
            logging.DEBUG,
            "Call table sorted",
            sort_field=self._state.sort_field.value,
            sort_direction=self._state.sort_direction.value,
        )
        return self._state

    def sort_indicator(self, sort_field: Any) -> SortDirection | None:
        """Direction arrow to draw next to a column header, if it is the active one."""
        if coerce_sort_field(sort_field) is not self._state.sort_field:
            return None
        return self._state.sort_direction

    def go_to_page(self, page: int) -> TableState:
        self._state = set_page(self._state, page)
        return self._state

    def previous_page(self) -> TableState:
        # Disabled on the first page
        if self._state.page > 1:
            self._state = set_page(self._state, self._state.page - 1)
        return self._state

    def next_page(self) -> TableState:
        # Disabled on the last page
        pages = total_pages(len(filter_calls(self._calls, self._state.filter)), self._state.page_size)
        if self._state.page < pages:
            self._state = set_page(self._state, self._state.page + 1)
        return self._state

    def apply_filter(self, call_filter: CallFilter) -> TableState:
        self._state = set_filter(self._state, call_filter)
        return self._state

    def sorted_calls(self) -> list[Call]:
        return sorted_view(self._state, self._calls)

    def current_page(self) -> Page:
        return paginate(self._state, self._calls)

    def row_activated(self, call_id: str, action: RowAction = RowAction.VIEW) -> RowEvent:
        """Signal that the user picked a row; the host decides what happens."""
        event = RowEvent(call_id=call_id, action=RowAction(action))
        log_with_context(
            logger,
            logging.INFO,
            "Call row activated",
            call_id=call_id,
            action=event.action.value,
        )
        if self._host is None:
            return event

        if event.action is RowAction.VIEW:
            self._host.on_view_call(call_id)
        elif event.action is RowAction.EDIT:
            self._host.on_edit_call(call_id)
        else:
            self._host.on_delete_call(call_id)
        return event
