"""
In-memory dashboard host.

Owns the call collection, implements the table host and the form host, and
keeps track of which dialog is open. Nothing is persisted: records live in a
list for the lifetime of the dashboard.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable

from helpdesk.calls.form import CallForm
from helpdesk.calls.models import Call, CallPriority, CallStatus
from helpdesk.calls.sample_data import SAMPLE_CALLS
from helpdesk.calls.schemas import CallDraft
from helpdesk.calls.table import CallTable
from helpdesk.shared.exceptions import CallNotFoundError
from helpdesk.shared.logging import get_logger, log_with_context

logger = get_logger(__name__)

_ID_NUMBER = re.compile(r"(\d+)$")


@dataclass(frozen=True)
class DashboardUser:
    name: str = "John Doe"
    role: str = "Help Desk Agent"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def next_call_id(calls: Iterable[Call], prefix: str = "CALL-") -> str:
    """One past the highest numeric suffix among existing ids."""
    highest = 0
    for call in calls:
        match = _ID_NUMBER.search(call.id)
        if match:
            highest = max(highest, int(match.group(1)))
    return f"{prefix}{highest + 1:03d}"


class _DialogHost:
    """Form host bound to one dialog: creates when call_id is None, otherwise replaces."""

    def __init__(self, dashboard: "Dashboard", call_id: str | None) -> None:
        self._dashboard = dashboard
        self._call_id = call_id

    async def submit(self, draft: CallDraft) -> None:
        if self._call_id is None:
            self._dashboard.create_call(draft)
        else:
            self._dashboard.update_call(self._call_id, draft)
        self._dashboard.close_dialog()

    def cancel(self) -> None:
        self._dashboard.close_dialog()


class Dashboard:
    """Support call dashboard: one call table plus at most one open form dialog."""

    def __init__(
        self,
        calls: Iterable[Call] | None = None,
        user: DashboardUser | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._calls: list[Call] = list(SAMPLE_CALLS if calls is None else calls)
        self._clock = clock
        self.user = user or DashboardUser()
        self.signed_in = True
        self.table = CallTable(self._calls, host=self)
        self.form: CallForm | None = None
        self.selected_call: Call | None = None

    @property
    def calls(self) -> tuple[Call, ...]:
        return tuple(self._calls)

    @property
    def dialog_title(self) -> str | None:
        if self.form is None:
            return None
        return "Call Details" if self.form.is_editing else "New Support Call"

    def get_call(self, call_id: str) -> Call:
        for call in self._calls:
            if call.id == call_id:
                return call
        raise CallNotFoundError(call_id)

    # -------- dialogs --------

    def open_new_call(self) -> CallForm:
        self._close_form()
        self.selected_call = None
        self.form = CallForm(host=_DialogHost(self, None))
        return self.form

    def open_call(self, call_id: str) -> CallForm:
        call = self.get_call(call_id)
        self._close_form()
        self.selected_call = call
        self.form = CallForm(
            host=_DialogHost(self, call.id),
            initial=CallDraft.from_call(call),
            is_editing=True,
        )
        return self.form

    def close_dialog(self) -> None:
        self._close_form()
        self.selected_call = None

    def _close_form(self) -> None:
        if self.form is not None:
            self.form.close()
        self.form = None

    # -------- CallTableHost --------

    def on_view_call(self, call_id: str) -> None:
        self.open_call(call_id)

    def on_edit_call(self, call_id: str) -> None:
        self.open_call(call_id)

    def on_delete_call(self, call_id: str) -> None:
        self.delete_call(call_id)

    # -------- record changes --------

    def _build_call(self, call_id: str, created: str, draft: CallDraft) -> Call:
        return Call(
            id=call_id,
            caller_name=draft.caller_name,
            caller_email=draft.caller_email,
            caller_phone=draft.caller_phone,
            issue_description=draft.issue_description,
            priority=CallPriority(draft.priority),
            status=CallStatus(draft.status),
            date_created=created,
            issue_image=draft.issue_image or None,
        )

    def create_call(self, draft: CallDraft) -> Call:
        created = self._clock().astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        call = self._build_call(next_call_id(self._calls), created, draft)
        self._calls.append(call)
        self.table.set_calls(self._calls)
        log_with_context(logger, logging.INFO, "Call submitted", call_id=call.id, priority=call.priority.value)
        return call

    def update_call(self, call_id: str, draft: CallDraft) -> Call:
        current = self.get_call(call_id)
        updated = self._build_call(current.id, current.date_created, draft)
        self._calls[self._calls.index(current)] = updated
        self.table.set_calls(self._calls)
        log_with_context(logger, logging.INFO, "Call edited", call_id=call_id)
        return updated

    def delete_call(self, call_id: str) -> None:
        call = self.get_call(call_id)
        self._calls.remove(call)
        self.table.set_calls(self._calls)
        if self.selected_call is not None and self.selected_call.id == call_id:
            self.close_dialog()
        log_with_context(logger, logging.INFO, "Call deleted", call_id=call_id)

    def logout(self) -> None:
        self.close_dialog()
        self.signed_in = False
        log_with_context(logger, logging.INFO, "User signed out", user=self.user.name)
