"""
Host interface definitions.

The call list and call form never create, persist or delete records and never
navigate. They signal intent through these protocols; any object implementing
them can host the components.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from helpdesk.calls.schemas import CallDraft


class RowAction(str, Enum):
    """What the user asked to do with a table row."""

    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"


@dataclass(frozen=True)
class RowEvent:
    """A row activation emitted by the call table."""

    call_id: str
    action: RowAction = RowAction.VIEW


@dataclass(frozen=True)
class ClipboardItem:
    """One item of a paste event.

    ``payload`` is None when the clipboard entry cannot be read as a file.
    """

    mime_type: str
    payload: bytes | None = None

    @property
    def is_image(self) -> bool:
        return "image" in self.mime_type


@runtime_checkable
class CallTableHost(Protocol):
    """Receives row activations from the call table."""

    def on_view_call(self, call_id: str) -> None:
        """Show the details of a call."""
        ...

    def on_edit_call(self, call_id: str) -> None:
        """Open a call for editing."""
        ...

    def on_delete_call(self, call_id: str) -> None:
        """Delete a call."""
        ...


@runtime_checkable
class CallFormHost(Protocol):
    """Receives submit and cancel requests from the call form."""

    async def submit(self, draft: CallDraft) -> None:
        """Create or update a call from a validated draft.

        Raising any exception marks the submission as failed.
        """
        ...

    def cancel(self) -> None:
        """Discard the form."""
        ...
