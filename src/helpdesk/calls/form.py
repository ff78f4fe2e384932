"""
Call create/edit form.

State machine:
    idle --(valid submit)--> submitting --(handler returns)--> idle
    submitting --(handler raises)--> errored --(valid submit)--> submitting

An invalid submit fills field errors and leaves the state where it was. A
submit while another is in flight is ignored. The draft survives a failed
submission so the user can retry. Resetting the draft does not end a pending
submission.
"""

import base64
import logging
from enum import Enum
from typing import Any, Iterable

import anyio

from helpdesk.calls.interface import CallFormHost, ClipboardItem
from helpdesk.calls.schemas import DRAFT_FIELDS, CallDraft, ValidationResult, validate_draft
from helpdesk.config import get_settings
from helpdesk.shared.exceptions import SubmissionError, ValidationError
from helpdesk.shared.logging import get_logger, log_with_context

logger = get_logger(__name__)


class FormState(str, Enum):
    """Submission state of a call form."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    ERRORED = "errored"


def select_image_item(items: Iterable[ClipboardItem]) -> ClipboardItem | None:
    """First readable image item of a paste event; everything after it is ignored."""
    for item in items:
        if item.is_image and item.payload is not None:
            return item
    return None


def encode_data_uri(mime_type: str, payload: bytes) -> str:
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


class CallForm:
    """Draft, validation and submission for one support call."""

    def __init__(
        self,
        host: CallFormHost | None = None,
        initial: CallDraft | None = None,
        is_editing: bool = False,
    ) -> None:
        self._host = host
        self._initial = initial.copy() if initial is not None else CallDraft()
        self._draft = self._initial.copy()
        self._is_editing = is_editing
        self._errors: dict[str, str] = {}
        self._state = FormState.IDLE
        self._error: str | None = None
        self._last_failure: SubmissionError | None = None
        # Bumped on reset/close so that late image decodes are dropped
        self._generation = 0
        self._closed = False

    # -------- read-only views --------

    @property
    def draft(self) -> CallDraft:
        return self._draft.copy()

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def error(self) -> str | None:
        """Form-level error message, set only after a failed submission."""
        return self._error

    @property
    def last_failure(self) -> SubmissionError | None:
        return self._last_failure

    @property
    def is_editing(self) -> bool:
        return self._is_editing

    @property
    def is_submitting(self) -> bool:
        return self._state is FormState.SUBMITTING

    @property
    def can_submit(self) -> bool:
        return not self.is_submitting and not self._closed

    @property
    def title(self) -> str:
        return "Edit Support Call" if self._is_editing else "New Support Call"

    @property
    def description(self) -> str:
        if self._is_editing:
            return "Update the details of this support call"
        return "Enter the details of the new support call"

    @property
    def submit_label(self) -> str:
        if self.is_submitting:
            return "Submitting..."
        return "Update Call" if self._is_editing else "Create Call"

    @property
    def image(self) -> str | None:
        return self._draft.issue_image

    # -------- editing --------

    def set_field(self, name: str, value: Any) -> None:
        if name not in DRAFT_FIELDS:
            raise ValueError(f"Unknown call form field: {name}")
        setattr(self._draft, name, value)
        self._errors.pop(name, None)

    def load(self, draft: CallDraft) -> None:
        """Replace every draft value at once."""
        self._draft = draft.copy()
        self._errors.clear()

    def remove_image(self) -> None:
        self._draft.issue_image = None
        self._errors.pop("issue_image", None)

    async def paste(self, items: Iterable[ClipboardItem]) -> bool:
        """Attach the first image of a paste event to the draft.

        Returns False when the event carried no readable image, or when the
        form was reset or closed before the image finished encoding.
        """
        if self._closed:
            return False

        item = select_image_item(items)
        if item is None:
            return False

        generation = self._generation
        data_uri = await anyio.to_thread.run_sync(encode_data_uri, item.mime_type, item.payload)

        if generation != self._generation or self._closed:
            log_with_context(
                logger,
                logging.DEBUG,
                "Discarding image decoded for a stale draft",
                mime_type=item.mime_type,
            )
            return False

        self._draft.issue_image = data_uri
        self._errors.pop("issue_image", None)
        log_with_context(
            logger,
            logging.INFO,
            "Issue image attached",
            mime_type=item.mime_type,
            size_bytes=len(item.payload or b""),
        )
        return True

    # -------- validation / submission --------

    def validate(self) -> ValidationResult:
        result = validate_draft(self._draft)
        self._errors = result.field_errors
        return result

    def validate_or_raise(self) -> CallDraft:
        """Validate and return a copy of the draft, raising ValidationError on failure."""
        result = self.validate()
        if not result.is_valid:
            raise ValidationError("Call form has invalid fields", details=result.field_errors)
        return self._draft.copy()

    async def submit(self) -> bool:
        """Validate and hand the draft to the host. Returns True on success."""
        if not self.can_submit:
            logger.debug("Ignoring submit request while %s", self._state.value)
            return False

        result = self.validate()
        if not result.is_valid:
            log_with_context(
                logger,
                logging.INFO,
                "Call form validation failed",
                fields=sorted(self._errors),
            )
            return False

        self._state = FormState.SUBMITTING
        self._error = None
        payload = self._draft.copy()

        try:
            if self._host is not None:
                await self._host.submit(payload)
        except Exception as exc:
            message = get_settings().submit_error_message
            logger.exception("Call form submission failed")
            self._state = FormState.ERRORED
            self._error = message
            self._last_failure = SubmissionError(message, cause=exc)
            return False

        self._state = FormState.IDLE
        self._last_failure = None
        log_with_context(
            logger,
            logging.INFO,
            "Call form submitted",
            editing=self._is_editing,
            priority=payload.priority,
        )
        return True

    def cancel(self) -> None:
        if self._host is not None:
            self._host.cancel()

    def reset(self) -> None:
        """Back to the initial draft with no errors.

        A submission already handed to the host keeps running and still
        settles the form state when it finishes.
        """
        self._generation += 1
        self._draft = self._initial.copy()
        self._errors.clear()
        if self.is_submitting:
            return
        self._state = FormState.IDLE
        self._error = None
        self._last_failure = None

    def close(self) -> None:
        """Discard the form; pending image decodes are dropped."""
        self._generation += 1
        self._closed = True
