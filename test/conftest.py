"""
Pytest configuration and shared fixtures.
"""
from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from helpdesk.calls.models import Call, CallPriority, CallStatus
from helpdesk.calls.sample_data import SAMPLE_CALLS
from helpdesk.calls.schemas import CallDraft

_PRIORITIES = list(CallPriority)
_STATUSES = list(CallStatus)


@pytest.fixture
def sample_calls() -> list[Call]:
    """The twelve development calls."""
    return list(SAMPLE_CALLS)


@pytest.fixture
def make_calls() -> Callable[[int], list[Call]]:
    """Factory for N calls with increasing creation dates and cycling enums."""

    def _make(count: int) -> list[Call]:
        start = datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)
        calls = []
        for i in range(count):
            created = start + timedelta(hours=i)
            calls.append(
                Call(
                    id=f"CALL-{i + 1:03d}",
                    caller_name=f"Caller {chr(ord('A') + (i * 7) % 26)}",
                    caller_email=f"caller{i}@example.com",
                    caller_phone="5550100000",
                    issue_description=f"Issue number {i} needs attention",
                    priority=_PRIORITIES[i % len(_PRIORITIES)],
                    status=_STATUSES[i % len(_STATUSES)],
                    date_created=created.strftime("%Y-%m-%dT%H:%M:%SZ"),
                )
            )
        return calls

    return _make


@pytest.fixture
def valid_draft() -> CallDraft:
    return CallDraft(
        caller_name="Al",
        caller_email="a@b.com",
        caller_phone="1234567890",
        issue_description="printer is broken today",
    )


@pytest.fixture
def form_host() -> MagicMock:
    """Form host whose submit succeeds."""
    host = MagicMock()
    host.submit = AsyncMock(return_value=None)
    host.cancel = MagicMock()
    return host


@pytest.fixture
def failing_form_host() -> MagicMock:
    """Form host whose submit raises."""
    host = MagicMock()
    host.submit = AsyncMock(side_effect=RuntimeError("backend unavailable"))
    host.cancel = MagicMock()
    return host


class BlockingFormHost:
    """Form host whose submit waits until release() is called."""

    def __init__(self) -> None:
        self.calls: list[CallDraft] = []
        self._release = asyncio.Event()
        self.cancelled = False

    def release(self) -> None:
        self._release.set()

    async def submit(self, draft: CallDraft) -> None:
        self.calls.append(draft)
        await self._release.wait()

    def cancel(self) -> None:
        self.cancelled = True


@pytest.fixture
def blocking_form_host() -> BlockingFormHost:
    return BlockingFormHost()


@pytest.fixture
def table_host() -> MagicMock:
    return MagicMock()
