"""
Pytest fixtures for the loggraph test suite.

These fixtures build small causal logs by hand so every coordinate in
the assertions can be worked out on paper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from loggraph.core.log_entry import LogEntry, LogSequence


class RecordingSink:
    """DiagnosticSink that keeps every write for inspection."""

    def __init__(self) -> None:
        self.writes: list[tuple[str, str]] = []

    def write(self, format_string: str, style: str) -> None:
        self.writes.append((format_string, style))


@dataclass
class FakeDescriptor:
    """Stand-in for a producer's descriptor object."""

    name: str
    isAction: bool = False


@dataclass(eq=False)
class FakeRecord:
    """Stand-in for a producer's causal record. Compared by identity."""

    proto: FakeDescriptor
    cause: Any = None


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def fan_out_sequence() -> LogSequence:
    """
    A(no cause) -> B(cause=A), C(cause=A).

    Expected layout with radius 10: max distance 2 over 3 entries gives
    max_shift = floor(2/3 * 200 / 2) = 66 and x = 86.
    """
    entry_a = LogEntry.action("a", "A")
    entry_b = LogEntry.state("b", "B", cause=entry_a)
    entry_c = LogEntry.state("c", "C", cause=entry_a)
    return LogSequence([entry_a, entry_b, entry_c])


@pytest.fixture
def linear_chain_sequence() -> LogSequence:
    """Four entries, each caused by the previous one."""
    entries = [LogEntry.action("n0", "dispatch")]
    for index, name in enumerate(["reducer", "selector", "view"], start=1):
        entries.append(LogEntry.state(f"n{index}", name, cause=f"n{index - 1}"))
    return LogSequence(entries)


@pytest.fixture
def root_descriptor() -> FakeDescriptor:
    return FakeDescriptor(name="root")


@pytest.fixture
def fake_records(root_descriptor: FakeDescriptor) -> list[FakeRecord]:
    """Action caused by the root, a state it caused, and a stray state."""
    root_record = FakeRecord(proto=root_descriptor)
    action_record = FakeRecord(proto=FakeDescriptor("increment", isAction=True), cause=root_record)
    state_record = FakeRecord(proto=FakeDescriptor("counter"), cause=action_record)
    outside_record = FakeRecord(proto=FakeDescriptor("elsewhere"))
    stray_record = FakeRecord(proto=FakeDescriptor("stray"), cause=outside_record)
    return [action_record, state_record, stray_record]
