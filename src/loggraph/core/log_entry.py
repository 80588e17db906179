"""
Immutable data model for causal log entries.

This module defines the data that flows through the whole of loggraph.
Adapters produce LogSequence objects, the layout consumes them, and
renderers turn the layout into pictures.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload


class LogEntryValidationError(ValueError):
    """
    Raised when a LogEntry receives invalid data.

    A dedicated subclass lets callers catch construction problems without
    swallowing unrelated ValueErrors.
    """
    pass


class EntryKind(Enum):
    """Closed set of node kinds a log entry can have."""

    ACTION = "action"
    STATE = "state"

    @classmethod
    def from_flag(cls, is_action: Any) -> EntryKind:
        """Map a boolean-like `isAction` discriminator to a kind."""
        return cls.ACTION if is_action else cls.STATE


class _RootCause:
    """
    Marker for "caused by the root", i.e. no real cause.

    Kept distinct from None, which means the cause is simply absent.
    """

    __slots__ = ()
    _instance: _RootCause | None = None

    def __new__(cls) -> _RootCause:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ROOT_CAUSE"

    def __reduce__(self) -> str:
        return "ROOT_CAUSE"


ROOT_CAUSE = _RootCause()


@dataclass(frozen=True, slots=True)
class LogEntry:
    """
    One record of the causal log.

    `cause` never holds the causing entry itself, only its identity.
    Lookups happen against whatever sequence is being rendered, so an
    entry never keeps another one alive.

    Parameters
    ----------
    identity : Hashable
        Unique key of this entry within a sequence.
    name : str
        Non-empty display label.
    kind : EntryKind
        ACTION or STATE.
    cause : Hashable, LogEntry, ROOT_CAUSE or None
        Identity of the causing entry. A LogEntry is accepted for
        convenience and reduced to its identity.
    """

    identity: Hashable
    name: str
    kind: EntryKind
    cause: Hashable | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise LogEntryValidationError(
                f"Entry {self.identity!r} needs a non-empty string name, got {self.name!r}."
            )

        if not isinstance(self.kind, EntryKind):
            raise LogEntryValidationError(
                f"Entry {self.identity!r} has kind {self.kind!r}. "
                "Use EntryKind.ACTION or EntryKind.STATE."
            )

        if isinstance(self.cause, LogEntry):
            object.__setattr__(self, "cause", self.cause.identity)

        try:
            hash(self.identity)
        except TypeError as hash_error:
            raise LogEntryValidationError(
                f"Entry identity must be hashable, got {type(self.identity).__name__}."
            ) from hash_error

    @classmethod
    def action(cls, identity: Hashable, name: str, cause: Any = None) -> LogEntry:
        """Shortcut for an ACTION entry."""
        return cls(identity=identity, name=name, kind=EntryKind.ACTION, cause=cause)

    @classmethod
    def state(cls, identity: Hashable, name: str, cause: Any = None) -> LogEntry:
        """Shortcut for a STATE entry."""
        return cls(identity=identity, name=name, kind=EntryKind.STATE, cause=cause)

    @property
    def has_real_cause(self) -> bool:
        """True if the cause is neither absent nor the root sentinel."""
        return self.cause is not None and self.cause is not ROOT_CAUSE


class LogSequence:
    """
    Ordered, duplicate-free collection of log entries.

    Insertion order is causal order, and an entry's position is its rank.
    Entries whose identity was already seen are dropped, keeping the
    first occurrence.

    Example
    -------
    >>> first = LogEntry.action("a", "increment")
    >>> second = LogEntry.state("b", "counter", cause=first)
    >>> sequence = LogSequence([first, second])
    >>> sequence.rank_of("a")
    0
    """

    __slots__ = ("_entries", "_rank_by_identity")

    def __init__(self, entries: Iterable[LogEntry] = ()) -> None:
        unique_entries: list[LogEntry] = []
        rank_by_identity: dict[Hashable, int] = {}

        for entry in entries:
            if not isinstance(entry, LogEntry):
                raise LogEntryValidationError(
                    f"LogSequence only holds LogEntry objects, got {type(entry).__name__}. "
                    "Convert external records with DescriptorRecordAdapter first."
                )
            if entry.identity in rank_by_identity:
                continue
            rank_by_identity[entry.identity] = len(unique_entries)
            unique_entries.append(entry)

        self._entries = tuple(unique_entries)
        self._rank_by_identity = rank_by_identity

    def rank_of(self, identity: Any) -> int | None:
        """
        Return the 0-based rank of `identity`, or None if it is not here.

        The root sentinel and unhashable values are never found.
        """
        if identity is None or identity is ROOT_CAUSE:
            return None
        try:
            return self._rank_by_identity.get(identity)
        except TypeError:
            return None

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    @overload
    def __getitem__(self, index: int) -> LogEntry: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[LogEntry, ...]: ...

    def __getitem__(self, index):
        return self._entries[index]

    def __contains__(self, identity: object) -> bool:
        return self.rank_of(identity) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogSequence):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"<LogSequence entries={len(self._entries)}>"
