"""
Adapter for records produced by a causal-tracking subsystem.

Those records carry a `cause` pointing at another record (or None) and a
`proto` descriptor with the display `name` and an `is_action` flag. The
adapter resolves causes to identities right away, so the resulting
sequence holds no references to the producer's objects beyond the
entries themselves.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from loggraph.core.adapters.base_adapter import (
    AdapterCompatibilityError,
    BaseEntryAdapter,
)
from loggraph.core.log_entry import (
    ROOT_CAUSE,
    EntryKind,
    LogEntry,
    LogEntryValidationError,
    LogSequence,
)
from loggraph.utils.type_guards import is_descriptor_record, read_action_flag


class DescriptorRecordAdapter(BaseEntryAdapter):
    """
    Convert descriptor-carrying records into a LogSequence.

    Record identity is the Python object identity, which is stable for as
    long as the caller holds the records.

    Example
    -------
    >>> adapter = DescriptorRecordAdapter(root_descriptor=root_proto)
    >>> sequence = adapter.to_sequence(tracked_records)

    Parameters
    ----------
    root_descriptor : Any, optional
        Descriptor marking the producer's root record. A record whose
        cause carries this descriptor is treated as caused by the root.
    """

    def __init__(self, root_descriptor: Any = None) -> None:
        self._root_descriptor = root_descriptor

    @property
    def source_name(self) -> str:
        return "descriptor-records"

    def accepts(self, candidate: Any) -> bool:
        return is_descriptor_record(candidate)

    def to_sequence(self, records: Iterable[Any]) -> LogSequence:
        return LogSequence(self._convert_record(record) for record in records)

    def _convert_record(self, record: Any) -> LogEntry:
        if not is_descriptor_record(record):
            raise AdapterCompatibilityError(
                f"{type(record).__name__} is not a descriptor record. "
                "Expected `cause` and a `proto` with `name` and `is_action`."
            )

        descriptor = record.proto
        try:
            return LogEntry(
                identity=id(record),
                name=descriptor.name,
                kind=EntryKind.from_flag(read_action_flag(descriptor)),
                cause=self._resolve_cause(record.cause),
            )
        except LogEntryValidationError as validation_error:
            raise AdapterCompatibilityError(
                f"Cannot convert record {descriptor.name!r}: {validation_error}"
            ) from validation_error

    def _resolve_cause(self, cause_record: Any) -> Any:
        if cause_record is None:
            return None
        if (
            self._root_descriptor is not None
            and getattr(cause_record, "proto", None) is self._root_descriptor
        ):
            return ROOT_CAUSE
        return id(cause_record)
