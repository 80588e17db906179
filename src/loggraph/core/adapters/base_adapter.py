"""
Abstract base class for record adapters.

Each adapter turns one producer's record format into a LogSequence, so
renderers never need to know where the log came from.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from loggraph.core.log_entry import LogSequence


class AdapterCompatibilityError(ValueError):
    """
    Raised when an adapter receives records it cannot interpret.

    Examples: a record without a descriptor, or a descriptor whose name
    is missing.
    """
    pass


class BaseEntryAdapter(ABC):
    """
    Abstract base class for record adapters.

    Subclasses must implement:
    - `source_name`: identifies the record format this adapter reads
    - `to_sequence()`: converts records into a LogSequence

    `accepts()` lets callers pick an adapter before converting.
    """

    @property
    @abstractmethod
    def source_name(self) -> str:
        """
        Name of the record format this adapter reads.

        Used in error messages and reprs.
        """
        ...

    @abstractmethod
    def to_sequence(self, records: Iterable[Any]) -> LogSequence:
        """
        Convert producer records into a LogSequence.

        Parameters
        ----------
        records : Iterable
            Records in causal order.

        Returns
        -------
        LogSequence
            Entries in the same order, duplicates dropped.

        Raises
        ------
        AdapterCompatibilityError
            If a record cannot be interpreted.
        """
        ...

    def accepts(self, candidate: Any) -> bool:
        """
        Return True if `candidate` is a record this adapter can convert.

        Override this in subclasses. The default refuses everything so a
        forgotten override shows up as an error instead of a wrong guess.
        """
        return False

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} (source={self.source_name})>"
