"""
Core data model and layout.

This module contains the log entry types and the layout algorithm that
every renderer shares.
"""

from loggraph.core.log_entry import (
    ROOT_CAUSE,
    EntryKind,
    LogEntry,
    LogEntryValidationError,
    LogSequence,
)
from loggraph.core.graph_layout import (
    ConnectorPlacement,
    GraphLayout,
    LayoutConfigurationError,
    LayoutSettings,
    NodePlacement,
    SkipReason,
    compute_layout,
)

__all__ = [
    "ROOT_CAUSE",
    "ConnectorPlacement",
    "EntryKind",
    "GraphLayout",
    "LayoutConfigurationError",
    "LayoutSettings",
    "LogEntry",
    "LogEntryValidationError",
    "LogSequence",
    "NodePlacement",
    "SkipReason",
    "compute_layout",
]
