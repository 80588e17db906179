"""
loggraph: Draw causal log chains as inline SVG for debugging.

This package lays out a sequence of log entries, each optionally caused
by an earlier one, as a single column of nodes with curved connectors,
and writes the picture to a diagnostic console as a styled background.

Example
-------
>>> from loggraph import LogEntry, log_graph
>>>
>>> clicked = LogEntry.action("click", "onClick")
>>> counter = LogEntry.state("count", "counter", cause=clicked)
>>> log_graph([clicked, counter])
"""

__version__ = "0.1.0"

# Core data model - the main user-facing API
from loggraph.core.log_entry import (
    ROOT_CAUSE,
    EntryKind,
    LogEntry,
    LogEntryValidationError,
    LogSequence,
)
from loggraph.core.graph_layout import (
    GraphLayout,
    LayoutConfigurationError,
    LayoutSettings,
    SkipReason,
    compute_layout,
)
from loggraph.core.adapters import AdapterCompatibilityError, DescriptorRecordAdapter

# Visualization
from loggraph.renderers.base_renderer import BaseRenderer
from loggraph.renderers.console_renderer import ConsoleDirective, ConsoleRenderer, log_graph
from loggraph.renderers.console_sink import DiagnosticSink, LoggingSink
from loggraph.renderers.svg_renderer import SvgRenderer

__all__ = [
    # Version
    "__version__",
    # Core
    "ROOT_CAUSE",
    "EntryKind",
    "LogEntry",
    "LogEntryValidationError",
    "LogSequence",
    "GraphLayout",
    "LayoutConfigurationError",
    "LayoutSettings",
    "SkipReason",
    "compute_layout",
    "AdapterCompatibilityError",
    "DescriptorRecordAdapter",
    # Renderers
    "BaseRenderer",
    "ConsoleDirective",
    "ConsoleRenderer",
    "DiagnosticSink",
    "LoggingSink",
    "SvgRenderer",
    "log_graph",
]
