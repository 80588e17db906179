"""
Abstract base class for log graph renderers.

Renderers consume log entries and produce visual output. This base class
owns input normalization and layout, so subclasses only decide how the
placements are drawn.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from loggraph.core.adapters.base_adapter import AdapterCompatibilityError
from loggraph.core.adapters.descriptor_adapter import DescriptorRecordAdapter
from loggraph.core.graph_layout import GraphLayout, LayoutSettings, compute_layout
from loggraph.core.log_entry import LogEntry, LogSequence


class BaseRenderer(ABC):
    """
    Abstract base class for visualization backends.

    Subclasses implement `render()`. The base class provides
    `_coerce_sequence()` and `_layout_for()` so that every backend accepts
    the same inputs and places nodes identically.

    Parameters
    ----------
    layout_settings : LayoutSettings, optional
        Geometry constants. Defaults to a node radius of 10.
    record_adapter : DescriptorRecordAdapter, optional
        Adapter used when the input holds producer records rather than
        LogEntry objects.
    """

    def __init__(
        self,
        layout_settings: LayoutSettings | None = None,
        record_adapter: DescriptorRecordAdapter | None = None,
    ) -> None:
        self._layout_settings = layout_settings or LayoutSettings()
        self._record_adapter = record_adapter or DescriptorRecordAdapter()

    @property
    def layout_settings(self) -> LayoutSettings:
        return self._layout_settings

    @abstractmethod
    def render(
        self,
        entries_to_render: LogSequence | Iterable[Any],
        **render_options,
    ) -> Any:
        """
        Render a causal log.

        Parameters
        ----------
        entries_to_render : LogSequence or Iterable
            Entries in causal order.
        **render_options
            Renderer-specific options (colors, sink, etc.)

        Returns
        -------
        Any
            Renderer-specific output.
        """
        ...

    def _coerce_sequence(self, entries_to_render: LogSequence | Iterable[Any]) -> LogSequence:
        """
        Turn any supported input into a LogSequence.

        Accepts a LogSequence as is, an iterable of LogEntry objects, or an
        iterable of producer records, which go through the record adapter.
        Mixing entries and records, or passing anything the adapter does
        not accept, raises AdapterCompatibilityError.
        """
        if isinstance(entries_to_render, LogSequence):
            return entries_to_render

        materialized = list(entries_to_render)
        if all(isinstance(item, LogEntry) for item in materialized):
            return LogSequence(materialized)

        for position, item in enumerate(materialized):
            if not self._record_adapter.accepts(item):
                raise AdapterCompatibilityError(
                    f"Item {position} ({type(item).__name__}) is neither a LogEntry nor a "
                    f"record {self._record_adapter.source_name} can convert. "
                    "Pass only LogEntry objects or only producer records."
                )

        return self._record_adapter.to_sequence(materialized)

    def _layout_for(
        self,
        entries_to_render: LogSequence | Iterable[Any],
        **render_options,
    ) -> GraphLayout:
        """Coerce the input and lay it out. `layout_settings` may be overridden per call."""
        settings = render_options.get("layout_settings", self._layout_settings)
        return compute_layout(self._coerce_sequence(entries_to_render), settings)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} radius={self._layout_settings.node_radius}>"
