"""
Console renderer: emit the log graph as an inline styled console write.

The SVG is percent-encoded into a data URL and set as the background of
a single styled "%c " write. Consoles that honour CSS styling show the
graph as a strip framing the node column.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from loggraph.core.adapters.descriptor_adapter import DescriptorRecordAdapter
from loggraph.core.log_entry import LogSequence
from loggraph.renderers.base_renderer import BaseRenderer
from loggraph.renderers.console_sink import DiagnosticSink, LoggingSink
from loggraph.renderers.svg_renderer import SvgRenderer, format_number

logger = logging.getLogger(__name__)

DEFAULT_FORMAT_STRING = "%c "
SVG_DATA_URL_PREFIX = "data:image/svg+xml,"

# Characters encodeURIComponent leaves alone besides letters and digits
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_svg_data_url(svg_text: str) -> str:
    """Percent-encode an SVG document into a `data:` URL."""
    return SVG_DATA_URL_PREFIX + quote(svg_text, safe=_URI_COMPONENT_SAFE)


@dataclass(frozen=True, slots=True)
class ConsoleDirective:
    """The single write handed to a DiagnosticSink."""

    format_string: str
    style: str
    svg: str


class ConsoleRenderer(BaseRenderer):
    """
    Render a causal log and write it to a diagnostic sink.

    Example
    -------
    >>> from loggraph.renderers import ConsoleRenderer
    >>> directive = ConsoleRenderer().render(sequence)
    >>> directive.format_string
    '%c '

    Parameters
    ----------
    svg_renderer : SvgRenderer, optional
        Serializer for the image. Its layout settings are used for
        layout too.
    sink : DiagnosticSink, optional
        Default destination. A LoggingSink when omitted.
    format_string : str, default="%c "
    record_adapter : DescriptorRecordAdapter, optional
        Forwarded to BaseRenderer.
    """

    def __init__(
        self,
        svg_renderer: SvgRenderer | None = None,
        sink: DiagnosticSink | None = None,
        format_string: str = DEFAULT_FORMAT_STRING,
        record_adapter: DescriptorRecordAdapter | None = None,
    ) -> None:
        self._svg_renderer = svg_renderer or SvgRenderer()
        super().__init__(
            layout_settings=self._svg_renderer.layout_settings,
            record_adapter=record_adapter,
        )
        self._default_sink = sink
        self._format_string = format_string

    def render(
        self,
        entries_to_render: LogSequence | Iterable[Any],
        **render_options,
    ) -> ConsoleDirective:
        """
        Render the entries and write them to the sink once.

        Parameters
        ----------
        entries_to_render : LogSequence or Iterable
            Entries in causal order.
        **render_options
            - sink: override the destination for this call
            - layout_settings: override the LayoutSettings for this call

        Returns
        -------
        ConsoleDirective
            Exactly what was written.
        """
        sink = render_options.get("sink") or self._default_sink or LoggingSink()

        layout = self._layout_for(entries_to_render, **render_options)
        svg_text = self._svg_renderer.render_layout(layout)

        # The two outer vertical margins are trimmed off the visible strip
        display_height = layout.height - 2 * layout.settings.y_gap
        style = (
            f"font-size:{format_number(display_height)}px; "
            f"background: url({encode_svg_data_url(svg_text)}) no-repeat; "
            "font-family: monospace;"
        )

        directive = ConsoleDirective(
            format_string=self._format_string,
            style=style,
            svg=svg_text,
        )
        sink.write(directive.format_string, directive.style)
        logger.debug("Wrote log graph with %d node(s) to %r", layout.entry_count, sink)
        return directive

    def __repr__(self) -> str:
        return f"<ConsoleRenderer svg_renderer={self._svg_renderer!r}>"


def log_graph(
    entries: LogSequence | Iterable[Any],
    sink: DiagnosticSink | None = None,
) -> None:
    """
    Render `entries` and write the graph to `sink` (a LoggingSink by default).

    Builds a fresh renderer on every call, so nothing is shared between
    calls.
    """
    ConsoleRenderer(sink=sink).render(entries)
