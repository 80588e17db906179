"""
SVG renderer for causal log graphs.

Produces one self-contained SVG document: a circle and label per entry,
then a polyline per connector. Output is deterministic, with no ids,
timestamps or floating formatting noise, so identical input always
yields identical bytes.
"""

from __future__ import annotations

import html
from collections.abc import Iterable
from typing import Any

from loggraph.core.graph_layout import ConnectorPlacement, GraphLayout, NodePlacement
from loggraph.core.log_entry import EntryKind, LogSequence
from loggraph.renderers.base_renderer import BaseRenderer

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

KIND_COLORS = {
    EntryKind.ACTION: "#ffff80",
    EntryKind.STATE: "#151134",
}
LABEL_COLOR = "gray"
CONNECTOR_COLOR = "gray"
FONT_FAMILY = "monospace"


def format_number(value: float) -> str:
    """Print integral values without a trailing `.0`."""
    as_float = float(value)
    if as_float.is_integer():
        return str(int(as_float))
    return repr(as_float)


class SvgRenderer(BaseRenderer):
    """
    Render a causal log as an SVG document string.

    Example
    -------
    >>> from loggraph.renderers import SvgRenderer
    >>> svg_text = SvgRenderer().render(sequence)
    >>> svg_text.startswith("<svg")
    True

    Parameters
    ----------
    kind_colors : dict, optional
        Fill color per EntryKind. Missing kinds fall back to the defaults.
    label_color : str, default="gray"
    connector_color : str, default="gray"
    font_family : str, default="monospace"
    **base_options
        Forwarded to BaseRenderer (layout_settings, record_adapter).
    """

    def __init__(
        self,
        kind_colors: dict[EntryKind, str] | None = None,
        label_color: str = LABEL_COLOR,
        connector_color: str = CONNECTOR_COLOR,
        font_family: str = FONT_FAMILY,
        **base_options,
    ) -> None:
        super().__init__(**base_options)
        self._kind_colors = {**KIND_COLORS, **(kind_colors or {})}
        self._label_color = label_color
        self._connector_color = connector_color
        self._font_family = font_family

    def render(
        self,
        entries_to_render: LogSequence | Iterable[Any],
        **render_options,
    ) -> str:
        """
        Render the entries to SVG text.

        Parameters
        ----------
        entries_to_render : LogSequence or Iterable
            Entries in causal order.
        **render_options
            - layout_settings: override the renderer's LayoutSettings

        Returns
        -------
        str
            The SVG document.
        """
        return self.render_layout(self._layout_for(entries_to_render, **render_options))

    def render_layout(self, layout: GraphLayout) -> str:
        """Serialize an already computed layout."""
        body_parts = [self._draw_node(node, layout) for node in layout.nodes]
        body_parts.extend(self._draw_connector(connector) for connector in layout.connectors)

        return (
            f'<svg xmlns="{SVG_NAMESPACE}" '
            f'width="{format_number(layout.width)}" height="{format_number(layout.height)}" '
            f'style="font-family: {html.escape(self._font_family)};">'
            f'{"".join(body_parts)}</svg>'
        )

    def _draw_node(self, node: NodePlacement, layout: GraphLayout) -> str:
        """Circle filled by kind, label to its right."""
        radius = layout.settings.node_radius
        fill_color = self._kind_colors[node.entry.kind]
        label_x = node.x + layout.settings.label_offset
        label_y = node.y + radius / 2

        circle = (
            f'<circle cx="{format_number(node.x)}" cy="{format_number(node.y)}" '
            f'r="{format_number(radius)}" fill="{fill_color}" />'
        )
        label = (
            f'<text x="{format_number(label_x)}" y="{format_number(label_y)}" '
            f'font-size="{format_number(radius)}" fill="{self._label_color}">'
            f"{html.escape(node.entry.name, quote=False)}</text>"
        )
        return circle + label

    def _draw_connector(self, connector: ConnectorPlacement) -> str:
        points = " ".join(
            f"{format_number(point_x)},{format_number(point_y)}"
            for point_x, point_y in connector.points
        )
        return (
            f'<polyline points="{points}" stroke="{self._connector_color}" fill="none" />'
        )

    def __repr__(self) -> str:
        return f"<SvgRenderer radius={self.layout_settings.node_radius} font={self._font_family}>"
