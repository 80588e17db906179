"""
Unit tests for ConsoleRenderer, log_graph() and the data URL encoding.
"""

import logging
from urllib.parse import unquote

import pytest

from loggraph import log_graph
from loggraph.core.graph_layout import LayoutSettings
from loggraph.core.log_entry import LogEntry, LogSequence
from loggraph.renderers.console_renderer import (
    ConsoleDirective,
    ConsoleRenderer,
    encode_svg_data_url,
)
from loggraph.renderers.svg_renderer import SvgRenderer


class TestEncodeSvgDataUrl:
    """encodeURIComponent-compatible percent-encoding."""

    def test_prefix(self) -> None:
        assert encode_svg_data_url("<svg/>").startswith("data:image/svg+xml,")

    def test_reserved_characters_encoded(self) -> None:
        encoded = encode_svg_data_url('<a b="c"/>#;,')

        assert encoded == "data:image/svg+xml,%3Ca%20b%3D%22c%22%2F%3E%23%3B%2C"

    def test_unreserved_marks_kept(self) -> None:
        assert encode_svg_data_url("-_.!~*'()") == "data:image/svg+xml,-_.!~*'()"

    def test_round_trips_unicode(self) -> None:
        svg_text = "<text>état</text>"

        encoded = encode_svg_data_url(svg_text)

        assert "%C3%A9" in encoded
        assert unquote(encoded.removeprefix("data:image/svg+xml,")) == svg_text


class TestConsoleRenderer:
    """Tests for the single styled write."""

    def test_writes_exactly_once(self, fan_out_sequence: LogSequence, recording_sink) -> None:
        ConsoleRenderer(sink=recording_sink).render(fan_out_sequence)

        assert len(recording_sink.writes) == 1

    def test_format_string(self, fan_out_sequence: LogSequence, recording_sink) -> None:
        ConsoleRenderer(sink=recording_sink).render(fan_out_sequence)

        format_string, _ = recording_sink.writes[0]
        assert format_string == "%c "

    def test_style_layout(self, fan_out_sequence: LogSequence, recording_sink) -> None:
        directive = ConsoleRenderer(sink=recording_sink).render(fan_out_sequence)

        expected_style = (
            "font-size:60px; "
            f"background: url({encode_svg_data_url(directive.svg)}) no-repeat; "
            "font-family: monospace;"
        )
        assert recording_sink.writes[0] == ("%c ", expected_style)

    def test_display_height_trims_two_margins(self, linear_chain_sequence, recording_sink) -> None:
        """Height 150 minus 2 * 30."""
        directive = ConsoleRenderer(sink=recording_sink).render(linear_chain_sequence)

        assert directive.style.startswith("font-size:90px;")

    def test_empty_sequence_still_writes(self, recording_sink) -> None:
        directive = ConsoleRenderer(sink=recording_sink).render([])

        assert len(recording_sink.writes) == 1
        assert directive.style.startswith("font-size:-30px;")

    def test_returns_directive(self, fan_out_sequence: LogSequence, recording_sink) -> None:
        directive = ConsoleRenderer(sink=recording_sink).render(fan_out_sequence)

        assert isinstance(directive, ConsoleDirective)
        assert directive.svg == SvgRenderer().render(fan_out_sequence)

    def test_sink_override_per_call(self, fan_out_sequence, recording_sink) -> None:
        class OtherSink:
            def __init__(self) -> None:
                self.writes = []

            def write(self, format_string: str, style: str) -> None:
                self.writes.append((format_string, style))

        other_sink = OtherSink()

        ConsoleRenderer(sink=recording_sink).render(fan_out_sequence, sink=other_sink)

        assert recording_sink.writes == []
        assert len(other_sink.writes) == 1

    def test_svg_renderer_settings_used(self, fan_out_sequence, recording_sink) -> None:
        svg_renderer = SvgRenderer(layout_settings=LayoutSettings(node_radius=5))

        directive = ConsoleRenderer(svg_renderer=svg_renderer, sink=recording_sink).render(
            fan_out_sequence
        )

        # height 60 minus 2 * 15
        assert directive.style.startswith("font-size:30px;")
        assert 'r="5"' in directive.svg

    def test_identical_input_identical_output(self, recording_sink) -> None:
        build = lambda: [LogEntry.action("a", "A"), LogEntry.state("b", "B", cause="a")]
        renderer = ConsoleRenderer(sink=recording_sink)

        renderer.render(build())
        renderer.render(build())

        assert recording_sink.writes[0] == recording_sink.writes[1]


class TestLogGraph:
    """Tests for the module-level entry point."""

    def test_returns_none_and_writes(self, fan_out_sequence, recording_sink) -> None:
        assert log_graph(fan_out_sequence, sink=recording_sink) is None
        assert len(recording_sink.writes) == 1

    def test_default_sink_logs(self, fan_out_sequence, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="loggraph.console"):
            log_graph(fan_out_sequence)

        console_records = [r for r in caplog.records if r.name == "loggraph.console"]
        assert len(console_records) == 1
        assert console_records[0].getMessage().startswith("%c font-size:60px;")
