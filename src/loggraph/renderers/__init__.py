"""
Visualization backends for causal log graphs.

Layout lives in loggraph.core; renderers only turn placements into
output. SvgRenderer produces the document, ConsoleRenderer wraps it in a
styled console write.
"""

from loggraph.renderers.base_renderer import BaseRenderer
from loggraph.renderers.console_renderer import (
    ConsoleDirective,
    ConsoleRenderer,
    encode_svg_data_url,
    log_graph,
)
from loggraph.renderers.console_sink import DiagnosticSink, LoggingSink
from loggraph.renderers.svg_renderer import SvgRenderer

__all__ = [
    "BaseRenderer",
    "ConsoleDirective",
    "ConsoleRenderer",
    "DiagnosticSink",
    "LoggingSink",
    "SvgRenderer",
    "encode_svg_data_url",
    "log_graph",
]
