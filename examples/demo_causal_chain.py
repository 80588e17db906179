#!/usr/bin/env python
"""
loggraph Demo

This script demonstrates the full loggraph workflow:
1. Build a small causal log by hand (no tracking subsystem needed)
2. Write the graph to the console sink via logging
3. Save the raw SVG next to this script for a closer look

Run with: python examples/demo_causal_chain.py
"""

import logging
from pathlib import Path

from loggraph import ROOT_CAUSE, LogEntry, LogSequence, SvgRenderer, log_graph


def create_demo_log() -> LogSequence:
    """
    A click that updates a counter, whose change re-renders two views.

    The last entry points at a cause that was never logged, so it is
    drawn without a connector.
    """
    click = LogEntry.action("click", "onClick", cause=ROOT_CAUSE)
    increment = LogEntry.action("increment", "counter.increment", cause=click)
    counter = LogEntry.state("counter", "counter", cause=increment)
    header = LogEntry.state("header", "headerView", cause=counter)
    badge = LogEntry.state("badge", "badgeView", cause=counter)
    orphan = LogEntry.state("orphan", "prefetch", cause="timer")
    return LogSequence([click, increment, counter, header, badge, orphan])


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    demo_log = create_demo_log()
    log_graph(demo_log)

    output_path = Path(__file__).with_name("demo_causal_chain.svg")
    output_path.write_text(SvgRenderer().render(demo_log), encoding="utf-8")
    print(f"Saved SVG to {output_path}")


if __name__ == "__main__":
    main()
