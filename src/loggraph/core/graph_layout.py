"""
Deterministic single-column layout for a causal log.

Every node sits in one vertical column. Connectors between a cause and
its effect are three-point polylines whose middle point bulges to the
left. The bulge grows with the rank distance between the two entries
and shrinks as the sequence gets longer, so nearby pairs stay visually
separated while long-range edges never run off the canvas.

The layout is pure data. Renderers decide what the placements look like.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from loggraph.core.log_entry import LogEntry, LogSequence

logger = logging.getLogger(__name__)

DEFAULT_NODE_RADIUS = 10


class LayoutConfigurationError(ValueError):
    """Raised when LayoutSettings would produce a meaningless geometry."""
    pass


@dataclass(frozen=True, slots=True)
class LayoutSettings:
    """
    Geometry constants, all derived from the node radius.

    With the default radius of 10 the horizontal gap is 20, the vertical
    gap 30 and the shift ratio 200.
    """

    node_radius: int = DEFAULT_NODE_RADIUS

    def __post_init__(self) -> None:
        if self.node_radius <= 0:
            raise LayoutConfigurationError(
                f"node_radius must be positive, got {self.node_radius}."
            )

    @property
    def x_gap(self) -> int:
        return self.node_radius * 2

    @property
    def y_gap(self) -> int:
        return self.node_radius * 3

    @property
    def shift_ratio(self) -> int:
        """Horizontal distance a connector bulges when its cause is a whole sequence away."""
        return 10 * self.x_gap

    @property
    def label_offset(self) -> float:
        return self.node_radius * 1.5


class SkipReason(Enum):
    """Why an entry did not get an incoming connector."""

    NO_CAUSE = "cause absent"
    ROOT_CAUSE = "caused by root"
    FIRST_ENTRY = "first entry"
    CAUSE_NOT_FOUND = "cause not found"


@dataclass(frozen=True, slots=True)
class NodePlacement:
    """Where one entry's circle is drawn."""

    rank: int
    entry: LogEntry
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class ConnectorPlacement:
    """A cause → effect polyline: start, bulge, end."""

    cause_rank: int
    effect_rank: int
    start: tuple[int, int]
    middle: tuple[int, int]
    end: tuple[int, int]

    @property
    def points(self) -> tuple[tuple[int, int], ...]:
        return (self.start, self.middle, self.end)


@dataclass(frozen=True, slots=True)
class GraphLayout:
    """
    Result of compute_layout().

    `width` may be fractional for odd radii. `skipped` counts entries that
    got no connector, keyed by SkipReason.
    """

    settings: LayoutSettings
    x: int
    max_shift: int
    width: float
    height: int
    nodes: tuple[NodePlacement, ...]
    connectors: tuple[ConnectorPlacement, ...]
    skipped: Counter = field(default_factory=Counter)

    @property
    def entry_count(self) -> int:
        return len(self.nodes)


def _resolve_cause_ranks(sequence: LogSequence) -> np.ndarray:
    """
    Rank of each entry's cause, or -1 when there is nothing to connect to.

    A cause ranked after its effect counts as not found.
    """
    cause_ranks = np.full(len(sequence), -1, dtype=np.int64)
    for rank, entry in enumerate(sequence):
        cause_rank = sequence.rank_of(entry.cause)
        if cause_rank is not None and cause_rank <= rank:
            cause_ranks[rank] = cause_rank
    return cause_ranks


def _compute_max_shift(cause_ranks: np.ndarray, settings: LayoutSettings) -> int:
    entry_count = len(cause_ranks)
    if entry_count == 0:
        return 0

    ranks = np.arange(entry_count)
    # Unresolved causes sit at zero distance from their effect
    distances = np.where(cause_ranks >= 0, ranks - cause_ranks, 0)
    max_distance = int(distances.max(initial=0))
    return math.floor((max_distance / entry_count) * settings.shift_ratio / 2)


def _classify_skip(entry: LogEntry, rank: int, cause_rank: int) -> SkipReason | None:
    if not entry.has_real_cause:
        return SkipReason.NO_CAUSE if entry.cause is None else SkipReason.ROOT_CAUSE
    if rank == 0:
        return SkipReason.FIRST_ENTRY
    if cause_rank < 0:
        return SkipReason.CAUSE_NOT_FOUND
    return None


def label_length(name: str) -> int:
    """
    Label length in UTF-16 code units.

    Characters outside the Basic Multilingual Plane (most emoji) count
    twice, matching how consoles measure string length.
    """
    return len(name.encode("utf-16-le", errors="surrogatepass")) // 2


def compute_layout(
    sequence: LogSequence,
    settings: LayoutSettings | None = None,
) -> GraphLayout:
    """
    Place nodes and connectors for `sequence`.

    Never raises for malformed causal data: entries whose cause cannot be
    drawn are counted in `GraphLayout.skipped` and otherwise ignored.

    Parameters
    ----------
    sequence : LogSequence
        Entries in causal order.
    settings : LayoutSettings, optional
        Geometry constants. Defaults to a node radius of 10.

    Returns
    -------
    GraphLayout
    """
    if settings is None:
        settings = LayoutSettings()

    radius = settings.node_radius
    x_gap = settings.x_gap
    y_gap = settings.y_gap
    shift_ratio = settings.shift_ratio
    entry_count = len(sequence)

    cause_ranks = _resolve_cause_ranks(sequence)
    max_shift = _compute_max_shift(cause_ranks, settings)
    x = max_shift + x_gap

    # === Nodes ===
    nodes = []
    y = y_gap
    width: float = x
    for rank, entry in enumerate(sequence):
        nodes.append(NodePlacement(rank=rank, entry=entry, x=x, y=y))
        y += y_gap
        width = max(width, x + (label_length(entry.name) * radius) / 2 + x_gap)

    # === Connectors ===
    connectors = []
    skipped: Counter = Counter()
    line_x = math.floor(x - x_gap / 2)
    for effect_rank, entry in enumerate(sequence):
        cause_rank = int(cause_ranks[effect_rank])
        skip_reason = _classify_skip(entry, effect_rank, cause_rank)
        if skip_reason is not None:
            skipped[skip_reason] += 1
            continue

        distance = effect_rank - cause_rank
        shift = distance / entry_count
        shift_x = math.floor(x - shift * shift_ratio - x_gap / 2)
        shift_y = math.floor((cause_rank + distance / 2) * y_gap) + y_gap

        connectors.append(
            ConnectorPlacement(
                cause_rank=cause_rank,
                effect_rank=effect_rank,
                start=(line_x, cause_rank * y_gap + y_gap),
                middle=(shift_x, shift_y),
                end=(line_x, effect_rank * y_gap + y_gap),
            )
        )

    if skipped[SkipReason.CAUSE_NOT_FOUND]:
        logger.debug(
            "%d connector(s) skipped: cause not found in sequence",
            skipped[SkipReason.CAUSE_NOT_FOUND],
        )
    logger.debug(
        "Laid out %d node(s) and %d connector(s) on a %sx%s canvas",
        entry_count,
        len(connectors),
        width,
        y,
    )

    return GraphLayout(
        settings=settings,
        x=x,
        max_shift=max_shift,
        width=width,
        height=y,
        nodes=tuple(nodes),
        connectors=tuple(connectors),
        skipped=skipped,
    )
