"""Stroke and text styling shared by axes and gridlines."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

BLACK: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
"""Opaque black as an RGBA tuple with components in ``[0, 1]``."""

_GRID_ALPHA = 40.0 / 255.0


@dataclass(frozen=True)
class StrokeStyle:
    """A paint and width pair for stroked paths such as rules and ticks."""

    brush: Any = BLACK
    stroke_width: float = 1.0

    @staticmethod
    def solid(brush: Any, stroke_width: float) -> StrokeStyle:
        """A solid stroke with the given paint and width."""
        return StrokeStyle(brush=brush, stroke_width=stroke_width)


def _default_grid_stroke() -> StrokeStyle:
    r, g, b, _ = BLACK
    return StrokeStyle(brush=(r, g, b, _GRID_ALPHA), stroke_width=1.0)


@dataclass(frozen=True)
class AxisStyle:
    """Paints and font sizes for an axis's rules, labels and title."""

    rule: StrokeStyle = field(default_factory=StrokeStyle)
    label_fill: Any = BLACK
    label_font_size: float = 10.0
    title_fill: Any = BLACK
    title_font_size: float = 11.0


@dataclass(frozen=True)
class GridStyle:
    """Stroke used for gridlines spanning the plot area."""

    stroke: StrokeStyle = field(default_factory=_default_grid_stroke)


class AxisOrient(enum.Enum):
    """Which side of the plot an axis is placed on."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"