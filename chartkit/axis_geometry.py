"""Small numeric helpers used when placing axis ticks, labels and gridlines."""

from __future__ import annotations

import math
from typing import Iterable

_GLYPH_WIDTH_EM = 0.6
_MAX_DISCRETE_INDEX = 10_000
_TICK_EPSILON = 1.0e-9


def _round_half_away(x: float) -> float:
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += 1 if x > 0 else -1
    return float(whole)


def tick_step(ticks: Iterable[float]) -> float:
    """Smallest gap between neighbouring ticks, or 0 when there is none."""
    values = list(ticks)
    gaps = (abs(b - a) for a, b in zip(values, values[1:]))
    step = min((gap for gap in gaps if not math.isnan(gap)), default=math.inf)
    return step if math.isfinite(step) else 0.0


def estimate_text_width(text: str, font_size: float) -> float:
    """Rough text width, assuming each glyph is about 0.6em wide."""
    return _GLYPH_WIDTH_EM * font_size * len(text)


def discrete_index(v: float) -> int:
    """Nearest non-negative index for a tick value, capped at 10,000."""
    if not math.isfinite(v) or v < 0.0:
        return 0
    return int(min(_round_half_away(v), float(_MAX_DISCRETE_INDEX)))


def push_if_missing(ticks: Iterable[float], v: float) -> list[float]:
    """Return the ticks with ``v`` appended unless it is non-finite or already present."""
    out = list(ticks)
    if not math.isfinite(v):
        return out
    if any(abs(t - v) <= _TICK_EPSILON for t in out):
        return out
    out.append(v)
    return out