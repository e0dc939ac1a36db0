"""Tick label formatting."""

from __future__ import annotations

import math

_MAX_STEP_DECIMALS = 6


def _round_half_away(x: float) -> float:
    """Round to the nearest integer, with ties going away from zero."""
    if not math.isfinite(x):
        return x
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += 1 if x > 0 else -1
    return math.copysign(float(whole), x) if whole == 0 else float(whole)


def _is_approx_integer(x: float) -> bool:
    if not math.isfinite(x):
        return False
    nearest = _round_half_away(x)
    return abs(x - nearest) <= 1e-9 * max(abs(x), 1.0)


def _decimals_for_step(step: float) -> int:
    """Smallest number of decimals that makes ``step`` integral, at most 6."""
    step = abs(step)
    if step == 0.0 or not math.isfinite(step):
        return 0
    for decimals in range(_MAX_STEP_DECIMALS + 1):
        if _is_approx_integer(step * 10.0**decimals):
            return decimals
    return _MAX_STEP_DECIMALS


def _round_to_decimals(x: float, decimals: int) -> float:
    if decimals == 0:
        return _round_half_away(x)
    factor = 10.0 ** min(decimals, 9)
    return _round_half_away(x * factor) / factor


def _non_finite_text(v: float) -> str:
    if math.isnan(v):
        return "NaN"
    return "inf" if v > 0 else "-inf"


def format_tick_with_step(v: float, step: float) -> str:
    """Format a tick value with as many decimals as the tick step needs."""
    if not math.isfinite(v):
        return _non_finite_text(v)
    decimals = _decimals_for_step(step)
    v = _round_to_decimals(v, decimals)
    if v == 0.0:
        v = 0.0  # drop the sign of negative zero
    return f"{v:.{decimals}f}"