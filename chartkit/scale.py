"""Scales mapping data values into scene coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Protocol, Union

_MAX_TICK_STEPS = 10_000
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _round_half_away(x: float) -> float:
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += 1 if x > 0 else -1
    return float(whole)


def nice_step(step: float) -> float:
    """Round a raw step up to 1, 2, 5 or 10 times a power of ten."""
    if not math.isfinite(step) or step <= 0.0:
        return 0.0
    power = math.floor(math.log10(step))
    base = 10.0**power
    error = step / base
    if error >= 7.5:
        nice = 10.0
    elif error >= 3.5:
        nice = 5.0
    elif error >= 1.5:
        nice = 2.0
    else:
        nice = 1.0
    return nice * base


def nice_ticks(start: float, stop: float, count: int) -> list[float]:
    """Evenly spaced "nice" tick values covering ``[start, stop]``."""
    if count == 0:
        return []
    if start == stop:
        return [start]
    lo, hi = (stop, start) if start > stop else (start, stop)
    span = hi - lo
    step = nice_step(span / max(count, 1))
    if step == 0.0:
        return [lo, hi]

    first = math.floor(lo / step) * step
    last = math.ceil(hi / step) * step
    n_f = _round_half_away((last - first) / step)
    n = int(min(n_f, _MAX_TICK_STEPS)) if math.isfinite(n_f) and n_f >= 0.0 else 0
    return [first + step * i for i in range(n + 1)]


@dataclass(frozen=True)
class ScaleLinear:
    """A linear mapping from a continuous domain to a continuous range."""

    domain: tuple[float, float]
    range_: tuple[float, float]

    def map(self, x: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range_
        denom = d1 - d0
        if denom == 0.0:
            return r0
        return r0 + (x - d0) / denom * (r1 - r0)

    def domain_min(self) -> float:
        return self.domain[0]

    def domain_max(self) -> float:
        return self.domain[1]

    def ticks(self, count: int) -> list[float]:
        return nice_ticks(self.domain[0], self.domain[1], count)


@dataclass(frozen=True)
class ScaleLinearSpec:
    """A linear scale's domain and options, before a range is known."""

    domain: tuple[float, float]
    nice: bool = False

    def with_nice(self, nice: bool) -> ScaleLinearSpec:
        return replace(self, nice=nice)

    def resolved_domain(self, tick_count: int) -> tuple[float, float]:
        """The domain, extended to the outer ticks when ``nice`` is set."""
        if not self.nice:
            return self.domain
        ticks = nice_ticks(self.domain[0], self.domain[1], tick_count)
        if len(ticks) >= 2:
            return (ticks[0], ticks[-1])
        return self.domain

    def instantiate(self, range_: tuple[float, float]) -> ScaleLinear:
        return ScaleLinear(self.domain, range_)

    def instantiate_resolved(
        self, range_: tuple[float, float], tick_count: int
    ) -> ScaleLinear:
        return ScaleLinear(self.resolved_domain(tick_count), range_)


@dataclass(frozen=True)
class ScaleBand:
    """A discrete band scale for categorical charts."""

    range_: tuple[float, float]
    count: int
    padding_inner: float = 0.1
    padding_outer: float = 0.1

    def with_padding(self, inner: float, outer: float) -> ScaleBand:
        return replace(
            self, padding_inner=max(inner, 0.0), padding_outer=max(outer, 0.0)
        )

    def band_width(self) -> float:
        r0, r1 = self.range_
        n = float(self.count)
        if n <= 0.0:
            return 0.0
        span = abs(r1 - r0)
        denom = n + self.padding_inner * (n - 1.0) + 2.0 * self.padding_outer
        return 0.0 if denom == 0.0 else span / denom

    def x(self, index: int) -> float:
        """Start position of the band at ``index``."""
        r0, r1 = self.range_
        bw = self.band_width()
        step = bw * (1.0 + self.padding_inner)
        start = min(r0, r1)
        return start + bw * self.padding_outer + step * index


@dataclass(frozen=True)
class ScaleBandSpec:
    """A band scale's count and padding, before a range is known."""

    count: int
    padding_inner: float = 0.1
    padding_outer: float = 0.1

    def with_padding(self, inner: float, outer: float) -> ScaleBandSpec:
        return replace(
            self, padding_inner=max(inner, 0.0), padding_outer=max(outer, 0.0)
        )

    def instantiate(self, range_: tuple[float, float]) -> ScaleBand:
        return ScaleBand(range_, self.count).with_padding(
            self.padding_inner, self.padding_outer
        )


@dataclass(frozen=True)
class ScalePoint:
    """A discrete point scale: a band scale without width."""

    range_: tuple[float, float]
    count: int
    padding: float = 0.5

    def with_padding(self, padding: float) -> ScalePoint:
        return replace(self, padding=max(padding, 0.0))

    def step(self) -> float:
        r0, r1 = self.range_
        n = float(self.count)
        if n <= 1.0:
            return 0.0
        span = abs(r1 - r0)
        denom = (n - 1.0) + 2.0 * self.padding
        return 0.0 if denom == 0.0 else span / denom

    def x(self, index: int) -> float:
        r0, r1 = self.range_
        step = self.step()
        start = min(r0, r1)
        return start + self.padding * step + step * index


@dataclass(frozen=True)
class ScalePointSpec:
    """A point scale's count and padding, before a range is known."""

    count: int
    padding: float = 0.5

    def with_padding(self, padding: float) -> ScalePointSpec:
        return replace(self, padding=max(padding, 0.0))

    def instantiate(self, range_: tuple[float, float]) -> ScalePoint:
        return ScalePoint(range_, self.count).with_padding(self.padding)


def _valid_log_base(base: float) -> bool:
    return math.isfinite(base) and base > 0.0 and base != 1.0


def _ln(x: float) -> float:
    if math.isnan(x) or x < 0.0:
        return math.nan
    if x == 0.0:
        return -math.inf
    return math.log(x)


@dataclass(frozen=True)
class ScaleLog:
    """A logarithmic mapping from a positive domain to a range."""

    domain: tuple[float, float]
    range_: tuple[float, float]
    base: float = 10.0

    def with_base(self, base: float) -> ScaleLog:
        """Use ``base``; invalid bases fall back to 10."""
        return replace(self, base=base if _valid_log_base(base) else 10.0)

    def log_base(self, x: float) -> float:
        denom = _ln(self.base)
        return _ln(x) if denom == 0.0 else _ln(x) / denom

    def map(self, x: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range_
        if x <= 0.0 or d0 <= 0.0 or d1 <= 0.0:
            return r0
        ld0 = self.log_base(d0)
        ld1 = self.log_base(d1)
        denom = ld1 - ld0
        if denom == 0.0:
            return r0
        return r0 + (self.log_base(x) - ld0) / denom * (r1 - r0)

    def ticks(self, count: int) -> list[float]:
        """Powers of the base spanning the domain, at most ``count`` unless zero."""
        lo, hi = self.domain
        if lo > hi:
            lo, hi = hi, lo
        if lo <= 0.0 or not math.isfinite(lo) or not math.isfinite(hi):
            return []
        min_e = min(max(math.floor(self.log_base(lo)), _I32_MIN), _I32_MAX)
        max_e = min(max(math.ceil(self.log_base(hi)), _I32_MIN), _I32_MAX)
        out: list[float] = []
        for e in range(min_e, max_e + 1):
            out.append(self.base**e)
            if count != 0 and len(out) >= count:
                break
        return out

    def domain_min(self) -> float:
        return self.domain[0]

    def domain_max(self) -> float:
        return self.domain[1]


@dataclass(frozen=True)
class ScaleLogSpec:
    """A log scale's domain and base, before a range is known."""

    domain: tuple[float, float]
    base: float = 10.0

    def with_base(self, base: float) -> ScaleLogSpec:
        return replace(self, base=base)

    def instantiate(self, range_: tuple[float, float]) -> ScaleLog:
        return ScaleLog(self.domain, range_).with_base(self.base)


class _Continuous(Protocol):
    def map(self, x: float) -> float: ...

    def ticks(self, count: int) -> list[float]: ...

    def domain_min(self) -> float: ...

    def domain_max(self) -> float: ...


@dataclass(frozen=True)
class ScaleContinuous:
    """Any continuous scale instance behind one interface."""

    scale: Union[ScaleLinear, ScaleLog, _Continuous]

    def map(self, x: float) -> float:
        return self.scale.map(x)

    def ticks(self, count: int) -> list[float]:
        return self.scale.ticks(count)

    def domain_min(self) -> float:
        return self.scale.domain_min()

    def domain_max(self) -> float:
        return self.scale.domain_max()