"""Axis specification: tick generation, scale instantiation and measurement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Union

from chartkit.axis_geometry import tick_step
from chartkit.axis_style import AxisOrient, AxisStyle, GridStyle
from chartkit.format import format_tick_with_step
from chartkit.layout import Rect
from chartkit.measure import TextMeasurer
from chartkit.scale import (
    ScaleBand,
    ScaleBandSpec,
    ScaleContinuous,
    ScaleLinear,
    ScaleLinearSpec,
    ScaleLog,
    ScaleLogSpec,
    ScalePoint,
    ScalePointSpec,
)

AxisScale = Union[ScaleLinearSpec, ScaleLogSpec, ScalePointSpec, ScaleBandSpec]
TickFormatter = Callable[[float, float], str]

_HORIZONTAL = (AxisOrient.TOP, AxisOrient.BOTTOM)


def _default_tick_padding(orient: AxisOrient) -> float:
    return 12.0 if orient in _HORIZONTAL else 6.0


@dataclass(frozen=True)
class AxisSpec:
    """An axis: a scale plus placement, tick and label options.

    ``tick_padding`` defaults to 12 for top/bottom axes and 6 for left/right axes.
    """

    id_base: int
    scale: AxisScale
    orient: AxisOrient
    tick_count: int = 10
    tick_size: float = 5.0
    ticks: bool = True
    labels: bool = True
    show_domain: bool = True
    tick_padding: Optional[float] = None
    label_padding: float = 0.0
    style: AxisStyle = field(default_factory=AxisStyle)
    grid: Optional[GridStyle] = None
    title: Optional[str] = None
    title_offset: float = 10.0
    tick_formatter: Optional[TickFormatter] = field(default=None, compare=False)
    label_angle: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(
            self.scale, (ScaleLinearSpec, ScaleLogSpec, ScalePointSpec, ScaleBandSpec)
        ):
            raise TypeError(f"unsupported axis scale: {type(self.scale).__name__}")
        if self.tick_padding is None:
            object.__setattr__(self, "tick_padding", _default_tick_padding(self.orient))

    @staticmethod
    def bottom(id_base: int, scale: AxisScale) -> AxisSpec:
        return AxisSpec(id_base, scale, AxisOrient.BOTTOM)

    @staticmethod
    def top(id_base: int, scale: AxisScale) -> AxisSpec:
        return AxisSpec(id_base, scale, AxisOrient.TOP)

    @staticmethod
    def left(id_base: int, scale: AxisScale) -> AxisSpec:
        return AxisSpec(id_base, scale, AxisOrient.LEFT)

    @staticmethod
    def right(id_base: int, scale: AxisScale) -> AxisSpec:
        return AxisSpec(id_base, scale, AxisOrient.RIGHT)

    def with_tick_count(self, tick_count: int) -> AxisSpec:
        return replace(self, tick_count=tick_count)

    def with_tick_size(self, tick_size: float) -> AxisSpec:
        return replace(self, tick_size=tick_size)

    def with_ticks(self, ticks: bool) -> AxisSpec:
        return replace(self, ticks=ticks)

    def with_labels(self, labels: bool) -> AxisSpec:
        return replace(self, labels=labels)

    def with_domain(self, domain: bool) -> AxisSpec:
        return replace(self, show_domain=domain)

    def with_tick_padding(self, tick_padding: float) -> AxisSpec:
        return replace(self, tick_padding=tick_padding)

    def with_label_padding(self, label_padding: float) -> AxisSpec:
        return replace(self, label_padding=label_padding)

    def with_tick_formatter(self, formatter: TickFormatter) -> AxisSpec:
        """Use ``formatter(value, step)`` for measuring and rendering tick labels."""
        return replace(self, tick_formatter=formatter)

    def with_label_angle(self, angle_degrees: float) -> AxisSpec:
        return replace(self, label_angle=angle_degrees)

    def with_style(self, style: AxisStyle) -> AxisSpec:
        return replace(self, style=style)

    def with_grid(self, grid: GridStyle) -> AxisSpec:
        return replace(self, grid=grid)

    def without_grid(self) -> AxisSpec:
        return replace(self, grid=None)

    def with_title(self, title: str) -> AxisSpec:
        return replace(self, title=title)

    def without_title(self) -> AxisSpec:
        return replace(self, title=None)

    def with_title_offset(self, title_offset: float) -> AxisSpec:
        return replace(self, title_offset=title_offset)

    def with_nice_domain(self, nice_domain: bool) -> AxisSpec:
        """Enable or disable the nice domain; only linear scales are affected."""
        if isinstance(self.scale, ScaleLinearSpec):
            return replace(self, scale=self.scale.with_nice(nice_domain))
        return self

    def _range(self, plot: Rect) -> tuple[float, float]:
        if self.orient in _HORIZONTAL:
            return (plot.x0, plot.x1)
        return (plot.y1, plot.y0)

    def scale_continuous(self, plot: Rect) -> ScaleContinuous:
        """Continuous scale mapping axis values into ``plot``.

        Raises ValueError for a discrete axis scale.
        """
        range_ = self._range(plot)
        if isinstance(self.scale, ScaleLinearSpec):
            return ScaleContinuous(self.scale.instantiate_resolved(range_, self.tick_count))
        if isinstance(self.scale, ScaleLogSpec):
            return ScaleContinuous(self.scale.instantiate(range_))
        raise ValueError("scale_continuous called on a discrete axis scale")

    def scale_point(self, plot: Rect) -> ScalePoint:
        """Point scale mapping indices into ``plot``; ValueError for other scales."""
        if isinstance(self.scale, ScalePointSpec):
            return self.scale.instantiate(self._range(plot))
        raise ValueError("scale_point called on a non-point axis scale")

    def scale_band(self, plot: Rect) -> ScaleBand:
        """Band scale mapping indices into ``plot``; ValueError for other scales."""
        if isinstance(self.scale, ScaleBandSpec):
            return self.scale.instantiate(self._range(plot))
        raise ValueError("scale_band called on a non-band axis scale")

    def tick_values(self) -> tuple[list[float], float]:
        """Tick values and the step used to format them."""
        scale = self.scale
        if isinstance(scale, ScaleLinearSpec):
            domain = scale.resolved_domain(self.tick_count)
            ticks = ScaleLinear(domain, (0.0, 1.0)).ticks(self.tick_count)
            return ticks, tick_step(ticks)
        if isinstance(scale, ScaleLogSpec):
            log = ScaleLog(scale.domain, (0.0, 1.0)).with_base(scale.base)
            return log.ticks(self.tick_count), 0.0
        return [float(i) for i in range(scale.count)], 1.0

    def continuous_domain(self) -> Optional[tuple[float, float]]:
        """The effective domain of a continuous scale, or None for discrete scales."""
        if isinstance(self.scale, ScaleLinearSpec):
            return self.scale.resolved_domain(self.tick_count)
        if isinstance(self.scale, ScaleLogSpec):
            return self.scale.domain
        return None

    def format_tick(self, v: float, step: float) -> str:
        if self.tick_formatter is not None:
            return self.tick_formatter(v, step)
        return format_tick_with_step(v, step)

    def _max_label_extent(self, measurer: TextMeasurer) -> float:
        ticks, step = self.tick_values()
        theta = math.radians(self.label_angle)
        sin = abs(math.sin(theta))
        cos = abs(math.cos(theta))
        horizontal = self.orient in _HORIZONTAL
        extent = 0.0
        for v in ticks:
            w, h = measurer.measure(self.format_tick(v, step), self.style.label_font_size)
            rotated = sin * w + cos * h if horizontal else cos * w + sin * h
            extent = max(extent, rotated)
        return extent

    def measure(self, measurer: TextMeasurer) -> float:
        """Thickness the axis needs along its normal direction."""
        tick_extent = abs(self.tick_size) if self.ticks else 0.0
        label_gap = max(self.tick_padding, 0.0) + max(self.label_padding, 0.0)
        label_thickness = label_gap + self._max_label_extent(measurer) if self.labels else 0.0
        out = tick_extent + label_thickness
        if self.title is not None:
            if self.orient in _HORIZONTAL:
                _, th = measurer.measure(self.title, self.style.title_font_size)
            else:
                # A rotated title's height becomes its width.
                th = self.style.title_font_size
            out += max(self.title_offset, 0.0) + th
        return out