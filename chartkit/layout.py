"""Measure/arrange layout for a plot area and the guides around it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional

from chartkit.measure import TextMeasurer


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by two corners."""

    x0: float
    y0: float
    x1: float
    y1: float

    def width(self) -> float:
        return self.x1 - self.x0

    def height(self) -> float:
        return self.y1 - self.y0


@dataclass(frozen=True)
class Size:
    """A width/height pair in chart coordinate units."""

    width: float = 0.0
    height: float = 0.0


class LegendOrient(enum.Enum):
    """Where a legend is placed relative to the plot."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"
    NONE = "none"


_OUTSIDE_ORIENTS = {
    LegendOrient.LEFT,
    LegendOrient.RIGHT,
    LegendOrient.TOP,
    LegendOrient.BOTTOM,
}


@dataclass(frozen=True)
class LegendPlacement:
    """Legend orientation, offset, and explicit position for ``NONE``."""

    orient: LegendOrient = LegendOrient.RIGHT
    offset: float = 18.0
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class ChartLayoutSpec:
    """Layout inputs: plot size, guide thicknesses and an optional legend."""

    title_top: Optional[float] = None
    plot_size: Size = field(default_factory=Size)
    view_size: Optional[Size] = None
    outer_padding: float = 0.0
    plot_padding: float = 0.0
    axis_left: Optional[float] = None
    axis_right: Optional[float] = None
    axis_top: Optional[float] = None
    axis_bottom: Optional[float] = None
    legend: Optional[tuple[Size, LegendPlacement]] = None


def _thickness(value: Optional[float]) -> float:
    return max(value if value is not None else 0.0, 0.0)


def _legend_rect(
    plot: Rect,
    axis_left_w: float,
    axis_right_w: float,
    axis_top_h: float,
    axis_bottom_h: float,
    size: Size,
    placement: LegendPlacement,
) -> Rect:
    w = max(size.width, 0.0)
    h = max(size.height, 0.0)
    offset = max(placement.offset, 0.0)
    orient = placement.orient

    if orient is LegendOrient.RIGHT:
        x0 = plot.x1 + axis_right_w + offset
        return Rect(x0, plot.y0, x0 + w, plot.y0 + h)
    if orient is LegendOrient.LEFT:
        x1 = plot.x0 - axis_left_w - offset
        return Rect(x1 - w, plot.y0, x1, plot.y0 + h)
    if orient is LegendOrient.TOP:
        y1 = plot.y0 - axis_top_h - offset
        return Rect(plot.x0, y1 - h, plot.x0 + w, y1)
    if orient is LegendOrient.BOTTOM:
        y0 = plot.y1 + axis_bottom_h + offset
        return Rect(plot.x0, y0, plot.x0 + w, y0 + h)
    if orient is LegendOrient.TOP_LEFT:
        return Rect(plot.x0 + offset, plot.y0 + offset, plot.x0 + offset + w, plot.y0 + offset + h)
    if orient is LegendOrient.TOP_RIGHT:
        return Rect(plot.x1 - offset - w, plot.y0 + offset, plot.x1 - offset, plot.y0 + offset + h)
    if orient is LegendOrient.BOTTOM_LEFT:
        return Rect(plot.x0 + offset, plot.y1 - offset - h, plot.x0 + offset + w, plot.y1 - offset)
    if orient is LegendOrient.BOTTOM_RIGHT:
        return Rect(plot.x1 - offset - w, plot.y1 - offset - h, plot.x1 - offset, plot.y1 - offset)
    return Rect(placement.x, placement.y, placement.x + w, placement.y + h)


@dataclass(frozen=True)
class ChartLayout:
    """Result of the arrange pass: the rectangles reserved for each part."""

    view: Rect
    title_top: Optional[Rect]
    plot: Rect
    data: Rect
    axis_left: Optional[Rect]
    axis_right: Optional[Rect]
    axis_top: Optional[Rect]
    axis_bottom: Optional[Rect]
    legend: Optional[Rect]

    @staticmethod
    def arrange(spec: ChartLayoutSpec) -> ChartLayout:
        """Compute a layout from ``spec``."""
        outer_padding = max(spec.outer_padding, 0.0)
        plot_padding = max(spec.plot_padding, 0.0)
        title_top_h = _thickness(spec.title_top)
        axis_left_w = _thickness(spec.axis_left)
        axis_right_w = _thickness(spec.axis_right)
        axis_top_h = _thickness(spec.axis_top)
        axis_bottom_h = _thickness(spec.axis_bottom)

        margin_left = outer_padding + axis_left_w
        margin_right = outer_padding + axis_right_w
        margin_top = outer_padding + title_top_h + axis_top_h
        margin_bottom = outer_padding + axis_bottom_h

        if spec.legend is not None:
            legend_size, placement = spec.legend
            if placement.orient in _OUTSIDE_ORIENTS:
                offset = max(placement.offset, 0.0)
                extent_w = max(legend_size.width, 0.0) + offset
                extent_h = max(legend_size.height, 0.0) + offset
                if placement.orient is LegendOrient.LEFT:
                    margin_left += extent_w
                elif placement.orient is LegendOrient.RIGHT:
                    margin_right += extent_w
                elif placement.orient is LegendOrient.TOP:
                    margin_top += extent_h
                else:
                    margin_bottom += extent_h

        if spec.view_size is not None:
            v = spec.view_size
            plot_w = max(max(v.width, 0.0) - margin_left - margin_right, 0.0)
            plot_h = max(max(v.height, 0.0) - margin_top - margin_bottom, 0.0)
        else:
            plot_w = max(spec.plot_size.width, 0.0)
            plot_h = max(spec.plot_size.height, 0.0)

        plot = Rect(margin_left, margin_top, margin_left + plot_w, margin_top + plot_h)

        inset_x = min(plot_padding, 0.5 * plot.width())
        inset_y = min(plot_padding, 0.5 * plot.height())
        data = Rect(
            plot.x0 + inset_x,
            plot.y0 + inset_y,
            plot.x1 - inset_x,
            plot.y1 - inset_y,
        )

        # Axes sit next to the data rectangle so scale mapping matches the marks.
        axis_left = (
            Rect(data.x0 - axis_left_w, data.y0, data.x0, data.y1) if axis_left_w > 0.0 else None
        )
        axis_right = (
            Rect(data.x1, data.y0, data.x1 + axis_right_w, data.y1) if axis_right_w > 0.0 else None
        )
        axis_top = (
            Rect(data.x0, data.y0 - axis_top_h, data.x1, data.y0) if axis_top_h > 0.0 else None
        )
        axis_bottom = (
            Rect(data.x0, data.y1, data.x1, data.y1 + axis_bottom_h)
            if axis_bottom_h > 0.0
            else None
        )

        legend = None
        if spec.legend is not None:
            legend_size, placement = spec.legend
            legend = _legend_rect(
                data,
                axis_left_w,
                axis_right_w,
                axis_top_h,
                axis_bottom_h,
                legend_size,
                placement,
            )

        view_size = spec.view_size or Size(
            margin_left + plot_w + margin_right,
            margin_top + plot_h + margin_bottom,
        )
        view = Rect(0.0, 0.0, view_size.width, view_size.height)

        title_top = (
            Rect(0.0, outer_padding, view.x1, outer_padding + title_top_h)
            if title_top_h > 0.0
            else None
        )

        return ChartLayout(
            view=view,
            title_top=title_top,
            plot=plot,
            data=data,
            axis_left=axis_left,
            axis_right=axis_right,
            axis_top=axis_top,
            axis_bottom=axis_bottom,
            legend=legend,
        )

    @staticmethod
    def measure_axis_left(
        measurer: TextMeasurer,
        tick_labels: Iterable[str],
        tick_size: float,
        tick_padding: float,
        label_padding: float,
        font_size: float,
    ) -> float:
        """Thickness of a left axis whose widest label sets the label extent."""
        max_w = max(
            (measurer.measure(label, font_size)[0] for label in tick_labels),
            default=0.0,
        )
        max_w = max(max_w, 0.0)
        return abs(tick_size) + max(tick_padding, 0.0) + max(label_padding, 0.0) + max_w

    @staticmethod
    def measure_axis_bottom(
        measurer: TextMeasurer,
        tick_size: float,
        tick_padding: float,
        label_padding: float,
        font_size: float,
    ) -> float:
        """Thickness of a bottom axis, using the height of sample text."""
        _, h = measurer.measure("Mg", font_size)
        return abs(tick_size) + max(tick_padding, 0.0) + max(label_padding, 0.0) + h