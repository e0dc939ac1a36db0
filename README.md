# chartkit

chartkit gives you the small pieces that sit underneath a chart:
scales that map data values to screen coordinates, "nice" tick generation,
tick label formatting, text measurement for guides, axis measurement, and a
measure/arrange layout pass that places the plot, axes, title and legend.

It has no third-party dependencies.

## Installation

```
pip install chartkit
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "chartkit[test]"
pytest
```

## Scales

`chartkit.scale` holds immutable scale objects. Methods named `with_*`
return a changed copy.

```python
from chartkit.scale import ScaleLinear, ScaleLinearSpec, ScaleLog, ScaleBand, ScalePoint

linear = ScaleLinear((0.0, 10.0), (0.0, 100.0))
linear.map(2.5)        # 25.0
linear.ticks(5)        # [0.0, 2.0, 4.0, 6.0, 8.0, 10.0]

spec = ScaleLinearSpec((0.0, 3.29)).with_nice(True)
spec.resolved_domain(6)                 # domain extended to the outer nice ticks
scale = spec.instantiate_resolved((0.0, 200.0), 6)

log = ScaleLog((1.0, 100.0), (0.0, 10.0))
log.map(10.0)          # 5.0
log.ticks(10)          # [1.0, 10.0, 100.0]

band = ScaleBand((0.0, 100.0), 4)
band.band_width(), band.x(0)

point = ScalePoint((0.0, 100.0), 5)
point.x(2)
```

- `ScaleLinearSpec`, `ScaleLogSpec`, `ScaleBandSpec` and `ScalePointSpec`
  describe a scale before its output range is known; `instantiate(range_)`
  turns them into a concrete scale.
- `ScaleLog.with_base` falls back to base 10 for a base that is not finite,
  not positive, or equal to 1. `ScaleLog.ticks` returns powers of the base
  covering the domain, at most `count` of them (no cap when `count` is 0).
- `ScaleContinuous` wraps a linear or log scale (or any object with `map`,
  `ticks`, `domain_min` and `domain_max`) behind that single interface.
- `nice_ticks(start, stop, count)` and `nice_step(step)` are the tick
  generators the linear scale uses; steps are rounded to 1, 2, 5 or 10 times
  a power of ten.

## Tick labels

```python
from chartkit.format import format_tick_with_step

format_tick_with_step(5.0, 2.5)   # "5.0"
format_tick_with_step(0.25, 0.25) # "0.25"
format_tick_with_step(-0.0, 2.0)  # "0"
```

The number of decimals (at most six) is the smallest that makes the tick step
a whole number, so every label on an axis has the same precision.

## Text measurement

Guides need to know how much room their text takes before they are placed.
Anything with a `measure(text, font_size)` method returning `(width, height)`
satisfies the `TextMeasurer` protocol. `HeuristicTextMeasurer` assumes 0.6 em
per character and a height of one em.

## Axes

```python
from chartkit.axis import AxisSpec
from chartkit.measure import HeuristicTextMeasurer
from chartkit.scale import ScaleLinearSpec

axis = (
    AxisSpec.left(1, ScaleLinearSpec((0.0, 10.0)))
    .with_tick_count(5)
    .with_title("Value")
)
thickness = axis.measure(HeuristicTextMeasurer())
```

An `AxisSpec` takes a `ScaleLinearSpec`, `ScaleLogSpec`, `ScalePointSpec` or
`ScaleBandSpec`; anything else raises `TypeError`. It is placed on one of the
four sides given by `AxisOrient`; `tick_padding` defaults to 12 for top and
bottom axes and 6 for left and right ones.

- `tick_values()` returns the tick values and the step used to format them.
- `format_tick(v, step)` uses the formatter set with `with_tick_formatter`,
  or `format_tick_with_step`.
- `measure(measurer)` returns the thickness the axis needs across its length:
  tick length, label gap, the largest (rotated) label extent and the title.
- `scale_continuous(plot)`, `scale_point(plot)` and `scale_band(plot)` build
  the scale for a plot `Rect`, and raise `ValueError` when the axis scale is
  of another kind.

Styling lives in `chartkit.axis_style` (`AxisStyle`, `GridStyle`,
`StrokeStyle`, with colours as RGBA tuples, `BLACK` by default), and
`chartkit.axis_geometry` holds the small helpers `tick_step`,
`estimate_text_width`, `discrete_index` and `push_if_missing`.

## Layout

```python
from chartkit.layout import ChartLayout, ChartLayoutSpec, Size

spec = ChartLayoutSpec(
    title_top=20.0,
    plot_size=Size(width=400.0, height=300.0),
    outer_padding=10.0,
    axis_left=thickness,
    axis_bottom=30.0,
)
layout = ChartLayout.arrange(spec)
layout.plot, layout.data, layout.axis_left, layout.view
```

Give `view_size` instead of `plot_size` to fit the plot into fixed outer
bounds. `plot_padding` insets the `data` rectangle inside `plot`, and axes
are placed against `data`. A legend is reserved by passing a
`(Size, LegendPlacement)` pair; `LegendOrient` chooses a side, a corner
inside the plot, or the explicit `x`/`y` of the placement (`NONE`).

`ChartLayout.measure_axis_left` and `ChartLayout.measure_axis_bottom` are
shortcuts for sizing an axis from a list of labels or a sample text height.

## What it does not do

chartkit computes numbers and rectangles only. It does not draw anything,
does not produce marks, paths or text items for axes, gridlines, legends or
series, has no time scale, and does not render to any output format.