import pytest

from chartkit.layout import (
    ChartLayout,
    ChartLayoutSpec,
    LegendOrient,
    LegendPlacement,
    Rect,
    Size,
)
from chartkit.measure import HeuristicTextMeasurer


def test_title_reserves_space_above_plot():
    spec = ChartLayoutSpec(
        title_top=20.0,
        plot_size=Size(100.0, 50.0),
        view_size=None,
        outer_padding=10.0,
        plot_padding=0.0,
        axis_left=30.0,
        axis_right=None,
        axis_top=12.0,
        axis_bottom=18.0,
        legend=None,
    )
    layout = ChartLayout.arrange(spec)
    title = layout.title_top
    assert title is not None
    assert title.y0 == pytest.approx(10.0)
    assert title.y1 == pytest.approx(30.0)
    assert layout.plot.y0 == pytest.approx(10.0 + 20.0 + 12.0)
    assert layout.view.y1 == pytest.approx(10.0 + 20.0 + 12.0 + 50.0 + 10.0 + 18.0)


def test_rect_width_and_height():
    r = Rect(10.0, 20.0, 40.0, 70.0)
    assert r.width() == 30.0
    assert r.height() == 50.0


def test_missing_guides_produce_no_rects():
    layout = ChartLayout.arrange(ChartLayoutSpec(plot_size=Size(100.0, 50.0)))
    assert layout.title_top is None
    assert layout.axis_left is None
    assert layout.axis_right is None
    assert layout.axis_top is None
    assert layout.axis_bottom is None
    assert layout.legend is None
    assert layout.plot == Rect(0.0, 0.0, 100.0, 50.0)
    assert layout.data == layout.plot


def test_view_size_fits_plot():
    spec = ChartLayoutSpec(
        view_size=Size(200.0, 100.0),
        outer_padding=5.0,
        axis_left=30.0,
        axis_bottom=20.0,
    )
    layout = ChartLayout.arrange(spec)
    assert layout.view == Rect(0.0, 0.0, 200.0, 100.0)
    assert layout.plot.width() == pytest.approx(200.0 - 35.0 - 5.0)
    assert layout.plot.height() == pytest.approx(100.0 - 5.0 - 25.0)


def test_view_too_small_gives_empty_plot():
    spec = ChartLayoutSpec(view_size=Size(10.0, 10.0), axis_left=50.0)
    layout = ChartLayout.arrange(spec)
    assert layout.plot.width() == 0.0


def test_axes_adjacent_to_data_rect():
    spec = ChartLayoutSpec(
        plot_size=Size(100.0, 80.0),
        axis_left=20.0,
        axis_right=15.0,
        axis_top=10.0,
        axis_bottom=12.0,
        plot_padding=4.0,
    )
    layout = ChartLayout.arrange(spec)
    data = layout.data
    assert layout.axis_left == Rect(data.x0 - 20.0, data.y0, data.x0, data.y1)
    assert layout.axis_right == Rect(data.x1, data.y0, data.x1 + 15.0, data.y1)
    assert layout.axis_top == Rect(data.x0, data.y0 - 10.0, data.x1, data.y0)
    assert layout.axis_bottom == Rect(data.x0, data.y1, data.x1, data.y1 + 12.0)


def test_plot_padding_insets_data_and_is_clamped():
    layout = ChartLayout.arrange(
        ChartLayoutSpec(plot_size=Size(100.0, 10.0), plot_padding=8.0)
    )
    assert layout.data.x0 == pytest.approx(layout.plot.x0 + 8.0)
    assert layout.data.x1 == pytest.approx(layout.plot.x1 - 8.0)
    assert layout.data.height() == pytest.approx(0.0)


def test_negative_inputs_are_clamped():
    layout = ChartLayout.arrange(
        ChartLayoutSpec(
            plot_size=Size(-5.0, 40.0), outer_padding=-3.0, axis_left=-10.0
        )
    )
    assert layout.plot.x0 == 0.0
    assert layout.plot.width() == 0.0
    assert layout.axis_left is None


def test_right_legend_reserves_margin_and_sits_outside_axis():
    legend = (Size(40.0, 30.0), LegendPlacement())
    spec = ChartLayoutSpec(plot_size=Size(100.0, 50.0), axis_right=10.0, legend=legend)
    layout = ChartLayout.arrange(spec)
    assert layout.legend is not None
    assert layout.legend.x0 == pytest.approx(layout.data.x1 + 10.0 + 18.0)
    assert layout.legend.width() == pytest.approx(40.0)
    assert layout.view.x1 == pytest.approx(100.0 + 10.0 + 40.0 + 18.0)


def test_left_and_top_legends_stay_inside_view():
    for orient in (LegendOrient.LEFT, LegendOrient.TOP, LegendOrient.BOTTOM):
        legend = (Size(30.0, 20.0), LegendPlacement(orient=orient, offset=5.0))
        layout = ChartLayout.arrange(
            ChartLayoutSpec(plot_size=Size(100.0, 50.0), legend=legend)
        )
        r = layout.legend
        assert r.x0 >= -1e-9 and r.y0 >= -1e-9
        assert r.x1 <= layout.view.x1 + 1e-9
        assert r.y1 <= layout.view.y1 + 1e-9


@pytest.mark.parametrize(
    "orient",
    [
        LegendOrient.TOP_LEFT,
        LegendOrient.TOP_RIGHT,
        LegendOrient.BOTTOM_LEFT,
        LegendOrient.BOTTOM_RIGHT,
    ],
)
def test_corner_legends_inside_plot_without_margin(orient):
    legend = (Size(20.0, 10.0), LegendPlacement(orient=orient, offset=4.0))
    spec = ChartLayoutSpec(plot_size=Size(100.0, 50.0), legend=legend)
    layout = ChartLayout.arrange(spec)
    r = layout.legend
    data = layout.data
    assert layout.view == Rect(0.0, 0.0, 100.0, 50.0)
    assert data.x0 + 4.0 - 1e-9 <= r.x0 and r.x1 <= data.x1 - 4.0 + 1e-9
    assert data.y0 + 4.0 - 1e-9 <= r.y0 and r.y1 <= data.y1 - 4.0 + 1e-9


def test_none_orient_uses_explicit_position():
    legend = (Size(20.0, 10.0), LegendPlacement(orient=LegendOrient.NONE, x=7.0, y=9.0))
    layout = ChartLayout.arrange(
        ChartLayoutSpec(plot_size=Size(100.0, 50.0), legend=legend)
    )
    assert layout.legend == Rect(7.0, 9.0, 27.0, 19.0)


def test_measure_axis_left_uses_widest_label():
    m = HeuristicTextMeasurer()
    labels = ["1", "100", "10"]
    got = ChartLayout.measure_axis_left(m, labels, -5.0, 6.0, 2.0, 10.0)
    widest = m.measure("100", 10.0)[0]
    assert got == pytest.approx(5.0 + 6.0 + 2.0 + widest)


def test_measure_axis_left_without_labels():
    m = HeuristicTextMeasurer()
    assert ChartLayout.measure_axis_left(m, [], 5.0, -1.0, 0.0, 10.0) == pytest.approx(5.0)


def test_measure_axis_bottom_uses_text_height():
    m = HeuristicTextMeasurer()
    got = ChartLayout.measure_axis_bottom(m, 5.0, 12.0, 0.0, 10.0)
    assert got == pytest.approx(5.0 + 12.0 + 10.0)