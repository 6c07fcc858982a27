"""Tests for chart and table presentation helpers."""

import altair as alt

from draw_core.api import build_mulligan_sweep, build_target_sweep
from draw_core.charts import (
    MULLIGAN_PALETTE,
    build_probability_chart,
    color_for_mulligan_count,
    color_for_target_count,
    format_probability,
    format_probability_frame,
    redraw_header,
    table_to_long_frame,
)
from draw_core.data import KEEP
from draw_core.models import SweepRange


class TestColors:
    """Tests for per-series colours."""

    def test_target_hue_steps_by_37_degrees(self) -> None:
        assert color_for_target_count(0) == "hsl(0, 70%, 45%)"
        assert color_for_target_count(3) == "hsl(111, 70%, 45%)"
        assert color_for_target_count(10) == "hsl(10, 70%, 45%)"

    def test_mulligan_palette_cycles(self) -> None:
        assert [color_for_mulligan_count(l) for l in range(5)] == list(MULLIGAN_PALETTE)  # noqa: E741
        assert color_for_mulligan_count(5) == "#0072B2"


class TestTables:
    """Tests for long-form and percentage tables."""

    def test_format_probability(self) -> None:
        assert format_probability(0.277327) == "27.73%"
        assert format_probability(1.0) == "100.00%"
        assert format_probability(0.0) == "0.00%"

    def test_long_frame_has_one_record_per_cell(self) -> None:
        table = build_target_sweep(KEEP, 0, SweepRange(2, 4), SweepRange(1, 5))
        frame = table_to_long_frame(table)
        assert len(frame) == 15
        assert list(frame.columns) == ["series", "row", "column", "probability"]
        assert set(frame["series"]) == {"n=2", "n=3", "n=4"}

    def test_percentage_frame_headers(self) -> None:
        table = build_target_sweep(KEEP, 0, SweepRange(3, 4), SweepRange(0, 2))
        frame = format_probability_frame(table)
        assert list(frame.index) == ["n=3", "n=4"]
        assert frame.index.name == "n \\ m"
        assert list(frame.columns) == ["0", "1", "2"]
        assert frame.loc["n=3", "0"] == "27.73%"

    def test_redraw_row_headers(self) -> None:
        table = build_mulligan_sweep(3, SweepRange(1, 2))
        frame = format_probability_frame(table, row_header=redraw_header)
        assert list(frame.index) == [f"{l}枚引き直し" for l in range(5)]  # noqa: E741


class TestChart:
    """Tests for the Altair line chart."""

    def test_line_chart_encoding(self) -> None:
        table = build_target_sweep(KEEP, 0, SweepRange(1, 3), SweepRange(1, 9))
        chart = build_probability_chart(table, color_for_target_count)
        assert isinstance(chart, alt.Chart)
        chart_dict = chart.to_dict()
        assert chart_dict["mark"]["type"] == "line"
        assert chart_dict["encoding"]["y"]["axis"]["format"] == ".0%"
        color_scale = chart_dict["encoding"]["color"]["scale"]
        assert color_scale["domain"] == ["n=1", "n=2", "n=3"]
        assert color_scale["range"] == [color_for_target_count(n) for n in (1, 2, 3)]
