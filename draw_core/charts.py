"""Altair charts and percentage tables for probability sweeps."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final, Optional

import altair as alt
import pandas as pd

from .models import ProbabilityTable

# Okabe-Ito inspired, readable for common colour-vision deficiencies.
MULLIGAN_PALETTE: Final[tuple[str, ...]] = (
    "#0072B2",
    "#E69F00",
    "#009E73",
    "#D55E00",
    "#CC79A7",
)
GRID_COLOR: Final[str] = "#e5e7eb"

ColorFn = Callable[[int], str]
HeaderFn = Callable[[int], str]


def color_for_target_count(n: int) -> str:
    """Return a distinct hue for the curve of target count ``n``."""

    hue = (n * 37) % 360
    return f"hsl({hue}, 70%, 45%)"


def color_for_mulligan_count(l: int) -> str:  # noqa: E741
    """Return the palette colour for the curve of ``l`` redrawn cards."""

    return MULLIGAN_PALETTE[l % len(MULLIGAN_PALETTE)]


def series_label(table: ProbabilityTable, value: int) -> str:
    return f"{table.row_label}={value}"


def format_probability(probability: float) -> str:
    """Format a probability as a percentage with two decimals."""

    return f"{probability * 100:.2f}%"


def table_to_long_frame(table: ProbabilityTable) -> pd.DataFrame:
    """Flatten a sweep table into one record per (row, column) cell."""

    records = [
        {
            "series": series_label(table, row_value),
            "row": row_value,
            "column": column_value,
            "probability": float(table.probabilities[r_idx, c_idx]),
        }
        for r_idx, row_value in enumerate(table.row_values)
        for c_idx, column_value in enumerate(table.column_values)
    ]
    return pd.DataFrame.from_records(
        records, columns=["series", "row", "column", "probability"]
    )


def build_probability_chart(
    table: ProbabilityTable,
    color_fn: ColorFn,
    x_title: str = "デッキから引く枚数 (m)",
    height: int = 320,
) -> alt.Chart:
    """Return a line chart with one coloured curve per table row.

    Parameters
    ----------
    table:
        Sweep output; rows become series and columns the x axis.
    color_fn:
        Maps a row value to a CSS colour string.
    x_title:
        Axis title for the swept draw count.
    height:
        Chart height in pixels.
    """

    chart_data = table_to_long_frame(table)
    labels = [series_label(table, value) for value in table.row_values]
    colors = [color_fn(value) for value in table.row_values]

    chart = (
        alt.Chart(chart_data)
        .mark_line(point=True, strokeWidth=2)
        .encode(
            x=alt.X(
                "column:Q",
                title=x_title,
                axis=alt.Axis(
                    values=list(table.column_values),
                    format="d",
                    labelFontSize=11,
                    titleFontSize=12,
                ),
            ),
            y=alt.Y(
                "probability:Q",
                title="確率",
                scale=alt.Scale(domain=(0, 1)),
                axis=alt.Axis(
                    values=[tick / 10 for tick in range(11)],
                    format=".0%",
                    labelFontSize=11,
                    titleFontSize=12,
                ),
            ),
            color=alt.Color(
                "series:N",
                scale=alt.Scale(domain=labels, range=colors),
                legend=alt.Legend(title=None, orient="bottom"),
            ),
            tooltip=[
                alt.Tooltip("series:N", title="系列"),
                alt.Tooltip("column:Q", title=table.column_label),
                alt.Tooltip("probability:Q", title="確率", format=".2%"),
            ],
        )
        .properties(height=height)
    )
    return chart.configure_view(strokeOpacity=0).configure_axis(gridColor=GRID_COLOR)


def format_probability_frame(
    table: ProbabilityTable,
    row_header: Optional[HeaderFn] = None,
) -> pd.DataFrame:
    """Return the sweep as a grid of percentage strings.

    Row headers default to ``n=3`` style labels; columns are the swept values.
    """

    header = row_header if row_header is not None else (lambda v: series_label(table, v))
    frame = table.to_frame().map(format_probability)
    frame.index = pd.Index(
        [header(value) for value in table.row_values],
        name=f"{table.row_label} \\ {table.column_label}",
    )
    frame.columns = [str(value) for value in table.column_values]
    return frame


def redraw_header(l: int) -> str:  # noqa: E741
    return f"{l}枚引き直し"
