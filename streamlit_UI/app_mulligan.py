"""Streamlit page for the search action: odds after an opening hand that missed."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Final, Optional

import streamlit as st
from loguru import logger

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from draw_core import (
    DEFAULT_SEARCH_DRAW_RANGE,
    DEFAULT_SEARCH_TARGET_COUNT,
    UI_DRAW_RANGE,
    UI_MULLIGAN_CHOICES,
    UI_TARGET_RANGE,
    ProbabilityTable,
    SweepRange,
    build_mulligan_sweep,
    build_probability_chart,
    color_for_mulligan_count,
    format_probability_frame,
    redraw_header,
)

TARGET_CHOICES: Final[list[int]] = list(range(UI_TARGET_RANGE[0], UI_TARGET_RANGE[1] + 1))


@st.cache_data(show_spinner=False)
def cached_mulligan_sweep(target_count: int, draw_bounds: tuple[int, int]) -> ProbabilityTable:
    return build_mulligan_sweep(target_count, SweepRange(*draw_bounds), UI_MULLIGAN_CHOICES)


def main() -> None:
    """Render the Streamlit application."""

    st.set_page_config(page_title="SVWB 探しに行く行動計算機", layout="centered")
    st.title("Shadowverse：Worlds Beyond 探しに行く行動計算機")
    st.caption("初手に対象が無かった前提で、引き直し枚数 l ごとの確率を比較します。")

    st.session_state.setdefault("search_target_count", DEFAULT_SEARCH_TARGET_COUNT)
    st.session_state.setdefault("search_draw_range", DEFAULT_SEARCH_DRAW_RANGE)

    with st.container(border=True):
        st.selectbox(
            "デッキ内の対象枚数 (n)",
            options=TARGET_CHOICES,
            key="search_target_count",
            format_func=lambda count: f"{count} 枚",
        )
        st.slider(
            "デッキから引く枚数 (m) 範囲",
            min_value=UI_DRAW_RANGE[0],
            max_value=UI_DRAW_RANGE[1],
            step=1,
            key="search_draw_range",
        )

    table: Optional[ProbabilityTable] = None
    try:
        table = cached_mulligan_sweep(
            int(st.session_state.search_target_count),
            tuple(st.session_state.search_draw_range),
        )
    except Exception as exc:  # broad to surface any numerical issues to the user
        logger.exception("Mulligan sweep failed")
        st.error(f"計算に失敗しました：{exc}")

    if table is None:
        return

    with st.container(border=True):
        chart = build_probability_chart(table, color_for_mulligan_count)
        st.altair_chart(chart, use_container_width=True)

    with st.container(border=True):
        st.markdown("**表（行: 引き直し枚数 l, 列: 引く枚数 m）**")
        st.dataframe(
            format_probability_frame(table, row_header=redraw_header),
            use_container_width=True,
        )


if __name__ == "__main__":
    main()
