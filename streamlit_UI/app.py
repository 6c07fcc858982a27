"""Streamlit front-end for the draw probability calculator."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import streamlit as st
from loguru import logger

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from draw_core import (
    DEFAULT_DRAW_RANGE,
    DEFAULT_KEEP_MODE,
    DEFAULT_MULLIGAN_COUNT,
    DEFAULT_TARGET_RANGE,
    KEEP_MODE_LABELS,
    KEEP_MODES,
    SWEEP_PRESETS_FILENAME,
    UI_DRAW_RANGE,
    UI_MULLIGAN_CHOICES,
    UI_TARGET_RANGE,
    KeepMode,
    ProbabilityTable,
    SweepRange,
    build_probability_chart,
    build_target_sweep,
    color_for_target_count,
    format_probability_frame,
    load_sweep_presets,
)

PRESET_CUSTOM_LABEL = "カスタム"
PRESET_PATH = Path(__file__).resolve().parent / SWEEP_PRESETS_FILENAME
SWEEP_PRESETS = load_sweep_presets(PRESET_PATH)
ABOUT_URL = "https://note.com/maddogmtg/n/n3edfb7fc7f10"

FORMULA_NOTES = """
記号: C(a,b) は「a 個から b 個を選ぶ組合せ数」。n: 対象枚数, l: マリガン枚数, m: ゲーム開始後のドロー枚数。

**キープする場合**

少なくとも1枚: 1 - C(40 - n, 4)/C(40, 4) × C(36 - n, l)/C(36, l) × C(36 - n, m)/C(36, m)

**キープしない場合**

対象は戻す前提なので、キープしたカードに対象が含まれていない場合の条件付き確率で考える

少なくとも1枚: 1 - Q_m × Σ k=0..min(l,n) P_l(k) × Q_l(k)

- P_l(k) = C(n, k) × C(36 + l - n, l - k) / C(36 + l, l)
- Q_l(k) = C(36 - (n - k), l) / C(36, l)
- Q_m = C(36 - n, m) / C(36, m)
"""


@st.cache_data(show_spinner=False)
def cached_target_sweep(
    keep_mode: KeepMode,
    mulligan_count: int,
    target_bounds: tuple[int, int],
    draw_bounds: tuple[int, int],
) -> ProbabilityTable:
    """Memoise sweeps across reruns; the model itself never caches."""

    return build_target_sweep(
        keep_mode,
        mulligan_count,
        SweepRange(*target_bounds),
        SweepRange(*draw_bounds),
    )


def ensure_session_state_defaults() -> None:
    """Populate Streamlit session state with expected default entries."""

    st.session_state.setdefault("keep_mode", DEFAULT_KEEP_MODE)
    st.session_state.setdefault("mulligan_count", DEFAULT_MULLIGAN_COUNT)
    st.session_state.setdefault("target_range", DEFAULT_TARGET_RANGE)
    st.session_state.setdefault("draw_range", DEFAULT_DRAW_RANGE)
    st.session_state.setdefault("selected_preset", PRESET_CUSTOM_LABEL)
    st.session_state.setdefault("last_applied_preset", PRESET_CUSTOM_LABEL)


def apply_preset(selected_preset: str) -> None:
    """Copy the chosen preset into the widget state once per selection."""

    if selected_preset == st.session_state.last_applied_preset:
        return
    if selected_preset != PRESET_CUSTOM_LABEL:
        preset = SWEEP_PRESETS[selected_preset]
        st.session_state.keep_mode = preset.keep_mode
        st.session_state.mulligan_count = preset.mulligan_count
        st.session_state.target_range = preset.target_range.as_tuple()
        st.session_state.draw_range = preset.draw_range.as_tuple()
        logger.info(f"Applied sweep preset '{selected_preset}'")
    st.session_state.last_applied_preset = selected_preset


def render_conditions() -> None:
    """Render the input widgets; values land in session state."""

    with st.container(border=True):
        if SWEEP_PRESETS:
            preset_options = [PRESET_CUSTOM_LABEL] + sorted(SWEEP_PRESETS)
            st.caption("プリセット")
            selected_preset = st.selectbox(
                "プリセット",
                options=preset_options,
                key="selected_preset",
                label_visibility="collapsed",
            )
            apply_preset(selected_preset)

        mode_col, mulligan_col = st.columns(2)
        with mode_col:
            st.selectbox(
                "対象を初手に",
                options=list(KEEP_MODES),
                key="keep_mode",
                format_func=lambda mode: KEEP_MODE_LABELS.get(mode, mode),
            )
        with mulligan_col:
            st.selectbox(
                "マリガン枚数 (l)",
                options=list(UI_MULLIGAN_CHOICES),
                key="mulligan_count",
                format_func=lambda count: f"{count} 枚",
            )

        st.slider(
            "デッキ内のカード枚数 (n) 範囲",
            min_value=UI_TARGET_RANGE[0],
            max_value=UI_TARGET_RANGE[1],
            step=1,
            key="target_range",
        )
        st.slider(
            "デッキから引く枚数 (m) 範囲",
            min_value=UI_DRAW_RANGE[0],
            max_value=UI_DRAW_RANGE[1],
            step=1,
            key="draw_range",
        )


def render_results(table: ProbabilityTable) -> None:
    """Render the curve chart and the percentage grid."""

    with st.container(border=True):
        chart = build_probability_chart(table, color_for_target_count)
        st.altair_chart(chart, use_container_width=True)

    with st.container(border=True):
        st.markdown("**n：デッキ内のカード枚数, m：デッキから引く枚数**")
        st.dataframe(format_probability_frame(table), use_container_width=True)
        st.caption(f"計算時間 {table.compute_seconds * 1000:.2f} ms")


def apply_page_styling() -> None:
    """Configure the page and inject the card styling used by the containers."""

    st.set_page_config(page_title="SVWB 確率計算機", layout="centered")
    st.markdown(
        """
        <style>
        div[data-testid="stVerticalBlockBorderWrapper"] {
            border: 1px solid #e5e7eb;
            border-radius: 12px;
            padding: 0.75rem;
            background-color: #ffffff;
            margin-bottom: 1rem;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def main() -> None:
    """Entry point used by Streamlit."""

    apply_page_styling()
    ensure_session_state_defaults()

    st.title("Shadowverse：Worlds Beyond 計算機")
    render_conditions()

    table: Optional[ProbabilityTable] = None
    try:
        table = cached_target_sweep(
            st.session_state.keep_mode,
            int(st.session_state.mulligan_count),
            tuple(st.session_state.target_range),
            tuple(st.session_state.draw_range),
        )
    except Exception as exc:  # broad to surface any numerical issues to the user
        logger.exception("Target sweep failed")
        st.error(f"計算に失敗しました：{exc}")

    if table is not None:
        render_results(table)

    with st.container(border=True):
        st.markdown("**計算式**")
        st.markdown(FORMULA_NOTES)

    st.markdown(f"[このページについて]({ABOUT_URL})")


if __name__ == "__main__":
    main()
