"""Analemma — Streamlit app showing the sun's position for every hour across a year."""

import logging
from datetime import datetime

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from analemma.compute import HOUR_LABELS, TraceCache, build_chart_data  # noqa: E402
from analemma.config import load_settings  # noqa: E402
from analemma.hittest import select_hour  # noqa: E402
from analemma.i18n import t  # noqa: E402
from analemma.models import ChartLayout, DomainError, GeoCoordinate, SolarPosition  # noqa: E402
from analemma.projection import project, project_traces  # noqa: E402
from analemma.renderers.plotly_2d import render_plotly_chart  # noqa: E402
from analemma.solar import zone_offset_hours  # noqa: E402

settings = load_settings()
logging.basicConfig(level=settings.log_level)

_CHART_HEIGHT = 600

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "sv" if _browser_lang.lower().startswith("sv") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="☀",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# Chart width follows the viewport; None until the JS call returns
_viewport_width: int | None = streamlit_js_eval(
    js_expressions="window.innerWidth", key="_viewport_width", height=0
)
_chart_width = max(320, int(_viewport_width or 1000) - 64)

# --- Session state initialization ---
if "cache" not in st.session_state:
    st.session_state.cache = TraceCache(settings.location)
if "hour_select" not in st.session_state:
    st.session_state.hour_select = (
        settings.hour if settings.hour in HOUR_LABELS else "12:00"
    )
# A chart click cannot write the selectbox state after it is drawn; apply it here
if "pending_hour" in st.session_state:
    st.session_state.hour_select = st.session_state.pop("pending_hour")
if "last_selection" not in st.session_state:
    st.session_state.last_selection = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

# --- Header ---
st.title(t("page_title", _lang))
st.caption(t("subtitle", _lang))
with st.expander(t("info_title", _lang)):
    st.write(t("info_body", _lang))

# --- Inputs (stand-in for the map picker) ---
col1, col2, col3 = st.columns([2, 2, 1])
with col1:
    lat = st.number_input(
        t("label_latitude", _lang),
        min_value=-90.0,
        max_value=90.0,
        value=settings.location.latitude,
        format="%.4f",
    )
with col2:
    lng = st.number_input(
        t("label_longitude", _lang),
        min_value=-180.0,
        max_value=180.0,
        value=settings.location.longitude,
        format="%.4f",
    )
with col3:
    selected: str = st.selectbox(t("label_hour", _lang), HOUR_LABELS, key="hour_select")

tog1, tog2, tog3 = st.columns(3)
with tog1:
    dark = st.toggle(t("toggle_dark", _lang), value=False)
with tog2:
    show_today_path = st.toggle(t("toggle_today", _lang), value=settings.show_today_path)
with tog3:
    show_below = st.toggle(t("toggle_below", _lang), value=settings.show_below_horizon)

# --- Compute ---
try:
    coordinate = GeoCoordinate(latitude=lat, longitude=lng)
    cache: TraceCache = st.session_state.cache
    cache.relocate(coordinate)
    chart = build_chart_data(
        cache,
        selected,
        show_below_horizon=show_below,
        now=datetime.now(),
        show_today_path=show_today_path,
        workers=settings.workers,
    )
    st.session_state.error_msg = None
except DomainError as e:
    st.session_state.error_msg = t("error_location", _lang).format(error=e)
    st.error(st.session_state.error_msg)
    st.stop()

offset = zone_offset_hours(coordinate.longitude)
st.markdown(
    f"**{chart.selected}** (UTC{'+' if offset >= 0 else ''}{offset}) · "
    + t("location_display", _lang).format(lat=coordinate.latitude, lng=coordinate.longitude)
)

# --- Chart ---
# One layout drives both the figure margins and the hit-test pixel space
layout = ChartLayout.from_canvas(_chart_width, _CHART_HEIGHT, settings.margin_fraction)
fig = render_plotly_chart(chart, dark=dark, layout=layout)
event = st.plotly_chart(
    fig,
    use_container_width=False,
    config={"displayModeBar": False},
    on_select="rerun",
    selection_mode="points",
    key="analemma_chart",
)

# --- Click → nearest hour ---
points = event.selection.points if event else []
if points:
    clicked = (points[0]["x"], points[0]["y"])
    if clicked != st.session_state.last_selection:
        st.session_state.last_selection = clicked
        pointer = project(
            SolarPosition(azimuth_deg=clicked[0], altitude_deg=clicked[1]),
            chart.scale,
            layout.width,
            layout.height,
        )
        projected = project_traces(
            chart.traces, chart.scale, layout.width, layout.height, show_below
        )
        new_hour = select_hour(
            pointer,
            projected,
            layout.hit_threshold(settings.hit_fraction),
            selected,
        )
        if new_hour != selected:
            st.session_state.pending_hour = new_hour
            st.rerun()
else:
    st.session_state.last_selection = None
