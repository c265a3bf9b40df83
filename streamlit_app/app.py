"""Tennis session analytics — Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

from datetime import date

import streamlit as st

from tennis_analyzer import bridge
from tennis_analyzer.formatting import (
    consistency_level,
    density_level,
    format_active_time,
    format_clock,
    format_percent,
    format_ratio,
)
from tennis_analyzer.models.enums import MAX_INTENSITY, MIN_INTENSITY, SetType

from example.config import DEFAULT_INTENSITY
from helpers import (
    active_rest_frame,
    build_session,
    sample_set_table,
    set_duration_frame,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Tennis Session Analyzer",
    page_icon="🎾",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Sidebar — session details
# ---------------------------------------------------------------------------

st.sidebar.title("Session")
session_date = st.sidebar.date_input("Date", value=date.today())
notes = st.sidebar.text_area("Notes", max_chars=5000)
n_sample_sets = st.sidebar.number_input("Sample sets", 1, 20, 6)
if st.sidebar.button("Generate sample session"):
    st.session_state["set_table"] = sample_set_table(
        n_sets=int(n_sample_sets), default_intensity=DEFAULT_INTENSITY
    )

if "set_table" not in st.session_state:
    st.session_state["set_table"] = sample_set_table(
        default_intensity=DEFAULT_INTENSITY, seed=0
    )

# ---------------------------------------------------------------------------
# Set editor
# ---------------------------------------------------------------------------

st.title("Tennis Session Analyzer")
st.subheader("Sets")
edited = st.data_editor(
    st.session_state["set_table"],
    num_rows="dynamic",
    use_container_width=True,
    column_config={
        "Type": st.column_config.SelectboxColumn(
            options=[t.value for t in SetType], required=True
        ),
        "Duration (s)": st.column_config.NumberColumn(min_value=0.0, step=1.0),
        "Rest after (s)": st.column_config.NumberColumn(min_value=0.0, step=1.0),
        "Intensity": st.column_config.NumberColumn(
            min_value=MIN_INTENSITY, max_value=MAX_INTENSITY, step=1
        ),
    },
)

session = build_session(edited, session_date, notes=notes)
for error in session.validation_errors:
    st.warning(error)

result = bridge.analyze_or_none(
    session.durations,
    session.intensities,
    session.rest_durations or None,
)

# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

st.subheader("Analysis")
if result is None:
    st.error("No valid sets to analyze. Check durations and intensities.")
    st.stop()

c1, c2, c3, c4 = st.columns(4)
c1.metric("Active Time", format_active_time(result.total_active_time))
c2.metric("Work/Rest", format_ratio(result.work_rest_ratio))
c3.metric(
    "Consistency",
    format_percent(result.consistency_score),
    consistency_level(result.consistency_score),
    delta_color="off",
)
c4.metric(
    "Density",
    format_percent(result.training_density_score),
    density_level(result.training_density_score),
    delta_color="off",
)

d1, d2, d3, d4 = st.columns(4)
d1.metric("Sets", str(result.total_sets))
d2.metric("Avg Intensity", f"{result.average_intensity:.1f} / 5")
d3.metric("Work Volume", f"{result.total_work_volume:,.0f}")
d4.metric("Session Length", format_clock(session.total_duration + sum(session.rest_durations)))

# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------

chart_left, chart_right = st.columns(2)

with chart_left:
    st.markdown("**Set Duration Consistency**")
    durations_df = set_duration_frame(session)
    if durations_df.empty:
        st.info("No completed sets to display")
    else:
        st.bar_chart(durations_df, x="Set", y="Duration (s)", color="Color")

with chart_right:
    st.markdown("**Active vs Rest Time**")
    time_df = active_rest_frame(session)
    if time_df.empty:
        st.info("No time data to display")
    else:
        st.bar_chart(time_df, x="Category", y="Seconds", color="Color")

with st.expander("Raw result"):
    st.json(result.to_dict())
