import streamlit as st

from frontend.constants import (
    DAYS_PER_WEEK_OPTIONS,
    FITNESS_LEVEL_OPTIONS,
    GOAL_OPTIONS,
    INJURY_OPTIONS,
    LONG_RUN_DAY_OPTIONS,
    MILEAGE_GOAL_OPTIONS,
    RACE_DISTANCE_OPTIONS,
    TIMELINE_OPTIONS,
    label_for,
)
from frontend.form import collect_profile, missing_message, missing_required, visible_fields
from frontend.pdf_export import generate_pdf
from frontend.planner import submit_profile
from frontend.report_layout import render_plan

# ===================================================
# PAGE CONFIG - MUST BE FIRST
# ===================================================
st.set_page_config(
    page_title="Running Plan Generator", layout="wide", initial_sidebar_state="collapsed"
)

logo_col, spacer, nav1, nav2 = st.columns([2.2, 6.0, 1.0, 1.2])

with logo_col:
    st.markdown("## 🏃 Running Plan Generator")
    st.caption("Build your plan in 30 seconds!")

with nav1:
    st.page_link("app.py", label="My Plan")

with nav2:
    st.page_link("pages/how_it_works.py", label="How it works")

st.divider()


# ===================================================
# SESSION STATE
# ===================================================
DEFAULT_STATE = {
    "loading": False,
    "pending": None,
    "plan": None,
    "form_values": None,
    "error": None,
}

for k, v in DEFAULT_STATE.items():
    st.session_state.setdefault(k, v)


def reset_app():
    for k, v in DEFAULT_STATE.items():
        st.session_state[k] = v
    st.rerun()


def choice(label, options, key, **kwargs):
    return st.selectbox(
        label,
        [value for value, _ in options],
        format_func=lambda v: label_for(options, v),
        key=key,
        **kwargs,
    )


def pace_inputs(label, prefix, max_minutes):
    st.markdown(f"**{label}**")
    min_col, sec_col = st.columns(2)
    with min_col:
        minutes = st.number_input(
            "min", min_value=4, max_value=max_minutes, step=1, value=None, key=f"{prefix}Min"
        )
    with sec_col:
        seconds = st.number_input(
            "sec", min_value=0, max_value=59, step=1, value=None, key=f"{prefix}Sec"
        )
    return minutes, seconds


# ===================================================
# LAYOUT
# ===================================================
left, right = st.columns([1, 2.2], gap="large")

# LEFT COLUMN: form
with left:
    st.subheader("👤 Your Running Profile")

    # Outside the form so changing the tier re-renders the fields
    fitness_level = choice("Fitness Level", FITNESS_LEVEL_OPTIONS, "fitnessLevel")
    fields = visible_fields(fitness_level)
    values = {"fitnessLevel": fitness_level}

    with st.form("plan_form"):
        if "easyPaceMin" in fields:
            st.markdown("##### Running Experience")
            values["currentWeeklyMileage"] = st.number_input(
                "Current Weekly Mileage", min_value=0, step=1, value=None
            )
            values["mileageGoal"] = choice("Mileage Goal", MILEAGE_GOAL_OPTIONS, "mileageGoal")
            values["easyPaceMin"], values["easyPaceSec"] = pace_inputs(
                "Recent Easy Pace (min:sec per mile)", "easyPace", 20
            )

        if "recentRaceDistance" in fields:
            values["recentRaceDistance"] = choice(
                "Recent Race Distance", RACE_DISTANCE_OPTIONS, "recentRaceDistance"
            )
            values["racePaceMin"], values["racePaceSec"] = pace_inputs(
                "Recent Race Pace (min:sec per mile)", "racePace", 15
            )

        st.markdown("##### Plan Configuration")
        if fitness_level == "beginner":
            values["currentWeeklyMileage"] = st.number_input(
                "Current Weekly Mileage (if any)",
                min_value=0,
                step=1,
                value=None,
                help="Leave at 0 if you're completely new to running",
            )

        values["goal"] = choice("Primary Goal", GOAL_OPTIONS, "goal")
        values["daysPerWeek"] = choice("Days Per Week", DAYS_PER_WEEK_OPTIONS, "daysPerWeek")
        values["timelineWeeks"] = choice("Timeline (Weeks)", TIMELINE_OPTIONS, "timelineWeeks")
        values["longRunDay"] = choice("Preferred Long Run Day", LONG_RUN_DAY_OPTIONS, "longRunDay")
        values["injuries"] = choice("Injury Considerations", INJURY_OPTIONS, "injuries")

        submitted = st.form_submit_button(
            "Generating plan..." if st.session_state.loading else "Create My Plan",
            type="primary",
            disabled=st.session_state.loading,
            use_container_width=True,
        )

    if submitted and not st.session_state.loading:
        profile = collect_profile(values)
        missing = missing_required(profile)
        if missing:
            st.session_state.error = missing_message(missing)
        else:
            st.session_state.pending = profile
            st.session_state.loading = True
            st.rerun()

    if st.session_state.error:
        st.error(st.session_state.error)

# REQUEST: one outstanding call per submission
if st.session_state.loading and st.session_state.pending is not None:
    with left:
        with st.spinner("Generating your plan..."):
            submit_profile(st.session_state, st.session_state.pending)
    st.session_state.pending = None
    st.rerun()

# RIGHT COLUMN: plan
with right:
    if st.session_state.plan:
        header_l, header_pdf, header_reset = st.columns([3, 1, 1])

        with header_l:
            st.subheader("📋 Your Running Plan")

        with header_pdf:
            st.download_button(
                "Download PDF",
                generate_pdf(st.session_state.plan, st.session_state.form_values),
                "running_plan.pdf",
                "application/pdf",
            )

        with header_reset:
            if st.button("Create New Plan"):
                reset_app()

        render_plan(st.session_state.plan, st.session_state.form_values)
    else:
        st.info("Fill in your profile and press Create My Plan")
