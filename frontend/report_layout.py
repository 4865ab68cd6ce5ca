# report_layout.py
# Renders the model's plan as a weekly calendar

from datetime import datetime
import streamlit as st

from frontend.constants import DAYS_OF_WEEK, GOAL_OPTIONS, INJURY_OPTIONS, label_for

REST_PLACEHOLDER = "Rest"
NO_NOTES = "No notes for this week."
NO_DESCRIPTION = "No description available."


def is_long_run(workout) -> bool:
    return isinstance(workout, str) and "long run" in workout.lower()


def plan_description(plan) -> str:
    if not isinstance(plan, dict):
        return NO_DESCRIPTION
    return plan.get("description") or NO_DESCRIPTION


def build_week_rows(plan) -> list:
    """
    One row per week, seven day cells per row (Monday first).

    The plan shape is trusted loosely: a missing workout is a rest day and
    missing week fields fall back to placeholders.
    """
    weeks = plan.get("weeks") if isinstance(plan, dict) else None
    rows = []
    for i, week in enumerate(weeks or []):
        if not isinstance(week, dict):
            week = {}
        workouts = week.get("workouts")
        if not isinstance(workouts, dict):
            workouts = {}

        rows.append({
            "week": week.get("week", i + 1),
            "mileage": week.get("mileage", ""),
            "days": [
                (day, workouts.get(day) or REST_PLACEHOLDER)
                for day in DAYS_OF_WEEK
            ],
            "notes": week.get("notes") or NO_NOTES,
        })
    return rows


def parameter_summary(form_values) -> list:
    form_values = form_values or {}
    summary = [
        ("Current Mileage", f"{form_values.get('currentWeeklyMileage', 0)} miles/week"),
        ("Goal", label_for(GOAL_OPTIONS, form_values.get("goal", ""))),
        ("Duration", f"{form_values.get('timelineWeeks', '')} weeks"),
        ("Running Days", f"{form_values.get('daysPerWeek', '')} days/week"),
        ("Long Run Day", form_values.get("longRunDay", "")),
    ]
    injuries = form_values.get("injuries")
    if injuries and injuries != "none":
        summary.append(("Injury Considerations", label_for(INJURY_OPTIONS, injuries)))
    return summary


def render_parameters(form_values):
    st.markdown("### Your Parameters")
    summary = parameter_summary(form_values)
    cols = st.columns(len(summary))
    for col, (label, value) in zip(cols, summary):
        with col:
            st.caption(label)
            st.markdown(f"**{value}**")


def render_week(row: dict):
    with st.container(border=True):
        title_col, miles_col = st.columns([4, 1])
        with title_col:
            st.subheader(f"Week {row['week']}")
        with miles_col:
            st.markdown(f"**{row['mileage']} miles**")

        day_cols = st.columns(7)
        for col, (day, workout) in zip(day_cols, row["days"]):
            with col:
                st.markdown(f"**{day}**")
                if is_long_run(workout):
                    st.caption("🏁 Long Run")
                if workout == REST_PLACEHOLDER:
                    st.caption(workout)
                else:
                    st.write(workout)

        st.info(f"**Notes:** {row['notes']}")


def render_plan(plan, form_values):
    render_parameters(form_values)
    st.divider()

    st.markdown("### Plan Overview")
    st.write(plan_description(plan))
    st.caption(f"Generated on {datetime.now().strftime('%d %b %Y')}")

    rows = build_week_rows(plan)
    if not rows:
        st.warning("No weeks available in the plan.")
        return

    for row in rows:
        render_week(row)
