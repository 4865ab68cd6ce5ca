import streamlit as st

# ===================================================
# PAGE CONFIG
# ===================================================
st.set_page_config(page_title="How it works – Running Plan Generator", layout="wide")

logo_col, spacer, nav1, nav2 = st.columns([2.2, 6.0, 1.0, 1.2])

with logo_col:
    st.markdown("## 🏃 Running Plan Generator")

with nav1:
    st.page_link("app.py", label="My Plan")

with nav2:
    st.page_link("pages/how_it_works.py", label="How it works")

st.divider()


# ===================================================
# CONTENT
# ===================================================
st.markdown("## How it works")

steps = [
    (
        "🎯 Tell us where you are",
        "Pick your fitness level, goal, running days, timeline and long run day. "
        "Intermediate and advanced runners can add their easy pace and a recent race.",
    ),
    (
        "🤖 A coaching model writes the plan",
        "Your profile is turned into a coaching brief and sent to a hosted language model. "
        "It chooses the mileage progression, rest days and workouts.",
    ),
    (
        "📅 You get a weekly calendar",
        "Every week shows seven days, the weekly mileage and a short note. "
        "Empty days are shown as rest days.",
    ),
    (
        "⚠️ Use it as a guide",
        "The plan is not checked by a person or a program. "
        "Make sure the daily miles add up and listen to your body.",
    ),
]

for title, text in steps:
    with st.container(border=True):
        st.markdown(f"### {title}")
        st.write(text)
