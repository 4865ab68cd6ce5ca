import pytest

from backend.prompts import build_running_plan_prompt, format_mileage, format_pace, profile_lines


@pytest.mark.parametrize(
    "value, expected",
    [
        (20, "20"),
        ("20", "20"),
        ("20.7", "20"),
        (15.9, "15"),
        ("12 miles", "12"),
        ("", "0"),
        (None, "0"),
        ("lots", "lots"),
    ],
)
def test_format_mileage_truncates_to_number(value, expected):
    assert format_mileage(value) == expected


def test_format_pace_pads_seconds():
    assert format_pace(8, 5) == "8:05"
    assert format_pace("7", "30") == "7:30"
    assert format_pace(9, 0) == "9:00"


def test_format_pace_needs_both_parts():
    assert format_pace(8, None) is None
    assert format_pace("", "30") is None


def test_beginner_profile_defaults():
    lines = profile_lines({"goal": "5k", "daysPerWeek": 3, "longRunDay": "Saturday"})

    assert "- Fitness Level: beginner" in lines
    assert "- Current Weekly Mileage: 0 miles" in lines
    assert "- Injury Considerations: none" in lines
    assert not any(line.startswith("- Mileage Goal") for line in lines)
    assert not any("Pace" in line for line in lines)


def test_intermediate_profile_gets_mileage_goal_and_easy_pace():
    lines = profile_lines({
        "fitnessLevel": "intermediate",
        "currentWeeklyMileage": "18.5",
        "easyPaceMin": 9,
        "easyPaceSec": 7,
    })

    assert "- Current Weekly Mileage: 18 miles" in lines
    assert "- Mileage Goal: increase" in lines
    assert "- Easy Pace: 9:07/mile" in lines


def test_advanced_profile_includes_race(advanced_values):
    lines = profile_lines(advanced_values)

    assert "- Recent 10k Race Pace: 7:30/mile" in lines
    assert "- Easy Pace: 8:05/mile" in lines


def test_race_line_needs_distance(advanced_values):
    advanced_values["recentRaceDistance"] = ""
    lines = profile_lines(advanced_values)
    assert not any(line.startswith("- Recent") for line in lines)


def test_prompt_states_constraints_and_json_shape(advanced_values):
    prompt = build_running_plan_prompt(advanced_values)

    assert "Create a 12-week personalized running plan" in prompt
    assert prompt.count("EXACTLY 4 running days") == 2
    assert "Start with 25 miles in Week 1" in prompt
    assert '"workouts": {' in prompt
    assert "Return only the raw JSON" in prompt
