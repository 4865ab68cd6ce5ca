from frontend.form import collect_profile, missing_message, missing_required, visible_fields


def test_beginner_payload_omits_pace_and_race_fields(advanced_values):
    advanced_values["fitnessLevel"] = "beginner"
    profile = collect_profile(advanced_values)

    for field in ("mileageGoal", "easyPaceMin", "easyPaceSec", "recentRaceDistance", "racePaceMin", "racePaceSec"):
        assert field not in profile
    assert profile["goal"] == "half-marathon"
    assert profile["currentWeeklyMileage"] == 25


def test_intermediate_payload_has_easy_pace_only(advanced_values):
    advanced_values["fitnessLevel"] = "intermediate"
    profile = collect_profile(advanced_values)

    assert profile["easyPaceMin"] == 8
    assert profile["mileageGoal"] == "increase"
    assert "recentRaceDistance" not in profile
    assert "racePaceMin" not in profile


def test_advanced_payload_keeps_everything(advanced_values):
    assert collect_profile(advanced_values) == advanced_values


def test_empty_values_are_dropped():
    profile = collect_profile({"fitnessLevel": "beginner", "currentWeeklyMileage": None, "goal": "5k", "injuries": " "})
    assert profile == {"fitnessLevel": "beginner", "goal": "5k"}


def test_visible_fields_grow_with_tier():
    beginner = set(visible_fields("beginner"))
    intermediate = set(visible_fields("intermediate"))
    advanced = set(visible_fields("advanced"))
    assert beginner < intermediate < advanced


def test_mileage_required_above_beginner():
    profile = {"fitnessLevel": "intermediate", "goal": "5k", "daysPerWeek": 3, "timelineWeeks": 8, "longRunDay": "Sunday"}
    assert missing_required(profile) == ["currentWeeklyMileage"]

    profile["fitnessLevel"] = "beginner"
    assert missing_required(profile) == []


def test_missing_message_uses_widget_labels():
    assert missing_message(["currentWeeklyMileage"]) == "Please fill in: Current Weekly Mileage"
    assert missing_message(["goal", "longRunDay"]) == "Please fill in: Primary Goal, Preferred Long Run Day"
