# Which RunnerProfile fields the form shows for each fitness tier

BASE_FIELDS = [
    "fitnessLevel",
    "currentWeeklyMileage",
    "goal",
    "daysPerWeek",
    "timelineWeeks",
    "longRunDay",
    "injuries",
]

EXPERIENCE_FIELDS = ["mileageGoal", "easyPaceMin", "easyPaceSec"]

RACE_FIELDS = ["recentRaceDistance", "racePaceMin", "racePaceSec"]

REQUIRED_FIELDS = ["fitnessLevel", "goal", "daysPerWeek", "timelineWeeks", "longRunDay"]

FIELD_LABELS = {
    "fitnessLevel": "Fitness Level",
    "currentWeeklyMileage": "Current Weekly Mileage",
    "goal": "Primary Goal",
    "daysPerWeek": "Days Per Week",
    "timelineWeeks": "Timeline (Weeks)",
    "longRunDay": "Preferred Long Run Day",
}


def visible_fields(fitness_level: str) -> list:
    fields = list(BASE_FIELDS)
    if fitness_level in ("intermediate", "advanced"):
        fields += EXPERIENCE_FIELDS
    if fitness_level == "advanced":
        fields += RACE_FIELDS
    return fields


def required_fields(fitness_level: str) -> list:
    # Beginners may leave mileage blank
    if fitness_level == "beginner":
        return list(REQUIRED_FIELDS)
    return REQUIRED_FIELDS + ["currentWeeklyMileage"]


def _is_empty(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def collect_profile(values: dict) -> dict:
    """
    Packages the form values into a flat RunnerProfile record.

    Only fields shown for the selected fitness level are kept, so values
    left behind by a higher tier never reach the payload. Empty values are
    dropped.
    """
    fitness_level = values.get("fitnessLevel") or "beginner"
    profile = {}
    for field in visible_fields(fitness_level):
        value = values.get(field)
        if not _is_empty(value):
            profile[field] = value
    profile["fitnessLevel"] = fitness_level
    return profile


def missing_required(profile: dict) -> list:
    level = profile.get("fitnessLevel") or "beginner"
    return [f for f in required_fields(level) if _is_empty(profile.get(f))]


def missing_message(missing: list) -> str:
    return "Please fill in: " + ", ".join(FIELD_LABELS.get(f, f) for f in missing)
