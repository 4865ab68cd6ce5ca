# Static option lists for the plan form: (value, label) pairs

FITNESS_LEVEL_OPTIONS = [
    ("beginner", "Beginner (new to running)"),
    ("intermediate", "Intermediate (some running experience)"),
    ("advanced", "Advanced (regular runner with race experience)"),
]

GOAL_OPTIONS = [
    ("5k", "5K Race"),
    ("10k", "10K Race"),
    ("half-marathon", "Half Marathon"),
    ("marathon", "Marathon"),
    ("weight-loss", "Weight Loss"),
    ("general-fitness", "General Fitness"),
]

MILEAGE_GOAL_OPTIONS = [
    ("increase", "Increase mileage"),
    ("maintain", "Maintain mileage"),
    ("decrease", "Reduce mileage"),
]

TIMELINE_OPTIONS = [(weeks, f"{weeks} weeks") for weeks in (4, 8, 12, 16)]

DAYS_PER_WEEK_OPTIONS = [(days, f"{days} days/week") for days in (3, 4, 5, 6)]

LONG_RUN_DAY_OPTIONS = [(day, day) for day in ("Sunday", "Saturday", "Friday", "Thursday")]

INJURY_OPTIONS = [
    ("none", "None"),
    ("knee-pain", "Knee Pain"),
    ("shin-splints", "Shin Splints"),
    ("plantar-fasciitis", "Plantar Fasciitis"),
]

RACE_DISTANCE_OPTIONS = [
    ("", "Select a distance (optional)"),
    ("5k", "5K"),
    ("10k", "10K"),
    ("half_marathon", "Half Marathon"),
    ("marathon", "Marathon"),
]

DAYS_OF_WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def label_for(options, value):
    return dict(options).get(value, value)
