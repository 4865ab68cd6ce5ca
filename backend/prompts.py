import re

DAYS_OF_WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

NUMBER = re.compile(r"\d+(?:\.\d+)?")


def _present(value) -> bool:
    return value is not None and str(value).strip() != ""


def _text(value) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def format_mileage(value) -> str:
    """Truncate a mileage entry to its whole-number value ("20.7 miles" -> "20")."""
    if not _present(value):
        return "0"
    match = NUMBER.search(_text(value))
    if not match:
        return _text(value)
    return str(int(float(match.group())))


def format_pace(minutes, seconds):
    """Combine minutes and seconds as min:ss, or None unless both are given."""
    if not (_present(minutes) and _present(seconds)):
        return None
    return f"{_text(minutes)}:{_text(seconds).zfill(2)}"


def profile_lines(profile: dict) -> list:
    fitness_level = _text(profile.get("fitnessLevel") or "beginner")
    mileage = format_mileage(profile.get("currentWeeklyMileage"))

    lines = [
        f"- Fitness Level: {fitness_level}",
        f"- Current Weekly Mileage: {mileage} miles",
        f"- Goal: {_text(profile.get('goal', ''))}",
        f"- Running Days Per Week: {_text(profile.get('daysPerWeek', ''))}",
        f"- Long Run Day: {_text(profile.get('longRunDay', ''))}",
        f"- Injury Considerations: {_text(profile.get('injuries') or 'none')}",
    ]

    if fitness_level != "beginner":
        lines.append(f"- Mileage Goal: {_text(profile.get('mileageGoal') or 'increase')}")

    easy_pace = format_pace(profile.get("easyPaceMin"), profile.get("easyPaceSec"))
    if easy_pace:
        lines.append(f"- Easy Pace: {easy_pace}/mile")

    race_distance = profile.get("recentRaceDistance")
    race_pace = format_pace(profile.get("racePaceMin"), profile.get("racePaceSec"))
    if _present(race_distance) and race_pace:
        lines.append(f"- Recent {_text(race_distance)} Race Pace: {race_pace}/mile")

    return lines


def build_running_plan_prompt(profile: dict) -> str:
    mileage = format_mileage(profile.get("currentWeeklyMileage"))
    days = _text(profile.get("daysPerWeek", ""))
    weeks = _text(profile.get("timelineWeeks", ""))
    long_run_day = _text(profile.get("longRunDay", ""))
    runner_profile = "\n".join(profile_lines(profile))

    return f"""
# RUNNING PLAN CREATION TASK

You are a professional running coach. Create a personalized training plan tailored to the runner's experience level and goals.
Use a motivating and supportive tone while giving expert guidance.

## RUNNER PROFILE
{runner_profile}

## KEY REQUIREMENTS
1. Create a {weeks}-week personalized running plan.
2. EXACTLY {days} running days per week (no more, no less).
3. The long run MUST always be scheduled on {long_run_day}.
4. Mileage progression:
   - Start with {mileage} miles in Week 1.
   - Increase weekly mileage by no more than 10% per week.
   - Include a recovery week (reduced mileage) every 3-4 weeks.
5. Workout types:
   - Mix easy runs, long runs, tempo runs, intervals, strides and recovery runs.
   - Every run MUST include a description (e.g. "5 miles easy run" or "6 miles tempo").
   - Scale the long run to the runner's experience and weekly mileage.

## REST DAY PLACEMENT - CRITICAL
1. Schedule a rest day before and after the long run.
2. Never schedule a run immediately after the long run.
3. Spread the remaining rest days evenly across the week.
4. Example for 3 running days per week with a Sunday long run:
   - Monday: Rest day
   - Tuesday: 3 miles easy run
   - Wednesday: Rest day
   - Thursday: 3 miles tempo run
   - Friday: Rest day
   - Saturday: Rest day
   - Sunday: 4 miles long run

## MILEAGE CALCULATION - CRITICAL
1. The sum of daily workout mileage MUST EQUAL the weekly mileage total.
2. Distribute the weekly mileage across exactly {days} running days.
3. VERIFY: 10 weekly miles over 3 days could be 3 + 3 + 4 = 10 miles.

## CONTINUITY REQUIREMENTS
- Build logically from week to week toward the final week.
- Increase workout intensity and complexity gradually.
- Keep the long run on the same day every week while varying the other workouts.

## OUTPUT FORMAT
Return a JSON object with this structure:
{{
  "description": "A motivational overview of the plan tailored to the runner.",
  "weeks": [
    {{
      "week": 1,
      "mileage": "10",
      "workouts": {{
        "Monday": "Rest day",
        "Tuesday": "3 miles easy run",
        "Wednesday": "Rest day",
        "Thursday": "3 miles easy run with strides",
        "Friday": "Rest day",
        "Saturday": "Rest day",
        "Sunday": "4 miles long run"
      }},
      "notes": "Focus on building a consistent running habit this week."
    }}
  ]
}}

## IMPORTANT CHECKS
- Each week MUST have EXACTLY {days} running days.
- The sum of daily workout mileage MUST equal the weekly mileage total.
- The long run MUST always be on {long_run_day}.
- Include all seven days ({", ".join(DAYS_OF_WEEK)}) with rest days labeled explicitly.
- Write original workouts for this runner. Do NOT copy the examples verbatim.
- Mileage values are numbers only (e.g. "5", not "5 miles").

Return only the raw JSON without markdown formatting or additional text.
"""
