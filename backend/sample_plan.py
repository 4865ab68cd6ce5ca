# Served instead of a Groq call while API_LIMIT_REACHED is set

SAMPLE_PLAN = {
    "description": "This is a sample running plan.",
    "weeks": [
        {
            "week": 1,
            "mileage": 20,
            "workouts": {
                "Monday": "Rest",
                "Tuesday": "3 miles easy",
                "Wednesday": "4 miles tempo",
                "Thursday": "Rest",
                "Friday": "3 miles easy",
                "Saturday": "5 miles long run",
                "Sunday": "Rest",
            },
            "notes": "Focus on building consistency.",
        },
        {
            "week": 2,
            "mileage": 22,
            "workouts": {
                "Monday": "Rest",
                "Tuesday": "3 miles easy",
                "Wednesday": "5 miles tempo",
                "Thursday": "Rest",
                "Friday": "4 miles easy",
                "Saturday": "6 miles long run",
                "Sunday": "Rest",
            },
            "notes": "Increase mileage gradually.",
        },
    ],
}
