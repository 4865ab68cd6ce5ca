from flask import Flask, request, jsonify
from rich.console import Console
from rich.markup import escape

from backend.config import api_limit_reached, server_address
from backend.groq_client import groq_chat
from backend.plan_json import extract_json
from backend.prompts import build_running_plan_prompt
from backend.sample_plan import SAMPLE_PLAN

app = Flask(__name__)
app.json.sort_keys = False  # keep the model's key order
console = Console(stderr=True)

GENERIC_ERROR = "Failed to generate plan"


@app.post("/api/running-plan")
def running_plan():
    # Sample mode never reaches Groq
    if api_limit_reached():
        return jsonify({"plan": SAMPLE_PLAN})

    profile = request.get_json(force=True, silent=True)
    if not isinstance(profile, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    console.print(
        f"🏃 New plan request: {escape(str(profile.get('timelineWeeks', '?')))} weeks, "
        f"{escape(str(profile.get('daysPerWeek', '?')))} days/week"
    )

    try:
        prompt = build_running_plan_prompt(profile)
        raw = groq_chat(prompt)
        plan = extract_json(raw)
    except Exception:
        console.print("[bold red]❌ Error generating plan[/bold red]")
        console.print_exception()
        return jsonify({"error": GENERIC_ERROR}), 500

    console.print("✅ Plan delivered")
    return jsonify({"plan": plan})


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    host, port = server_address()
    app.run(host=host, port=port, debug=True)
