import os

import requests
from dotenv import load_dotenv

load_dotenv()

BACKEND_URL = os.getenv("BACKEND_URL", "http://127.0.0.1:8000")
BACKEND_TIMEOUT = float(os.getenv("BACKEND_TIMEOUT", "300"))

USER_ERROR = "Something went wrong. Please try again."


class PlanRequestError(RuntimeError):
    pass


def generate_plan(profile: dict) -> dict:
    r = requests.post(
        f"{BACKEND_URL}/api/running-plan",
        json=profile,
        timeout=BACKEND_TIMEOUT,
    )

    if r.status_code != 200:
        raise PlanRequestError(f"Backend error {r.status_code}: {r.text[:800]}")

    data = r.json()
    plan = data.get("plan") if isinstance(data, dict) else None
    if plan is None:
        raise PlanRequestError(f"Backend response has no plan: {r.text[:800]}")
    return plan


def submit_profile(state, profile: dict, request_plan=generate_plan) -> bool:
    """
    Runs one plan request and records the outcome in the page state.

    On failure only ``error`` changes; the plan already on screen and the
    values that produced it stay as they were.
    """
    state["loading"] = True
    state["error"] = None
    try:
        plan = request_plan(profile)
    except (requests.RequestException, ValueError, PlanRequestError) as e:
        print(f"❌ Plan request failed: {str(e)[:200]}")
        state["error"] = USER_ERROR
        return False
    finally:
        state["loading"] = False

    state["plan"] = plan
    state["form_values"] = dict(profile)
    return True
