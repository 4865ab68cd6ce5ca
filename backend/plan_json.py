import json

FENCES = ("```json", "```")


def extract_json(text: str) -> dict:
    """
    Parses the plan object out of a Groq reply.

    JSON mode normally hands back a bare object. Markdown fences and any
    chatter before the first brace or after the last one are dropped; what
    is left must load as-is, otherwise ValueError reaches the route.
    """
    reply = (text or "").strip()
    for fence in FENCES:
        reply = reply.replace(fence, "")
    reply = reply.strip()
    if not reply:
        raise ValueError("Empty model output")

    start, end = reply.find("{"), reply.rfind("}")
    if start == -1 or end <= start:
        raise ValueError(f"No JSON object in model output: {reply[:200]}")

    return json.loads(reply[start:end + 1])
