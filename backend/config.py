# backend/config.py
import os
from dotenv import load_dotenv

load_dotenv()


def api_limit_reached() -> bool:
    """When set, the API serves SAMPLE_PLAN instead of calling Groq."""
    return os.getenv("API_LIMIT_REACHED", "").strip().upper() == "TRUE"


def server_address():
    return (
        os.getenv("BACKEND_HOST", "127.0.0.1"),
        int(os.getenv("BACKEND_PORT", "8000")),
    )
