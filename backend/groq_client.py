from langchain_groq import ChatGroq

MODEL = "llama-3.3-70b-versatile"
TEMPERATURE = 0.5
JSON_RESPONSE = {"type": "json_object"}


def groq_chat(prompt: str) -> str:
    llm = ChatGroq(model=MODEL, temperature=TEMPERATURE)

    # Groq JSON mode: the reply must be a single JSON object
    resp = llm.bind(response_format=JSON_RESPONSE).invoke(prompt)

    content = resp.content
    if not isinstance(content, str):
        raise RuntimeError(f"Unexpected Groq response: {str(content)[:800]}")
    return content
