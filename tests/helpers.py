import httpx
import openai
from types import SimpleNamespace


def make_completion(content):
    """Chat completion shaped like the openai SDK response"""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(role="assistant", content=content))]
    )

def make_status_error(status_code: int, body: str = "upstream error"):
    request = httpx.Request("POST", "https://gateway.test/v1/chat/completions")
    response = httpx.Response(status_code, request=request, text=body)
    if status_code == 429:
        return openai.RateLimitError(body, response=response, body=None)
    return openai.APIStatusError(body, response=response, body=None)
