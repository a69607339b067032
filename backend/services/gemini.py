# backend/services/gemini.py
import logging

import requests
from pydantic import ValidationError

from schemas.dto import ChatMessage, Content, GenerateContentRequest, GenerateContentResponse, Part

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-1.5-flash"

class GenerationError(Exception):
    """Network or parsing failure of a generateContent request."""

def single_turn_body(prompt: str) -> dict:
    req = GenerateContentRequest(contents=[Content(parts=[Part(text=prompt)])])
    return req.model_dump(exclude_none=True)

def multi_turn_body(messages: list[ChatMessage]) -> dict:
    """One entry per transcript message, role passed through unchanged."""
    req = GenerateContentRequest(contents=[
        Content(role=m.role, parts=[Part(text=m.text)]) for m in messages
    ])
    return req.model_dump(exclude_none=True)

def parse_response(data) -> str:
    """Join the text of candidates[0].content.parts with newlines."""
    try:
        resp = GenerateContentResponse.model_validate(data)
    except ValidationError as e:
        raise GenerationError(f"unexpected response shape: {e.errors()[0]['msg']}") from e
    return "\n".join(p.text for p in resp.candidates[0].content.parts)

class GeminiClient:
    def __init__(self, api_key: str | None, api_url=DEFAULT_API_URL, model=DEFAULT_MODEL, timeout=None):
        self.api_key = api_key
        self.endpoint = f"{api_url.rstrip('/')}/{model}:generateContent"
        self.timeout = timeout

    def generate_content(self, body: dict) -> str:
        if not self.api_key:
            raise GenerationError("Gemini API key not set (GEMINI_API_KEY)")

        try:
            r = requests.post(
                self.endpoint,
                params={"key": self.api_key},
                json=body,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            raise GenerationError(str(e)) from e
        except ValueError as e:
            raise GenerationError(f"response is not JSON: {e}") from e

        text = parse_response(data)
        logger.info("generateContent returned %d chars", len(text))
        return text

    def generate(self, prompt: str) -> str:
        return self.generate_content(single_turn_body(prompt))

    def chat(self, messages: list[ChatMessage]) -> str:
        return self.generate_content(multi_turn_body(messages))
