import pytest

from app import create_app
from services.gemini import GenerationError


class FakeClient:
    """Stands in for GeminiClient; records every request it is given."""

    def __init__(self, replies=None):
        self.replies = list(replies or [])
        self.prompts = []
        self.chats = []

    def _next(self):
        reply = self.replies.pop(0) if self.replies else "reply"
        if isinstance(reply, Exception):
            raise reply
        return reply

    def generate(self, prompt):
        self.prompts.append(prompt)
        return self._next()

    def chat(self, messages):
        self.chats.append([m.model_copy() for m in messages])
        return self._next()

    @property
    def calls(self):
        return len(self.prompts) + len(self.chats)


@pytest.fixture
def fake():
    return FakeClient()


@pytest.fixture
def failing():
    return FakeClient(replies=[GenerationError("boom")] * 5)


@pytest.fixture
def app(fake):
    return create_app("testing", client=fake)


@pytest.fixture
def client(app):
    c = app.test_client()
    c.get("/")
    return c
