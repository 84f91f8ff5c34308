import json

import httpx
import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app

API_URL = "https://generativelanguage.example/v1beta/models/gemini:generateContent"


def gemini_body(text: str) -> dict:
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
            }
        ]
    }


class FakeGemini:
    """Records outbound requests and answers with a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = json.dumps(gemini_body("Thanks, see you Monday."))
        self.exc = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, text=self.body)


@pytest.fixture
def settings():
    return Settings(api_url=API_URL, api_key="test-key")


@pytest.fixture
def fake_gemini():
    return FakeGemini()


@pytest.fixture
def http(fake_gemini):
    return httpx.Client(transport=httpx.MockTransport(fake_gemini))


@pytest.fixture
def client(settings, http):
    with TestClient(create_app(settings, http=http)) as c:
        yield c
