"""Pytest configuration and fixtures."""

import hashlib
import json
import os
import pathlib
from typing import Any, Dict, List

import pytest
import vcr

from wordpairs.gemini_client import TransportResponse

# Calculate hash of prompts.py for cassette invalidation
PROMPTS_HASH = hashlib.sha256(
    (pathlib.Path(__file__).parent.parent / "wordpairs" / "prompts.py").read_bytes()
).hexdigest()[:8]


def cassette(name: str) -> str:
    """Generate cassette filename with prompt hash."""
    return f"{name}_{PROMPTS_HASH}.yaml"


def gemini_body(text: str) -> str:
    """Wrap model output text in a generateContent response body."""
    return json.dumps({
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": text}]}}
        ]
    })


class FakeTransport:
    """Replays scripted responses and records every request it receives."""

    def __init__(self, responses: List[TransportResponse]):
        self.responses = list(responses)
        self.requests: List[Dict[str, Any]] = []

    async def send(self, url, headers, payload):
        self.requests.append({"url": url, "headers": headers, "payload": payload})
        if not self.responses:
            raise AssertionError("Unexpected extra request")
        return self.responses.pop(0)

    def prompt(self, index: int) -> str:
        return self.requests[index]["payload"]["contents"][0]["parts"][0]["text"]


@pytest.fixture
def make_transport():
    """Build a FakeTransport from model output values.

    Strings are sent as model text, other values are JSON-encoded first and
    ready-made ``TransportResponse`` objects are passed through.
    """
    def _make(*outputs):
        responses = []
        for out in outputs:
            if isinstance(out, TransportResponse):
                responses.append(out)
            elif isinstance(out, str):
                responses.append(TransportResponse(200, gemini_body(out)))
            else:
                responses.append(TransportResponse(
                    200, gemini_body(json.dumps(out, ensure_ascii=False))
                ))
        return FakeTransport(responses)
    return _make


@pytest.fixture
def my_vcr():
    """VCR fixture for recording/replaying HTTP interactions."""
    return vcr.VCR(
        cassette_library_dir=str(pathlib.Path(__file__).parent / "fixtures"),
        filter_headers=[("x-goog-api-key", "DUMMY")],
        record_mode="once",
    )


def live_guard():
    """Check if live testing is enabled."""
    if not os.getenv("WORDPAIRS_LIVE"):
        pytest.skip("Live LLM disabled (set WORDPAIRS_LIVE=1)")


@pytest.fixture
def live_api_key():
    live_guard()
    key = os.getenv("GEMINI_API_KEY")
    if not key:
        pytest.skip("GEMINI_API_KEY not set")
    return key


@pytest.fixture
def tool_items():
    """Raw batch output for the tools category, with one duplicate."""
    return [
        {"category": "tools", "ru": "молоток", "en": "hammer"},
        {"category": "tools", "ru": "молоток", "en": "hammer"},
        {"category": "tools", "ru": "пила", "en": "saw"},
    ]
