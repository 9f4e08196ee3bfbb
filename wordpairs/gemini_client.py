"""Gemini generateContent client: transport, text extraction and JSON parsing."""

import json
import re
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

import aiohttp
import structlog

from .config import API_BASE_URL, MODEL_NAME, THINKING_BUDGET
from .errors import MalformedResponseError, RemoteCallError

log = structlog.get_logger()

FENCE_START = re.compile(r"^```[a-zA-Z0-9_-]*\s*")
FENCE_END = re.compile(r"\s*```$")


@dataclass
class TransportResponse:
    status: int
    body: str


class Transport(Protocol):
    """Sends one JSON POST request and returns the raw status and body."""

    async def send(self, url: str, headers: Dict[str, str],
                   payload: Dict[str, Any]) -> TransportResponse:
        ...


class AiohttpTransport:
    """Default transport backed by aiohttp; relies on aiohttp's own timeout."""

    async def send(self, url: str, headers: Dict[str, str],
                   payload: Dict[str, Any]) -> TransportResponse:
        async with aiohttp.ClientSession() as session:
            async with session.post(url, headers=headers, json=payload) as response:
                body = await response.text()
                return TransportResponse(status=response.status, body=body)


def build_request(prompt: str, max_output_tokens: int) -> Dict[str, Any]:
    """Request body with deterministic, bounded output."""
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": 0,
            "maxOutputTokens": max_output_tokens,
            "thinkingConfig": {"thinkingBudget": THINKING_BUDGET},
        },
    }


def endpoint_url(model: str) -> str:
    return f"{API_BASE_URL}/models/{model}:generateContent"


async def call_model(api_key: str, prompt: str, *, max_output_tokens: int,
                     model: str = MODEL_NAME,
                     transport: Optional[Transport] = None) -> Any:
    """POST a prompt to the model and return the decoded response JSON."""
    transport = transport or AiohttpTransport()
    headers = {
        "Content-Type": "application/json",
        "x-goog-api-key": (api_key or "").strip(),
    }

    t0 = time.perf_counter()
    response = await transport.send(
        endpoint_url(model), headers, build_request(prompt, max_output_tokens)
    )
    elapsed = 1000 * (time.perf_counter() - t0)

    if not 200 <= response.status < 300:
        log.error("Gemini API call failed", status=response.status, model=model,
                  elapsed_ms=elapsed, body=response.body)
        raise RemoteCallError(response.status, response.body or None)

    log.info("Gemini API call completed", status=response.status, model=model,
             elapsed_ms=elapsed, max_output_tokens=max_output_tokens)

    try:
        return json.loads(response.body)
    except json.JSONDecodeError as e:
        log.error("Gemini response is not JSON", error=str(e), model=model)
        raise MalformedResponseError(f"Invalid response body: {response.body!r}") from e


def extract_text(data: Any) -> str:
    """Concatenate candidates[0].content.parts[*].text; unexpected shapes yield ''."""
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""
    candidate = candidates[0]
    content = candidate.get("content") if isinstance(candidate, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""

    texts = []
    for part in parts:
        text = part.get("text") if isinstance(part, dict) else None
        if text:
            texts.append(str(text))
    return "".join(texts).strip()


def strip_code_fences(text: str) -> str:
    """Remove a leading ``` (optionally with a language tag) and a trailing ```."""
    text = FENCE_START.sub("", text.strip())
    text = FENCE_END.sub("", text)
    return text.strip()


def parse_json_text(text: str) -> Any:
    """Parse model output text as JSON after removing code fences."""
    cleaned = strip_code_fences(text or "")
    if not cleaned:
        log.error("Empty model output")
        raise MalformedResponseError("Empty response text")

    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        log.error("Failed to parse JSON response", error=str(e), response=cleaned)
        raise MalformedResponseError(f"Invalid JSON response: {cleaned}") from e


async def call_model_json(api_key: str, prompt: str, *, max_output_tokens: int,
                          model: str = MODEL_NAME,
                          transport: Optional[Transport] = None) -> Any:
    """Call the model and parse its textual output as JSON."""
    data = await call_model(api_key, prompt, max_output_tokens=max_output_tokens,
                            model=model, transport=transport)
    return parse_json_text(extract_text(data))
