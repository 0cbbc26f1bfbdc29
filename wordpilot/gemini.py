import logging
from typing import Any, Dict, Optional

import httpx

from .config import Settings

logger = logging.getLogger(__name__)

GENERATION_CONFIG = {
    "temperature": 0.3,
    "topP": 0.95,
    "topK": 64,
}


class GeminiError(Exception):
    pass


class TransportError(GeminiError):
    """Network failure, timeout or non-success status from the endpoint."""


class MalformedResponseError(GeminiError):
    """Success status, but the payload has no generated text."""


def build_request_body(prompt: str) -> Dict[str, Any]:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": dict(GENERATION_CONFIG),
    }


def extract_text(data: Any) -> str:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponseError("response has no candidates[0].content.parts[0].text") from exc
    if not isinstance(text, str):
        raise MalformedResponseError("generated text is not a string")
    return text


def _error_message(resp: httpx.Response) -> str:
    try:
        detail = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"
    if isinstance(detail, dict) and isinstance(detail.get("error"), dict):
        return detail["error"].get("message") or "API request failed"
    return "API request failed"


async def call_gemini(
    prompt: str,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    if not settings.api_key:
        raise TransportError("GEMINI_API_KEY is not configured")

    headers = {
        "Content-Type": "application/json",
        "x-goog-api-key": settings.api_key,
    }
    body = build_request_body(prompt)

    try:
        async with httpx.AsyncClient(timeout=settings.timeout, transport=transport) as client:
            resp = await client.post(settings.generate_url, headers=headers, json=body)
    except httpx.HTTPError as exc:
        raise TransportError(f"request to {settings.model} failed: {exc.__class__.__name__}") from exc
    except UnicodeEncodeError as exc:
        # lone surrogates cannot be sent as UTF-8 JSON
        raise TransportError(f"request body could not be encoded: {exc.reason}") from exc

    if not resp.is_success:
        message = _error_message(resp)
        logger.debug("Gemini returned %s: %s", resp.status_code, message)
        raise TransportError(f"HTTP {resp.status_code}: {message}")

    try:
        data = resp.json()
    except ValueError as exc:
        raise MalformedResponseError("response body is not JSON") from exc
    return extract_text(data)
