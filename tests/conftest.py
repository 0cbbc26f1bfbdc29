from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from wordpilot.config import Settings


def gemini_payload(text: str) -> Dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def gemini_transport(
    text: Optional[str] = None,
    *,
    status: int = 200,
    payload: Any = None,
    calls: Optional[List[httpx.Request]] = None,
    error: Optional[type] = None,
) -> httpx.MockTransport:
    """Stand-in for the generateContent endpoint."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if error is not None:
            raise error("boom", request=request)
        body = payload if payload is not None else gemini_payload(text or "")
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, content=json.dumps(body).encode())

    return httpx.MockTransport(handler)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", model="gemini-test", debounce_seconds=0.2)
