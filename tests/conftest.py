from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

VALID_KEY = "A" * 39


def success_body(text: str) -> dict[str, Any]:
    return {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": text}]}, "finishReason": "STOP"}
        ],
        "usageMetadata": {"promptTokenCount": 42, "candidatesTokenCount": 3},
    }


def error_body(code: int, message: str, status: str = "PERMISSION_DENIED") -> dict[str, Any]:
    return {"error": {"code": code, "message": message, "status": status}}


class Recorder:
    """Collects the requests a MockTransport handler saw."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def valid_key() -> str:
    return VALID_KEY
