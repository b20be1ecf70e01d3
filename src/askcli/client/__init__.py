"""Gemini API client."""

from askcli.client.api_client import (
    NO_RESPONSE_TEXT,
    Answer,
    GeminiClient,
    GenerateRequest,
    GenerateResponse,
)

__all__ = [
    "NO_RESPONSE_TEXT",
    "Answer",
    "GeminiClient",
    "GenerateRequest",
    "GenerateResponse",
]
