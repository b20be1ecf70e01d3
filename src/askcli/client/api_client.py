"""
Gemini API Client - single-shot HTTP client for generateContent.

Builds a typed request, performs one synchronous POST and classifies the
reply as an answer, a degraded (textless) answer, or an error.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

from askcli.core.config import BASE_URL, CONNECT_TIMEOUT, MAX_OUTPUT_TOKENS, MODEL
from askcli.errors import APIError, TransportError

logger = logging.getLogger(__name__)

NO_RESPONSE_TEXT = "no response received"


class Part(BaseModel):
    """One text fragment of a content block."""
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None


class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parts: List[Part] = []
    role: Optional[str] = None


class GenerationConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    max_output_tokens: int = Field(alias="maxOutputTokens")


class GenerateRequest(BaseModel):
    """Request body for ``models/<model>:generateContent``."""
    model_config = ConfigDict(populate_by_name=True)

    contents: List[Content]
    generation_config: GenerationConfig = Field(alias="generationConfig")

    @classmethod
    def for_prompt(cls, prompt: str, max_output_tokens: int) -> "GenerateRequest":
        return cls(
            contents=[Content(parts=[Part(text=prompt)])],
            generation_config=GenerationConfig(max_output_tokens=max_output_tokens),
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Optional[Content] = None


class ApiErrorBody(BaseModel):
    """The ``error`` object returned by Google APIs."""
    model_config = ConfigDict(extra="ignore")

    code: Optional[int] = None
    message: str = ""
    status: Optional[str] = None


class GenerateResponse(BaseModel):
    """Response from generateContent.

    Either ``candidates`` (success) or ``error`` is populated.
    """
    model_config = ConfigDict(extra="ignore")

    candidates: List[Candidate] = []
    error: Optional[ApiErrorBody] = None

    def first_text(self) -> Optional[str]:
        """Text of the first non-empty part of the first usable candidate."""
        for candidate in self.candidates:
            if candidate.content is None:
                continue
            for part in candidate.content.parts:
                if part.text:
                    return part.text
        return None


@dataclass
class Answer:
    """Result of a successful call.

    ``degraded`` is set when the service replied but no text could be
    extracted; ``text`` is then :data:`NO_RESPONSE_TEXT`.
    """
    text: str
    degraded: bool = False


class GeminiClient:
    """
    Thin client for the Gemini generateContent endpoint.

    Only connection establishment is bounded by a timeout; once connected the
    call waits for the full response.
    """

    def __init__(
        self,
        api_key: str,
        *,
        model: str = MODEL,
        base_url: str = BASE_URL,
        max_output_tokens: int = MAX_OUTPUT_TOKENS,
        connect_timeout: float = CONNECT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.max_output_tokens = max_output_tokens
        self.timeout = httpx.Timeout(None, connect=connect_timeout)
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def _build_headers(self) -> dict:
        return {"Content-Type": "application/json"}

    def generate(self, prompt: str) -> Answer:
        """
        Send ``prompt`` and return the model's answer.

        Raises:
            TransportError: no HTTP response was obtained.
            APIError: the service returned an error object or a non-2xx
                status.
        """
        payload = GenerateRequest.for_prompt(prompt, self.max_output_tokens).to_payload()
        logger.debug(f"POST {self.endpoint}?key=*** ({len(prompt)} chars)")

        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=payload,
                    headers=self._build_headers(),
                )
            except httpx.TransportError as e:
                raise TransportError(str(e) or "no details", type(e).__name__) from e

        logger.debug(f"Response: HTTP {response.status_code}, {len(response.content)} bytes")
        return self._parse(response)

    def _parse(self, response: httpx.Response) -> Answer:
        data = None
        try:
            data = GenerateResponse.model_validate(response.json())
        except ValueError as e:  # bad JSON or pydantic ValidationError
            logger.debug(f"Unparseable response body: {e}")

        if data is not None and data.error is not None and data.error.code:
            raise APIError(data.error.code, data.error.message, data.error.status)

        if response.is_error:
            raise APIError(response.status_code, response.reason_phrase or "HTTP error")

        text = data.first_text() if data is not None else None
        if not text:
            logger.debug("Response carried no generated text")
            return Answer(NO_RESPONSE_TEXT, degraded=True)
        return Answer(text)
