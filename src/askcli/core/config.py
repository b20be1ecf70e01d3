"""Configuration management for askcli."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from askcli.errors import CredentialInvalid, CredentialMissing

API_KEY_ENV = "GEMINI_API_KEY"
MIN_KEY_LENGTH = 30

# Request constants; these are not user-configurable.
MODEL = "gemini-2.0-flash"
BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
MAX_OUTPUT_TOKENS = 100
CONNECT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    """Everything one invocation needs to talk to the API."""
    api_key: Optional[str] = None
    model: str = MODEL
    base_url: str = BASE_URL
    max_output_tokens: int = MAX_OUTPUT_TOKENS
    connect_timeout: float = CONNECT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the process environment.

        Only ``GEMINI_API_KEY`` is read. Surrounding whitespace is dropped so
        that a key pasted with a trailing newline still validates.
        """
        env = os.environ if environ is None else environ
        key = env.get(API_KEY_ENV)
        if key is not None:
            key = key.strip()
        return cls(api_key=key or None)

    def validate_credential(self) -> str:
        """Return the API key, or raise if it is missing or too short."""
        if not self.api_key:
            raise CredentialMissing(API_KEY_ENV)
        if len(self.api_key) < MIN_KEY_LENGTH:
            raise CredentialInvalid(API_KEY_ENV, len(self.api_key), MIN_KEY_LENGTH)
        return self.api_key
