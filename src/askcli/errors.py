"""Error taxonomy for askcli.

Every failure that ends an invocation is one of these. A response without
extractable text is not an error; see ``askcli.client.api_client.Answer``.
"""
from __future__ import annotations

from typing import Optional


class AskError(Exception):
    """Base class for all askcli failures."""


class CredentialError(AskError):
    """The API key cannot be used. Raised before any network activity."""

    hint = "Set it with: export GEMINI_API_KEY=<your key>  (keys: https://aistudio.google.com/app/apikey)"


class CredentialMissing(CredentialError):
    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"{env_var} is not set.")


class CredentialInvalid(CredentialError):
    def __init__(self, env_var: str, length: int, minimum: int):
        self.env_var = env_var
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"{env_var} looks invalid: {length} characters, expected at least {minimum}."
        )


class TransportError(AskError):
    """The request never produced an HTTP response (DNS, connect, timeout...)."""

    def __init__(self, reason: str, kind: str = "TransportError"):
        self.reason = reason
        self.kind = kind
        super().__init__(f"{kind}: {reason}")


class APIError(AskError):
    """The service answered with a structured error."""

    def __init__(self, code: int, message: str, status: Optional[str] = None):
        self.code = code
        self.message = message
        self.status = status
        super().__init__(f"API error {code}: {message}")
