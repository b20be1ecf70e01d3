"""
Outcome classification and answer cleanup.

Every invocation ends in exactly one :class:`Outcome`; the outcome decides
the output stream, the visual treatment and the process exit status.
"""

from __future__ import annotations

from enum import Enum


class Outcome(Enum):
    """How an invocation ended."""
    SUCCESS = "success"
    DEGRADED = "degraded"
    TRANSPORT_ERROR = "transport_error"
    API_ERROR = "api_error"
    CREDENTIAL_ERROR = "credential_error"

    @property
    def is_error(self) -> bool:
        return self not in (Outcome.SUCCESS, Outcome.DEGRADED)

    @property
    def exit_code(self) -> int:
        return 1 if self.is_error else 0

    @property
    def stream(self) -> str:
        return "stderr" if self.is_error else "stdout"


def clean_answer(text: str) -> str:
    """Drop markdown backticks; the answer is shown on a plain terminal line."""
    return text.replace("`", "").strip()
