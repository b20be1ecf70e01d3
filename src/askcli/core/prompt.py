"""Prompt assembly."""
from __future__ import annotations

from typing import Sequence

MARKER = "➜"

SYSTEM_INSTRUCTION = (
    "You are a command-line assistant running inside a terminal.\n"
    "Rules:\n"
    "- Answer with the shortest thing that solves the request, ideally a single shell command.\n"
    "- Do not explain, do not add notes, do not use markdown code fences.\n"
    "- Never hide errors: no '2>/dev/null', '|| true' or similar unless the user asks for it.\n"
    f"- Always start your answer with the '{MARKER}' character followed by a space.\n"
    "Request: "
)


def _utf8_safe(text: str) -> str:
    # argv bytes that are not valid UTF-8 arrive as lone surrogates, which
    # cannot be encoded into the request body; they become U+FFFD.
    return text.encode("utf-8", "surrogatepass").decode("utf-8", "replace")


def build_prompt(args: Sequence[str]) -> str:
    """Join the raw command-line words onto the fixed instruction.

    ``args`` may be empty. Apart from replacing undecodable bytes, the text
    is sent as-is.
    """
    return SYSTEM_INSTRUCTION + _utf8_safe(" ".join(args))
