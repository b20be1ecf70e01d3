from __future__ import annotations

from askcli.core.prompt import MARKER, SYSTEM_INSTRUCTION, build_prompt


def test_build_prompt_joins_words_after_instruction() -> None:
    prompt = build_prompt(["list", "open", "ports"])
    assert prompt == SYSTEM_INSTRUCTION + "list open ports"


def test_build_prompt_with_no_words() -> None:
    assert build_prompt([]) == SYSTEM_INSTRUCTION


def test_build_prompt_keeps_text_verbatim() -> None:
    words = ['say "hi"', "--help", "\\n", "{}"]
    assert build_prompt(words).endswith('say "hi" --help \\n {}')


def test_instruction_constrains_the_answer() -> None:
    assert MARKER in SYSTEM_INSTRUCTION
    assert "2>/dev/null" in SYSTEM_INSTRUCTION
    assert "Do not explain" in SYSTEM_INSTRUCTION


def test_build_prompt_replaces_undecodable_bytes() -> None:
    prompt = build_prompt(["caf\udce9"])
    assert prompt.startswith(SYSTEM_INSTRUCTION + "caf\ufffd")
    prompt.encode("utf-8")


def test_build_prompt_keeps_valid_unicode() -> None:
    assert build_prompt(["café", "➜"]).endswith("café ➜")
