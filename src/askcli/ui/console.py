"""Rich console UI for askcli."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.text import Text

from askcli.ui.formatter import Outcome, clean_answer

logger = logging.getLogger(__name__)

# rich's "line" spinner ticks every 130ms; 1.3x brings it to ~100ms.
SPINNER = "line"
SPINNER_SPEED = 1.3


class AssistantConsole:
    """Styled output for askcli.

    Answers go to stdout; diagnostics and hints go to stderr.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    @contextmanager
    def thinking(self) -> Iterator[None]:
        """Show a spinner on stdout until the block exits.

        The spinner is erased on every exit path, exceptions included. If it
        cannot be started the block still runs, just without animation.
        """
        status = None
        try:
            status = self.console.status("", spinner=SPINNER, speed=SPINNER_SPEED)
            status.start()
        except Exception as e:
            logger.debug(f"Spinner unavailable: {e}")
            status = None
        try:
            yield
        finally:
            if status is not None:
                status.stop()

    def _print(self, console: Console, text: Text) -> None:
        console.print(text, soft_wrap=True)

    def console_for(self, outcome: Outcome) -> Console:
        """The console an outcome is written to."""
        return self.error_console if outcome.stream == "stderr" else self.console

    def print_hint(self, hint: str):
        """Print a remediation hint."""
        self._print(self.error_console, Text(f"→ {hint}", style="cyan"))

    def print_prompt_echo(self, prompt: str):
        """Echo the prompt that was sent, as an indented block."""
        self._print(self.error_console, Text("Prompt:", style="dim bold"))
        body = "\n".join(f"  {line}" for line in prompt.splitlines() or [""])
        self._print(self.error_console, Text(body, style="dim"))

    def print_interrupted(self):
        self._print(self.error_console, Text("Interrupted", style="yellow"))

    def render(
        self,
        outcome: Outcome,
        text: str,
        hint: Optional[str] = None,
        prompt: Optional[str] = None,
    ):
        """Write the final result of an invocation."""
        console = self.console_for(outcome)
        if outcome is Outcome.SUCCESS:
            self._print(console, Text(clean_answer(text), style="bold green"))
        elif outcome is Outcome.DEGRADED:
            self._print(console, Text(text, style="yellow"))
        else:
            self._print(console, Text(f"✗ {text}", style="bold red"))
            if prompt is not None:
                self.print_prompt_echo(prompt)
            if hint:
                self.print_hint(hint)
