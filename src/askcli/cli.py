"""
askcli CLI - ask Gemini for a terse command-line answer.

Everything after the program name is the question; there are no options.

Usage:
    askcli list listening tcp ports
    askcli compress ./logs into a tar.zst archive
"""
from __future__ import annotations

import logging
import sys
from typing import List, Optional, Tuple

import click

from askcli.client import NO_RESPONSE_TEXT, GeminiClient
from askcli.core.config import Settings
from askcli.core.logging_setup import setup_logging
from askcli.core.prompt import build_prompt
from askcli.errors import APIError, CredentialError, TransportError
from askcli.ui import AssistantConsole, Outcome, clean_answer

logger = logging.getLogger(__name__)

TRANSPORT_HINT = "Check your network connection and try again."


def run(words: Tuple[str, ...], settings: Settings, ui: Optional[AssistantConsole] = None) -> None:
    """Run one question end to end and exit with the outcome's status."""
    ui = ui or AssistantConsole()

    try:
        api_key = settings.validate_credential()
    except CredentialError as e:
        ui.render(Outcome.CREDENTIAL_ERROR, str(e), hint=e.hint)
        sys.exit(Outcome.CREDENTIAL_ERROR.exit_code)

    prompt = build_prompt(words)
    logger.debug(f"Prompt built from {len(words)} words")
    client = GeminiClient(
        api_key,
        model=settings.model,
        base_url=settings.base_url,
        max_output_tokens=settings.max_output_tokens,
        connect_timeout=settings.connect_timeout,
    )

    try:
        with ui.thinking():
            answer = client.generate(prompt)
    except TransportError as e:
        outcome = Outcome.TRANSPORT_ERROR
        ui.render(outcome, f"Request failed ({e.kind}): {e.reason}", hint=TRANSPORT_HINT)
        sys.exit(outcome.exit_code)
    except APIError as e:
        outcome = Outcome.API_ERROR
        ui.render(outcome, f"API error {e.code}: {e.message}", prompt=prompt)
        sys.exit(outcome.exit_code)
    except KeyboardInterrupt:
        ui.print_interrupted()
        sys.exit(130)

    if answer.degraded or not clean_answer(answer.text):
        outcome, text = Outcome.DEGRADED, NO_RESPONSE_TEXT
    else:
        outcome, text = Outcome.SUCCESS, answer.text
    ui.render(outcome, text)
    sys.exit(outcome.exit_code)


class QuestionCommand(click.Command):
    """A command whose whole argument list is the question.

    Nothing is parsed as an option, and ``--`` is kept as an ordinary word.
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        ctx.params["words"] = tuple(args)
        ctx.args = []
        return []


@click.command(cls=QuestionCommand, add_help_option=False)
def cli(words: Tuple[str, ...]):
    """
    Ask Gemini a question and print a terse, shell-ready answer.

    Examples:
        askcli find files modified in the last hour
        askcli kill whatever listens on port 8080
    """
    setup_logging()
    run(words, Settings.from_env())


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
