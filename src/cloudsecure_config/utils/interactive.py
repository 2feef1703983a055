"""Interactive prompting utilities."""

import logging
import sys
from typing import List, Optional, TextIO, Tuple

import click

from ..models.config import CredentialProfile

logger = logging.getLogger(__name__)

NAME_PROMPT = "CloudSecure Name: "
API_KEY_PROMPT = "API Key: "
API_SECRET_PROMPT = "API Secret: "
TENANT_ID_PROMPT = "Tenant ID: "


class Prompter:
    """Line-oriented prompts over an injectable reader and writer.

    Each prompt is written without a trailing newline, then exactly one line
    is read and stripped of surrounding whitespace. Empty answers are
    accepted as-is and end of input reads as an empty answer.
    """

    def __init__(self, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None):
        """Initialize prompter.

        Args:
            input_stream: Stream to read answers from (defaults to stdin)
            output_stream: Stream to write prompts to (defaults to stdout)
        """
        self._input = input_stream
        self._output = output_stream

    @property
    def input(self) -> TextIO:
        return self._input if self._input is not None else sys.stdin

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def echo(self, message: str = "") -> None:
        """Write a status line."""
        click.echo(message, file=self.output)

    def ask(self, label: str) -> str:
        """Write a prompt label and read one trimmed line."""
        click.echo(label, file=self.output, nl=False)
        return self.input.readline().strip()

    def create_profile(self) -> CredentialProfile:
        """Prompt for the API key, API secret and tenant ID."""
        api_key = self.ask(API_KEY_PROMPT)
        api_secret = self.ask(API_SECRET_PROMPT)
        tenant_id = self.ask(TENANT_ID_PROMPT)
        return CredentialProfile(api_key=api_key, api_secret=api_secret, tenant_id=tenant_id)

    def collect_named_profile(self) -> Tuple[str, CredentialProfile]:
        """Prompt for one profile's credentials followed by its name."""
        profile = self.create_profile()
        name = self.ask(NAME_PROMPT)
        logger.debug(f"Collected CloudSecure profile {name!r}")
        return name, profile


def _is_tty(prompter: Prompter) -> bool:
    try:
        return prompter.input.isatty() and prompter.output.isatty()
    except (AttributeError, ValueError):
        return False


def pick_profile_name(
    names: List[str],
    current: Optional[str] = None,
    prompter: Optional[Prompter] = None,
) -> Optional[str]:
    """Interactive profile selection.

    Uses an InquirerPy list on a terminal and falls back to a numbered menu
    read through the prompter otherwise.

    Returns:
        The picked name, or None if nothing valid was picked
    """
    if not names:
        return None
    prompter = prompter or Prompter()

    if _is_tty(prompter):
        try:
            from InquirerPy import inquirer
            from InquirerPy.base.control import Choice

            result = inquirer.select(
                message="Select the default CloudSecure:",
                choices=[Choice(name, name) for name in names],
                default=current if current in names else None,
            ).execute()
            return str(result) if result is not None else None
        except Exception as e:
            logger.warning(f"Interactive selection failed, using numbered menu: {e!r}")

    for i, name in enumerate(names, 1):
        marker = "*" if name == current else " "
        prompter.echo(f"{marker}{i:2d}. {name}")
    raw = prompter.ask("Select a CloudSecure by number: ")
    if raw.isdigit():
        idx = int(raw)
        if 1 <= idx <= len(names):
            return names[idx - 1]
    return None
