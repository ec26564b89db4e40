"""User interaction for the create workflow.

The workflow never talks to the terminal directly. It asks a ``Prompter``,
so tests can script the answers and the CLI can use click.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

import click

MAX_TITLE_LENGTH = 255

Validator = Callable[[str], str | None]


def validate_title(title: str) -> str | None:
    """Check an issue title.

    Returns:
        An error message, or None when the title is acceptable
    """
    if not title.strip():
        return "Title must not be empty"
    if len(title) > MAX_TITLE_LENGTH:
        return f"Title must be at most {MAX_TITLE_LENGTH} characters (got {len(title)})"
    return None


class Prompter(ABC):
    """Source of answers to the questions the workflow asks."""

    @abstractmethod
    def select(self, message: str, choices: Sequence[str], default: str | None = None) -> str:
        """Pick one of ``choices``."""

    @abstractmethod
    def text(self, message: str, default: str = "", validate: Validator | None = None) -> str:
        """Ask for free text, repeating until ``validate`` accepts it."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Show a status message."""


class ClickPrompter(Prompter):
    """Prompter backed by click.

    Aborting a prompt (Ctrl-C, Ctrl-D) raises ``click.Abort``.
    """

    def select(self, message: str, choices: Sequence[str], default: str | None = None) -> str:
        """Pick a choice by the number it is listed under."""
        options = list(choices)
        for idx, choice in enumerate(options, 1):
            click.echo(f"  {idx}. {choice}")

        default_idx = options.index(default) + 1 if default in options else None
        picked: int = click.prompt(
            message,
            type=click.IntRange(1, len(options)),
            default=default_idx,
        )
        return options[picked - 1]

    def text(self, message: str, default: str = "", validate: Validator | None = None) -> str:
        while True:
            value: str = click.prompt(message, default=default, show_default=bool(default), type=str)
            value = value.strip()
            error = validate(value) if validate else None
            if error is None:
                return value
            click.echo(click.style(f"  {error}", fg="red"), err=True)

    def info(self, message: str) -> None:
        click.echo(message)
