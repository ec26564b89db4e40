"""Terminal interaction for the tix command line."""

from tix.cli.prompts import ClickPrompter, Prompter, validate_title

__all__ = ["ClickPrompter", "Prompter", "validate_title"]
