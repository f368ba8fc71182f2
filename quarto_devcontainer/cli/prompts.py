"""Interactive prompts used while configuring a container."""

from abc import ABC, abstractmethod

import click
import questionary


class Prompter(ABC):
    """Asks the user to confirm choices or enter values."""

    @abstractmethod
    def confirm(self, message: str, default: bool = True) -> bool:
        """Ask a yes/no question, returning the answer."""

    @abstractmethod
    def input(self, message: str, default: str = "") -> str:
        """Ask for free text, returning the entered value."""


class InteractivePrompter(Prompter):
    """Prompts on the terminal. Cancelling a prompt aborts the command."""

    def confirm(self, message: str, default: bool = True) -> bool:
        answer = questionary.confirm(message, default=default).ask()
        if answer is None:
            raise click.Abort()
        return answer

    def input(self, message: str, default: str = "") -> str:
        answer = questionary.text(message, default=default).ask()
        if answer is None:
            raise click.Abort()
        return answer


class DefaultsPrompter(Prompter):
    """Accepts every default without asking."""

    def confirm(self, message: str, default: bool = True) -> bool:
        return default

    def input(self, message: str, default: str = "") -> str:
        return default


def get_prompter(prompt: bool = True) -> Prompter:
    """Return the prompter for the --prompt/--no-prompt setting."""
    if prompt:
        return InteractivePrompter()
    return DefaultsPrompter()
