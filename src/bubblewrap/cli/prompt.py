"""Interactive prompts used by the config bootstrap.

``Prompt`` is the seam between the bootstrap logic and the terminal: the
bootstrap only awaits ``prompt_confirm`` and ``prompt_input``, so tests can
substitute a scripted implementation and never touch stdin.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

import click

from bubblewrap.exceptions import ValidatePathError

# Returns the accepted (possibly normalized) value or raises ValidatePathError.
Validator = Callable[[str], str]


class Prompt(ABC):
    """Asks the user questions."""

    @abstractmethod
    async def prompt_confirm(self, message: str, default: bool) -> bool:
        """Ask a yes/no question.

        Args:
            message: The question.
            default: Answer used when the user just presses enter.

        Returns:
            True for yes.
        """

    @abstractmethod
    async def prompt_input(
        self,
        message: str,
        default: str | None,
        validate: Validator,
    ) -> str:
        """Ask for a free-text value and keep asking until it validates.

        Args:
            message: The question.
            default: Suggested answer, or None for no suggestion.
            validate: Called with each answer; its return value is the
                result, and a ``ValidatePathError`` rejects the answer.

        Returns:
            The validated value.
        """


class ClickPrompt(Prompt):
    """``Prompt`` backed by ``click.confirm`` and ``click.prompt``."""

    async def prompt_confirm(self, message: str, default: bool) -> bool:
        return click.confirm(message, default=default)

    async def prompt_input(
        self,
        message: str,
        default: str | None,
        validate: Validator,
    ) -> str:
        def value_proc(value: str) -> str:
            try:
                return validate(value)
            except ValidatePathError as exc:
                # click prints UsageError messages and asks again
                raise click.BadParameter(str(exc)) from exc

        return click.prompt(
            message.rstrip(":").rstrip(),
            default=default,
            value_proc=value_proc,
        )
