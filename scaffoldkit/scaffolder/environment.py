"""Run environment: the prompt channel and the error channel.

The environment is the only place a generator talks to the user.  Questions
are asked one at a time through a *prompter* (the terminal by default), and
fatal errors are raised as :class:`GeneratorError` for the CLI to report.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, NoReturn, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from ..utils import console as default_console
from ..utils import print_error
from .prompt_types import PromptType

INVALID_ANSWER_MESSAGE = "Please provide a valid value"


class GeneratorError(Exception):
    """Raised through :meth:`Environment.error` to end a run with a message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


@dataclass
class Question:
    """A single question handed to the prompt channel."""

    name: str
    type: str = PromptType.INPUT.value
    message: str | None = None
    default: Any = None
    when: Callable[[], bool] | None = None
    validate: Callable[[Any], Any] | None = None


class Prompter(Protocol):
    """Something that can put a question to the user."""

    async def ask(self, question: Question, default: Any) -> Any: ...


async def resolve_maybe_awaitable(value: Any) -> Any:
    """Await *value* if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


class RichPrompter:
    """Asks questions on the terminal with ``rich.prompt``.

    The blocking terminal read runs in a worker thread so the event loop is
    free while the user types.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    async def ask(self, question: Question, default: Any) -> Any:
        message = question.message or question.name
        kwargs: dict[str, Any] = {"console": self.console}
        if default is not None:
            kwargs["default"] = default

        if question.type == PromptType.CONFIRM.value:
            if "default" in kwargs:
                kwargs["default"] = bool(default)
            return await asyncio.to_thread(Confirm.ask, message, **kwargs)

        if "default" in kwargs:
            kwargs["default"] = str(default)
        return await asyncio.to_thread(Prompt.ask, message, **kwargs)


class Environment:
    """Prompt and error channels for a generator run.

    Args:
        prompter: Where questions go.  Defaults to :class:`RichPrompter`.
        interactive: When false, every question takes its default answer
            without asking.
    """

    def __init__(
        self,
        prompter: Prompter | None = None,
        *,
        interactive: bool = True,
        console: Console | None = None,
    ) -> None:
        self.console = console or default_console
        self.prompter = prompter or RichPrompter(self.console)
        self.interactive = interactive

    async def prompt(self, questions: Iterable[Question]) -> dict[str, Any]:
        """Ask each question in order and return the answers by name.

        Questions whose ``when`` returns false are skipped and leave no
        answer.  Defaults given as callables are only called for questions
        that are actually asked.  While ``validate`` rejects an answer the
        question is asked again.
        """
        answers: dict[str, Any] = {}
        for question in questions:
            if question.when is not None and not question.when():
                continue

            default = question.default
            if callable(default):
                default = default()
            default = await resolve_maybe_awaitable(default)

            if not self.interactive:
                answers[question.name] = default
                continue

            answers[question.name] = await self._ask_until_valid(question, default)
        return answers

    async def _ask_until_valid(self, question: Question, default: Any) -> Any:
        while True:
            answer = await self.prompter.ask(question, default)
            if question.validate is None:
                return answer

            result = await resolve_maybe_awaitable(question.validate(answer))
            if result and not isinstance(result, str):
                return answer
            print_error(result or INVALID_ANSWER_MESSAGE, target=self.console)

    def error(self, message: str) -> NoReturn:
        """End the run with *message*.

        Nothing is printed here; the CLI reports the message once it catches
        the :class:`GeneratorError`.
        """
        raise GeneratorError(message)
