"""Host generator runtime.

:class:`BaseGenerator` owns everything a generator run needs: the options
bag, command-line option registration, the staged run loop, destination and
template paths, the prompt/error environment and the file editor.  The
conveniences built on top of it live in :mod:`scaffoldkit.scaffolder.generator`.
"""

from __future__ import annotations

import argparse
import inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..config import GeneratorSettings
from .environment import Environment, Question, resolve_maybe_awaitable
from .fs import FileEditor
from .templates import TemplateRenderer

# Stage methods run in this order.  A subclass defines any of them as plain
# or async methods; tasks queued on a stage run before the method.
STAGES: tuple[str, ...] = (
    "initializing",
    "prompting",
    "configuring",
    "default",
    "writing",
    "conflicts",
    "install",
    "end",
)


@dataclass(frozen=True)
class OptionDefinition:
    """A registered command-line option."""

    name: str
    type: type
    alias: str | None = None
    description: str | None = None
    default: Any = None

    @property
    def flags(self) -> list[str]:
        flags = [f"--{self.name.replace('_', '-')}"]
        if self.alias:
            flags.append(f"-{self.alias}")
        return flags

    def add_to(self, parser: argparse.ArgumentParser) -> None:
        kwargs: dict[str, Any] = {"dest": self.name, "default": None, "help": self.description}
        if self.type is bool:
            kwargs["action"] = argparse.BooleanOptionalAction
        else:
            kwargs["type"] = self.type
        parser.add_argument(*self.flags, **kwargs)


class BaseGenerator:
    """Base class for generators.

    Args:
        args: Command-line arguments for this generator.  Options are parsed
            from them as they are registered.
        options: Initial options bag.  Values here win over parsed flags.
        settings: Run settings.  Defaults to :class:`GeneratorSettings`.
        env: Prompt/error environment.  Defaults to an :class:`Environment`
            honouring ``settings.interactive``.
    """

    def __init__(
        self,
        args: Iterable[str] | None = None,
        options: dict[str, Any] | None = None,
        *,
        settings: GeneratorSettings | None = None,
        env: Environment | None = None,
    ) -> None:
        self.args: list[str] = list(args or [])
        self.options: dict[str, Any] = dict(options or {})
        self.settings = settings or GeneratorSettings()
        self.env = env or Environment(interactive=self.settings.interactive)
        self.option_definitions: dict[str, OptionDefinition] = {}
        self._queue: dict[str, list[Callable[[], Any]]] = {stage: [] for stage in STAGES}
        self.fs = FileEditor(TemplateRenderer(self.source_root))

    # -- Paths -------------------------------------------------------------

    @property
    def destination_root(self) -> Path:
        return Path(self.settings.destination_root).expanduser().resolve()

    @property
    def source_root(self) -> Path:
        """Templates directory: the configured one, else ``templates/`` beside the subclass."""
        if self.settings.templates_dir is not None:
            return Path(self.settings.templates_dir).expanduser().resolve()
        return Path(inspect.getfile(type(self))).resolve().parent / "templates"

    def destination_path(self, *parts: str | Path) -> Path:
        return self.destination_root.joinpath(*parts)

    def template_path(self, *parts: str | Path) -> Path:
        return self.source_root.joinpath(*parts)

    # -- Options -----------------------------------------------------------

    def option(
        self,
        name: str,
        type: type = bool,
        alias: str | None = None,
        description: str | None = None,
        default: Any = None,
    ) -> OptionDefinition:
        """Register a command-line option and parse it from ``self.args``.

        The flag is ``--name`` (underscores become hyphens) plus ``-alias``
        when given; boolean options also accept ``--no-name``.  The parsed
        value, or *default* when the flag is absent, is stored in the options
        bag unless the bag already holds a value for *name*.

        A malformed flag (``--name`` with no value, a value that does not
        convert to *type*) ends the run through ``env.error``.
        """
        definition = OptionDefinition(name, type, alias, description, default)
        self.option_definitions[name] = definition

        parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False, exit_on_error=False)
        definition.add_to(parser)
        try:
            parsed, _ = parser.parse_known_args(self.args)
        except argparse.ArgumentError as exc:
            self.env.error(str(exc))
        value = getattr(parsed, name)
        if value is None:
            value = default
        if value is not None and self.options.get(name) is None:
            self.options[name] = value
        return definition

    def build_parser(self, prog: str | None = None) -> argparse.ArgumentParser:
        """Return a parser describing every registered option.

        The CLI prints its help for ``scaffoldkit module:Class --help``.  The
        parser carries no ``-h`` of its own, so ``h`` stays free as an alias.
        """
        parser = argparse.ArgumentParser(
            prog=prog, description=inspect.getdoc(type(self)), add_help=False
        )
        for definition in self.option_definitions.values():
            definition.add_to(parser)
        return parser

    # -- Interaction -------------------------------------------------------

    async def prompt(self, questions: Iterable[Question]) -> dict[str, Any]:
        """Ask *questions* through the environment and return the answers."""
        return await self.env.prompt(questions)

    # -- Run loop ----------------------------------------------------------

    def queue_task(self, stage: str, task: Callable[[], Any]) -> None:
        """Run *task* during *stage*, before the stage method.

        Raises:
            ValueError: If *stage* is not one of :data:`STAGES`.
        """
        if stage not in self._queue:
            raise ValueError(f"Unknown run stage '{stage}'")
        self._queue[stage].append(task)

    async def run(self) -> None:
        """Run every stage in order, awaiting each task before the next."""
        for stage in STAGES:
            for task in list(self._queue[stage]):
                await resolve_maybe_awaitable(task())
            method = getattr(self, stage, None)
            if callable(method):
                await resolve_maybe_awaitable(method())
