"""Option/prompt hybrids.

An option prompt is a generator setting that can be passed as a command-line
flag or, when the flag is absent, asked for interactively.  Either way the
final value goes through the same validator.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from .environment import Question, resolve_maybe_awaitable
from .prompt_types import option_type_for

if TYPE_CHECKING:
    from .generator import Generator

_CAMEL_CASE_KEYS = {"whenProhibited": "when_prohibited"}


@dataclass(frozen=True, kw_only=True)
class OptionPromptConfig:
    """Static description of one option prompt.

    Attributes:
        name: Key in the options bag, and the long flag name.
        type: Prompt type, ``"input"`` or ``"confirm"``.
        alias: Optional short flag.
        description: Help text for the flag.
        message: Question shown when prompting.  Defaults to *name*.
        default: Default answer, or a zero-argument callable (sync or async)
            returning it.  Only evaluated when the prompt is shown.
        validate: Callable receiving the final value.  Returns ``True`` when
            valid, an error message string, or a falsy value for a generic
            error.  May be async.
        allowed: Predicate over the options bag.  When it returns false the
            option is not prompted for and takes *when_prohibited*.
        when_prohibited: Value assigned when *allowed* returns false.
    """

    name: str
    type: str
    alias: str | None = None
    description: str | None = None
    message: str | None = None
    default: Any = None
    validate: Callable[[Any], Any] | None = None
    allowed: Callable[[Mapping[str, Any]], bool] | None = None
    when_prohibited: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OptionPromptConfig":
        """Build a config from a plain mapping.

        Accepts ``whenProhibited`` as well as ``when_prohibited``.  Unknown
        keys raise ``TypeError``.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {_CAMEL_CASE_KEYS.get(key, key): value for key, value in data.items()}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise TypeError(f"Unknown option prompt field(s): {', '.join(unknown)}")
        return cls(**kwargs)


class OptionPrompt:
    """A registered option prompt bound to its generator.

    Args:
        generator: The generator owning the options bag.
        config: The option prompt configuration.
    """

    def __init__(self, generator: Generator, config: OptionPromptConfig) -> None:
        self.generator = generator
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def is_allowed(self) -> bool:
        """Whether the option may be set, per ``config.allowed``."""
        allowed = self.config.allowed
        return allowed is None or bool(allowed(self.generator.options))

    @property
    def is_missing(self) -> bool:
        """Whether the options bag has no value for this option yet."""
        return self.generator.options.get(self.config.name) is None

    @property
    def option_type(self) -> type:
        """Flag type for ``config.type``.

        Raises:
            UnsupportedPromptTypeError: If ``config.type`` has no flag type.
        """
        return option_type_for(self.config.type)

    @property
    def option_config(self) -> dict[str, Any]:
        """Keyword arguments for ``generator.option`` when registering the flag."""
        return {
            "type": self.option_type,
            "alias": self.config.alias,
            "description": self.config.description,
        }

    @property
    def question(self) -> Question:
        """The question handed to ``generator.prompt``."""
        default = self.config.default
        return Question(
            name=self.config.name,
            type=self.config.type,
            message=self.config.message,
            default=lambda: default() if callable(default) else default,
            when=lambda: self.is_missing,
            validate=self.config.validate,
        )

    async def prompt(self) -> None:
        """Fill the option in the options bag.

        Asks the user when the option is allowed and was not given on the
        command line.  A prohibited option takes ``config.when_prohibited``.
        """
        options = self.generator.options
        if self.is_allowed:
            options.update(await self.generator.prompt([self.question]))
        else:
            options[self.config.name] = self.config.when_prohibited

    async def validate(self) -> None:
        """Check the final value against ``config.validate``.

        A rejected value is reported through ``generator.env.error``, which
        ends the run.
        """
        validate = self.config.validate
        if validate is None:
            return

        name = self.config.name
        value = self.generator.options.get(name)
        result = await resolve_maybe_awaitable(validate(value))
        if not result:
            result = f"Invalid {name} option '{_format_value(value)}'"
        if isinstance(result, str):
            self.generator.env.error(result)

    async def resolve(self) -> None:
        """Prompt for the option, then validate it."""
        await self.prompt()
        await self.validate()


def _format_value(value: Any) -> str:
    """Format an option value for a message; booleans print as ``true``/``false``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
