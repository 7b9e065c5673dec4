"""Shared pytest fixtures for the scaffoldkit test suite.

Provides reusable fixtures for:
- Destination and template directories
- A scripted prompter standing in for the terminal
- Generator factories wired to both
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from scaffoldkit.config import GeneratorSettings
from scaffoldkit.scaffolder.environment import Environment, Question
from scaffoldkit.scaffolder.generator import Generator


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Answers questions from a queue of canned answers per question name.

    Every question asked is recorded in :attr:`asked` together with the
    default it was offered.
    """

    def __init__(self, answers: dict[str, Any] | None = None) -> None:
        self.answers: dict[str, list[Any]] = {
            name: list(value) if isinstance(value, list) else [value]
            for name, value in (answers or {}).items()
        }
        self.asked: list[tuple[str, Any]] = []

    async def ask(self, question: Question, default: Any) -> Any:
        self.asked.append((question.name, default))
        queue = self.answers.get(question.name)
        if not queue:
            return default
        return queue.pop(0)

    @property
    def asked_names(self) -> list[str]:
        return [name for name, _ in self.asked]


@pytest.fixture
def prompter() -> ScriptedPrompter:
    """A prompter with no canned answers: every question takes its default."""
    return ScriptedPrompter()


@pytest.fixture
def make_prompter() -> type[ScriptedPrompter]:
    """The ScriptedPrompter class, for tests that need several prompters."""
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """Empty destination directory named like a generated project."""
    path = tmp_path / "my-app"
    path.mkdir()
    return path


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Templates directory with a couple of small templates."""
    path = tmp_path / "templates"
    (path / "src").mkdir(parents=True)
    (path / "README.md").write_text(
        "# {{ name }}\n\n{{ description }}\n", encoding="utf-8"
    )
    (path / "src" / "index.ts").write_text(
        "export const {{ name | camel_case }} = {{ typescript | lower }};\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def settings(destination: Path, templates_dir: Path) -> GeneratorSettings:
    return GeneratorSettings(destination_root=destination, templates_dir=templates_dir)


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


@pytest.fixture
def make_generator(
    settings: GeneratorSettings,
) -> Callable[..., Generator]:
    """Factory building a generator wired to the temp directories.

    Usage:
        def test_something(make_generator):
            gen = make_generator(["--name", "demo"], answers={"color": "red"})
    """

    def _make(
        args: list[str] | None = None,
        options: dict[str, Any] | None = None,
        *,
        answers: dict[str, Any] | None = None,
        prompter: ScriptedPrompter | None = None,
        interactive: bool = True,
        cls: type[Generator] = Generator,
    ) -> Generator:
        prompter = prompter or ScriptedPrompter(answers)
        env = Environment(prompter, interactive=interactive)
        return cls(args, options, settings=settings, env=env)

    return _make


@pytest.fixture
def read_json(destination: Path) -> Callable[[str], Any]:
    """Read a JSON file from the destination directory."""

    def _read(name: str) -> Any:
        return json.loads((destination / name).read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def write_json(destination: Path) -> Callable[[str, Any], Path]:
    """Write a JSON file into the destination directory."""

    def _write(name: str, data: Any) -> Path:
        path = destination / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write
