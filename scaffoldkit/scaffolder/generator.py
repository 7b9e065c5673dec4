"""Generator conveniences.

:class:`Generator` extends :class:`~scaffoldkit.scaffolder.base.BaseGenerator`
with option prompts, template copying with sensible defaults and helpers
for merging into ``package.json``, ``tsconfig.json`` and other JSON files.

Quick usage::

    from scaffoldkit import Generator

    class LibraryGenerator(Generator):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.option_prompt({
                "name": "description",
                "type": "input",
                "message": "Package description?",
                "validate": bool,
            })
            self.register_option_prompts()

        def writing(self):
            self.copy_template("README.md")
            self.add_scripts({"test": "jest"})
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .base import BaseGenerator
from .merge import MergeCustomizer, append_scripts, concat_arrays, merge_with, prepend_scripts
from .option_prompt import OptionPrompt, OptionPromptConfig

PACKAGE_JSON = "package.json"
TSCONFIG_JSON = "tsconfig.json"


class Generator(BaseGenerator):
    """Generator base class with option prompts and JSON helpers.

    Subclasses that declare option prompts must call
    :meth:`register_option_prompts` from their constructor so the prompts
    are resolved during the ``prompting`` stage.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.option_prompts: list[OptionPrompt] = []
        self._option_prompts_registered = False

    # -- Paths and templates -----------------------------------------------

    @property
    def destination_name(self) -> str:
        """The base name of the destination directory."""
        return self.destination_root.name

    def copy_template(
        self,
        template_path: str | Path,
        destination_path: str | Path | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> Path:
        """Render a template into the destination directory.

        Args:
            template_path: Path of the template inside the templates directory.
            destination_path: Path inside the destination directory.  Defaults
                to *template_path*.
            context: Template variables.  Defaults to the options bag.

        Returns:
            The written path.
        """
        if destination_path is None:
            destination_path = template_path
        if context is None:
            context = self.options
        return self.fs.copy_tpl(
            self.template_path(template_path),
            self.destination_path(destination_path),
            dict(context),
        )

    # -- JSON helpers ------------------------------------------------------

    def extend_json(
        self,
        destination_path: str | Path,
        contents: Mapping[str, Any],
        customizer: MergeCustomizer | None = concat_arrays,
    ) -> Path:
        """Merge *contents* into a JSON file in the destination directory.

        A missing file is treated as ``{}``.  With the default customizer,
        lists found at the same path are concatenated instead of the new list
        overwriting the old one.  The file is written back tab-indented.

        Raises:
            TypeError: If the existing file does not hold a JSON object.
        """
        path = self.destination_path(destination_path)
        data = self.fs.read_json(path, {})
        if not isinstance(data, dict):
            raise TypeError(f"{path} does not contain a JSON object")
        merge_with(data, dict(contents), customizer)
        return self.fs.write_json(path, data, self.settings.json_indent)

    def extend_ts_config(
        self,
        contents: Mapping[str, Any],
        customizer: MergeCustomizer | None = concat_arrays,
    ) -> Path:
        """:meth:`extend_json` for ``tsconfig.json``."""
        return self.extend_json(TSCONFIG_JSON, contents, customizer)

    def extend_package(
        self,
        contents: Mapping[str, Any],
        customizer: MergeCustomizer | None = concat_arrays,
    ) -> Path:
        """:meth:`extend_json` for ``package.json``."""
        return self.extend_json(PACKAGE_JSON, contents, customizer)

    def add_scripts(self, scripts: Mapping[str, str], prepend: bool = False) -> Path:
        """Add npm scripts to ``package.json``.

        A script whose name already exists is combined with the existing
        command using ``&&``: the existing command runs first, or last when
        *prepend* is true.
        """
        customizer = prepend_scripts if prepend else append_scripts
        return self.extend_package({"scripts": dict(scripts)}, customizer)

    def sort_scripts(self, order: Iterable[str]) -> Path | None:
        """Reorder the scripts in ``package.json``.

        Scripts named in *order* come first, in that order; names that do
        not exist are skipped.  The remaining scripts follow in their
        original order.  Nothing is written when there are no scripts.
        """
        path = self.destination_path(PACKAGE_JSON)
        package = self.fs.read_json(path, {})
        scripts = package.get("scripts") if isinstance(package, dict) else None
        if not isinstance(scripts, dict):
            return None

        ordered = {name: scripts[name] for name in order if name in scripts}
        ordered.update((name, command) for name, command in scripts.items() if name not in ordered)
        package["scripts"] = ordered
        return self.fs.write_json(path, package, self.settings.json_indent)

    # -- Option prompts ----------------------------------------------------

    def option_prompt(self, config: OptionPromptConfig | Mapping[str, Any]) -> OptionPrompt:
        """Register an option that falls back to a prompt.

        The command-line flag is registered right away, so an unsupported
        prompt type fails here.

        Args:
            config: An :class:`OptionPromptConfig` or a mapping with its
                fields (``whenProhibited`` is accepted for ``when_prohibited``).

        Raises:
            UnsupportedPromptTypeError: If the prompt type has no flag type.
        """
        if not isinstance(config, OptionPromptConfig):
            config = OptionPromptConfig.from_mapping(config)
        option_prompt = OptionPrompt(self, config)
        self.option(config.name, **option_prompt.option_config)
        self.option_prompts.append(option_prompt)
        return option_prompt

    def register_option_prompts(self) -> None:
        """Resolve the registered option prompts during the ``prompting`` stage.

        Safe to call more than once; the prompts are queued a single time.
        """
        if self._option_prompts_registered:
            return
        self.queue_task("prompting", self.resolve_option_prompts)
        self._option_prompts_registered = True

    async def resolve_option_prompts(self) -> None:
        """Prompt for and validate every option prompt, in registration order."""
        for option_prompt in self.option_prompts:
            await option_prompt.resolve()
