"""Jinja2 template rendering for generator templates.

Provides the TemplateRenderer class which loads Jinja2 templates from a
generator's templates directory and renders them with the generator's
options bag (or any other context).  Templates outside the directory are
rendered from their source text.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

_WORD_SPLIT = re.compile(r"[-_\s]+")


class TemplateRenderer:
    """Renders Jinja2 templates rooted at a single templates directory.

    Undefined variables raise instead of rendering as empty strings, so a
    template referencing an option that was never resolved fails loudly.
    """

    def __init__(self, template_dir: str | Path) -> None:
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["slugify"] = _slugify_filter
        self.env.filters["pascal_case"] = _pascal_case_filter
        self.env.filters["snake_case"] = _snake_case_filter
        self.env.filters["camel_case"] = _camel_case_filter

    def render(self, template_path: str | Path, context: dict[str, Any]) -> str:
        """Render a template file with *context*.

        Args:
            template_path: Path relative to the templates directory, or an
                absolute path.  Absolute paths outside the templates
                directory are rendered from their file contents, without
                support for ``{% include %}``.
            context: Variables available inside the template.

        Returns:
            The rendered content.
        """
        path = Path(template_path)
        if path.is_absolute():
            try:
                path = path.relative_to(self.template_dir)
            except ValueError:
                return self.render_string(path.read_text(encoding="utf-8"), context)
        template = self.env.get_template(path.as_posix())
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with *context*."""
        return self.env.from_string(template_string).render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def _slugify_filter(value: str) -> str:
    """Convert a string to a package/filename-safe slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower().strip())
    return slug.strip("-")


def _pascal_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    return "".join(word.capitalize() for word in _WORD_SPLIT.split(value) if word)


def _snake_case_filter(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def _camel_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = _pascal_case_filter(value)
    return pascal[:1].lower() + pascal[1:]
