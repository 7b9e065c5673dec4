"""Synchronous file editor used by generators.

All reads and writes go straight to disk.  Every written path is recorded
in :attr:`FileEditor.written` so the CLI can report what a run produced.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..utils import dump_json, load_json
from .templates import TemplateRenderer


class FileEditor:
    """Reads, writes and renders files for a generator run."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer
        self.written: list[Path] = []

    def write(self, path: str | Path, contents: str) -> Path:
        """Write *contents* to *path*, creating parent directories."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(contents, encoding="utf-8")
        if target not in self.written:
            self.written.append(target)
        return target

    def read_json(self, path: str | Path, default: Any = None) -> Any:
        """Parse the JSON file at *path*, or return *default* if it is missing."""
        return load_json(path, default)

    def write_json(self, path: str | Path, data: Any, indent: str | int = "\t") -> Path:
        return self.write(path, dump_json(data, indent))

    def copy_tpl(
        self,
        template_path: str | Path,
        destination_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template with *context* and write it to *destination_path*."""
        return self.write(destination_path, self.renderer.render(template_path, context))
