"""scaffoldkit configuration.

Typed settings for a single generator run.  All settings use Pydantic v2
models so they are validated at construction time and can be built from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorSettings(BaseModel):
    """Settings shared by the host runtime and the generator conveniences.

    Instances are typically created once by the CLI entry point and handed
    to the generator constructor.
    """

    destination_root: Path = Field(
        default_factory=Path.cwd,
        description="Directory the generator writes into",
    )
    templates_dir: Path | None = Field(
        default=None,
        description="Templates directory; defaults to templates/ beside the generator module",
    )
    interactive: bool = Field(
        default=True,
        description="Ask questions on the terminal; when false, defaults are taken",
    )
    json_indent: str = Field(default="\t", description="Indentation for written JSON files")

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeneratorSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            SCAFFOLDKIT_DESTINATION, SCAFFOLDKIT_TEMPLATES,
            SCAFFOLDKIT_NON_INTERACTIVE.

        Keyword *overrides* that are not ``None`` win over the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLDKIT_DESTINATION"):
            kwargs["destination_root"] = Path(os.environ["SCAFFOLDKIT_DESTINATION"])
        if os.environ.get("SCAFFOLDKIT_TEMPLATES"):
            kwargs["templates_dir"] = Path(os.environ["SCAFFOLDKIT_TEMPLATES"])
        if os.environ.get("SCAFFOLDKIT_NON_INTERACTIVE", "").strip().lower() in _TRUTHY:
            kwargs["interactive"] = False

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)
