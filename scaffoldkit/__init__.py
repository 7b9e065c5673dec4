"""scaffoldkit -- option/prompt hybrids and JSON helpers for code generators.

Quick usage::

    from scaffoldkit import Generator

    class AppGenerator(Generator):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.option_prompt({
                "name": "typescript",
                "type": "confirm",
                "alias": "t",
                "message": "Use TypeScript?",
                "default": True,
            })
            self.register_option_prompts()

        def writing(self):
            if self.options["typescript"]:
                self.extend_ts_config({"include": ["src"]})
            self.add_scripts({"build": "tsc"})
"""

from scaffoldkit.config import GeneratorSettings
from scaffoldkit.scaffolder import (
    BaseGenerator,
    Environment,
    Generator,
    GeneratorError,
    OptionPromptConfig,
    PromptType,
    UnsupportedPromptTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "BaseGenerator",
    "Environment",
    "Generator",
    "GeneratorError",
    "GeneratorSettings",
    "OptionPromptConfig",
    "PromptType",
    "UnsupportedPromptTypeError",
    "__version__",
]
