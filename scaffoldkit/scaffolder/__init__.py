"""scaffoldkit scaffolder -- generator runtime and conveniences.

Quick usage::

    from scaffoldkit.scaffolder import Generator

    class AppGenerator(Generator):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.option_prompt({"name": "typescript", "type": "confirm"})
            self.register_option_prompts()
"""

from scaffoldkit.scaffolder.base import STAGES, BaseGenerator
from scaffoldkit.scaffolder.environment import Environment, GeneratorError, Question, RichPrompter
from scaffoldkit.scaffolder.generator import Generator
from scaffoldkit.scaffolder.merge import (
    MergeCustomizer,
    append_scripts,
    concat_arrays,
    merge_with,
    prepend_scripts,
)
from scaffoldkit.scaffolder.option_prompt import OptionPrompt, OptionPromptConfig
from scaffoldkit.scaffolder.prompt_types import PromptType, UnsupportedPromptTypeError
from scaffoldkit.scaffolder.templates import TemplateRenderer

__all__ = [
    "BaseGenerator",
    "Environment",
    "Generator",
    "GeneratorError",
    "MergeCustomizer",
    "OptionPrompt",
    "OptionPromptConfig",
    "PromptType",
    "Question",
    "RichPrompter",
    "STAGES",
    "TemplateRenderer",
    "UnsupportedPromptTypeError",
    "append_scripts",
    "concat_arrays",
    "merge_with",
    "prepend_scripts",
]
