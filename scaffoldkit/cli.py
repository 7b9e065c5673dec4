"""Command-line entry point: load a generator class and run it.

Examples::

    scaffoldkit my_generators.app:AppGenerator --destination ./my-app
    scaffoldkit my_generators.app:AppGenerator --non-interactive --typescript
    scaffoldkit my_generators.app:AppGenerator --help
"""

from __future__ import annotations

import argparse
import asyncio
import importlib
import sys
from pathlib import Path

from .config import GeneratorSettings
from .scaffolder.base import BaseGenerator
from .scaffolder.environment import GeneratorError
from .utils import print_error, print_success, print_summary_table


def load_generator_class(reference: str) -> type[BaseGenerator]:
    """Import a generator class from a ``module:Class`` reference.

    Raises:
        ValueError: If the reference is malformed or does not name a
            generator class.
        ImportError: If the module cannot be imported.
    """
    module_name, sep, class_name = reference.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"Expected 'module:Class', got '{reference}'")

    module = importlib.import_module(module_name)
    cls = getattr(module, class_name, None)
    if not (isinstance(cls, type) and issubclass(cls, BaseGenerator)):
        raise ValueError(f"'{reference}' is not a generator class")
    return cls


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scaffoldkit",
        allow_abbrev=False,
        add_help=False,
        description="Run a scaffoldkit generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Arguments after the generator reference that are not listed above\n"
            "are passed to the generator as its own options.\n"
        ),
    )
    parser.add_argument(
        "generator", nargs="?", default=None, help="Generator class as 'module:Class'"
    )
    parser.add_argument(
        "--help", "-h",
        action="store_true",
        help="Show this help, or the generator's options when one is named",
    )
    parser.add_argument(
        "--destination", "-d",
        type=Path,
        default=None,
        help="Destination directory (default: current directory)",
    )
    parser.add_argument(
        "--templates",
        type=Path,
        default=None,
        help="Templates directory (default: templates/ beside the generator module)",
    )
    parser.add_argument(
        "--non-interactive",
        action="store_true",
        help="Never prompt; take default answers",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``scaffoldkit`` and ``python -m scaffoldkit``."""
    parser = build_parser()
    args, generator_args = parser.parse_known_args(argv)

    if args.generator is None:
        if args.help:
            parser.print_help()
            return
        parser.error("the following arguments are required: generator")

    try:
        generator_cls = load_generator_class(args.generator)
    except (ValueError, ImportError) as exc:
        parser.error(str(exc))

    settings = GeneratorSettings.from_env(
        destination_root=args.destination,
        templates_dir=args.templates,
        interactive=False if args.non_interactive else None,
    )

    try:
        generator = generator_cls(generator_args, settings=settings)
        if args.help:
            generator.build_parser(prog=f"scaffoldkit {args.generator}").print_help()
            return
        asyncio.run(generator.run())
    except GeneratorError as exc:
        print_error(f"Error: {exc.message}")
        sys.exit(1)

    written = getattr(generator.fs, "written", [])
    if written:
        root = generator.destination_root
        print_summary_table(
            {str(_relative(path, root)): "written" for path in written},
            title="Files",
        )
    print_success(f"Generated into {generator.destination_root}")


def _relative(path: Path, root: Path) -> Path:
    try:
        return path.relative_to(root)
    except ValueError:
        return path


if __name__ == "__main__":
    main()
