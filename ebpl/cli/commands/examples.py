"""
Examples command implementation.

Lists the built-in example programs, prints one, or compiles it.
"""

import argparse

from ebpl.config import CompilerConfig
from ebpl.examples import CATEGORIES, get_example, list_examples

from ..errors import CLICompileError, CLIFileNotFoundError, handle_cli_exception
from .compile import run_compile


def _print_catalog() -> None:
    for category, title in CATEGORIES.items():
        print(f"{title}:")
        for example in list_examples(category):
            print(f"  {example.slug:<16} {example.description}")


def cmd_examples(args: argparse.Namespace) -> None:
    """Handle the 'examples' subcommand."""
    if not args.name:
        _print_catalog()
        return

    config = getattr(args, "compiler_config", None) or CompilerConfig()
    try:
        try:
            example = get_example(args.name)
        except KeyError as exc:
            raise CLIFileNotFoundError(
                f"Unknown example '{args.name}'",
                hint="Run 'ebpl examples' to list the available examples",
            ) from exc

        if not args.run:
            print(example.source)
            return
        run_compile(example.source, args, config)
    except (CLICompileError, CLIFileNotFoundError) as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
