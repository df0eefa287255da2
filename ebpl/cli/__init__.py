"""
EBPL CLI entry point.

Dispatches the ``compile``, ``examples`` and ``serve`` subcommands to the
command modules in :mod:`ebpl.cli.commands`.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

from ebpl import __version__
from ebpl.config import LOG_LEVEL_ENV, load_compiler_config
from ebpl.errors import ConfigError
from ebpl.lang import LANGUAGE_VERSION
from ebpl.observability.logging import configure_logging

from .commands import cmd_compile, cmd_examples, cmd_serve
from .errors import CLIConfigError, handle_cli_exception


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="EBPL compiler – translate plain-English programs into Python",
        prog="ebpl",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__} (language {LANGUAGE_VERSION})",
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to an ebpl.toml configuration file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set EBPL_VERBOSE=1)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help=f'Set logging level (or set {LOG_LEVEL_ENV})'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    compile_parser = subparsers.add_parser(
        'compile',
        help='Translate an EBPL program and show what it prints'
    )
    compile_parser.add_argument('file', help="Path to the .ebpl source file, or '-' for stdin")
    compile_parser.add_argument(
        '--tokens', action='store_true', help='Print the token listing'
    )
    compile_parser.add_argument(
        '--code', action='store_true', help='Print the generated Python code'
    )
    compile_parser.add_argument(
        '--run', action='store_true',
        help='Also print the output trace when --tokens or --code is given'
    )
    compile_parser.add_argument(
        '--json', action='store_true', help='Print the full compile result as JSON'
    )
    compile_parser.set_defaults(func=cmd_compile)

    examples_parser = subparsers.add_parser(
        'examples',
        help='List, show or compile the built-in example programs'
    )
    examples_parser.add_argument('name', nargs='?', help='Example name, e.g. basic-math')
    examples_parser.add_argument(
        '--run', action='store_true', help='Compile the example and print its output'
    )
    examples_parser.add_argument(
        '--code', action='store_true', help='Print the generated Python code (with --run)'
    )
    examples_parser.add_argument(
        '--tokens', action='store_true', help='Print the token listing (with --run)'
    )
    examples_parser.add_argument(
        '--json', action='store_true', help='Print the compile result as JSON (with --run)'
    )
    examples_parser.set_defaults(func=cmd_examples)

    serve_parser = subparsers.add_parser(
        'serve',
        help='Run the EBPL HTTP API'
    )
    serve_parser.add_argument(
        '--host',
        default='127.0.0.1',
        help='Host to bind server to (default: 127.0.0.1)'
    )
    serve_parser.add_argument(
        '--port',
        type=int,
        default=8000,
        help='Port to bind server to (default: 8000)'
    )
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Examples:
        >>> main(['compile', 'hello.ebpl'])  # doctest: +SKIP
        Hello, EBPL World!
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, 'command', None):
        parser.print_help()
        sys.exit(2)

    try:
        explicit = Path(args.config).resolve() if args.config else None
        config = load_compiler_config(Path.cwd(), explicit)
    except ConfigError as exc:
        handle_cli_exception(
            CLIConfigError(str(exc), hint="Fix the [compiler] section of ebpl.toml"),
            verbose=args.verbose,
        )
        return

    if args.log_level:
        config = replace(config, log_level=args.log_level)
    configure_logging(config.log_level)

    args.compiler_config = config
    args.func(args)


__all__ = ["build_parser", "main"]
