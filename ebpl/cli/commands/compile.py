"""
Compile command implementation.

Handles the 'compile' subcommand: translate an EBPL file (or stdin) and
print the output trace, the token listing, the generated code or the full
result as JSON.
"""

import argparse
import json
import sys
from pathlib import Path

from ebpl.config import CompilerConfig
from ebpl.pipeline import CompileResult, compile_source

from ..errors import CLICompileError, CLIFileNotFoundError, handle_cli_exception


def read_source(path: str) -> str:
    """Read EBPL source from ``path``; ``-`` reads standard input."""
    if path == "-":
        return sys.stdin.read()
    source_path = Path(path)
    if not source_path.is_file():
        raise CLIFileNotFoundError(
            f"No such file: {path}",
            hint="Pass the path to an .ebpl file or '-' to read from stdin",
        )
    try:
        return source_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CLIFileNotFoundError(f"Could not read {path}: {exc}") from exc


def render_result(result: CompileResult, args: argparse.Namespace) -> None:
    if getattr(args, "json", False):
        print(json.dumps(result.to_dict(), indent=2))
        return

    sections = []
    if getattr(args, "tokens", False):
        sections.append("\n".join(result.tokens_display))
    if getattr(args, "code", False):
        sections.append(result.emitted_text)
    if not sections or getattr(args, "run", False):
        if result.simulation_error:
            print(result.simulation_error, file=sys.stderr)
        sections.append(result.output_trace)

    print("\n\n".join(section for section in sections if section))


def run_compile(source: str, args: argparse.Namespace, config: CompilerConfig) -> CompileResult:
    result = compile_source(source, config)
    if not result.success:
        if getattr(args, "json", False):
            print(json.dumps(result.to_dict(), indent=2))
        raise CLICompileError(result.error_message)
    render_result(result, args)
    return result


def cmd_compile(args: argparse.Namespace) -> None:
    """
    Handle the 'compile' subcommand.

    Examples:
        >>> args = argparse.Namespace(file="hello.ebpl", tokens=False, code=True, json=False)
        >>> cmd_compile(args)  # doctest: +SKIP
        #!/usr/bin/env python3
        # Generated from EBPL
        <BLANKLINE>
        print("Hello, EBPL World!")
    """
    config = getattr(args, "compiler_config", None) or CompilerConfig()
    try:
        source = read_source(args.file)
        run_compile(source, args, config)
    except (CLICompileError, CLIFileNotFoundError) as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
