"""
Error handling for the EBPL CLI.

CLI errors carry a machine-readable code, an optional hint and the exit
status the process should terminate with.
"""

import os
import sys
import traceback
from typing import Any, Dict, Optional

# Maximum length for traceback output in CLI
_CLI_TRACE_LIMIT = 4000

EXIT_COMPILE_ERROR = 1
EXIT_USAGE_ERROR = 2


class CLIError(Exception):
    """
    Base exception for all CLI operations.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code
        hint: Optional suggestion for resolving the error
        exit_code: Process exit status used by :func:`handle_cli_exception`
        context: Additional metadata about the error
    """

    exit_code: int = EXIT_COMPILE_ERROR

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None,
        exit_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        if exit_code is not None:
            self.exit_code = exit_code
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIConfigError(CLIError):
    """Configuration file is invalid."""

    exit_code = EXIT_USAGE_ERROR

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_CONFIG_ERROR')
        super().__init__(message, **kwargs)


class CLIFileNotFoundError(CLIError):
    """Source file does not exist or cannot be read."""

    exit_code = EXIT_USAGE_ERROR

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_FILE_NOT_FOUND')
        super().__init__(message, **kwargs)


class CLICompileError(CLIError):
    """The EBPL program has a syntax error."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_COMPILE_ERROR')
        super().__init__(message, **kwargs)


class CLIDependencyError(CLIError):
    """An optional package needed by the command is missing."""

    exit_code = EXIT_USAGE_ERROR

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_DEPENDENCY_ERROR')
        super().__init__(message, **kwargs)


def format_cli_error(exc: BaseException, *, verbose: bool = False) -> str:
    """
    Format exception for CLI display.

    Examples:
        >>> print(format_cli_error(CLIFileNotFoundError("No such file: a.ebpl", hint="Check the path")))
        Error [CLI_FILE_NOT_FOUND]: No such file: a.ebpl
        Hint: Check the path
    """
    lines = []

    if isinstance(exc, CLIError):
        lines.append(f"Error [{exc.code}]: {exc.message}")
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
        if verbose and exc.context:
            lines.append("\nContext:")
            for key, value in exc.context.items():
                lines.append(f"  {key}: {value}")
    else:
        lines.append(f"Error: {exc.__class__.__name__}: {exc}")

    if verbose:
        lines.append("\nTraceback:")
        lines.append(format_traceback_excerpt())

    return "\n".join(lines)


def format_traceback_excerpt() -> str:
    """Format the current exception traceback, truncated to a fixed size."""
    trace = traceback.format_exc().strip()
    if len(trace) <= _CLI_TRACE_LIMIT:
        return trace
    return f"{trace[:_CLI_TRACE_LIMIT - 3]}..."


def _env_flag(name: str) -> bool:
    val = os.getenv(name)
    if val is None:
        return False
    return val.strip().lower() in {"1", "true", "yes", "on"}


def cli_verbose_enabled(verbose_flag: bool = False) -> bool:
    """Explicit flag or ``EBPL_VERBOSE`` / ``EBPL_DEBUG`` environment variables."""
    return verbose_flag or _env_flag("EBPL_VERBOSE") or _env_flag("EBPL_DEBUG")


def handle_cli_exception(exc: BaseException, *, verbose: bool = False) -> None:
    """
    Print ``exc`` to stderr and exit.

    Note:
        This function calls sys.exit() and does not return.
    """
    verbose_effective = cli_verbose_enabled(verbose)
    print(format_cli_error(exc, verbose=verbose_effective), file=sys.stderr)
    exit_code = exc.exit_code if isinstance(exc, CLIError) else EXIT_COMPILE_ERROR
    sys.exit(exit_code)


__all__ = [
    "CLIError",
    "CLIConfigError",
    "CLIFileNotFoundError",
    "CLICompileError",
    "CLIDependencyError",
    "EXIT_COMPILE_ERROR",
    "EXIT_USAGE_ERROR",
    "format_cli_error",
    "handle_cli_exception",
]
