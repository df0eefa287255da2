"""Unified error model for EBPL.

Every error carries:
- Line numbers and column positions
- Expected vs. found token information (syntax errors)
- Error codes for programmatic handling
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class EBPLError(Exception):
    """Base class for all EBPL errors."""

    message: str
    line: Optional[int] = None
    column: Optional[int] = None
    code: str = "EBPL_ERROR"

    def __str__(self) -> str:
        parts = []

        if self.line is not None:
            if self.column is not None:
                parts.append(f"Line {self.line}:{self.column}")
            else:
                parts.append(f"Line {self.line}")

        parts.append(f"[{self.code}] {self.message}")

        return " | ".join(parts)


@dataclass
class EBPLSyntaxError(EBPLError):
    """Raised when the parser meets a token it cannot accept."""

    expected: List[str] = field(default_factory=list)
    found: Optional[str] = None
    code: str = "SYNTAX_ERROR"


@dataclass
class EBPLSimulationError(EBPLError):
    """Raised inside the execution simulator when a line cannot be evaluated."""

    source_line: Optional[str] = None
    code: str = "SIMULATION_ERROR"


@dataclass
class ConfigError(EBPLError):
    """Invalid compiler configuration."""

    path: Optional[str] = None
    code: str = "CONFIG_ERROR"

    def __str__(self) -> str:
        base = super().__str__()
        if self.path:
            return f"File: {self.path} | {base}"
        return base


def create_syntax_error(
    message: str,
    *,
    line: Optional[int] = None,
    column: Optional[int] = None,
    expected: Optional[List[str]] = None,
    found: Optional[str] = None,
) -> EBPLSyntaxError:
    """Create a syntax error with context."""
    return EBPLSyntaxError(
        message=message,
        line=line,
        column=column,
        expected=expected or [],
        found=found,
    )


__all__ = [
    "EBPLError",
    "EBPLSyntaxError",
    "EBPLSimulationError",
    "ConfigError",
    "create_syntax_error",
]
