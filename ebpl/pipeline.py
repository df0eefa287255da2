"""Compile pipeline: tokenize, parse, generate and simulate.

Every call to :func:`compile_source` is independent; it builds its own
tokens, AST and simulation environment and shares nothing with other calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ebpl.codegen.python import generate_python
from ebpl.config import CompilerConfig
from ebpl.errors import EBPLSyntaxError
from ebpl.lang.lexer import Token, TokenType, tokenize
from ebpl.lang.parser import parse_program
from ebpl.observability.logging import log_compile_event
from ebpl.runtime.simulator import simulate

HIDDEN_TOKEN_TYPES = (TokenType.NEWLINE, TokenType.END)


@dataclass
class CompileResult:
    """Outcome of one compile call.

    On success ``tokens_display``, ``emitted_text`` and ``output_trace`` are
    filled in (``simulation_error`` is set when the preview failed).  On
    failure only ``error_message`` and ``errors`` are meaningful.
    """

    success: bool
    tokens_display: List[str] = field(default_factory=list)
    emitted_text: str = ""
    output_trace: str = ""
    simulation_error: str = ""
    error_message: str = ""
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase shape consumed by the web front end."""
        if not self.success:
            return {
                "success": False,
                "error": self.error_message,
                "errors": list(self.errors),
            }
        return {
            "success": True,
            "tokens": list(self.tokens_display),
            "generatedCode": self.emitted_text,
            "executionOutput": self.output_trace,
            "executionError": self.simulation_error,
        }


def format_token(token: Token, pad_width: int = 20) -> str:
    return f"{token.type.name.ljust(pad_width)} -> '{token.value}' (line {token.line})"


def tokens_display(tokens: Iterable[Token], pad_width: int = 20) -> List[str]:
    return [
        format_token(token, pad_width)
        for token in tokens
        if token.type not in HIDDEN_TOKEN_TYPES
    ]


def compile_source(source: str, config: Optional[CompilerConfig] = None) -> CompileResult:
    """Translate EBPL ``source`` and preview its output."""
    config = config or CompilerConfig()

    tokens = tokenize(source)
    try:
        program = parse_program(tokens)
    except EBPLSyntaxError as exc:
        log_compile_event(
            "syntax_error",
            "Compilation failed",
            data={"line": exc.line, "expected": exc.expected, "found": exc.found},
        )
        return CompileResult(success=False, error_message=exc.message, errors=[exc.message])

    code = generate_python(program, config)

    output_trace = ""
    simulation_error = ""
    if config.simulate:
        simulation = simulate(code)
        output_trace = simulation.output
        simulation_error = simulation.error
        if simulation_error:
            log_compile_event(
                "simulation_error",
                "Execution preview failed",
                level=logging.WARNING,
                data={"error": simulation_error},
            )

    log_compile_event(
        "compiled",
        "Compiled program",
        level=logging.DEBUG,
        data={"statements": len(program.statements), "tokens": len(tokens)},
    )
    return CompileResult(
        success=True,
        tokens_display=tokens_display(tokens, config.token_pad_width),
        emitted_text=code,
        output_trace=output_trace,
        simulation_error=simulation_error,
    )


__all__ = ["CompileResult", "compile_source", "format_token", "tokens_display"]
