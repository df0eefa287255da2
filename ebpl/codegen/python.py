"""Python code generator for EBPL programs.

Each statement becomes exactly one line of Python after a fixed header.
Binary operations are rendered fully parenthesised so the emitted text
shows the left-to-right grouping the parser built.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import List, Optional

from ebpl.ast import (
    BinaryOperation,
    Expression,
    Identifier,
    NumberLiteral,
    PrintStatement,
    Program,
    Statement,
    StringLiteral,
    VariableDeclaration,
)
from ebpl.config import CompilerConfig
from ebpl.observability.logging import get_logger

logger = get_logger("ebpl.codegen")


def format_number(value: float) -> str:
    """Render a number as plain decimal text: ``10`` rather than ``10.0``.

    Exponent notation is never produced, so ``1e-07`` renders as
    ``0.0000001``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def render_expression(node: Expression) -> str:
    if isinstance(node, NumberLiteral):
        return format_number(node.value)
    if isinstance(node, StringLiteral):
        return f'"{node.value}"'
    if isinstance(node, Identifier):
        return node.name
    if isinstance(node, BinaryOperation):
        left = render_expression(node.left)
        right = render_expression(node.right)
        return f"({left} {node.operator} {right})"
    raise TypeError(f"Unsupported expression node: {type(node).__name__}")


def render_statement(node: Statement, indent: int = 0, *, indent_width: int = 4) -> str:
    prefix = " " * (indent * indent_width)
    if isinstance(node, VariableDeclaration):
        return f"{prefix}{node.name} = {render_expression(node.value)}"
    if isinstance(node, PrintStatement):
        return f"{prefix}print({render_expression(node.value)})"
    raise TypeError(f"Unsupported statement node: {type(node).__name__}")


def generate_python(program: Program, config: Optional[CompilerConfig] = None) -> str:
    """Render ``program`` as Python source text."""
    config = config or CompilerConfig()
    lines: List[str] = list(config.header_lines)
    lines.append("")
    for statement in program.statements:
        lines.append(render_statement(statement, indent_width=config.indent_width))
    logger.debug("Generated %d statement line(s)", len(program.statements))
    return "\n".join(lines)
