"""AST node definitions for EBPL programs.

The node set is closed: ``Statement`` and ``Expression`` are unions over the
classes below and every consumer handles each member explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Tuple, Union

Operator = Literal["+", "-", "*", "/"]


@dataclass(frozen=True)
class NumberLiteral:
    value: float


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class BinaryOperation:
    """Binary operation: left op right"""
    left: "Expression"
    operator: Operator
    right: "Expression"


Expression = Union[NumberLiteral, StringLiteral, Identifier, BinaryOperation]


@dataclass(frozen=True)
class VariableDeclaration:
    """create variable <name> with value <expr>"""
    name: str
    value: Expression
    line: int = 0


@dataclass(frozen=True)
class PrintStatement:
    """print <expr>"""
    value: Expression
    line: int = 0


Statement = Union[VariableDeclaration, PrintStatement]


@dataclass(frozen=True)
class Program:
    statements: Tuple[Statement, ...] = field(default_factory=tuple)


__all__ = [
    "Operator",
    "NumberLiteral",
    "StringLiteral",
    "Identifier",
    "BinaryOperation",
    "Expression",
    "VariableDeclaration",
    "PrintStatement",
    "Statement",
    "Program",
]
