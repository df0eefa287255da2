"""AST classes for EBPL programs."""

from .nodes import (
    BinaryOperation,
    Expression,
    Identifier,
    NumberLiteral,
    Operator,
    PrintStatement,
    Program,
    Statement,
    StringLiteral,
    VariableDeclaration,
)

__all__ = [
    "BinaryOperation",
    "Expression",
    "Identifier",
    "NumberLiteral",
    "Operator",
    "PrintStatement",
    "Program",
    "Statement",
    "StringLiteral",
    "VariableDeclaration",
]
