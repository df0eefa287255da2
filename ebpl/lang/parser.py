"""Recursive descent parser for EBPL.

Grammar::

    Program     := (Statement | NEWLINE)* END
    Statement   := VarDecl | PrintStmt
    VarDecl     := CREATE VARIABLE IDENTIFIER WITH VALUE Expression
    PrintStmt   := PRINT Expression
    Expression  := Primary ((PLUS | MINUS | MULTIPLY | DIVIDE) Primary)*
    Primary     := NUMBER | STRING | IDENTIFIER

Operators have no precedence; expressions fold strictly left to right, so
``a + b * c`` parses as ``(a + b) * c``.  The first error aborts parsing.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

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
from ebpl.errors import EBPLSyntaxError, create_syntax_error
from ebpl.observability.logging import get_logger

from .lexer import Token, TokenType

logger = get_logger("ebpl.parser")

BINARY_OPERATORS = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.MULTIPLY: "*",
    TokenType.DIVIDE: "/",
}


class Parser:
    """Turns a token sequence into a :class:`Program`."""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.pos = 0

    # ====================================================================
    # Token Management
    # ====================================================================

    def current(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        token = self.current()
        if token is None:
            raise self._end_of_input()
        self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        token = self.current()
        return token is not None and token.type in types

    def expect(self, token_type: TokenType) -> Token:
        """Consume the current token if it has ``token_type``."""
        token = self.current()
        if token is None:
            raise self._end_of_input(expected=[token_type.name])
        if token.type is not token_type:
            raise create_syntax_error(
                f"Expected {token_type.name}, got {token.type.name} at line {token.line}",
                line=token.line,
                column=token.column,
                expected=[token_type.name],
                found=token.type.name,
            )
        return self.advance()

    def _end_of_input(self, expected: Optional[List[str]] = None) -> EBPLSyntaxError:
        last = self.tokens[-1] if self.tokens else None
        return create_syntax_error(
            "Unexpected end of input",
            line=last.line if last else None,
            expected=expected or [TokenType.END.name],
        )

    # ====================================================================
    # Statements
    # ====================================================================

    def parse(self) -> Program:
        statements: List[Statement] = []

        while True:
            token = self.current()
            if token is None:
                raise self._end_of_input()
            if token.type is TokenType.END:
                break
            if token.type is TokenType.NEWLINE:
                self.advance()
                continue
            statements.append(self.statement())

        logger.debug("Parsed %d statement(s)", len(statements))
        return Program(tuple(statements))

    def statement(self) -> Statement:
        if self.match(TokenType.CREATE):
            return self.variable_declaration()
        if self.match(TokenType.PRINT):
            return self.print_statement()

        token = self.advance()
        raise create_syntax_error(
            f"Expected CREATE or PRINT, got {token.type.name} at line {token.line}",
            line=token.line,
            column=token.column,
            expected=[TokenType.CREATE.name, TokenType.PRINT.name],
            found=token.type.name,
        )

    def variable_declaration(self) -> VariableDeclaration:
        start = self.expect(TokenType.CREATE)
        self.expect(TokenType.VARIABLE)
        name = self.expect(TokenType.IDENTIFIER)
        self.expect(TokenType.WITH)
        self.expect(TokenType.VALUE)
        value = self.expression()
        return VariableDeclaration(name.value, value, line=start.line)

    def print_statement(self) -> PrintStatement:
        start = self.expect(TokenType.PRINT)
        value = self.expression()
        return PrintStatement(value, line=start.line)

    # ====================================================================
    # Expressions
    # ====================================================================

    def expression(self) -> Expression:
        node = self.primary()
        while self.match(*BINARY_OPERATORS):
            operator = BINARY_OPERATORS[self.advance().type]
            right = self.primary()
            node = BinaryOperation(node, operator, right)
        return node

    def primary(self) -> Expression:
        token = self.current()
        if token is None:
            raise self._end_of_input(expected=["NUMBER", "STRING", "IDENTIFIER"])

        if token.type is TokenType.NUMBER:
            self.advance()
            return NumberLiteral(float(token.value))
        if token.type is TokenType.STRING:
            self.advance()
            return StringLiteral(token.value)
        if token.type is TokenType.IDENTIFIER:
            self.advance()
            return Identifier(token.value)

        raise create_syntax_error(
            f"Expected NUMBER, STRING or IDENTIFIER, got {token.type.name} at line {token.line}",
            line=token.line,
            column=token.column,
            expected=["NUMBER", "STRING", "IDENTIFIER"],
            found=token.type.name,
        )


def parse_program(tokens: Sequence[Token]) -> Program:
    """Parse a token sequence into a :class:`Program`.

    Raises:
        EBPLSyntaxError: on the first token the grammar does not accept
    """
    return Parser(tokens).parse()


__all__ = ["Parser", "parse_program", "BINARY_OPERATORS"]
