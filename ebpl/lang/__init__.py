"""EBPL language front end: tokenizer and parser.

Public API:
    tokenize(source) -> List[Token]
    parse_program(tokens) -> Program
    parse_source(source) -> Program
"""

from ebpl.ast import Program

from .lexer import OPERATORS, Token, TokenType, is_number, is_quoted, tokenize
from .parser import Parser, parse_program

LANGUAGE_VERSION = "1.0"

KEYWORDS = ("create", "variable", "with", "value", "print")


def parse_source(source: str) -> Program:
    """Tokenize and parse EBPL source in one step."""
    return parse_program(tokenize(source))


__all__ = [
    "LANGUAGE_VERSION",
    "KEYWORDS",
    "OPERATORS",
    "Token",
    "TokenType",
    "Parser",
    "tokenize",
    "parse_program",
    "parse_source",
    "is_number",
    "is_quoted",
]
