"""Lexical analyzer (tokenizer) for EBPL.

EBPL is word oriented: every line is split on whitespace and only two
statement shapes are recognised, ``create variable <name> with value <expr>``
and ``print <expr>``.  Words outside those shapes are skipped, so the
tokenizer never fails.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Sequence, Tuple

from ebpl.observability.logging import get_logger

logger = get_logger("ebpl.lexer")


class TokenType(Enum):
    """Token types for EBPL."""

    # Keywords
    CREATE = "CREATE"
    VARIABLE = "VARIABLE"
    WITH = "WITH"
    VALUE = "VALUE"
    PRINT = "PRINT"

    # Literals and names
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING = "STRING"

    # Operators
    PLUS = "PLUS"
    MINUS = "MINUS"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"

    # Special
    NEWLINE = "NEWLINE"
    END = "END"


@dataclass(frozen=True)
class Token:
    """A single token with position information."""

    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
}

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_OPERATOR_SPLIT_RE = re.compile(r"([+\-*/])")
_WORD_RE = re.compile(r"\S+")

# (text, column) pairs for the words of one line
Word = Tuple[str, int]


def is_number(text: str) -> bool:
    """Return True when ``text`` is entirely a decimal number."""
    return _NUMBER_RE.fullmatch(text) is not None


def is_quoted(text: str) -> bool:
    return len(text) >= 2 and text.startswith('"') and text.endswith('"')


def _split_words(line: str) -> List[Word]:
    return [(match.group(0), match.start() + 1) for match in _WORD_RE.finditer(line)]


def _expression_tokens(text: str, line: int, column: int) -> Iterator[Token]:
    """Split arithmetic text on ``+ - * /`` keeping the operators."""
    for fragment in _OPERATOR_SPLIT_RE.split(text):
        fragment = fragment.strip()
        if not fragment:
            continue
        if fragment in OPERATORS:
            yield Token(OPERATORS[fragment], fragment, line, column)
        elif is_number(fragment):
            yield Token(TokenType.NUMBER, fragment, line, column)
        else:
            yield Token(TokenType.IDENTIFIER, fragment, line, column)


def _value_tokens(text: str, line: int, column: int) -> Iterator[Token]:
    if is_quoted(text):
        yield Token(TokenType.STRING, text[1:-1], line, column)
    elif is_number(text):
        yield Token(TokenType.NUMBER, text, line, column)
    else:
        yield from _expression_tokens(text, line, column)


def _content_tokens(text: str, line: int, column: int) -> Iterator[Token]:
    if is_quoted(text):
        yield Token(TokenType.STRING, text[1:-1], line, column)
    else:
        yield from _expression_tokens(text, line, column)


def _starts_print(word: str) -> bool:
    return word.startswith("print")


def _line_tokens(words: Sequence[Word], line: int) -> Iterator[Token]:
    index = 0
    while index < len(words):
        word, column = words[index]

        if word == "create" and index + 1 < len(words) and words[index + 1][0] == "variable":
            yield Token(TokenType.CREATE, word, line, column)
            yield Token(TokenType.VARIABLE, words[index + 1][0], line, words[index + 1][1])
            index += 2

            if index < len(words):
                name, name_column = words[index]
                yield Token(TokenType.IDENTIFIER, name, line, name_column)
                index += 1

            if (
                index + 1 < len(words)
                and words[index][0] == "with"
                and words[index + 1][0] == "value"
            ):
                yield Token(TokenType.WITH, words[index][0], line, words[index][1])
                yield Token(TokenType.VALUE, words[index + 1][0], line, words[index + 1][1])
                index += 2

                # a value never includes a word starting with "print"
                start = index
                while index < len(words) and not _starts_print(words[index][0]):
                    index += 1
                value_words = words[start:index]
                if value_words:
                    text = " ".join(text for text, _ in value_words)
                    yield from _value_tokens(text, line, value_words[0][1])
            continue

        if word == "print":
            yield Token(TokenType.PRINT, word, line, column)
            content_words = words[index + 1:]
            if content_words:
                text = " ".join(text for text, _ in content_words)
                yield from _content_tokens(text, line, content_words[0][1])
            index = len(words)
            continue

        index += 1


def tokenize(source: str) -> List[Token]:
    """Tokenize EBPL source into a list terminated by an ``END`` token.

    Blank lines produce no tokens; every other line ends with ``NEWLINE``.
    Token lines are 1-based physical line numbers.
    """
    tokens: List[Token] = []
    lines = source.splitlines()

    for line_number, raw_line in enumerate(lines, start=1):
        words = _split_words(raw_line)
        if not words:
            continue
        tokens.extend(_line_tokens(words, line_number))
        tokens.append(Token(TokenType.NEWLINE, "\n", line_number, len(raw_line.rstrip()) + 1))

    tokens.append(Token(TokenType.END, "", len(lines) + 1, 1))
    logger.debug("Tokenized %d line(s) into %d token(s)", len(lines), len(tokens))
    return tokens


__all__ = ["TokenType", "Token", "OPERATORS", "tokenize", "is_number", "is_quoted"]
