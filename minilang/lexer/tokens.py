"""
Token definitions for the MiniLang lexer.

This module defines the token categories of MiniLang together with the
lexeme constants the lexer matches against:
- Identifiers and the `return` keyword
- Integer and float literals
- Arithmetic operators and the `:=` assignment operator
- Parentheses and curly braces
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenType(Enum):
    """
    Enumeration of all token categories in MiniLang.
    """

    # Identifiers and keywords
    VARIABLE = auto()               # x, total, MyVariable
    RETURN = auto()                 # return

    # Literals
    INTEGER = auto()                # 42
    FLOAT = auto()                  # 3.14, 42.

    # Operators
    OPERATOR = auto()               # + - * / // % **
    ASSIGNMENT = auto()             # :=

    # Brackets
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_CURLY = auto()             # {
    RIGHT_CURLY = auto()            # }


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting only; tokens compare equal regardless of where
    they were found.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the MiniLang language.

    Equality is structural on the lexeme text and the category.
    """
    type: TokenType
    text: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"({self.text}, {self.type.name})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a numeric literal."""
        return self.type in (TokenType.INTEGER, TokenType.FLOAT)

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic operator."""
        return self.type == TokenType.OPERATOR

    @property
    def is_bracket(self) -> bool:
        """Check if this token is a parenthesis or curly brace."""
        return self.type in BRACKETS.values()


# Lexeme constants used by the lexer

RETURN_KEYWORD = "return"

PLUS = "+"
MINUS = "-"
TIMES = "*"
FLOAT_DIVISION = "/"
INTEGER_DIVISION = "//"
MODULUS = "%"
EXPONENTIATION = "**"

ASSIGNMENT_SYMBOL = ":="
DECIMAL_POINT = "."

# Single-character operators; `//` and `**` start with one of these
OPERATOR_CHARS = frozenset({PLUS, MINUS, TIMES, FLOAT_DIVISION, MODULUS})

# The only operators that take two characters
TWO_CHAR_OPERATORS = frozenset({INTEGER_DIVISION, EXPONENTIATION})

OPERATORS = (PLUS, MINUS, TIMES, FLOAT_DIVISION, INTEGER_DIVISION, MODULUS, EXPONENTIATION)

BRACKETS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_CURLY,
    "}": TokenType.RIGHT_CURLY,
}
