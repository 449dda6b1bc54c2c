"""
MiniLang Lexer Package

Implements the tokenizer for the MiniLang expression/statement language.

Key Features:
- Integer and float literals ("42", "3.14", "42.")
- Identifiers and the case-sensitive `return` keyword
- Arithmetic operators, including the two-character `//` and `**`
- The `:=` assignment operator and bracket tokens
- Fail-fast diagnostics with source locations
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, LexResult, tokenize_string, tokenize_file
from .errors import LexerError, InvalidInputError

__all__ = [
    "Lexer",
    "LexResult",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerError",
    "InvalidInputError",
    "tokenize_string",
    "tokenize_file",
]
