"""
MiniLang Lexer - turns source text into a list of tokens.

Single left-to-right scan with one character of lookahead, which is only
needed for `//`, `**` and `:=`. The first unrecognized character ends the
scan with an InvalidInputError.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, RETURN_KEYWORD, DECIMAL_POINT,
    ASSIGNMENT_SYMBOL, OPERATOR_CHARS, TWO_CHAR_OPERATORS, BRACKETS
)
from .errors import (
    LexerError, create_invalid_character_error, create_incomplete_assignment_error
)


@dataclass
class LexResult:
    """Outcome of a tokenize attempt that does not raise."""
    tokens: List[Token] = field(default_factory=list)
    error: Optional[LexerError] = None

    def has_errors(self) -> bool:
        """Check if tokenizing failed."""
        return self.error is not None


def _is_ascii_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_ascii_letter(char: str) -> bool:
    return 'a' <= char <= 'z' or 'A' <= char <= 'Z'


class Lexer:
    """
    MiniLang lexical analyzer.

    Converts source code text into a list of tokens. Only ASCII digits and
    letters are recognized; whitespace separates tokens and is never emitted.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, in source order

        Raises:
            InvalidInputError: On the first character that starts no token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []

        while self.pos < len(self.source):
            current_char = self.source[self.pos]

            if current_char.isspace():
                self._advance()
                continue

            self.tokens.append(self._next_token(current_char))

        return list(self.tokens)

    def try_tokenize(self) -> LexResult:
        """
        Tokenize without raising.

        The result carries either the full token list or the error, never a
        partial list.
        """
        try:
            return LexResult(tokens=self.tokenize())
        except LexerError as e:
            return LexResult(error=e)

    def _next_token(self, current_char: str) -> Token:
        """Scan one token starting at the current position."""
        location = self._location()

        if _is_ascii_digit(current_char):
            return self._tokenize_number(location)

        if _is_ascii_letter(current_char):
            return self._tokenize_identifier_or_keyword(location)

        if current_char in OPERATOR_CHARS:
            return self._tokenize_operator(location)

        if current_char == ASSIGNMENT_SYMBOL[0]:
            return self._tokenize_assignment(location)

        if current_char in BRACKETS:
            self._advance()
            return Token(BRACKETS[current_char], current_char, location)

        raise create_invalid_character_error(current_char, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize integer or float literals."""
        start_pos = self.pos
        self._consume_digits()

        if self._current() == DECIMAL_POINT:
            # "42." is a complete float
            self._advance()
            self._consume_digits()
            return Token(TokenType.FLOAT, self.source[start_pos:self.pos], location)

        return Token(TokenType.INTEGER, self.source[start_pos:self.pos], location)

    def _tokenize_identifier_or_keyword(self, location: SourceLocation) -> Token:
        """Tokenize a variable name or the return keyword."""
        start_pos = self.pos
        while self.pos < len(self.source) and _is_ascii_letter(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        if lexeme == RETURN_KEYWORD:
            return Token(TokenType.RETURN, lexeme, location)
        return Token(TokenType.VARIABLE, lexeme, location)

    def _tokenize_operator(self, location: SourceLocation) -> Token:
        """Tokenize an operator, preferring `//` and `**` over one character."""
        two_chars = self.source[self.pos:self.pos + 2]
        if two_chars in TWO_CHAR_OPERATORS:
            self._advance_by(2)
            return Token(TokenType.OPERATOR, two_chars, location)

        lexeme = self.source[self.pos]
        self._advance()
        return Token(TokenType.OPERATOR, lexeme, location)

    def _tokenize_assignment(self, location: SourceLocation) -> Token:
        """Tokenize `:=`; a lone `:` is never valid."""
        if self._peek() != ASSIGNMENT_SYMBOL[1]:
            raise create_incomplete_assignment_error(self._peek(), location)

        self._advance_by(2)
        return Token(TokenType.ASSIGNMENT, ASSIGNMENT_SYMBOL, location)

    def _consume_digits(self):
        while self.pos < len(self.source) and _is_ascii_digit(self.source[self.pos]):
            self._advance()

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def _current(self) -> str:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ''

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return ''


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        InvalidInputError: If the source contains an unrecognized character
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        InvalidInputError: If the file contains an unrecognized character
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
