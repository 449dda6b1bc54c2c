"""
Error handling for the MiniLang lexer.

Provides error reporting with source location information and hints for
the most common input mistakes. The lexer stops at the first error; there
is no recovery.
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, ASSIGNMENT_SYMBOL


@dataclass
class Diagnostic:
    """Diagnostic information attached to a lexer error."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class InvalidInputError(LexerError):
    """
    Raised when the lexer meets a character or sequence it cannot classify.
    """

    def __init__(self, message: str, location: SourceLocation, character: str, **kwargs):
        super().__init__(message, location, **kwargs)
        self.character = character


class ErrorRecovery:
    """
    Hints for common input mistakes.

    Only used to enrich help text; the lexer never resumes after an error.
    """

    ALTERNATIVES = {
        '=': [ASSIGNMENT_SYMBOL],
        ':': [ASSIGNMENT_SYMBOL],
        '.': ['0.'],
        '^': ['**'],
        '[': ['('],
        ']': [')'],
    }

    @staticmethod
    def suggest_alternatives(char: str) -> List[str]:
        """Suggest valid lexemes for a character that is not valid MiniLang."""
        return ErrorRecovery.ALTERNATIVES.get(char, [])


ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Incomplete assignment operator",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> InvalidInputError:
    """Create an error for a character that starts no token."""
    suggestions = ErrorRecovery.suggest_alternatives(char)

    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in MiniLang source code."
    else:
        help_text = "Non-printable characters are not allowed."

    return InvalidInputError(
        message=f"Unexpected character: '{char}' (U+{ord(char):04X})",
        location=location,
        character=char,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_incomplete_assignment_error(found: str, location: SourceLocation) -> InvalidInputError:
    """Create an error for a ':' that is not followed by '='."""
    follower = f"'{found}'" if found else "end of input"
    return InvalidInputError(
        message=f"Unexpected assignment operator: ':' followed by {follower}",
        location=location,
        character=':',
        code="L002",
        help_text=f"The only assignment operator is '{ASSIGNMENT_SYMBOL}'.",
        suggestions=[ASSIGNMENT_SYMBOL]
    )
