"""
Error classes for AST construction.
"""


class BuilderError(Exception):
    """Base class for node builder failures."""


class InvalidArgumentError(BuilderError, TypeError):
    """Raised when a builder is asked to construct a node from an unsupported value."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


def create_unsupported_literal_error(value) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"Unsupported literal type: {type(value).__name__} ({value!r}); literals must be integers",
        value
    )
