"""
Error classes for the MiniLang containers.
"""


class ContainerError(Exception):
    """Base class for symbol table failures."""

    def __init__(self, message: str, key=None):
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise render the repr of the message
        return self.message


class DuplicateKeyError(ContainerError, KeyError):
    """Raised when a key is added to a table that already holds it."""


class KeyNotFoundError(ContainerError, KeyError):
    """Raised when reading a key the table does not hold."""


class NullKeyError(ContainerError, TypeError):
    """Raised when a lookup is given None as its key."""


def create_duplicate_key_error(key) -> DuplicateKeyError:
    return DuplicateKeyError(f"An item with the same key has already been added: {key!r}", key)


def create_key_not_found_error(key) -> KeyNotFoundError:
    return KeyNotFoundError(f"The given key was not present in the symbol table: {key!r}", key)


def create_null_key_error() -> NullKeyError:
    return NullKeyError("Key must not be None")
