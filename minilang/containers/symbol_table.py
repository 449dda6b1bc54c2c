"""
Scope-chained symbol table for MiniLang blocks.

A SymbolTable maps keys to values and may be bound to a parent table when it
is created. Every query answers from the local table only; the parent is
exposed so callers can walk the scope chain themselves.
"""

from typing import (
    Any, Dict, Iterator, List, MutableMapping, Optional, Tuple, TypeVar
)

from .errors import (
    create_duplicate_key_error, create_key_not_found_error, create_null_key_error
)

K = TypeVar("K")
V = TypeVar("V")


class SymbolTable(MutableMapping[K, V]):
    """
    Mapping of names to values for one lexical scope.

    Iteration follows insertion order of the entries currently present.
    The parent binding is fixed at construction and never mutated through
    the child.
    """

    def __init__(self, parent: Optional["SymbolTable[K, V]"] = None):
        self._parent = parent
        self._table: Dict[K, V] = {}

    @property
    def parent(self) -> Optional["SymbolTable[K, V]"]:
        """The enclosing scope, or None for a root scope."""
        return self._parent

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def is_read_only(self) -> bool:
        return False

    # Mapping protocol

    def __getitem__(self, key: K) -> V:
        try:
            return self._table[key]
        except KeyError:
            raise create_key_not_found_error(key) from None

    def __setitem__(self, key: K, value: V) -> None:
        self._table[key] = value

    def __delitem__(self, key: K) -> None:
        if key not in self._table:
            raise create_key_not_found_error(key)
        del self._table[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: object) -> bool:
        return key in self._table

    # Insertion and removal

    def add(self, key: K, value: V) -> None:
        """Insert a new entry; the key must not be present yet."""
        if key in self._table:
            raise create_duplicate_key_error(key)
        self._table[key] = value

    def remove(self, key: K) -> bool:
        """Remove an entry. Returns False when the key is absent."""
        if key not in self._table:
            return False
        del self._table[key]
        return True

    def clear(self) -> None:
        self._table.clear()

    # Local lookups

    def contains_key_local(self, key: K) -> bool:
        """Check the local table only, ignoring the parent."""
        if key is None:
            raise create_null_key_error()
        return key in self._table

    def try_get_value_local(self, key: K) -> Tuple[bool, Optional[V]]:
        """
        Look up a key in the local table only, ignoring the parent.

        Returns:
            (True, value) when found, otherwise (False, None)
        """
        if key is None:
            raise create_null_key_error()
        if key in self._table:
            return True, self._table[key]
        return False, None

    def contains_key(self, key: K) -> bool:
        """Same as contains_key_local; the parent is never consulted."""
        return self.contains_key_local(key)

    def try_get_value(self, key: K) -> Tuple[bool, Optional[V]]:
        """Same as try_get_value_local; the parent is never consulted."""
        return self.try_get_value_local(key)

    # Key/value pair operations

    def add_item(self, item: Tuple[K, V]) -> None:
        key, value = item
        self.add(key, value)

    def contains_item(self, item: Tuple[K, V]) -> bool:
        """Check that the key is present and maps to an equal value."""
        key, value = item
        return key in self._table and self._table[key] == value

    def remove_item(self, item: Tuple[K, V]) -> bool:
        """Remove an entry only when both key and value match."""
        if not self.contains_item(item):
            return False
        del self._table[item[0]]
        return True

    def copy_to(self, array: List[Any], index: int = 0) -> None:
        """
        Write the (key, value) pairs into an existing list starting at index.

        Raises:
            IndexError: If the list is too short to hold every pair
        """
        if index < 0 or index + len(self._table) > len(array):
            raise IndexError("Destination list is too short for the symbol table entries")
        for offset, item in enumerate(self._table.items()):
            array[index + offset] = item

    def __repr__(self) -> str:
        if self._parent is None:
            return f"SymbolTable({self._table!r})"
        return f"SymbolTable({self._table!r}, parent={self._parent!r})"
