"""Storage of single values keyed by their type."""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

T = TypeVar("T")


class Storage:
    """Holds at most one value of each exact type.

    Values are returned by reference, so changes made to them are visible
    to every later lookup.
    """

    def __init__(self) -> None:
        self._items: Dict[type, Any] = {}

    def store(self, data: Any) -> None:
        """Store data under its type, silently replacing an older value."""
        self._items[type(data)] = data

    def get(self, kind: Type[T]) -> T:
        """The value stored for kind; raises KeyError if there is none."""
        try:
            return self._items[kind]
        except KeyError:
            raise KeyError(f"no value of type {kind.__name__} in storage") from None

    def try_get(self, kind: Type[T]) -> Optional[T]:
        """The value stored for kind, or None."""
        return self._items.get(kind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._items