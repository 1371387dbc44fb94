"""Read-only name -> config lookup table shared by all three generators."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Registry(Generic[T]):
    """Immutable mapping from registry key to config record.

    Keys keep the insertion order of the mapping the registry was built
    from, which is the order used for listings and ``--all`` batches.
    Lookups of unknown keys return ``None`` rather than raising.
    """

    def __init__(self, kind: str, entries: Mapping[str, T]) -> None:
        self.kind = kind
        self._entries: Mapping[str, T] = MappingProxyType(dict(entries))

    def lookup(self, key: str) -> Optional[T]:
        """Return the config registered under *key*, or ``None``."""
        return self._entries.get(key)

    def keys(self) -> list[str]:
        """Return every registered key in definition order."""
        return list(self._entries)

    def items(self) -> list[tuple[str, T]]:
        return list(self._entries.items())

    def validate(self, name: str) -> bool:
        """Return ``True`` if *name* is a registered key."""
        return name in self._entries

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def values(self) -> list[T]:
        """Return every config record in definition order."""
        return list(self._entries.values())

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Registry({self.kind!r}, keys={self.keys()!r})"
