"""A small, immutable lookup table searched linearly by key equality."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class LookupMap(Generic[K, V]):
    """Fixed set of key/value pairs with unique keys.

    Keys are compared with ``==`` only, so they need not be hashable.
    Lookups scan the entries in the order they were given.
    """

    __slots__ = ("_entries",)

    def __init__(self, *args: Iterable[Any]) -> None:
        entries: list[Tuple[K, V]] = []
        for entry in args:
            pair = tuple(entry)
            if len(pair) != 2:
                raise TypeError(f"entry must be a (key, value) pair, got {entry!r}")
            entries.append((pair[0], pair[1]))
        self._entries: Tuple[Tuple[K, V], ...] = tuple(entries)
        self._verify_no_duplicates()

    def _verify_no_duplicates(self) -> None:
        for position, (key, _) in enumerate(self._entries):
            if any(other == key for other, _ in self._entries[position + 1:]):
                raise ValueError(f"duplicate key in map: {key!r}")

    def _find(self, key: Any) -> Tuple[K, V] | None:
        return next((entry for entry in self._entries if entry[0] == key), None)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None

    def __getitem__(self, key: Any) -> V:
        return self.get(key)

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self._entries)

    def __repr__(self) -> str:
        inner = ", ".join(f"({k!r}, {v!r})" for k, v in self._entries)
        return f"{type(self).__name__}({inner})"

    def contains(self, key: Any) -> bool:
        """Return whether ``key`` is in the map."""
        return key in self

    def get(self, key: Any) -> V:
        """Return the value stored for ``key``; raise KeyError if it is absent."""
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]


def create_lookup_map(*args: Iterable[Any]) -> LookupMap:
    """Build a LookupMap from (key, value) pairs; keys must be unique."""
    return LookupMap(*args)