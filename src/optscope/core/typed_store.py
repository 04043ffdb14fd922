"""Per-type key/value storage with usage tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

T = TypeVar("T")


@dataclass
class StoreEntry(Generic[T]):
    """A stored value plus whether anything has read it since it was set.

    Assigning ``value`` directly (as reference holders do) leaves ``read``
    untouched; only ``TypedStore.set`` clears it.
    """

    value: T
    read: bool = False


class TypedStore(Generic[T]):
    """Mapping from option name to a single-typed value.

    Lookups here never fall back anywhere else; a missing key is a plain
    ``KeyError`` and the owning scope decides what that means.
    """

    def __init__(self, zero: T):
        self._zero = zero
        self._entries: dict[Hashable, StoreEntry[T]] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._entries)

    def get(self, key: Hashable) -> T:
        entry = self._entries[key]
        entry.read = True
        return entry.value

    def set(self, key: Hashable, value: T) -> None:
        entry = self._entries.get(key)
        if entry is None:
            self._entries[key] = StoreEntry(value)
        else:
            entry.value = value
            entry.read = False

    def entry(self, key: Hashable) -> StoreEntry[T]:
        """Return the slot for ``key``, creating it with the zero value, marked read."""
        entry = self._entries.get(key)
        if entry is None:
            entry = self._entries[key] = StoreEntry(self._zero)
        entry.read = True
        return entry

    def is_read(self, key: Hashable) -> bool:
        return self._entries[key].read

    def find_unread(self) -> Hashable | None:
        for key, entry in self._entries.items():
            if not entry.read:
                return key
        return None

    def items(self) -> Iterator[tuple[Hashable, T]]:
        """Iterate ``(key, value)`` pairs without marking anything read."""
        for key, entry in self._entries.items():
            yield key, entry.value
