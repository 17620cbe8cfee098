"""A fixed-capacity least-recently-used cache."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, List, Optional, TypeVar, Union

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
D = TypeVar("D")


class LRUCache(Generic[K, V]):
    """Mapping that evicts its least recently used entry when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        # Ordered from least to most recently used.
        self._items: "OrderedDict[K, V]" = OrderedDict()

    @property
    def capacity(self) -> int:
        """Maximum number of entries."""
        return self._capacity

    def is_empty(self) -> bool:
        """Return True if the cache holds no entries."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def keys(self) -> List[K]:
        """Keys from most to least recently used."""
        return list(reversed(self._items))

    def put(self, key: K, value: V) -> None:
        """Store a value, marking it most recently used and evicting if full."""
        if key in self._items:
            self._items[key] = value
            self._items.move_to_end(key)
            return
        if len(self._items) == self._capacity:
            self._items.popitem(last=False)
        self._items[key] = value

    def get(self, key: K, default: Optional[D] = None) -> Union[V, D, None]:
        """Return the value for ``key``, marking it used, or ``default``."""
        if key not in self._items:
            return default
        self._items.move_to_end(key)
        return self._items[key]

    def __getitem__(self, key: K) -> V:
        if key not in self._items:
            raise KeyError(key)
        self._items.move_to_end(key)
        return self._items[key]

    def __str__(self) -> str:
        entries = list(reversed(self._items.items()))
        lines = [
            f"{key}: {value} -> {next_key}\n"
            for (key, value), (next_key, _) in zip(entries, entries[1:])
        ]
        if entries:
            key, value = entries[-1]
            lines.append(f"{key}: {value}")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, keys={self.keys()!r})"