from collections import OrderedDict

DEFAULT_CAPACITY = 100


class BoundedCache:
    """Fixed-capacity map that evicts the oldest-inserted entry first.

    Reads do not refresh an entry's position, and neither does overwriting an
    existing key, so eviction order depends only on first insertion.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[str, str] = OrderedDict()

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._entries.get(key, default)

    def put(self, key: str, value: str) -> None:
        self._entries[key] = value
        while len(self._entries) > self.capacity:
            self._entries.popitem(last=False)

    def keys(self) -> list[str]:
        """Return keys oldest first."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"BoundedCache(size={len(self)}, capacity={self.capacity})"
