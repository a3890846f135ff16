class Counter:
    """
    Monotonically increasing identifier allocator.

    Each graph owns one counter; identifiers are never handed out twice,
    even after the node holding one has been deleted.
    """

    def __init__(self, start: int = 1):
        self._next = start

    def next(self) -> int:
        """Return a fresh identifier."""
        value = self._next
        self._next += 1
        return value

    @property
    def current(self) -> int:
        """Last identifier issued (``start - 1`` before the first call)."""
        return self._next - 1

    def __repr__(self) -> str:
        return f"Counter(current={self.current})"
