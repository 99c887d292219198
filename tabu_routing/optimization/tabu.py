"""Short-term memory of recently visited solutions."""

import logging
from collections import OrderedDict
from typing import Hashable, Optional

logger = logging.getLogger("vrp.optimization")


class TabuMemory:
    """
    Bounded map from solution signature to a countdown.

    A signature is forbidden while it is present, whatever its countdown.
    Countdowns only tick when a ``record`` call finds the memory full, and
    entries that reach zero are dropped. Entries are kept in insertion order
    (a refreshed entry moves to the back), which makes eviction
    deterministic: if the memory is still full after the countdown tick,
    the oldest entries go first.
    """

    def __init__(self, capacity: int, tenure: Optional[int] = None):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        if tenure is not None and tenure <= 0:
            raise ValueError(f"tenure must be positive, got {tenure}")
        self.capacity = capacity
        self.tenure = tenure or capacity
        self._entries: "OrderedDict[Hashable, int]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, signature: Hashable) -> bool:
        return signature in self._entries

    def is_tabu(self, signature: Hashable) -> bool:
        """True if the signature is currently forbidden."""
        return signature in self._entries

    def remaining(self, signature: Hashable) -> int:
        """Countdown left for a signature, 0 if absent."""
        return self._entries.get(signature, 0)

    def record(self, signature: Hashable) -> None:
        """Insert or refresh a signature with a fresh countdown."""
        if len(self._entries) >= self.capacity:
            self._tick()
            while signature not in self._entries and len(self._entries) >= self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted tabu entry under capacity pressure: {evicted}")

        self._entries[signature] = self.tenure
        self._entries.move_to_end(signature)

    def _tick(self) -> None:
        """Decrement every countdown and drop expired entries."""
        for signature in list(self._entries):
            self._entries[signature] -= 1
            if self._entries[signature] <= 0:
                del self._entries[signature]

    def clear(self) -> None:
        self._entries.clear()
