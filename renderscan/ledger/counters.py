"""Cumulative change counters for an inspection session.

ChangeCounterStore -- Per-category key -> count mapping plus the pending
                      state-update side channel. Counts never decrease
                      between resets.

A single process-wide store backs the module-level helpers; tests and
sessions that need isolation construct their own.
"""

from __future__ import annotations

from typing import Any

from renderscan.equality import same_value
from renderscan.models.diff import ChangeCategory
from renderscan.observability.logging import get_logger

_logger = get_logger("ledger.counters")


class ChangeCounterStore:
    """Append-only change ledger keyed by (category, key).

    Also holds the pending state-update values reported by the host through
    ``record_pending_update``; the state diff consumes them. ``reset_all``
    clears both.
    """

    def __init__(self) -> None:
        self._counts: dict[ChangeCategory, dict[str, int]] = {category: {} for category in ChangeCategory}
        # state slot name -> last value reported by the host
        self._pending_updates: dict[str, Any] = {}

    def increment(self, category: ChangeCategory | str, key: str, amount: int = 1) -> int:
        """Add *amount* to the counter for *key* and return the new count."""
        if amount < 0:
            raise ValueError(f"Counter increments must be non-negative, got {amount}")
        counts = self._counts[ChangeCategory(category)]
        counts[key] = counts.get(key, 0) + amount
        return counts[key]

    def count(self, category: ChangeCategory | str, key: str) -> int:
        return self._counts[ChangeCategory(category)].get(key, 0)

    def snapshot(self, category: ChangeCategory | str) -> dict[str, int]:
        """Copy of every counter in *category*."""
        return dict(self._counts[ChangeCategory(category)])

    def reset_all(self) -> None:
        """Clear every counter and the pending-update cache."""
        tracked = sum(len(counts) for counts in self._counts.values())
        for counts in self._counts.values():
            counts.clear()
        self._pending_updates.clear()
        _logger.info("counters_reset", keys_cleared=tracked)

    # ------------------------------------------------------------------
    # Pending state updates
    # ------------------------------------------------------------------

    def record_pending_update(self, name: str, value: Any) -> bool:
        """Remember a host-reported value for state slot *name*.

        Counts a state change when *value* differs from the value already
        recorded. Returns True if it was counted.
        """
        if name in self._pending_updates and same_value(self._pending_updates[name], value):
            return False
        self._pending_updates[name] = value
        self.increment(ChangeCategory.STATE, name)
        return True

    def has_pending_update(self, name: str) -> bool:
        return name in self._pending_updates

    def pending_update(self, name: str) -> Any:
        return self._pending_updates.get(name)

    def consume_pending_update(self, name: str) -> None:
        self._pending_updates.pop(name, None)


_default_store = ChangeCounterStore()


def default_store() -> ChangeCounterStore:
    """The process-wide store shared by every session that does not bring its own."""
    return _default_store


def reset_state_tracking() -> None:
    _default_store.reset_all()
