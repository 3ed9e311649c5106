"""Change ledger for renderscan.

Keeps the cumulative per-key change counts that display consumers read
while an inspection session is running.

Submodules:
    counters  -- ChangeCounterStore and the process-wide default store.
"""

from renderscan.ledger.counters import (
    ChangeCounterStore,
    default_store,
    reset_state_tracking,
)

__all__ = ["ChangeCounterStore", "default_store", "reset_state_tracking"]
