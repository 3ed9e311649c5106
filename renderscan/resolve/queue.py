"""Update queue resolution.

Resolution order for a slot:
  1. pending records, FIFO, starting one past ``cursor``
  2. base records, FIFO
  3. ``last_resolved`` if present and different from the value so far
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from renderscan.equality import same_value
from renderscan.models.nodes import MISSING, StateSlot, Update


class QueueResolutionError(Exception):
    """Raised when an updater function fails during resolution.

    ``last_value`` is the value resolved before the failing record.
    """

    def __init__(self, last_value: Any, cause: Exception) -> None:
        super().__init__(f"State updater raised {type(cause).__name__}: {cause}")
        self.last_value = last_value
        self.cause = cause


def _apply(records: Iterable[Update], value: Any) -> Any:
    for record in records:
        try:
            value = record.action(value) if record.is_updater else record.action
        except Exception as exc:
            raise QueueResolutionError(value, exc) from exc
    return value


def resolve_slot(slot: StateSlot) -> Any:
    """Return the fully resolved current value of *slot*.

    Slots without an update queue resolve to their stored value. Raises
    QueueResolutionError if an updater raises.
    """
    value = slot.stored_value
    queue = slot.update_queue
    if queue is None:
        return value

    start = max(queue.cursor + 1, 0)
    value = _apply(queue.pending[start:], value)
    value = _apply(queue.base, value)

    if queue.last_resolved is not MISSING and not same_value(queue.last_resolved, value):
        value = queue.last_resolved
    return value
