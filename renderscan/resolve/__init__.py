"""Resolution of the effective values a component reads.

Submodules:
    queue    -- Folds a state slot's update queues into its current value.
    context  -- Finds the nearest provider for each context dependency.
"""

from renderscan.resolve.context import (
    current_context,
    find_provider,
    resolve_contexts,
)
from renderscan.resolve.queue import QueueResolutionError, resolve_slot

__all__ = [
    "QueueResolutionError",
    "current_context",
    "find_provider",
    "resolve_contexts",
    "resolve_slot",
]
