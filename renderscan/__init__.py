"""renderscan: render-change attribution for component trees.

Given successive snapshots of a component tree, works out which properties,
state slots and context values changed between renders, attributes each
change to a named key, and keeps cumulative change counts per key for the
lifetime of an inspection session.
"""

from renderscan.collector import TreeCollector
from renderscan.differ import SnapshotDiffer, current_props, current_state, diff
from renderscan.ledger import ChangeCounterStore, reset_state_tracking
from renderscan.naming import infer_property_order, infer_state_names
from renderscan.resolve import current_context, resolve_contexts, resolve_slot
from renderscan.session import InspectionSession

__version__ = "0.1.0"

__all__ = [
    "ChangeCounterStore",
    "InspectionSession",
    "SnapshotDiffer",
    "TreeCollector",
    "current_context",
    "current_props",
    "current_state",
    "diff",
    "infer_property_order",
    "infer_state_names",
    "reset_state_tracking",
    "resolve_contexts",
    "resolve_slot",
]
