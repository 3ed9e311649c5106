"""Snapshot differ for renderscan.

Submodules:
    snapshot  -- SnapshotDiffer: changed-key sets for props, state and context.
"""

from renderscan.differ.snapshot import SnapshotDiffer, current_props, current_state, diff

__all__ = ["SnapshotDiffer", "current_props", "current_state", "diff"]
