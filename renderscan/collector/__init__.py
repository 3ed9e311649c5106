"""Collector package for renderscan.

Turns a render tree snapshot into the flat, order-preserving view consumed
by search and breadcrumb displays.

Submodules
----------
tree        -- TreeCollector: pre-order walk, pairing with the previous pass.
breadcrumb  -- Ancestor paths and their collapsed display form.
"""

from renderscan.collector.breadcrumb import (
    ELLIPSIS,
    ancestor_path,
    breadcrumb,
    collapse_path,
)
from renderscan.collector.tree import TreeCollector, latest_timing

__all__ = [
    "ELLIPSIS",
    "TreeCollector",
    "ancestor_path",
    "breadcrumb",
    "collapse_path",
    "latest_timing",
]
