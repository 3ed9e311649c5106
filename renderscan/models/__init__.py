"""Core data structures for renderscan."""

from renderscan.models.config import RenderScanConfig
from renderscan.models.diff import (
    ChangeCategory,
    ContextValue,
    DiffResult,
    TreeEntry,
    UpdateInfo,
)
from renderscan.models.nodes import (
    COMPONENT_KINDS,
    HOOK_KINDS,
    MISSING,
    ContextType,
    NodeKind,
    RenderNode,
    StateSlot,
    Timing,
    Update,
    UpdateQueue,
)

__all__ = [
    "COMPONENT_KINDS",
    "HOOK_KINDS",
    "MISSING",
    "ChangeCategory",
    "ContextType",
    "ContextValue",
    "DiffResult",
    "NodeKind",
    "RenderNode",
    "RenderScanConfig",
    "StateSlot",
    "Timing",
    "TreeEntry",
    "Update",
    "UpdateInfo",
    "UpdateQueue",
]
