"""Diff results and flattened tree entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from renderscan.models.nodes import RenderNode


class ChangeCategory(StrEnum):
    """Category of a tracked input."""

    PROPS = "props"
    STATE = "state"
    CONTEXT = "context"


@dataclass
class DiffResult:
    """Changed keys for one node between two render passes."""

    changed_properties: set[str] = field(default_factory=set)
    changed_state: set[str] = field(default_factory=set)
    changed_context: set[str] = field(default_factory=set)

    @property
    def is_empty(self) -> bool:
        return not (self.changed_properties or self.changed_state or self.changed_context)


@dataclass
class ContextValue:
    """A resolved context value.

    ``display_value`` is always a mapping: scalars are boxed under ``value``
    and None collapses to an empty mapping.
    """

    display_value: dict[str, Any]
    raw_value: Any = None
    is_user_context: bool = True


@dataclass
class UpdateInfo:
    """Cumulative render bookkeeping for one tree entry."""

    count: int = 0
    last_update: float = 0.0
    render_duration: float = 0.0
    cascade_level: int = 0
    has_structural_changes: bool = False


@dataclass
class TreeEntry:
    """One component in the flattened, pre-order view of a render tree."""

    node: RenderNode
    depth: int
    name: str
    diff: DiffResult
    children_count: int = 0
    child_names: list[str] = field(default_factory=list)
    updates: UpdateInfo = field(default_factory=UpdateInfo)
