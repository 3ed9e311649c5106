"""Render tree snapshot data structures.

A snapshot is a tree of RenderNode objects delivered by the host runtime.
Nodes are logically immutable once handed to the engine; the only field the
engine ever sets is the counterpart link, and only through ``pair_with``.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class _Missing:
    """Marker for a value that is absent, as opposed to one that is None."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class NodeKind(StrEnum):
    """Kind of a node in the render tree."""

    FUNCTION = "function"
    FORWARD_REF = "forward_ref"
    MEMO = "memo"
    SIMPLE_MEMO = "simple_memo"
    CLASS = "class"
    HOST = "host"


# Kinds emitted by the tree collector and diffed.
COMPONENT_KINDS = frozenset(
    {NodeKind.FUNCTION, NodeKind.FORWARD_REF, NodeKind.MEMO, NodeKind.SIMPLE_MEMO, NodeKind.CLASS}
)

# Kinds whose state slots are resolved. Class components keep their state elsewhere.
HOOK_KINDS = frozenset({NodeKind.FUNCTION, NodeKind.FORWARD_REF, NodeKind.MEMO, NodeKind.SIMPLE_MEMO})


@dataclass
class Update:
    """One queued update: a literal replacement value or an updater of the previous value."""

    action: Any

    @property
    def is_updater(self) -> bool:
        return callable(self.action)


@dataclass
class UpdateQueue:
    """Pending and carried-over updates for a state slot.

    ``pending`` and ``base`` are finite sequences in FIFO order. ``cursor`` is
    the index of the last pending record already folded into the stored
    value; resolution starts one past it.
    """

    pending: list[Update] = field(default_factory=list)
    base: list[Update] = field(default_factory=list)
    last_resolved: Any = MISSING
    cursor: int = -1


@dataclass
class StateSlot:
    """One unit of component state. Slots without an update queue are not tracked."""

    stored_value: Any = None
    update_queue: UpdateQueue | None = None

    @property
    def is_hook(self) -> bool:
        return self.update_queue is not None


@dataclass(eq=False)
class ContextType:
    """A context shared between a provider and its consumers.

    Identity is the object itself; two ContextType instances with the same
    display name are distinct contexts.
    """

    display_name: str | None = None
    current_value: Any = MISSING


@dataclass
class Timing:
    """Render timing reported by the host."""

    self_duration: float = 0.0
    start_timestamp: float = 0.0


@dataclass(eq=False)
class RenderNode:
    """One component instance at one point in time."""

    kind: NodeKind = NodeKind.FUNCTION
    name: str | None = None
    display_name: str | None = None
    properties: dict[str, Any] | None = field(default_factory=dict)
    pending_properties: dict[str, Any] | None = None
    state_slots: list[StateSlot] | None = field(default_factory=list)
    context_dependencies: list[ContextType] | None = field(default_factory=list)
    provides: ContextType | None = None
    owner: RenderNode | None = field(default=None, repr=False)
    source: str = field(default="", repr=False)
    timing: Timing = field(default_factory=Timing)
    parent: RenderNode | None = field(default=None, repr=False)
    first_child: RenderNode | None = field(default=None, repr=False)
    next_sibling: RenderNode | None = field(default=None, repr=False)
    _counterpart: weakref.ReferenceType[RenderNode] | None = field(default=None, init=False, repr=False)

    @property
    def counterpart(self) -> RenderNode | None:
        """The same instance's snapshot from the previous render pass, if still alive."""
        if self._counterpart is None:
            return None
        return self._counterpart()

    def pair_with(self, previous: RenderNode | None) -> RenderNode:
        """Link this node to its previous-render snapshot. Returns self for chaining."""
        self._counterpart = weakref.ref(previous) if previous is not None else None
        return self

    def append_child(self, child: RenderNode) -> RenderNode:
        """Attach *child* as the last child of this node. Returns the child."""
        child.parent = self
        child.next_sibling = None
        if self.first_child is None:
            self.first_child = child
        else:
            last = self.first_child
            while last.next_sibling is not None:
                last = last.next_sibling
            last.next_sibling = child
        return child

    @property
    def label(self) -> str:
        """Name shown for this node in trees and breadcrumbs."""
        return self.display_name or self.name or "Anonymous"

    @property
    def is_component(self) -> bool:
        return self.kind in COMPONENT_KINDS

    @property
    def tracks_hooks(self) -> bool:
        return self.kind in HOOK_KINDS

