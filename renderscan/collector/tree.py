"""Tree collector: flattens a render tree into pre-order entries.

Each component node becomes a TreeEntry carrying its depth, label, diff and
update bookkeeping carried over from the matching entry of the previous
pass. Host nodes are walked through but neither emitted nor counted as a
level of depth.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from renderscan.differ.snapshot import SnapshotDiffer
from renderscan.models.config import TrackingConfig
from renderscan.models.diff import TreeEntry, UpdateInfo
from renderscan.models.nodes import RenderNode, Timing
from renderscan.observability.logging import get_logger

_logger = get_logger("collector.tree")


def latest_timing(node: RenderNode) -> Timing:
    """Timing of whichever of *node* and its counterpart started later.

    Used for display only; diffs always read the host-labelled current node.
    """
    counterpart = node.counterpart
    if counterpart is not None and counterpart.timing.start_timestamp > node.timing.start_timestamp:
        return counterpart.timing
    return node.timing


def _index_previous(previous: list[TreeEntry]) -> dict[int, TreeEntry]:
    return {id(entry.node): entry for entry in previous}


class TreeCollector:
    """Walks a render tree and produces the flat entry list used by search and breadcrumbs."""

    def __init__(
        self,
        differ: SnapshotDiffer | None = None,
        config: TrackingConfig | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config or TrackingConfig()
        self._differ = differ or SnapshotDiffer(config=self._config)
        self._clock = clock

    def collect(
        self,
        root: RenderNode | None,
        previous: list[TreeEntry] | None = None,
        *,
        is_update: bool = False,
    ) -> list[TreeEntry]:
        """Return component entries of the tree under *root* in pre-order.

        *previous* is the list returned by the last pass; entries are paired
        with it by node identity or counterpart. *is_update* marks this pass
        as a re-render, bumping the update count of every emitted entry.
        """
        if root is None:
            return []

        previous_by_node = _index_previous(previous or [])
        limit = self._config.max_traversal_nodes
        entries: list[TreeEntry] = []
        paired: list[TreeEntry | None] = []
        seen: set[int] = set()

        # (node, depth, index of the enclosing component entry)
        stack: list[tuple[RenderNode, int, int | None]] = [(root, 0, None)]
        while stack:
            if len(seen) >= limit:
                _logger.warning("traversal_limit_reached", walk="tree", limit=limit)
                break
            node, depth, parent_index = stack.pop()
            if id(node) in seen:
                _logger.debug("traversal_cycle_skipped", walk="tree", node=node.label)
                continue
            seen.add(id(node))

            # Sibling is pushed first so the child subtree is visited before it.
            if node.next_sibling is not None:
                stack.append((node.next_sibling, depth, parent_index))

            if not node.is_component:
                if node.first_child is not None:
                    stack.append((node.first_child, depth, parent_index))
                continue

            previous_entry = previous_by_node.get(id(node))
            if previous_entry is None and node.counterpart is not None:
                previous_entry = previous_by_node.get(id(node.counterpart))

            entry = TreeEntry(
                node=node,
                depth=depth,
                name=node.label,
                diff=self._differ.diff(node),
                updates=self._update_info(node, depth, previous_entry, is_update),
            )
            entries.append(entry)
            paired.append(previous_entry)
            if parent_index is not None:
                parent = entries[parent_index]
                parent.children_count += 1
                parent.child_names.append(entry.name)
            if node.first_child is not None:
                stack.append((node.first_child, depth + 1, len(entries) - 1))

        had_previous = bool(previous_by_node)
        for entry, previous_entry in zip(entries, paired, strict=True):
            if previous_entry is None:
                entry.updates.has_structural_changes = had_previous
            else:
                entry.updates.has_structural_changes = (
                    previous_entry.children_count != entry.children_count
                    or previous_entry.child_names != entry.child_names
                )

        _logger.debug("tree_collected", visited=len(seen), entries=len(entries), update=is_update)
        return entries

    def _update_info(
        self,
        node: RenderNode,
        depth: int,
        previous_entry: TreeEntry | None,
        is_update: bool,
    ) -> UpdateInfo:
        duration = latest_timing(node).self_duration
        now = self._clock() if is_update else 0.0
        if previous_entry is None:
            return UpdateInfo(
                count=1 if is_update else 0,
                last_update=now,
                render_duration=duration,
                cascade_level=depth,
            )
        carried = previous_entry.updates
        return UpdateInfo(
            count=carried.count + (1 if is_update else 0),
            last_update=now if is_update else carried.last_update,
            render_duration=duration,
            cascade_level=min(carried.cascade_level, depth),
        )
