"""Snapshot differ.

Computes, for one node and its previous-render counterpart, which property
keys, state slots and contexts changed, and credits every changed key in a
ChangeCounterStore.

Property rules:
    * ``children`` is never tracked.
    * Keys are visited in inferred declaration order first, then in the
      order of the current mapping.
    * Non-function changes count once each. Changed function-valued keys
      are only reported when at least one non-function key changed in the
      same pass, and are then credited with that number of changes.
    * Keys present previously and absent now count once each.

State rules:
    * Only hook slots (slots with an update queue) take part; they are
      paired by position among hook slots.
    * On initial mount, slots whose resolved value is non-default are
      reported.
    * Otherwise a slot changed if its resolved value differs from the
      previous resolved value, or a pending update recorded for it differs
      from the current value. Appended and removed slots are changed.

Context rules:
    * For each dependency, the nearest provider's committed ``value`` is
      compared with the same provider's previous-render ``value``.
"""

from __future__ import annotations

import copy
from typing import Any

from renderscan.equality import is_function, is_non_default, same_value
from renderscan.ledger.counters import ChangeCounterStore, default_store
from renderscan.models.config import TrackingConfig
from renderscan.models.diff import ChangeCategory, DiffResult
from renderscan.models.nodes import MISSING, RenderNode, StateSlot
from renderscan.naming import infer_property_order, infer_state_names, state_label
from renderscan.observability.logging import get_logger
from renderscan.resolve.context import committed_value, context_display_name, find_provider
from renderscan.resolve.queue import QueueResolutionError, resolve_slot

_logger = get_logger("differ.snapshot")

_CHILDREN_KEY = "children"


def _hook_slots(node: RenderNode) -> list[StateSlot]:
    return [slot for slot in node.state_slots or [] if slot.is_hook]


class SnapshotDiffer:
    """Diffs nodes against their counterparts and records the changes.

    The differ holds no per-node state; everything cumulative lives in the
    counter store, so calling ``diff`` twice on the same node reports the
    same keys twice and counts them twice.
    """

    def __init__(
        self,
        store: ChangeCounterStore | None = None,
        config: TrackingConfig | None = None,
    ) -> None:
        self._store = store if store is not None else default_store()
        self._config = config or TrackingConfig()

    @property
    def store(self) -> ChangeCounterStore:
        return self._store

    def diff(self, node: RenderNode | None) -> DiffResult:
        if node is None:
            return DiffResult()
        result = DiffResult(
            changed_properties=self.diff_properties(node),
            changed_state=self.diff_state(node),
            changed_context=self.diff_context(node),
        )
        _logger.debug(
            "diff_computed",
            node=node.label,
            mounted=node.counterpart is None,
            props=len(result.changed_properties),
            state=len(result.changed_state),
            context=len(result.changed_context),
        )
        return result

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def diff_properties(self, node: RenderNode) -> set[str]:
        changes: set[str] = set()
        previous_node = node.counterpart
        if previous_node is None:
            return changes

        current = node.properties or {}
        previous = previous_node.properties or {}
        ordered_keys = dict.fromkeys([*infer_property_order(node.source), *current])

        primitive_changes = 0
        changed_functions: list[str] = []
        for key in ordered_keys:
            if key == _CHILDREN_KEY or key not in current:
                continue
            value = current[key]
            if same_value(value, previous.get(key, MISSING)):
                continue
            if is_function(value):
                changed_functions.append(key)
                continue
            changes.add(key)
            primitive_changes += 1
            self._store.increment(ChangeCategory.PROPS, key)

        if primitive_changes:
            for key in changed_functions:
                changes.add(key)
                self._store.increment(ChangeCategory.PROPS, key, primitive_changes)

        for key in previous:
            if key == _CHILDREN_KEY or key in current:
                continue
            changes.add(key)
            self._store.increment(ChangeCategory.PROPS, key)

        return changes

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def _resolve(self, node: RenderNode, slot: StateSlot, name: str) -> tuple[Any, bool]:
        """Resolve *slot*, returning (value, ok). On failure value is the last good one."""
        try:
            return resolve_slot(slot), True
        except QueueResolutionError as exc:
            _logger.warning(
                "state_resolution_failed",
                node=node.label,
                slot=name,
                error=str(exc.cause),
            )
            return exc.last_value, False

    def _record_state_change(self, changes: set[str], name: str) -> None:
        changes.add(name)
        self._store.increment(ChangeCategory.STATE, name)
        self._store.consume_pending_update(name)

    def diff_state(self, node: RenderNode) -> set[str]:
        changes: set[str] = set()
        if not node.tracks_hooks:
            return changes

        names = infer_state_names(node.source)
        prefix = self._config.positional_state_prefix
        current_slots = _hook_slots(node)
        previous_node = node.counterpart

        if previous_node is None:
            if not self._config.track_initial_mount:
                return changes
            for index, slot in enumerate(current_slots):
                name = state_label(names, index, prefix)
                value, ok = self._resolve(node, slot, name)
                if ok and is_non_default(value):
                    self._record_state_change(changes, name)
            return changes

        previous_slots = _hook_slots(previous_node)
        for index in range(max(len(current_slots), len(previous_slots))):
            name = state_label(names, index, prefix)
            if index >= len(previous_slots) or index >= len(current_slots):
                self._record_state_change(changes, name)
                continue

            current_value, current_ok = self._resolve(node, current_slots[index], name)
            previous_value, previous_ok = self._resolve(previous_node, previous_slots[index], name)
            if not (current_ok and previous_ok):
                continue

            changed = not same_value(current_value, previous_value)
            if not changed and self._store.has_pending_update(name):
                changed = not same_value(self._store.pending_update(name), current_value)
            if changed:
                self._record_state_change(changes, name)

        return changes

    # ------------------------------------------------------------------
    # Context
    # ------------------------------------------------------------------

    def diff_context(self, node: RenderNode) -> set[str]:
        changes: set[str] = set()
        if node.counterpart is None:
            return changes

        for context in node.context_dependencies or []:
            provider = find_provider(node, context, self._config.max_traversal_nodes)
            if provider is None or provider.counterpart is None:
                continue
            if same_value(committed_value(provider), committed_value(provider.counterpart)):
                continue
            name = context_display_name(context, provider)
            if name in changes:
                continue
            changes.add(name)
            self._store.increment(ChangeCategory.CONTEXT, name)

        return changes

    # ------------------------------------------------------------------
    # Current-value views
    # ------------------------------------------------------------------

    def current_state(self, node: RenderNode | None) -> dict[str, Any]:
        """Slot name -> resolved value. Lists and dicts are shallow copies."""
        if node is None or not node.tracks_hooks:
            return {}
        names = infer_state_names(node.source)
        state: dict[str, Any] = {}
        for index, slot in enumerate(_hook_slots(node)):
            name = state_label(names, index, self._config.positional_state_prefix)
            value, _ = self._resolve(node, slot, name)
            state[name] = copy.copy(value) if isinstance(value, list | dict) else value
        return state


def current_props(node: RenderNode | None) -> dict[str, Any]:
    if node is None:
        return {}
    return dict(node.properties or {})


def current_state(node: RenderNode | None) -> dict[str, Any]:
    return SnapshotDiffer().current_state(node)


def diff(node: RenderNode | None) -> DiffResult:
    """Diff *node* against its counterpart, crediting the process-wide store."""
    return SnapshotDiffer().diff(node)
