"""Inspection session for renderscan.

Wires the components in dependency order:
    config -> logging -> counter store -> differ -> collector

The host runtime drives the session by calling ``report`` once per committed
render (the "report time" tick). The session remembers the flat list from
the previous tick so entries can be paired across passes. That list, and the
nodes it references, is dropped as soon as the next tick replaces it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

from renderscan.collector.breadcrumb import breadcrumb
from renderscan.collector.tree import TreeCollector
from renderscan.config import load_config
from renderscan.differ.snapshot import SnapshotDiffer
from renderscan.ledger.counters import ChangeCounterStore, default_store
from renderscan.models.config import RenderScanConfig
from renderscan.models.diff import ChangeCategory, ContextValue, DiffResult, TreeEntry
from renderscan.models.nodes import RenderNode
from renderscan.observability.logging import bind_session, get_logger, setup_logging
from renderscan.resolve.context import resolve_contexts

if TYPE_CHECKING:
    import structlog


class InspectionSession:
    """Owns the components of one inspection session.

    ``start()`` is idempotent. Sessions share the process-wide counter store
    unless one is passed in.
    """

    def __init__(
        self,
        config: RenderScanConfig | None = None,
        store: ChangeCounterStore | None = None,
    ) -> None:
        self.config = config
        self.session_id = str(uuid4())
        self._store = store
        self._differ: SnapshotDiffer | None = None
        self._collector: TreeCollector | None = None
        self._entries: list[TreeEntry] = []
        self._running = False
        self._log: structlog.stdlib.BoundLogger | None = None

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    def start(self, configure_logging: bool = True) -> InspectionSession:
        """Load config (unless given), set up logging and build components."""
        if self._running:
            return self

        if self.config is None:
            self.config = load_config()
        if configure_logging:
            setup_logging(self.config.log.level, self.config.log.format)
        bind_session(self.session_id)
        self._log = get_logger("session")

        if self._store is None:
            self._store = default_store()
        self._differ = SnapshotDiffer(store=self._store, config=self.config.tracking)
        self._collector = TreeCollector(differ=self._differ, config=self.config.tracking)

        self._running = True
        self._log.info(
            "session_started",
            log_level=self.config.log.level,
            max_traversal_nodes=self.config.tracking.max_traversal_nodes,
        )
        return self

    def _require_started(self) -> None:
        if not self._running:
            self.start()

    # ------------------------------------------------------------------
    # Host tick
    # ------------------------------------------------------------------

    def report(self, root: RenderNode | None, is_update: bool = True) -> list[TreeEntry]:
        """Diff and flatten the tree under *root*; remember it for the next tick."""
        self._require_started()
        assert self._collector is not None
        self._entries = self._collector.collect(root, self._entries, is_update=is_update)
        return self._entries

    @property
    def entries(self) -> list[TreeEntry]:
        return list(self._entries)

    # ------------------------------------------------------------------
    # Queries and commands for display collaborators
    # ------------------------------------------------------------------

    def diff(self, node: RenderNode | None) -> DiffResult:
        self._require_started()
        assert self._differ is not None
        return self._differ.diff(node)

    def resolve_contexts(self, node: RenderNode | None) -> dict[str, ContextValue]:
        self._require_started()
        assert self.config is not None
        return resolve_contexts(node, self.config.tracking.max_traversal_nodes)

    def current_state(self, node: RenderNode | None) -> dict[str, Any]:
        self._require_started()
        assert self._differ is not None
        return self._differ.current_state(node)

    def breadcrumb(self, node: RenderNode | None) -> list[str]:
        self._require_started()
        assert self.config is not None
        return breadcrumb(node, self.config.breadcrumb.max_items)

    def track_state_update(self, name: str, value: Any) -> bool:
        """Record a host-reported state value; see ChangeCounterStore.record_pending_update."""
        self._require_started()
        assert self._store is not None
        return self._store.record_pending_update(name, value)

    def count(self, category: ChangeCategory | str, key: str) -> int:
        self._require_started()
        assert self._store is not None
        return self._store.count(category, key)

    def reset(self) -> None:
        """Clear all counters and forget the previous pass."""
        self._require_started()
        assert self._store is not None
        self._store.reset_all()
        self._entries = []
