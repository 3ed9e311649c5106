"""Tests for the tree collector and breadcrumb helpers."""

from __future__ import annotations

from renderscan.collector.breadcrumb import (
    ELLIPSIS,
    ancestor_path,
    breadcrumb,
    collapse_path,
)
from renderscan.collector.tree import TreeCollector, latest_timing
from renderscan.differ.snapshot import SnapshotDiffer
from renderscan.ledger.counters import ChangeCounterStore
from renderscan.models.config import TrackingConfig
from renderscan.models.nodes import NodeKind, RenderNode, Timing

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _collector(**config_kwargs) -> TreeCollector:
    config = TrackingConfig(**config_kwargs)
    differ = SnapshotDiffer(store=ChangeCounterStore(), config=config)
    return TreeCollector(differ=differ, config=config, clock=lambda: 1000.0)


def _build_tree() -> dict[str, RenderNode]:
    app = RenderNode(name="App")
    div = app.append_child(RenderNode(kind=NodeKind.HOST, name="div"))
    header = div.append_child(RenderNode(name="Header"))
    items = div.append_child(RenderNode(kind=NodeKind.MEMO, name="List"))
    first = items.append_child(RenderNode(kind=NodeKind.SIMPLE_MEMO, name="Item", properties={"id": 1}))
    second = items.append_child(RenderNode(kind=NodeKind.SIMPLE_MEMO, name="Item", properties={"id": 2}))
    legacy = app.append_child(RenderNode(kind=NodeKind.CLASS, name="Legacy", display_name="LegacyPanel"))
    return {
        "app": app,
        "div": div,
        "header": header,
        "list": items,
        "first": first,
        "second": second,
        "legacy": legacy,
    }


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


class TestTraversal:
    def test_absent_root_yields_nothing(self) -> None:
        assert _collector().collect(None) == []

    def test_preorder_with_host_nodes_skipped(self) -> None:
        entries = _collector().collect(_build_tree()["app"])
        assert [(e.name, e.depth) for e in entries] == [
            ("App", 0),
            ("Header", 1),
            ("List", 1),
            ("Item", 2),
            ("Item", 2),
            ("LegacyPanel", 1),
        ]

    def test_children_counts(self) -> None:
        entries = _collector().collect(_build_tree()["app"])
        counts = {e.node.label: e.children_count for e in entries}
        assert counts["App"] == 3
        assert counts["List"] == 2
        assert counts["Header"] == 0

    def test_cycle_guard(self) -> None:
        tree = _build_tree()
        tree["second"].next_sibling = tree["first"]
        tree["first"].first_child = tree["list"]
        entries = _collector().collect(tree["app"])
        assert len(entries) == 6

    def test_traversal_limit(self) -> None:
        entries = _collector(max_traversal_nodes=3).collect(_build_tree()["app"])
        assert [e.name for e in entries] == ["App", "Header"]

    def test_deep_sibling_chain_does_not_recurse(self) -> None:
        root = RenderNode(name="Root")
        for i in range(5000):
            root.first_child, previous = RenderNode(name=f"N{i}", parent=root), root.first_child
            root.first_child.next_sibling = previous
        assert len(_collector().collect(root)) == 5001

    def test_entries_carry_diff(self) -> None:
        tree = _build_tree()
        previous = _build_tree()
        tree["first"].pair_with(previous["first"])
        tree["first"].properties = {"id": 10}
        entries = _collector().collect(tree["app"])
        item = next(e for e in entries if e.node is tree["first"])
        assert item.diff.changed_properties == {"id"}


# ---------------------------------------------------------------------------
# Pairing with the previous pass
# ---------------------------------------------------------------------------


class TestPairing:
    def test_update_counts_carry_over_by_counterpart(self) -> None:
        collector = _collector()
        old = _build_tree()
        first_pass = collector.collect(old["app"])

        new = _build_tree()
        for key in new:
            new[key].pair_with(old[key])
        second_pass = collector.collect(new["app"], first_pass, is_update=True)
        third_pass = collector.collect(new["app"], second_pass, is_update=True)

        assert all(e.updates.count == 0 for e in first_pass)
        assert all(e.updates.count == 2 for e in third_pass)
        assert all(e.updates.last_update == 1000.0 for e in third_pass)

    def test_structural_change_detected(self) -> None:
        collector = _collector()
        old = _build_tree()
        first_pass = collector.collect(old["app"])

        new = _build_tree()
        for key in new:
            new[key].pair_with(old[key])
        new["list"].append_child(RenderNode(kind=NodeKind.SIMPLE_MEMO, name="Item"))
        second_pass = collector.collect(new["app"], first_pass, is_update=True)

        flags = {e.node.label: e.updates.has_structural_changes for e in second_pass[:3]}
        assert flags == {"App": False, "Header": False, "List": True}
        assert second_pass[-2].updates.has_structural_changes is True

    def test_first_pass_has_no_structural_changes(self) -> None:
        entries = _collector().collect(_build_tree()["app"])
        assert not any(e.updates.has_structural_changes for e in entries)

    def test_render_duration_uses_latest_timing(self) -> None:
        old = RenderNode(name="A", timing=Timing(self_duration=9.0, start_timestamp=50.0))
        new = RenderNode(name="A", timing=Timing(self_duration=1.0, start_timestamp=10.0)).pair_with(old)
        assert latest_timing(new).self_duration == 9.0
        entries = _collector().collect(new)
        assert entries[0].updates.render_duration == 9.0


# ---------------------------------------------------------------------------
# Breadcrumb
# ---------------------------------------------------------------------------


class TestBreadcrumb:
    def test_ancestor_path_skips_host_nodes(self) -> None:
        tree = _build_tree()
        assert [n.label for n in ancestor_path(tree["first"])] == ["App", "List", "Item"]

    def test_collapse_long_path(self) -> None:
        names = ["A", "B", "C", "D", "E", "F"]
        assert collapse_path(names, 4) == ["A", ELLIPSIS, "D", "E", "F"]
        assert collapse_path(names[:4], 4) == ["A", "B", "C", "D"]

    def test_breadcrumb(self) -> None:
        tree = _build_tree()
        assert breadcrumb(tree["second"], max_items=2) == ["App", ELLIPSIS, "Item"]
        assert breadcrumb(None) == []
