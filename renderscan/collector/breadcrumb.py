"""Ancestor paths for breadcrumb display."""

from __future__ import annotations

from renderscan.models.nodes import RenderNode

ELLIPSIS = "…"


def ancestor_path(node: RenderNode | None, max_ancestors: int = 50000) -> list[RenderNode]:
    """Component ancestors of *node*, root first, ending with *node* itself if it is a component."""
    path: list[RenderNode] = []
    seen: set[int] = set()
    current = node
    while current is not None and id(current) not in seen and len(seen) < max_ancestors:
        seen.add(id(current))
        if current.is_component:
            path.append(current)
        current = current.parent
    path.reverse()
    return path


def collapse_path(names: list[str], max_items: int = 4) -> list[str]:
    """Keep the first name, an ellipsis, and the last ``max_items - 1`` names."""
    if len(names) <= max_items:
        return list(names)
    return [names[0], ELLIPSIS, *names[-(max_items - 1) :]]


def breadcrumb(node: RenderNode | None, max_items: int = 4) -> list[str]:
    return collapse_path([item.label for item in ancestor_path(node)], max_items)
