"""Context resolution.

For each context a node depends on, walk up through parent links to the
nearest node that provides that context and read its effective value.
Without a provider, the context's own current value applies; if that is
absent too, the context produces no entry at all.
"""

from __future__ import annotations

from typing import Any

from renderscan.models.diff import ContextValue
from renderscan.models.nodes import MISSING, ContextType, RenderNode
from renderscan.observability.logging import get_logger

_logger = get_logger("resolve.context")

_PROVIDER_SUFFIX = "Provider"
_UNNAMED = "Unnamed"

DEFAULT_MAX_ANCESTORS = 50000


def ensure_record(value: Any) -> dict[str, Any]:
    """Box *value* into a mapping for uniform display."""
    if value is None or value is MISSING:
        return {}
    if isinstance(value, dict):
        return value
    return {"value": value}


def find_provider(
    node: RenderNode,
    context: ContextType,
    max_ancestors: int = DEFAULT_MAX_ANCESTORS,
) -> RenderNode | None:
    """Return the nearest ancestor-or-self that provides *context*."""
    seen: set[int] = set()
    current: RenderNode | None = node
    while current is not None and len(seen) < max_ancestors:
        if id(current) in seen:
            _logger.debug("traversal_cycle_skipped", walk="ancestors", node=current.label)
            return None
        seen.add(id(current))
        if current.provides is context:
            return current
        current = current.parent
    if current is not None:
        _logger.warning("traversal_limit_reached", walk="ancestors", limit=max_ancestors)
    return None


def provider_value(provider: RenderNode, context: ContextType) -> Any:
    """Effective value at *provider*: uncommitted override, committed value, then ambient."""
    pending = provider.pending_properties or {}
    if "value" in pending:
        return pending["value"]
    props = provider.properties or {}
    if "value" in props:
        return props["value"]
    return context.current_value


def context_display_name(context: ContextType, provider: RenderNode | None) -> str:
    if context.display_name:
        return context.display_name
    if provider is not None:
        name = provider.name or ""
        if name.endswith(_PROVIDER_SUFFIX):
            name = name[: -len(_PROVIDER_SUFFIX)]
        if name:
            return name
        if provider.owner is not None and provider.owner.name:
            return provider.owner.name
    return _UNNAMED


def committed_value(node: RenderNode | None) -> Any:
    if node is None:
        return MISSING
    return (node.properties or {}).get("value", MISSING)


def resolve_contexts(
    node: RenderNode | None,
    max_ancestors: int = DEFAULT_MAX_ANCESTORS,
) -> dict[str, ContextValue]:
    """Map display name -> resolved value for every context *node* reads."""
    contexts: dict[str, ContextValue] = {}
    if node is None:
        return contexts

    for context in node.context_dependencies or []:
        provider = find_provider(node, context, max_ancestors)
        if provider is not None:
            value = provider_value(provider, context)
        else:
            value = context.current_value
        if value is MISSING:
            continue
        contexts[context_display_name(context, provider)] = ContextValue(
            display_value=ensure_record(value),
            raw_value=value,
            is_user_context=context.display_name is None,
        )
    return contexts


def current_context(node: RenderNode | None) -> dict[str, dict[str, Any]]:
    """Display name -> boxed display value, for inspector panels."""
    return {name: value.display_value for name, value in resolve_contexts(node).items()}
