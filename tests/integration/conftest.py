"""Shared fixtures for renderscan integration tests.

Provides a started InspectionSession with its own counter store and small
factories for building successive render passes of the same component tree.
"""

from __future__ import annotations

from typing import Any

import pytest

from renderscan.ledger.counters import ChangeCounterStore
from renderscan.models.config import RenderScanConfig
from renderscan.models.nodes import ContextType, NodeKind, RenderNode, StateSlot, Update, UpdateQueue
from renderscan.session import InspectionSession

COUNTER_SOURCE = "function Counter({ step, onChange }) { const [count, setCount] = useState(0); }"


# ---------------------------------------------------------------------------
# Node factories
# ---------------------------------------------------------------------------


def make_hook(value: Any, pending: list[Any] | None = None) -> StateSlot:
    """Create a tracked state slot."""
    return StateSlot(
        stored_value=value,
        update_queue=UpdateQueue(pending=[Update(p) for p in pending or []]),
    )


def make_pass(
    theme: ContextType,
    theme_value: Any,
    count: int,
    step: int = 1,
    on_change: Any = None,
    previous: dict[str, RenderNode] | None = None,
) -> dict[str, RenderNode]:
    """Build one render pass: App > ThemeProvider(host) > Counter.

    When *previous* is given every node is paired with its counterpart.
    """
    app = RenderNode(name="App")
    provider = app.append_child(
        RenderNode(kind=NodeKind.HOST, name="ThemeProvider", provides=theme, properties={"value": theme_value})
    )
    counter = provider.append_child(
        RenderNode(
            name="Counter",
            source=COUNTER_SOURCE,
            properties={"step": step, "onChange": on_change},
            state_slots=[make_hook(count), StateSlot(stored_value="memoized callback")],
            context_dependencies=[theme],
        )
    )
    nodes = {"app": app, "provider": provider, "counter": counter}
    if previous is not None:
        for key, node in nodes.items():
            node.pair_with(previous[key])
    return nodes


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> ChangeCounterStore:
    return ChangeCounterStore()


@pytest.fixture
def session(store: ChangeCounterStore) -> InspectionSession:
    return InspectionSession(config=RenderScanConfig(), store=store).start(configure_logging=False)


@pytest.fixture
def theme() -> ContextType:
    return ContextType()
