"""Display names for anonymous state slots and destructured properties.

Both extractions are best-effort regular expressions over a component's
source text. They never raise; an unmatched source yields an empty list and
callers fall back to positional names.
"""

from __future__ import annotations

import re
from functools import lru_cache

# [value, setValue]
_RE_STATE_PAIR = re.compile(r"\[\s*(?P<name>[A-Za-z_$][\w$]*)\s*,\s*(?P<setter>[A-Za-z_$][\w$]*)\s*\]")

# ({ a, b: alias, c = 1 })
_RE_PROPS_BLOCK = re.compile(r"\(\s*\{\s*(?P<props>[^}]+?)\s*\}\s*\)")


@lru_cache(maxsize=512)
def _state_names(source: str) -> tuple[str, ...]:
    return tuple(m.group("name") for m in _RE_STATE_PAIR.finditer(source))


@lru_cache(maxsize=512)
def _property_order(source: str) -> tuple[str, ...]:
    match = _RE_PROPS_BLOCK.search(source)
    if match is None:
        return ()
    keys: list[str] = []
    for entry in match.group("props").split(","):
        key = entry.split(":")[0].split("=")[0].strip()
        if not key or key.startswith("..."):
            continue
        if key not in keys:
            keys.append(key)
    return tuple(keys)


def infer_state_names(source: str | None) -> list[str]:
    """Names of ``[name, setName]`` destructurings in order of appearance."""
    if not source:
        return []
    return list(_state_names(source))


def infer_property_order(source: str | None) -> list[str]:
    """Keys of the first ``({ ... })`` parameter destructuring, in declared order.

    Renames and defaults are dropped: ``({ a: alias, b = 1 })`` gives
    ``["a", "b"]``. Rest entries are not keys and are skipped.
    """
    if not source:
        return []
    return list(_property_order(source))


def state_label(names: list[str], index: int, prefix: str = "state") -> str:
    """Name for the hook slot at *index*, falling back to ``<prefix><index>``."""
    if index < len(names) and names[index]:
        return names[index]
    return f"{prefix}{index}"
