from __future__ import annotations

import copy
from typing import Any, Dict, Mapping


def deep_merge(target: Mapping[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``target`` with ``source`` merged into it.

    Nested mappings present on both sides are merged key by key. Every other
    source value (``None``, scalars, lists, or a mapping for a key the target
    does not have) replaces the target value wholesale, so ``None`` clears a
    field while an omitted key leaves it alone. Lists are never merged
    element-wise.

    Neither argument is modified; values taken from ``source`` are copied.
    """
    result = dict(target)
    for key, value in source.items():
        current = result.get(key)
        if isinstance(value, Mapping) and key in result and isinstance(current, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result
