"""Mapping comparison that lists every missing or differing key."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from catchy.falsestring import FalseString


def _default_compare(left: Any, right: Any) -> FalseString:
    if left != right:
        return FalseString.false(f"{left} != {right}")
    return FalseString.true()


def _ordered_keys(mapping: Mapping[Hashable, Any]) -> Iterable[Hashable]:
    try:
        return sorted(mapping)
    except TypeError:
        return list(mapping)


def map_eq(
    lhs: Mapping[Hashable, Any],
    rhs: Mapping[Hashable, Any],
    compare: Callable[[Any, Any], FalseString] = _default_compare,
) -> FalseString:
    """Compare two mappings key by key using compare for shared keys."""
    issues = []
    for key in _ordered_keys(lhs):
        if key not in rhs:
            issues.append(f"{key} missing in rhs")
            continue
        result = compare(lhs[key], rhs[key])
        if not result:
            issues.append(f"{key} was different: {result.reason}")

    issues.extend(f"{key} missing in lhs" for key in _ordered_keys(rhs) if key not in lhs)

    if not issues:
        return FalseString.true()
    return FalseString.false("\n".join(issues))