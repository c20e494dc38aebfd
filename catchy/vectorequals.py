"""Sequence comparison that explains the first differing element."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from catchy.falsestring import FalseString
from catchy.vectortostring import vector_to_string, vector_to_string_ex


def _default_compare(left: Any, right: Any) -> FalseString:
    if left != right:
        return FalseString.false(f"{left} != {right}")
    return FalseString.true()


def vector_equals(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    to_string: Callable[[Any], str] = str,
    compare: Callable[[Any, Any], FalseString] = _default_compare,
) -> FalseString:
    """Compare two sequences element by element, describing the first mismatch."""
    size_equal = FalseString.true()
    if len(lhs) != len(rhs):
        size_equal = FalseString.false(
            f"Size mismatch: {len(lhs)} vs {len(rhs)}"
            f"{vector_to_string(lhs, to_string)} {vector_to_string(rhs, to_string)}"
        )

    for index, (left, right) in enumerate(zip(lhs, rhs)):
        equals = compare(left, right)
        if equals:
            continue
        if not size_equal:
            head = f"{size_equal.reason}, and first invalid"
        else:
            lhs_text, lhs_one_line = vector_to_string_ex(lhs, to_string)
            rhs_text, rhs_one_line = vector_to_string_ex(rhs, to_string)
            same = lhs_one_line == rhs_one_line
            if not (same or not lhs_one_line):
                lhs_text = vector_to_string(lhs, to_string, False)
            if not (same or not rhs_one_line):
                rhs_text = vector_to_string(rhs, to_string, False)
            one_liner = same and lhs_one_line
            if one_liner:
                head = f"{lhs_text} vs {rhs_text} First invalid"
            else:
                head = f"  {lhs_text}vs{rhs_text}First invalid"
        return FalseString.false(f"{head} value at index {index}, {equals.reason}")

    return size_equal