"""Render sequences as readable text for comparison messages."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any


def _render(values: Sequence[Any], converter: Callable[[Any], str], one_line: bool) -> str:
    newline = "" if one_line else "\n"
    items = []
    for index, value in enumerate(values):
        prefix = "" if one_line else f"  {index}: "
        items.append(f"{prefix}'{converter(value)}'")
    body = (", " + newline).join(items)
    tail = newline if values else ""
    return f"{newline}{{{newline}{body}{tail}}}{newline}"


def vector_to_string_ex(
    values: Sequence[Any], converter: Callable[[Any], str] = str
) -> tuple[str, bool]:
    """Render on one line if short, otherwise on several; report which was chosen."""
    one_line = _render(values, converter, True)
    if len(one_line) < 20:
        return one_line, True
    return _render(values, converter, False), False


def vector_to_string(
    values: Sequence[Any],
    converter: Callable[[Any], str] = str,
    one_line: bool | None = None,
) -> str:
    """Render values; the layout is picked automatically when one_line is None."""
    if one_line is None:
        return vector_to_string_ex(values, converter)[0]
    return _render(values, converter, one_line)