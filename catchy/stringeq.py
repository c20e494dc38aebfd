"""String comparison that explains where two strings differ."""

from __future__ import annotations

from collections.abc import Sequence

from catchy.falsestring import FalseString
from catchy.vectortostring import vector_to_string

_SMART_CHARACTERS = frozenset(
    "abcdefghijklmnopqrstuwxyz"
    "ABCDEFGHIJKLMNOPQRSTUWXYZ"
    " "
    "~!@#$%^&*()_+"
    "`123456790-="
    ",.<>/?"
    "{}[]:;\"'\\|"
    "\n\r\t"
)

_CHARACTER_NAMES = {
    "\n": "<\\n>",
    "\r": "<\\r>",
    "\t": "<tab>",
    "\x01": "<start of heading>",
    "\x02": "<start of text>",
    "\x03": "<end of text>",
    "\x04": "<end of transmission>",
    "\x05": "<enquiry>",
    "\x06": "<acknowledge>",
    "\x07": "<bell>",
    "\x08": "<backspace>",
    "\x0b": "<vertical tab>",
    "\x0c": "<new page>",
    "\x0e": "<shift out>",
    "\x0f": "<shift in>",
    "\x10": "<data link esqape>",
    "\x11": "<device control 1>",
    "\x12": "<device control 2>",
    "\x13": "<device control 3>",
    "\x14": "<device control 4>",
    "\x15": "<negative acknowledge>",
    "\x16": "<synchronous idle>",
    "\x17": "<end of trans. block>",
    "\x18": "<cancel>",
    "\x19": "<end of medium>",
    "\x1a": "<substitute>",
    "\x1b": "<escape>",
    "\x1c": "<file separator>",
    "\x1d": "<group separator>",
    "\x1e": "<record separator>",
    "\x1f": "<unit separator>",
    "\x7f": "<DEL>",
    " ": "<space>",
}


def escape_string(text: str) -> str:
    """Quote a string for display in a message."""
    return f'"{text}"'


def char_to_string(char: str) -> str:
    """Describe a single character, naming invisible ones and adding a hex code."""
    if char == "\0":
        return "<null>"
    description = _CHARACTER_NAMES.get(char, char)
    if char not in _SMART_CHARACTERS:
        description += f"(0x{ord(char):x})"
    return description


def _first_mismatch(lhs: str, rhs: str) -> int | None:
    for index, (left, right) in enumerate(zip(lhs, rhs)):
        if left != right:
            return index
    if len(lhs) == len(rhs):
        return None
    return min(len(lhs), len(rhs))


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else "\0"


def string_eq(lhs: str, rhs: str) -> FalseString:
    """Compare two strings, describing the first difference when they differ."""
    index = _first_mismatch(lhs, rhs)
    if index is None:
        return FalseString.true()
    return FalseString.false(
        f"lhs: {escape_string(lhs)} and rhs: {escape_string(rhs)}"
        f", lengths are {len(lhs)} vs {len(rhs)}"
        f", first diff at {index} with "
        f"{char_to_string(_char_at(lhs, index))}/{char_to_string(_char_at(rhs, index))}"
    )


def strings_eq(lhs: Sequence[str], rhs: Sequence[str]) -> FalseString:
    """Compare two sequences of strings element by element."""
    size_equal = FalseString.true()
    if len(lhs) != len(rhs):
        size_equal = FalseString.false(
            f"Size mismatch: {len(lhs)} vs {len(rhs)}"
            f"{vector_to_string(lhs, escape_string)} {vector_to_string(rhs, escape_string)}"
        )

    for index, (left, right) in enumerate(zip(lhs, rhs)):
        equals = string_eq(left, right)
        if equals:
            continue
        if not size_equal:
            head = f"{size_equal.reason}, and first invalid"
        else:
            head = (
                f"{vector_to_string(lhs, escape_string)}vs"
                f"{vector_to_string(rhs, escape_string)}First invalid"
            )
        return FalseString.false(f"{head} value at index {index}, {equals.reason}")

    return size_equal