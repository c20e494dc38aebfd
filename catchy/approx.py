"""Approximate floating point comparison."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

_FLOAT32_EPSILON = 1.1920928955078125e-07


@dataclass(frozen=True)
class ApproxData:
    """Tolerances used by :func:`approximately_equal`."""

    epsilon: float
    scale: float
    margin: float


def _margin_comparison(lhs: float, rhs: float, margin: float) -> bool:
    # Avoids subtraction so that infinities compare sensibly.
    return (lhs + margin >= rhs) and (rhs + margin >= lhs)


def approximately_equal(lhs: float, rhs: float, data: ApproxData) -> bool:
    """Check lhs against rhs with a fixed margin, then a margin scaled by lhs."""
    lhs = float(lhs)
    rhs = float(rhs)
    return _margin_comparison(lhs, rhs, data.margin) or _margin_comparison(
        lhs, rhs, data.epsilon * (data.scale + math.fabs(lhs))
    )


def _format_number(value: Real) -> str:
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = f"{value:.10f}"
    stripped = text.rstrip("0")
    if stripped.endswith("."):
        stripped += "0"
    return stripped


class Approx:
    """A value that compares equal to numbers within a tolerance."""

    def __init__(self, value: Real) -> None:
        self._value = value
        self._epsilon = _FLOAT32_EPSILON * 100
        self._margin = 0.0
        self._scale = 1.0

    @property
    def value(self) -> Real:
        return self._value

    def epsilon(self, new_epsilon: float) -> Approx:
        self._epsilon = new_epsilon
        return self

    def margin(self, new_margin: float) -> Approx:
        self._margin = new_margin
        return self

    def scale(self, new_scale: float) -> Approx:
        self._scale = new_scale
        return self

    def _data(self) -> ApproxData:
        return ApproxData(epsilon=self._epsilon, scale=self._scale, margin=self._margin)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return approximately_equal(other, self._value, self._data())

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Approx( {_format_number(self._value)} )"

    __repr__ = __str__


def approx(value: Real) -> Approx:
    """Wrap a number for approximate comparison."""
    return Approx(value)