"""Binary and unary operators, monoid identities and semirings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _divide(a: Any, b: Any) -> Any:
    # Integer division truncates toward zero; anything else divides exactly.
    if _is_integer(a) and _is_integer(b):
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


def _modulus(a: Any, b: Any) -> Any:
    # The remainder takes the sign of the dividend.
    if _is_integer(a) and _is_integer(b):
        return a - b * _divide(a, b)
    return math.fmod(a, b)


def _maximum(a: Any, b: Any) -> Any:
    return b if a < b else a


def _minimum(a: Any, b: Any) -> Any:
    return b if b < a else a


def _lowest(kind: type) -> Any:
    if kind is bool:
        return False
    return -math.inf


def _highest(kind: type) -> Any:
    if kind is bool:
        return True
    return math.inf


@dataclass(frozen=True)
class BinaryOp:
    """A named binary operator, optionally forming a monoid with an identity."""

    name: str
    fn: Callable[[Any, Any], Any]
    identity_fn: Optional[Callable[[type], Any]] = None

    def __call__(self, lhs: Any, rhs: Any) -> Any:
        return self.fn(lhs, rhs)

    def identity(self, kind: type) -> Any:
        """Return the identity element of this operator for values of ``kind``.

        For ``maximum`` and ``minimum`` on unbounded numbers the identity is
        negative or positive infinity.
        """
        if self.identity_fn is None:
            raise TypeError(f"operator {self.name!r} has no identity")
        return self.identity_fn(kind)

    def is_monoid(self) -> bool:
        return self.identity_fn is not None

    def __repr__(self) -> str:
        return f"BinaryOp({self.name!r})"


plus = BinaryOp("plus", lambda a, b: a + b, lambda kind: kind(0))
minus = BinaryOp("minus", lambda a, b: a - b)
multiplies = BinaryOp("multiplies", lambda a, b: a * b, lambda kind: kind(1))
times = multiplies
divides = BinaryOp("divides", _divide)
maximum = BinaryOp("max", _maximum, _lowest)
minimum = BinaryOp("min", _minimum, _highest)
modulus = BinaryOp("modulus", _modulus)

logical_and = BinaryOp(
    "logical_and", lambda a, b: bool(a) and bool(b), lambda kind: kind(True)
)
logical_or = BinaryOp(
    "logical_or", lambda a, b: bool(a) or bool(b), lambda kind: kind(False)
)
logical_xor = BinaryOp(
    "logical_xor", lambda a, b: bool(a) != bool(b), lambda kind: kind(False)
)
logical_xnor = BinaryOp("logical_xnor", lambda a, b: bool(a) == bool(b))


def negate(value: Any) -> Any:
    return -value


def logical_not(value: Any) -> bool:
    return not value


def take_left(left: Any, right: Any) -> Any:
    """Select the first of the two operands."""
    operands = (left, right)
    return operands[0]


def take_right(left: Any, right: Any) -> Any:
    """Select the second of the two operands."""
    operands = (left, right)
    return operands[1]


def lower_triangle(entry: Any) -> bool:
    """True for a matrix entry ``(index, value)`` strictly below the diagonal."""
    index, _ = entry
    i, j = index
    return j < i


def upper_triangle(entry: Any) -> bool:
    """True for a matrix entry ``(index, value)`` strictly above the diagonal."""
    index, _ = entry
    i, j = index
    return i < j


@dataclass(frozen=True)
class Semiring:
    """A pair of operators: ``reduce_op`` accumulates, ``combine_op`` multiplies."""

    reduce_op: Callable[[Any, Any], Any]
    combine_op: Callable[[Any, Any], Any]

    def combine(self, a: Any, b: Any) -> Any:
        return self.combine_op(a, b)

    def reduce(self, a: Any, b: Any) -> Any:
        return self.reduce_op(a, b)


def make_semiring(reduce: Callable[[Any, Any], Any],
                  combine: Callable[[Any, Any], Any]) -> Semiring:
    return Semiring(reduce, combine)


plus_multiplies = Semiring(plus, multiplies)
plus_times = plus_multiplies
min_plus = Semiring(minimum, plus)
max_plus = Semiring(maximum, plus)
min_multiplies = Semiring(minimum, multiplies)
min_times = min_multiplies
min_max = Semiring(minimum, maximum)
max_min = Semiring(maximum, minimum)
max_multiplies = Semiring(maximum, multiplies)
max_times = max_multiplies
plus_min = Semiring(plus, minimum)

lor_land = Semiring(logical_or, logical_and)
land_lor = Semiring(logical_and, logical_or)
lxor_land = Semiring(logical_xor, logical_and)
lxnor_lor = Semiring(logical_xnor, logical_or)