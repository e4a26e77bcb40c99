"""Operator precedence and binary arithmetic for infixeval.

Arithmetic is IEEE-754 double precision throughout. Division by zero, overflow
and invalid powers produce inf/-inf/nan instead of raising, so every
operation is done on numpy.float64 with floating-point warnings silenced.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from infixeval.models import OPEN_BRACKETS

_BinaryOp = Callable[[np.float64, np.float64], np.float64]

_OPERATIONS: dict[str, _BinaryOp] = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "^": np.power,
}

_ADDITIVE = frozenset("+-")
_MULTIPLICATIVE = frozenset("*/")


def greater_precedence(incoming: str, top: str) -> bool:
    """Decide whether the operator on top of the stack should be reduced now.

    Args:
        incoming: Operator just read from the expression.
        top: Operator (or open bracket) on top of the operator stack.

    Returns:
        True if ``top`` binds at least as tightly as ``incoming`` and must be
        applied before ``incoming`` is pushed. Never true across an open
        bracket, never true for an incoming ``^`` (which makes ``^`` chains
        right-associative), and not true for ``* /`` arriving over ``+ -``.
    """
    if top in OPEN_BRACKETS:
        return False
    if incoming in _MULTIPLICATIVE and top in _ADDITIVE:
        return False
    if incoming == "^":
        return False
    return True


def apply_operator(operator: str, left: float, right: float) -> float:
    """Compute ``left <operator> right`` in double precision.

    ``^`` raises ``left`` to the power ``right``. Never raises for
    arithmetic reasons: 2/0 is inf, 0/0 is nan, (-8)^0.5 is nan.
    """
    try:
        op = _OPERATIONS[operator]
    except KeyError:
        raise ValueError(f"Unknown operator: {operator!r}") from None
    with np.errstate(all="ignore"):
        result = op(np.float64(left), np.float64(right))
    return float(result)
