"""
Expression Formatting
=====================
Turns an ordered set of coefficients into algebraic text such as
``2.00x^4 - x + 3.00``.

Rules:
    - Terms are written from the highest to the lowest exponent.
    - Terms whose magnitude is below EPSILON are omitted; if nothing is left
      the expression is ``0``.
    - The first term carries only a ``-`` when negative, later terms are
      joined with `` + `` or `` - `` and print their magnitude.
    - A magnitude of 1 is elided for exponents >= 1.
    - Exponent 0 prints no variable, exponent 1 prints the bare variable,
      higher exponents print the variable with an explicit marker.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from linpoly.config import EPSILON, COEFFICIENT_DECIMALS, VARIABLE, EXPONENT_MARKER


@dataclass(frozen=True)
class Coefficient:
    """A multiplier bound to one fixed power of the variable."""
    exponent: int
    value: float

    @property
    def is_zero(self) -> bool:
        """True when the coefficient is hidden on display."""
        return abs(self.value) < EPSILON


def format_number(value: float, decimals: int) -> str:
    """
    Format a number with a fixed number of decimals and thousands grouping.

    Args:
        value: Number to format.
        decimals: Digits after the decimal point.

    Returns:
        Text such as ``1,234.50``.
    """
    return f"{value:,.{decimals}f}"


def format_term(magnitude: float, exponent: int) -> str:
    """Format one unsigned term, e.g. ``3.00x^2``, ``x`` or ``4.00``."""
    if exponent == 0:
        return format_number(magnitude, COEFFICIENT_DECIMALS)

    if abs(magnitude - 1.0) < EPSILON:
        factor = ""
    else:
        factor = format_number(magnitude, COEFFICIENT_DECIMALS)

    if exponent == 1:
        return f"{factor}{VARIABLE}"
    return f"{factor}{VARIABLE}{EXPONENT_MARKER}{exponent}"


def format_expression(coefficients: Iterable[Coefficient]) -> str:
    """
    Build the algebraic text for a set of coefficients.

    Args:
        coefficients: Coefficients ordered from the highest to the lowest exponent.

    Returns:
        The expression, or ``"0"`` when every coefficient is hidden.
    """
    parts: list[str] = []
    for coefficient in coefficients:
        if coefficient.is_zero:
            continue

        negative = coefficient.value < 0
        if not parts:
            sign = "-" if negative else ""
        else:
            sign = " - " if negative else " + "

        parts.append(sign + format_term(abs(coefficient.value), coefficient.exponent))

    if not parts:
        return "0"
    return "".join(parts)
