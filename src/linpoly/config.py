"""
Configuration & Display Constants
=================================
This module serves as the central registry for numeric thresholds, display
precision and the user-facing text of the console tool.

Why is this file needed?
------------------------
1. Consistency: The formatter, the functions and the console driver must agree
   on the same epsilon and the same number of decimals.
2. Localisation: Every string printed to the user lives in one catalog, so the
   driver never hardcodes text.

Exports:
    EPSILON (float): Magnitude below which a coefficient is hidden on display.
    COEFFICIENT_DECIMALS (int): Decimals used for stored coefficients.
    RESULT_DECIMALS (int): Decimals used for evaluation results.
    MESSAGES (Messages): The English message catalog.
"""
from dataclasses import dataclass


# Global Constants
EPSILON: float = 1e-12
COEFFICIENT_DECIMALS: int = 2
RESULT_DECIMALS: int = 4

VARIABLE: str = "x"
EXPONENT_MARKER: str = "^"


@dataclass(frozen=True)
class Messages:
    """Text written by the console driver. Templates use str.format fields."""
    linear_header: str = "=== LINEAR FUNCTION (enter coefficients) ==="
    polynomial_header: str = "=== POLYNOMIAL (enter coefficients) ==="
    coefficient_prompt: str = "Enter coefficient {name}: "
    point_prompt: str = "Enter the value of x: "
    invalid_number: str = "Invalid format. Try again (use a dot as the decimal separator)."
    linear_value: str = "Value of the linear function at x={x}: {value}"
    polynomial_value: str = "Value of the polynomial at x={x}: {value}"
    interface_header: str = "=== Polymorphism: calling through the NumericFunction interface ==="
    interface_item: str = "Function #{index} (via NumericFunction):"
    interface_value: str = "f({x}) = {value}"


MESSAGES = Messages()
