"""Linear and degree-4 polynomial functions: display and evaluation from the console."""
from linpoly.model.expression import Coefficient, format_expression
from linpoly.model.functions import NumericFunction, LinearFunction, PolynomialFunction

__all__ = [
    "Coefficient",
    "format_expression",
    "NumericFunction",
    "LinearFunction",
    "PolynomialFunction",
]
