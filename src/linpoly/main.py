"""
Application Entry Point
=======================
Runs the interactive session: read both functions, display them, evaluate
them at one point, then repeat the display and evaluation through the shared
NumericFunction interface.
"""
import logging
from typing import Optional

from linpoly.config import RESULT_DECIMALS
from linpoly.console import Console, format_point
from linpoly.logging_config import setup_logging
from linpoly.model.expression import format_number
from linpoly.model.functions import NumericFunction, LinearFunction, PolynomialFunction

logger = logging.getLogger(__name__)


def run(console: Console) -> list[NumericFunction]:
    """
    Drive one interactive session.

    Args:
        console: Source of answers and sink for output.

    Returns:
        The configured functions, linear first.
    """
    messages = console.messages

    console.write(messages.linear_header)
    linear = LinearFunction()
    linear.configure(console.read_float, messages.coefficient_prompt)
    console.write(linear.render())

    console.write()
    console.write(messages.polynomial_header)
    polynomial = PolynomialFunction()
    polynomial.configure(console.read_float, messages.coefficient_prompt)
    console.write(polynomial.render())

    console.write()
    x = console.read_float(messages.point_prompt)
    point = format_point(x)
    logger.debug(f"Evaluating at x={x!r}")

    console.write()
    console.write(messages.linear_value.format(
        x=point, value=format_number(linear.evaluate(x), RESULT_DECIMALS)))
    console.write(messages.polynomial_value.format(
        x=point, value=format_number(polynomial.evaluate(x), RESULT_DECIMALS)))

    console.write()
    console.write(messages.interface_header)
    functions: list[NumericFunction] = [linear, polynomial]
    for index, function in enumerate(functions, start=1):
        console.write()
        console.write(messages.interface_item.format(index=index))
        console.write(function.render())
        console.write(messages.interface_value.format(
            x=point, value=format_number(function.evaluate(x), RESULT_DECIMALS)))

    return functions


def main(console: Optional[Console] = None) -> None:
    # Keep the session output free of log records unless something goes wrong
    setup_logging(level=logging.WARNING)

    run(console or Console())


if __name__ == "__main__":
    main()
