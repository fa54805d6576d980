"""
Numeric Functions
=================
Defines the shared capability set of the console tool and its two variants.

Why is this file needed?
------------------------
1. Abstraction: The driver configures, renders and evaluates every function
   through ``NumericFunction`` without knowing which variant it holds.
2. Decoupling: Coefficients arrive through a reader callback, so the functions
   can be tested without simulating terminal input.

Classes:
    NumericFunction: Abstract base holding a fixed set of exponent slots.
    LinearFunction: a1*x + a0.
    PolynomialFunction: a4*x^4 + a3*x^3 + a2*x^2 + a1*x + a0.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Callable, TYPE_CHECKING

import numpy as np

from linpoly.config import MESSAGES
from linpoly.model.expression import Coefficient, format_expression

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Reader = Callable[[str], float]


class NumericFunction(ABC):
    """
    Abstract base class for functions with a fixed set of exponent slots.

    Subclasses declare EXPONENTS (highest first) and a LABEL, and implement
    ``evaluate``. Coefficients are expected to be set once, either in the
    constructor or through ``configure``; afterwards the instance is only queried.
    """
    LABEL: str = "Function"
    EXPONENTS: tuple[int, ...] = ()

    def __init__(self, *values: float) -> None:
        """
        Initialize the function with coefficients ordered highest exponent first.

        Args:
            values: One value per exponent slot, or nothing for all zeros.
        """
        if not values:
            values = (0.0,) * len(self.EXPONENTS)
        if len(values) != len(self.EXPONENTS):
            raise ValueError(
                f"{self.__class__.__name__} expects {len(self.EXPONENTS)} coefficients, got {len(values)}."
            )
        self._values: npt.NDArray[np.float64] = np.array(values, dtype=np.float64)

    def __repr__(self) -> str:
        """String representation of the function."""
        args = ", ".join(f"{name}={float(value)!r}" for name, value in zip(self.slot_names, self._values))
        return f"{self.__class__.__name__}({args})"

    @property
    def degree(self) -> int:
        """Highest exponent slot of the variant."""
        return self.EXPONENTS[0]

    @property
    def slot_names(self) -> tuple[str, ...]:
        """Coefficient names in prompt order, e.g. ('a1', 'a0')."""
        return tuple(f"a{exponent}" for exponent in self.EXPONENTS)

    @property
    def coefficients(self) -> tuple[Coefficient, ...]:
        """Stored coefficients, highest exponent first."""
        return tuple(
            Coefficient(exponent=exponent, value=float(value))
            for exponent, value in zip(self.EXPONENTS, self._values)
        )

    def configure(self, reader: Reader, prompt_template: str = MESSAGES.coefficient_prompt) -> None:
        """
        Ask the reader for every coefficient, highest exponent first.

        Args:
            reader: Callback returning a validated float for a prompt.
            prompt_template: Prompt text with a ``{name}`` field for the slot name.
        """
        values = np.empty(len(self.EXPONENTS), dtype=np.float64)
        for i, name in enumerate(self.slot_names):
            values[i] = reader(prompt_template.format(name=name))
        self._values = values
        logger.debug(f"Configured {self!r}")

    def expression(self) -> str:
        """The formatted algebraic expression without the label."""
        return format_expression(self.coefficients)

    def render(self) -> str:
        """The labelled expression, e.g. ``Linear function: f(x) = 2.00x - 3.00``."""
        return f"{self.LABEL}: f(x) = {self.expression()}"

    def evaluate(self, x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Evaluate the function.

        Args:
            x: Point, or array of points.

        Returns:
            A float for a scalar point, an array of the same shape otherwise.
        """
        x_array = np.asarray(x, dtype=np.float64)
        # Overflow saturates to inf, as plain float arithmetic does
        with np.errstate(over="ignore", invalid="ignore"):
            result = self._evaluate(x_array)

        if np.isscalar(x):
            return float(result)
        return result

    @abstractmethod
    def _evaluate(self, x: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Compute the value from the stored coefficients."""
        pass


class LinearFunction(NumericFunction):
    """
    Degree-1 function a1*x + a0.
    """
    LABEL = "Linear function"
    EXPONENTS = (1, 0)

    def __init__(self, a1: float = 0.0, a0: float = 0.0) -> None:
        super().__init__(a1, a0)

    def _evaluate(self, x: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        a1, a0 = self._values
        return a1 * x + a0


class PolynomialFunction(NumericFunction):
    """
    Degree-4 polynomial a4*x^4 + a3*x^3 + a2*x^2 + a1*x + a0.
    """
    LABEL = "Polynomial"
    EXPONENTS = (4, 3, 2, 1, 0)

    def __init__(
        self,
        a4: float = 0.0,
        a3: float = 0.0,
        a2: float = 0.0,
        a1: float = 0.0,
        a0: float = 0.0
    ) -> None:
        super().__init__(a4, a3, a2, a1, a0)

    def _evaluate(self, x: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        a4, a3, a2, a1, a0 = self._values
        # Powers by repeated multiplication
        x2 = x * x
        x3 = x2 * x
        x4 = x3 * x
        return a4 * x4 + a3 * x3 + a2 * x2 + a1 * x + a0
