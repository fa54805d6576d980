import math
import warnings

import numpy as np
import pytest

from linpoly.model.expression import Coefficient
from linpoly.model.functions import NumericFunction, LinearFunction, PolynomialFunction


class FakeReader:
    """ Answers prompts from a fixed list and records them. """
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        return self.answers.pop(0)


class QuadraticFunction(NumericFunction):
    LABEL = "Quadratic"
    EXPONENTS = (2, 1, 0)

    def _evaluate(self, x):
        a2, a1, a0 = self._values
        return a2 * x * x + a1 * x + a0


def test_linear_scenario():
    linear = LinearFunction(2.0, -3.0)
    assert linear.expression() == "2.00x - 3.00"
    assert linear.render() == "Linear function: f(x) = 2.00x - 3.00"
    assert linear.evaluate(5.0) == 7.0


def test_polynomial_scenario():
    polynomial = PolynomialFunction(0.0, 1.0, 0.0, 0.0, 0.0)
    assert polynomial.expression() == "x^3"
    assert polynomial.render() == "Polynomial: f(x) = x^3"
    assert polynomial.evaluate(2.0) == 8.0


@pytest.mark.parametrize("function", [LinearFunction(), PolynomialFunction()])
def test_all_zero(function):
    assert function.render().endswith("f(x) = 0")
    for x in [-3.0, 0.0, 2.5, 1e6]:
        assert function.evaluate(x) == 0.0


def test_evaluate_at_zero_is_constant_term():
    assert LinearFunction(4.0, -1.5).evaluate(0.0) == -1.5
    assert PolynomialFunction(1.0, -2.0, 3.0, -4.0, 6.25).evaluate(0.0) == 6.25


def test_polynomial_matches_direct_powers():
    polynomial = PolynomialFunction(2.0, -1.0, 0.5, 3.0, -7.0)
    for x in [-2.0, -0.3, 0.7, 1.5, 10.0]:
        expected = 2.0 * x**4 - 1.0 * x**3 + 0.5 * x**2 + 3.0 * x - 7.0
        assert polynomial.evaluate(x) == pytest.approx(expected)


def test_evaluate_returns_python_float_for_scalars():
    assert isinstance(LinearFunction(1.0, 1.0).evaluate(2), float)
    assert isinstance(PolynomialFunction(1.0).evaluate(2.0), float)


def test_evaluate_array():
    polynomial = PolynomialFunction(0.0, 0.0, 1.0, 0.0, -1.0)
    xs = np.array([-1.0, 0.0, 2.0])
    np.testing.assert_allclose(polynomial.evaluate(xs), [0.0, -1.0, 3.0])
    np.testing.assert_allclose(LinearFunction(2.0, 1.0).evaluate(xs), [-1.0, 1.0, 5.0])


def test_overflow_saturates_without_warning():
    linear = LinearFunction(1e300, 0.0)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert linear.evaluate(1e300) == math.inf
        # Zero coefficients times inf powers give nan, as in plain float arithmetic
        assert math.isnan(PolynomialFunction(a4=1.0).evaluate(1e200))


def test_epsilon_applies_to_display_only():
    linear = LinearFunction(1e-13, 0.0)
    assert linear.expression() == "0"
    assert linear.evaluate(1e13) == pytest.approx(1.0)


def test_configure_prompts_highest_exponent_first():
    reader = FakeReader([1.0, 2.0, 3.0, 4.0, 5.0])
    polynomial = PolynomialFunction()
    polynomial.configure(reader)

    assert reader.prompts == [f"Enter coefficient a{i}: " for i in (4, 3, 2, 1, 0)]
    assert [c.value for c in polynomial.coefficients] == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert polynomial.render() == "Polynomial: f(x) = x^4 + 2.00x^3 + 3.00x^2 + 4.00x + 5.00"


def test_configure_with_custom_prompt():
    reader = FakeReader([2.0, -3.0])
    linear = LinearFunction()
    linear.configure(reader, "{name} = ")

    assert reader.prompts == ["a1 = ", "a0 = "]
    assert linear.evaluate(5.0) == 7.0


def test_coefficients_and_degree():
    linear = LinearFunction(2.0, -3.0)
    assert linear.degree == 1
    assert linear.slot_names == ("a1", "a0")
    assert linear.coefficients == (Coefficient(1, 2.0), Coefficient(0, -3.0))
    assert PolynomialFunction().degree == 4


def test_repr():
    assert repr(LinearFunction(2.0, -3.0)) == "LinearFunction(a1=2.0, a0=-3.0)"


def test_shared_interface():
    quadratic = QuadraticFunction(1.0, 0.0, -4.0)
    functions = [LinearFunction(1.0, 0.0), PolynomialFunction(a0=2.0), quadratic]
    assert [f.evaluate(2.0) for f in functions] == [2.0, 2.0, 0.0]
    assert quadratic.render() == "Quadratic: f(x) = x^2 - 4.00"


def test_wrong_number_of_coefficients():
    with pytest.raises(ValueError):
        QuadraticFunction(1.0, 2.0)
    assert QuadraticFunction().expression() == "0"
