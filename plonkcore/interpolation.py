"""Coefficient-form polynomial helpers: products, interpolation, openings."""

from __future__ import annotations

from functools import reduce
from typing import Sequence

from plonkcore.field import Fr, FrLike


def compute_linear_polynomial_product(roots: Sequence[FrLike]) -> list[Fr]:
    """Coefficients, lowest degree first, of the product of (X - r) over ``roots``.

    The result has ``len(roots) + 1`` entries and a leading coefficient of one.
    """
    coefficients = [Fr.one()]
    for root in map(Fr, roots):
        expanded = [Fr.zero()] * (len(coefficients) + 1)
        for degree, coefficient in enumerate(coefficients):
            expanded[degree + 1] += coefficient
            expanded[degree] -= coefficient * root
        coefficients = expanded
    return coefficients


def compute_efficient_interpolation(
    src: Sequence[FrLike], evaluation_points: Sequence[FrLike]
) -> list[Fr]:
    """Coefficients of the polynomial taking ``src[i]`` at ``evaluation_points[i]``.

    Uses the Lagrange form N(X) * sum(y_i / ((X - x_i) * d_i)) with
    N(X) = prod(X - x_i) and d_i = prod_{j != i}(x_i - x_j). Every point must be
    non-zero and the points must be distinct; otherwise an inverse is missing
    and ``ZeroDivisionError`` is raised.
    """
    points = [Fr(point) for point in evaluation_points]
    n = len(points)
    if len(src) < n:
        raise ValueError(
            f"need {n} evaluations for {n} interpolation points, got {len(src)}"
        )
    values = [Fr(value) for value in src[:n]]

    numerator = compute_linear_polynomial_product(points)

    neg_root_inverses = [(-point).inverse() for point in points]
    denominator_inverses = []
    for i, x_i in enumerate(points):
        denominator = Fr.one()
        for j, x_j in enumerate(points):
            if j != i:
                denominator *= x_i - x_j
        denominator_inverses.append(denominator.inverse())

    result = [Fr.zero()] * n
    for z, value, denominator_inverse in zip(
        neg_root_inverses, values, denominator_inverses
    ):
        multiplier = value * denominator_inverse
        previous = Fr.zero()
        quotient = []
        for coefficient in numerator[:n]:
            previous = (multiplier * coefficient - previous) * z
            quotient.append(previous)
        result = [acc + term for acc, term in zip(result, quotient)]
    return result


def compute_kate_opening_coefficients(
    src: Sequence[FrLike], z: FrLike
) -> tuple[Fr, list[Fr]]:
    """Divide F(X) - F(z) by (X - z).

    Returns ``(F(z), W)`` where ``W`` holds ``len(src)`` coefficients of
    W(X) = (F(X) - F(z)) / (X - z); its top coefficient is zero.
    """
    coefficients = [Fr(c) for c in src]
    if not coefficients:
        raise ValueError("cannot open an empty polynomial")
    point = Fr(z)
    value = evaluate(coefficients, point)
    divisor = (-point).inverse()

    quotient = [(coefficients[0] - value) * divisor]
    for coefficient in coefficients[1:]:
        quotient.append((coefficient - quotient[-1]) * divisor)
    return value, quotient


def evaluate(coeffs: Sequence[FrLike], z: FrLike) -> Fr:
    """Evaluate the polynomial with coefficients ``coeffs`` (lowest first) at ``z``."""
    point = Fr(z)
    return reduce(lambda acc, c: acc * point + Fr(c), reversed(coeffs), Fr.zero())