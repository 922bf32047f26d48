"""Evaluations of vanishing and Lagrange polynomials over a domain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from plonkcore.evaluation_domain import EvaluationDomain
from plonkcore.fft import compute_multiplicative_subgroup
from plonkcore.field import Fr, FrLike, batch_inversion


@dataclass(frozen=True)
class LagrangeEvaluations:
    """Z_H*(z), L_start(z) and L_end(z) at one evaluation point."""

    vanishing_poly: Fr
    l_start: Fr
    l_end: Fr


def get_lagrange_evaluations(
    domain: EvaluationDomain,
    z: FrLike,
    num_roots_cut_out_of_vanishing_poly: int = 0,
) -> LagrangeEvaluations:
    """Evaluate the vanishing polynomial, L_1 and L_{n-k} at ``z``.

    ``k`` roots (omega^{-1} .. omega^{-k}) are removed from the vanishing
    polynomial, and ``l_end`` is the Lagrange polynomial of the last root kept.
    """
    k = num_roots_cut_out_of_vanishing_poly
    if k < 0:
        raise ValueError("the number of roots cut out cannot be negative")
    point = Fr(z)
    numerator = point.pow(domain.size) - 1

    cut_denominator = Fr.one()
    work_root = domain.root_inverse
    for _ in range(k):
        cut_denominator *= point - work_root
        work_root *= domain.root_inverse

    l_end_root = domain.root.pow(k + 1)
    inverses = batch_inversion(
        [cut_denominator, point - 1, point * l_end_root - 1]
    )

    vanishing_poly = numerator * inverses[0]
    scaled = numerator * domain.domain_inverse
    return LagrangeEvaluations(
        vanishing_poly=vanishing_poly,
        l_start=scaled * inverses[1],
        l_end=scaled * inverses[2],
    )


def compute_lagrange_polynomial_fft(
    domain: EvaluationDomain, target_domain: EvaluationDomain
) -> list[Fr]:
    """Evaluate L_1 of ``domain`` at g.w'^i for every i of the larger ``target_domain``."""
    if target_domain.log2_size < domain.log2_size:
        raise ValueError("the target domain must be at least as large as the domain")

    multiplicand = target_domain.root
    work_root = domain.generator
    denominators = []
    for _ in range(target_domain.size):
        denominators.append(work_root - 1)
        work_root *= multiplicand
    inverses = [d.inverse() for d in denominators]

    log2_subgroup_size = target_domain.log2_size - domain.log2_size
    subgroup = compute_multiplicative_subgroup(domain, log2_subgroup_size)
    numerators = [(root - 1) * domain.domain_inverse for root in subgroup]
    mask = len(numerators) - 1
    return [inv * numerators[i & mask] for i, inv in enumerate(inverses)]


def compute_barycentric_evaluation(
    domain: EvaluationDomain, coeffs: Sequence[FrLike], z: FrLike
) -> Fr:
    """Compute sum_i L_{i+1}(z) * coeffs[i] from evaluations on the domain."""
    values = [Fr(c) for c in coeffs]
    if not values:
        raise ValueError("at least one evaluation is required")
    point = Fr(z)
    numerator = (point.pow(domain.size) - 1) * domain.domain_inverse

    denominators = [point - 1]
    work_root = domain.root_inverse
    for _ in range(1, len(values)):
        denominators.append(work_root * point - 1)
        work_root *= domain.root_inverse

    total = sum(
        (v * d for v, d in zip(values, batch_inversion(denominators))), Fr.zero()
    )
    return total * numerator