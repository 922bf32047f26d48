"""Radix-2 FFTs over evaluation domains and related subgroup helpers."""

from __future__ import annotations

import operator
from itertools import accumulate, repeat
from typing import Sequence

from plonkcore.evaluation_domain import EvaluationDomain
from plonkcore.field import Fr, FrLike, get_msb

_WORD_MASK = 0xFFFFFFFF


def reverse_bits(x: int, bit_length: int) -> int:
    """Reverse the lowest ``bit_length`` bits of the 32-bit value ``x``."""
    if not 0 <= bit_length <= 32:
        raise ValueError(f"bit length must lie in 0..32, got {bit_length}")
    if not 0 <= x <= _WORD_MASK:
        raise ValueError(f"value must fit in 32 bits, got {x}")
    x = ((x & 0xAAAAAAAA) >> 1) | ((x & 0x55555555) << 1)
    x = ((x & 0xCCCCCCCC) >> 2) | ((x & 0x33333333) << 2)
    x = ((x & 0xF0F0F0F0) >> 4) | ((x & 0x0F0F0F0F) << 4)
    x = ((x & 0xFF00FF00) >> 8) | ((x & 0x00FF00FF) << 8)
    x = ((x >> 16) | (x << 16)) & _WORD_MASK
    return x >> (32 - bit_length)


def _as_field_list(domain: EvaluationDomain, coeffs: Sequence[FrLike]) -> list[Fr]:
    values = [Fr(c) for c in coeffs]
    if len(values) != domain.size:
        raise ValueError(
            f"expected {domain.size} coefficients for this domain, got {len(values)}"
        )
    return values


def _root_table(domain: EvaluationDomain, inverse: bool) -> list[list[Fr]]:
    if domain.size >= 2 and not domain.roots:
        domain.compute_lookup_table()
    return domain.inverse_round_roots() if inverse else domain.round_roots()


def _transform(
    domain: EvaluationDomain, coeffs: Sequence[FrLike], inverse: bool
) -> list[Fr]:
    values = _as_field_list(domain, coeffs)
    n = domain.size
    if n == 1:
        return values
    table = _root_table(domain, inverse)
    data = [values[reverse_bits(i, domain.log2_size)] for i in range(n)]

    # First round: all twiddle factors are one.
    for k in range(0, n, 2):
        a, b = data[k], data[k + 1]
        data[k] = a + b
        data[k + 1] = a - b

    m = 2
    while m < n:
        roots = table[get_msb(m) - 1]
        for k in range(0, n, 2 * m):
            for j, w in enumerate(roots):
                temp = w * data[k + j + m]
                data[k + j + m] = data[k + j] - temp
                data[k + j] = data[k + j] + temp
        m <<= 1
    return data


def fft(domain: EvaluationDomain, coeffs: Sequence[FrLike]) -> list[Fr]:
    """Evaluate the polynomial ``coeffs`` at every power of the domain root.

    The domain's lookup table is computed on first use.
    """
    return _transform(domain, coeffs, inverse=False)


def ifft(domain: EvaluationDomain, coeffs: Sequence[FrLike]) -> list[Fr]:
    """Recover coefficients from evaluations at the powers of the domain root."""
    return [v * domain.domain_inverse for v in _transform(domain, coeffs, inverse=True)]


def _partial_setup(domain: EvaluationDomain) -> tuple[int, int, int, int, list[Fr]]:
    if domain.size < 4:
        raise ValueError("a partial FFT needs a domain of size at least 4")
    n = domain.size >> 2
    m = domain.size >> 1
    table = _root_table(domain, inverse=False)
    return n, m, domain.size - 1, m - 1, table[get_msb(m) - 1]


def partial_fft(
    domain: EvaluationDomain,
    coeffs: Sequence[FrLike],
    constant: FrLike = 1,
    is_coset: bool = False,
) -> list[Fr]:
    """Apply the four-way partial FFT used to split a polynomial into quarters.

    For a coset transform each output row ``s`` is scaled by
    ``constant * generator**(s + 1)``.
    """
    values = _as_field_list(domain, coeffs)
    n, m, full_mask, half_mask, roots = _partial_setup(domain)
    result = [Fr.zero()] * domain.size
    for i in range(n):
        group = values[i::n]
        temp_constant = Fr(constant)
        for s in range(4):
            acc = Fr.zero()
            for j, term in enumerate(group):
                root_index = (i + j * n) * (s + 1)
                if is_coset:
                    root_index -= 4 * i
                root_index &= full_mask
                multiplier = roots[root_index & half_mask]
                if root_index >= m:
                    multiplier = -multiplier
                acc += multiplier * term
            if is_coset:
                temp_constant *= domain.generator
                acc *= temp_constant
            result[(3 - s) * n + i] = acc
    return result


def partial_fft_serial(domain: EvaluationDomain, coeffs: Sequence[FrLike]) -> list[Fr]:
    """The plain (non-coset) partial FFT, returned as a new list."""
    return partial_fft(domain, coeffs, 1, False)


def compute_multiplicative_subgroup(
    domain: EvaluationDomain, log2_subgroup_size: int
) -> list[Fr]:
    """The values (g.X)^n for X over the roots of unity of order 2**log2_subgroup_size * n.

    These form ``g**n`` times the subgroup of order ``2**log2_subgroup_size``.
    """
    subgroup_root = Fr.root_of_unity(log2_subgroup_size)
    cofactor = domain.generator.pow(1 << domain.log2_size)
    subgroup_size = 1 << log2_subgroup_size
    return list(
        accumulate(
            repeat(subgroup_root, subgroup_size - 1), operator.mul, initial=cofactor
        )
    )