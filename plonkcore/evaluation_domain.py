"""Radix-2 evaluation domains with precomputed FFT root tables."""

from __future__ import annotations

from plonkcore.field import Fr, get_msb

MIN_GROUP_PER_THREAD = 4
MAX_THREADS = 1


def compute_num_threads(size: int) -> int:
    """Number of work partitions used for a domain of the given size."""
    num_threads = MAX_THREADS
    if size <= num_threads * MIN_GROUP_PER_THREAD:
        return 1
    return num_threads


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


class EvaluationDomain:
    """A multiplicative subgroup of order ``size`` (a power of two)."""

    def __init__(self, size: int, generator_size: int | None = None) -> None:
        if not _is_power_of_two(size):
            raise ValueError(f"domain size must be a power of two, got {size}")
        self.size = size
        self.num_threads = compute_num_threads(size)
        self.thread_size = size // self.num_threads
        self.log2_size = get_msb(size)
        self.log2_thread_size = get_msb(self.thread_size)
        self.log2_num_threads = get_msb(self.num_threads)
        if not _is_power_of_two(self.thread_size) or not _is_power_of_two(
            self.num_threads
        ):
            raise ValueError("thread partition must use powers of two")
        self.generator_size = size if generator_size is None else generator_size

        self.root = Fr.root_of_unity(self.log2_size)
        self.root_inverse = self.root.inverse()
        self.domain = Fr(size)
        self.domain_inverse = self.domain.inverse()
        self.generator = Fr.GENERATOR
        self.generator_inverse = self.generator.inverse()
        self.four_inverse = Fr(4).inverse()

        self.roots: list[Fr] = []
        self._round_ranges: list[range] = []
        self._inverse_round_ranges: list[range] = []

    def __repr__(self) -> str:
        return f"EvaluationDomain(size={self.size})"

    def _fill_round_tables(self, base_root: Fr, offset: int) -> list[range]:
        num_rounds = get_msb(self.size)
        ranges = [range(offset, offset + 2)]
        for i in range(1, num_rounds - 1):
            start = ranges[-1].stop
            ranges.append(range(start, start + (1 << (i + 1))))

        for i in range(num_rounds - 1):
            m = 1 << (i + 1)
            round_root = base_root.pow(self.size // (2 * m))
            start = ranges[i].start
            value = Fr.one()
            for position in range(start, start + m):
                self.roots[position] = value
                value = value * round_root
        return ranges

    def compute_lookup_table(self) -> None:
        """Precompute per-round roots of unity for forward and inverse FFTs."""
        if self.roots:
            raise RuntimeError("lookup table has already been computed")
        if self.size < 2:
            raise ValueError("a lookup table needs a domain of size at least 2")
        self.roots = [Fr.zero()] * (2 * self.size)
        self._round_ranges = self._fill_round_tables(self.root, 0)
        self._inverse_round_ranges = self._fill_round_tables(
            self.root_inverse, self.size
        )

    def round_roots(self) -> list[list[Fr]]:
        """Roots used by each forward FFT round after the first."""
        return [self.roots[r.start : r.stop] for r in self._round_ranges]

    def inverse_round_roots(self) -> list[list[Fr]]:
        """Roots used by each inverse FFT round after the first."""
        return [self.roots[r.start : r.stop] for r in self._inverse_round_ranges]