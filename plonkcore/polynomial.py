"""Dense polynomials in coefficient form over the scalar field."""

from __future__ import annotations

from typing import Iterator, Sequence

from plonkcore.field import Fr, FrLike
from plonkcore.interpolation import compute_efficient_interpolation


class Polynomial:
    """A mutable, fixed-size vector of field coefficients."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"polynomial size must be non-negative, got {size}")
        self.coefficients: list[Fr] = [Fr.zero()] * size

    @classmethod
    def from_interpolations(
        cls, interpolation_points: Sequence[FrLike], evaluations: Sequence[FrLike]
    ) -> "Polynomial":
        """The polynomial through ``(interpolation_points[i], evaluations[i])``."""
        if not interpolation_points:
            raise ValueError("at least one interpolation point is required")
        polynomial = cls(0)
        polynomial.coefficients = compute_efficient_interpolation(
            evaluations, interpolation_points
        )
        return polynomial

    @property
    def size(self) -> int:
        return len(self.coefficients)

    def resize(self, new_len: int, value: FrLike = 0) -> None:
        """Truncate, or extend with copies of ``value``, to ``new_len`` coefficients."""
        if new_len < 0:
            raise ValueError(f"polynomial size must be non-negative, got {new_len}")
        fill = Fr(value)
        del self.coefficients[new_len:]
        self.coefficients.extend([fill] * (new_len - len(self.coefficients)))

    def __getitem__(self, index):
        return self.coefficients[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self.coefficients[index] = [Fr(v) for v in value]
        else:
            self.coefficients[index] = Fr(value)

    def __iter__(self) -> Iterator[Fr]:
        return iter(self.coefficients)

    def __len__(self) -> int:
        return len(self.coefficients)

    def __iadd__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(self) < len(other):
            self.resize(len(other))
        for i, coefficient in enumerate(other.coefficients):
            self.coefficients[i] += coefficient
        return self

    def __isub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(self) < len(other):
            self.resize(len(other))
        for i, coefficient in enumerate(other.coefficients):
            self.coefficients[i] -= coefficient
        return self

    def __imul__(self, scalar: FrLike) -> "Polynomial":
        if not isinstance(scalar, (Fr, int)):
            return NotImplemented
        factor = Fr(scalar)
        self.coefficients = [c * factor for c in self.coefficients]
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __repr__(self) -> str:
        return f"Polynomial({self.coefficients!r})"