"""Arithmetic in the scalar field of the BN254 curve."""

from __future__ import annotations

from typing import Iterable, Union

MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
TWO_ADICITY = 28
MULTIPLICATIVE_GENERATOR = 5
SERIALIZED_SIZE = 32

_TRACE = (MODULUS - 1) >> TWO_ADICITY
_TWO_ADIC_ROOT = pow(MULTIPLICATIVE_GENERATOR, _TRACE, MODULUS)

FrLike = Union["Fr", int]


class Fr:
    """An immutable element of the BN254 scalar field."""

    __slots__ = ("_value",)

    MODULUS = MODULUS
    TWO_ADICITY = TWO_ADICITY
    GENERATOR: "Fr"

    def __init__(self, value: FrLike = 0) -> None:
        if isinstance(value, Fr):
            self._value = value._value
        elif isinstance(value, int):
            self._value = value % MODULUS
        else:
            raise TypeError(f"cannot build a field element from {type(value).__name__}")

    @classmethod
    def zero(cls) -> "Fr":
        return cls(0)

    @classmethod
    def one(cls) -> "Fr":
        return cls(1)

    @staticmethod
    def _coerce(other: object) -> int | None:
        if isinstance(other, Fr):
            return other._value
        if isinstance(other, int):
            return other % MODULUS
        return None

    def __add__(self, other: FrLike) -> "Fr":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fr(self._value + rhs)

    __radd__ = __add__

    def __sub__(self, other: FrLike) -> "Fr":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fr(self._value - rhs)

    def __rsub__(self, other: FrLike) -> "Fr":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return Fr(lhs - self._value)

    def __mul__(self, other: FrLike) -> "Fr":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fr(self._value * rhs)

    __rmul__ = __mul__

    def __truediv__(self, other: FrLike) -> "Fr":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self * Fr(rhs).inverse()

    def __rtruediv__(self, other: FrLike) -> "Fr":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return Fr(lhs) * self.inverse()

    def __neg__(self) -> "Fr":
        return Fr(-self._value)

    def __pow__(self, exponent: int) -> "Fr":
        return self.pow(exponent)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"Fr({self._value:#x})"

    def pow(self, exponent: int) -> "Fr":
        """Raise to an integer power; negative powers use the inverse."""
        if exponent < 0:
            return self.inverse().pow(-exponent)
        return Fr(pow(self._value, exponent, MODULUS))

    def inverse(self) -> "Fr":
        """Multiplicative inverse; zero has none."""
        if self._value == 0:
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return Fr(pow(self._value, MODULUS - 2, MODULUS))

    def to_bytes(self) -> bytes:
        """Uncompressed serialization: 32 bytes, little-endian."""
        return self._value.to_bytes(SERIALIZED_SIZE, "little")

    @classmethod
    def from_bytes(cls, data: bytes) -> "Fr":
        """Parse the uncompressed 32-byte little-endian form."""
        if len(data) != SERIALIZED_SIZE:
            raise ValueError(
                f"a field element takes {SERIALIZED_SIZE} bytes, got {len(data)}"
            )
        value = int.from_bytes(data, "little")
        if value >= MODULUS:
            raise ValueError("encoded value is not reduced modulo the field order")
        return cls(value)

    @classmethod
    def root_of_unity(cls, log2_size: int) -> "Fr":
        """A primitive root of unity of order 2**log2_size."""
        if not 0 <= log2_size <= TWO_ADICITY:
            raise ValueError(
                f"no root of unity of order 2^{log2_size} in this field"
            )
        return cls(pow(_TWO_ADIC_ROOT, 1 << (TWO_ADICITY - log2_size), MODULUS))


Fr.GENERATOR = Fr(MULTIPLICATIVE_GENERATOR)


def batch_inversion(values: Iterable[Fr]) -> list[Fr]:
    """Invert every element with a single field inversion; zeros stay zero."""
    items = [Fr(v) for v in values]
    prefix: list[Fr] = []
    acc = Fr.one()
    for item in items:
        prefix.append(acc)
        if item:
            acc = acc * item
    inv = acc.inverse()
    result = list(items)
    for position in reversed(range(len(items))):
        item = items[position]
        if not item:
            continue
        result[position] = inv * prefix[position]
        inv = inv * item
    return result


def get_msb(value: int) -> int:
    """Index of the most significant set bit; zero maps to zero."""
    if value < 0:
        raise ValueError("most significant bit is undefined for negative values")
    return max(value.bit_length() - 1, 0)