"""A named collection of polynomials kept by a prover."""

from __future__ import annotations

from typing import Iterator

from plonkcore.field import SERIALIZED_SIZE
from plonkcore.polynomial import Polynomial


class PolynomialStore:
    """Maps string identifiers to polynomials that are shared by reference."""

    def __init__(self) -> None:
        self._polynomials: dict[str, Polynomial] = {}

    def put(self, name: str, polynomial: Polynomial) -> None:
        """Store ``polynomial`` under ``name``, replacing any earlier entry."""
        self._polynomials[name] = polynomial

    def get(self, key: str) -> Polynomial:
        """The polynomial stored under ``key``; raises ``KeyError`` if absent."""
        try:
            return self._polynomials[key]
        except KeyError:
            raise KeyError(f"didn't find polynomial {key!r}") from None

    def remove(self, key: str) -> Polynomial:
        """Take the polynomial stored under ``key`` out of the store."""
        try:
            return self._polynomials.pop(key)
        except KeyError:
            raise KeyError(f"didn't find polynomial {key!r}") from None

    def size_in_bytes(self) -> int:
        """Total size of the coefficients of every stored polynomial."""
        return sum(len(p) * SERIALIZED_SIZE for p in self._polynomials.values())

    def __contains__(self, key: object) -> bool:
        return key in self._polynomials

    def __len__(self) -> int:
        return len(self._polynomials)

    def __iter__(self) -> Iterator[str]:
        return iter(self._polynomials)

    def __str__(self) -> str:
        size_in_mb = self.size_in_bytes() // 1_000_000
        lines = [f"PolynomialStore contents total size: {size_in_mb} MB"]
        for key, polynomial in self._polynomials.items():
            entry_bytes = len(polynomial) * SERIALIZED_SIZE
            lines.append(
                f"PolynomialStore: {key} -> {entry_bytes} bytes, {polynomial!r}"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"PolynomialStore({sorted(self._polynomials)!r})"