"""Protocol manifests describing transcript rounds, and the transcript hash."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from enum import Enum

PRNG_OUTPUT_SIZE = 32


class HashType(Enum):
    """Hash functions that can drive the Fiat-Shamir transform."""

    KECCAK256 = "keccak256"
    PEDERSEN_BLAKE3S = "pedersen_blake3s"
    PLOOKUP_PEDERSEN_BLAKE3S = "plookup_pedersen_blake3s"

    @property
    def security_parameter_size(self) -> int:
        """Security parameter size in bytes."""
        return 32 if self is HashType.KECCAK256 else 16

    @property
    def prng_output_size(self) -> int:
        """Size in bytes of each hash output."""
        return PRNG_OUTPUT_SIZE


def keccak256(buffer: bytes) -> bytes:
    """The 32-byte SHA3-256 digest used as the transcript hash."""
    return hashlib.sha3_256(bytes(buffer)).digest()


@dataclass
class ManifestEntry:
    """One piece of data used in a round of the protocol."""

    name: str = ""
    num_bytes: int = 0
    derived_by_verifier: bool = False
    challenge_map_index: int = 0


@dataclass
class RoundManifest:
    """The data of one round and the challenges derived from it."""

    elements: list[ManifestEntry] = field(default_factory=list)
    challenge: str = ""
    num_challenges: int = 0
    map_challenges: bool = False

    def includes_element(self, element_name: str) -> bool:
        """Whether an element with this name belongs to the round."""
        return any(entry.name == element_name for entry in self.elements)


@dataclass
class Manifest:
    """The round structure of a protocol, as defined by a composer."""

    round_manifests: list[RoundManifest] = field(default_factory=list)

    def num_rounds(self) -> int:
        """The number of rounds in the protocol."""
        return len(self.round_manifests)