"""A Fiat-Shamir transcript driven by a protocol manifest."""

from __future__ import annotations

import logging
from typing import Iterable

from plonkcore.field import SERIALIZED_SIZE, Fr
from plonkcore.manifest import PRNG_OUTPUT_SIZE, Manifest, keccak256

logger = logging.getLogger(__name__)


class Transcript:
    """Collects named protocol elements and derives challenges from them.

    Challenges are always ``PRNG_OUTPUT_SIZE`` bytes long; only the rightmost
    ``num_challenge_bytes`` of each are taken from the hash, the rest are zero.
    """

    def __init__(
        self, manifest: Manifest | None = None, num_challenge_bytes: int = PRNG_OUTPUT_SIZE
    ) -> None:
        if not 1 <= num_challenge_bytes <= PRNG_OUTPUT_SIZE:
            raise ValueError(
                f"challenge size must lie in 1..{PRNG_OUTPUT_SIZE}, "
                f"got {num_challenge_bytes}"
            )
        self.num_challenge_bytes = num_challenge_bytes
        self.manifest = manifest if manifest is not None else Manifest()
        self.current_round = 0
        self._elements: dict[str, bytes] = {}
        self._challenges: dict[str, list[bytes]] = {}
        self._current_challenge = bytes(PRNG_OUTPUT_SIZE)
        self.challenge_map: dict[str, int] = {}
        self.compute_challenge_map()

    def __repr__(self) -> str:
        return (
            f"Transcript(round={self.current_round}/{self.manifest.num_rounds()}, "
            f"elements={sorted(self._elements)!r})"
        )

    @classmethod
    def from_serialized(
        cls,
        data: bytes,
        manifest: Manifest,
        num_challenge_bytes: int = PRNG_OUTPUT_SIZE,
    ) -> "Transcript":
        """Rebuild a transcript from the bytes written by ``export_transcript``."""
        data = bytes(data)
        entries = [
            entry
            for round_manifest in manifest.round_manifests
            for entry in round_manifest.elements
            if not entry.derived_by_verifier
        ]
        required = sum(entry.num_bytes for entry in entries)
        if required != len(data):
            raise ValueError(
                "Serialized transcript does not contain the required number of bytes: "
                f"expected {required}, got {len(data)}"
            )
        transcript = cls(manifest, num_challenge_bytes)
        offset = 0
        for entry in entries:
            transcript._elements[entry.name] = data[offset : offset + entry.num_bytes]
            offset += entry.num_bytes
        return transcript

    def add_element(self, element_name: str, buffer: Iterable[int]) -> None:
        """Store (or replace) the bytes of a named element."""
        logger.info("Adding element %s to transcript", element_name)
        self._elements[element_name] = bytes(buffer)

    def _chunk(self, digest: bytes, j: int) -> bytes:
        size = self.num_challenge_bytes
        return bytes(PRNG_OUTPUT_SIZE - size) + digest[j * size : (j + 1) * size]

    def apply_fiat_shamir(self, challenge_name: str) -> None:
        """Derive the challenges of the current round and move to the next one."""
        if self.current_round >= self.manifest.num_rounds():
            raise ValueError(
                f"no round left for challenge {challenge_name!r}: "
                f"all {self.manifest.num_rounds()} rounds are done"
            )
        round_manifest = self.manifest.round_manifests[self.current_round]
        if challenge_name != round_manifest.challenge:
            raise ValueError(
                f"challenge {challenge_name!r} does not match the expected "
                f"{round_manifest.challenge!r} of round {self.current_round}"
            )

        num_challenges = round_manifest.num_challenges
        if num_challenges == 0:
            self.current_round += 1
            return

        buffer = bytearray()
        if self.current_round > 0:
            buffer += self._current_challenge
        for entry in round_manifest.elements:
            if entry.name not in self._elements:
                raise KeyError(f"element {entry.name!r} is missing from the transcript")
            element_data = self._elements[entry.name]
            if not entry.derived_by_verifier and entry.num_bytes != len(element_data):
                raise ValueError(
                    f"element {entry.name!r} holds {len(element_data)} bytes, "
                    f"the manifest expects {entry.num_bytes}"
                )
            buffer += element_data

        base_hash = keccak256(bytes(buffer))
        challenges_per_hash = PRNG_OUTPUT_SIZE // self.num_challenge_bytes
        round_challenges = [
            self._chunk(base_hash, j)
            for j in range(min(challenges_per_hash, num_challenges))
        ]

        rolling_buffer = bytearray(base_hash)
        rolling_buffer.append(0)
        num_hashes = -(-num_challenges // challenges_per_hash)
        for i in range(1, num_hashes):
            rolling_buffer[-1] = i & 0xFF
            hash_output = keccak256(bytes(rolling_buffer))
            for j in range(challenges_per_hash):
                if challenges_per_hash * i + j < num_challenges:
                    round_challenges.append(self._chunk(hash_output, j))

        self._current_challenge = round_challenges[-1]
        self._challenges.setdefault(challenge_name, round_challenges)
        self.current_round += 1

    def get_challenge(self, challenge_name: str, idx: int = 0) -> bytes:
        """The ``idx``-th challenge derived under ``challenge_name``."""
        logger.info("get_challenge(): %s", challenge_name)
        if challenge_name not in self._challenges:
            raise KeyError(f"no challenge named {challenge_name!r}")
        return self._challenges[challenge_name][idx]

    def get_challenge_index_from_map(self, challenge_map_name: str) -> int:
        """Index of a named subchallenge within its challenge list."""
        return self.challenge_map[challenge_map_name]

    def has_challenge(self, challenge_name: str) -> bool:
        return challenge_name in self._challenges

    def get_challenge_from_map(
        self, challenge_name: str, challenge_map_name: str
    ) -> bytes:
        """A subchallenge by name; index -1 in the map stands for the value one."""
        key = self.challenge_map[challenge_map_name]
        if key == -1:
            return bytes(PRNG_OUTPUT_SIZE - 1) + b"\x01"
        return self._challenges[challenge_name][key]

    def get_num_challenges(self, challenge_name: str) -> int:
        if challenge_name not in self._challenges:
            raise KeyError(f"no challenge named {challenge_name!r}")
        return len(self._challenges[challenge_name])

    def get_element(self, element_name: str) -> bytes:
        if element_name not in self._elements:
            raise KeyError(f"no element named {element_name!r}")
        return self._elements[element_name]

    def get_element_size(self, element_name: str) -> int:
        """Size the manifest gives an element, or -1 if it names none such."""
        for round_manifest in self.manifest.round_manifests:
            for entry in round_manifest.elements:
                if entry.name == element_name:
                    return entry.num_bytes
        return -1

    def export_transcript(self) -> bytes:
        """Serialize every element the verifier does not derive, in manifest order."""
        buffer = bytearray()
        for round_manifest in self.manifest.round_manifests:
            for entry in round_manifest.elements:
                if entry.name not in self._elements:
                    raise KeyError(
                        f"element {entry.name!r} is missing from the transcript"
                    )
                element_data = self._elements[entry.name]
                if entry.derived_by_verifier:
                    continue
                if entry.num_bytes != len(element_data):
                    raise ValueError(
                        f"element {entry.name!r} holds {len(element_data)} bytes, "
                        f"the manifest expects {entry.num_bytes}"
                    )
                buffer += element_data
        return bytes(buffer)

    def compute_challenge_map(self) -> None:
        """Map element names of challenge-mapping rounds to their indices."""
        self.challenge_map.clear()
        for round_manifest in self.manifest.round_manifests:
            if round_manifest.map_challenges:
                for entry in round_manifest.elements:
                    self.challenge_map[entry.name] = entry.challenge_map_index

    def mock_inputs_prior_to_challenge(
        self, challenge_in: str, circuit_size: int = 0
    ) -> None:
        """Fill in placeholder elements and run every round before ``challenge_in``."""
        for round_manifest in list(self.manifest.round_manifests):
            for entry in round_manifest.elements:
                if entry.name == "circuit_size":
                    self.add_element(
                        "circuit_size", (circuit_size & 0xFFFFFFFF).to_bytes(4, "big")
                    )
                else:
                    self.add_element(entry.name, bytes([1]) * entry.num_bytes)
            if challenge_in == round_manifest.challenge:
                break
            self.apply_fiat_shamir(round_manifest.challenge)

    def add_field_element(self, element_name: str, element: Fr) -> None:
        self.add_element(element_name, Fr(element).to_bytes())

    def get_field_element(self, element_name: str) -> Fr:
        return Fr.from_bytes(self.get_element(element_name))

    def put_field_element_vector(
        self, element_name: str, elements: Iterable[Fr]
    ) -> None:
        self.add_element(
            element_name, b"".join(Fr(element).to_bytes() for element in elements)
        )

    def get_field_element_vector(self, element_name: str) -> list[Fr]:
        buffer = self.get_element(element_name)
        count = len(buffer) // SERIALIZED_SIZE
        return [
            Fr.from_bytes(buffer[i * SERIALIZED_SIZE : (i + 1) * SERIALIZED_SIZE])
            for i in range(count)
        ]

    def get_challenge_field_element(self, challenge_name: str, idx: int = 0) -> Fr:
        return Fr.from_bytes(self.get_challenge(challenge_name, idx))

    def get_challenge_field_element_from_map(
        self, challenge_name: str, challenge_map_name: str
    ) -> Fr:
        return Fr.from_bytes(
            self.get_challenge_from_map(challenge_name, challenge_map_name)
        )