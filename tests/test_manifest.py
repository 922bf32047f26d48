import hashlib

from plonkcore.manifest import (
    PRNG_OUTPUT_SIZE,
    HashType,
    Manifest,
    ManifestEntry,
    RoundManifest,
    keccak256,
)


def _round():
    return RoundManifest(
        elements=[
            ManifestEntry("circuit_size", 4, True, -1),
            ManifestEntry("W_1", 64, False, 0),
        ],
        challenge="beta",
        num_challenges=2,
        map_challenges=True,
    )


def test_includes_element_found():
    assert _round().includes_element("W_1")


def test_includes_element_missing():
    assert not _round().includes_element("W_2")


def test_empty_round_includes_nothing():
    assert not RoundManifest().includes_element("")


def test_manifest_num_rounds():
    manifest = Manifest([_round(), _round(), RoundManifest()])
    assert manifest.num_rounds() == 3


def test_default_manifest_has_no_rounds():
    assert Manifest().num_rounds() == 0


def test_manifest_entry_defaults():
    entry = ManifestEntry()
    assert (entry.name, entry.num_bytes, entry.derived_by_verifier) == ("", 0, False)
    assert entry.challenge_map_index == 0


def test_round_manifest_lists_are_independent():
    first = RoundManifest()
    second = RoundManifest()
    first.elements.append(ManifestEntry("a", 1))
    assert second.elements == []


def test_keccak256_empty_input_digest():
    assert keccak256(b"").hex() == (
        "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
    )


def test_keccak256_matches_sha3_and_output_size():
    digest = keccak256(b"transcript data")
    assert len(digest) == PRNG_OUTPUT_SIZE
    assert digest == hashlib.sha3_256(b"transcript data").digest()


def test_keccak256_accepts_bytearray():
    assert keccak256(bytearray(b"abc")) == keccak256(b"abc")


def test_hash_type_security_parameter_sizes():
    round_manifest = RoundManifest(
        elements=[ManifestEntry(h.name, h.security_parameter_size) for h in HashType],
        challenge="init",
    )
    assert round_manifest.includes_element(HashType.KECCAK256.name)
    sizes = {entry.name: entry.num_bytes for entry in round_manifest.elements}
    assert sizes[HashType.KECCAK256.name] == 32
    assert sizes[HashType.PEDERSEN_BLAKE3S.name] == 16
    assert sizes[HashType.PLOOKUP_PEDERSEN_BLAKE3S.name] == 16


def test_hash_type_prng_output_size():
    for index, hash_type in enumerate(HashType):
        digest = keccak256(bytes([index]))
        assert len(digest) == hash_type.prng_output_size == PRNG_OUTPUT_SIZE