# plonkcore

Building blocks for PLONK-style proof systems over the BN254 scalar field.
It is pure Python and has no third-party dependencies.

## What is inside

- `plonkcore.field`: `Fr` is an immutable element of the BN254 scalar field.
  It supports `+ - * /`, negation, `pow` (a negative exponent goes through the
  inverse) and `inverse` (which raises `ZeroDivisionError` for zero). It has
  32-byte little-endian `to_bytes` and `from_bytes`, and
  `Fr.root_of_unity(log2_size)` for orders up to 2^28. The module also has
  `batch_inversion`, which leaves zeros as zero, and `get_msb`.
- `plonkcore.evaluation_domain`: `EvaluationDomain(size, generator_size)` is a
  power-of-two multiplicative subgroup. It holds its root, the root's inverse,
  `domain_inverse` and a generator. `compute_lookup_table()` fills per-round
  root tables, which `round_roots()` and `inverse_round_roots()` return.
  `compute_num_threads` gives the partition count.
- `plonkcore.polynomial`: `Polynomial(size)` is a mutable list of
  coefficients. It supports indexing, iteration, `len`, `resize`, in-place
  `+=`, `-=` and scalar `*=`, and `Polynomial.from_interpolations(points,
  values)`.
- `plonkcore.interpolation`: `compute_linear_polynomial_product`,
  `compute_efficient_interpolation`, `compute_kate_opening_coefficients` and
  `evaluate`. `compute_kate_opening_coefficients` returns `(F(z), W)`.
  Interpolation needs distinct, non-zero points.
- `plonkcore.fft`: `fft` and `ifft` work over a domain and compute the
  domain's lookup table the first time they need it. `ifft` scales the result
  by 1/n. The module also has `partial_fft` (with an optional coset scaling),
  `partial_fft_serial`, `reverse_bits` and `compute_multiplicative_subgroup`.
- `plonkcore.lagrange`: `get_lagrange_evaluations` returns a
  `LagrangeEvaluations` holding `vanishing_poly`, `l_start` and `l_end`. Roots
  can optionally be cut out of the vanishing polynomial. The module also has
  `compute_lagrange_polynomial_fft` and `compute_barycentric_evaluation`.
- `plonkcore.polynomial_store`: `PolynomialStore` maps names to polynomials.
  It has `put`, `get`, `remove`, `size_in_bytes`, `in` and `len`. `get` and
  `remove` raise `KeyError` for unknown names.
- `plonkcore.manifest`: this module defines the protocol description:
  - `Manifest`, with `RoundManifest` and `ManifestEntry`;
  - the `HashType` enum;
  - `keccak256`, the transcript hash, which is SHA3-256.
- `plonkcore.transcript`: `Transcript` collects named elements. Each call to
  `apply_fiat_shamir` derives one round's challenges from that round's data.
  A transcript can be exported with `export_transcript` and rebuilt with
  `Transcript.from_serialized`. It also reads and writes field elements
  through its `*_field_element*` helpers.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short example

```python
from plonkcore.evaluation_domain import EvaluationDomain
from plonkcore.fft import fft, ifft
from plonkcore.field import Fr
from plonkcore.polynomial import Polynomial

domain = EvaluationDomain(256, None)
assert domain.root.pow(256) == Fr(1)

small = EvaluationDomain(4, None)
evaluations = fft(small, [1, 2, 3, 4])
assert ifft(small, evaluations) == [Fr(1), Fr(2), Fr(3), Fr(4)]

points = [Fr(1), Fr(2), Fr(3)]
values = [Fr(2), Fr(5), Fr(10)]          # x^2 + 1
poly = Polynomial.from_interpolations(points, values)
print(list(poly))                        # coefficients, lowest degree first
```

You build a transcript from a manifest that describes each round. Add
elements by name, then call `apply_fiat_shamir` to hash one round's data into
that round's challenges. Each challenge is 32 bytes long. Its rightmost
`num_challenge_bytes` bytes come from the hash and the rest are zero.

```python
from plonkcore.manifest import Manifest, ManifestEntry, RoundManifest
from plonkcore.transcript import Transcript

manifest = Manifest([
    RoundManifest([ManifestEntry("circuit_size", 4, False, -1)], "init", 1, False),
    RoundManifest([ManifestEntry("W_1", 64, False, -1)], "beta", 2, False),
])
transcript = Transcript(manifest, 32)
transcript.add_element("circuit_size", bytes(4))
transcript.apply_fiat_shamir("init")
transcript.add_element("W_1", bytes(64))
transcript.apply_fiat_shamir("beta")
beta = transcript.get_challenge("beta", 0)
```

## What it does not do

This package is a set of primitives, not a prover or a verifier. It does not
provide any of the following:

- circuit construction;
- polynomial commitments or multi-scalar multiplication;
- elliptic-curve group elements;
- structured reference strings;
- a command-line tool.

The transcript always hashes with `keccak256`. `HashType` lists the Pedersen
and Blake3s variants, but no hash is implemented for them.