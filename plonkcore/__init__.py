"""BN254 scalar-field arithmetic, FFT evaluation domains, polynomials and Fiat-Shamir transcripts for PLONK-style proofs."""

__version__ = "0.1.0"