[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plonkcore"
version = "0.1.0"
description = "Prime-field polynomial arithmetic, FFT evaluation domains and Fiat-Shamir transcripts for PLONK-style proof systems"
requires-python = ">=3.10"
dependencies = []
keywords = ["plonk", "zero-knowledge", "fft", "polynomial", "fiat-shamir", "bn254"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plonkcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
