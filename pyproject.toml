[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hqcprims"
version = "0.1.0"
description = "Building blocks of the HQC key encapsulation mechanism: SHAKE-256 seed expansion, sparse vectors, GF(2)[X] arithmetic, key and ciphertext encoding, and Reed-Muller coding"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hqc",
    "post-quantum",
    "kem",
    "code-based cryptography",
    "reed-muller",
    "shake256",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["hqcprims"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
