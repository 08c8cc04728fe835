# hqcprims

Pure-Python building blocks of the HQC code-based key encapsulation
mechanism. Two parameter sets are provided: `HQC128` and `HQC192`.

The package has no third-party dependencies; SHAKE-256 comes from
`hashlib`.

## What is inside

| Module | Contents |
| --- | --- |
| `hqcprims.params` | `ParameterSet` with the scheme constants and derived sizes, the ready-made sets `HQC128` and `HQC192`, the `Domain` enum for SHAKE-256 domain separation, `ceil_divide` |
| `hqcprims.shake` | `SeedExpander`, a SHAKE-256 based seed expander read in 8-byte blocks, and `shake256_512_ds`, a 64-byte hash of data followed by a domain byte |
| `hqcprims.vector` | fixed-weight sampling (`random_fixed_weight`, `random_fixed_weight_indexes`), `random_vector`, `vect_add`, `vect_add_light`, `vectors_differ` (constant-time comparison), `vect_resize` |
| `hqcprims.gf2x` | `carryless_mul` of two 64-bit words, and multiplication modulo X^n - 1 (`vect_mul`, and `vect_mul_low_weight` for a sparse operand given by its set positions) |
| `hqcprims.parsing` | little-endian word packing (`load8_arr`, `store8_arr`) and encoding and decoding of public keys, secret keys and ciphertexts |
| `hqcprims.reed_muller` | RM(1,7) coding with repetition: `encode_byte`, `reed_muller_encode`, `reed_muller_decode` |

Vectors are lists of 64-bit words, least significant word first. Functions
return new lists rather than changing their arguments, and raise
`ValueError` on inputs of the wrong length or range.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from hqcprims.params import HQC128
from hqcprims.shake import SeedExpander
from hqcprims.vector import random_fixed_weight_indexes, random_vector
from hqcprims.gf2x import vect_mul_low_weight
from hqcprims.reed_muller import reed_muller_encode, reed_muller_decode

params = HQC128

expander = SeedExpander(bytes(params.seed_bytes))
h = random_vector(expander, params)
support = random_fixed_weight_indexes(expander, params.omega, params)
product = vect_mul_low_weight(support, h, params)

message = bytes(range(params.n1))
codeword = reed_muller_encode(message, params)
assert reed_muller_decode(codeword, params) == message
```

Sampling functions draw their randomness from a `SeedExpander`, so the same
seed always gives the same vectors.

## What it does not do

This package holds the primitives only. It has no key generation,
encapsulation or decapsulation functions, no public-key encryption layer,
and no Reed-Solomon outer code, so the full concatenated code and the
complete KEM are not available from it. It offers no command-line tool.