"""Serialisation of HQC keys and ciphertexts."""

from __future__ import annotations

import struct
from collections.abc import Sequence

from .params import ParameterSet
from .shake import SeedExpander
from .vector import random_fixed_weight_indexes, random_vector


def load8_arr(data: bytes, count: int) -> list[int]:
    """Read ``count`` little-endian 64-bit words from ``data``.

    A short final chunk fills the low bytes of its word. Words beyond the end
    of the data are zero and bytes beyond ``count`` words are ignored.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    raw = bytes(data)[: 8 * count].ljust(8 * count, b"\0")
    return list(struct.unpack(f"<{count}Q", raw))


def store8_arr(words: Sequence[int], length: int) -> bytes:
    """Write 64-bit words as ``length`` little-endian bytes.

    Output past the end of the words is zero-filled.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    try:
        raw = b"".join(int(word).to_bytes(8, "little") for word in words)
    except OverflowError as exc:
        raise ValueError("words must be unsigned 64-bit integers") from exc
    return raw[:length].ljust(length, b"\0")


def _check_length(name: str, value: bytes, expected: int) -> bytes:
    value = bytes(value)
    if len(value) != expected:
        raise ValueError(f"{name} must be {expected} bytes, got {len(value)}")
    return value


def _check_words(name: str, words: Sequence[int], expected: int) -> None:
    if len(words) != expected:
        raise ValueError(f"{name} must hold {expected} words, got {len(words)}")


def public_key_to_bytes(
    pk_seed: bytes, s: Sequence[int], params: ParameterSet
) -> bytes:
    """Serialise a public key: the seed of ``h`` followed by the syndrome ``s``."""
    seed = _check_length("public key seed", pk_seed, params.seed_bytes)
    _check_words("syndrome", s, params.vec_n_size_64())
    return seed + store8_arr(s, params.vec_n_size_bytes())


def public_key_from_bytes(
    pk: bytes, params: ParameterSet
) -> tuple[list[int], list[int]]:
    """Parse a public key into the vectors ``(h, s)``; ``h`` is regenerated from its seed."""
    pk = _check_length("public key", pk, params.public_key_bytes())
    seed = pk[: params.seed_bytes]
    h = random_vector(SeedExpander(seed), params)
    s = load8_arr(pk[params.seed_bytes:], params.vec_n_size_64())
    return h, s


def secret_key_to_bytes(
    sk_seed: bytes, sigma: bytes, pk: bytes, params: ParameterSet
) -> bytes:
    """Serialise a secret key: seed, sigma, then the public key."""
    seed = _check_length("secret key seed", sk_seed, params.seed_bytes)
    sigma = _check_length("sigma", sigma, params.vec_k_size_bytes)
    pk = _check_length("public key", pk, params.public_key_bytes())
    return seed + sigma + pk


def secret_key_from_bytes(
    sk: bytes, params: ParameterSet
) -> tuple[list[int], list[int], bytes, bytes]:
    """Parse a secret key into ``(x_indexes, y_indexes, sigma, pk)``.

    The supports of ``x`` and ``y`` are regenerated, in that order, from the
    secret seed.
    """
    sk = _check_length("secret key", sk, params.secret_key_bytes())
    seed = sk[: params.seed_bytes]
    sigma_end = params.seed_bytes + params.vec_k_size_bytes
    sigma = sk[params.seed_bytes:sigma_end]
    pk = sk[sigma_end:]
    expander = SeedExpander(seed)
    x_indexes = random_fixed_weight_indexes(expander, params.omega, params)
    y_indexes = random_fixed_weight_indexes(expander, params.omega, params)
    return x_indexes, y_indexes, sigma, pk


def ciphertext_to_bytes(
    u: Sequence[int], v: Sequence[int], salt: bytes, params: ParameterSet
) -> bytes:
    """Serialise a ciphertext: ``u``, ``v`` and the salt."""
    _check_words("u", u, params.vec_n_size_64())
    _check_words("v", v, params.vec_n1n2_size_64())
    salt = _check_length("salt", salt, params.salt_size_bytes)
    return (
        store8_arr(u, params.vec_n_size_bytes())
        + store8_arr(v, params.vec_n1n2_size_bytes())
        + salt
    )


def ciphertext_from_bytes(
    ct: bytes, params: ParameterSet
) -> tuple[list[int], list[int], bytes]:
    """Parse a ciphertext into ``(u, v, salt)``."""
    ct = _check_length("ciphertext", ct, params.ciphertext_bytes())
    u_end = params.vec_n_size_bytes()
    v_end = u_end + params.vec_n1n2_size_bytes()
    u = load8_arr(ct[:u_end], params.vec_n_size_64())
    v = load8_arr(ct[u_end:v_end], params.vec_n1n2_size_64())
    return u, v, ct[v_end:]