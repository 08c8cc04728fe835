"""Sampling of HQC vectors and word-level vector utilities."""

from __future__ import annotations

import hmac
import struct
from collections.abc import Iterable, Sequence

from .params import ParameterSet, ceil_divide
from .shake import SeedExpander

_WORD_MASK = (1 << 64) - 1


def _words_from_int(value: int, count: int) -> list[int]:
    """Split ``value`` into ``count`` little-endian 64-bit words."""
    return [(value >> (64 * position)) & _WORD_MASK for position in range(count)]


def _support(expander: SeedExpander, weight: int, params: ParameterSet) -> list[int]:
    """Draw ``weight`` distinct positions in ``[0, n)`` from the expander."""
    if not 1 <= weight <= params.omega_r:
        raise ValueError(
            f"weight must lie between 1 and {params.omega_r}, got {weight}"
        )
    raw = expander.read(4 * weight)
    values = struct.unpack(f"<{weight}I", raw)
    support = [i + value % (params.n - i) for i, value in enumerate(values)]
    # A position already taken by a later draw is replaced by its own rank,
    # which no later draw can hold since draw j always lies at or above j.
    for i in range(weight - 2, -1, -1):
        if support[i] in support[i + 1:]:
            support[i] = i
    return support


def random_fixed_weight_indexes(
    expander: SeedExpander, weight: int, params: ParameterSet
) -> list[int]:
    """Return the positions of the set bits of a random vector of given weight."""
    return _support(expander, weight, params)


def random_fixed_weight(
    expander: SeedExpander, weight: int, params: ParameterSet
) -> list[int]:
    """Return a random ``n``-bit vector of Hamming weight ``weight`` as 64-bit words."""
    words = [0] * params.vec_n_size_64()
    for position in _support(expander, weight, params):
        words[position >> 6] |= 1 << (position & 0x3F)
    return words


def random_vector(expander: SeedExpander, params: ParameterSet) -> list[int]:
    """Return a uniformly random ``n``-bit vector as 64-bit words."""
    raw = expander.read(params.vec_n_size_bytes())
    words = _words_from_int(int.from_bytes(raw, "little"), params.vec_n_size_64())
    words[-1] &= params.red_mask
    return words


def vect_add(v1: Sequence[int], v2: Sequence[int]) -> list[int]:
    """Return the sum (XOR) of two vectors of equal word length."""
    if len(v1) != len(v2):
        raise ValueError(f"vector lengths differ: {len(v1)} and {len(v2)}")
    return [a ^ b for a, b in zip(v1, v2)]


def vect_add_light(
    vector: Sequence[int], indexes: Iterable[int], size_words: int
) -> list[int]:
    """Flip the bits at ``indexes`` in a copy of ``vector``.

    Processing stops at the first index that does not fit in
    ``size_words`` words.
    """
    result = list(vector)
    limit = size_words * 64
    for index in indexes:
        if index >= limit:
            break
        result[index // 64] ^= 1 << (index % 64)
    return result


def vectors_differ(v1: bytes, v2: bytes) -> bool:
    """Compare two byte strings in constant time; True when they differ."""
    first, second = bytes(v1), bytes(v2)
    if len(first) != len(second):
        raise ValueError(f"vector lengths differ: {len(first)} and {len(second)}")
    return not hmac.compare_digest(first, second)


def vect_resize(
    vector: Sequence[int], size_out: int, size_in: int, params: ParameterSet
) -> list[int]:
    """Resize a vector of ``size_in`` bits to one of ``size_out`` bits.

    Shrinking keeps the first ``n1 * n2`` bits; growing pads with zero words.
    """
    if size_out < size_in:
        byte_count = params.vec_n1n2_size_bytes()
        word_count = params.vec_n1n2_size_64()
        if len(vector) < word_count:
            raise ValueError(f"vector needs at least {word_count} words")
        value = sum(word << (64 * i) for i, word in enumerate(vector[:word_count]))
        value &= (1 << (8 * byte_count)) - 1
        result = _words_from_int(value, word_count)
        spare = 64 - size_out % 64 if size_out % 64 else 0
        result[-1] &= _WORD_MASK >> spare
        return result
    copied = ceil_divide(size_in, 64)
    if len(vector) < copied:
        raise ValueError(f"vector needs at least {copied} words")
    total = max(ceil_divide(size_out, 64), copied)
    return list(vector[:copied]) + [0] * (total - copied)