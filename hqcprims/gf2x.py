"""Multiplication of binary polynomials modulo X^n - 1."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .params import ParameterSet

_WORD_MASK = (1 << 64) - 1
_BASE_BITS = 512


def _to_int(words: Sequence[int]) -> int:
    return int.from_bytes(b"".join(word.to_bytes(8, "little") for word in words), "little")


def _to_words(value: int, count: int) -> list[int]:
    return [(value >> (64 * position)) & _WORD_MASK for position in range(count)]


def _schoolbook(a: int, b: int) -> int:
    result = 0
    while b:
        lowest = b & -b
        result ^= a << (lowest.bit_length() - 1)
        b ^= lowest
    return result


def _clmul(a: int, b: int) -> int:
    """Carry-less product of two arbitrary-size polynomials (Karatsuba)."""
    if a.bit_length() < b.bit_length():
        a, b = b, a
    if b.bit_length() <= _BASE_BITS:
        return _schoolbook(a, b)
    half = a.bit_length() // 2
    mask = (1 << half) - 1
    a_low, a_high = a & mask, a >> half
    b_low, b_high = b & mask, b >> half
    low = _clmul(a_low, b_low)
    high = _clmul(a_high, b_high)
    middle = _clmul(a_low ^ a_high, b_low ^ b_high) ^ low ^ high
    return low ^ (middle << half) ^ (high << (2 * half))


def carryless_mul(a: int, b: int) -> int:
    """Return the 128-bit carry-less product of two 64-bit words."""
    for operand in (a, b):
        if not 0 <= operand <= _WORD_MASK:
            raise ValueError(f"operand must fit in 64 bits, got {operand}")
    return _schoolbook(a, b)


def _check_length(words: Sequence[int], params: ParameterSet) -> None:
    if len(words) != params.vec_n_size_64():
        raise ValueError(
            f"expected {params.vec_n_size_64()} words, got {len(words)}"
        )


def vect_mul(v1: Sequence[int], v2: Sequence[int], params: ParameterSet) -> list[int]:
    """Multiply two ``n``-bit vectors modulo X^n - 1."""
    _check_length(v1, params)
    _check_length(v2, params)
    product = _clmul(_to_int(v1), _to_int(v2))
    reduced = (product ^ (product >> params.n)) & ((1 << params.n) - 1)
    return _to_words(reduced, params.vec_n_size_64())


def vect_mul_low_weight(
    indexes: Iterable[int], heavy: Sequence[int], params: ParameterSet
) -> list[int]:
    """Multiply a sparse vector, given by its set positions, by a dense one.

    The product modulo X^n - 1 is the XOR of the dense vector rotated by
    each position. Processing stops at the first position greater than ``n``.
    """
    _check_length(heavy, params)
    n = params.n
    mask = (1 << n) - 1
    dense = _to_int(heavy) & mask
    result = 0
    for index in indexes:
        if index > n:
            break
        result ^= ((dense << index) | (dense >> (n - index))) & mask
    return _to_words(result, params.vec_n_size_64())