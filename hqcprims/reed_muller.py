"""Reed-Muller RM(1,7) code, duplicated, as the inner code of HQC."""

from __future__ import annotations

from collections.abc import Sequence

from .params import ParameterSet, ceil_divide

_MASK32 = 0xFFFFFFFF
_ROWS = (0xAAAAAAAA, 0xCCCCCCCC, 0xF0F0F0F0, 0xFF00FF00, 0xFFFF0000)


def _bit_mask(value: int) -> int:
    return _MASK32 if value & 1 else 0


def _multiplicity(params: ParameterSet) -> int:
    return ceil_divide(params.n2, 128)


def encode_byte(message: int) -> tuple[int, int]:
    """Encode one byte into a 128-bit RM(1,7) codeword, as two 64-bit words."""
    if not 0 <= message <= 0xFF:
        raise ValueError(f"message must be a byte, got {message}")
    first = _bit_mask(message >> 7)
    for bit, row in enumerate(_ROWS):
        first ^= _bit_mask(message >> bit) & row
    low = first
    first ^= _bit_mask(message >> 5)
    low |= first << 32
    first ^= _bit_mask(message >> 6)
    high = first << 32
    first ^= _bit_mask(message >> 5)
    high |= first
    return low, high


def reed_muller_encode(message: bytes, params: ParameterSet) -> list[int]:
    """Encode ``n1`` bytes, each into ``n2`` bits of repeated RM(1,7) codewords."""
    message = bytes(message)
    if len(message) != params.vec_n1_size_bytes:
        raise ValueError(
            f"message must be {params.vec_n1_size_bytes} bytes, got {len(message)}"
        )
    multiplicity = _multiplicity(params)
    words: list[int] = []
    for byte in message:
        words.extend(encode_byte(byte) * multiplicity)
    return words


def _expand_and_sum(block: Sequence[int]) -> list[int]:
    """Count, per bit position, how many copies of the codeword have it set."""
    counts = [0] * 128
    for copy in range(0, len(block), 2):
        for part in range(2):
            word = block[copy + part]
            for bit in range(64):
                counts[part * 64 + bit] += (word >> bit) & 1
    return counts


def _hadamard(values: list[int]) -> list[int]:
    for _ in range(7):
        pairs = list(zip(values[0::2], values[1::2]))
        values = [a + b for a, b in pairs] + [a - b for a, b in pairs]
    return values


def _find_peak(transform: Sequence[int]) -> int:
    """Locate the first largest magnitude; bit 7 is set when it is non-negative."""
    peak_abs = 0
    peak = 0
    position = 0
    for index, value in enumerate(transform):
        if abs(value) > peak_abs:
            peak_abs = abs(value)
            peak = value
            position = index
    if peak >= 0:
        position |= 128
    return position


def reed_muller_decode(codeword: Sequence[int], params: ParameterSet) -> bytes:
    """Decode a received word of ``n1 * n2`` bits back to ``n1`` bytes."""
    if len(codeword) != params.vec_n1n2_size_64():
        raise ValueError(
            f"codeword must hold {params.vec_n1n2_size_64()} words, got {len(codeword)}"
        )
    multiplicity = _multiplicity(params)
    block_words = 2 * multiplicity
    out = bytearray()
    for start in range(0, params.vec_n1_size_bytes * block_words, block_words):
        transform = _hadamard(_expand_and_sum(codeword[start:start + block_words]))
        transform[0] -= 64 * multiplicity
        out.append(_find_peak(transform))
    return bytes(out)