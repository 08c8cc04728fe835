"""SHAKE-256 based seed expander and domain-separated hashing."""

from __future__ import annotations

import hashlib

from .params import Domain

_BLOCK = 8


class SeedExpander:
    """Deterministic byte stream from SHAKE-256(seed || SEEDEXPANDER domain).

    Output is squeezed in 8-byte blocks: a read whose length is not a
    multiple of eight discards the rest of its final block.
    """

    def __init__(self, seed: bytes) -> None:
        self._xof = hashlib.shake_256(bytes(seed) + bytes([Domain.SEEDEXPANDER]))
        self._buffer = b""
        self._offset = 0

    def _ensure(self, end: int) -> None:
        if end > len(self._buffer):
            size = max(end, 2 * len(self._buffer), 256)
            self._buffer = self._xof.digest(size)

    def read(self, length: int) -> bytes:
        """Return the next ``length`` bytes of the stream."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        consumed = -(-length // _BLOCK) * _BLOCK
        self._ensure(self._offset + consumed)
        out = self._buffer[self._offset:self._offset + length]
        self._offset += consumed
        return out


def shake256_512_ds(data: bytes, domain: int) -> bytes:
    """Return 64 bytes of SHAKE-256(data || domain)."""
    domain = int(domain)
    if not 0 <= domain <= 0xFF:
        raise ValueError(f"domain must fit in one byte, got {domain}")
    return hashlib.shake_256(bytes(data) + bytes([domain])).digest(64)