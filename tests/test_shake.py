import hashlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hqcprims.params import Domain
from hqcprims.shake import SeedExpander, shake256_512_ds

SEED = bytes(range(40))


def test_seed_expander_uses_seedexpander_domain():
    expected = hashlib.shake_256(SEED + b"\x02").digest(48)
    assert SeedExpander(SEED).read(48) == expected


def test_seed_expander_is_deterministic():
    first = SeedExpander(SEED).read(100)
    second = SeedExpander(SEED).read(100)
    assert len(first) == 100
    assert first == second
    assert first[:48] == hashlib.shake_256(SEED + b"\x02").digest(48)


def test_different_seeds_give_different_streams():
    other = bytes(40)
    assert SeedExpander(SEED).read(32) != SeedExpander(other).read(32)


def test_sequential_block_reads_concatenate():
    a = SeedExpander(SEED)
    joined = a.read(8) + a.read(16) + a.read(8)
    assert joined == SeedExpander(SEED).read(32)


def test_partial_block_discards_remainder():
    a = SeedExpander(SEED)
    first = a.read(3)
    second = a.read(8)
    reference = SeedExpander(SEED).read(16)
    assert first == reference[:3]
    assert second == reference[8:16]


def test_zero_read_consumes_nothing():
    a = SeedExpander(SEED)
    assert a.read(0) == b""
    assert a.read(16) == SeedExpander(SEED).read(16)


def test_negative_read_rejected():
    with pytest.raises(ValueError):
        SeedExpander(SEED).read(-1)


@given(st.lists(st.integers(min_value=0, max_value=64), max_size=12))
def test_block_aligned_reads_match_single_read(blocks):
    expander = SeedExpander(SEED)
    pieces = b"".join(expander.read(8 * b) for b in blocks)
    assert pieces == SeedExpander(SEED).read(8 * sum(blocks))


@given(st.integers(min_value=0, max_value=5000))
def test_read_returns_requested_length(length):
    assert len(SeedExpander(SEED).read(length)) == length


def test_shake256_512_ds_appends_domain_byte():
    data = b"message"
    expected = hashlib.shake_256(data + b"\x03").digest(64)
    assert shake256_512_ds(data, Domain.G_FCT) == expected


def test_shake256_512_ds_separates_domains():
    data = b"message"
    g = shake256_512_ds(data, Domain.G_FCT)
    k = shake256_512_ds(data, Domain.K_FCT)
    assert len(g) == 64 and len(k) == 64
    assert g != k
    assert shake256_512_ds(data, 3) == g


@pytest.mark.parametrize("domain", [-1, 256])
def test_shake256_512_ds_rejects_bad_domain(domain):
    with pytest.raises(ValueError):
        shake256_512_ds(b"x", domain)