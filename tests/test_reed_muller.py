import random

import pytest
from hypothesis import given, settings, strategies as st

from hqcprims.params import HQC128, HQC192
from hqcprims.reed_muller import encode_byte, reed_muller_decode, reed_muller_encode

ALL_ONES = (1 << 64) - 1


def test_encode_byte_zero():
    assert encode_byte(0) == (0, 0)


def test_encode_byte_bit_seven_flips_everything():
    assert encode_byte(0x80) == (ALL_ONES, ALL_ONES)


def test_encode_byte_bit_zero_pattern():
    assert encode_byte(1) == (0xAAAAAAAAAAAAAAAA, 0xAAAAAAAAAAAAAAAA)


def test_encode_byte_rejects_non_byte():
    with pytest.raises(ValueError):
        encode_byte(256)


@given(st.integers(0, 255), st.integers(0, 255))
def test_encode_byte_is_linear(a, b):
    ea, eb = encode_byte(a), encode_byte(b)
    assert encode_byte(a ^ b) == (ea[0] ^ eb[0], ea[1] ^ eb[1])


@given(st.integers(1, 255).filter(lambda value: value != 0x80))
def test_nontrivial_codewords_have_half_weight(message):
    low, high = encode_byte(message)
    assert bin(low).count("1") + bin(high).count("1") == 64


@pytest.mark.parametrize("params", [HQC128, HQC192])
def test_encode_layout(params):
    message = bytes(range(params.n1))
    words = reed_muller_encode(message, params)
    assert len(words) == params.vec_n1n2_size_64()
    copies = params.n2 // 128
    block = list(encode_byte(message[3])) * copies
    assert words[3 * 2 * copies:4 * 2 * copies] == block


@pytest.mark.parametrize("params", [HQC128, HQC192])
def test_round_trip_every_byte_value(params):
    message = bytes(i % 256 for i in range(params.n1))
    assert reed_muller_decode(reed_muller_encode(message, params), params) == message
    full = bytes(range(256))
    for start in range(0, 256, params.n1):
        chunk = full[start:start + params.n1].ljust(params.n1, b"\0")
        assert reed_muller_decode(reed_muller_encode(chunk, params), params) == chunk


@settings(max_examples=10, deadline=None)
@given(st.binary(min_size=HQC128.n1, max_size=HQC128.n1), st.integers(0, 2**32))
def test_decode_corrects_errors(message, seed):
    params = HQC128
    words = reed_muller_encode(message, params)
    rng = random.Random(seed)
    block_bits = params.n2
    for block in range(params.n1):
        for position in rng.sample(range(block_bits), 40):
            bit = block * block_bits + position
            words[bit // 64] ^= 1 << (bit % 64)
    assert reed_muller_decode(words, params) == message


def test_encode_rejects_wrong_length():
    with pytest.raises(ValueError):
        reed_muller_encode(b"abc", HQC128)


def test_decode_rejects_wrong_length():
    with pytest.raises(ValueError):
        reed_muller_decode([0] * 5, HQC128)