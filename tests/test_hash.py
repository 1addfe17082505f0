"""Fiat-Shamir challenge: determinism, order sensitivity, byte binding."""

import hashlib

import pytest

from elgamal_sigma import ORDER, Scalar, hash_challenge, shake128
from elgamal_sigma.hash import CHALLENGE_BYTES


@pytest.fixture
def parts(transcript):
    _, ciphertext, proof = transcript
    return [
        proof.t.to_bytes_compressed(),
        proof.a.to_bytes_compressed(),
        ciphertext.c1.to_bytes_compressed(),
        ciphertext.c2.to_bytes_compressed(),
    ]


def test_shake128_matches_concatenation():
    chunks = [b"alpha", b"", b"beta", b"\x00" * 33]
    expected = hashlib.shake_128(b"".join(chunks)).digest(CHALLENGE_BYTES)
    assert shake128(chunks) == expected
    assert len(shake128(chunks)) == 32


def test_shake128_custom_length():
    assert len(shake128([b"x"], length=64)) == 64
    assert shake128([b"x"], length=64)[:32] == shake128([b"x"])


def test_challenge_is_reduced_digest(parts):
    digest = hashlib.shake_128(b"".join(parts)).digest(32)
    e = hash_challenge(*parts)
    assert isinstance(e, Scalar)
    assert e.value == int.from_bytes(digest, "big") % ORDER
    assert 0 <= e.value < ORDER


def test_challenge_is_deterministic(parts):
    assert hash_challenge(*parts) == hash_challenge(*list(parts))


def test_challenge_depends_on_order(parts):
    t, a, c1, c2 = parts
    base = hash_challenge(t, a, c1, c2)
    assert hash_challenge(a, t, c1, c2) != base
    assert hash_challenge(t, a, c2, c1) != base
    assert hash_challenge(c1, c2, t, a) != base


@pytest.mark.parametrize("which", range(4))
def test_every_byte_flip_changes_challenge(parts, which):
    base = hash_challenge(*parts)
    for i in range(len(parts[which])):
        mutated = list(parts)
        buf = bytearray(mutated[which])
        buf[i] ^= 0x01
        mutated[which] = bytes(buf)
        assert hash_challenge(*mutated) != base, f"part {which}, byte {i}"
