import pytest

from elgamal_sigma import Params, Scalar, SeededRandomSource, prove


@pytest.fixture
def rng():
    """Fixed-seed randomness so every run sees the same transcripts."""
    return SeededRandomSource(seed=1337)


@pytest.fixture
def keypair(rng):
    """(params, x) with  h = x·G."""
    return Params.setup(rng)


@pytest.fixture
def params(keypair):
    return keypair[0]


@pytest.fixture
def secret(keypair):
    return keypair[1]


@pytest.fixture
def transcript(secret, params, rng):
    """A valid (commitment, ciphertext, proof) triple for ``secret``."""
    return prove(secret, params, rng)


@pytest.fixture
def other_secret(rng):
    return Scalar.random(rng)
