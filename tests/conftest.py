import pytest
from base58 import b58encode
from solders.keypair import Keypair as SoldersKeypair  # type: ignore


@pytest.fixture
def solders_keypair():
    return SoldersKeypair.from_seed(bytes(range(32)))


@pytest.fixture
def secret_bytes(solders_keypair):
    return bytes(solders_keypair)


@pytest.fixture
def encoded_key(secret_bytes):
    return b58encode(secret_bytes).decode("ascii")
