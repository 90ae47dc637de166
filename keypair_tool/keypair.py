# keypair.py

import logging
from dataclasses import dataclass
from typing import List

import base58
from solders.keypair import Keypair as SoldersKeypair  # type: ignore

from keypair_tool.config import SECRET_KEY_LENGTH, SEED_LENGTH
from keypair_tool.errors import DecodeError, KeyLengthError, KeyMismatchError
from keypair_tool.util.utils import b58encode_str, format_byte_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Keypair:
    """Ed25519 key material: 32-byte public key and 64-byte secret key (seed + pubkey)."""

    public_key: bytes
    secret_key: bytes

    def __post_init__(self):
        if len(self.secret_key) != SECRET_KEY_LENGTH:
            raise KeyLengthError(SECRET_KEY_LENGTH, len(self.secret_key))
        if self.secret_key[SEED_LENGTH:] != self.public_key:
            raise KeyMismatchError("Public key is not the public half of the secret key")

    @property
    def seed(self) -> bytes:
        return self.secret_key[:SEED_LENGTH]

    def pubkey(self) -> str:
        return b58encode_str(self.public_key)

    def to_bytes(self) -> bytes:
        return self.secret_key

    def to_base58(self) -> str:
        return b58encode_str(self.secret_key)

    def to_json(self) -> List[int]:
        return list(self.secret_key)

    def __str__(self) -> str:
        return (
            f"Keypair(public_key={self.pubkey()}, "
            f"secret_key={format_byte_array(self.secret_key)})"
        )

    def __repr__(self) -> str:
        # Keep secret bytes out of tracebacks and log records
        return f"Keypair(public_key={self.pubkey()})"


def decode_base58(encoded: str) -> bytes:
    try:
        return base58.b58decode(encoded)
    except ValueError as e:
        raise DecodeError(f"Invalid base58 key: {e}") from e


def _from_solders(kp: SoldersKeypair) -> Keypair:
    secret_key = bytes(kp)
    return Keypair(public_key=secret_key[SEED_LENGTH:], secret_key=secret_key)


def keypair_from_bytes(raw: bytes) -> Keypair:
    """
    Build a keypair from a 64-byte secret key.

    The public key is re-derived from the seed half; the input is rejected when
    its public half does not match.
    """
    if len(raw) != SECRET_KEY_LENGTH:
        raise KeyLengthError(SECRET_KEY_LENGTH, len(raw))

    keypair = _from_solders(SoldersKeypair.from_seed(bytes(raw[:SEED_LENGTH])))
    if keypair.public_key != bytes(raw[SEED_LENGTH:]):
        raise KeyMismatchError(
            f"Public key half does not match the seed (derived {keypair.pubkey()}, "
            f"found {b58encode_str(bytes(raw[SEED_LENGTH:]))})"
        )
    return keypair


def derive(encoded: str) -> Keypair:
    """Decode a base58 private key (64-byte secret key) into a Keypair."""
    keypair = keypair_from_bytes(decode_base58(encoded))
    logger.debug(f"🔑 Derived keypair for {keypair.pubkey()}")
    return keypair


def derive_from_seed(encoded: str) -> Keypair:
    """Decode a base58 32-byte seed, as exported by some wallets, into a Keypair."""
    seed = decode_base58(encoded)
    if len(seed) != SEED_LENGTH:
        raise KeyLengthError(SEED_LENGTH, len(seed))

    keypair = _from_solders(SoldersKeypair.from_seed(seed))
    logger.debug(f"🔑 Derived keypair for {keypair.pubkey()} from seed")
    return keypair


def generate() -> Keypair:
    keypair = _from_solders(SoldersKeypair())
    logger.info(f"✅ Generated new keypair {keypair.pubkey()}")
    return keypair
