"""Base58 Solana private key → keypair conversions."""

from keypair_tool.errors import (DecodeError, KeyLengthError, KeyMismatchError,
                                 KeypairError, WalletFileError)
from keypair_tool.keypair import (Keypair, decode_base58, derive, derive_from_seed,
                                  generate, keypair_from_bytes)

__all__ = [
    "Keypair",
    "derive",
    "derive_from_seed",
    "keypair_from_bytes",
    "decode_base58",
    "generate",
    "KeypairError",
    "DecodeError",
    "KeyLengthError",
    "KeyMismatchError",
    "WalletFileError",
]
