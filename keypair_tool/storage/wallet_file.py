# storage/wallet_file.py

import json
import logging
import os

from keypair_tool.config import WALLET_FILE_MODE
from keypair_tool.errors import WalletFileError
from keypair_tool.keypair import Keypair, keypair_from_bytes

logger = logging.getLogger(__name__)


def load_wallet_file(file_path: str) -> Keypair:
    """Read a solana-keygen JSON wallet file (array of 64 byte values)."""
    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise WalletFileError(f"{file_path} is not valid JSON: {e}") from e

    if not isinstance(data, list) or not all(
        isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= 255 for v in data
    ):
        raise WalletFileError(f"{file_path} must contain a JSON array of byte values")

    keypair = keypair_from_bytes(bytes(data))
    logger.info(f"📂 Loaded wallet {keypair.pubkey()} from {file_path}.")
    return keypair


def save_wallet_file(file_path: str, keypair: Keypair, overwrite: bool = False):
    if os.path.exists(file_path) and not overwrite:
        raise FileExistsError(f"Wallet file already exists at: {file_path}")

    # Owner-only, like solana-keygen; O_CREAT mode does not apply to an existing file
    fd = os.open(file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, WALLET_FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        os.chmod(file_path, WALLET_FILE_MODE)
        json.dump(keypair.to_json(), f, indent=2)
    logger.info(f"💾 Saved wallet {keypair.pubkey()} to {file_path}.")
