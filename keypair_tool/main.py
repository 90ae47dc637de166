# main.py

import argparse
import logging
import os
import sys

from keypair_tool.config import DEFAULT_WALLET_FILE, LOG_FORMAT, PRIVATE_KEY_ENV
from keypair_tool.errors import KeypairError, WalletFileError
from keypair_tool.key_loader.env_loader import get_private_key
from keypair_tool.keypair import Keypair, decode_base58, derive, derive_from_seed, generate
from keypair_tool.storage.wallet_file import load_wallet_file, save_wallet_file
from keypair_tool.util.utils import b58encode_str, format_byte_array, parse_byte_array

logger = logging.getLogger(__name__)


def _warn_secret_output():
    logger.warning("⚠️ Writing secret key material to stdout. Clear your terminal history afterwards.")


def _key_text(args) -> str:
    if args.key:
        return args.key.strip()
    return get_private_key()


def _load_keypair(args) -> Keypair:
    if not args.key and args.wallet_file:
        return load_wallet_file(args.wallet_file)

    key_text = _key_text(args)
    if getattr(args, "seed", False):
        return derive_from_seed(key_text)
    return derive(key_text)


def show(args):
    keypair = _load_keypair(args)

    # Public key in base58 format (this is the wallet address)
    print("Public Key:", keypair.pubkey())

    if args.hide_secret:
        return

    _warn_secret_output()
    print("Secret Key:", format_byte_array(keypair.secret_key))
    print("Full Keypair:", keypair)


def pubkey(args):
    keypair = _load_keypair(args)
    print("Public Key:", keypair.pubkey())


def to_bytes(args):
    wallet = decode_base58(_key_text(args))
    if args.hide_secret:
        logger.info(f"Decoded {len(wallet)} bytes; output hidden.")
        return

    print("Your wallet file is:")
    _warn_secret_output()
    print(format_byte_array(wallet))


def to_base58(args):
    raw = args.bytes
    if raw is None:
        raw = input("Input your private key as a wallet file byte array: ")

    try:
        wallet = parse_byte_array(raw)
    except ValueError as e:
        raise WalletFileError(f"Invalid byte array: {e}") from e

    if args.hide_secret:
        logger.info(f"Parsed {len(wallet)} bytes; output hidden.")
        return

    print("Your private key is:")
    _warn_secret_output()
    print(b58encode_str(wallet))


def keygen(args):
    file_path = args.out
    if os.path.exists(file_path) and not args.force:
        print(f"Wallet file already exists at: {file_path}")
        answer = input("Would you like to override it? (y/N): ")
        if answer.strip().lower() != "y":
            print(f"File at path `{file_path}` isn't empty; Choose another file path")
            sys.exit(1)

    keypair = generate()
    save_wallet_file(file_path, keypair, overwrite=True)

    print(f"You've generated a new Solana wallet: {keypair.pubkey()}")
    print(f"Saved to: {file_path}")

    if not args.hide_secret:
        print()
        print("To save your wallet somewhere, copy and paste the following into a JSON file:")
        _warn_secret_output()
        print(format_byte_array(keypair.secret_key))


def _add_key_options(parser: argparse.ArgumentParser, wallet_file: bool = True):
    parser.add_argument("--key", help=f"Base58 private key (default: ${PRIVATE_KEY_ENV})")
    if wallet_file:
        parser.add_argument("--wallet-file", help="solana-keygen JSON wallet file to read instead")


def _add_hide_secret(parser: argparse.ArgumentParser):
    # SUPPRESS keeps a flag given before the subcommand from being reset
    parser.add_argument("--hide-secret", action="store_true", default=argparse.SUPPRESS,
                        help="Do not print secret key material")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keypair-tool",
        description="Turn a base58 Solana private key into a keypair and print it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--hide-secret", action="store_true",
                        help="Do not print secret key material")
    parser.set_defaults(func=show, key=None, wallet_file=None, seed=False)

    subparsers = parser.add_subparsers(dest="command")

    show_parser = subparsers.add_parser("show", help="Print public key, secret key and full keypair")
    _add_key_options(show_parser)
    show_parser.add_argument("--seed", action="store_true",
                             help="Treat the key as a 32-byte seed instead of a 64-byte secret key")
    _add_hide_secret(show_parser)
    show_parser.set_defaults(func=show)

    pubkey_parser = subparsers.add_parser("pubkey", help="Print only the public key")
    _add_key_options(pubkey_parser)
    pubkey_parser.add_argument("--seed", action="store_true",
                               help="Treat the key as a 32-byte seed instead of a 64-byte secret key")
    _add_hide_secret(pubkey_parser)
    pubkey_parser.set_defaults(func=pubkey)

    to_bytes_parser = subparsers.add_parser("to-bytes", help="Decode a base58 private key into a wallet byte array")
    _add_key_options(to_bytes_parser, wallet_file=False)
    _add_hide_secret(to_bytes_parser)
    to_bytes_parser.set_defaults(func=to_bytes)

    to_base58_parser = subparsers.add_parser("to-base58", help="Encode a wallet byte array as a base58 private key")
    to_base58_parser.add_argument("--bytes", help="Byte array such as '[1, 2, 3]' (read from stdin if omitted)")
    _add_hide_secret(to_base58_parser)
    to_base58_parser.set_defaults(func=to_base58)

    keygen_parser = subparsers.add_parser("keygen", help="Generate a new keypair and save it as a wallet file")
    keygen_parser.add_argument("--out", default=DEFAULT_WALLET_FILE,
                               help=f"Wallet file path (default: {DEFAULT_WALLET_FILE})")
    keygen_parser.add_argument("--force", action="store_true", help="Overwrite an existing wallet file")
    _add_hide_secret(keygen_parser)
    keygen_parser.set_defaults(func=keygen)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if args.verbose else logging.INFO
    )

    try:
        args.func(args)
    except (KeypairError, RuntimeError, OSError) as e:
        logger.error(f"❌ {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
