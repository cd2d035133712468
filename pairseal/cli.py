"""
Command-line front end.

Usage:
    # New keypair (JSON with hex keys)
    pairseal keygen

    # Public key for a private key
    pairseal pubkey <private_key_hex>

    # Encrypt (message from argument or stdin)
    pairseal encrypt --private-key <hex> --public-key <hex> "hello"

    # Decrypt (payload from argument or stdin)
    pairseal decrypt --private-key <hex> --public-key <hex> '{"ciphertext":...}'
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from pairseal.config import configure_logging, normalize_log_level
from pairseal.crypto import PairsealError, decrypt, encrypt, generate_keypair, get_public_key

logger = logging.getLogger(__name__)


def _read_input(value: Optional[str]) -> str:
    if value is not None:
        return value
    text = sys.stdin.read()
    # Drop only the newline a shell pipe appends
    return text[:-1] if text.endswith("\n") else text


def _log_level(value: str) -> str:
    try:
        return normalize_log_level(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def cmd_keygen(args: argparse.Namespace) -> str:
    keypair = generate_keypair()
    return json.dumps(
        {"private_key": keypair.private_key.hex(), "public_key": keypair.public_key.hex()},
        indent=2,
    )


def cmd_pubkey(args: argparse.Namespace) -> str:
    return get_public_key(args.private_key).hex()


def cmd_encrypt(args: argparse.Namespace) -> str:
    return encrypt(args.private_key, args.public_key, _read_input(args.message), version=args.version)


def cmd_decrypt(args: argparse.Namespace) -> str:
    return decrypt(args.private_key, args.public_key, _read_input(args.payload))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pairseal", description="Encrypt text between two secp256k1 keypairs")
    parser.add_argument("--log-level", type=_log_level, default=None, help="Override PAIRSEAL_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    keygen = subparsers.add_parser("keygen", help="Generate a new keypair")
    keygen.set_defaults(handler=cmd_keygen)

    pubkey = subparsers.add_parser("pubkey", help="Print the compressed public key for a private key")
    pubkey.add_argument("private_key", help="Private key (hex)")
    pubkey.set_defaults(handler=cmd_pubkey)

    enc = subparsers.add_parser("encrypt", help="Encrypt a message for a peer")
    enc.add_argument("--private-key", required=True, help="Your private key (hex)")
    enc.add_argument("--public-key", required=True, help="Recipient's public key (hex)")
    enc.add_argument("--version", type=int, default=None, help="Payload version (default: PAIRSEAL_DEFAULT_VERSION)")
    enc.add_argument("message", nargs="?", help="Message text (default: read stdin)")
    enc.set_defaults(handler=cmd_encrypt)

    dec = subparsers.add_parser("decrypt", help="Decrypt a payload from a peer")
    dec.add_argument("--private-key", required=True, help="Your private key (hex)")
    dec.add_argument("--public-key", required=True, help="Sender's public key (hex)")
    dec.add_argument("payload", nargs="?", help="Payload JSON (default: read stdin)")
    dec.set_defaults(handler=cmd_decrypt)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        output = args.handler(args)
    except PairsealError as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
