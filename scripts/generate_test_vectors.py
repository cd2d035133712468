#!/usr/bin/env python3
"""
Generate cross-platform pairseal test vectors.
Python is the source of truth.

Usage:
    python scripts/generate_test_vectors.py > vectors.json
"""
import json
import sys
from pathlib import Path

# Add repo root to path for imports
repo_dir = Path(__file__).parent.parent
sys.path.insert(0, str(repo_dir))

from pairseal.crypto.cipher import XChaCha20SuiteV1
from pairseal.crypto.primitives import get_public_key
from pairseal.crypto.shared_secret import derive_shared_secret, shared_secret_scope
from pairseal.schemas.payload import dump_payload


def scalar_key(n: int) -> bytes:
    return n.to_bytes(32, "big")


# Small scalars give keys whose public points (1G, 2G, 3G) are well known
KEY_PAIRS = [
    ("1G and 2G", scalar_key(1), scalar_key(2)),
    ("2G and 3G", scalar_key(2), scalar_key(3)),
    ("random-looking scalars", bytes.fromhex("aa" * 32), bytes.fromhex("bb" * 32)),
]

MESSAGES = [
    ("Empty message", ""),
    ("ASCII", "Hello, World!"),
    ("Multi-byte UTF-8", "héllo wörld 🔐"),
]


def generate_vectors():
    vectors = {
        "version": "1.0",
        "description": "pairseal cross-platform test vectors",
        "shared_secret": [],
        "encryption_v1": [],
    }

    for description, sec1, sec2 in KEY_PAIRS:
        vectors["shared_secret"].append({
            "description": description,
            "sec1_hex": sec1.hex(),
            "pub2_hex": get_public_key(sec2).hex(),
            "expected_shared_hex": derive_shared_secret(sec1, get_public_key(sec2)).hex(),
        })

    suite = XChaCha20SuiteV1()
    sec1, sec2 = scalar_key(1), scalar_key(2)
    for index, (description, message) in enumerate(MESSAGES):
        nonce = bytes([index + 1]) * 24
        with shared_secret_scope(sec1, get_public_key(sec2)) as secret:
            payload = suite.seal_with_nonce(secret, nonce, message.encode("utf-8"))
        vectors["encryption_v1"].append({
            "description": description,
            "sec1_hex": sec1.hex(),
            "pub2_hex": get_public_key(sec2).hex(),
            "nonce_hex": nonce.hex(),
            "plaintext": message,
            "payload": dump_payload(payload),
        })

    return vectors


if __name__ == "__main__":
    print(json.dumps(generate_vectors(), indent=2, ensure_ascii=False))
