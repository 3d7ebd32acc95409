# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""Detached Ed25519 signatures with base64 keys, for data signed outside request auth."""

from __future__ import annotations

import base64
import binascii
import hmac
from typing import NamedTuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from truthlinked_auth.errors import KeyMaterialError

_RAW = serialization.Encoding.Raw
SEED_SIZE = 32
SECRET_KEY_SIZE = 64


class KeyPair(NamedTuple):
    public_key: str
    secret_key: str


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _to_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _public_bytes(private_key: Ed25519PrivateKey) -> bytes:
    return private_key.public_key().public_bytes(_RAW, serialization.PublicFormat.Raw)


def generate_keypair() -> KeyPair:
    """
    New Ed25519 key pair, both halves base64.

    public_key is the 32-byte raw key. secret_key is the 64-byte form
    (32-byte seed followed by the public key), the same layout NaCl and the
    JavaScript SDK use, so keys move between the two unchanged.
    """
    private_key = Ed25519PrivateKey.generate()
    seed = private_key.private_bytes(
        _RAW, serialization.PrivateFormat.Raw, serialization.NoEncryption()
    )
    public = _public_bytes(private_key)
    return KeyPair(public_key=_b64(public), secret_key=_b64(seed + public))


def _load_private(secret_key: str) -> Ed25519PrivateKey:
    """Private key from a base64 32-byte seed or 64-byte seed+public key."""
    try:
        raw = base64.b64decode(secret_key, validate=True)
    except (binascii.Error, ValueError, TypeError):
        raise KeyMaterialError("secret key is not valid base64") from None
    if len(raw) not in (SEED_SIZE, SECRET_KEY_SIZE):
        raise KeyMaterialError(
            f"secret key must be {SEED_SIZE} or {SECRET_KEY_SIZE} bytes, got {len(raw)}"
        )
    private_key = Ed25519PrivateKey.from_private_bytes(raw[:SEED_SIZE])
    if len(raw) == SECRET_KEY_SIZE and not hmac.compare_digest(
        raw[SEED_SIZE:], _public_bytes(private_key)
    ):
        raise KeyMaterialError("secret key public half does not match its seed")
    return private_key


def sign_data(data: str | bytes, secret_key: str) -> str:
    """Base64 detached signature over data (text signed as UTF-8)."""
    signature = _load_private(secret_key).sign(_to_bytes(data))
    return _b64(signature)


def verify_data(data: str | bytes, signature: str, public_key: str) -> bool:
    """True if signature is valid for data under public_key; anything malformed is False."""
    try:
        key = Ed25519PublicKey.from_public_bytes(base64.b64decode(public_key, validate=True))
        key.verify(base64.b64decode(signature, validate=True), _to_bytes(data))
    except (InvalidSignature, binascii.Error, ValueError, TypeError):
        return False
    return True
