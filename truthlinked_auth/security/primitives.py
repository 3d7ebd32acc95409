# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""Nonce generation and plain content hashing (no key involved)."""

from __future__ import annotations

import hashlib
import secrets

NONCE_BYTES = 32


def generate_nonce() -> str:
    """256-bit random nonce as 64 lowercase hex characters."""
    return secrets.token_hex(NONCE_BYTES)


def content_hash(data: str | bytes) -> str:
    """SHA-256 hex digest; text is hashed as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()
