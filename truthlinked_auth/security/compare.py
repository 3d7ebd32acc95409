# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""Constant-time equality for signatures, digests and tokens."""

from __future__ import annotations

import hmac
from typing import Union

BytesOrText = Union[bytes, bytearray, memoryview, str]


def _as_bytes(value: BytesOrText) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def constant_time_equal(a: BytesOrText, b: BytesOrText) -> bool:
    """
    True if a and b hold the same bytes.

    Length is checked first and may return early (lengths are not secret).
    For equal lengths every position is examined; compare_digest ORs the
    byte differences together instead of stopping at the first mismatch.
    """
    left = _as_bytes(a)
    right = _as_bytes(b)
    if len(left) != len(right):
        return False
    return hmac.compare_digest(left, right)
