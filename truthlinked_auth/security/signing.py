# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""SigningProvider interface and RequestSigner; canonical METHOD/PATH/TIMESTAMP/BODY form.

The signature binds a timestamp but nothing here rejects stale or repeated
timestamps. Freshness windows and nonce tracking belong to the verifier.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, NamedTuple, Union

from truthlinked_auth.errors import CredentialDestroyedError
from truthlinked_auth.security.compare import constant_time_equal
from truthlinked_auth.security.credential import Credential
from truthlinked_auth.security.kdf import SIGNING_KEY_LABEL, derive_signing_key

logger = logging.getLogger(__name__)

# Absent (None), pre-serialized text (str), or pre-serialized payload (bytes).
Body = Union[str, bytes, None]

# Any u64 seconds value fits; bounds int() on untrusted header text.
MAX_TIMESTAMP_DIGITS = 20


class SignedRequest(NamedTuple):
    timestamp: int
    signature: str


def canonical_json(value: Any) -> str:
    """Deterministic JSON text for structured bodies: sorted keys, no whitespace."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def current_timestamp(clock: Callable[[], float] = time.time) -> int:
    """Whole seconds since epoch."""
    return int(clock())


def _body_bytes(body: Body) -> bytes:
    if body is None:
        return b""
    if isinstance(body, str):
        return body.encode("utf-8")
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    raise TypeError(
        f"body must be None, str or bytes, got {type(body).__name__}; "
        "serialize structured payloads with canonical_json() first"
    )


def _check_timestamp(timestamp: int) -> int:
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise TypeError(f"timestamp must be int, got {type(timestamp).__name__}")
    if timestamp < 0:
        raise ValueError("timestamp must be >= 0")
    return timestamp


def canonical_message(method: str, path: str, timestamp: int, body: Body = None) -> bytes:
    """UPPER(method)\\npath\\ntimestamp\\nbody as UTF-8 bytes; the only input to signing."""
    head = f"{method.upper()}\n{path}\n{_check_timestamp(timestamp)}\n"
    return head.encode("utf-8") + _body_bytes(body)


def _parse_timestamp(timestamp: int | str) -> int | None:
    """
    Timestamp from an int or its canonical decimal text; None if malformed.

    Text must be exactly what decimal(timestamp) produces: ASCII digits, no
    leading zeros, at most MAX_TIMESTAMP_DIGITS long.
    """
    if isinstance(timestamp, bool):
        return None
    if isinstance(timestamp, int):
        return timestamp if 0 <= timestamp < 10**MAX_TIMESTAMP_DIGITS else None
    if not isinstance(timestamp, str) or not 0 < len(timestamp) <= MAX_TIMESTAMP_DIGITS:
        return None
    if not (timestamp.isascii() and timestamp.isdigit()):
        return None
    if len(timestamp) > 1 and timestamp[0] == "0":
        return None
    return int(timestamp)


class SigningProvider(ABC):
    """Sign outgoing requests and check incoming ones."""

    @abstractmethod
    def sign(
        self,
        method: str,
        path: str,
        timestamp: int | None = None,
        body: Body = None,
    ) -> SignedRequest:
        """Return (timestamp, signature)."""
        ...

    @abstractmethod
    def verify(
        self,
        method: str,
        path: str,
        body: Body,
        signature: str,
        timestamp: int | str,
    ) -> bool:
        """True only if signature matches; malformed input is False, never an exception."""
        ...

    @abstractmethod
    def destroy(self) -> None:
        """Discard key material; idempotent."""
        ...


class RequestSigner(SigningProvider):
    """
    HMAC-SHA256 request signer holding one derived key.

    signature = base64(HMAC-SHA256(key, canonical_message(...))), standard
    alphabet with padding (44 characters).

    Single-owner: destroy() racing a sign() on another thread is not guarded.
    After destroy(), sign() and verify() raise CredentialDestroyedError.
    """

    def __init__(
        self,
        credential: Credential | str | bytes,
        label: bytes = SIGNING_KEY_LABEL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._key = derive_signing_key(credential, label)
        self._clock = clock
        self._destroyed = False

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def _digest(self, message: bytes) -> bytes:
        if self._destroyed:
            raise CredentialDestroyedError("request signer has been destroyed")
        return hmac.new(self._key, message, hashlib.sha256).digest()

    def sign(
        self,
        method: str,
        path: str,
        timestamp: int | None = None,
        body: Body = None,
    ) -> SignedRequest:
        if timestamp is None:
            timestamp = current_timestamp(self._clock)
        digest = self._digest(canonical_message(method, path, timestamp, body))
        return SignedRequest(timestamp, base64.b64encode(digest).decode("ascii"))

    def verify(
        self,
        method: str,
        path: str,
        body: Body,
        signature: str,
        timestamp: int | str,
    ) -> bool:
        if self._destroyed:
            raise CredentialDestroyedError("request signer has been destroyed")
        ts = _parse_timestamp(timestamp)
        if ts is None or not isinstance(signature, (str, bytes)):
            return False
        try:
            supplied = base64.b64decode(signature, validate=True)
            message = canonical_message(method, path, ts, body)
        except (binascii.Error, ValueError, TypeError, AttributeError):
            logger.debug("signature rejected: malformed input")
            return False
        return constant_time_equal(supplied, self._digest(message))

    def destroy(self) -> None:
        if self._destroyed:
            return
        for i in range(len(self._key)):
            self._key[i] = 0
        self._destroyed = True

    def __repr__(self) -> str:
        state = "destroyed" if self._destroyed else "active"
        return f"RequestSigner(<key hidden>, {state})"
