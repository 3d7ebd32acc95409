# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""Credential handle: owns the raw license key, redacts it, zeroes it on destroy()."""

from __future__ import annotations

from truthlinked_auth.errors import CredentialDestroyedError, CredentialError

PLACEHOLDER_CHAR = "\0"
REDACTED_SHORT = "***"
_REVEAL = 3
_MIN_REVEAL_LEN = 8


def redact_secret(text: str) -> str:
    """<first 3>...<last 3> for secrets longer than 8 characters, else ***."""
    if len(text) > _MIN_REVEAL_LEN:
        return f"{text[:_REVEAL]}...{text[-_REVEAL:]}"
    return REDACTED_SHORT


class Credential:
    """
    Raw secret held in a mutable bytearray so destroy() can overwrite it in place.

    str()/repr()/format() always go through redacted(); as_string() is the only
    way to the raw value and is meant for signing/transport, never for logs.
    Active -> Destroyed is one-way. After destroy(), as_string() returns a
    same-length run of NUL characters; key derivation from it raises.
    """

    __slots__ = ("_buf", "_length", "_destroyed")

    def __init__(self, secret: str | bytes | bytearray) -> None:
        if isinstance(secret, str):
            text = secret
        elif isinstance(secret, (bytes, bytearray)):
            try:
                text = bytes(secret).decode("utf-8")
            except UnicodeDecodeError:
                raise CredentialError("credential bytes must be valid UTF-8") from None
        else:
            raise TypeError(
                f"credential must be str or bytes, got {type(secret).__name__}"
            )
        if not text:
            raise CredentialError("credential must not be empty")
        self._buf = bytearray(text.encode("utf-8"))
        self._length = len(text)
        self._destroyed = False

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def __len__(self) -> int:
        return self._length

    def as_string(self) -> str:
        """Raw secret (placeholder after destroy). Never log or format this value."""
        if self._destroyed:
            return PLACEHOLDER_CHAR * self._length
        return self._buf.decode("utf-8")

    def as_bytes(self) -> bytes:
        """UTF-8 form of as_string()."""
        return self.as_string().encode("utf-8")

    def key_material(self) -> memoryview:
        """
        Read-only view of the secret buffer for key derivation; no copy is made.

        Raises once destroyed so zeros are never signed with. Release the view
        (or use it as a context manager) before the credential goes away.
        """
        if self._destroyed:
            raise CredentialDestroyedError("credential has been destroyed")
        return memoryview(self._buf).toreadonly()

    def redacted(self) -> str:
        if self._destroyed:
            return REDACTED_SHORT
        return redact_secret(self._buf.decode("utf-8"))

    def destroy(self) -> None:
        """Zero the buffer and mark destroyed. Safe to call more than once."""
        if self._destroyed:
            return
        for i in range(len(self._buf)):
            self._buf[i] = 0
        self._destroyed = True

    def __str__(self) -> str:
        return self.redacted()

    def __repr__(self) -> str:
        state = "destroyed" if self._destroyed else "active"
        return f"Credential({self.redacted()!r}, {state})"

    def __format__(self, spec: str) -> str:
        return format(self.redacted(), spec)

    def __reduce__(self):
        raise TypeError("Credential cannot be pickled")
