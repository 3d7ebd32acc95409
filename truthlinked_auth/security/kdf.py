# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""Signing-key derivation: HMAC-SHA256 keyed by a protocol-version label."""

from __future__ import annotations

import hashlib
import hmac

from truthlinked_auth.errors import CredentialError
from truthlinked_auth.security.credential import Credential

# Domain-separation label. Used only as the HMAC key here; never sent on the wire.
SIGNING_KEY_LABEL = b"truthlinked-request-signing-v1"
SIGNING_KEY_SIZE = hashlib.sha256().digest_size


def _credential_view(credential: Credential | str | bytes | bytearray) -> memoryview:
    """Buffer view of the credential; Credential and bytearray input are not copied."""
    if isinstance(credential, Credential):
        return credential.key_material()
    if isinstance(credential, str):
        raw = credential.encode("utf-8")
    elif isinstance(credential, (bytes, bytearray)):
        raw = credential
    else:
        raise TypeError(
            f"credential must be Credential, str or bytes, got {type(credential).__name__}"
        )
    if not raw:
        raise CredentialError("credential must not be empty")
    return memoryview(raw)


def derive_signing_key(
    credential: Credential | str | bytes | bytearray,
    label: bytes = SIGNING_KEY_LABEL,
) -> bytearray:
    """
    Derive the 32-byte request-signing key for a credential.

    The label is the HMAC key and the credential is the message, so each
    label (protocol version) yields keys that do not interchange with any
    other version's, even for the same credential.

    Returns a new bytearray owned by the caller, who is expected to zero it.
    """
    if not label:
        raise ValueError("label must not be empty")
    with _credential_view(credential) as view:
        mac = hmac.new(label, view, hashlib.sha256)
    return bytearray(mac.digest())
