# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""derive_signing_key: determinism, one-way shape, label separation."""

import hashlib
import hmac

import pytest

from truthlinked_auth.errors import CredentialDestroyedError, CredentialError
from truthlinked_auth.security.credential import Credential
from truthlinked_auth.security.kdf import (
    SIGNING_KEY_LABEL,
    SIGNING_KEY_SIZE,
    derive_signing_key,
)


def test_deterministic() -> None:
    assert derive_signing_key("test_key") == derive_signing_key("test_key")


def test_label_is_hmac_key_credential_is_message() -> None:
    expected = hmac.new(SIGNING_KEY_LABEL, b"test_key", hashlib.sha256).digest()
    assert bytes(derive_signing_key("test_key")) == expected
    reversed_roles = hmac.new(b"test_key", SIGNING_KEY_LABEL, hashlib.sha256).digest()
    assert bytes(derive_signing_key("test_key")) != reversed_roles


def test_fixed_length_mutable_and_not_the_credential() -> None:
    secret = "k" * SIGNING_KEY_SIZE
    key = derive_signing_key(secret)
    assert isinstance(key, bytearray)
    assert len(key) == SIGNING_KEY_SIZE == 32
    assert bytes(key) != secret.encode()


def test_credential_handle_str_and_bytes_agree() -> None:
    handle = Credential("tl_free_secret123456789")
    a = derive_signing_key(handle)
    b = derive_signing_key("tl_free_secret123456789")
    c = derive_signing_key(b"tl_free_secret123456789")
    assert a == b == c


def test_each_call_returns_a_fresh_buffer() -> None:
    a = derive_signing_key("test_key")
    b = derive_signing_key("test_key")
    a[0] ^= 0xFF
    assert a != b


def test_different_label_gives_different_key() -> None:
    assert derive_signing_key("test_key") != derive_signing_key(
        "test_key", label=b"truthlinked-request-signing-v2"
    )


def test_different_credentials_give_different_keys() -> None:
    assert derive_signing_key("key1") != derive_signing_key("key2")


def test_empty_credential_rejected() -> None:
    with pytest.raises(CredentialError):
        derive_signing_key("")
    with pytest.raises(CredentialError):
        derive_signing_key(b"")


def test_destroyed_credential_rejected() -> None:
    handle = Credential("test_key")
    handle.destroy()
    with pytest.raises(CredentialDestroyedError):
        derive_signing_key(handle)


def test_wrong_type_rejected() -> None:
    with pytest.raises(TypeError):
        derive_signing_key(12345)


def test_bytearray_credential_is_not_mutated() -> None:
    raw = bytearray(b"test_key")
    assert derive_signing_key(raw) == derive_signing_key("test_key")
    assert raw == bytearray(b"test_key")
