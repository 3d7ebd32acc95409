# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""Ed25519 detached signatures."""

import base64

import pytest

from truthlinked_auth.errors import KeyMaterialError
from truthlinked_auth.security.keypair import generate_keypair, sign_data, verify_data


def test_keypair_shape() -> None:
    pair = generate_keypair()
    public = base64.b64decode(pair.public_key)
    secret = base64.b64decode(pair.secret_key)
    assert len(public) == 32
    assert len(secret) == 64
    assert secret[32:] == public
    assert generate_keypair().public_key != pair.public_key


def test_sign_and_verify() -> None:
    pair = generate_keypair()
    sig = sign_data("witness payload", pair.secret_key)
    assert len(base64.b64decode(sig)) == 64
    assert verify_data("witness payload", sig, pair.public_key) is True
    assert verify_data(b"witness payload", sig, pair.public_key) is True


def test_ed25519_signatures_are_deterministic() -> None:
    pair = generate_keypair()
    assert sign_data("x", pair.secret_key) == sign_data("x", pair.secret_key)


def test_verify_rejects_tampering_and_wrong_key() -> None:
    pair = generate_keypair()
    other = generate_keypair()
    sig = sign_data("witness payload", pair.secret_key)
    assert verify_data("witness payloaD", sig, pair.public_key) is False
    assert verify_data("witness payload", sig, other.public_key) is False


@pytest.mark.parametrize(
    "signature,public_key",
    [("!!", None), ("QUJD", None), (None, "!!"), (None, "QUJD")],
)
def test_verify_malformed_inputs_false(signature, public_key) -> None:
    pair = generate_keypair()
    good_sig = sign_data("d", pair.secret_key)
    assert verify_data("d", signature or good_sig, public_key or pair.public_key) is False


def test_sign_with_malformed_secret_key() -> None:
    with pytest.raises(KeyMaterialError):
        sign_data("d", "not-a-key")
    with pytest.raises(KeyMaterialError):
        sign_data("d", base64.b64encode(b"short").decode())


def test_seed_and_full_secret_key_sign_the_same() -> None:
    pair = generate_keypair()
    full = base64.b64decode(pair.secret_key)
    seed_only = base64.b64encode(full[:32]).decode()
    sig = sign_data("x", seed_only)
    assert sig == sign_data("x", pair.secret_key)
    assert verify_data("x", sig, pair.public_key) is True


def test_full_secret_key_with_foreign_public_half_rejected() -> None:
    pair = generate_keypair()
    other = generate_keypair()
    seed = base64.b64decode(pair.secret_key)[:32]
    mixed = base64.b64encode(seed + base64.b64decode(other.public_key)).decode()
    with pytest.raises(KeyMaterialError):
        sign_data("x", mixed)


def test_secret_key_of_other_length_rejected() -> None:
    with pytest.raises(KeyMaterialError):
        sign_data("x", base64.b64encode(bytes(48)).decode())
