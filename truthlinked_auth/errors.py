# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""Errors raised by truthlinked_auth. Messages never carry secret values."""

from __future__ import annotations


class AuthError(Exception):
    """Base for all truthlinked_auth errors."""


class CredentialError(AuthError, ValueError):
    """Credential is missing, empty or not usable as key material."""


class CredentialDestroyedError(AuthError, RuntimeError):
    """Key material was used after destroy(); fail fast instead of signing with zeros."""


class KeyMaterialError(AuthError, ValueError):
    """Ed25519 key text could not be decoded into a key."""
