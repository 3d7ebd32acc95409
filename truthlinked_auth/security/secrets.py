# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""Secrets provider: env-based. No secrets in code or logs."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

from truthlinked_auth.errors import CredentialError
from truthlinked_auth.security.credential import Credential

LICENSE_KEY = "license_key"


class SecretsProvider(ABC):
    """Abstract provider for secrets (license keys, tokens). Never log values."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return secret for key or None if not set."""
        ...

    def describe(self, key: str) -> str:
        """Where key is looked up, for error messages."""
        return key


class EnvSecretsProvider(SecretsProvider):
    """Read secrets from environment variables (license_key -> os.environ['PREFIX_LICENSE_KEY'])."""

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    def _env_key(self, key: str) -> str:
        return f"{self.prefix}{key}".replace(".", "_").upper()

    def get(self, key: str) -> str | None:
        return os.environ.get(self._env_key(key))

    def describe(self, key: str) -> str:
        return f"environment variable {self._env_key(key)}"


def load_credential(provider: SecretsProvider, key: str = LICENSE_KEY) -> Credential:
    """Credential for key; missing or blank raises CredentialError (names the source, not the value)."""
    value = provider.get(key)
    if value is None or not value.strip():
        raise CredentialError(f"no credential found in {provider.describe(key)}")
    return Credential(value.strip())
