# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""AuthSession: one Credential + one RequestSigner per client session, destroyed together."""

from __future__ import annotations

import logging
import time
from typing import Callable

from truthlinked_auth.security.audit import AuditLogger
from truthlinked_auth.security.credential import Credential
from truthlinked_auth.security.secrets import (
    EnvSecretsProvider,
    SecretsProvider,
    load_credential,
)
from truthlinked_auth.security.signing import Body, RequestSigner, SignedRequest

logger = logging.getLogger(__name__)

TIMESTAMP_HEADER = "X-Timestamp"
SIGNATURE_HEADER = "X-Signature"
ENV_PREFIX = "TRUTHLINKED_"


class AuthSession:
    """
    Owns the credential handle and the request signer for one logical client.

    The signer derives its key from the raw value at construction; after that
    the two buffers are independent and destroy() zeroes both. Use as a
    context manager so teardown also runs on failure paths.
    """

    def __init__(
        self,
        credential: Credential | str,
        audit: AuditLogger | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.credential = (
            credential if isinstance(credential, Credential) else Credential(credential)
        )
        self.signer = RequestSigner(self.credential, clock=clock)
        self._audit = audit
        self._closed = False
        logger.debug("auth session opened for %s", self.credential)
        self._record("session.created", {"credential_hint": self.credential.redacted()})

    @classmethod
    def from_env(
        cls,
        provider: SecretsProvider | None = None,
        audit: AuditLogger | None = None,
    ) -> "AuthSession":
        """Session for TRUTHLINKED_LICENSE_KEY (or whatever provider supplies)."""
        provider = provider or EnvSecretsProvider(prefix=ENV_PREFIX)
        return cls(load_credential(provider), audit=audit)

    @property
    def destroyed(self) -> bool:
        return self._closed

    def _record(self, event_type: str, payload: dict) -> None:
        if self._audit is not None:
            self._audit.log(event_type, payload)

    def sign(
        self,
        method: str,
        path: str,
        timestamp: int | None = None,
        body: Body = None,
    ) -> SignedRequest:
        return self.signer.sign(method, path, timestamp, body)

    def verify(
        self,
        method: str,
        path: str,
        body: Body,
        signature: str,
        timestamp: int | str,
    ) -> bool:
        ok = self.signer.verify(method, path, body, signature, timestamp)
        if not ok:
            logger.debug("signature rejected for %s %s", method, path)
            self._record("signature.rejected", {"method": method, "path": path})
        return ok

    def signature_headers(
        self,
        method: str,
        path: str,
        timestamp: int | None = None,
        body: Body = None,
    ) -> dict[str, str]:
        """Timestamp and signature as header values; the transport decides where they go."""
        signed = self.sign(method, path, timestamp, body)
        return {
            TIMESTAMP_HEADER: str(signed.timestamp),
            SIGNATURE_HEADER: signed.signature,
        }

    def destroy(self) -> None:
        """Zero credential and signing key independently. Idempotent."""
        if self._closed:
            return
        self.credential.destroy()
        self.signer.destroy()
        self._closed = True
        logger.debug("auth session destroyed")
        self._record("session.destroyed", {})

    def __enter__(self) -> "AuthSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.destroy()

    def __repr__(self) -> str:
        return f"AuthSession(credential={self.credential.redacted()!r})"
