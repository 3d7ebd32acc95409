"""truthlinked_auth: request signing and credential lifecycle for Truthlinked clients."""

from truthlinked_auth.errors import (
    AuthError,
    CredentialDestroyedError,
    CredentialError,
    KeyMaterialError,
)
from truthlinked_auth.security import (
    Credential,
    RequestSigner,
    SignedRequest,
    constant_time_equal,
    content_hash,
    derive_signing_key,
    generate_nonce,
)
from truthlinked_auth.session import SIGNATURE_HEADER, TIMESTAMP_HEADER, AuthSession
from truthlinked_auth.request_log import LoggingConfig, RequestLogger, RequestTimer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AuthError",
    "CredentialDestroyedError",
    "CredentialError",
    "KeyMaterialError",
    "Credential",
    "RequestSigner",
    "SignedRequest",
    "constant_time_equal",
    "content_hash",
    "derive_signing_key",
    "generate_nonce",
    "AuthSession",
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
    "LoggingConfig",
    "RequestLogger",
    "RequestTimer",
]
