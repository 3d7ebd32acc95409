"""Security: credential, key derivation, signing, comparison, redaction, audit."""

from truthlinked_auth.security.compare import constant_time_equal
from truthlinked_auth.security.credential import Credential
from truthlinked_auth.security.kdf import SIGNING_KEY_LABEL, SIGNING_KEY_SIZE, derive_signing_key
from truthlinked_auth.security.signing import (
    RequestSigner,
    SignedRequest,
    SigningProvider,
    canonical_json,
    canonical_message,
    current_timestamp,
)
from truthlinked_auth.security.primitives import content_hash, generate_nonce
from truthlinked_auth.security.keypair import KeyPair, generate_keypair, sign_data, verify_data
from truthlinked_auth.security.secrets import SecretsProvider, EnvSecretsProvider, load_credential
from truthlinked_auth.security.redaction import (
    redact_body,
    redact_credential,
    redact_dict,
    redact_headers,
)
from truthlinked_auth.security.audit import AuditLogger

__all__ = [
    "constant_time_equal",
    "Credential",
    "SIGNING_KEY_LABEL",
    "SIGNING_KEY_SIZE",
    "derive_signing_key",
    "RequestSigner",
    "SignedRequest",
    "SigningProvider",
    "canonical_json",
    "canonical_message",
    "current_timestamp",
    "content_hash",
    "generate_nonce",
    "KeyPair",
    "generate_keypair",
    "sign_data",
    "verify_data",
    "SecretsProvider",
    "EnvSecretsProvider",
    "load_credential",
    "redact_body",
    "redact_credential",
    "redact_dict",
    "redact_headers",
    "AuditLogger",
]
