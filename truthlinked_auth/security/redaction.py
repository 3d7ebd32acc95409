# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""Redact credentials from dicts, headers and bodies before they reach logs or audit."""

from __future__ import annotations

import re
from typing import Any, Iterable

REDACT_KEYS = frozenset(
    {
        "api_key",
        "secret",
        "password",
        "token",
        "authorization",
        "private_key",
        "secret_key",
        "signing_key",
        "signature",
        "license_key",
        "sso_token",
        "af_token",
        "credential",
        "cookie",
    }
)

# Header names are matched by substring, not equality.
SENSITIVE_HEADER_MARKERS = ("authorization", "cookie", "token", "signature", "licensekey")

# JSON string fields whose value is masked in logged bodies.
BODY_SECRET_FIELDS = ("sso_token", "af_token", "license_key")

_BEARER = "Bearer "


def _normalize(key: str) -> str:
    return re.sub(r"[-_\s]", "", key.lower())


def _redact_value(_: Any) -> str:
    return "[REDACTED]"


def _normalized_key_set(keys: frozenset[str]) -> set[str]:
    return {_normalize(x) for x in keys}


def redact_dict(
    d: dict[str, Any], key_subset: frozenset[str] | None = None
) -> dict[str, Any]:
    """Copy dict with sensitive keys replaced by [REDACTED]; case/dash/underscore-insensitive."""
    keys = key_subset or REDACT_KEYS
    return _redact_dict_impl(d, _normalized_key_set(keys))


def _redact_dict_impl(d: dict[str, Any], norm_set: set[str]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for k, v in d.items():
        if _normalize(str(k)) in norm_set:
            out[k] = _redact_value(v)
        elif isinstance(v, dict):
            out[k] = _redact_dict_impl(v, norm_set)
        elif isinstance(v, list):
            out[k] = [
                _redact_dict_impl(x, norm_set) if isinstance(x, dict) else x for x in v
            ]
        else:
            out[k] = v
    return out


def redact_credential(value: str) -> str:
    """
    Partial reveal for a credential-bearing value.

    8 characters or fewer -> ***. Bearer values keep the last 4 characters
    (the scheme prefix eats into the first 3), others keep first 3 and last 3.
    """
    if len(value) <= 8:
        return "***"
    if value.startswith(_BEARER):
        return f"{value[:3]}...{value[-4:]}"
    return f"{value[:3]}...{value[-3:]}"


def redact_headers(headers: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    """Copy of (name, value) pairs with credential-bearing header values redacted."""
    out = []
    for name, value in headers:
        norm = _normalize(name)
        if any(marker in norm for marker in SENSITIVE_HEADER_MARKERS):
            value = redact_credential(value)
        out.append((name, value))
    return out


def redact_body(body: bytes | str, max_size: int) -> str:
    """Loggable text for a request/response body; token fields masked as ***."""
    raw = body.encode("utf-8") if isinstance(body, str) else body
    if not raw:
        return ""
    if len(raw) > max_size:
        return f"<body too large: {len(raw)} bytes>"
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return f"<binary data: {len(raw)} bytes>"
    for field_name in BODY_SECRET_FIELDS:
        text = re.sub(
            rf'("{field_name}"\s*:\s*")(?:[^"\\]|\\.)*(")',
            r"\1***\2",
            text,
        )
    return text
