# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""Security audit: write to <run_dir>/security_audit.jsonl; payloads redacted before writing."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any

from truthlinked_auth.security.redaction import redact_dict


class AuditLogger:
    """Append audit events (redacted) to security_audit.jsonl."""

    def __init__(self, run_dir: Path):
        self.run_dir = Path(run_dir)
        self.run_dir.mkdir(parents=True, exist_ok=True)
        self.path = self.run_dir / "security_audit.jsonl"
        self._file = open(self.path, "a", encoding="utf-8")

    def log(self, event_type: str, payload: dict[str, Any] | None = None) -> None:
        """Write one audit line."""
        record = {"event": event_type, "ts": int(time.time()), **redact_dict(payload or {})}
        self._file.write(json.dumps(record, default=str) + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
