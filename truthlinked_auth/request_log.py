# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""Request/response logging for transports; headers and bodies are redacted first."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Sequence

from truthlinked_auth.security.redaction import redact_body, redact_headers

Headers = Sequence[tuple[str, str]]


@dataclass
class LoggingConfig:
    """
    What to log and at which level.

    Headers and bodies are only attached at DEBUG; INFO and above log
    method/url/status/timing only.
    """

    log_requests: bool = True
    log_responses: bool = True
    log_errors: bool = True
    log_timing: bool = True
    max_body_size: int = 1024
    success_level: int = logging.DEBUG
    error_level: int = logging.ERROR

    @classmethod
    def production(cls) -> "LoggingConfig":
        """Errors and timing only."""
        return cls(log_requests=False, log_responses=False, max_body_size=0)

    @classmethod
    def development(cls) -> "LoggingConfig":
        return cls(max_body_size=4096, success_level=logging.INFO)

    @classmethod
    def none(cls) -> "LoggingConfig":
        return cls(
            log_requests=False,
            log_responses=False,
            log_errors=False,
            log_timing=False,
            max_body_size=0,
        )


class RequestTimer:
    """Monotonic stopwatch started at construction."""

    def __init__(self) -> None:
        self._start = time.monotonic()

    def elapsed(self) -> float:
        return time.monotonic() - self._start

    def elapsed_ms(self) -> float:
        return self.elapsed() * 1000.0


class RequestLogger:
    """Log outgoing requests, responses and failures without leaking credentials."""

    def __init__(self, config: LoggingConfig | None = None, logger: logging.Logger | None = None):
        self.config = config or LoggingConfig()
        self.logger = logger or logging.getLogger(__name__)

    def _timing(self, elapsed: float) -> str:
        return f" duration_ms={elapsed * 1000.0:.0f}" if self.config.log_timing else ""

    def log_request(self, method: str, url: str, headers: Headers = (), body: bytes | str = b"") -> None:
        if not self.config.log_requests:
            return
        level = self.config.success_level
        if level <= logging.DEBUG:
            self.logger.log(
                level,
                "Sending request method=%s url=%s headers=%s body=%s",
                method,
                url,
                redact_headers(headers),
                redact_body(body, self.config.max_body_size),
            )
        else:
            self.logger.log(level, "Sending request method=%s url=%s", method, url)

    def log_response(
        self,
        status: int,
        headers: Headers = (),
        body: bytes | str = b"",
        elapsed: float = 0.0,
    ) -> None:
        if not self.config.log_responses:
            return
        level = self.config.error_level if status >= 400 else self.config.success_level
        timing = self._timing(elapsed)
        if level <= logging.DEBUG:
            self.logger.log(
                level,
                "Received response status=%s%s headers=%s body=%s",
                status,
                timing,
                redact_headers(headers),
                redact_body(body, self.config.max_body_size),
            )
        else:
            self.logger.log(level, "Received response status=%s%s", status, timing)

    def log_error(self, method: str, url: str, error: str, elapsed: float = 0.0) -> None:
        if not self.config.log_errors:
            return
        self.logger.log(
            self.config.error_level,
            "Request failed method=%s url=%s error=%s%s",
            method,
            url,
            error,
            self._timing(elapsed),
        )
