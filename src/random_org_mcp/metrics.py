# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client-side request metrics.

Simple in-process counters describing how the request pipeline behaves:
attempts, retries, failures by kind, and the quota last reported by the API.
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class ClientMetrics:
    """
    Counters maintained by RandomOrgClient.

    Counter increments happen on the event loop thread between awaits, so
    no locking is needed.

    Example:
        >>> metrics = ClientMetrics()
        >>> metrics.record_attempt("generateIntegers")
        >>> metrics.record_success(bits_left=99980, requests_left=999)
        >>> metrics.success_rate
        1.0
    """

    attempts: int = 0
    successes: int = 0
    retries: int = 0
    upstream_errors: int = 0
    transport_errors: int = 0
    validation_errors: int = 0
    exhausted: int = 0

    # Last quota reported by the API
    bits_left: int | None = None
    requests_left: int | None = None

    per_method_attempts: dict[str, int] = field(default_factory=dict, repr=False)

    def record_attempt(self, method: str) -> None:
        self.attempts += 1
        self.per_method_attempts[method] = self.per_method_attempts.get(method, 0) + 1

    def record_success(
        self, bits_left: int | None = None, requests_left: int | None = None
    ) -> None:
        self.successes += 1
        if bits_left is not None:
            self.bits_left = bits_left
        if requests_left is not None:
            self.requests_left = requests_left

    def record_retry(self) -> None:
        self.retries += 1

    def record_upstream_error(self) -> None:
        self.upstream_errors += 1

    def record_transport_error(self) -> None:
        self.transport_errors += 1

    def record_validation_error(self) -> None:
        self.validation_errors += 1

    def record_exhausted(self) -> None:
        self.exhausted += 1

    @property
    def success_rate(self) -> float:
        return self.successes / self.attempts if self.attempts > 0 else 0.0

    def snapshot(self) -> dict[str, Any]:
        """Return a plain dict copy suitable for logging or JSON output."""
        data = asdict(self)
        data["success_rate"] = self.success_rate
        return data


__all__ = ["ClientMetrics"]
