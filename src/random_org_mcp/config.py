# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Configuration for the RANDOM.ORG MCP server.

This module provides the immutable client configuration and the loader that
builds it from the process environment (optionally seeded from a .env file).
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.random.org/json-rpc/4/invoke"

API_KEY_HELP_URL = "https://api.random.org/api-keys/beta"


@dataclass(frozen=True)
class RandomOrgConfig:
    """
    Configuration for the RANDOM.ORG API client.

    Durations are expressed in milliseconds to match the environment
    variables they are loaded from; use the ``*_seconds`` properties when
    handing values to asyncio or httpx.
    """

    api_key: str
    """API key sent with every request."""

    base_url: str = DEFAULT_BASE_URL
    """JSON-RPC endpoint URL."""

    timeout_ms: int = 10000
    """Per-request timeout in milliseconds."""

    max_retries: int = 3
    """Retries after the first attempt (total attempts = max_retries + 1)."""

    retry_delay_ms: int = 1000
    """Base delay for exponential backoff in milliseconds."""

    max_retry_delay_ms: int | None = None
    """Optional ceiling for a single backoff delay. None leaves it uncapped."""

    rate_limit_requests_per_second: float = 1
    """Token refill rate."""

    rate_limit_burst_size: int = 5
    """Token bucket capacity."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_key:
            raise ConfigurationError(
                "RANDOM_ORG_API_KEY environment variable is required. "
                f"Get your API key from {API_KEY_HELP_URL}"
            )
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if self.timeout_ms <= 0:
            raise ConfigurationError("timeout_ms must be positive")
        if self.max_retries < 0:
            raise ConfigurationError("max_retries must be at least 0")
        if self.retry_delay_ms < 0:
            raise ConfigurationError("retry_delay_ms must be at least 0")
        if self.max_retry_delay_ms is not None and self.max_retry_delay_ms < 0:
            raise ConfigurationError("max_retry_delay_ms must be at least 0")
        if self.rate_limit_requests_per_second <= 0:
            raise ConfigurationError("rate_limit_requests_per_second must be positive")
        if self.rate_limit_burst_size < 1:
            raise ConfigurationError("rate_limit_burst_size must be at least 1")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    def retry_delay_seconds(self, attempt: int) -> float:
        """
        Backoff delay before the retry that follows ``attempt``.

        Args:
            attempt: Zero-based index of the attempt that just failed.

        Returns:
            ``retry_delay_ms * 2**attempt`` in seconds, capped by
            ``max_retry_delay_ms`` when set.
        """
        delay_ms = self.retry_delay_ms * (2**attempt)
        if self.max_retry_delay_ms is not None:
            delay_ms = min(delay_ms, self.max_retry_delay_ms)
        return delay_ms / 1000

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks
        return (
            f"RandomOrgConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout_ms={self.timeout_ms}, max_retries={self.max_retries}, "
            f"retry_delay_ms={self.retry_delay_ms}, "
            f"max_retry_delay_ms={self.max_retry_delay_ms}, "
            f"rate_limit_requests_per_second={self.rate_limit_requests_per_second}, "
            f"rate_limit_burst_size={self.rate_limit_burst_size})"
        )


def _int_setting(env: Mapping[str, str], name: str, default: int | None) -> int | None:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _float_setting(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def load_config(
    env: Mapping[str, str] | None = None,
    *,
    dotenv: bool = True,
) -> RandomOrgConfig:
    """
    Build a RandomOrgConfig from environment variables.

    Args:
        env: Mapping to read settings from. Defaults to ``os.environ``.
        dotenv: When reading ``os.environ``, load a ``.env`` file first.
            Existing environment variables are not overridden.

    Returns:
        A validated, immutable configuration.

    Raises:
        ConfigurationError: If the API key is missing or a value is malformed.
    """
    if env is None:
        if dotenv:
            load_dotenv()
        env = os.environ

    return RandomOrgConfig(
        api_key=env.get("RANDOM_ORG_API_KEY", "").strip(),
        base_url=env.get("RANDOM_ORG_BASE_URL") or DEFAULT_BASE_URL,
        timeout_ms=_int_setting(env, "REQUEST_TIMEOUT_MS", 10000),  # type: ignore[arg-type]
        max_retries=_int_setting(env, "MAX_RETRIES", 3),  # type: ignore[arg-type]
        retry_delay_ms=_int_setting(env, "RETRY_DELAY_MS", 1000),  # type: ignore[arg-type]
        max_retry_delay_ms=_int_setting(env, "MAX_RETRY_DELAY_MS", None),
        rate_limit_requests_per_second=_float_setting(
            env, "RATE_LIMIT_REQUESTS_PER_SECOND", 1
        ),
        rate_limit_burst_size=_int_setting(env, "RATE_LIMIT_BURST_SIZE", 5),  # type: ignore[arg-type]
    )


__all__ = [
    "DEFAULT_BASE_URL",
    "RandomOrgConfig",
    "load_config",
]
