# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the RANDOM.ORG MCP server.

This module defines the exception hierarchy used throughout the package.
All exceptions inherit from RandomOrgMCPError, making it easy to catch
every error raised by the request pipeline with a single except clause.

Only UpstreamError and TransportError are considered transient and are
retried by the client. Everything else fails the call immediately.
"""

from typing import Any


class RandomOrgMCPError(Exception):
    """Base exception for all RANDOM.ORG MCP errors.

    Example:
        try:
            await client.generate_integers(params)
        except RandomOrgMCPError as e:
            logger.error(f"Generation failed: {e}")
    """

    pass


class ConfigurationError(RandomOrgMCPError):
    """Raised when configuration is invalid or incomplete.

    Typically raised at startup when RANDOM_ORG_API_KEY is missing or a
    numeric setting cannot be parsed. The CLI turns this into a non-zero
    exit status.
    """

    pass


class ParameterValidationError(RandomOrgMCPError, ValueError):
    """Raised when generation parameters are outside the allowed bounds.

    Validation runs before any network interaction, so this error always
    means no request was sent and no retry took place.

    Attributes:
        field: Name of the offending parameter, if known.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class UpstreamError(RandomOrgMCPError):
    """Raised when the API answers with a JSON-RPC error descriptor.

    Attributes:
        code: Numeric error code reported by the API.
        api_message: The raw message reported by the API.
        data: Optional structured error data.
    """

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(f"Random.org API Error: {message} (Code: {code})")
        self.code = code
        self.api_message = message
        self.data = data


class TransportError(RandomOrgMCPError):
    """Raised when a request could not be completed at the HTTP level.

    Covers timeouts, connection failures, non-2xx status codes and bodies
    that are not valid JSON-RPC responses.
    """

    pass


class RetryExhaustedError(RandomOrgMCPError):
    """Raised when every attempt of a request has failed.

    The message names the configured retry count and the message of the
    last underlying error.

    Attributes:
        retries: Configured maximum number of retries.
        attempts: Number of attempts actually made (retries + 1).
        last_error: The exception raised by the final attempt.

    Example:
        try:
            await client.get_usage()
        except RetryExhaustedError as e:
            if isinstance(e.last_error, UpstreamError) and e.last_error.code == 401:
                raise SystemExit("API key rejected")
    """

    def __init__(
        self,
        retries: int,
        last_error: Exception | None = None,
    ):
        reason = str(last_error) if last_error is not None else "Unknown error"
        super().__init__(f"Failed after {retries} retries: {reason}")
        self.retries = retries
        self.attempts = retries + 1
        self.last_error = last_error


__all__ = [
    "ConfigurationError",
    "ParameterValidationError",
    "RandomOrgMCPError",
    "RetryExhaustedError",
    "TransportError",
    "UpstreamError",
]
