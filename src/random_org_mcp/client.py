# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Rate-limited, retrying client for the RANDOM.ORG JSON-RPC API.

Every call follows the same pipeline:

1. Validate parameters locally (no network, no retry on failure).
2. Acquire a token from the rate limiter.
3. POST a JSON-RPC request with a fresh request id.
4. On a transport failure or an API error descriptor, back off
   exponentially and go back to step 2, up to ``max_retries`` times.
5. Parse ``result`` into the operation's result model.
"""

import asyncio
import itertools
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from pydantic import ValidationError
from typing_extensions import Self

from .config import RandomOrgConfig
from .exceptions import (
    ParameterValidationError,
    RetryExhaustedError,
    TransportError,
    UpstreamError,
)
from .jsonrpc import jsonrpc_request, jsonrpc_result
from .limiter import TokenBucketRateLimiter
from .metrics import ClientMetrics
from .operations import Operation
from .types.params import (
    ApiParams,
    BlobParams,
    DecimalFractionParams,
    GaussianParams,
    IntegerParams,
    IntegerSequenceParams,
    StringParams,
    UUIDParams,
    UsageParams,
)
from .types.results import (
    BlobResult,
    DecimalFractionResult,
    GaussianResult,
    IntegerResult,
    IntegerSequenceResult,
    StringResult,
    UUIDResult,
    UsageResult,
)

logger = logging.getLogger(__name__)


class RandomOrgClient:
    """
    Async client for the RANDOM.ORG basic API.

    One instance owns one rate limiter and one request-id sequence; share
    the instance between tasks so they share one rate limit.

    Attributes:
        config: Immutable client configuration.
        rate_limiter: Token bucket applied before every attempt.
        metrics: Counters describing attempts, retries and failures.

    Example:
        >>> async with RandomOrgClient(load_config()) as client:
        ...     result = await client.generate_integers(IntegerParams(n=5, min=1, max=10))
        ...     print(result.random.data)
    """

    def __init__(
        self,
        config: RandomOrgConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
        rate_limiter: TokenBucketRateLimiter | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        metrics: ClientMetrics | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Client configuration.
            http_client: Optional pre-built httpx client. When given, the
                caller keeps ownership and ``aclose()`` leaves it open.
            rate_limiter: Optional limiter; built from config when omitted.
            sleep: Coroutine used for backoff waits.
            metrics: Optional metrics sink.
        """
        self.config = config
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=config.timeout_seconds,
            headers={"Content-Type": "application/json"},
        )
        self.rate_limiter = rate_limiter or TokenBucketRateLimiter(
            rate=config.rate_limit_requests_per_second,
            capacity=config.rate_limit_burst_size,
        )
        self._sleep = sleep
        self.metrics = metrics or ClientMetrics()

        self._request_ids = itertools.count(1)
        self.last_request_id = 0

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http.aclose()

    def _next_request_id(self) -> int:
        self.last_request_id = next(self._request_ids)
        return self.last_request_id

    async def call(self, operation: Operation, params: ApiParams) -> Any:
        """
        Validate ``params`` and execute ``operation`` through the pipeline.

        Args:
            operation: The API method to invoke.
            params: Parameter object matching ``operation.params_type``.

        Returns:
            The ``result`` member parsed into ``operation.result_type``.

        Raises:
            ParameterValidationError: If a parameter is out of bounds.
            RetryExhaustedError: If every attempt failed.
        """
        try:
            operation.validate(params)
        except ParameterValidationError:
            self.metrics.record_validation_error()
            raise

        def parse(raw: Any) -> Any:
            try:
                return operation.result_type.model_validate(raw)
            except ValidationError as e:
                raise TransportError(
                    f"Unexpected {operation.method} result: {e.error_count()} invalid field(s)"
                ) from e

        result = await self._request(operation.method, params.to_api_params(), parse)
        self.metrics.record_success(
            bits_left=getattr(result, "bits_left", None),
            requests_left=getattr(result, "requests_left", None),
        )
        return result

    async def _request(
        self,
        method: str,
        params: dict[str, Any],
        parse: Callable[[Any], Any],
    ) -> Any:
        """
        Execute a request with rate limiting and exponential backoff.

        Makes ``max_retries + 1`` attempts. Each attempt acquires its own
        rate-limit token and request id.

        Raises:
            RetryExhaustedError: Wrapping the last error once attempts run out.
        """
        max_retries = self.config.max_retries
        last_error: Exception | None = None

        for attempt in range(max_retries + 1):
            await self.rate_limiter.acquire()
            try:
                return await self._send(method, params, parse)
            except UpstreamError as e:
                self.metrics.record_upstream_error()
                last_error = e
            except TransportError as e:
                self.metrics.record_transport_error()
                last_error = e

            if attempt >= max_retries:
                break

            delay = self.config.retry_delay_seconds(attempt)
            logger.warning(
                f"{method} attempt {attempt + 1}/{max_retries + 1} failed: "
                f"{last_error}; retrying in {delay:.2f}s"
            )
            self.metrics.record_retry()
            await self._sleep(delay)

        self.metrics.record_exhausted()
        logger.error(f"{method} failed after {max_retries + 1} attempts: {last_error}")
        raise RetryExhaustedError(max_retries, last_error) from last_error

    async def _send(
        self,
        method: str,
        params: dict[str, Any],
        parse: Callable[[Any], Any],
    ) -> Any:
        """Perform one HTTP round trip and unwrap the JSON-RPC result."""
        request_id = self._next_request_id()
        body = jsonrpc_request(method, params, self.config.api_key, request_id)
        self.metrics.record_attempt(method)
        logger.debug(f"Sending {method} (id={request_id})")

        try:
            response = await self._http.post(
                self.config.base_url, json=body, timeout=self.config.timeout_seconds
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise TransportError(f"Invalid JSON in response: {e}") from e

        return parse(jsonrpc_result(payload))

    async def generate_integers(self, params: IntegerParams) -> IntegerResult:
        return await self.call(Operation.GENERATE_INTEGERS, params)

    async def generate_integer_sequences(
        self, params: IntegerSequenceParams
    ) -> IntegerSequenceResult:
        return await self.call(Operation.GENERATE_INTEGER_SEQUENCES, params)

    async def generate_decimal_fractions(
        self, params: DecimalFractionParams
    ) -> DecimalFractionResult:
        return await self.call(Operation.GENERATE_DECIMAL_FRACTIONS, params)

    async def generate_gaussians(self, params: GaussianParams) -> GaussianResult:
        return await self.call(Operation.GENERATE_GAUSSIANS, params)

    async def generate_strings(self, params: StringParams) -> StringResult:
        return await self.call(Operation.GENERATE_STRINGS, params)

    async def generate_uuids(self, params: UUIDParams) -> UUIDResult:
        return await self.call(Operation.GENERATE_UUIDS, params)

    async def generate_blobs(self, params: BlobParams) -> BlobResult:
        return await self.call(Operation.GENERATE_BLOBS, params)

    async def get_usage(self) -> UsageResult:
        """Fetch quota and status information for the configured API key."""
        return await self.call(Operation.GET_USAGE, UsageParams())


__all__ = ["RandomOrgClient"]
