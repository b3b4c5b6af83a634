# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""RANDOM.ORG MCP Server - true random numbers as Model Context Protocol tools.

This package exposes the RANDOM.ORG JSON-RPC API (release 4) as MCP tools,
with a request pipeline built for a quota-limited upstream.

Key Features:
    - Local parameter validation before any request is sent
    - Token bucket rate limiting shared by all concurrent callers
    - Exponential backoff retries for transport and API errors
    - Typed results with quota metadata (bits and requests left)
    - Error normalization into MCP protocol errors

Quick Start:
    >>> from random_org_mcp import IntegerParams, RandomOrgClient, load_config
    >>>
    >>> async with RandomOrgClient(load_config()) as client:
    ...     result = await client.generate_integers(IntegerParams(n=5, min=1, max=10))
    ...     print(result.random.data, result.bits_left)

Running the server:
    $ RANDOM_ORG_API_KEY=... random-org-mcp

Version: 1.0.0
"""

__version__ = "1.0.0"

from .client import RandomOrgClient
from .config import DEFAULT_BASE_URL, RandomOrgConfig, load_config
from .exceptions import (
    ConfigurationError,
    ParameterValidationError,
    RandomOrgMCPError,
    RetryExhaustedError,
    TransportError,
    UpstreamError,
)
from .limiter import TokenBucketRateLimiter
from .metrics import ClientMetrics
from .operations import Operation
from .types import (
    BlobParams,
    DecimalFractionParams,
    GaussianParams,
    GenerationResult,
    IntegerParams,
    IntegerSequenceParams,
    StringParams,
    UUIDParams,
    UsageResult,
)

__all__ = [
    "DEFAULT_BASE_URL",
    # Parameters
    "BlobParams",
    # Metrics
    "ClientMetrics",
    # Exceptions
    "ConfigurationError",
    "DecimalFractionParams",
    "GaussianParams",
    # Results
    "GenerationResult",
    "IntegerParams",
    "IntegerSequenceParams",
    # Operations
    "Operation",
    "ParameterValidationError",
    # Client
    "RandomOrgClient",
    # Configuration
    "RandomOrgConfig",
    "RandomOrgMCPError",
    "RetryExhaustedError",
    "StringParams",
    # Rate limiting
    "TokenBucketRateLimiter",
    "TransportError",
    "UUIDParams",
    "UpstreamError",
    "UsageResult",
    "load_config",
]
