# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""JSON-RPC 2.0 helpers for the RANDOM.ORG API.

This module builds request envelopes and unwraps response envelopes.
See: https://www.jsonrpc.org/specification
"""

from typing import Any

from pydantic import ValidationError

from .exceptions import TransportError, UpstreamError
from .types.results import JsonRpcErrorDetail

JSONRPC_VERSION = "2.0"


def jsonrpc_request(method: str, params: dict[str, Any], api_key: str, id: int) -> dict:
    """Create a JSON-RPC 2.0 request carrying the API key.

    Args:
        method: API method name (e.g. ``generateIntegers``)
        params: Method parameters, already in wire format
        api_key: Key inserted as ``params.apiKey``
        id: Request ID

    Returns:
        JSON-RPC 2.0 request dict
    """
    return {
        "jsonrpc": JSONRPC_VERSION,
        "method": method,
        "params": {"apiKey": api_key, **params},
        "id": id,
    }


def jsonrpc_result(body: Any) -> Any:
    """Extract ``result`` from a decoded JSON-RPC response.

    Raises:
        UpstreamError: If the response carries an ``error`` member.
        TransportError: If the body is not a JSON-RPC response.
    """
    if not isinstance(body, dict):
        raise TransportError(f"Malformed JSON-RPC response: expected object, got {type(body).__name__}")

    error = body.get("error")
    if error:
        try:
            detail = JsonRpcErrorDetail.model_validate(error)
        except ValidationError:
            raise TransportError(f"Malformed JSON-RPC error: {error!r}") from None
        raise UpstreamError(detail.code, detail.message, detail.data)

    if "result" not in body:
        raise TransportError("Malformed JSON-RPC response: missing 'result'")
    return body["result"]


__all__ = ["JSONRPC_VERSION", "jsonrpc_request", "jsonrpc_result"]
