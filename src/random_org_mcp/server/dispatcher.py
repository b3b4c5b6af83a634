# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Tool dispatch for the RANDOM.ORG MCP server.

Maps tool names to client operations and normalizes every outcome into
what the MCP layer expects: a JSON payload on success, an ``McpError`` on
failure. Unknown tools are reported as METHOD_NOT_FOUND so callers can tell
"not supported" apart from "failed while running" (INTERNAL_ERROR).
"""

import json
import logging
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, METHOD_NOT_FOUND, ErrorData, TextContent, Tool

from ..client import RandomOrgClient
from ..operations import Operation
from .tool_defs import TOOL_DEFINITIONS

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """
    Routes MCP tool calls to a RandomOrgClient.

    Example:
        >>> dispatcher = ToolDispatcher(client)
        >>> payload = await dispatcher.call_tool("generateUUIDs", {"n": 2})
        >>> payload["data"]
        ['6e4b...', 'a1f0...']
    """

    def __init__(self, client: RandomOrgClient) -> None:
        self.client = client

    def list_tools(self) -> list[Tool]:
        """Build MCP tool metadata for the whole catalog."""
        return [Tool.model_validate(definition) for definition in TOOL_DEFINITIONS]

    def resolve(self, name: str) -> Operation:
        """
        Map a tool name to its operation.

        Raises:
            McpError: METHOD_NOT_FOUND for names outside the catalog.
        """
        try:
            return Operation.from_method(name)
        except KeyError:
            raise McpError(
                ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}")
            ) from None

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """
        Execute a tool and return its result payload.

        Generation tools return the generated ``data`` together with
        ``completionTime`` and the quota fields (``bitsUsed``, ``bitsLeft``,
        ``requestsLeft``, ``advisoryDelay``). ``getUsage`` returns the usage
        fields as reported by the API.

        Raises:
            McpError: METHOD_NOT_FOUND for unknown tools, INTERNAL_ERROR
                wrapping any other failure. McpError raised further down
                passes through unchanged.
        """
        operation = self.resolve(name)
        try:
            params = operation.params_type.from_arguments(arguments or {})
            result = await self.client.call(operation, params)
            return result.to_payload()
        except McpError:
            raise
        except Exception as e:
            logger.warning(f"Tool {name} failed: {e}")
            raise McpError(
                ErrorData(code=INTERNAL_ERROR, message=f"Tool execution failed: {e}")
            ) from e

    async def handle(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> list[TextContent]:
        """Execute a tool and render the payload as MCP text content."""
        payload = await self.call_tool(name, arguments)
        return as_text_content(payload)


def as_text_content(payload: Any) -> list[TextContent]:
    """Serialize payload for MCP text transport."""
    return [TextContent(type="text", text=json.dumps(payload, indent=2))]


__all__ = ["ToolDispatcher", "as_text_content"]
