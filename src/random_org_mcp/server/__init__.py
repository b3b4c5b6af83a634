# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
MCP server layer.

- TOOL_DEFINITIONS: the tool catalog returned by tools/list
- ToolDispatcher: routes tool calls to the API client and normalizes errors
- create_server / main: stdio server wiring and CLI entry point
"""

from .dispatcher import ToolDispatcher, as_text_content
from .tool_defs import TOOL_DEFINITIONS

__all__ = [
    "TOOL_DEFINITIONS",
    "ToolDispatcher",
    "as_text_content",
]
