"""Company Lens tool registry and dispatch for the local MCP server."""
import logging
from typing import List, Optional, Callable
from mcp.types import Tool

from . import execute_query
from .base import ToolResult, method_not_found

logger = logging.getLogger(__name__)

# All tool modules
_TOOL_MODULES = [
    execute_query,
]

# Build registry from modules
TOOL_REGISTRY = {}
for module in _TOOL_MODULES:
    tool_def = module.TOOL_DEF
    TOOL_REGISTRY[tool_def.name] = {
        "tool_def": tool_def,
        "handler": module.execute,
    }


def get_tool_handler(tool_name: str) -> Optional[Callable]:
    """Get the handler function for a tool."""
    if tool_name not in TOOL_REGISTRY:
        return None
    return TOOL_REGISTRY[tool_name]['handler']


def get_all_tool_definitions() -> List[Tool]:
    """Get all tool definitions for MCP registration."""
    return [entry['tool_def'] for entry in TOOL_REGISTRY.values()]


async def call_tool(tool_name: str, arguments: Optional[dict], remote) -> ToolResult:
    """Dispatch a tool call.

    Unknown tools fail with MethodNotFound before anything reaches the remote
    server. Handler results, successes and errors alike, are returned as-is.
    """
    handler = get_tool_handler(tool_name)
    if handler is None:
        logger.warning("Call to unknown tool: %s", tool_name)
        return method_not_found(tool_name)

    logger.debug("Dispatching %s", tool_name)
    return await handler(remote, arguments or {})


__all__ = [
    'TOOL_REGISTRY',
    'get_tool_handler',
    'get_all_tool_definitions',
    'call_tool',
]
