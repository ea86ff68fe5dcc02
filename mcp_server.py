#!/usr/bin/env python3
"""Company Lens MCP Proxy Server - Entry Point.

Exposes execute_query over stdio and forwards each call to the remote
Company Lens MCP server over HTTP (COMPANY_LENS_ENDPOINT).
"""
import asyncio
import logging
import signal
import sys

from mcp.server import Server
from mcp.shared.exceptions import McpError
from mcp.types import CallToolRequest, CallToolResult, ServerResult
import mcp.server.stdio
from pydantic import ValidationError

from company_lens import call_tool, get_all_tool_definitions
from company_lens.base import ToolError, json_response
from company_lens.logging_config import setup_logging
from company_lens.remote import RemoteMCPClient
from company_lens.settings import LOG_LEVEL, REMOTE_MCP_ENDPOINT, SERVER_NAME, SERVER_VERSION

logger = logging.getLogger("company_lens.server")


def to_call_tool_result(payload) -> CallToolResult:
    """Hand back a remote CallToolResult as-is; wrap any other JSON value as text."""
    try:
        return CallToolResult.model_validate(payload)
    except ValidationError:
        return CallToolResult(content=json_response(payload))


def build_server(remote: RemoteMCPClient) -> Server:
    app = Server(SERVER_NAME, version=SERVER_VERSION)

    @app.list_tools()
    async def list_tools():
        return get_all_tool_definitions()

    async def handle_call_tool(req: CallToolRequest) -> ServerResult:
        outcome = await call_tool(req.params.name, req.params.arguments, remote)
        if isinstance(outcome, ToolError):
            raise McpError(outcome.to_error_data())
        return ServerResult(to_call_tool_result(outcome.payload))

    # Registered directly: the call_tool() decorator turns raised errors into
    # isError results, McpError has to reach the client as a JSON-RPC error.
    app.request_handlers[CallToolRequest] = handle_call_tool

    return app


async def main():
    setup_logging(LOG_LEVEL)
    remote = RemoteMCPClient(REMOTE_MCP_ENDPOINT)
    app = build_server(remote)
    try:
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            logger.info("Company Lens MCP Proxy Server running on stdio (remote: %s)", remote.endpoint)
            await app.run(read_stream, write_stream, app.create_initialization_options())
    finally:
        await remote.aclose()


def run():
    # SIGTERM shuts down the same way as Ctrl-C
    signal.signal(signal.SIGTERM, signal.default_int_handler)
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down")
    sys.exit(0)


if __name__ == "__main__":
    run()
