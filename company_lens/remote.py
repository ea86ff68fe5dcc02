"""HTTP client for the remote MCP server that actually runs the queries.

One local tool call becomes one JSON-RPC ``tools/call`` POST. The outcome is
classified into a ToolResult instead of being raised:

    non-2xx status                -> TransportFault (body not read)
    body with a truthy ``error``  -> RemoteFault
    body without ``result``       -> TransportFault (malformed response)
    anything that raises          -> TransportFault
    otherwise                     -> ToolSuccess(body["result"])
"""
import logging
import uuid
from typing import Any, Dict, Optional

import httpx

from .base import ToolResult, ToolSuccess, remote_fault, transport_fault

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"
TOOLS_CALL_METHOD = "tools/call"


class RemoteMCPClient:
    """Thin JSON-RPC-over-HTTP client for a single remote MCP endpoint.

    Args:
        endpoint: URL every request is POSTed to.
        client: Optional ``httpx.AsyncClient``; when omitted one is created (and
            owned) that follows redirects and has no timeout, so a slow query
            waits for the remote server.
        headers: Extra fixed headers sent with every request.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.endpoint = endpoint
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(follow_redirects=True, timeout=None)
        self._headers = {**(headers or {}), "Content-Type": "application/json"}

    @staticmethod
    def build_envelope(tool_name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "jsonrpc": JSONRPC_VERSION,
            "id": str(uuid.uuid4()),
            "method": TOOLS_CALL_METHOD,
            "params": {
                "name": tool_name,
                "arguments": arguments,
            },
        }

    async def call_remote_tool(self, tool_name: str, arguments: Dict[str, Any]) -> ToolResult:
        """Call ``tool_name`` on the remote server and classify the outcome."""
        try:
            envelope = self.build_envelope(tool_name, arguments)
            logger.debug("POST %s tools/call %s (id=%s)", self.endpoint, tool_name, envelope["id"])
            response = await self._client.post(self.endpoint, json=envelope, headers=self._headers)

            if not response.is_success:
                logger.warning("Remote MCP server returned HTTP %s for %s", response.status_code, tool_name)
                return transport_fault(
                    f"Remote MCP server returned HTTP error status: {response.status_code}",
                    status_code=response.status_code,
                )

            return self._classify_body(response.json())
        except Exception as e:
            # some httpx errors (e.g. ReadTimeout) carry an empty message
            reason = str(e) or type(e).__name__
            logger.error("Connection to remote MCP server failed: %s", reason)
            return transport_fault(f"Connection error to remote MCP server: {reason}")

    @staticmethod
    def _classify_body(body: Any) -> ToolResult:
        if not isinstance(body, dict):
            logger.warning("Malformed remote response: expected a JSON object, got %s", type(body).__name__)
            return transport_fault("Malformed response from remote MCP server: expected a JSON object")

        error = body.get("error")
        if error:
            message = error.get("message", error) if isinstance(error, dict) else error
            logger.warning("Remote MCP server rejected the call: %s", message)
            return remote_fault(str(message))

        if "result" not in body:
            logger.warning("Malformed remote response: neither result nor error present")
            return transport_fault("Malformed response from remote MCP server: missing result")

        return ToolSuccess(body["result"])

    async def execute_query(self, query: str) -> ToolResult:
        return await self.call_remote_tool("execute_query", {"query": query})

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
