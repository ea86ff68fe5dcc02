"""Read-only SQL query tool, executed by the remote Company Lens server."""
from mcp.types import Tool

from .base import ToolResult

TOOL_DEF = Tool(
    name="execute_query",
    description="Fetch data from the company database with PostgreSQL. Only SELECT queries can be executed.",
    inputSchema={
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "SQL query to execute (SELECT only)"}
        },
        "required": ["query"]
    }
)


async def execute(remote, args: dict) -> ToolResult:
    # SELECT-only is enforced remotely
    return await remote.execute_query(args.get("query"))
