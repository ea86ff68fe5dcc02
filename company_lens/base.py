"""Shared result types and response helpers for proxied tools."""
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union

from mcp.types import ErrorData, TextContent, INTERNAL_ERROR, METHOD_NOT_FOUND


class ErrorKind(str, Enum):
    """Where a failed call broke down."""

    METHOD_NOT_FOUND = "MethodNotFound"
    REMOTE_FAULT = "RemoteFault"
    TRANSPORT_FAULT = "TransportFault"


# JSON-RPC error code sent to the local client for each kind
ERROR_CODES = {
    ErrorKind.METHOD_NOT_FOUND: METHOD_NOT_FOUND,
    ErrorKind.REMOTE_FAULT: INTERNAL_ERROR,
    ErrorKind.TRANSPORT_FAULT: INTERNAL_ERROR,
}


@dataclass(frozen=True)
class ToolSuccess:
    """Remote result, passed through untouched."""

    payload: Any


@dataclass(frozen=True)
class ToolError:
    """The single error shape the local client ever sees."""

    kind: ErrorKind
    message: str
    status_code: Optional[int] = field(default=None)

    @property
    def code(self) -> int:
        return ERROR_CODES[self.kind]

    def to_error_data(self) -> ErrorData:
        data = {"kind": self.kind.value}
        if self.status_code is not None:
            data["status_code"] = self.status_code
        return ErrorData(code=self.code, message=self.message, data=data)


ToolResult = Union[ToolSuccess, ToolError]


def method_not_found(tool_name: str) -> ToolError:
    return ToolError(ErrorKind.METHOD_NOT_FOUND, f"Unknown tool: {tool_name}")


def remote_fault(message: str) -> ToolError:
    return ToolError(ErrorKind.REMOTE_FAULT, f"Remote server error: {message}")


def transport_fault(message: str, status_code: Optional[int] = None) -> ToolError:
    return ToolError(ErrorKind.TRANSPORT_FAULT, message, status_code=status_code)


def json_response(data: Any) -> List[TextContent]:
    """Create a JSON TextContent response."""
    return [TextContent(type="text", text=json.dumps(data, default=str))]
