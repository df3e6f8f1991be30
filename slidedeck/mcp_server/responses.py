"""MCP server response helpers.

Every tool answers with a ``CallToolResult``: ``isError`` tells the caller
whether the call succeeded, and the text payloads are for humans. Validation
failures are not answers at all; they are raised as ``McpError`` so the
transport rejects the request.
"""

from __future__ import annotations

from typing import Any, Dict, List

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, CallToolResult, ErrorData, TextContent
from pydantic import ValidationError as PydanticValidationError

from slidedeck.mcp_server.tool_types import ToolResponse


def _text(text: str) -> TextContent:
    return TextContent(type="text", text=text)


def _success(*texts: str) -> ToolResponse:
    return CallToolResult(isError=False, content=[_text(text) for text in texts])


def _error(message: str) -> ToolResponse:
    return CallToolResult(isError=True, content=[_text(message)])


def _validation_details(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": [str(part) for part in error["loc"]], "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]


def _handle_validation_error(tool: str, exc: PydanticValidationError) -> McpError:
    """Build the transport-level rejection for arguments that failed validation."""
    details = _validation_details(exc)
    problems = "; ".join(
        f"{'.'.join(error['loc']) or '<arguments>'}: {error['msg']}" for error in details
    )
    return McpError(
        ErrorData(
            code=INVALID_PARAMS,
            message=f"Invalid arguments for tool '{tool}': {problems}",
            data=details,
        )
    )
