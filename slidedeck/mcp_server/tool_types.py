from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict

from mcp.types import CallToolResult

if TYPE_CHECKING:
    from slidedeck.mcp_server.components import ServerComponents

ToolResponse = CallToolResult
ToolHandler = Callable[[Dict[str, Any], "ServerComponents"], Awaitable[ToolResponse]]
