"""MCP server for building PowerPoint presentations over stdio.

The low-level ``mcp`` server owns the JSON-RPC framing on stdin/stdout; this
module only wires ``tools/list`` and ``tools/call`` to the tool schemas and
the dispatcher, with the process-wide components bound at startup.

``tools/call`` is a raw request handler, not ``Server.call_tool``: the
dispatcher's ``McpError`` (invalid arguments, unknown tool) must reach the
session as a JSON-RPC error. Domain failures are ``isError`` results.
"""

from __future__ import annotations

from typing import List

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from slidedeck.mcp_server.components import ServerComponents
from slidedeck.mcp_server.routing import dispatch_tool_call
from slidedeck.mcp_server.tool_schemas import build_tools

SERVER_NAME = "slidedeck"


def create_server(components: ServerComponents) -> Server:
    """Build the MCP server bound to ``components``."""
    app: Server = Server(SERVER_NAME)

    @app.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return await build_tools()

    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await dispatch_tool_call(
            name=request.params.name,
            arguments=dict(request.params.arguments or {}),
            components=components,
        )
        return types.ServerResult(result)

    app.request_handlers[types.CallToolRequest] = handle_call_tool
    return app


async def run_stdio(components: ServerComponents) -> None:
    """Serve MCP on stdin/stdout until the client disconnects."""
    app = create_server(components)
    components.logger.info("MCP server running on stdio", server=SERVER_NAME)
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())
