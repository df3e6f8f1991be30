"""MCP server package: tool schemas, dispatch and the stdio server."""
from slidedeck.mcp_server.components import ServerComponents, initialize_components
from slidedeck.mcp_server.mcp_server import create_server, run_stdio
from slidedeck.mcp_server.routing import HANDLERS, dispatch_tool_call

__all__ = [
    "HANDLERS",
    "ServerComponents",
    "create_server",
    "dispatch_tool_call",
    "initialize_components",
    "run_stdio",
]
