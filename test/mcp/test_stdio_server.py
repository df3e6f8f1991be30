"""Tests for the MCP server wiring: tools/list and tools/call request handlers."""

import pytest
from mcp import types
from mcp.shared.exceptions import McpError

from slidedeck.mcp_server.mcp_server import create_server


async def _call_tool(server, name, arguments):
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return (await handler(request)).root


class TestServerHandlers:
    @pytest.mark.asyncio
    async def test_list_tools(self, components):
        server = create_server(components)
        handler = server.request_handlers[types.ListToolsRequest]

        result = (await handler(types.ListToolsRequest(method="tools/list"))).root

        assert len(result.tools) == 8

    @pytest.mark.asyncio
    async def test_call_tool_success(self, components):
        server = create_server(components)

        result = await _call_tool(server, "create-presentation", {"title": "Demo"})

        assert result.isError is False
        assert result.content[0].text.startswith("PowerPoint presentation")
        assert result.content[0].text.endswith("created.")

    @pytest.mark.asyncio
    async def test_call_tool_error_envelope(self, components):
        server = create_server(components)

        result = await _call_tool(server, "add-slide", {"id": "missing-doc"})

        assert result.isError is True
        assert result.content[0].text == (
            'PowerPoint presentation "missing-doc" not found, please create it first.'
        )


class TestServerRejections:
    """Invalid arguments and unknown tools are JSON-RPC errors, not tool results."""

    @pytest.mark.asyncio
    async def test_out_of_range_coordinate_rejected(self, components):
        server = create_server(components)

        with pytest.raises(McpError) as exc_info:
            await _call_tool(
                server,
                "add-text",
                {"slideId": "s", "text": "t", "x": -1, "y": 0, "w": 1, "h": 1},
            )

        assert exc_info.value.error.code == types.INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_unknown_chart_type_rejected(self, components):
        server = create_server(components)

        with pytest.raises(McpError) as exc_info:
            await _call_tool(
                server,
                "add-chart",
                {
                    "slideId": "s",
                    "chartType": "scatter",
                    "data": [{"name": "s", "labels": ["a"], "values": [1]}],
                    "x": 1,
                    "y": 1,
                    "w": 4,
                    "h": 3,
                },
            )

        assert exc_info.value.error.code == types.INVALID_PARAMS
        assert "chartType" in exc_info.value.error.message

    @pytest.mark.asyncio
    async def test_rejection_leaves_registry_untouched(self, components):
        server = create_server(components)

        with pytest.raises(McpError):
            await _call_tool(server, "create-presentation", {"layout": "LAYOUT_A4"})

        assert components.registry.stats() == {"documents": 0, "slides": 0}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, components):
        server = create_server(components)

        with pytest.raises(McpError) as exc_info:
            await _call_tool(server, "delete-everything", {})

        assert exc_info.value.error.code == types.METHOD_NOT_FOUND
