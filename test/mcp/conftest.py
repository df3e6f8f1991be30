"""Helpers for driving tool calls through the dispatcher."""

import pytest

from slidedeck.mcp_server.routing import dispatch_tool_call

from tool_helpers import CREATED_RE, SLIDE_RE, result_text


@pytest.fixture
def call(components):
    """Call a tool by name against the per-test components."""

    async def _call(name, **arguments):
        return await dispatch_tool_call(name=name, arguments=arguments, components=components)

    return _call


@pytest.fixture
def new_deck(call):
    """Create a presentation with one slide; returns (document_id, slide_id)."""

    async def _new_deck(**arguments):
        created = await call("create-presentation", **arguments)
        document_id = CREATED_RE.match(result_text(created)).group(1)
        added = await call("add-slide", id=document_id)
        slide_id = SLIDE_RE.match(result_text(added)).group(1)
        return document_id, slide_id

    return _new_deck
