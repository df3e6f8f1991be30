"""Shared helpers for MCP tool tests."""

import re

CREATED_RE = re.compile(r'^PowerPoint presentation "([0-9a-f-]+)" created\.$')
SLIDE_RE = re.compile(r'^Slide "([0-9a-f-]+)" added to presentation "[0-9a-f-]+"\.$')


def result_text(result) -> str:
    """Join the text payloads of a CallToolResult."""
    return "\n".join(item.text for item in result.content)
