"""Presentation lifecycle tool handlers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from slidedeck.mcp_server.components import ServerComponents
from slidedeck.mcp_server.responses import _success
from slidedeck.mcp_server.tool_types import ToolResponse
from slidedeck.sessions import DocumentMetadata
from slidedeck.validation.models import (
    AddSlideInput,
    CreatePresentationInput,
    GetFileUrlInput,
    SavePresentationInput,
)


async def _tool_create_presentation(
    arguments: Dict[str, Any], components: ServerComponents
) -> ToolResponse:
    payload = CreatePresentationInput.model_validate(arguments)
    document = components.registry.create_document(DocumentMetadata(**payload.model_dump()))
    return _success(f'PowerPoint presentation "{document.document_id}" created.')


async def _tool_add_slide(arguments: Dict[str, Any], components: ServerComponents) -> ToolResponse:
    payload = AddSlideInput.model_validate(arguments)
    slide = components.registry.create_slide(payload.id)
    return _success(f'Slide "{slide.slide_id}" added to presentation "{payload.id}".')


async def _tool_get_file_url(
    arguments: Dict[str, Any], components: ServerComponents
) -> ToolResponse:
    """Write the presentation into the served directory and hand back its URL.

    The document is retired on success, so a second call for the same id is
    Not-Found.
    """
    payload = GetFileUrlInput.model_validate(arguments)
    document = components.registry.resolve_document(payload.id)
    filename = components.artifacts.filename_for(document)
    components.registry.finalize(payload.id, components.artifacts.path_for(filename))

    url = components.artifacts.url_for(filename)
    components.logger.info("Presentation published", document_id=payload.id, url=url)
    return _success(
        url,
        "Give the user this download link for the PowerPoint presentation, "
        f"exactly as written: {url}",
    )


async def _tool_save_presentation(
    arguments: Dict[str, Any], components: ServerComponents
) -> ToolResponse:
    payload = SavePresentationInput.model_validate(arguments)
    path = components.registry.finalize(payload.id, Path(payload.filepath).expanduser())
    return _success(f'PowerPoint presentation "{payload.id}" saved to "{path}".')
