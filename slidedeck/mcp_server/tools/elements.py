"""Slide content tool handlers.

Each handler resolves the slide, converts its input into the matching
element variant and hands it to the renderer. A renderer failure is an
ordinary error answer carrying the rendering library's message.
"""

from __future__ import annotations

from typing import Any, Dict, Type

from slidedeck.mcp_server.components import ServerComponents
from slidedeck.mcp_server.responses import _error, _success
from slidedeck.mcp_server.tool_types import ToolResponse
from slidedeck.validation.models import AddChartInput, AddShapeInput, AddTableInput, AddTextInput


async def _place_element(
    arguments: Dict[str, Any],
    components: ServerComponents,
    model: Type[Any],
    label: str,
) -> ToolResponse:
    payload = model.model_validate(arguments)
    slide = components.registry.resolve_slide(payload.slide_id)
    document = components.registry.resolve_document(slide.document_id)

    result = components.renderer.place(slide.slide, payload.to_element(), rtl=document.rtl)
    if not result.ok:
        components.logger.warning(
            "Element rejected by renderer",
            slide_id=payload.slide_id,
            element=label,
            reason=result.reason,
        )
        return _error(f'Error adding {label} to slide "{payload.slide_id}": {result.reason}')

    return _success(f'{label.capitalize()} added to slide "{payload.slide_id}".')


async def _tool_add_text(arguments: Dict[str, Any], components: ServerComponents) -> ToolResponse:
    return await _place_element(arguments, components, AddTextInput, "text box")


async def _tool_add_table(arguments: Dict[str, Any], components: ServerComponents) -> ToolResponse:
    return await _place_element(arguments, components, AddTableInput, "table")


async def _tool_add_shape(arguments: Dict[str, Any], components: ServerComponents) -> ToolResponse:
    return await _place_element(arguments, components, AddShapeInput, "shape")


async def _tool_add_chart(arguments: Dict[str, Any], components: ServerComponents) -> ToolResponse:
    return await _place_element(arguments, components, AddChartInput, "chart")
