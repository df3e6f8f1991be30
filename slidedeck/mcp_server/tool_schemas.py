"""MCP tool schemas (list_tools) for the presentation service.

Each ``inputSchema`` is generated from the pydantic input model the handler
validates with, so the schema a client sees and the checks the server runs
are the same.
"""

from __future__ import annotations

from typing import Dict, List, Type

from mcp.types import Tool
from pydantic import BaseModel

from slidedeck.validation.models import (
    AddChartInput,
    AddShapeInput,
    AddSlideInput,
    AddTableInput,
    AddTextInput,
    CreatePresentationInput,
    GetFileUrlInput,
    SavePresentationInput,
)

TOOL_MODELS: Dict[str, Type[BaseModel]] = {
    "create-presentation": CreatePresentationInput,
    "add-slide": AddSlideInput,
    "add-text": AddTextInput,
    "add-table": AddTableInput,
    "add-shape": AddShapeInput,
    "add-chart": AddChartInput,
    "get-file-url": GetFileUrlInput,
    "save-presentation": SavePresentationInput,
}

TOOL_DESCRIPTIONS: Dict[str, str] = {
    "create-presentation": (
        "Create a new PowerPoint presentation. "
        "WORKFLOW: Call this first. Returns the presentation id used by add-slide, "
        "get-file-url and save-presentation. "
        "All metadata is optional; layout picks the slide size (default LAYOUT_16x9) "
        "and rtl=true makes every paragraph right-to-left."
    ),
    "add-slide": (
        "Add a blank slide to a presentation. "
        "Returns the slide id used by add-text, add-table, add-shape and add-chart. "
        "Slides appear in the order they are added."
    ),
    "add-text": (
        "Add a text box to a slide. "
        "Coordinates and sizes are inches: x and w in 0-10, y and h in 0-5.5. "
        "Colors are six hex digits, e.g. 'FF0000'."
    ),
    "add-table": (
        "Add a table to a slide. "
        "data is a list of rows, each a list of cells {text, options?}; cell options override "
        "the table-level align, bold, color, fill, fontFace and fontSize. "
        "colW/rowH take one number for every column/row, or a list with one entry per column/row. "
        "border applies to every cell edge; pt is 0-10."
    ),
    "add-shape": (
        "Add a shape to a slide. "
        "shape picks the preset (rect, roundRect, ellipse, ..., line). "
        "line styles the outline, or the stroke when shape is 'line'; rectRadius (0-1) "
        "rounds roundRect corners; rotate is degrees (-360 to 360); text is drawn inside the shape."
    ),
    "add-chart": (
        "Add a chart to a slide. "
        "chartType is one of area, bar, bar3D, doughnut, line, pie, radar. "
        "data is a list of series {name, labels[], values[]}; all series share the labels "
        "of the first one."
    ),
    "get-file-url": (
        "Save the presentation and return a download URL for it. "
        "WORKFLOW: Call this last, then give the URL to the user. "
        "The presentation is closed afterwards: its id and slide ids stop working."
    ),
    "save-presentation": (
        "Save the presentation to a .pptx file at the given path. "
        "Parent directories are created. "
        "The presentation is closed afterwards: its id and slide ids stop working."
    ),
}


def input_schema_for(model: Type[BaseModel]) -> dict:
    return model.model_json_schema(by_alias=True)


async def build_tools() -> List[Tool]:
    return [
        Tool(
            name=name,
            description=TOOL_DESCRIPTIONS[name],
            inputSchema=input_schema_for(model),
        )
        for name, model in TOOL_MODELS.items()
    ]
