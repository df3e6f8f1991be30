"""Presentation tool validation models.

This package contains all Pydantic models used by the MCP tools,
organized by logical grouping:
- common.py: Bounded field types, closed enumerations, shared option records
- elements.py: Per-kind content element records (text, table, shape, chart)
- inputs.py: Input models for MCP tools

All models are re-exported here.
"""

from .common import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    BorderOptions,
    FillOptions,
    LineOptions,
    Placement,
    ToolModel,
)
from .elements import (
    CellOptions,
    ChartElement,
    ChartSeries,
    Element,
    ShapeElement,
    TableCell,
    TableElement,
    TextElement,
)
from .inputs import (
    AddChartInput,
    AddShapeInput,
    AddSlideInput,
    AddTableInput,
    AddTextInput,
    CreatePresentationInput,
    GetFileUrlInput,
    SavePresentationInput,
)

__all__ = [
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "BorderOptions",
    "FillOptions",
    "LineOptions",
    "Placement",
    "ToolModel",
    "CellOptions",
    "ChartElement",
    "ChartSeries",
    "Element",
    "ShapeElement",
    "TableCell",
    "TableElement",
    "TextElement",
    "AddChartInput",
    "AddShapeInput",
    "AddSlideInput",
    "AddTableInput",
    "AddTextInput",
    "CreatePresentationInput",
    "GetFileUrlInput",
    "SavePresentationInput",
]
