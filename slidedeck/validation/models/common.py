"""Common field types, bounds and closed enumerations.

Coordinates and sizes are inches on the default 16:9 canvas (10 x 5.5
usable), so horizontal values are bounded by 10 and vertical ones by 5.5.
"""

from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from slidedeck.validation.color_validator import HEX_COLOR_PATTERN

CANVAS_WIDTH = 10.0
CANVAS_HEIGHT = 5.5

XCoord = Annotated[
    float, Field(ge=0, le=CANVAS_WIDTH, description="Horizontal position in inches (0-10)")
]
YCoord = Annotated[
    float, Field(ge=0, le=CANVAS_HEIGHT, description="Vertical position in inches (0-5.5)")
]
Width = Annotated[float, Field(ge=0, le=CANVAS_WIDTH, description="Width in inches (0-10)")]
Height = Annotated[float, Field(ge=0, le=CANVAS_HEIGHT, description="Height in inches (0-5.5)")]

HexColor = Annotated[
    str,
    Field(pattern=HEX_COLOR_PATTERN, description="Six-digit hex color, e.g. 'FF0000'"),
]
FontSize = Annotated[float, Field(ge=1, le=256, description="Font size in points")]

Alignment = Literal["left", "center", "right", "justify"]
BorderType = Literal["none", "solid", "dash"]
DashType = Literal[
    "solid", "dash", "dashDot", "lgDash", "lgDashDot", "lgDashDotDot", "sysDash", "sysDot"
]
ArrowType = Literal["none", "arrow", "diamond", "oval", "stealth", "triangle"]
ShapeKind = Literal[
    "rect",
    "roundRect",
    "ellipse",
    "triangle",
    "rtTriangle",
    "diamond",
    "pentagon",
    "hexagon",
    "octagon",
    "star5",
    "heart",
    "cloud",
    "can",
    "cube",
    "chevron",
    "smileyFace",
    "rightArrow",
    "leftArrow",
    "upArrow",
    "downArrow",
    "line",
]
ChartKind = Literal["area", "bar", "bar3D", "doughnut", "line", "pie", "radar"]
Layout = Literal["LAYOUT_16x9", "LAYOUT_16x10", "LAYOUT_4x3", "LAYOUT_WIDE"]


class ToolModel(BaseModel):
    """Base for every tool-facing model: camelCase on the wire, extras ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Placement(ToolModel):
    """Position and size of an element on the slide."""

    x: XCoord
    y: YCoord
    w: Width
    h: Height


class FillOptions(ToolModel):
    """Solid fill."""

    color: HexColor
    transparency: float = Field(default=0, ge=0, le=100, description="Percent (0-100)")


class BorderOptions(ToolModel):
    """Table cell border, applied to all four edges."""

    type: BorderType = "solid"
    pt: float = Field(default=1, ge=0, le=10, description="Thickness in points (0-10)")
    color: HexColor = "000000"


class LineOptions(ToolModel):
    """Outline of a shape, or the stroke of a line shape."""

    color: Optional[HexColor] = None
    width: Optional[float] = Field(default=None, ge=1, le=256, description="Points (1-256)")
    dash_type: Optional[DashType] = Field(default=None, alias="dashType")
    begin_arrow_type: Optional[ArrowType] = Field(default=None, alias="beginArrowType")
    end_arrow_type: Optional[ArrowType] = Field(default=None, alias="endArrowType")
