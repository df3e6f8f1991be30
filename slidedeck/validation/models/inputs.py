"""Input models for MCP server tools.

Field names are snake_case in Python and camelCase on the wire (``slideId``,
``fontSize``). Each model is also the source of its tool's ``inputSchema``.
"""

from pydantic import Field

from .common import Layout, ToolModel
from .elements import (
    ChartElement,
    ChartOptions,
    ShapeElement,
    ShapeOptions,
    TableElement,
    TableOptions,
    TextElement,
    TextOptions,
)

DEFAULT_TITLE = "PowerPoint Presentation"
DEFAULT_ATTRIBUTION = "PowerPoint MCP Server"


class CreatePresentationInput(ToolModel):
    """Input for create-presentation."""

    title: str = Field(default=DEFAULT_TITLE, description="Title of the presentation")
    subject: str = Field(default=DEFAULT_ATTRIBUTION, description="Subject of the presentation")
    author: str = Field(default=DEFAULT_ATTRIBUTION, description="Author of the presentation")
    company: str = Field(default=DEFAULT_ATTRIBUTION, description="Company of the presentation")
    revision: str = Field(default="1", description="Revision of the presentation")
    layout: Layout = Field(default="LAYOUT_16x9", description="Slide size of the presentation")
    rtl: bool = Field(default=False, description="Right to left text direction")


class AddSlideInput(ToolModel):
    """Input for add-slide."""

    id: str = Field(description="ID of the presentation")


class AddTextInput(TextOptions):
    """Input for add-text."""

    slide_id: str = Field(alias="slideId", description="ID of the slide")

    def to_element(self) -> TextElement:
        return TextElement.model_validate(self.model_dump(exclude={"slide_id"}))


class AddTableInput(TableOptions):
    """Input for add-table."""

    slide_id: str = Field(alias="slideId", description="ID of the slide")

    def to_element(self) -> TableElement:
        return TableElement.model_validate(self.model_dump(exclude={"slide_id"}))


class AddShapeInput(ShapeOptions):
    """Input for add-shape."""

    slide_id: str = Field(alias="slideId", description="ID of the slide")

    def to_element(self) -> ShapeElement:
        return ShapeElement.model_validate(self.model_dump(exclude={"slide_id"}))


class AddChartInput(ChartOptions):
    """Input for add-chart."""

    slide_id: str = Field(alias="slideId", description="ID of the slide")

    def to_element(self) -> ChartElement:
        return ChartElement.model_validate(self.model_dump(exclude={"slide_id"}))


class GetFileUrlInput(ToolModel):
    """Input for get-file-url."""

    id: str = Field(description="ID of the presentation")


class SavePresentationInput(ToolModel):
    """Input for save-presentation."""

    id: str = Field(description="ID of the presentation")
    filepath: str = Field(min_length=1, description="Path to write the .pptx file to")
