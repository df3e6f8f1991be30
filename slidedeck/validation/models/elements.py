"""Content element option records.

Each element kind has its own strictly typed record. The ``*Options`` classes
hold the fields shared by the tool input and the element; the ``*Element``
classes add the ``kind`` tag the renderer dispatches on.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, model_validator

from .common import (
    Alignment,
    BorderOptions,
    ChartKind,
    FillOptions,
    FontSize,
    HexColor,
    LineOptions,
    Placement,
    ShapeKind,
    ToolModel,
)

ColumnWidth = Annotated[float, Field(gt=0, le=10)]
RowHeight = Annotated[float, Field(gt=0, le=5.5)]


class TextOptions(Placement):
    text: str
    align: Optional[Alignment] = None
    bold: bool = False
    color: Optional[HexColor] = None
    font_face: Optional[str] = Field(default=None, alias="fontFace")
    font_size: FontSize = Field(default=18, alias="fontSize")


class CellOptions(ToolModel):
    """Per-cell overrides of the table-level styling."""

    align: Optional[Alignment] = None
    bold: Optional[bool] = None
    color: Optional[HexColor] = None
    fill: Optional[FillOptions] = None
    font_face: Optional[str] = Field(default=None, alias="fontFace")
    font_size: Optional[FontSize] = Field(default=None, alias="fontSize")


class TableCell(ToolModel):
    text: str = ""
    options: Optional[CellOptions] = None


TableRow = Annotated[List[TableCell], Field(min_length=1)]


class TableOptions(Placement):
    data: List[TableRow] = Field(min_length=1, description="Rows of cells")
    col_w: Optional[Union[ColumnWidth, List[ColumnWidth]]] = Field(default=None, alias="colW")
    row_h: Optional[Union[RowHeight, List[RowHeight]]] = Field(default=None, alias="rowH")
    align: Optional[Alignment] = None
    bold: bool = False
    border: Optional[BorderOptions] = None
    color: Optional[HexColor] = None
    fill: Optional[FillOptions] = None
    font_size: FontSize = Field(default=18, alias="fontSize")
    font_face: Optional[str] = Field(default=None, alias="fontFace")

    @property
    def column_count(self) -> int:
        return max(len(row) for row in self.data)


class ShapeOptions(Placement):
    shape: ShapeKind
    align: Optional[Alignment] = None
    flip_h: bool = Field(default=False, alias="flipH")
    flip_v: bool = Field(default=False, alias="flipV")
    line: Optional[LineOptions] = None
    rect_radius: Optional[float] = Field(default=None, ge=0, le=1, alias="rectRadius")
    rotate: Optional[float] = Field(default=None, ge=-360, le=360)
    fill: Optional[FillOptions] = None
    text: Optional[str] = None


class ChartSeries(ToolModel):
    name: str
    labels: List[str]
    values: List[float]

    @model_validator(mode="after")
    def validate_point_count(self) -> "ChartSeries":
        """Every label needs exactly one value."""
        if len(self.values) != len(self.labels):
            raise ValueError(
                f"Series '{self.name}' has {len(self.labels)} labels but {len(self.values)} values"
            )
        return self


class ChartOptions(Placement):
    chart_type: ChartKind = Field(alias="chartType")
    data: List[ChartSeries] = Field(min_length=1)
    title: Optional[str] = None

    @model_validator(mode="after")
    def validate_shared_labels(self) -> "ChartOptions":
        """All series are plotted against the first series' labels."""
        expected = len(self.data[0].labels)
        for series in self.data[1:]:
            if len(series.labels) != expected:
                raise ValueError(
                    f"Series '{series.name}' has {len(series.labels)} labels; "
                    f"every series needs {expected} to match the first series"
                )
        return self


class TextElement(TextOptions):
    kind: Literal["text"] = "text"


class TableElement(TableOptions):
    kind: Literal["table"] = "table"


class ShapeElement(ShapeOptions):
    kind: Literal["shape"] = "shape"


class ChartElement(ChartOptions):
    kind: Literal["chart"] = "chart"


Element = Annotated[
    Union[TextElement, TableElement, ShapeElement, ChartElement],
    Field(discriminator="kind"),
]
