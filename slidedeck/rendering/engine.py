"""Rendering engine for presentation generation.

``DeckRenderer`` is the only module that talks to python-pptx. Every call
that can be rejected by the library returns a ``RenderResult`` instead of
raising, so handlers can surface the library's message to the caller.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pptx import Presentation
from pptx.chart.data import CategoryChartData
from pptx.dml.color import RGBColor
from pptx.enum.chart import XL_CHART_TYPE, XL_LEGEND_POSITION
from pptx.enum.dml import MSO_LINE_DASH_STYLE
from pptx.enum.shapes import MSO_CONNECTOR, MSO_SHAPE
from pptx.enum.text import PP_ALIGN
from pptx.util import Inches, Pt

from slidedeck.logger import Logger
from slidedeck.rendering import ooxml
from slidedeck.rendering.result import RenderResult
from slidedeck.validation.color_validator import normalize_hex_color
from slidedeck.validation.models import (
    ChartElement,
    Element,
    FillOptions,
    ShapeElement,
    TableElement,
    TextElement,
)

# python-pptx blank layout in the default template
BLANK_LAYOUT_INDEX = 6

# Slide sizes in inches, keyed by layout name
LAYOUT_SIZES: Dict[str, Tuple[float, float]] = {
    "LAYOUT_16x9": (10.0, 5.625),
    "LAYOUT_16x10": (10.0, 6.25),
    "LAYOUT_4x3": (10.0, 7.5),
    "LAYOUT_WIDE": (13.333, 7.5),
}

ALIGNMENTS = {
    "left": PP_ALIGN.LEFT,
    "center": PP_ALIGN.CENTER,
    "right": PP_ALIGN.RIGHT,
    "justify": PP_ALIGN.JUSTIFY,
}

DASH_STYLES = {
    "solid": MSO_LINE_DASH_STYLE.SOLID,
    "dash": MSO_LINE_DASH_STYLE.DASH,
    "dashDot": MSO_LINE_DASH_STYLE.DASH_DOT,
    "lgDash": MSO_LINE_DASH_STYLE.LONG_DASH,
    "lgDashDot": MSO_LINE_DASH_STYLE.LONG_DASH_DOT,
    "lgDashDotDot": MSO_LINE_DASH_STYLE.DASH_DOT_DOT,
    "sysDash": MSO_LINE_DASH_STYLE.SQUARE_DOT,
    "sysDot": MSO_LINE_DASH_STYLE.ROUND_DOT,
}

# "line" is drawn as a straight connector, not an autoshape
SHAPE_TYPES = {
    "rect": MSO_SHAPE.RECTANGLE,
    "roundRect": MSO_SHAPE.ROUNDED_RECTANGLE,
    "ellipse": MSO_SHAPE.OVAL,
    "triangle": MSO_SHAPE.ISOSCELES_TRIANGLE,
    "rtTriangle": MSO_SHAPE.RIGHT_TRIANGLE,
    "diamond": MSO_SHAPE.DIAMOND,
    "pentagon": MSO_SHAPE.REGULAR_PENTAGON,
    "hexagon": MSO_SHAPE.HEXAGON,
    "octagon": MSO_SHAPE.OCTAGON,
    "star5": MSO_SHAPE.STAR_5_POINT,
    "heart": MSO_SHAPE.HEART,
    "cloud": MSO_SHAPE.CLOUD,
    "can": MSO_SHAPE.CAN,
    "cube": MSO_SHAPE.CUBE,
    "chevron": MSO_SHAPE.CHEVRON,
    "smileyFace": MSO_SHAPE.SMILEY_FACE,
    "rightArrow": MSO_SHAPE.RIGHT_ARROW,
    "leftArrow": MSO_SHAPE.LEFT_ARROW,
    "upArrow": MSO_SHAPE.UP_ARROW,
    "downArrow": MSO_SHAPE.DOWN_ARROW,
}

# bar3D is written as a clustered column chart, then converted to 3-D
CHART_TYPES = {
    "area": XL_CHART_TYPE.AREA,
    "bar": XL_CHART_TYPE.COLUMN_CLUSTERED,
    "bar3D": XL_CHART_TYPE.COLUMN_CLUSTERED,
    "doughnut": XL_CHART_TYPE.DOUGHNUT,
    "line": XL_CHART_TYPE.LINE,
    "pie": XL_CHART_TYPE.PIE,
    "radar": XL_CHART_TYPE.RADAR,
}

# Single-series chart kinds that still need a legend to name their slices
_LEGEND_CHARTS = {"pie", "doughnut"}


@dataclass
class DocumentProperties:
    """Metadata applied to a new presentation."""

    title: str
    subject: str
    author: str
    company: str
    revision: str
    layout: str = "LAYOUT_16x9"


@dataclass
class _TextStyle:
    align: Optional[str] = None
    bold: Optional[bool] = None
    color: Optional[str] = None
    font_face: Optional[str] = None
    font_size: Optional[float] = None


def _rgb(color: str) -> RGBColor:
    return RGBColor.from_string(normalize_hex_color(color))


class DeckRenderer:
    """Builds presentations with python-pptx."""

    def __init__(self, logger: Logger) -> None:
        """
        Initialize the renderer.

        Args:
            logger: Logger instance
        """
        self.logger = logger

    # ------------------------------------------------------------------
    # Documents and slides
    # ------------------------------------------------------------------

    def new_presentation(self, properties: DocumentProperties) -> Presentation:
        """Create an empty presentation sized for ``properties.layout``."""
        presentation = Presentation()
        width, height = LAYOUT_SIZES[properties.layout]
        presentation.slide_width = Inches(width)
        presentation.slide_height = Inches(height)

        core = presentation.core_properties
        core.title = properties.title
        core.subject = properties.subject
        core.author = properties.author
        core.last_modified_by = properties.author
        if properties.revision.isdigit() and int(properties.revision) > 0:
            core.revision = int(properties.revision)
        else:
            # core revision is numeric; keep free-form revisions readable
            core.version = properties.revision

        if not ooxml.set_company(presentation, properties.company):
            self.logger.debug("No extended properties part, company not stored")
        return presentation

    def add_slide(self, presentation: Presentation) -> RenderResult:
        """Append a blank slide.

        Returns:
            RenderResult carrying the new python-pptx slide
        """
        try:
            layout = presentation.slide_layouts[BLANK_LAYOUT_INDEX]
            slide = presentation.slides.add_slide(layout)
        except Exception as exc:
            self.logger.warning("Slide creation failed", error=str(exc))
            return RenderResult.failure(str(exc))
        return RenderResult.success(slide)

    def save(self, presentation: Presentation, path: Path) -> RenderResult:
        """Serialize ``presentation`` to ``path``, creating parent directories."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            presentation.save(str(path))
        except Exception as exc:
            self.logger.error("Presentation save failed", path=str(path), error=str(exc))
            return RenderResult.failure(str(exc))
        self.logger.info("Presentation saved", path=str(path), size=path.stat().st_size)
        return RenderResult.success(path)

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def place(self, slide, element: Element, rtl: bool = False) -> RenderResult:
        """Apply one content element to ``slide``.

        Args:
            slide: python-pptx slide
            element: Tagged element record
            rtl: Mark every paragraph written as right-to-left

        Returns:
            RenderResult with no value on success, the library's message on failure
        """
        try:
            if isinstance(element, TextElement):
                self._add_text(slide, element, rtl)
            elif isinstance(element, TableElement):
                self._add_table(slide, element, rtl)
            elif isinstance(element, ShapeElement):
                self._add_shape(slide, element, rtl)
            elif isinstance(element, ChartElement):
                self._add_chart(slide, element)
            else:
                raise TypeError(f"Unsupported element type: {type(element).__name__}")
        except Exception as exc:
            self.logger.warning(
                "Element placement failed",
                kind=getattr(element, "kind", None),
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return RenderResult.failure(str(exc))
        self.logger.debug("Element placed", kind=element.kind)
        return RenderResult.success()

    def _add_text(self, slide, element: TextElement, rtl: bool) -> None:
        textbox = slide.shapes.add_textbox(
            Inches(element.x), Inches(element.y), Inches(element.w), Inches(element.h)
        )
        frame = textbox.text_frame
        frame.word_wrap = True
        frame.text = element.text
        style = _TextStyle(
            align=element.align,
            bold=element.bold,
            color=element.color,
            font_face=element.font_face,
            font_size=element.font_size,
        )
        self._style_paragraphs(frame.paragraphs, style, rtl)

    def _add_table(self, slide, element: TableElement, rtl: bool) -> None:
        row_count = len(element.data)
        column_count = element.column_count
        frame = slide.shapes.add_table(
            row_count,
            column_count,
            Inches(element.x),
            Inches(element.y),
            Inches(element.w),
            Inches(element.h),
        )
        table = frame.table

        for index, width in enumerate(self._spread(element.col_w, column_count, "colW")):
            table.columns[index].width = Inches(width)
        for index, height in enumerate(self._spread(element.row_h, row_count, "rowH")):
            table.rows[index].height = Inches(height)

        for row_index, row in enumerate(element.data):
            for column_index in range(column_count):
                cell = table.cell(row_index, column_index)
                spec = row[column_index] if column_index < len(row) else None
                options = spec.options if spec is not None else None

                if element.border is not None:
                    ooxml.set_cell_border(
                        cell,
                        element.border.type,
                        element.border.pt,
                        normalize_hex_color(element.border.color),
                    )

                fill = options.fill if options is not None and options.fill else element.fill
                if fill is not None:
                    self._apply_fill(cell.fill, cell._tc.get_or_add_tcPr(), fill)

                cell.text = spec.text if spec is not None else ""
                style = _TextStyle(
                    align=element.align,
                    bold=element.bold,
                    color=element.color,
                    font_face=element.font_face,
                    font_size=element.font_size,
                )
                if options is not None:
                    style = _TextStyle(
                        align=options.align or style.align,
                        bold=options.bold if options.bold is not None else style.bold,
                        color=options.color or style.color,
                        font_face=options.font_face or style.font_face,
                        font_size=options.font_size or style.font_size,
                    )
                self._style_paragraphs(cell.text_frame.paragraphs, style, rtl)

    def _add_shape(self, slide, element: ShapeElement, rtl: bool) -> None:
        if element.shape == "line":
            shape = self._add_line(slide, element)
        else:
            shape = slide.shapes.add_shape(
                SHAPE_TYPES[element.shape],
                Inches(element.x),
                Inches(element.y),
                Inches(element.w),
                Inches(element.h),
            )
            ooxml.set_flip(shape, element.flip_h, element.flip_v)
            if element.fill is not None:
                self._apply_fill(shape.fill, shape._element.spPr, element.fill)
            if element.shape == "roundRect" and element.rect_radius is not None:
                shortest = min(element.w, element.h)
                if shortest > 0:
                    shape.adjustments[0] = min(0.5, element.rect_radius / shortest)
            if element.text is not None:
                shape.text_frame.text = element.text
                self._style_paragraphs(
                    shape.text_frame.paragraphs, _TextStyle(align=element.align), rtl
                )

        if element.line is not None:
            line = element.line
            if line.color is not None:
                shape.line.color.rgb = _rgb(line.color)
            if line.width is not None:
                shape.line.width = Pt(line.width)
            if line.dash_type is not None:
                shape.line.dash_style = DASH_STYLES[line.dash_type]
            if line.begin_arrow_type is not None or line.end_arrow_type is not None:
                ooxml.set_line_ends(shape, line.begin_arrow_type, line.end_arrow_type)

        if element.rotate is not None:
            shape.rotation = element.rotate % 360

    def _add_line(self, slide, element: ShapeElement):
        begin_x, end_x = element.x, element.x + element.w
        begin_y, end_y = element.y, element.y + element.h
        if element.flip_h:
            begin_x, end_x = end_x, begin_x
        if element.flip_v:
            begin_y, end_y = end_y, begin_y
        return slide.shapes.add_connector(
            MSO_CONNECTOR.STRAIGHT,
            Inches(begin_x),
            Inches(begin_y),
            Inches(end_x),
            Inches(end_y),
        )

    def _add_chart(self, slide, element: ChartElement) -> None:
        chart_data = CategoryChartData()
        chart_data.categories = element.data[0].labels
        for series in element.data:
            chart_data.add_series(series.name, series.values)

        frame = slide.shapes.add_chart(
            CHART_TYPES[element.chart_type],
            Inches(element.x),
            Inches(element.y),
            Inches(element.w),
            Inches(element.h),
            chart_data,
        )
        chart = frame.chart
        if element.chart_type == "bar3D":
            ooxml.convert_to_bar_3d(chart)
        if element.title:
            chart.has_title = True
            chart.chart_title.text_frame.text = element.title
        if len(element.data) > 1 or element.chart_type in _LEGEND_CHARTS:
            chart.has_legend = True
            chart.legend.position = XL_LEGEND_POSITION.BOTTOM
            chart.legend.include_in_layout = False

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _spread(value, count: int, name: str) -> List[float]:
        """Expand a single size or validate a per-column/row list."""
        if value is None:
            return []
        if isinstance(value, list):
            if len(value) != count:
                raise ValueError(f"{name} has {len(value)} entries but the table has {count}")
            return value
        return [value] * count

    @staticmethod
    def _apply_fill(fill, properties, options: FillOptions) -> None:
        fill.solid()
        fill.fore_color.rgb = _rgb(options.color)
        ooxml.set_fill_transparency(properties, options.transparency)

    @staticmethod
    def _style_paragraphs(paragraphs, style: _TextStyle, rtl: bool) -> None:
        for paragraph in paragraphs:
            if style.align is not None:
                paragraph.alignment = ALIGNMENTS[style.align]
            if rtl:
                ooxml.set_paragraph_rtl(paragraph)
            for run in paragraph.runs:
                font = run.font
                if style.bold is not None:
                    font.bold = style.bold
                if style.font_size is not None:
                    font.size = Pt(style.font_size)
                if style.font_face:
                    font.name = style.font_face
                if style.color:
                    font.color.rgb = _rgb(style.color)
