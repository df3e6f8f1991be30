"""Tests for the python-pptx rendering boundary."""

import zipfile

import pytest
from pptx import Presentation
from pptx.util import Inches, Pt

from slidedeck.rendering import DocumentProperties
from slidedeck.validation.models import (
    ChartElement,
    ShapeElement,
    TableElement,
    TextElement,
)


def _properties(**overrides):
    values = {
        "title": "Demo",
        "subject": "Testing",
        "author": "Tester",
        "company": "Acme Corp",
        "revision": "3",
        "layout": "LAYOUT_16x9",
    }
    values.update(overrides)
    return DocumentProperties(**values)


@pytest.fixture
def presentation(renderer):
    return renderer.new_presentation(_properties())


@pytest.fixture
def slide(renderer, presentation):
    result = renderer.add_slide(presentation)
    assert result.ok
    return result.value


class TestNewPresentation:
    """Tests for presentation creation and metadata."""

    def test_core_properties(self, presentation):
        core = presentation.core_properties

        assert core.title == "Demo"
        assert core.subject == "Testing"
        assert core.author == "Tester"
        assert core.revision == 3

    def test_free_form_revision_kept_as_version(self, renderer):
        presentation = renderer.new_presentation(_properties(revision="v2-draft"))

        assert presentation.core_properties.version == "v2-draft"

    @pytest.mark.parametrize(
        "layout,width,height",
        [
            ("LAYOUT_16x9", 10.0, 5.625),
            ("LAYOUT_16x10", 10.0, 6.25),
            ("LAYOUT_4x3", 10.0, 7.5),
            ("LAYOUT_WIDE", 13.333, 7.5),
        ],
    )
    def test_layout_sets_slide_size(self, renderer, layout, width, height):
        presentation = renderer.new_presentation(_properties(layout=layout))

        assert presentation.slide_width == Inches(width)
        assert presentation.slide_height == Inches(height)

    def test_company_written_to_app_properties(self, renderer, presentation, tmp_path):
        path = tmp_path / "company.pptx"
        assert renderer.save(presentation, path).ok

        with zipfile.ZipFile(path) as archive:
            app_xml = archive.read("docProps/app.xml").decode("utf-8")
        assert "<Company>Acme Corp</Company>" in app_xml


class TestSlidesAndSave:
    """Tests for slide creation and serialization."""

    def test_add_slide_appends_blank_slide(self, renderer, presentation):
        first = renderer.add_slide(presentation)
        second = renderer.add_slide(presentation)

        assert first.ok and second.ok
        assert len(presentation.slides) == 2
        assert len(first.value.shapes) == 0

    def test_save_creates_parent_directories(self, renderer, presentation, slide, tmp_path):
        path = tmp_path / "a" / "b" / "deck.pptx"
        result = renderer.save(presentation, path)

        assert result.ok
        assert result.value == path
        reopened = Presentation(str(path))
        assert len(reopened.slides) == 1

    def test_save_failure_returns_reason(self, renderer, presentation, tmp_path):
        """Saving onto a directory fails with the library's message, not an exception."""
        target = tmp_path / "occupied"
        target.mkdir()

        result = renderer.save(presentation, target)

        assert not result.ok
        assert result.reason


class TestTextElements:
    """Tests for text boxes."""

    def test_text_box_with_styling(self, renderer, slide):
        element = TextElement(
            text="Hello", x=1, y=1, w=4, h=1, bold=True, color="#FF0000", fontSize=24, fontFace="Arial"
        )

        result = renderer.place(slide, element)

        assert result.ok
        shape = slide.shapes[0]
        assert shape.left == Inches(1)
        assert shape.text_frame.text == "Hello"
        font = shape.text_frame.paragraphs[0].runs[0].font
        assert font.bold is True
        assert font.size == Pt(24)
        assert font.name == "Arial"
        assert str(font.color.rgb) == "FF0000"

    def test_rtl_marks_paragraphs(self, renderer, slide):
        element = TextElement(text="first\nsecond", x=1, y=1, w=4, h=1)

        assert renderer.place(slide, element, rtl=True).ok

        for paragraph in slide.shapes[0].text_frame.paragraphs:
            assert paragraph._p.pPr.get("rtl") == "1"


class TestTableElements:
    """Tests for tables."""

    def _table(self, **overrides):
        values = {
            "data": [
                [{"text": "Name"}, {"text": "Score", "options": {"bold": True, "color": "0000FF"}}],
                [{"text": "Ada"}, {"text": "42"}],
            ],
            "x": 0.5,
            "y": 0.5,
            "w": 6,
            "h": 2,
        }
        values.update(overrides)
        return TableElement.model_validate(values)

    def test_table_cells_and_overrides(self, renderer, slide):
        result = renderer.place(slide, self._table(fontSize=14))

        assert result.ok
        table = slide.shapes[0].table
        assert table.cell(1, 0).text == "Ada"
        header_font = table.cell(0, 1).text_frame.paragraphs[0].runs[0].font
        assert header_font.bold is True
        assert str(header_font.color.rgb) == "0000FF"
        assert header_font.size == Pt(14)

    def test_column_widths_list(self, renderer, slide):
        assert renderer.place(slide, self._table(colW=[2, 4])).ok

        table = slide.shapes[0].table
        assert table.columns[0].width == Inches(2)
        assert table.columns[1].width == Inches(4)

    def test_column_width_list_length_mismatch_fails(self, renderer, slide):
        """A colW list that does not match the column count is a rendering failure."""
        result = renderer.place(slide, self._table(colW=[1, 2, 3]))

        assert not result.ok
        assert "colW" in result.reason

    def test_border_and_fill(self, renderer, slide):
        element = self._table(
            border={"type": "dash", "pt": 2, "color": "333333"},
            fill={"color": "EEEEEE", "transparency": 50},
        )

        assert renderer.place(slide, element).ok

        xml = slide.shapes[0].table.cell(0, 0)._tc.xml
        assert "a:lnL" in xml
        assert 'val="dash"' in xml
        assert 'val="50000"' in xml

    def test_short_rows_padded(self, renderer, slide):
        element = self._table(data=[[{"text": "only"}], [{"text": "a"}, {"text": "b"}]])

        assert renderer.place(slide, element).ok
        assert slide.shapes[0].table.cell(0, 1).text == ""


class TestShapeElements:
    """Tests for shapes and lines."""

    def test_filled_shape_with_text(self, renderer, slide):
        element = ShapeElement(
            shape="roundRect",
            x=1,
            y=1,
            w=3,
            h=2,
            fill={"color": "00FF00"},
            text="Box",
            align="center",
            rectRadius=0.5,
            rotate=45,
        )

        assert renderer.place(slide, element).ok

        shape = slide.shapes[0]
        assert shape.text_frame.text == "Box"
        assert str(shape.fill.fore_color.rgb) == "00FF00"
        assert shape.rotation == 45

    def test_line_with_arrow(self, renderer, slide):
        element = ShapeElement(
            shape="line",
            x=1,
            y=1,
            w=4,
            h=0,
            line={"color": "FF0000", "width": 3, "dashType": "dash", "endArrowType": "triangle"},
        )

        assert renderer.place(slide, element).ok

        xml = slide.shapes[0]._element.xml
        assert "a:tailEnd" in xml
        assert 'type="triangle"' in xml

    def test_flip(self, renderer, slide):
        element = ShapeElement(shape="rightArrow", x=1, y=1, w=2, h=1, flipH=True)

        assert renderer.place(slide, element).ok
        assert slide.shapes[0]._element.spPr.xfrm.get("flipH") == "1"


class TestChartElements:
    """Tests for charts."""

    @pytest.mark.parametrize("chart_type", ["area", "bar", "bar3D", "doughnut", "line", "pie", "radar"])
    def test_every_chart_type_renders(self, renderer, slide, chart_type):
        element = ChartElement.model_validate(
            {
                "chartType": chart_type,
                "data": [{"name": "Sales", "labels": ["Q1", "Q2", "Q3"], "values": [1, 2, 3]}],
                "x": 1,
                "y": 1,
                "w": 5,
                "h": 3,
            }
        )

        assert renderer.place(slide, element).ok
        assert slide.shapes[0].has_chart

    def test_title_and_legend(self, renderer, slide):
        element = ChartElement.model_validate(
            {
                "chartType": "bar",
                "title": "Revenue",
                "data": [
                    {"name": "2024", "labels": ["Q1", "Q2"], "values": [1, 2]},
                    {"name": "2025", "labels": ["Q1", "Q2"], "values": [3, 4]},
                ],
                "x": 1,
                "y": 1,
                "w": 5,
                "h": 3,
            }
        )

        assert renderer.place(slide, element).ok

        chart = slide.shapes[0].chart
        assert chart.has_title
        assert chart.chart_title.text_frame.text == "Revenue"
        assert chart.has_legend
        assert len(list(chart.plots[0].series)) == 2

    def test_bar3d_written_as_3d_plot(self, renderer, slide):
        element = ChartElement.model_validate(
            {
                "chartType": "bar3D",
                "data": [{"name": "Units", "labels": ["A", "B"], "values": [5, 7]}],
                "x": 1,
                "y": 1,
                "w": 5,
                "h": 3,
            }
        )

        assert renderer.place(slide, element).ok

        xml = slide.shapes[0].chart._chartSpace.xml
        assert "c:bar3DChart" in xml
        assert "c:view3D" in xml
        assert "<c:barChart>" not in xml
