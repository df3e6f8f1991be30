"""DrawingML tweaks python-pptx has no public API for.

Transparency, table cell borders, arrowheads, flips, right-to-left
paragraphs and the Company property all live in raw XML.
"""

from typing import Optional

from lxml import etree
from pptx.oxml.ns import qn
from pptx.oxml.xmlchemy import OxmlElement
from pptx.util import Pt

APP_PROPERTIES_PARTNAME = "/docProps/app.xml"
_EXTENDED_PROPERTIES_NS = (
    "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties"
)

# lnL/lnR/lnT/lnB must lead tcPr, in this order
_CELL_BORDER_TAGS = ("a:lnL", "a:lnR", "a:lnT", "a:lnB")


def set_fill_transparency(properties, transparency: float) -> None:
    """Apply ``transparency`` percent to the solid fill under ``properties``.

    Args:
        properties: An ``spPr`` or ``tcPr`` element holding an ``a:solidFill``
        transparency: 0 (opaque) to 100 (invisible)
    """
    for color in properties.xpath("./a:solidFill/a:srgbClr"):
        for existing in color.findall(qn("a:alpha")):
            color.remove(existing)
        if transparency <= 0:
            continue
        alpha = OxmlElement("a:alpha")
        alpha.set("val", str(int(round((100 - transparency) * 1000))))
        color.append(alpha)


def set_cell_border(cell, border_type: str, pt: float, color: str) -> None:
    """Draw the same border on all four edges of a table cell.

    Must run before the cell fill is set so the border elements keep their
    schema position at the start of ``tcPr``.
    """
    tc_pr = cell._tc.get_or_add_tcPr()
    for index, tag in enumerate(_CELL_BORDER_TAGS):
        for existing in tc_pr.findall(qn(tag)):
            tc_pr.remove(existing)
        line = OxmlElement(tag)
        if border_type == "none" or pt <= 0:
            line.append(OxmlElement("a:noFill"))
        else:
            line.set("w", str(int(Pt(pt))))
            solid = OxmlElement("a:solidFill")
            rgb = OxmlElement("a:srgbClr")
            rgb.set("val", color)
            solid.append(rgb)
            line.append(solid)
            dash = OxmlElement("a:prstDash")
            dash.set("val", "dash" if border_type == "dash" else "solid")
            line.append(dash)
        tc_pr.insert(index, line)


def set_line_ends(shape, begin: Optional[str], end: Optional[str]) -> None:
    """Set arrowheads on a shape outline or connector.

    Call after color, width and dash so the end elements are appended last.
    """
    line = shape._element.spPr.get_or_add_ln()
    for tag in ("a:headEnd", "a:tailEnd"):
        for existing in line.findall(qn(tag)):
            line.remove(existing)
    for tag, arrow in (("a:headEnd", begin), ("a:tailEnd", end)):
        if arrow is None:
            continue
        element = OxmlElement(tag)
        element.set("type", arrow)
        line.append(element)


def set_flip(shape, flip_h: bool, flip_v: bool) -> None:
    xfrm = shape._element.spPr.xfrm
    if xfrm is None:
        return
    if flip_h:
        xfrm.set("flipH", "1")
    if flip_v:
        xfrm.set("flipV", "1")


def set_paragraph_rtl(paragraph) -> None:
    paragraph._p.get_or_add_pPr().set("rtl", "1")


def convert_to_bar_3d(chart) -> None:
    """Turn a clustered column chart into a 3-D column chart.

    python-pptx cannot write 3-D bar charts, so the chart is generated as a
    plain clustered column chart and its plot element is rewritten in place.
    """
    chart_element = chart._chartSpace.find(qn("c:chart"))
    plot_area = chart_element.find(qn("c:plotArea"))
    bar_chart = plot_area.find(qn("c:barChart"))
    if bar_chart is None:
        raise ValueError("chart has no bar plot to convert")
    bar_chart.tag = qn("c:bar3DChart")
    # overlap and serLines have no place in bar3DChart
    for tag in ("c:overlap", "c:serLines"):
        for existing in bar_chart.findall(qn(tag)):
            bar_chart.remove(existing)

    if chart_element.find(qn("c:view3D")) is None:
        view = OxmlElement("c:view3D")
        for tag, value in (("c:rotX", "15"), ("c:rotY", "20"), ("c:rAngAx", "1")):
            setting = OxmlElement(tag)
            setting.set("val", value)
            view.append(setting)
        plot_area.addprevious(view)


def set_company(presentation, company: str) -> bool:
    """Write the Company extended property.

    Returns:
        False when the package carries no ``docProps/app.xml`` part
    """
    for part in presentation.part.package.iter_parts():
        if str(part.partname) != APP_PROPERTIES_PARTNAME:
            continue
        root = etree.fromstring(part.blob)
        node = root.find(f"{{{_EXTENDED_PROPERTIES_NS}}}Company")
        if node is None:
            node = etree.SubElement(root, f"{{{_EXTENDED_PROPERTIES_NS}}}Company")
        node.text = company
        # app.xml loads as a plain blob part, not an XmlPart
        part._blob = etree.tostring(root, xml_declaration=True, encoding="UTF-8", standalone=True)
        return True
    return False
