"""Tests for the SVG start-tag scanner."""

from tests.conftest import BAR_CHART_SVG, CIRCLE_SVG, INKSCAPE_SVG, LINKED_SVG

from svgattrs.attributes.ids import Attribute
from svgattrs.svg.scanner import scan_svg


def test_scan_circle():
    elements = scan_svg(CIRCLE_SVG)
    assert [el.tag for el in elements] == ["svg", "circle"]
    root, circle = elements
    assert root.properties.get(Attribute.VIEW_BOX) == "0 0 24 24"
    assert root.properties.get(Attribute.STROKE_LINEJOIN) == "round"
    assert root.properties.unrecognized == ["xmlns"]
    assert [attr for _, attr, _ in circle.properties] == [Attribute.CX, Attribute.CY, Attribute.R]


def test_scan_bar_chart():
    elements = scan_svg(BAR_CHART_SVG)
    lines = [el for el in elements if el.tag == "line"]
    assert len(lines) == 3
    for line in lines:
        assert {attr for _, attr, _ in line.properties} == {Attribute.X1, Attribute.X2, Attribute.Y1, Attribute.Y2}


def test_scan_skips_comments_and_declaration(inkscape_svg):
    elements = scan_svg(inkscape_svg)
    assert [el.tag for el in elements] == ["svg", "g", "rect"]


def test_scan_foreign_attributes_do_not_stop_scanning():
    root, group, rect = scan_svg(INKSCAPE_SVG)
    assert root.properties.unrecognized == ["xmlns", "xmlns:inkscape", "inkscape:version"]
    assert group.properties.unrecognized == ["inkscape:label", "inkscape:groupmode"]
    assert group.properties.get(Attribute.ID) == "layer1"
    assert rect.properties.get(Attribute.FILL) == "#4ECDC4"
    assert rect.properties.unrecognized == ["data-name"]


def test_scan_links():
    uses = [el for el in scan_svg(LINKED_SVG) if el.tag == "use"]
    assert [el.properties.href for el in uses] == ["#dot", "#dot", "#dot"]


def test_source_span():
    text = CIRCLE_SVG
    circle = scan_svg(text)[1]
    start, end = circle.source_span
    assert text[start:end] == '<circle cx="12" cy="12" r="10"/>'


def test_scan_circle_fixture(circle_svg):
    assert len(scan_svg(circle_svg)) == 2


def test_scan_not_svg():
    assert scan_svg("not svg at all") == []


def test_scan_keeps_element_with_unquoted_and_valueless_attributes():
    elements = scan_svg('<svg><rect x=5 width="3" hidden/><circle r="1"/></svg>')
    assert [el.tag for el in elements] == ["svg", "rect", "circle"]
    rect = elements[1]
    assert rect.properties.get(Attribute.X) == "5"
    assert rect.properties.get(Attribute.WIDTH) == "3"


def test_scan_logs_unreadable_tag(caplog):
    caplog.set_level("DEBUG", logger="svgattrs.svg.scanner")
    elements = scan_svg('<svg><rect x="1></svg>')
    assert [el.tag for el in elements] == ["svg"]
    assert "Skipping unreadable <rect> start tag at offset 5" in caplog.text


def test_scan_does_not_log_openings_inside_values(caplog):
    caplog.set_level("DEBUG", logger="svgattrs.svg.scanner")
    elements = scan_svg('<svg><text class="<b"/></svg>')
    assert [el.tag for el in elements] == ["svg", "text"]
    assert "Skipping unreadable" not in caplog.text
