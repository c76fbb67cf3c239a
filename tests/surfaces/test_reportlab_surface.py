"""Tests for the reportlab canvas surface."""

from io import BytesIO
from unittest.mock import Mock, call

import pytest
from reportlab.lib import colors
from reportlab.pdfgen.canvas import Canvas

from markup_layout.engine.geometry import Bounds, Point
from markup_layout.engine.layout_engine import LayoutEngine
from markup_layout.parser import parse_html
from markup_layout.styles.text_style import Font, LineStyle, TextStyle
from markup_layout.surfaces.reportlab_surface import ReportLabSurface


@pytest.fixture
def canvas():
    mock_canvas = Mock(spec=Canvas)
    mock_canvas._pagesize = (200.0, 300.0)
    return mock_canvas


class TestReportLabSurface:
    """Test suite for ReportLabSurface."""

    def test_bounds_default_to_page(self, canvas):
        surface = ReportLabSurface(canvas)
        assert surface.bounds == Bounds(0.0, 0.0, 200.0, 300.0)

    def test_cropped_keeps_canvas(self, canvas):
        surface = ReportLabSurface(canvas).cropped(10, 20, -30, -40)
        assert surface.canvas is canvas
        assert surface.bounds == Bounds(10.0, 20.0, 170.0, 260.0)

    def test_fill_text_draws_on_baseline(self, canvas):
        surface = ReportLabSurface(canvas)
        font = Font("Helvetica", 12.0)
        style = TextStyle(font=font, color=colors.red)

        surface.fill_text(style, Point(5.0, 300.0), "Hello")

        canvas.setFillColor.assert_called_once_with(colors.red)
        canvas.setFont.assert_called_once_with("Helvetica", 12.0)
        x, y, text = canvas.drawString.call_args[0]
        assert x == 5.0
        assert y == pytest.approx(300.0 - font.ascent)
        assert text == "Hello"
        assert canvas.method_calls[0] == call.saveState()
        assert canvas.method_calls[-1] == call.restoreState()

    def test_stroke_line(self, canvas):
        surface = ReportLabSurface(canvas)
        style = LineStyle(color=colors.blue, width=1.2)

        surface.stroke_line(style, Point(0.0, 100.0), Point(200.0, 100.0))

        canvas.setStrokeColor.assert_called_once_with(colors.blue)
        canvas.setLineWidth.assert_called_once_with(1.2)
        canvas.line.assert_called_once_with(0.0, 100.0, 200.0, 100.0)

    def test_state_restored_when_drawing_fails(self, canvas):
        canvas.drawString.side_effect = RuntimeError("boom")
        surface = ReportLabSurface(canvas)

        with pytest.raises(RuntimeError):
            surface.fill_text(TextStyle(font=Font("Helvetica", 12.0)), Point(0.0, 10.0), "x")

        canvas.restoreState.assert_called_once()

    def test_measure_width_uses_canvas(self, canvas):
        canvas.stringWidth.return_value = 42.0
        surface = ReportLabSurface(canvas)

        width = surface.measure_width(TextStyle(font=Font("Helvetica-Bold", 10.0)), "abc")

        assert width == 42.0
        canvas.stringWidth.assert_called_once_with("abc", "Helvetica-Bold", 10.0)


@pytest.mark.integration
class TestReportLabOutput:
    """Layout passes drawing onto a real canvas."""

    def test_layout_writes_pdf(self):
        buffer = BytesIO()
        pdf = Canvas(buffer, pagesize=(200, 300))
        surface = ReportLabSurface(pdf).cropped(10, 10, -10, -10)

        end = LayoutEngine().layout(
            surface, parse_html("<h1>Title</h1><p>Some <b>bold</b> text</p><hr><p>x<sup>2</sup></p>")
        )
        pdf.showPage()
        pdf.save()

        assert buffer.getvalue().startswith(b"%PDF")
        assert surface.bounds.min_y < end.y < surface.bounds.max_y
