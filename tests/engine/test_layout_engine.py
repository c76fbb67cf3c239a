"""Tests for LayoutEngine and the tree walk it drives."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from reportlab.pdfbase.pdfmetrics import stringWidth

from markup_layout.config import HeadingStyle, LayoutConfig
from markup_layout.engine.geometry import Bounds, Point
from markup_layout.engine.layout_engine import LayoutEngine
from markup_layout.engine.tree_walker import TreeWalker
from markup_layout.exceptions import (
    FontResolutionError,
    MalformedInputError,
    UnsupportedElementError,
)
from markup_layout.models.node import Node, Tag
from markup_layout.surfaces.recording import FillTextCommand, RecordingSurface, StrokeLineCommand

LONG_TEXT = (
    "Sed eu nisi ac enim congue egestas. Proin consectetur ante vitae tempus imperdiet. "
    "Etiam ut bibendum urna. Quisque vel nulla eu dui euismod malesuada."
)


def text(value):
    return Node.text_node(value)


def el(name, *children):
    return Node.element(name, *children)


def doc(*children):
    return Node.document(*children)


class TestLayoutEngine:
    """Test suite for LayoutEngine.layout."""

    def test_plain_text_single_line(self, engine, surface):
        """Test that short text is drawn once at the top-left corner."""
        end = engine.layout(surface, doc(text("Hello world!")))

        assert surface.texts == ["Hello world!"]
        assert surface.text_commands[0].point == Point(0.0, 300.0)
        assert end.x == pytest.approx(stringWidth("Hello world!", "Helvetica", 12))
        assert end.y == 300.0

    def test_paragraph_wraps_and_applies_margins(self, surface):
        """Test line wrapping inside a paragraph and the paragraph spacing."""
        config = LayoutConfig(paragraph_margin_top=0.5)
        end = LayoutEngine(config).layout(surface, doc(el("p", text(LONG_TEXT))))

        lines = surface.text_commands
        assert len(lines) >= 2
        assert all(not c.text.startswith(" ") for c in lines)
        top = 300.0 - 12 * 0.5
        for index, command in enumerate(lines):
            assert command.point.y == pytest.approx(top - 12 * index)
            assert command.point.x == 0.0
        expected_end = top - 12 * (len(lines) - 1) - 12 * (1 + 0.833)
        assert end == Point(0.0, pytest.approx(expected_end))

    def test_heading_then_paragraph(self, surface):
        """Test heading size, weight, style restoration and the gap to the next paragraph."""
        config = LayoutConfig(paragraph_margin_top=0.25)
        LayoutEngine(config).layout(surface, doc(el("h1", text("Title")), el("p", text("Body"))))

        heading, body = surface.text_commands
        assert heading.text == "Title"
        assert heading.style.font_size == 24.0
        assert heading.style.font_name == "Helvetica-Bold"
        assert body.style.font_size == 12.0
        assert body.style.font_name == "Helvetica"

        h1 = config.heading(1)
        assert heading.point.y == pytest.approx(300.0 - 12 * h1.margin_top)
        gap = heading.point.y - body.point.y
        expected = 24.0 * h1.margin_bottom + 12.0 * h1.margin_bottom + 12.0 * config.paragraph_margin_top
        assert gap == pytest.approx(expected)

    def test_non_bold_heading_level(self, engine, surface):
        engine.layout(surface, doc(el("h6", text("Small"))))
        assert surface.text_commands[0].style.font_name == "Helvetica"

    def test_custom_heading_style(self, surface):
        headings = list(LayoutConfig().headings)
        headings[1] = HeadingStyle(scale=3.0, margin_top=0.0, margin_bottom=0.0, bold=False)
        engine = LayoutEngine(LayoutConfig(headings=tuple(headings)))
        end = engine.layout(surface, doc(el("h2", text("Big"))))

        command = surface.text_commands[0]
        assert command.style.font_size == 36.0
        assert command.point.y == 300.0
        assert end == Point(0.0, 300.0)

    def test_superscript_shift_and_restore(self, engine, surface):
        """Test that a superscript is smaller, raised, and that following text returns to the baseline."""
        engine.layout(surface, doc(text("H"), el("sup", text("2")), text("O")))

        h, two, o = surface.text_commands
        small = 12 * 0.583
        assert two.style.font_size == pytest.approx(small)
        assert two.point.y == pytest.approx(300.0 + small * 0.25)
        assert two.point.x == pytest.approx(stringWidth("H", "Helvetica", 12))
        assert o.point.y == 300.0
        assert o.style.font_size == 12.0
        assert o.point.x == pytest.approx(
            stringWidth("H", "Helvetica", 12) + stringWidth("2", "Helvetica", small)
        )

    def test_subscript_lowers_baseline(self, engine, surface):
        engine.layout(surface, doc(text("H"), el("sub", text("2")), text("O")))

        _, two, o = surface.text_commands
        small = 12 * 0.583
        assert two.point.y == pytest.approx(300.0 + small * -1.25)
        assert o.point.y == 300.0

    def test_bold_and_italic(self, engine, surface):
        tree = doc(el("p", text("a "), el("strong", text("b")), text(" "), el("em", text("c"))))
        engine.layout(surface, tree)

        fonts = {c.text: c.style.font_name for c in surface.text_commands}
        assert fonts["a "] == "Helvetica"
        assert fonts["b"] == "Helvetica-Bold"
        assert fonts["c"] == "Helvetica-Oblique"

    def test_nested_bold_italic_uses_bold_italic_font(self, engine, surface):
        engine.layout(surface, doc(el("em", el("b", text("both")), text("just italic"))))

        both, italic = surface.text_commands
        assert both.style.font_name == "Helvetica-BoldOblique"
        assert italic.style.font_name == "Helvetica-Oblique"

    def test_horizontal_rule(self, engine, surface):
        end = engine.layout(surface, doc(el("hr")))

        (rule,) = surface.commands
        assert isinstance(rule, StrokeLineCommand)
        assert surface.line_commands == [rule]
        assert surface.text_commands == []
        y = 300.0 - 12 * 0.833
        assert rule.start == Point(0.0, pytest.approx(y))
        assert rule.end == Point(200.0, pytest.approx(y))
        assert rule.style.width == pytest.approx(1.2)
        assert end.y == pytest.approx(y - 12 * 0.833)

    def test_container_elements_pass_through(self, engine, surface):
        tree = doc(el("html", el("head"), el("body", text("inside"))))
        end = engine.layout(surface, tree)
        assert surface.texts == ["inside"]
        assert end.y == 300.0

    def test_cursor_y_never_increases_between_blocks(self, engine, surface):
        """Test that block-level text positions move monotonically down the surface."""
        tree = doc(
            el("h2", text("Heading")),
            el("p", text(LONG_TEXT)),
            el("hr"),
            el("h3", text("Another heading that is long enough to wrap onto a second line")),
            el("p", text(LONG_TEXT)),
        )
        end = engine.layout(surface, tree)

        ys = []
        for command in surface.commands:
            ys.append(command.point.y if isinstance(command, FillTextCommand) else command.start.y)
        assert ys == sorted(ys, reverse=True)
        assert end.y <= ys[-1]

    def test_wrapping_disabled(self, surface):
        engine = LayoutEngine(LayoutConfig(wrap_lines=False))
        engine.layout(surface, doc(el("p", text(LONG_TEXT))))
        assert len(surface.text_commands) == 1

    def test_origin_overrides_start(self, engine, surface):
        end = engine.layout(surface, doc(text("label")), origin=Point(50.0, 100.0))
        assert surface.text_commands[0].point == Point(50.0, 100.0)
        assert end.y == 100.0

    def test_unsupported_element_stops_layout(self, engine, surface):
        """Test that an unknown tag fails the pass and nothing after it is drawn."""
        tree = doc(
            el("p", text("before")),
            el("table", el("tr", el("td", text("cell")))),
            el("p", text("after")),
        )
        with pytest.raises(UnsupportedElementError) as excinfo:
            engine.layout(surface, tree)

        assert excinfo.value.tag == "table"
        assert surface.texts == ["before"]
        assert excinfo.value.position == Point(0.0, pytest.approx(300.0 - 12 * 1.833))

    def test_error_node_is_malformed_input(self, engine, surface):
        with pytest.raises(MalformedInputError):
            engine.layout(surface, doc(text("ok"), Node.error("bad token")))
        assert surface.texts == ["ok"]

    def test_unresolvable_base_font(self, surface):
        engine = LayoutEngine(LayoutConfig(font="No-Such-Font"))
        with pytest.raises(FontResolutionError) as excinfo:
            engine.layout(surface, doc(text("never drawn")))
        assert excinfo.value.position == Point(0.0, 300.0)
        assert surface.commands == []

    def test_unresolvable_bold_font(self, surface):
        engine = LayoutEngine(LayoutConfig(bold_font="No-Such-Bold"))
        with pytest.raises(FontResolutionError) as excinfo:
            engine.layout(surface, doc(text("a"), el("b", text("b")), text("c")))
        assert excinfo.value.name == "No-Such-Bold"
        assert surface.texts == ["a"]

    def test_inverted_bounds_rejected(self, engine):
        with pytest.raises(MalformedInputError):
            engine.layout(RecordingSurface(Bounds(10, 0, 0, 10)), doc(text("x")))

    def test_passes_are_independent(self, engine):
        """Test that repeated passes on one engine start from fresh state."""
        tree = doc(el("h1", text("Title")), el("p", text(LONG_TEXT)))
        first = RecordingSurface(Bounds(0, 0, 150, 400))
        second = RecordingSurface(Bounds(0, 0, 150, 400))

        end_first = engine.layout(first, tree)
        end_second = engine.layout(second, tree)

        assert end_first == end_second
        assert first.commands == second.commands

    def test_shared_engine_across_threads(self, engine):
        tree = doc(el("h2", text("Title")), el("p", text(LONG_TEXT)), el("hr"))

        def run(_):
            surface = RecordingSurface(Bounds(0, 0, 180, 400))
            return engine.layout(surface, tree), surface.commands

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(run, range(8)))

        assert all(result == results[0] for result in results)


class TestTreeWalker:
    """Test suite for TreeWalker state handling on failure."""

    def test_heading_style_restored_after_child_failure(self, make_context, surface):
        ctx = make_context(surface)
        before = ctx.style
        walker = TreeWalker(ctx)

        with pytest.raises(UnsupportedElementError):
            walker.visit(el("h1", text("Title "), el("blink", text("x"))))

        assert ctx.style is before
        assert not ctx.bold

    def test_subscript_baseline_restored_after_failure(self, make_context, surface):
        ctx = make_context(surface)
        walker = TreeWalker(ctx)

        with pytest.raises(UnsupportedElementError):
            walker.visit(el("sub", el("marquee")))

        assert ctx.cursor.y == 300.0
        assert ctx.font_size == 12.0

    def test_unknown_tag_maps_to_unsupported(self):
        assert el("table").tag is Tag.UNSUPPORTED
        assert el("strong").tag is Tag.BOLD
