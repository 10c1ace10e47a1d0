#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_decoration_renderer.py
"""Unit tests for MarkdownDecorationRenderer on synthetic syntax trees.

Trees are built with TreeBuilder and text is served by StaticTextSource, so
every capture handler is exercised without the block parser.
"""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st
from utils import StaticTextSource, nested_list_tree

from mdoverlay.decorations import Conceal, LineBackground, OverlayReplace, StyledText, VirtualLine
from mdoverlay.exceptions import ValidationError
from mdoverlay.options import RenderOptions
from mdoverlay.query import Capture, CaptureKind, CaptureRule, MarkdownQuery
from mdoverlay.renderers import ListSink, MarkdownDecorationRenderer
from mdoverlay.tree import TreeBuilder
from mdoverlay.utils.text import display_width


def _heading_tree(level: int, row: int = 0):
    builder = TreeBuilder()
    builder.open("document", 0, 0)
    builder.open("section", row, 0)
    builder.open("atx_heading", row, 0)
    marker = builder.leaf(f"atx_h{level}_marker", row, 0, row, level)
    builder.close(row + 1, 0)
    return builder.build(end=(row + 1, 0)), marker


def _task_tree(checked: bool = False):
    builder = TreeBuilder()
    builder.open("document", 0, 0)
    builder.open("list", 0, 0)
    builder.open("list_item", 0, 0)
    marker = builder.leaf("list_marker_minus", 0, 0, 0, 2)
    task_type = "task_list_marker_checked" if checked else "task_list_marker_unchecked"
    task = builder.leaf(task_type, 0, 2, 0, 5)
    return builder.build(end=(1, 0)), marker, task


def _quote_tree():
    builder = TreeBuilder()
    builder.open("document", 0, 0)
    quote = builder.open("block_quote", 0, 0)
    marker = builder.leaf("block_quote_marker", 0, 0, 0, 2)
    builder.open("paragraph", 0, 2)
    continuation = builder.leaf("block_continuation", 1, 0, 1, 2)
    builder.leaf("inline", 0, 2, 1, 6)
    return builder.build(end=(2, 0)), quote, marker, continuation


TABLE_LINES = ("|Alpha|Charlie|", "|-----|-------|", "|abcde|fghijkl|")


def _table_tree(lines=TABLE_LINES):
    builder = TreeBuilder()
    builder.open("document", 0, 0)
    builder.open("pipe_table", 0, 0)
    indices = []
    for row, (node_type, line) in enumerate(
        zip(("pipe_table_header", "pipe_table_delimiter_row", "pipe_table_row"), lines)
    ):
        indices.append(builder.leaf(node_type, row, 0, row, len(line)))
    builder.close(len(lines), 0)
    tree = builder.build(end=(len(lines), 0))
    source = StaticTextSource(dict(zip(indices, lines)), lines=lines)
    return tree, source


@pytest.mark.unit
class TestRendererSetup:
    """Test renderer construction."""

    def test_default_options(self) -> None:
        """Test that the renderer falls back to default options."""
        assert MarkdownDecorationRenderer().options == RenderOptions()

    def test_invalid_options_type(self) -> None:
        """Test that options of the wrong type are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            MarkdownDecorationRenderer(options={"table_style": "off"})  # type: ignore[arg-type]
        assert exc_info.value.parameter_name == "options"


@pytest.mark.unit
class TestHeadingDecoration:
    """Test heading capture rendering."""

    def test_level_one_defaults(self) -> None:
        """Test a level one heading with default glyphs."""
        tree, marker = _heading_tree(1)
        decorations = MarkdownDecorationRenderer().render(tree.root, StaticTextSource({marker: "#"}))
        assert decorations == [
            LineBackground(row=0, end_row=1, style="DiffAdd", chunks=(StyledText.of("◉ ", "markdownH1", "DiffAdd"),))
        ]

    def test_glyph_cycles_and_background_clamps(self) -> None:
        """Test a level three heading with two glyphs and two backgrounds."""
        options = RenderOptions.from_dict(
            {"headings": ["◆", "◇"], "highlights": {"heading": {"backgrounds": ["H1bg", "H2bg"]}}}
        )
        tree, marker = _heading_tree(3, row=4)
        (decoration,) = MarkdownDecorationRenderer(options).render(tree.root, StaticTextSource({marker: "###"}))
        assert decoration.row == 4
        assert decoration.end_row == 5
        assert decoration.style == "H2bg"
        assert decoration.chunks == (StyledText.of("   ◆", "markdownH3", "H2bg"),)

    def test_wide_glyph_has_no_padding(self) -> None:
        """Test that a glyph wider than the marker slot gets no padding."""
        options = RenderOptions(headings=("◉◉◉◉ ",))
        tree, marker = _heading_tree(1)
        (decoration,) = MarkdownDecorationRenderer(options).render(tree.root, StaticTextSource({marker: "#"}))
        assert decoration.text == "◉◉◉◉ "

    @given(level=st.integers(min_value=1, max_value=6), glyph=st.text(alphabet="◉○✸ ", min_size=1, max_size=4))
    def test_padding_fills_marker_slot(self, level: int, glyph: str) -> None:
        """Property: the overlay covers the marker and its space, or the glyph if wider."""
        tree, marker = _heading_tree(level)
        renderer = MarkdownDecorationRenderer(RenderOptions(headings=(glyph,)))
        (decoration,) = renderer.render(tree.root, StaticTextSource({marker: "#" * level}))
        assert display_width(decoration.text) == max(level + 1, display_width(glyph))
        assert decoration.text.endswith(glyph)


@pytest.mark.unit
class TestSimpleDecorations:
    """Test thematic break and code block rendering."""

    def test_dash_spans_view(self) -> None:
        """Test that a thematic break is overdrawn across the view width."""
        builder = TreeBuilder()
        builder.open("document", 0, 0)
        builder.leaf("thematic_break", 2, 0, 3, 0)
        tree = builder.build(end=(3, 0))
        (decoration,) = MarkdownDecorationRenderer().render(tree.root, StaticTextSource(width=10))
        assert decoration == OverlayReplace(2, 0, None, None, (StyledText.of("─" * 10, "LineNr"),))

    def test_code_block_background(self) -> None:
        """Test the code block background row span."""
        builder = TreeBuilder()
        builder.open("document", 0, 0)
        builder.leaf("fenced_code_block", 2, 0, 5, 0)
        tree = builder.build(end=(6, 0))
        decorations = MarkdownDecorationRenderer().render(tree.root, StaticTextSource())
        assert decorations == [LineBackground(row=2, end_row=5, style="ColorColumn")]

    def test_code_block_without_rows_skipped(self) -> None:
        """Test that a code block with an empty row span is skipped."""
        builder = TreeBuilder()
        builder.open("document", 0, 0)
        builder.leaf("fenced_code_block", 2, 0, 2, 3)
        tree = builder.build(end=(3, 0))
        assert MarkdownDecorationRenderer().render(tree.root, StaticTextSource()) == []


@pytest.mark.unit
class TestListMarkerDecoration:
    """Test bullet and checkbox rendering."""

    def test_nested_bullet_keeps_indent(self) -> None:
        """Test a second level bullet with its indentation."""
        tree, marker = nested_list_tree(2)
        renderer = MarkdownDecorationRenderer(RenderOptions(bullets=("•", "◦", "▪")))
        decorations = renderer.render_capture(Capture("list_marker", tree.node(marker)), StaticTextSource({marker: "  - "}))
        assert decorations == [OverlayReplace(1, 2, 1, 4, (StyledText.of("  ◦", "Normal"),))]

    def test_bullets_cycle_with_depth(self) -> None:
        """Test that depth past the bullet list wraps around."""
        tree, marker = nested_list_tree(5)
        renderer = MarkdownDecorationRenderer(RenderOptions(bullets=("•", "◦")))
        (decoration,) = renderer.render_capture(Capture("list_marker", tree.node(marker)), StaticTextSource({marker: "- "}))
        assert decoration.text == "•"

    def test_marker_before_checkbox_is_concealed(self) -> None:
        """Test that a bullet followed by a task marker is hidden."""
        tree, marker, task = _task_tree()
        source = StaticTextSource({marker: "- ", task: "[ ]"})
        decorations = MarkdownDecorationRenderer().render(tree.root, source)
        assert decorations[0] == Conceal(row=0, start_col=0, end_row=0, end_col=2)

    @pytest.mark.parametrize(
        "checked,expected",
        [
            (False, StyledText.of(" ☐ ", "@markup.list.unchecked")),
            (True, StyledText.of(" ☑ ", "@markup.heading")),
        ],
    )
    def test_checkbox_glyph(self, checked: bool, expected: StyledText) -> None:
        """Test that task markers are overdrawn with padded glyphs."""
        tree, marker, task = _task_tree(checked)
        source = StaticTextSource({marker: "- ", task: "[x]" if checked else "[ ]"})
        decorations = MarkdownDecorationRenderer().render(tree.root, source)
        assert decorations[1] == OverlayReplace(0, 2, 0, 5, (expected,))

    def test_checkbox_wider_than_marker_skipped(self) -> None:
        """Test that a checkbox glyph wider than ``[ ]`` is not drawn."""
        options = RenderOptions.from_dict({"checkbox": {"unchecked": "[TODO]"}})
        tree, marker, task = _task_tree()
        source = StaticTextSource({marker: "- ", task: "[ ]"})
        decorations = MarkdownDecorationRenderer(options).render(tree.root, source)
        assert decorations == [Conceal(row=0, start_col=0, end_row=0, end_col=2)]


@pytest.mark.unit
class TestQuoteDecoration:
    """Test quote marker and callout rendering."""

    def test_plain_quote(self) -> None:
        """Test that quote markers become bars in the quote style."""
        tree, quote, marker, continuation = _quote_tree()
        source = StaticTextSource({quote: "> plain\n> text", marker: "> ", continuation: "> "})
        decorations = MarkdownDecorationRenderer().render(tree.root, source)
        assert decorations == [
            OverlayReplace(0, 0, 0, 2, (StyledText.of("┃ ", "@markup.quote"),)),
            OverlayReplace(1, 0, 1, 2, (StyledText.of("┃ ", "@markup.quote"),)),
        ]

    def test_callout_style(self) -> None:
        """Test that a callout quote uses its callout style on every marker."""
        tree, quote, marker, continuation = _quote_tree()
        source = StaticTextSource({quote: "> [!NOTE]\n> body", marker: "> ", continuation: "> "})
        decorations = MarkdownDecorationRenderer().render(tree.root, source)
        assert [decoration.chunks[0].styles for decoration in decorations] == [("DiagnosticInfo",)] * 2

    def test_custom_quote_glyph(self) -> None:
        """Test a custom quote replacement glyph."""
        tree, quote, marker, continuation = _quote_tree()
        source = StaticTextSource({quote: "> quote", marker: "> "})
        renderer = MarkdownDecorationRenderer(RenderOptions(quote="▌"))
        decorations = renderer.render(tree.root, source)
        assert decorations[0].text == "▌ "

    def test_nested_marker_replaces_every_bracket(self) -> None:
        """Test that a marker covering two levels replaces both brackets."""
        tree, quote, marker, continuation = _quote_tree()
        source = StaticTextSource({quote: ">> deep", marker: ">>"})
        decorations = MarkdownDecorationRenderer().render(tree.root, source)
        assert decorations[0].text == "┃┃"


@pytest.mark.unit
class TestTableDecoration:
    """Test pipe table rendering."""

    def test_full_style(self) -> None:
        """Test borders and redrawn rows in full style."""
        tree, source = _table_tree()
        decorations = MarkdownDecorationRenderer().render(tree.root, source)
        assert decorations == [
            VirtualLine(row=0, col=0, chunks=(StyledText.of("┌─────┬───────┐", "@markup.heading"),), above=True),
            VirtualLine(row=2, col=0, chunks=(StyledText.of("└─────┴───────┘", "Normal"),), above=False),
            OverlayReplace(0, 0, 0, 15, (StyledText.of("│Alpha│Charlie│", "@markup.heading"),)),
            OverlayReplace(1, 0, 1, 15, (StyledText.of("├─────┼───────┤", "@markup.heading"),)),
            OverlayReplace(2, 0, 2, 15, (StyledText.of("│abcde│fghijkl│", "Normal"),)),
        ]

    def test_normal_style_has_no_borders(self) -> None:
        """Test that normal style only redraws rows."""
        tree, source = _table_tree()
        decorations = MarkdownDecorationRenderer(RenderOptions(table_style="normal")).render(tree.root, source)
        assert [decoration.kind for decoration in decorations] == ["overlay"] * 3

    def test_off_style(self) -> None:
        """Test that tables are left alone when the table style is off."""
        tree, source = _table_tree()
        assert MarkdownDecorationRenderer(RenderOptions(table_style="off")).render(tree.root, source) == []

    def test_unequal_rows_skip_borders(self) -> None:
        """Test that misaligned tables get rows but no borders."""
        tree, source = _table_tree(("|Alpha|Charlie|", "|-----|-------|", "|a|b|"))
        decorations = MarkdownDecorationRenderer().render(tree.root, source)
        assert all(decoration.kind == "overlay" for decoration in decorations)
        assert len(decorations) == 3

    def test_table_ending_mid_line(self) -> None:
        """Test that a table closed by end of input still reaches its last row."""
        builder = TreeBuilder()
        builder.open("document", 0, 0)
        builder.open("pipe_table", 0, 0)
        for row, node_type in enumerate(("pipe_table_header", "pipe_table_delimiter_row", "pipe_table_row")):
            builder.leaf(node_type, row, 0, row, 15)
        builder.close(2, 15)
        tree = builder.build(end=(2, 15))
        source = StaticTextSource(lines=TABLE_LINES)
        renderer = MarkdownDecorationRenderer(RenderOptions(table_style="full"))
        bottom = renderer.render(tree.root, source)[1]
        assert bottom.row == 2
        assert bottom.text == "└─────┴───────┘"


@pytest.mark.unit
class TestRenderDriver:
    """Test the capture loop, sinks and logging."""

    def test_unknown_capture_logged_and_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a capture without a renderer produces nothing but an error record."""
        tree, marker = _heading_tree(1)
        query = MarkdownQuery().with_rule(CaptureRule("atx_heading", "html"))
        renderer = MarkdownDecorationRenderer(query=query)
        with caplog.at_level(logging.ERROR, logger="mdoverlay.renderers.markdown"):
            decorations = renderer.render(tree.root, StaticTextSource({marker: "#"}))
        assert len(decorations) == 1
        assert "Unhandled markdown capture: html" in caplog.text

    @pytest.mark.parametrize("kind", list(CaptureKind))
    def test_every_capture_kind_has_a_renderer(self, kind: CaptureKind, caplog: pytest.LogCaptureFixture) -> None:
        """Test that each known capture name dispatches to a renderer."""
        builder = TreeBuilder()
        builder.open("document", 0, 0)
        tree = builder.build(end=(1, 0))
        with caplog.at_level(logging.ERROR, logger="mdoverlay.renderers.markdown"):
            MarkdownDecorationRenderer().render_capture(Capture(kind.value, tree.root), StaticTextSource())
        assert "Unhandled" not in caplog.text

    def test_sink_receives_every_decoration(self) -> None:
        """Test that the sink sees decorations in emission order."""
        tree, source = _table_tree()
        sink = ListSink()
        decorations = MarkdownDecorationRenderer().render(tree.root, source, sink)
        assert sink.decorations == decorations

    def test_render_is_repeatable(self) -> None:
        """Test that rendering twice yields equal results."""
        tree, marker, task = _task_tree()
        source = StaticTextSource({marker: "- ", task: "[ ]"})
        renderer = MarkdownDecorationRenderer()
        assert renderer.render(tree.root, source) == renderer.render(tree.root, source)

    def test_subtree_render(self) -> None:
        """Test that only captures under the given root are rendered."""
        tree, marker, task = _task_tree()
        source = StaticTextSource({marker: "- ", task: "[ ]"})
        decorations = MarkdownDecorationRenderer().render(tree.node(task), source)
        assert [decoration.kind for decoration in decorations] == ["overlay"]
