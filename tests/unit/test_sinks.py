"""Unit tests for the sink layout primitives."""

import io

import pytest
from pypdf import PdfReader
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.platypus import ListFlowable, Paragraph, Table

from pagefit.resume.geometry import A4, PageGeometry, ScalePair
from pagefit.resume.sinks import LEADING, CanvasSink, FlowOp, MeasuringSink, RuleOp, Run, TrackedLine
from pagefit.resume.templates import TEMPLATES

SMALL_PAGE = PageGeometry(width=200, height=100, margin_top=10, margin_right=10, margin_bottom=10, margin_left=10)


def flow_ops(sink: CanvasSink) -> list[FlowOp]:
    return [op for op in sink.ops if isinstance(op, FlowOp)]


def line_widths(op: FlowOp) -> list[float]:
    return op.flowable.getActualLineWidths0()


def test_single_line_advances_one_line_box():
    sink = MeasuringSink()
    sink.text("Hello", "Helvetica", 10)
    assert sink.cursor_y == pytest.approx(10 * LEADING)
    assert sink.page_count == 1


def test_line_gap_added_per_line():
    sink = MeasuringSink()
    sink.text("Hello", "Helvetica", 10, line_gap=2)
    assert sink.cursor_y == pytest.approx(10 * LEADING + 2)


def test_wrapping_stays_inside_margins():
    sink = CanvasSink()
    sink.text("word " * 200, "Helvetica", 10)
    (op,) = flow_ops(sink)
    assert isinstance(op.flowable, Paragraph)
    assert op.x == A4.margin_left
    assert op.width == A4.content_width
    widths = line_widths(op)
    assert len(widths) > 1
    assert max(widths) <= op.width + 1e-6
    assert sink.cursor_y == pytest.approx(len(widths) * 12)


def test_long_word_is_broken():
    sink = CanvasSink()
    sink.text("x" * 400, "Helvetica", 10)
    (op,) = flow_ops(sink)
    assert len(line_widths(op)) > 1
    assert max(line_widths(op)) <= A4.content_width + 1e-6
    assert op.text.replace(" ", "") == "x" * 400


def test_markup_characters_are_escaped():
    sink = CanvasSink()
    sink.text("R&D <Lab> \"Quotes\"", "Helvetica", 10, link="https://example.com/?a=1&b=2")
    assert "R&D <Lab>" in sink.text_content()
    assert sink.to_bytes().startswith(b"%PDF")


def test_blank_text_draws_nothing():
    sink = CanvasSink()
    sink.text("   ", "Helvetica", 10)
    assert sink.ops == []
    assert sink.cursor_y == 0


def test_trailing_space_is_not_committed():
    sink = MeasuringSink()
    sink.text("Hello", "Helvetica", 10)
    sink.space(50)
    assert sink.cursor_y == pytest.approx(12)
    sink.text("World", "Helvetica", 10)
    assert sink.cursor_y == pytest.approx(12 + 50 + 12)


def test_page_break_increments_page_count():
    sink = MeasuringSink(SMALL_PAGE)
    for _ in range(10):
        sink.text("line", "Helvetica", 10)
    # usable height 80 holds 6 lines of 12pt
    assert sink.page_count == 2
    assert sink.cursor_y == pytest.approx(4 * 12)


def test_page_break_drops_pending_space_height():
    sink = MeasuringSink(SMALL_PAGE)
    sink.text("line", "Helvetica", 10)
    sink.space(75)
    sink.text("line", "Helvetica", 10)
    assert sink.page_count == 2
    assert sink.cursor_y == pytest.approx(12)


def test_long_paragraph_splits_across_pages():
    sink = CanvasSink(SMALL_PAGE)
    sink.text("alpha beta gamma delta " * 12, "Helvetica", 10)
    first, second = flow_ops(sink)
    assert (first.page, second.page) == (1, 2)
    assert first.height == pytest.approx(6 * 12)
    assert sink.page_count == 2
    assert sink.cursor_y == pytest.approx(second.height)
    assert sink.text_content().count("delta") == 12


def test_measuring_and_canvas_sinks_agree(full_resume):
    for renderer in TEMPLATES.values():
        measuring = MeasuringSink()
        canvas_sink = CanvasSink()
        renderer.render(measuring, full_resume, 0.9, 0.9)
        renderer.render(canvas_sink, full_resume, 0.9, 0.9)
        assert measuring.cursor_y == canvas_sink.cursor_y
        assert measuring.page_count == canvas_sink.page_count
        assert measuring.headings == canvas_sink.headings


def test_short_row_is_one_line():
    sink = CanvasSink()
    sink.row([Run("Engineer", "Helvetica-Bold"), Run(" | Acme", "Helvetica")], 10, Run("2020 - 2024", "Helvetica"))
    (op,) = flow_ops(sink)
    assert isinstance(op.flowable, Table)
    assert op.text == "Engineer | Acme 2020 - 2024"
    assert sink.cursor_y == pytest.approx(12)


def test_long_row_wraps_instead_of_truncating():
    company = "International Consolidated Business Machines Research and Development Laboratories"
    sink = CanvasSink()
    sink.row(
        [Run("Principal Staff Software Engineer", "Helvetica-Bold"), Run(f" | {company}", "Helvetica")],
        10,
        Run("January 2019 - Present", "Helvetica"),
    )
    text = sink.text_content()
    assert company in text
    assert "January 2019 - Present" in text
    assert "..." not in text
    assert sink.cursor_y > 12


def test_row_without_right_text_is_a_paragraph():
    sink = CanvasSink()
    sink.row([Run("Project", "Helvetica-Bold")], 10, Run("", "Helvetica"))
    (op,) = flow_ops(sink)
    assert isinstance(op.flowable, Paragraph)


def test_alignment_maps_to_paragraph_style():
    sink = CanvasSink()
    sink.text("Centered", "Helvetica", 10, align="center")
    sink.text("alpha beta " * 40, "Helvetica", 10, align="justify")
    centered, justified = flow_ops(sink)
    assert centered.flowable.style.alignment == TA_CENTER
    assert justified.flowable.style.alignment == TA_JUSTIFY


def test_bullet_list_hangs_wrapped_lines():
    sink = CanvasSink()
    sink.bullet_list(["text " * 60, "", "short"], "Helvetica", 10, indent=10, hang=10)
    (op,) = flow_ops(sink)
    assert isinstance(op.flowable, ListFlowable)
    assert op.x == pytest.approx(A4.margin_left + 10)
    assert op.width == pytest.approx(A4.content_width - 10)
    assert op.text.splitlines()[1] == "short"
    assert sink.cursor_y == pytest.approx(op.height)
    assert sink.cursor_y >= 3 * 12


def test_bullet_list_of_blanks_draws_nothing():
    sink = CanvasSink()
    sink.bullet_list(["", "  "], "Helvetica", 10)
    assert sink.ops == []


def test_bullet_list_splits_across_pages():
    sink = MeasuringSink(SMALL_PAGE)
    sink.bullet_list(["item"] * 10, "Helvetica", 10)
    assert sink.page_count == 2
    assert sink.cursor_y == pytest.approx(4 * 12)


def test_mixed_runs_keep_fonts():
    sink = CanvasSink()
    sink.paragraph([Run("Tools: ", "Helvetica-Bold"), Run("Git, Make", "Helvetica")], 10)
    (op,) = flow_ops(sink)
    assert "Tools:" in op.text
    assert "Make" in op.text
    assert 'name="Helvetica-Bold"' in op.flowable.text
    assert 'name="Helvetica"' in op.flowable.text


def test_heading_recorded():
    sink = MeasuringSink()
    sink.heading("SKILLS", "Helvetica-Bold", 11)
    assert sink.headings == ["SKILLS"]


def test_tracked_heading_is_single_line():
    sink = CanvasSink()
    sink.heading("SKILLS", "Helvetica-Bold", 11, char_space=2)
    (op,) = flow_ops(sink)
    assert isinstance(op.flowable, TrackedLine)
    assert sink.cursor_y == pytest.approx(11 * LEADING)


def test_overlong_tracked_heading_wraps():
    sink = CanvasSink(SMALL_PAGE)
    sink.heading("VERY LONG SECTION TITLE " * 3, "Helvetica-Bold", 11, char_space=2)
    (op,) = flow_ops(sink)
    assert isinstance(op.flowable, Paragraph)


def test_rule_spans_margins():
    sink = CanvasSink()
    sink.text("Title", "Helvetica", 10)
    sink.rule(offset=2)
    rule = [op for op in sink.ops if isinstance(op, RuleOp)][0]
    assert rule.x1 == A4.margin_left
    assert rule.x2 == A4.width - A4.margin_right
    assert rule.y == pytest.approx(A4.margin_top + 12 + 2)


def test_canvas_bytes_are_pdf_and_deterministic():
    def build() -> bytes:
        sink = CanvasSink()
        sink.text("Hello PDF", "Helvetica", 12, link="https://example.com")
        sink.bullet_list(["one", "two"], "Helvetica", 10)
        sink.row([Run("Left", "Helvetica")], 10, Run("Right", "Helvetica"))
        sink.heading("TRACKED", "Helvetica-Bold", 11, char_space=2)
        return sink.to_bytes(title="Test")

    first = build()
    assert first.startswith(b"%PDF")
    assert first == build()


def test_canvas_emits_one_page_per_page_count():
    sink = CanvasSink(SMALL_PAGE)
    for _ in range(10):
        sink.text("line", "Helvetica", 10)
    assert sink.page_count == 2
    assert len(PdfReader(io.BytesIO(sink.to_bytes())).pages) == 2


def test_scale_pair_rejects_non_positive():
    with pytest.raises(ValueError):
        ScalePair(0, 1)
