"""Drawing surfaces for template renderers.

Every block of text becomes a reportlab platypus flowable (Paragraph,
ListFlowable or a two-column Table for rows). PageSink wraps it against the
content width, commits the wrapped height to the cursor and splits it across
pages the way a Frame would. The measuring sink stops there; the canvas sink
also keeps the placed flowables and draws them with drawOn(). Both advance
the cursor identically, which is what makes a dry run a faithful prediction
of the final page.
"""

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence
from xml.sax.saxutils import escape, quoteattr

from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import getAscent, stringWidth
from reportlab.pdfgen import canvas
from reportlab.platypus import Flowable, ListFlowable, ListItem, Paragraph, Table, TableStyle

from pagefit.resume.geometry import A4, PageGeometry, PageMetrics

BLACK = "#000000"
LEADING = 1.2
FUZZ = 1e-6

ALIGNMENTS = {
    "left": TA_LEFT,
    "center": TA_CENTER,
    "right": TA_RIGHT,
    "justify": TA_JUSTIFY,
}

ROW_STYLE = TableStyle(
    [
        ("LEFTPADDING", (0, 0), (-1, -1), 0),
        ("RIGHTPADDING", (0, 0), (-1, -1), 0),
        ("TOPPADDING", (0, 0), (-1, -1), 0),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]
)


@dataclass(frozen=True)
class Run:
    """A span of text sharing one font and color."""

    text: str
    font: str
    color: str = BLACK
    link: str | None = None
    underline: bool = False


def text_width(text: str, font: str, size: float, char_space: float = 0.0) -> float:
    """Rendered width of text in points."""
    return stringWidth(text, font, size) + char_space * len(text)


def run_markup(run: Run) -> str:
    """Paragraph markup for one run."""
    text = escape(run.text)
    if run.underline:
        text = f"<u>{text}</u>"
    text = f'<font name="{run.font}" color="{run.color}">{text}</font>'
    if run.link:
        text = f"<a href={quoteattr(run.link)}>{text}</a>"
    return text


def plain_text(runs: Sequence[Run]) -> str:
    return " ".join("".join(run.text for run in runs).split())


class TrackedLine(Flowable):
    """One line of letter-spaced text; Paragraph has no character spacing."""

    def __init__(self, run: Run, size: float, char_space: float, align: str = "left"):
        super().__init__()
        self.run = run
        self.size = size
        self.char_space = char_space
        self.align = align

    @property
    def text_width(self) -> float:
        return text_width(self.run.text, self.run.font, self.size, self.char_space)

    def wrap(self, availWidth, availHeight):
        self.width = availWidth
        self.height = self.size * LEADING
        return self.width, self.height

    def draw(self):
        x = 0.0
        if self.align == "center":
            x = (self.width - self.text_width) / 2
        elif self.align == "right":
            x = self.width - self.text_width
        baseline = self.height - (LEADING - 1) / 2 * self.size - getAscent(self.run.font, self.size)

        text = self.canv.beginText(x, baseline)
        text.setFont(self.run.font, self.size)
        text.setFillColor(HexColor(self.run.color))
        text.setCharSpace(self.char_space)
        text.textOut(self.run.text)
        self.canv.drawText(text)


@dataclass(frozen=True)
class FlowOp:
    """A wrapped flowable placed with its top edge y points below the page top."""

    page: int
    x: float
    y: float
    width: float
    height: float
    flowable: Flowable
    text: str

    def draw(self, c: canvas.Canvas, page_height: float) -> None:
        self.flowable.drawOn(c, self.x, page_height - self.y - self.height)


@dataclass(frozen=True)
class RuleOp:
    """Horizontal line from x1 to x2 at y (measured down from the top edge)."""

    page: int
    x1: float
    x2: float
    y: float
    thickness: float
    color: str

    def draw(self, c: canvas.Canvas, page_height: float) -> None:
        c.setStrokeColor(HexColor(self.color))
        c.setLineWidth(self.thickness)
        c.line(self.x1, page_height - self.y, self.x2, page_height - self.y)


DrawOp = FlowOp | RuleOp


class PageSink(ABC):
    """Layout surface shared by the measuring and canvas sinks."""

    def __init__(self, geometry: PageGeometry = A4):
        self.geometry = geometry
        self.metrics = PageMetrics(geometry)
        self.headings: list[str] = []
        self._pending_space = 0.0

    @abstractmethod
    def emit(self, op: DrawOp) -> None:
        """Receive a positioned drawing operation."""

    @property
    def page_count(self) -> int:
        return self.metrics.page_count

    @property
    def cursor_y(self) -> float:
        return self.metrics.cursor_y

    @property
    def left(self) -> float:
        return self.geometry.margin_left

    @property
    def right(self) -> float:
        return self.geometry.width - self.geometry.margin_right

    def space(self, points: float) -> None:
        """Request vertical space before the next drawn element.

        Space is only committed when something follows it, so trailing gaps
        never count toward the measured height.
        """
        self._pending_space += max(0.0, points)

    def lines(self, count: float, size: float) -> None:
        """Request vertical space worth `count` lines at font size `size`."""
        self.space(count * size * LEADING)

    def heading(
        self,
        title: str,
        font: str,
        size: float,
        *,
        color: str = BLACK,
        align: str = "left",
        char_space: float = 0.0,
    ) -> None:
        """Draw a section heading and record it.

        Letter-spaced headings are drawn on a single line when they fit and
        fall back to a wrapping paragraph otherwise.
        """
        self.headings.append(title)
        run = Run(title, font, color)
        if char_space:
            line = TrackedLine(run, size, char_space, align)
            if line.text_width <= self.geometry.content_width:
                self._flow(line, self.left, self.geometry.content_width, title)
                return
        self.paragraph([run], size, align=align)

    def text(
        self,
        text: str,
        font: str,
        size: float,
        *,
        color: str = BLACK,
        align: str = "left",
        indent: float = 0.0,
        line_gap: float = 0.0,
        link: str | None = None,
    ) -> None:
        self.paragraph(
            [Run(text, font, color, link=link, underline=link is not None)],
            size,
            align=align,
            indent=indent,
            line_gap=line_gap,
        )

    def paragraph(
        self,
        runs: Sequence[Run],
        size: float,
        *,
        align: str = "left",
        indent: float = 0.0,
        line_gap: float = 0.0,
    ) -> None:
        """Wrap mixed-style runs inside the margins."""
        para = self._paragraph(runs, size, align, line_gap)
        if para is not None:
            self._flow(para, self.left + indent, self.geometry.content_width - indent, plain_text(runs))

    def bullet_list(
        self,
        items: Sequence[str],
        font: str,
        size: float,
        *,
        bullet: str = "•",
        color: str = BLACK,
        indent: float = 0.0,
        hang: float = 0.0,
        line_gap: float = 0.0,
    ) -> None:
        """Bulleted list: glyphs sit at the indent, wrapped text hangs `hang` further right."""
        paragraphs = [self._paragraph([Run(item, font, color)], size, "left", line_gap) for item in items]
        paragraphs = [p for p in paragraphs if p is not None]
        if not paragraphs:
            return

        flowable = ListFlowable(
            [ListItem(p) for p in paragraphs],
            bulletType="bullet",
            start=bullet,
            leftIndent=hang,
            bulletFontName=font,
            bulletFontSize=size,
            bulletColor=HexColor(color),
        )
        text = "\n".join(" ".join(item.split()) for item in items if item.strip())
        self._flow(flowable, self.left + indent, self.geometry.content_width - indent, text)

    def row(
        self,
        left: Sequence[Run],
        size: float,
        right: Run | None = None,
        *,
        indent: float = 0.0,
        line_gap: float = 0.0,
    ) -> None:
        """Left runs from the indent with the right run flush right on the first line.

        Left text that would collide with the right text wraps onto further
        lines within its column.
        """
        width = self.geometry.content_width - indent
        x = self.left + indent
        left_para = self._paragraph(left, size, "left", line_gap)
        if right is None or not right.text.strip():
            if left_para is not None:
                self._flow(left_para, x, width, plain_text(left))
            return

        right_width = min(text_width(right.text, right.font, size) + size, width / 2)
        right_para = self._paragraph([right], size, "right", line_gap)
        table = Table(
            [[left_para or "", right_para]],
            colWidths=[width - right_width, right_width],
            style=ROW_STYLE,
        )
        self._flow(table, x, width, f"{plain_text(left)} {plain_text([right])}".strip())

    def rule(
        self,
        *,
        thickness: float = 0.5,
        color: str = BLACK,
        offset: float = 0.0,
        x1: float | None = None,
        x2: float | None = None,
    ) -> None:
        """Draw a horizontal rule `offset` points below the cursor."""
        self._commit_space()
        if self.metrics.cursor_y > 0 and self.metrics.cursor_y + offset > self.geometry.usable_height:
            self.metrics.new_page()
        y = self.geometry.margin_top + self.metrics.cursor_y + offset
        self.emit(
            RuleOp(
                page=self.metrics.page_count,
                x1=self.left if x1 is None else x1,
                x2=self.right if x2 is None else x2,
                y=y,
                thickness=thickness,
                color=color,
            )
        )

    def _commit_space(self) -> None:
        self.metrics.cursor_y += self._pending_space
        self._pending_space = 0.0

    @staticmethod
    def _paragraph(runs: Sequence[Run], size: float, align: str, line_gap: float) -> Paragraph | None:
        runs = [run for run in runs if run.text]
        if not any(run.text.strip() for run in runs):
            return None
        style = ParagraphStyle(
            "pagefit",
            fontName=runs[0].font,
            fontSize=size,
            leading=size * LEADING + line_gap,
            alignment=ALIGNMENTS[align],
            textColor=HexColor(runs[0].color),
        )
        return Paragraph("".join(run_markup(run) for run in runs), style)

    def _flow(self, flowable: Flowable, x: float, width: float, text: str) -> None:
        """Place a flowable at the cursor, splitting or moving it to a new page when needed."""
        self._commit_space()
        pending = [flowable]
        while pending:
            current = pending.pop(0)
            _, height = current.wrapOn(None, width, self.geometry.usable_height)
            remaining = self.geometry.usable_height - self.metrics.cursor_y
            if height <= remaining + FUZZ:
                self._place(current, x, width, height, text)
                continue

            parts = current.split(width, remaining)
            if len(parts) > 1 or (parts and parts[0] is not current):
                pending[:0] = parts
                continue
            if self.metrics.cursor_y > 0:
                self.metrics.new_page()
                pending.insert(0, current)
                continue
            # taller than a page and unsplittable
            self._place(current, x, width, height, text)

    def _place(self, flowable: Flowable, x: float, width: float, height: float, text: str) -> None:
        get_text = getattr(flowable, "getPlainText", None)
        self.emit(
            FlowOp(
                page=self.metrics.page_count,
                x=x,
                y=self.geometry.margin_top + self.metrics.cursor_y,
                width=width,
                height=height,
                flowable=flowable,
                text=get_text() if callable(get_text) else text,
            )
        )
        self.metrics.cursor_y += height


class MeasuringSink(PageSink):
    """Tracks cursor and page count only; drawing operations are dropped."""

    def emit(self, op: DrawOp) -> None:
        pass


class CanvasSink(PageSink):
    """Keeps drawing operations and serializes them to PDF bytes."""

    def __init__(self, geometry: PageGeometry = A4):
        super().__init__(geometry)
        self.ops: list[DrawOp] = []

    def emit(self, op: DrawOp) -> None:
        self.ops.append(op)

    def text_content(self) -> str:
        """Placed text, one block per line, for inspection."""
        return "\n".join(op.text for op in self.ops if isinstance(op, FlowOp))

    def to_bytes(self, title: str | None = None) -> bytes:
        buffer = io.BytesIO()
        c = canvas.Canvas(
            buffer,
            pagesize=(self.geometry.width, self.geometry.height),
            invariant=1,
        )
        if title:
            c.setTitle(title)

        page = 1
        for op in self.ops:
            while op.page > page:
                c.showPage()
                page += 1
            op.draw(c, self.geometry.height)

        while page < self.page_count:
            c.showPage()
            page += 1
        c.showPage()
        c.save()
        return buffer.getvalue()
