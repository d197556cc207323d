"""Page geometry, per-pass page metrics and the scale pair."""

from dataclasses import dataclass

from pagefit.shared import PaperSize

DEFAULT_MARGIN = 36  # 0.5 inch


@dataclass(frozen=True)
class PageGeometry:
    """Fixed page size and margins in points."""

    width: float
    height: float
    margin_top: float = DEFAULT_MARGIN
    margin_right: float = DEFAULT_MARGIN
    margin_bottom: float = DEFAULT_MARGIN
    margin_left: float = DEFAULT_MARGIN

    @classmethod
    def from_paper(cls, paper_size: PaperSize = PaperSize.A4, margin: float = DEFAULT_MARGIN) -> "PageGeometry":
        return cls(
            width=paper_size.width,
            height=paper_size.height,
            margin_top=margin,
            margin_right=margin,
            margin_bottom=margin,
            margin_left=margin,
        )

    @property
    def usable_height(self) -> float:
        return self.height - self.margin_top - self.margin_bottom

    @property
    def content_width(self) -> float:
        return self.width - self.margin_left - self.margin_right


A4 = PageGeometry.from_paper(PaperSize.A4)


@dataclass
class PageMetrics:
    """Mutable layout state for one render pass.

    cursor_y is measured downward from the top margin of the current page.
    A new instance is created for every measurement or emission pass.
    """

    geometry: PageGeometry
    cursor_y: float = 0.0
    page_count: int = 1

    def new_page(self) -> None:
        self.page_count += 1
        self.cursor_y = 0.0


@dataclass(frozen=True)
class ScalePair:
    """Multipliers for a template's base font sizes and vertical spacing."""

    font: float = 1.0
    spacing: float = 1.0

    @classmethod
    def uniform(cls, scale: float) -> "ScalePair":
        return cls(font=scale, spacing=scale)

    def __post_init__(self):
        if self.font <= 0 or self.spacing <= 0:
            raise ValueError(f"Scale factors must be positive: {self.font}, {self.spacing}")
