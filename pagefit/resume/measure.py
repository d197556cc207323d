"""Dry-run measurement: render into a MeasuringSink and report the height."""

from dataclasses import dataclass

from pagefit.resume.geometry import A4, PageGeometry, ScalePair
from pagefit.resume.models import Resume
from pagefit.resume.sinks import MeasuringSink
from pagefit.resume.templates import TemplateRenderer


@dataclass(frozen=True)
class Measurement:
    """Predicted layout of one render pass."""

    total_height: float
    page_count: int


def measure(
    resume: Resume,
    renderer: TemplateRenderer,
    scale: ScalePair = ScalePair(),
    geometry: PageGeometry = A4,
) -> Measurement:
    """Render without producing output and return total height and page count.

    Renderer exceptions propagate: a partial measurement is meaningless to
    the solver.
    """
    sink = MeasuringSink(geometry)
    renderer.render(sink, resume, scale.font, scale.spacing)
    total = (sink.page_count - 1) * geometry.usable_height + sink.cursor_y
    return Measurement(total_height=total, page_count=sink.page_count)
