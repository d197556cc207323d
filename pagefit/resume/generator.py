"""One-page PDF generation for resume documents using reportlab.

Resolves the template, solves a scale that fits the document on a single
page via dry-run measurement, then renders once more onto a canvas sink
with exactly that scale and serializes the page.
"""

import asyncio
from concurrent.futures import Executor
from dataclasses import dataclass, field
from pathlib import Path

from pagefit.shared import Color, PaperSize, echo
from pagefit.resume.geometry import DEFAULT_MARGIN, PageGeometry, ScalePair
from pagefit.resume.measure import Measurement, measure
from pagefit.resume.models import Resume
from pagefit.resume.sinks import CanvasSink
from pagefit.resume.solver import MAX_SCALE, MIN_SCALE, FitOutcome, ScaleSolution, solve_scale
from pagefit.resume.templates import TemplateRenderer, resolve_template


@dataclass
class RenderResult:
    """PDF bytes plus the diagnostics of how they were produced."""

    pdf: bytes
    template: str
    scale: ScalePair
    page_count: int
    outcome: FitOutcome
    height: float
    sections: list[str] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return self.outcome is FitOutcome.DEGRADED


class ResumeGenerator:
    """Generates single-page PDF resumes from validated Resume models."""

    def __init__(
        self,
        paper_size: PaperSize = PaperSize.A4,
        margin: float = DEFAULT_MARGIN,
        min_scale: float = MIN_SCALE,
        max_scale: float = MAX_SCALE,
        verbose: bool = False,
    ):
        self.geometry = PageGeometry.from_paper(paper_size, margin)
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.verbose = verbose

    def measure(self, resume: Resume, template: str | None = None, scale: float = 1.0) -> Measurement:
        """Dry-run the template at a uniform scale."""
        _, renderer = resolve_template(template)
        return measure(resume, renderer, ScalePair.uniform(scale), self.geometry)

    def fit(self, resume: Resume, template: str | None = None) -> tuple[str, TemplateRenderer, ScaleSolution]:
        """Resolve the template and solve its single-page scale."""
        template_id, renderer = resolve_template(template)
        if self.verbose and template is not None and template_id != template.strip().lower():
            echo(f"Unknown template '{template}', using '{template_id}'", Color.WARNING)

        solution = solve_scale(
            lambda scale: measure(resume, renderer, ScalePair.uniform(scale), self.geometry),
            self.geometry.usable_height,
            min_scale=self.min_scale,
            max_scale=self.max_scale,
        )
        return template_id, renderer, solution

    def generate(self, resume: Resume, template: str | None = None) -> RenderResult:
        """Render the resume onto exactly one page and return the PDF bytes."""
        template_id, renderer, solution = self.fit(resume, template)

        sink = CanvasSink(self.geometry)
        renderer.render(sink, resume, solution.scale.font, solution.scale.spacing)
        pdf = sink.to_bytes(title=f"{resume.contact.name} - Resume")
        height = (sink.page_count - 1) * self.geometry.usable_height + sink.cursor_y

        if solution.outcome is FitOutcome.DEGRADED:
            echo(
                f"{resume.contact.name}: content does not fit at minimum scale "
                f"{solution.scale.font:.2f} ({sink.page_count} page(s))",
                Color.WARNING,
            )
        if self.verbose:
            echo(
                f"Template '{template_id}': scale {solution.scale.font:.3f} "
                f"({solution.outcome.value}, {solution.passes} measurement pass(es)), "
                f"height {height:.1f}/{self.geometry.usable_height:.1f}pt",
                Color.INFO,
            )

        return RenderResult(
            pdf=pdf,
            template=template_id,
            scale=solution.scale,
            page_count=sink.page_count,
            outcome=solution.outcome,
            height=height,
            sections=list(sink.headings),
        )

    def write(self, resume: Resume, output_path: Path, template: str | None = None) -> RenderResult:
        """Generate and write the PDF to output_path."""
        result = self.generate(resume, template)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(result.pdf)
        return result

    async def generate_async(
        self,
        resume: Resume,
        template: str | None = None,
        executor: Executor | None = None,
    ) -> RenderResult:
        """Run generate() in an executor so the event loop is not blocked."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(executor, self.generate, resume, template)
