"""Resume to one-page PDF command."""

import argparse
from pathlib import Path

from pydantic import ValidationError

from pagefit.shared import Color, PaperSize, ResumeLoadError, echo, sanitize_filename
from pagefit.resume import (
    DEFAULT_TEMPLATE,
    TEMPLATES,
    Resume,
    ResumeGenerator,
    load_resume,
    resolve_template,
)


def default_output_name(resume: Resume, template: str) -> str:
    name = "_".join(sanitize_filename(resume.contact.name).split()).strip("_.") or "Resume"
    return f"{name}_{template}_Resume.pdf"


def echo_validation_error(e: ValidationError) -> None:
    echo("Resume validation failed:", Color.ERROR)
    for error in e.errors():
        loc = " -> ".join(str(x) for x in error["loc"])
        echo(f"  {loc}: {error['msg']}", Color.ERROR)


def read_resume(input_path: Path) -> Resume | None:
    """Load a resume, reporting problems instead of raising."""
    if not input_path.exists():
        echo(f"Input file not found: {input_path}", Color.ERROR)
        return None

    try:
        return load_resume(input_path)
    except ValidationError as e:
        echo_validation_error(e)
    except (ResumeLoadError, ValueError) as e:
        echo(str(e), Color.ERROR)
    return None


def cmd_render(args: argparse.Namespace) -> int:
    """Handle resume to one-page PDF conversion."""
    try:
        paper_size = PaperSize.from_string(args.size)
    except ValueError as e:
        echo(str(e), Color.ERROR)
        return 1

    resume = read_resume(Path(args.input))
    if resume is None:
        return 1

    generator = ResumeGenerator(paper_size=paper_size, verbose=args.verbose)
    try:
        template_id, _ = resolve_template(args.template)
        output = Path(args.output) if args.output else Path(default_output_name(resume, template_id))
        result = generator.write(resume, output, args.template)
    except Exception as e:
        echo(f"PDF generation failed: {e}", Color.ERROR)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    echo(
        f"Resume PDF created: {output} ({result.template}, scale {result.scale.font:.2f}, "
        f"{result.page_count} page)",
        Color.SUCCESS,
    )
    return 0


def cmd_templates(args: argparse.Namespace) -> int:
    """List available template ids."""
    for template_id in TEMPLATES:
        marker = " (default)" if template_id == DEFAULT_TEMPLATE else ""
        echo(f"  {template_id}{marker}", Color.INFO)
    return 0
