"""Dry-run measurement report command."""

import argparse
import json
from pathlib import Path

from pagefit.shared import Color, PaperSize, echo
from pagefit.cmd.render import read_resume
from pagefit.resume import TEMPLATES, ResumeGenerator, resolve_template


def cmd_measure(args: argparse.Namespace) -> int:
    """Report height at scale 1.0 and the solved scale for each template."""
    try:
        paper_size = PaperSize.from_string(args.size)
    except ValueError as e:
        echo(str(e), Color.ERROR)
        return 1

    resume = read_resume(Path(args.input))
    if resume is None:
        return 1

    if args.template == "all":
        template_ids = list(TEMPLATES)
    else:
        template_ids = [resolve_template(args.template)[0]]

    generator = ResumeGenerator(paper_size=paper_size)
    usable = generator.geometry.usable_height
    report = {}
    for template_id in template_ids:
        base = generator.measure(resume, template_id)
        _, _, solution = generator.fit(resume, template_id)
        report[template_id] = {
            "height": round(base.total_height, 2),
            "pages": base.page_count,
            "usage": round(base.total_height / usable, 4),
            "scale": round(solution.scale.font, 4),
            "outcome": solution.outcome.value,
            "passes": solution.passes,
        }

    if args.json:
        print(json.dumps({"usable_height": usable, "templates": report}, indent=2))
        return 0

    echo(f"Usable page height: {usable:.1f}pt", Color.INFO)
    for template_id, row in report.items():
        color = Color.WARNING if row["outcome"] == "degraded" else Color.SUCCESS
        echo(
            f"  {template_id}: {row['height']:.1f}pt over {row['pages']} page(s) "
            f"({row['usage']:.0%}) -> scale {row['scale']:.3f} [{row['outcome']}, "
            f"{row['passes']} passes]",
            color,
        )
    return 0
