"""Standard template: left-aligned Times with black header rules.

The only template that scales spacing independently of fonts.
"""

from pagefit.resume.models import Resume
from pagefit.resume.sinks import PageSink, Run
from pagefit.resume.templates.base import (
    TemplateRenderer,
    degree_line,
    link_target,
    project_body,
    project_bullets,
    render_contact_line,
    skill_rows,
)

FONT_REGULAR = "Times-Roman"
FONT_BOLD = "Times-Bold"
FONT_ITALIC = "Times-Italic"

SIZE_NAME = 16
SIZE_HEADER = 11
SIZE_BASE = 10

LINE_GAP = 1
SECTION_GAP = 12
ITEM_GAP = 8
HEADER_GAP = 5
ROW_GAP = 2

BULLET = "•"
BULLET_INDENT = 6
SEPARATOR = "  |  "


class StandardRenderer(TemplateRenderer):
    name = "standard"

    def render(
        self,
        sink: PageSink,
        resume: Resume,
        font_scale: float = 1.0,
        spacing_scale: float = 1.0,
    ) -> None:
        size = SIZE_BASE * font_scale
        line_gap = LINE_GAP * spacing_scale
        item_gap = ITEM_GAP * spacing_scale
        section_gap = SECTION_GAP * spacing_scale

        def header(title: str) -> None:
            sink.lines(0.2 * spacing_scale, SIZE_HEADER * font_scale)
            sink.heading(title, FONT_BOLD, SIZE_HEADER * font_scale)
            sink.rule(thickness=0.5, offset=ROW_GAP * spacing_scale)
            sink.space((ROW_GAP + HEADER_GAP) * spacing_scale)

        def bullets(items: list[str]) -> None:
            sink.bullet_list(
                items,
                FONT_REGULAR,
                size,
                bullet=BULLET,
                indent=BULLET_INDENT * font_scale,
                hang=size,
                line_gap=line_gap,
            )

        sink.text(resume.contact.name.upper(), FONT_BOLD, SIZE_NAME * font_scale)
        sink.lines(0.2 * spacing_scale, SIZE_NAME * font_scale)
        render_contact_line(sink, resume.contact, FONT_REGULAR, size, align="left")
        sink.lines(0.5 * spacing_scale, size)

        if resume.summary:
            header("PROFESSIONAL SUMMARY")
            sink.text(resume.summary, FONT_REGULAR, size, align="justify", line_gap=line_gap)
            sink.space(section_gap)

        if resume.experience:
            header("WORK EXPERIENCE")
            for index, exp in enumerate(resume.experience):
                if index:
                    sink.space(item_gap)
                left = [Run(exp.role, FONT_BOLD), Run(f"{SEPARATOR}{exp.company}", FONT_REGULAR)]
                if exp.location:
                    left.append(Run(f"{SEPARATOR}{exp.location}", FONT_REGULAR))
                sink.row(left, size, Run(exp.date_range, FONT_REGULAR), line_gap=ROW_GAP * spacing_scale)
                bullets(exp.bullets)
            sink.space(section_gap)

        if resume.projects:
            header("PROJECTS")
            for index, proj in enumerate(resume.projects):
                if index:
                    sink.space(item_gap)
                left = [Run(proj.name, FONT_BOLD)]
                if proj.link:
                    left.append(Run(SEPARATOR, FONT_REGULAR))
                    left.append(Run(proj.link, FONT_REGULAR, link=link_target(proj.link), underline=True))
                sink.row(left, size)
                if proj.technologies:
                    sink.text(proj.technologies, FONT_ITALIC, size - 1 * font_scale)
                body = project_body(proj)
                if body:
                    sink.text(body, FONT_REGULAR, size, line_gap=line_gap)
                bullets(project_bullets(proj))
            sink.space(section_gap)

        if resume.education:
            header("EDUCATION")
            for index, edu in enumerate(resume.education):
                if index:
                    sink.space(item_gap)
                sink.row(
                    [
                        Run(degree_line(edu.degree, edu.field), FONT_BOLD),
                        Run(f"{SEPARATOR}{edu.institution}", FONT_REGULAR),
                    ],
                    size,
                    Run(edu.date_range, FONT_REGULAR),
                    line_gap=ROW_GAP * spacing_scale,
                )
                if edu.gpa:
                    sink.text(f"CGPA: {edu.gpa}", FONT_REGULAR, size)
            sink.space(section_gap)

        if resume.certifications:
            header("CERTIFICATIONS")
            for cert in resume.certifications:
                left = [Run(cert.name, FONT_BOLD)]
                if cert.issuer:
                    left.append(Run(f"{SEPARATOR}{cert.issuer}", FONT_REGULAR))
                sink.row(left, size, Run(cert.date or "", FONT_REGULAR), line_gap=line_gap)
            sink.space(section_gap)

        rows = skill_rows(resume, separator="  •  ")
        if rows:
            header("SKILLS")
            for category, skills in rows:
                runs = [Run(skills, FONT_REGULAR)]
                if category:
                    runs.insert(0, Run(f"{category}: ", FONT_BOLD))
                sink.paragraph(runs, size, line_gap=line_gap * 1.5)
