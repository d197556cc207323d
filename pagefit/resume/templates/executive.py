"""Executive template: centered Times headings with letter spacing."""

from pagefit.resume.models import Resume
from pagefit.resume.sinks import PageSink, Run
from pagefit.resume.templates.base import (
    TemplateRenderer,
    certification_line,
    degree_line,
    project_body,
    project_bullets,
    render_contact_line,
    skill_rows,
)

FONT_REGULAR = "Times-Roman"
FONT_BOLD = "Times-Bold"

SIZE_NAME = 16
SIZE_CONTACT = 10
SIZE_HEADER = 11
SIZE_BODY = 10
SIZE_DATE = 9

HEADER_TRACKING = 1
BULLET = "•"
BULLET_INDENT = 15


class ExecutiveRenderer(TemplateRenderer):
    name = "executive"

    def render(
        self,
        sink: PageSink,
        resume: Resume,
        font_scale: float = 1.0,
        spacing_scale: float = 1.0,
    ) -> None:
        scale = font_scale
        body = SIZE_BODY * scale

        sink.text(resume.contact.name.upper(), FONT_BOLD, SIZE_NAME * scale, align="center")
        sink.lines(0.5, SIZE_NAME * scale)
        render_contact_line(sink, resume.contact, FONT_REGULAR, SIZE_CONTACT * scale, align="center")
        sink.lines(1, SIZE_CONTACT * scale)
        sink.rule(thickness=1)
        sink.lines(1, SIZE_CONTACT * scale)

        def section(title: str) -> None:
            sink.heading(
                title.upper(),
                FONT_BOLD,
                SIZE_HEADER * scale,
                align="center",
                char_space=HEADER_TRACKING * scale,
            )
            sink.lines(0.5, SIZE_HEADER * scale)

        def close_section() -> None:
            sink.lines(1, body)

        if resume.summary:
            section("Professional Summary")
            sink.text(resume.summary, FONT_REGULAR, body, align="justify", line_gap=1 * scale)
            close_section()

        if resume.experience:
            section("Work Experience")
            for exp in resume.experience:
                sink.row(
                    [Run(exp.role, FONT_BOLD), Run(f" | {exp.company}", FONT_REGULAR)],
                    body,
                    Run(exp.location or "", FONT_REGULAR),
                )
                if exp.date_range:
                    sink.text(exp.date_range, FONT_REGULAR, SIZE_DATE * scale)
                sink.bullet_list(
                    exp.bullets,
                    FONT_REGULAR,
                    body,
                    bullet=BULLET,
                    indent=BULLET_INDENT * scale,
                    hang=body,
                    line_gap=1 * scale,
                )
                sink.lines(0.5, body)
            close_section()

        if resume.projects:
            section("Projects")
            for proj in resume.projects:
                title = proj.name if not proj.technologies else f"{proj.name} ({proj.technologies})"
                sink.text(title, FONT_BOLD, body)
                bullets = project_bullets(proj)
                summary = ". ".join(b.rstrip(".") for b in bullets) + "." if bullets else project_body(proj)
                if summary:
                    sink.text(summary, FONT_REGULAR, body, line_gap=1 * scale)
                sink.lines(0.5, body)
            close_section()

        if resume.education:
            section("Education")
            for edu in resume.education:
                sink.text(edu.institution, FONT_BOLD, body)
                details = [degree_line(edu.degree, edu.field)]
                if edu.date_range:
                    details.append(edu.date_range)
                if edu.gpa:
                    details.append(f"GPA: {edu.gpa}")
                sink.text(" | ".join(details), FONT_REGULAR, body)
            close_section()

        if resume.certifications:
            section("Certifications")
            for cert in resume.certifications:
                sink.text(certification_line(cert.name, cert.issuer, cert.date), FONT_REGULAR, body, align="center")
            close_section()

        rows = skill_rows(resume, separator="  |  ")
        if rows:
            section("Core Competencies")
            for category, skills in rows:
                runs = [Run(skills, FONT_REGULAR)]
                if category:
                    runs.insert(0, Run(f"{category}: ", FONT_BOLD))
                sink.paragraph(runs, body, align="center")
