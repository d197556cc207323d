"""Minimalist template: no rules, large name, grey meta text."""

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

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
GREY = "#666666"

SIZE_NAME = 22
SIZE_HEADER = 11
SIZE_ENTRY = 10
SIZE_BODY = 9

HEADER_TRACKING = 2
BULLET = "•"
BULLET_INDENT = 10


class MinimalistRenderer(TemplateRenderer):
    name = "minimalist"

    def render(
        self,
        sink: PageSink,
        resume: Resume,
        font_scale: float = 1.0,
        spacing_scale: float = 1.0,
    ) -> None:
        scale = font_scale
        body = SIZE_BODY * scale
        entry = SIZE_ENTRY * scale

        sink.text(resume.contact.name, FONT_BOLD, SIZE_NAME * scale)
        sink.lines(0.2, SIZE_NAME * scale)
        render_contact_line(sink, resume.contact, FONT_REGULAR, body, align="left", color=GREY)
        sink.lines(2, body)

        def header(title: str) -> None:
            sink.heading(title.upper(), FONT_BOLD, SIZE_HEADER * scale, char_space=HEADER_TRACKING * scale)
            sink.lines(0.5, SIZE_HEADER * scale)

        def bullets(items: list[str]) -> None:
            sink.bullet_list(
                items,
                FONT_REGULAR,
                body,
                bullet=BULLET,
                indent=BULLET_INDENT * scale,
                hang=body,
                line_gap=1 * scale,
            )

        if resume.summary:
            header("Profile")
            sink.text(resume.summary, FONT_REGULAR, body, line_gap=0.5 * scale)
            sink.lines(1.5, body)

        if resume.experience:
            header("Experience")
            for exp in resume.experience:
                sink.row(
                    [Run(exp.role, FONT_BOLD), Run(f" | {exp.company}", FONT_REGULAR)],
                    entry,
                    Run(exp.date_range, FONT_REGULAR),
                )
                if exp.location:
                    sink.text(exp.location, FONT_REGULAR, body, color=GREY)
                bullets(exp.bullets)
                sink.lines(1, body)

        if resume.projects:
            header("Projects")
            for proj in resume.projects:
                sink.row([Run(proj.name, FONT_BOLD)], entry, Run(proj.link or "", FONT_REGULAR, GREY))
                if proj.technologies:
                    sink.text(proj.technologies, FONT_REGULAR, body, color=GREY)
                text = project_body(proj)
                if text:
                    sink.text(text, FONT_REGULAR, body, line_gap=1 * scale)
                bullets(project_bullets(proj))
                sink.lines(1, body)

        if resume.education:
            header("Education")
            for edu in resume.education:
                sink.row([Run(edu.institution, FONT_BOLD)], entry, Run(edu.date_range, FONT_REGULAR))
                sink.text(degree_line(edu.degree, edu.field), FONT_REGULAR, body)
                if edu.gpa:
                    sink.text(f"CGPA: {edu.gpa}", FONT_REGULAR, body, color=GREY)
                sink.lines(0.5, body)
            sink.lines(1, body)

        if resume.certifications:
            header("Certifications")
            for cert in resume.certifications:
                sink.text(certification_line(cert.name, cert.issuer, cert.date), FONT_REGULAR, body)
            sink.lines(1, body)

        rows = skill_rows(resume, separator="  |  ")
        if rows:
            header("Skills")
            for category, skills in rows:
                runs = [Run(skills, FONT_REGULAR)]
                if category:
                    runs.insert(0, Run(f"{category}: ", FONT_BOLD))
                sink.paragraph(runs, body)
