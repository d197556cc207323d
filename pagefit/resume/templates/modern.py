"""Modern template: Helvetica with blue name, headers and header rules."""

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

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
FONT_OBLIQUE = "Helvetica-Oblique"
ACCENT = "#2563eb"

SIZE_NAME = 14
SIZE_HEADER = 11
SIZE_ENTRY = 10
SIZE_DETAIL = 9
SIZE_BODY = 8.5

BULLET = "•"
BULLET_INDENT = 10


class ModernRenderer(TemplateRenderer):
    """Single shared scale for fonts and spacing."""

    name = "modern"

    def render(
        self,
        sink: PageSink,
        resume: Resume,
        font_scale: float = 1.0,
        spacing_scale: float = 1.0,
    ) -> None:
        scale = font_scale

        sink.text(resume.contact.name.upper(), FONT_BOLD, SIZE_NAME * scale, color=ACCENT, align="center")
        sink.lines(0.2, SIZE_NAME * scale)
        render_contact_line(sink, resume.contact, FONT_REGULAR, SIZE_BODY * scale)
        sink.lines(0.5, SIZE_BODY * scale)

        if resume.summary:
            self._header(sink, "PROFESSIONAL SUMMARY", scale)
            sink.text(
                resume.summary,
                FONT_REGULAR,
                SIZE_BODY * scale,
                align="justify",
                line_gap=0.2 * scale,
            )
            sink.lines(0.5, SIZE_BODY * scale)

        if resume.experience:
            self._header(sink, "WORK EXPERIENCE", scale)
            for exp in resume.experience:
                left = [Run(exp.role, FONT_BOLD), Run(f" | {exp.company}", FONT_REGULAR)]
                if exp.location:
                    left.append(Run(f" | {exp.location}", FONT_REGULAR))
                sink.row(left, SIZE_ENTRY * scale, Run(exp.date_range, FONT_REGULAR))
                self._bullets(sink, exp.bullets, scale)
                sink.lines(0.25, SIZE_ENTRY * scale)

        if resume.projects:
            self._header(sink, "PROJECTS", scale)
            for proj in resume.projects:
                left = [Run(proj.name, FONT_BOLD)]
                if proj.link:
                    left.append(Run(" | ", FONT_REGULAR))
                    left.append(Run(proj.link, FONT_REGULAR, ACCENT, link=link_target(proj.link)))
                sink.row(left, SIZE_ENTRY * scale)
                if proj.technologies:
                    sink.text(f"Stack: {proj.technologies}", FONT_OBLIQUE, SIZE_DETAIL * scale)
                bullets = project_bullets(proj)
                if bullets:
                    self._bullets(sink, bullets, scale)
                else:
                    body = project_body(proj)
                    if body:
                        sink.text(body, FONT_REGULAR, SIZE_DETAIL * scale, line_gap=1 * scale)
                sink.lines(0.25, SIZE_ENTRY * scale)

        if resume.education:
            self._header(sink, "EDUCATION", scale)
            for edu in resume.education:
                sink.row(
                    [
                        Run(edu.institution, FONT_BOLD),
                        Run(f" | {degree_line(edu.degree, edu.field)}", FONT_REGULAR),
                    ],
                    SIZE_ENTRY * scale,
                    Run(edu.date_range, FONT_REGULAR),
                )
                if edu.gpa:
                    sink.text(f"GPA: {edu.gpa}", FONT_REGULAR, SIZE_DETAIL * scale)
                sink.lines(0.25, SIZE_ENTRY * scale)

        if resume.certifications:
            self._header(sink, "CERTIFICATIONS", scale)
            for cert in resume.certifications:
                sink.row(
                    [
                        Run(cert.name, FONT_BOLD),
                        Run(f" | {cert.issuer}" if cert.issuer else "", FONT_REGULAR),
                    ],
                    SIZE_DETAIL * scale,
                    Run(cert.date or "", FONT_REGULAR),
                )
            sink.lines(0.25, SIZE_ENTRY * scale)

        rows = skill_rows(resume, separator="  •  ")
        if rows:
            self._header(sink, "SKILLS", scale)
            for category, skills in rows:
                runs = [Run(skills, FONT_REGULAR)]
                if category:
                    runs.insert(0, Run(f"{category}: ", FONT_BOLD))
                sink.paragraph(runs, SIZE_BODY * scale, line_gap=0.2 * scale)

    def _header(self, sink: PageSink, title: str, scale: float) -> None:
        sink.heading(title, FONT_BOLD, SIZE_HEADER * scale, color=ACCENT)
        sink.rule(thickness=1, color=ACCENT, offset=2 * scale)
        sink.lines(0.5, SIZE_HEADER * scale)

    def _bullets(self, sink: PageSink, bullets: list[str], scale: float) -> None:
        size = SIZE_DETAIL * scale
        sink.bullet_list(
            bullets,
            FONT_REGULAR,
            size,
            bullet=BULLET,
            indent=BULLET_INDENT * scale,
            hang=size,
            line_gap=1 * scale,
        )

