"""Renderer contract and helpers shared by the visual templates."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from pagefit.resume.models import ContactInfo, ProjectEntry, Resume, is_present
from pagefit.resume.sinks import BLACK, PageSink, Run

CONTACT_SEPARATOR = "  |  "

_SCHEME = re.compile(r"^https?://(www\.)?", re.IGNORECASE)


@dataclass(frozen=True)
class ContactPart:
    text: str
    link: Optional[str] = None


class TemplateRenderer(ABC):
    """Draws a resume onto a sink.

    Implementations hold no layout-fitting logic: every font size and
    vertical gap is a base constant multiplied by font_scale or
    spacing_scale, so the structure is the same at any scale.
    """

    name: str = ""

    @abstractmethod
    def render(
        self,
        sink: PageSink,
        resume: Resume,
        font_scale: float = 1.0,
        spacing_scale: float = 1.0,
    ) -> None:
        """Draw the whole document onto the sink."""


def display_url(url: str) -> str:
    """Strip scheme, leading www. and trailing slash for display."""
    return _SCHEME.sub("", url.strip()).rstrip("/")


def link_target(url: str) -> str:
    url = url.strip()
    return url if url.lower().startswith("http") else f"https://{url}"


def contact_parts(contact: ContactInfo) -> list[ContactPart]:
    """Contact line items in display order: email, phone, location, links."""
    parts = []
    if contact.email:
        parts.append(ContactPart(contact.email, f"mailto:{contact.email}"))
    if contact.phone:
        parts.append(ContactPart(contact.phone, f"tel:{contact.phone.replace(' ', '')}"))
    if contact.location:
        parts.append(ContactPart(contact.location))
    for link in contact.links:
        if is_present(link.url):
            parts.append(ContactPart(display_url(link.url), link_target(link.url)))
    return parts


def contact_runs(contact: ContactInfo, font: str, color: str = BLACK) -> list[Run]:
    """Contact parts as runs; linked parts are underlined."""
    runs = []
    for index, part in enumerate(contact_parts(contact)):
        if index:
            runs.append(Run(CONTACT_SEPARATOR, font, color))
        runs.append(Run(part.text, font, color, link=part.link, underline=part.link is not None))
    return runs


def render_contact_line(
    sink: PageSink,
    contact: ContactInfo,
    font: str,
    size: float,
    *,
    align: str = "center",
    color: str = BLACK,
) -> None:
    """Draw the contact line; nothing is drawn when there are no parts."""
    runs = contact_runs(contact, font, color)
    if runs:
        sink.paragraph(runs, size, align=align)


def present_skills(skills: list[str]) -> list[str]:
    return [s.strip() for s in skills if s and s.strip()]


def skill_rows(resume: Resume, separator: str = ", ") -> list[tuple[Optional[str], str]]:
    """(category, joined skills) rows.

    Category mode wins when any category has skills; flat skills become a
    single row with no category.
    """
    categories = [(name, present_skills(skills)) for name, skills in resume.skill_categories.items()]
    categories = [(name, skills) for name, skills in categories if skills]
    if categories:
        return [(name, separator.join(skills)) for name, skills in categories]
    skills = present_skills(resume.skills)
    if skills:
        return [(None, separator.join(skills))]
    return []


def project_bullets(project: ProjectEntry) -> list[str]:
    return [b for b in project.bullets if b.strip()]


def project_body(project: ProjectEntry) -> Optional[str]:
    """Description, used only when the project has no bullets."""
    if project_bullets(project):
        return None
    return project.description.strip() if project.description and project.description.strip() else None


def degree_line(degree: str, field: str) -> str:
    return f"{degree} in {field}" if field else degree


def certification_line(name: str, issuer: str, date: Optional[str], separator: str = " | ") -> str:
    parts = [name]
    if issuer:
        parts.append(issuer)
    if date:
        parts.append(date)
    return separator.join(parts)
