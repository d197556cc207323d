"""Pydantic models for the canonical resume document.

The document is style-free and read-only: every renderer consumes the same
instance, and list order is rendering order. Field names are snake_case;
the camelCase keys produced by the content generator are accepted as
aliases.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

LINK_LABELS = ("LinkedIn", "GitHub", "Portfolio")
ABSENT_VALUES = {"n/a", "none"}


def is_present(value: Optional[str]) -> bool:
    """True when value carries content ("n/a" and "none" count as absent)."""
    if value is None:
        return False
    stripped = value.strip()
    return bool(stripped) and stripped.lower() not in ABSENT_VALUES


class DocumentModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class ProfileLink(DocumentModel):
    """Labeled profile URL shown on the contact line."""

    label: str
    url: str

    @field_validator("label")
    @classmethod
    def _known_label(cls, value: str) -> str:
        for label in LINK_LABELS:
            if value.strip().lower() == label.lower():
                return label
        raise ValueError(f"label must be one of {', '.join(LINK_LABELS)}")


class ContactInfo(DocumentModel):
    """Name plus the optional ways to reach the candidate."""

    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    links: list[ProfileLink] = []

    @model_validator(mode="before")
    @classmethod
    def _fold_flat_links(cls, data):
        if not isinstance(data, dict):
            return data

        data = dict(data)
        links = list(data.get("links") or [])
        for label in LINK_LABELS:
            url = data.pop(label.lower(), None)
            if url is not None:
                links.append({"label": label, "url": url})

        data["links"] = [
            link
            for link in links
            if not isinstance(link, dict) or is_present(link.get("url"))
        ]
        return data

    @field_validator("email", "phone", "location")
    @classmethod
    def _drop_absent(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if is_present(value) else None


class ExperienceEntry(DocumentModel):
    """Work experience entry. date_range is displayed verbatim."""

    company: str
    role: str
    location: Optional[str] = None
    date_range: str = Field("", alias="dateRange")
    bullets: list[str] = []


class EducationEntry(DocumentModel):
    institution: str
    degree: str
    field: str = ""
    date_range: str = Field("", alias="dateRange")
    gpa: Optional[str] = None


class ProjectEntry(DocumentModel):
    """Project entry. Non-empty bullets win over description."""

    name: str
    link: Optional[str] = None
    technologies: Optional[str] = None
    description: Optional[str] = None
    bullets: list[str] = []


class CertificationEntry(DocumentModel):
    name: str
    issuer: str = ""
    date: Optional[str] = None
    link: Optional[str] = None


class Resume(DocumentModel):
    """Root document consumed by every template renderer."""

    contact: ContactInfo = Field(alias="contactInfo")
    summary: Optional[str] = None
    experience: list[ExperienceEntry] = Field([], alias="experiences")
    education: list[EducationEntry] = []
    skills: list[str] = []
    skill_categories: dict[str, list[str]] = Field({}, alias="skillsCategories")
    projects: list[ProjectEntry] = []
    certifications: list[CertificationEntry] = []

    @field_validator("summary")
    @classmethod
    def _blank_summary(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value and value.strip() else None

    @field_validator("skill_categories", mode="before")
    @classmethod
    def _none_categories(cls, value):
        if not value:
            return {}
        if isinstance(value, dict):
            cleaned = {}
            for name, skills in value.items():
                if isinstance(skills, list):
                    skills = [s for s in skills if not isinstance(s, str) or s.strip()]
                if skills:
                    cleaned[name] = skills
            return cleaned
        return value
