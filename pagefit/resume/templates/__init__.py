"""Visual templates and the id -> renderer lookup."""

from pagefit.resume.templates.base import TemplateRenderer
from pagefit.resume.templates.executive import ExecutiveRenderer
from pagefit.resume.templates.minimalist import MinimalistRenderer
from pagefit.resume.templates.modern import ModernRenderer
from pagefit.resume.templates.standard import StandardRenderer

DEFAULT_TEMPLATE = "modern"

TEMPLATES: dict[str, TemplateRenderer] = {
    renderer.name: renderer
    for renderer in (
        ModernRenderer(),
        StandardRenderer(),
        ExecutiveRenderer(),
        MinimalistRenderer(),
    )
}


def resolve_template(template_id: str | None) -> tuple[str, TemplateRenderer]:
    """Return (resolved id, renderer). Unknown or missing ids fall back to modern."""
    key = (template_id or "").strip().lower()
    if key not in TEMPLATES:
        key = DEFAULT_TEMPLATE
    return key, TEMPLATES[key]


__all__ = [
    "DEFAULT_TEMPLATE",
    "TEMPLATES",
    "TemplateRenderer",
    "ExecutiveRenderer",
    "MinimalistRenderer",
    "ModernRenderer",
    "StandardRenderer",
    "resolve_template",
]
