"""Resume to one-page PDF rendering.

Loads resume documents, measures them against a visual template, solves
the scale that fits a single page and emits the PDF.
"""

from pagefit.resume.models import Resume
from pagefit.resume.loader import load_resume
from pagefit.resume.generator import RenderResult, ResumeGenerator
from pagefit.resume.templates import DEFAULT_TEMPLATE, TEMPLATES, resolve_template

__all__ = [
    "DEFAULT_TEMPLATE",
    "TEMPLATES",
    "RenderResult",
    "Resume",
    "ResumeGenerator",
    "load_resume",
    "resolve_template",
]
