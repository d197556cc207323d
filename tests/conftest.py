import pytest

from pagefit.resume.models import Resume


def long_bullet(entry: int, index: int) -> str:
    # Two lines at scale 1.0 in every template, one line at 0.75.
    return (
        f"Designed and shipped reporting pipeline {entry}.{index} for the finance teams, "
        "reducing manual reconciliation effort and month end close by 35% overall"
    )


@pytest.fixture
def minimal_resume() -> Resume:
    return Resume.model_validate({"contact": {"name": "Ada Lovelace", "email": "ada@example.com"}})


@pytest.fixture
def scenario_resume() -> Resume:
    """One role with three bullets, one degree, six flat skills."""
    return Resume.model_validate(
        {
            "contact": {
                "name": "Grace Hopper",
                "email": "grace@example.com",
                "phone": "+1 555 0100",
                "location": "Arlington, VA",
            },
            "experience": [
                {
                    "company": "Remington Rand",
                    "role": "Senior Programmer",
                    "location": "Philadelphia, PA",
                    "date_range": "Jan 1949 - Dec 1967",
                    "bullets": [
                        "Built the A-0 compiler, the first linker-loader for UNIVAC I",
                        "Led the FLOW-MATIC team and shaped COBOL's English-like syntax",
                        "Trained operators and documented the programming conventions",
                    ],
                }
            ],
            "education": [
                {
                    "institution": "Yale University",
                    "degree": "PhD",
                    "field": "Mathematics",
                    "date_range": "1930 - 1934",
                }
            ],
            "skills": ["COBOL", "FLOW-MATIC", "Assembly", "UNIVAC", "Compilers", "Teaching"],
        }
    )


@pytest.fixture
def overflow_resume() -> Resume:
    """Eight roles with five long bullets each; overflows at scale 1.0."""
    return Resume.model_validate(
        {
            "contact": {"name": "Alan Turing", "email": "alan@example.com", "phone": "+44 20 0000 0000"},
            "experience": [
                {
                    "company": f"Company {entry}",
                    "role": "Staff Engineer",
                    "date_range": f"{2000 + entry} - {2001 + entry}",
                    "bullets": [long_bullet(entry, index) for index in range(1, 6)],
                }
                for entry in range(1, 9)
            ],
            "education": [
                {
                    "institution": "King's College, Cambridge",
                    "degree": "BA",
                    "field": "Mathematics",
                    "date_range": "1931 - 1934",
                }
            ],
            "skills": ["Python", "Go", "SQL", "Kafka", "Kubernetes", "Terraform"],
        }
    )


@pytest.fixture
def full_resume() -> Resume:
    """Every section populated, camelCase keys as produced by the generator."""
    return Resume.model_validate(
        {
            "contactInfo": {
                "name": "Katherine Johnson",
                "email": "katherine@example.com",
                "phone": "+1 555 0199",
                "location": "Hampton, VA",
                "linkedin": "https://www.linkedin.com/in/kjohnson/",
                "github": "N/A",
                "portfolio": "kjohnson.dev",
            },
            "summary": "Research mathematician with three decades of trajectory analysis for crewed spaceflight.",
            "experiences": [
                {
                    "company": "NASA Langley",
                    "role": "Aerospace Technologist",
                    "location": "Hampton, VA",
                    "dateRange": "1958 - 1986",
                    "bullets": [
                        "Calculated the trajectory for Alan Shepard's Freedom 7 flight",
                        "Verified orbital equations for John Glenn's Friendship 7 mission",
                    ],
                }
            ],
            "education": [
                {
                    "institution": "West Virginia State College",
                    "degree": "BS",
                    "field": "Mathematics and French",
                    "dateRange": "1933 - 1937",
                    "gpa": "4.0",
                }
            ],
            "skills": ["ignored when categories exist"],
            "skillsCategories": {
                "Mathematics": ["Orbital mechanics", "Analytic geometry"],
                "Tools": ["IBM 7090", "FORTRAN"],
                "Cloud": None,
            },
            "projects": [
                {
                    "name": "Apollo 11 Trajectory Sync",
                    "link": "github.com/kjohnson/apollo",
                    "technologies": "FORTRAN, IBM 7090",
                    "description": "Not shown because bullets exist",
                    "bullets": ["Synchronized the lunar module with the command module"],
                },
                {"name": "Space Shuttle Studies", "description": "Early work on the shuttle program"},
            ],
            "certifications": [
                {"name": "Group Achievement Award", "issuer": "NASA", "date": "1967"},
            ],
        }
    )
