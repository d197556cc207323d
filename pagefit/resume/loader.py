"""Load resume documents from JSON or YAML files."""

import json
from pathlib import Path

import yaml

from pagefit.shared import ResumeLoadError, UnsupportedInputFormatError
from pagefit.resume.models import Resume

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


def load_resume_data(input_path: Path) -> dict:
    """Read the raw mapping from a .json/.yaml/.yml file."""
    suffix = input_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedInputFormatError(input_path)

    try:
        with open(input_path, encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ResumeLoadError(input_path, "file not found") from e
    except json.JSONDecodeError as e:
        raise ResumeLoadError(input_path, f"invalid JSON: {e}") from e
    except yaml.YAMLError as e:
        raise ResumeLoadError(input_path, f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ResumeLoadError(input_path, "top-level value must be a mapping")
    return data


def load_resume(input_path: Path | str) -> Resume:
    """Load and validate a resume. Raises pydantic.ValidationError on bad content."""
    return Resume.model_validate(load_resume_data(Path(input_path)))
