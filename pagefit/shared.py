from enum import Enum
from pathlib import Path


class Color(str, Enum):
    SUCCESS = "\033[92m"
    ERROR = "\033[91m"
    INFO = "\033[94m"
    WARNING = "\033[93m"
    RESET = "\033[0m"


def colored(text: str, color: Color) -> str:
    return f"{color.value}{text}{Color.RESET.value}"


def echo(text: str, color: Color = Color.INFO) -> None:
    print(colored(text, color))


class InvalidPaperSizeError(ValueError):
    def __init__(self, size_str: str):
        super().__init__(
            f"Invalid paper size: {size_str}. Valid sizes: {[s.name for s in PaperSize]}"
        )


class NotADirectoryError(ValueError):
    def __init__(self, path: str):
        super().__init__(f"Not a directory: {path}")


class InvalidInputError(Exception):
    def __init__(self, input: str):
        super().__init__(f"Invalid input: {input}")


class UnsupportedInputFormatError(ValueError):
    def __init__(self, path: str | Path):
        super().__init__(f"Unsupported file format: {path}. Use .json, .yaml or .yml")


class ResumeLoadError(Exception):
    def __init__(self, path: str | Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load resume {path}: {reason}")

    def __reduce__(self):
        return self.__class__, (self.path, self.reason)


class PaperSize(Enum):
    """Page sizes in PostScript points (width, height)."""

    A3 = (842, 1191)
    A4 = (595, 842)
    A5 = (420, 595)
    B5 = (499, 709)
    LETTER = (612, 792)
    LEGAL = (612, 1008)

    @property
    def width(self) -> int:
        return self.value[0]

    @property
    def height(self) -> int:
        return self.value[1]

    @staticmethod
    def from_string(size_str: str) -> "PaperSize":
        try:
            return PaperSize[size_str.upper()]
        except KeyError as exc:
            raise InvalidPaperSizeError(size_str) from exc


def sanitize_filename(name: str) -> str:
    """Sanitize a string for safe use as a filename."""
    invalid_chars = '<>:"/\\|?*'
    for char in invalid_chars:
        name = name.replace(char, "_")
    return name.strip()
