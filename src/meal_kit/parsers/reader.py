# src/meal_kit/parsers/reader.py

import logging
from enum import Enum
from pathlib import Path

from .errors import EmptyContentError

logger = logging.getLogger(__name__)


class Shape(str, Enum):
    """Top-level shape of a data file."""

    ARRAY = "array"
    OBJECT = "object"
    UNKNOWN = "unknown"


def read_text(path: str | Path) -> str:
    """
    Read a whole data file.

    Lines are re-joined with ``\\n`` so CRLF and CR line endings come out as LF.

    Raises:
        FileNotFoundError: If the path does not exist.
        OSError: If the file cannot be opened.
        EmptyContentError: If the file holds no text.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, encoding="utf-8", errors="replace") as f:
        content = "".join(line.rstrip("\n") + "\n" for line in f)

    if not content:
        raise EmptyContentError(f"File is empty: {file_path}")

    logger.debug("Read %d characters from %s", len(content), file_path)
    return content


def top_level(text: str) -> tuple[Shape, str]:
    """Classify trimmed text and return its body without the outer delimiters.

    Anything that is not ``[...]`` or ``{...}`` is ``Shape.UNKNOWN`` with an
    empty body; callers turn that into an empty result.
    """
    stripped = text.strip()
    if stripped.startswith("[") and stripped.endswith("]"):
        return Shape.ARRAY, stripped[1:-1]
    if stripped.startswith("{") and stripped.endswith("}"):
        return Shape.OBJECT, stripped[1:-1]
    return Shape.UNKNOWN, ""
