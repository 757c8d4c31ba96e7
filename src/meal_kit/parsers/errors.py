# src/meal_kit/parsers/errors.py


class EmptyContentError(OSError):
    """The data file exists but holds no text."""


class InvalidNumberFormatError(ValueError):
    """A field declared numeric holds non-numeric text."""

    def __init__(self, field: str, raw: str) -> None:
        super().__init__(f"Invalid number format in '{field}': {raw!r}")
        self.field = field
        self.raw = raw
