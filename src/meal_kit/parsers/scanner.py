# src/meal_kit/parsers/scanner.py

"""Character cursor shared by the splitter and the property extractor.

The cursor owns all scanning state (position, bracket depth, quote toggle,
key/value mode) so each routine is a loop over ``next()`` instead of manual
index arithmetic.
"""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class Scanner:
    text: str
    openers: str = "{"
    closers: str = "}"
    track_quotes: bool = False
    pos: int = 0
    depth: int = 0
    in_quotes: bool = False
    in_key: bool = True

    @property
    def done(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str | None:
        if self.done:
            return None
        return self.text[self.pos]

    def is_escaped(self, index: int) -> bool:
        """True when the character at ``index`` follows an odd run of backslashes."""
        run = 0
        i = index - 1
        while i >= 0 and self.text[i] == "\\":
            run += 1
            i -= 1
        return run % 2 == 1

    def next(self) -> str:
        """Consume one character and update depth and quote state."""
        ch = self.text[self.pos]
        if self.track_quotes and ch == '"' and not self.is_escaped(self.pos):
            self.in_quotes = not self.in_quotes
        elif ch in self.openers:
            self.depth += 1
        elif ch in self.closers:
            self.depth -= 1
        self.pos += 1
        return ch

    def skip_while(self, predicate: Callable[[str], bool]) -> None:
        while not self.done and predicate(self.text[self.pos]):
            self.pos += 1

    def advance_to(self, target: str) -> None:
        """Move to the next ``target`` character (or the end) without consuming it."""
        self.skip_while(lambda ch: ch != target)

    def skip(self) -> None:
        """Step over one character without touching depth or quote state."""
        self.pos += 1


def is_separator(ch: str) -> bool:
    return ch.isspace() or ch == ","
