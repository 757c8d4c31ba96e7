# src/meal_kit/parsers/splitter.py

"""Structural Splitter.

Partitions the body of a JSON array or object into its top-level members.
Both modes count braces only: array mode ignores quotes entirely and object
mode does not look at quotes inside a nested ``{...}`` value. Unbalanced
input is not repaired; the scan simply runs on into the following siblings.
"""

import logging

from .properties import unquote
from .scanner import Scanner, is_separator

logger = logging.getLogger(__name__)

SectionMap = dict[str, str]


def split_top_level_objects(body: str) -> list[str]:
    """Return each ``{...}`` member of an array body, trimmed.

    Text outside any brace span (commas, whitespace, stray scalars) is dropped.
    """
    scanner = Scanner(body)
    objects: list[str] = []
    current: list[str] = []

    while not scanner.done:
        ch = scanner.next()
        if ch == "{":
            current.append(ch)
        elif ch == "}":
            current.append(ch)
            if scanner.depth == 0:
                objects.append("".join(current).strip())
                current = []
                scanner.skip_while(is_separator)
        elif scanner.depth > 0:
            current.append(ch)

    if current:
        logger.debug("Discarding unterminated member: %.40s", "".join(current))
    return objects


def _capture_object(scanner: Scanner) -> str:
    start = scanner.pos
    scanner.depth = 0
    scanner.next()
    while not scanner.done and scanner.depth > 0:
        scanner.next()
    return scanner.text[start : scanner.pos]


def _capture_scalar(scanner: Scanner) -> str:
    start = scanner.pos
    scanner.in_quotes = False
    while not scanner.done:
        if not scanner.in_quotes and scanner.peek() in ",}":
            break
        scanner.next()
    return scanner.text[start : scanner.pos]


def split_sections(body: str) -> SectionMap:
    """
    Split an object body into ``key -> raw value``.

    Object values are kept as their balanced ``{...}`` text. Any other value
    runs to the next comma or closing brace outside a string; a single
    string literal is unquoted.
    """
    sections: SectionMap = {}
    scanner = Scanner(body, track_quotes=True)

    while not scanner.done:
        scanner.skip_while(is_separator)
        if scanner.done:
            break

        if scanner.peek() != '"':
            scanner.skip()
            continue

        scanner.skip()
        key_start = scanner.pos
        scanner.advance_to('"')
        key = body[key_start : scanner.pos]
        scanner.skip()

        scanner.advance_to(":")
        scanner.skip()
        scanner.skip_while(str.isspace)
        if scanner.done:
            break

        if scanner.peek() == "{":
            sections[key] = _capture_object(scanner)
        else:
            sections[key] = unquote(_capture_scalar(scanner))

    return sections
