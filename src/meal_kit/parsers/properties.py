# src/meal_kit/parsers/properties.py

"""Property Extractor.

Turns the text of one flat JSON object into a ``PropertyMap``: property name
to raw value text. String values come back unquoted; numbers, literals and
nested ``{...}`` / ``[...]`` blobs come back verbatim (trimmed) for the record
builders to interpret.

The extractor never raises on malformed content; it returns whatever it
managed to collect.
"""

import re

from .scanner import Scanner

PropertyMap = dict[str, str]

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
# \uXXXX is not decoded.
_ESCAPE_RE = re.compile(r'\\(["\\/bfnrt])')


def _is_single_string(text: str) -> bool:
    """True when ``text`` is exactly one double-quoted string literal."""
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        return False
    scanner = Scanner(text)
    for index in range(1, len(text)):
        if text[index] == '"' and not scanner.is_escaped(index):
            return index == len(text) - 1
    return False


def unquote(raw: str) -> str:
    """Strip the quotes off a single string literal and decode simple escapes.

    Anything that is not exactly one string literal is returned trimmed.
    """
    text = raw.strip()
    if not _is_single_string(text):
        return text
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(1)], text[1:-1])


def parse_flat_object(text: str) -> PropertyMap:
    """
    Parse ``{"key": value, ...}`` into a mapping of key to raw value text.

    Commas only end a property outside quotes and outside nested ``{}``/``[]``,
    so ``"flavorTags": ["a", "b"]`` stays one property. A property also ends
    at the end of the input. Duplicate keys: last one wins.
    """
    properties: PropertyMap = {}
    stripped = text.strip()
    if not (stripped.startswith("{") and stripped.endswith("}")):
        return properties

    scanner = Scanner(
        stripped[1:-1], openers="{[", closers="}]", track_quotes=True
    )
    key: list[str] = []
    value: list[str] = []

    def flush() -> None:
        name = unquote("".join(key))
        if name:
            properties[name] = unquote("".join(value))
        key.clear()
        value.clear()
        scanner.in_key = True

    while not scanner.done:
        ch = scanner.peek()
        at_top = not scanner.in_quotes and scanner.depth == 0

        if at_top and ch == ":" and scanner.in_key:
            scanner.in_key = False
            scanner.skip()
            continue
        if at_top and ch == ",":
            flush()
            scanner.skip()
            continue

        ch = scanner.next()
        if not scanner.in_key:
            value.append(ch)
        elif ch not in '"{}[]':
            key.append(ch)

    flush()
    return properties


def split_scalar_array(text: str) -> list[str]:
    """Split ``["a", "b", 3]`` into unquoted element texts.

    Commas inside quoted elements do not split. Blank elements (trailing
    commas) are dropped; ``[]`` and non-array text give an empty list.
    """
    stripped = text.strip()
    if not (stripped.startswith("[") and stripped.endswith("]")):
        return []

    scanner = Scanner(
        stripped[1:-1], openers="{[", closers="}]", track_quotes=True
    )
    items: list[str] = []
    current: list[str] = []

    def flush() -> None:
        raw = "".join(current)
        if raw.strip():
            items.append(unquote(raw))
        current.clear()

    while not scanner.done:
        if not scanner.in_quotes and scanner.depth == 0 and scanner.peek() == ",":
            flush()
            scanner.skip()
            continue
        current.append(scanner.next())

    flush()
    return items
