"""Strict JSON parsing against the standard grammar.

Thin wrapper over the standard library ``json`` module. Python's decoder
accepts the non-standard constants NaN, Infinity and -Infinity by default;
those are rejected here so that "strict" means RFC 8259.
"""

from __future__ import annotations

import json

from json_normalizer.models.json_types import JSONValue


def _find_outside_strings(text: str, token: str) -> int:
    """Offset of the first occurrence of token outside string literals, or -1."""
    in_string = False
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if in_string:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif text.startswith(token, i):
            return i
        i += 1
    return -1


class StrictParser:
    """Parses text with no tolerance for deviation from the JSON grammar.

    ``parse`` raises ``json.JSONDecodeError`` carrying ``pos``, ``lineno``
    and ``colno`` when the text is not valid JSON.
    """

    def parse(self, text: str) -> JSONValue:
        def reject_constant(name: str):
            # The decoder hands over the first constant it meets, and every
            # earlier token outside strings was valid, so the first
            # out-of-string occurrence is the one being decoded.
            pos = max(_find_outside_strings(text, name), 0)
            raise json.JSONDecodeError(f"Non-standard constant {name!r}", text, pos)

        return json.loads(text, parse_constant=reject_constant)
