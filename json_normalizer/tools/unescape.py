"""Collapse redundant escaping around a JSON document.

A JSON document that was stored inside a JSON string and then pasted
without its outer quotes looks like ``{\\"a\\": 1}``. Collapsing ``\\"``
to ``"`` and ``\\\\`` to ``\\`` recovers the document, but doing it with a
global find/replace also mangles escapes that legitimately belong to
string values (``"he said \\"hi\\""``).

This module scans character by character instead, tracking whether it is
outside any string, inside a string, or just after a backslash. Only
escapes that cannot be valid JSON where they appear are
collapsed:

- Outside strings a backslash is never valid, so ``\\"``, ``\\\\``, ``\\n``,
  ``\\r`` and ``\\t`` there are wrapping and are decoded. An escaped quote
  opens a *wrapped* string.
- Inside a wrapped string ``\\"`` closes the string and ``\\\\`` starts an
  escape of the inner document.
- Inside a plain string (opened by a bare quote) nothing is touched.

Each round peels one level of escaping. ``UnescapeLayer`` repeats rounds
until a round changes nothing or the round cap is hit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

MAX_UNESCAPE_ROUNDS = 10

# Escapes that can only be wrapping when they appear outside a string
_OUTSIDE_STRING_ESCAPES = {
    '\\"': '"',
    "\\n": "\n",
    "\\r": "\r",
    "\\t": "\t",
}


class ScanState(str, Enum):
    NORMAL = "normal"        # outside any string
    IN_STRING = "in_string"
    IN_ESCAPE = "in_escape"  # just read a backslash inside a string


@dataclass(frozen=True)
class CollapseResult:
    """Text after collapsing, with how many rounds changed it."""
    text: str
    rounds: int
    stable: bool  # False when the round cap was hit before a fixpoint


def has_escapes(text: str) -> bool:
    """True if the text contains an escaped quote or an escaped backslash."""
    return '\\"' in text or "\\\\" in text


def collapse_once(text: str) -> str:
    """Run a single collapse round over the text."""
    out: list[str] = []
    state = ScanState.NORMAL
    escape_from = ScanState.NORMAL  # state to return to after IN_ESCAPE
    wrapped = False  # current string was opened by an escaped quote
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        pair = text[i:i + 2]

        if state is ScanState.NORMAL:
            if pair == "\\\\":
                # Escaped backslash: the next unit belongs to a deeper level
                out.append("\\")
                state, escape_from = ScanState.IN_ESCAPE, ScanState.NORMAL
                i += 2
                continue
            if pair in _OUTSIDE_STRING_ESCAPES:
                out.append(_OUTSIDE_STRING_ESCAPES[pair])
                if pair == '\\"':
                    state = ScanState.IN_STRING
                    wrapped = True
                i += 2
                continue
            if ch == '"':
                state = ScanState.IN_STRING
                wrapped = False
            out.append(ch)
            i += 1

        elif state is ScanState.IN_STRING:
            if wrapped and pair == '\\"':
                out.append('"')
                state = ScanState.NORMAL
                i += 2
                continue
            if wrapped and pair == "\\\\":
                out.append("\\")
                state, escape_from = ScanState.IN_ESCAPE, ScanState.IN_STRING
                i += 2
                continue
            if ch == "\\":
                state, escape_from = ScanState.IN_ESCAPE, ScanState.IN_STRING
            elif ch == '"' and not wrapped:
                state = ScanState.NORMAL
            out.append(ch)
            i += 1

        else:
            decoding = wrapped or escape_from is ScanState.NORMAL
            if decoding and pair in ('\\"', "\\\\"):
                out.append(pair[1])
                i += 2
            else:
                out.append(ch)
                i += 1
            state = escape_from

    return "".join(out)


class UnescapeLayer:
    """Bounded fixpoint of collapse rounds."""

    def __init__(self, max_rounds: int = MAX_UNESCAPE_ROUNDS):
        if not 1 <= max_rounds <= MAX_UNESCAPE_ROUNDS:
            raise ValueError(f"max_rounds must be between 1 and {MAX_UNESCAPE_ROUNDS}")
        self.max_rounds = max_rounds

    def collapse(self, text: str) -> str:
        """Collapse until nothing changes or the round cap is reached."""
        return self.collapse_rounds(text).text

    def collapse_rounds(self, text: str) -> CollapseResult:
        current = text
        for rounds in range(self.max_rounds):
            collapsed = collapse_once(current)
            if collapsed == current:
                return CollapseResult(text=current, rounds=rounds, stable=True)
            current = collapsed

        logger.debug("Unescape stopped at the %d round cap", self.max_rounds)
        return CollapseResult(text=current, rounds=self.max_rounds, stable=False)
