"""Normalize JSON-like text into a value plus recovery diagnostics.

Three tiers, tried in order:

1. Strict parse of the text as given. A string result which itself parses
   to a non-string value (object, array, number, bool, null) is a JSON
   document stored as a JSON string; its inner value is returned with
   ``unescaped=True``. A string that parses to another string is left for
   RecursiveUnescapeCommand, one layer per call.
2. If the strict parse failed and the text has escaped quotes or
   backslashes: collapse the escaping (see unescape.py) and parse strictly
   again.
3. Best-effort recovery of the original text. If that fails too, the
   error from tier 1 is returned, since the first structural error is the
   most useful one to show.
"""

from __future__ import annotations

import json
import logging

from json_normalizer.models.json_types import JSONValue, kind_of
from json_normalizer.models.outcome import ParseError, ParseErrorKind, ParseOutcome, ParseResult

from .best_effort import BestEffortError, BestEffortParser
from .strict_parser import StrictParser
from .unescape import UnescapeLayer, has_escapes

logger = logging.getLogger(__name__)

# null is a valid nested value, so "no document" needs its own marker
_NOT_A_DOCUMENT = object()


class NormalizationEngine:
    """Strict, then unescape + strict, then best-effort.

    Collaborators are injectable so each tier can be exercised on its own.
    ``use_best_effort=False`` ends the chain after tier 2.
    """

    def __init__(
        self,
        strict: StrictParser | None = None,
        best_effort: BestEffortParser | None = None,
        unescape: UnescapeLayer | None = None,
        use_best_effort: bool = True,
    ):
        self.strict = strict or StrictParser()
        self.unescape = unescape or UnescapeLayer()
        self.best_effort = (best_effort or BestEffortParser()) if use_best_effort else None

    def normalize(self, text: str) -> ParseResult:
        escaped = has_escapes(text)

        # Tier 1: strict
        try:
            value = self.strict.parse(text)
        except json.JSONDecodeError as e:
            syntax_error = e
            logger.debug("Strict parse failed at char %d: %s", e.pos, e.msg)
        else:
            if isinstance(value, str):
                inner = self._parse_nested_document(value)
                if inner is not _NOT_A_DOCUMENT:
                    return ParseOutcome(value=inner, unescaped=True)
            return ParseOutcome(value=value)

        # Tier 2: unescape + strict
        if escaped:
            collapsed = self.unescape.collapse_rounds(text)
            if not collapsed.stable:
                logger.warning(
                    "%s: escaping did not settle after %d rounds",
                    ParseErrorKind.UNESCAPE_EXHAUSTED.value, collapsed.rounds,
                )
            try:
                value = self.strict.parse(collapsed.text)
            except json.JSONDecodeError as e:
                logger.debug("Strict parse after %d unescape rounds failed: %s",
                             collapsed.rounds, e.msg)
            else:
                logger.debug("Parsed after %d unescape rounds", collapsed.rounds)
                return ParseOutcome(value=value, unescaped=True)

        # Tier 3: best-effort on the original text
        if self.best_effort is not None:
            try:
                value = self.best_effort.parse(text)
            except BestEffortError as e:
                logger.debug("%s: %s", ParseErrorKind.BEST_EFFORT_FAILURE.value, e)
            else:
                return ParseOutcome(value=value, repaired=True)

        return ParseError.from_decode_error(syntax_error)

    def _parse_nested_document(self, text: str) -> JSONValue:
        """Strictly parse a decoded string.

        Returns _NOT_A_DOCUMENT unless the string holds JSON text for a
        non-string value. A string inside a string is one layer at a time,
        left for the caller to unwrap again.
        """
        try:
            inner = self.strict.parse(text)
        except json.JSONDecodeError:
            return _NOT_A_DOCUMENT
        if isinstance(inner, str):
            return _NOT_A_DOCUMENT
        logger.debug("Decoded a JSON %s stored as a string", kind_of(inner).value)
        return inner
