"""Best-effort recovery for truncated or malformed JSON.

The recovery heuristics (closing unterminated strings and containers,
dropping trailing commas, quoting bare keys, ...) live in the
``json_repair`` library. This module only adapts its contract: the
library never raises, it returns ``""`` or a stray scalar when it found
nothing structural to recover. Only an array or object counts as a
recovery here; anything else raises BestEffortError.
"""

from __future__ import annotations

import logging

import json_repair

from json_normalizer.models.json_types import JSONValue, is_container, kind_of

logger = logging.getLogger(__name__)


class BestEffortError(ValueError):
    """Raised when no structured value could be recovered from the text."""


class BestEffortParser:
    def parse(self, text: str) -> JSONValue:
        if not text.strip():
            raise BestEffortError("Nothing to recover from empty input")

        try:
            value = json_repair.loads(text)
        except (ValueError, RecursionError) as e:
            raise BestEffortError(f"Recovery failed: {e}") from e

        if not is_container(value):
            try:
                found = kind_of(value).value
            except TypeError:
                found = type(value).__name__
            raise BestEffortError(f"No array or object recovered (got {found})")

        logger.debug("Best-effort parser recovered a %s", kind_of(value).value)
        return value
