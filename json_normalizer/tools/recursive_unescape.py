"""Peel nested layers of "JSON stored as a JSON string".

A log line can hold a JSON-encoded string whose content is itself a
JSON-encoded string, and so on. The command normalizes, and while the
result is still a string it normalizes that string again. It is a plain
loop with a layer counter, bounded by ``max_iterations``.
"""

from __future__ import annotations

import logging

from json_normalizer.models.outcome import ParseError, ParseErrorKind, ParseOutcome, ParseResult

from .normalizer import NormalizationEngine

logger = logging.getLogger(__name__)

MAX_LAYERS = 10


class RecursiveUnescapeCommand:
    """Normalize repeatedly until the value is no longer a string.

    An iteration counts as one layer when its value is a string or when the
    engine had to unescape to get it. Reaching ``max_iterations`` layers
    fails with MaxLayersExceeded, so text nested N < max_iterations times
    succeeds with ``layers == N``.
    """

    def __init__(self, engine: NormalizationEngine | None = None, max_iterations: int = MAX_LAYERS):
        if not 1 <= max_iterations <= MAX_LAYERS:
            raise ValueError(f"max_iterations must be between 1 and {MAX_LAYERS}")
        self.engine = engine or NormalizationEngine()
        self.max_iterations = max_iterations

    def run(self, text: str) -> ParseResult:
        current = text
        layers = 0
        repaired = False
        unescaped = False

        for iteration in range(1, self.max_iterations + 1):
            result = self.engine.normalize(current)
            if isinstance(result, ParseError):
                logger.debug("Layer %d failed: %s", iteration, result.message)
                return result.at_layer(iteration)

            repaired = repaired or result.repaired
            unescaped = unescaped or result.unescaped
            still_string = isinstance(result.value, str)
            if still_string or result.unescaped:
                layers += 1
            if layers >= self.max_iterations:
                break

            if not still_string:
                return ParseOutcome(
                    value=result.value,
                    repaired=repaired,
                    unescaped=unescaped,
                    layers=layers,
                )

            logger.debug("Layer %d decoded to a string, unwrapping again", iteration)
            current = result.value

        return ParseError(
            kind=ParseErrorKind.MAX_LAYERS_EXCEEDED,
            message=f"Still nested after {self.max_iterations} layers",
            layer=layers,
        )
