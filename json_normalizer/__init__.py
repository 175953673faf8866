"""Normalize JSON-like text: strict, escaped, nested or truncated."""

from json_normalizer.models.outcome import ParseError, ParseErrorKind, ParseOutcome, ParseResult
from json_normalizer.tools.normalizer import NormalizationEngine
from json_normalizer.tools.recursive_unescape import RecursiveUnescapeCommand

_engine = NormalizationEngine()
_command = RecursiveUnescapeCommand(engine=_engine)


def normalize(text: str) -> ParseResult:
    """Parse text through the strict / unescape / best-effort chain."""
    return _engine.normalize(text)


def unescape_fully(text: str) -> ParseResult:
    """Normalize, unwrapping JSON documents nested inside JSON strings."""
    return _command.run(text)


__all__ = [
    "normalize",
    "unescape_fully",
    "NormalizationEngine",
    "RecursiveUnescapeCommand",
    "ParseOutcome",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
]
