"""Models for the text actions built on top of the engine.

An action is what a user triggers on a text field: format, minify,
escape or unescape. ActionResult carries the rendered text plus the
engine result it was rendered from.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from .outcome import ParseError, ParseOutcome


class ActionName(str, Enum):
    NORMALIZE = "normalize"
    FORMAT = "format"
    MINIFY = "minify"
    ESCAPE = "escape"
    UNESCAPE = "unescape"


class ActionResult(BaseModel, frozen=True):
    """Output of a single action."""
    action: ActionName
    output: str = ""
    outcome: ParseOutcome | None = None
    error: ParseError | None = None

    @property
    def success(self) -> bool:
        return self.error is None and self.outcome is not None
