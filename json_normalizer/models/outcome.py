"""Result models for the normalization engine.

Every engine operation returns either a ParseOutcome or a ParseError.
Malformed input is an expected result, not an exception, so the three
fallback tiers can be followed (and tested) one branch at a time.

All models use Pydantic v2 with frozen=True for immutability.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel

from .json_types import JSONKind, kind_of


class ParseErrorKind(str, Enum):
    STRICT_SYNTAX_ERROR = "StrictSyntaxError"
    UNESCAPE_EXHAUSTED = "UnescapeExhausted"  # logged only, never returned
    BEST_EFFORT_FAILURE = "BestEffortFailure"
    MAX_LAYERS_EXCEEDED = "MaxLayersExceeded"


class ParseOutcome(BaseModel, frozen=True):
    """A successfully normalized value plus the recovery that produced it."""
    value: Any = None
    repaired: bool = False   # best-effort parser produced the value
    unescaped: bool = False  # an unescape step ran before the strict parse
    layers: int = 0          # recursive unescape iterations; 0 for normalize()

    @property
    def ok(self) -> bool:
        return True

    @property
    def kind(self) -> JSONKind:
        return kind_of(self.value)


class ParseError(BaseModel, frozen=True):
    """A failed normalization, suitable for showing to a user."""
    kind: ParseErrorKind
    message: str
    position: int | None = None  # character offset into the input
    line: int | None = None
    column: int | None = None
    layer: int | None = None     # recursive unescape iteration that failed

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_decode_error(cls, exc: json.JSONDecodeError) -> ParseError:
        """Build a StrictSyntaxError from the strict parser's exception."""
        return cls(
            kind=ParseErrorKind.STRICT_SYNTAX_ERROR,
            message=exc.msg,
            position=exc.pos,
            line=exc.lineno,
            column=exc.colno,
        )

    def at_layer(self, layer: int) -> ParseError:
        """Copy of this error tagged with the recursive layer it came from."""
        return self.model_copy(update={
            "layer": layer,
            "message": f"layer {layer}: {self.message}",
        })

    def describe(self) -> str:
        """One-line description for CLI and log output."""
        text = f"{self.kind.value}: {self.message}"
        if self.line is not None and self.column is not None:
            text += f" (line {self.line}, column {self.column})"
        elif self.position is not None:
            text += f" (char {self.position})"
        return text


ParseResult = Union[ParseOutcome, ParseError]
