from .actions import ActionName, ActionResult
from .json_types import JSONArray, JSONKind, JSONObject, JSONScalar, JSONValue, is_container, kind_of
from .outcome import ParseError, ParseErrorKind, ParseOutcome, ParseResult

__all__ = [
    "JSONScalar",
    "JSONValue",
    "JSONObject",
    "JSONArray",
    "JSONKind",
    "kind_of",
    "is_container",
    "ParseErrorKind",
    "ParseOutcome",
    "ParseError",
    "ParseResult",
    "ActionName",
    "ActionResult",
]
