"""Text actions: format, minify, escape, unescape.

These are the operations a JSON formatter exposes to its user. Each one
runs the input through the engine and renders the normalized value.
"""

from __future__ import annotations

import json
import logging

from json_normalizer.models.actions import ActionName, ActionResult
from json_normalizer.models.json_types import JSONValue
from json_normalizer.models.outcome import ParseError

from .normalizer import NormalizationEngine
from .recursive_unescape import RecursiveUnescapeCommand

logger = logging.getLogger(__name__)

_default_engine = NormalizationEngine()
_default_command = RecursiveUnescapeCommand(engine=_default_engine)


def _pretty(value: JSONValue, indent: int) -> str:
    return json.dumps(value, indent=indent, ensure_ascii=False)


def _compact(value: JSONValue) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _run(action: ActionName, result, render) -> ActionResult:
    if isinstance(result, ParseError):
        logger.info("%s failed: %s", action.value, result.describe())
        return ActionResult(action=action, error=result)
    if result.repaired:
        logger.info("%s: input was repaired by the best-effort parser", action.value)
    return ActionResult(action=action, output=render(result.value), outcome=result)


def format_json(text: str, indent: int = 2, engine: NormalizationEngine | None = None) -> ActionResult:
    """Pretty-print with the given indent."""
    engine = engine or _default_engine
    return _run(ActionName.FORMAT, engine.normalize(text), lambda v: _pretty(v, indent))


def minify_json(text: str, engine: NormalizationEngine | None = None) -> ActionResult:
    engine = engine or _default_engine
    return _run(ActionName.MINIFY, engine.normalize(text), _compact)


def escape_json(text: str, engine: NormalizationEngine | None = None) -> ActionResult:
    """Encode the document as a JSON string literal.

    The compact form of the value is itself serialized as a string, so the
    output can be embedded as a string field in another document.
    """
    engine = engine or _default_engine
    return _run(ActionName.ESCAPE, engine.normalize(text), lambda v: json.dumps(_compact(v), ensure_ascii=False))


def unescape_json(
    text: str,
    indent: int = 2,
    command: RecursiveUnescapeCommand | None = None,
) -> ActionResult:
    """Peel every string layer, then pretty-print."""
    command = command or _default_command
    return _run(ActionName.UNESCAPE, command.run(text), lambda v: _pretty(v, indent))


def run_action(
    action: ActionName,
    text: str,
    indent: int = 2,
    engine: NormalizationEngine | None = None,
    command: RecursiveUnescapeCommand | None = None,
) -> ActionResult:
    """Dispatch by action name. NORMALIZE renders like FORMAT."""
    if action is ActionName.MINIFY:
        return minify_json(text, engine=engine)
    if action is ActionName.ESCAPE:
        return escape_json(text, engine=engine)
    if action is ActionName.UNESCAPE:
        return unescape_json(text, indent=indent, command=command)
    result = format_json(text, indent=indent, engine=engine)
    return result.model_copy(update={"action": action})
