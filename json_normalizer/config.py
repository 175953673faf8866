"""Engine configuration.

Settings come from the environment (the CLI loads a ``.env`` file first).
The caps can only be tightened below the built-in bound of 10.

    JSON_NORMALIZER_MAX_UNESCAPE_ROUNDS   1-10, default 10
    JSON_NORMALIZER_MAX_LAYERS            1-10, default 10
    JSON_NORMALIZER_BEST_EFFORT           "0"/"false"/"no" disables tier 3
    JSON_NORMALIZER_INDENT                default indent for format/unescape
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from json_normalizer.tools.normalizer import NormalizationEngine
from json_normalizer.tools.recursive_unescape import MAX_LAYERS, RecursiveUnescapeCommand
from json_normalizer.tools.unescape import MAX_UNESCAPE_ROUNDS, UnescapeLayer

_ENV_PREFIX = "JSON_NORMALIZER_"


class EngineSettings(BaseModel, frozen=True):
    max_unescape_rounds: int = Field(default=MAX_UNESCAPE_ROUNDS, ge=1, le=MAX_UNESCAPE_ROUNDS)
    max_layers: int = Field(default=MAX_LAYERS, ge=1, le=MAX_LAYERS)
    best_effort: bool = True
    indent: int = Field(default=2, ge=0)


def settings_from_env(environ: dict[str, str] | None = None) -> EngineSettings:
    """Build settings from JSON_NORMALIZER_* variables; unset ones keep defaults."""
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for field_name in EngineSettings.model_fields:
        raw = env.get(_ENV_PREFIX + field_name.upper())
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()
    # pydantic parses "1"/"0"/"true"/"false"/"yes"/"no" for bools
    return EngineSettings.model_validate(values)


def build_engine(settings: EngineSettings | None = None) -> NormalizationEngine:
    settings = settings or EngineSettings()
    return NormalizationEngine(
        unescape=UnescapeLayer(max_rounds=settings.max_unescape_rounds),
        use_best_effort=settings.best_effort,
    )


def build_unescape_command(settings: EngineSettings | None = None) -> RecursiveUnescapeCommand:
    settings = settings or EngineSettings()
    return RecursiveUnescapeCommand(
        engine=build_engine(settings),
        max_iterations=settings.max_layers,
    )
