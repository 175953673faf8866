"""Shared test fixtures: nested documents and stand-in parser collaborators."""

from __future__ import annotations

import json
from collections.abc import Callable

import pytest

from json_normalizer.tools.best_effort import BestEffortError
from json_normalizer.tools.normalizer import NormalizationEngine

SAMPLE_DOC = {
    "name": "JSON Formatter",
    "version": "1.0.0",
    "features": ["Format JSON", "Minify JSON", "Escape strings"],
    "nested": {"level1": {"level2": {"value": "Deep nested value"}}},
    "array": [1, 2, 3, 4, 5],
    "boolean": True,
    "null": None,
}


def encode_nested(value, times: int) -> str:
    """JSON text for value, then wrapped as a JSON string `times` more times."""
    text = json.dumps(value)
    for _ in range(times):
        text = json.dumps(text)
    return text


class FailingBestEffort:
    """Best-effort stand-in that never recovers anything."""

    def __init__(self):
        self.calls: list[str] = []

    def parse(self, text: str):
        self.calls.append(text)
        raise BestEffortError("nothing recovered")


class FixedBestEffort:
    """Best-effort stand-in that always 'recovers' the same value."""

    def __init__(self, value):
        self.value = value
        self.calls: list[str] = []

    def parse(self, text: str):
        self.calls.append(text)
        return self.value


@pytest.fixture
def sample_doc() -> dict:
    return json.loads(json.dumps(SAMPLE_DOC))


@pytest.fixture
def nested() -> Callable[[object, int], str]:
    return encode_nested


@pytest.fixture
def failing_best_effort() -> FailingBestEffort:
    return FailingBestEffort()


@pytest.fixture
def strict_engine(failing_best_effort: FailingBestEffort) -> NormalizationEngine:
    """Engine whose best-effort tier always fails."""
    return NormalizationEngine(best_effort=failing_best_effort)


@pytest.fixture
def recovering_engine() -> NormalizationEngine:
    """Engine whose best-effort tier always returns {"recovered": true}."""
    return NormalizationEngine(best_effort=FixedBestEffort({"recovered": True}))
