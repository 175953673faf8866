"""Tests for format / minify / escape / unescape actions."""

import json

from json_normalizer.models.actions import ActionName
from json_normalizer.models.outcome import ParseErrorKind
from json_normalizer.tools.actions import (
    escape_json,
    format_json,
    minify_json,
    run_action,
    unescape_json,
)
from json_normalizer.tools.recursive_unescape import RecursiveUnescapeCommand


class TestFormat:
    def test_two_space_indent(self):
        result = format_json('{"a":[1,2]}')
        assert result.success
        assert result.output == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_four_space_indent(self, sample_doc):
        result = format_json(json.dumps(sample_doc), indent=4)
        assert result.output == json.dumps(sample_doc, indent=4)

    def test_non_ascii_kept(self):
        result = format_json('{"city": "Z\\u00fcrich"}')
        assert "Zürich" in result.output

    def test_reports_unescape(self):
        result = format_json(r'{\"a\":1}')
        assert result.success
        assert result.outcome.unescaped is True
        assert json.loads(result.output) == {"a": 1}

    def test_invalid(self, strict_engine):
        result = format_json("not json at all", engine=strict_engine)
        assert not result.success
        assert result.output == ""
        assert result.error.kind == ParseErrorKind.STRICT_SYNTAX_ERROR


class TestMinify:
    def test_compact(self, sample_doc):
        result = minify_json(json.dumps(sample_doc, indent=2))
        assert result.success
        assert "\n" not in result.output
        assert ", " not in result.output
        assert json.loads(result.output) == sample_doc

    def test_matches_compact_separators(self):
        assert minify_json('{ "a" : [ 1 , 2 ] }').output == '{"a":[1,2]}'


class TestEscape:
    def test_escape_produces_string_literal(self):
        result = escape_json('{"a": "b"}')
        assert result.output == r'"{\"a\":\"b\"}"'

    def test_escape_then_normalize_round_trips(self, sample_doc):
        escaped = escape_json(json.dumps(sample_doc)).output
        assert json.loads(json.loads(escaped)) == sample_doc
        back = format_json(escaped)
        assert back.outcome.unescaped is True
        assert json.loads(back.output) == sample_doc

    def test_escape_invalid(self, strict_engine):
        result = escape_json("{oops", engine=strict_engine)
        assert not result.success


class TestUnescape:
    def test_nested_layers(self, nested, sample_doc):
        result = unescape_json(nested(sample_doc, 4))
        assert result.success
        assert result.outcome.layers == 4
        assert json.loads(result.output) == sample_doc

    def test_already_plain(self):
        result = unescape_json('{"a": 1}')
        assert result.success
        assert result.outcome.layers == 0

    def test_failure_carries_layer(self, strict_engine):
        command = RecursiveUnescapeCommand(engine=strict_engine)
        result = unescape_json(json.dumps("{broken"), command=command)
        assert not result.success
        assert result.error.layer == 2


class TestRunAction:
    def test_dispatch(self):
        assert run_action(ActionName.MINIFY, '{ "a" : 1 }').output == '{"a":1}'
        assert run_action(ActionName.ESCAPE, "[1]").output == '"[1]"'
        assert run_action(ActionName.FORMAT, "[1]", indent=0).output == "[\n1\n]"

    def test_normalize_renders_formatted(self):
        result = run_action(ActionName.NORMALIZE, '{"a":1}')
        assert result.action == ActionName.NORMALIZE
        assert result.output == '{\n  "a": 1\n}'

    def test_unescape_dispatch(self, nested):
        result = run_action(ActionName.UNESCAPE, nested({"k": "v"}, 2))
        assert result.action == ActionName.UNESCAPE
        assert result.outcome.layers == 2
