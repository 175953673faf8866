"""Tests for the json-normalize command line."""

import io
import json

import pytest

from json_normalizer.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("MAX_UNESCAPE_ROUNDS", "MAX_LAYERS", "BEST_EFFORT", "INDENT"):
        monkeypatch.delenv(f"JSON_NORMALIZER_{name}", raising=False)
    monkeypatch.setattr("json_normalizer.cli.load_dotenv", lambda: None)


class TestCli:
    def test_format_file(self, tmp_path, capsys):
        path = tmp_path / "in.json"
        path.write_text('{"a":[1,2]}')
        main([str(path)])
        out = capsys.readouterr().out
        assert json.loads(out) == {"a": [1, 2]}
        assert '  "a"' in out

    def test_minify_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('{ "a" : 1 }'))
        main(["-", "--action", "minify"])
        assert capsys.readouterr().out.strip() == '{"a":1}'

    def test_unescape_reports_layers(self, tmp_path, capsys, nested):
        path = tmp_path / "nested.txt"
        path.write_text(nested({"k": "v"}, 3))
        main([str(path), "-a", "unescape", "--indent", "4"])
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"k": "v"}
        assert "3 layer(s)" in captured.err

    def test_output_file(self, tmp_path, capsys):
        src = tmp_path / "in.json"
        dst = tmp_path / "out.json"
        src.write_text("[1,2]")
        main([str(src), "-a", "minify", "-o", str(dst)])
        assert dst.read_text() == "[1,2]\n"
        assert capsys.readouterr().out == ""

    def test_json_output(self, tmp_path, capsys):
        path = tmp_path / "in.json"
        path.write_text(r'{\"a\":1}')
        main([str(path), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["action"] == "format"
        assert data["outcome"]["unescaped"] is True
        assert data["error"] is None

    def test_invalid_input_exits_1(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text('{"a":1,"b":')
        with pytest.raises(SystemExit) as exc_info:
            main([str(path), "--no-repair"])
        assert exc_info.value.code == 1
        assert "StrictSyntaxError" in capsys.readouterr().err

    def test_missing_file_exits_2(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.json")])
        assert exc_info.value.code == 2
        assert "Cannot read" in capsys.readouterr().err
