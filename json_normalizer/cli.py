"""CLI entry point for the JSON normalizer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from json_normalizer.config import build_engine, build_unescape_command, settings_from_env
from json_normalizer.models.actions import ActionName
from json_normalizer.tools.actions import run_action


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: list[str] | None = None):
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Format, minify, escape or unescape JSON-like text, recovering escaped or truncated input",
    )
    parser.add_argument("input", nargs="?", default="-", help="File to read, or - for stdin")
    parser.add_argument("--action", "-a", default=ActionName.FORMAT.value,
                        choices=[a.value for a in ActionName], help="Action to run")
    parser.add_argument("--indent", type=int, default=None, help="Indent for format/unescape")
    parser.add_argument("--output", "-o", default="", help="Write output to this file")
    parser.add_argument("--no-repair", action="store_true",
                        help="Do not fall back to best-effort recovery")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--json", action="store_true", help="Output result as JSON")

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )

    settings = settings_from_env()
    if args.no_repair:
        settings = settings.model_copy(update={"best_effort": False})
    indent = settings.indent if args.indent is None else args.indent

    try:
        text = _read_input(args.input)
    except OSError as e:
        print(f"Cannot read {args.input}: {e}", file=sys.stderr)
        sys.exit(2)

    result = run_action(
        ActionName(args.action),
        text,
        indent=indent,
        engine=build_engine(settings),
        command=build_unescape_command(settings),
    )

    if args.json:
        print(result.model_dump_json(indent=2))
    elif result.success:
        if args.output:
            Path(args.output).write_text(result.output + "\n", encoding="utf-8")
        else:
            print(result.output)
        outcome = result.outcome
        notes = []
        if outcome.unescaped:
            notes.append("unescaped")
        if outcome.repaired:
            notes.append("repaired")
        if outcome.layers:
            notes.append(f"{outcome.layers} layer(s)")
        if notes:
            print(f"Recovered: {', '.join(notes)}", file=sys.stderr)

    if not result.success:
        if not args.json:
            print(f"Invalid JSON: {result.error.describe()}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
