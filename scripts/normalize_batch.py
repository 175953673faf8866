#!/usr/bin/env python3
"""Batch runner for the JSON normalizer.

Runs every .json/.txt/.log file in a directory through one action and
writes a markdown summary of what was parsed cleanly, unescaped, repaired
or rejected.

Usage:
    python scripts/normalize_batch.py samples/                    # format everything
    python scripts/normalize_batch.py samples/ --action unescape
    python scripts/normalize_batch.py samples/ --file broken.json  # single file
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path so json_normalizer imports work without installing
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from json_normalizer.config import build_engine, build_unescape_command, settings_from_env
from json_normalizer.models.actions import ActionName
from json_normalizer.tools.actions import run_action

# ── Logging ──────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("batch")

SUPPORTED_EXTENSIONS = {".json", ".txt", ".log"}


def run_single(path: Path, action: ActionName, engine, command, indent: int) -> dict:
    """Run one file through the action, return a result row."""
    start = time.time()
    text = path.read_text(encoding="utf-8", errors="replace")
    result = run_action(action, text, indent=indent, engine=engine, command=command)
    elapsed = time.time() - start

    outcome = result.outcome
    row = {
        "file": path.name,
        "size_kb": round(path.stat().st_size / 1024, 1),
        "success": result.success,
        "repaired": bool(outcome and outcome.repaired),
        "unescaped": bool(outcome and outcome.unescaped),
        "layers": outcome.layers if outcome else 0,
        "error": result.error.describe() if result.error else "",
        "time_ms": round(elapsed * 1000, 1),
    }

    status = "OK" if result.success else f"FAILED: {row['error']}"
    logger.info(
        "%s | %s | repaired=%s unescaped=%s layers=%d | %.1fms",
        path.name, status, row["repaired"], row["unescaped"], row["layers"], row["time_ms"],
    )
    return row


def generate_report(results: list[dict], action: ActionName, source_dir: Path) -> str:
    """Generate a markdown summary table from batch results."""
    now = datetime.now().strftime("%Y-%m-%d %H:%M")
    passed = sum(1 for r in results if r["success"])
    repaired = sum(1 for r in results if r["repaired"])
    unescaped = sum(1 for r in results if r["unescaped"])

    lines = [
        f"# Normalize Batch Results: {now}",
        "",
        f"**Action:** {action.value}  ",
        f"**Files:** {len(results)} ({passed} ok, {len(results) - passed} failed)  ",
        f"**Repaired:** {repaired}  ",
        f"**Unescaped:** {unescaped}  ",
        f"**Source dir:** `{source_dir}`",
        "",
        "## Results",
        "",
        "| # | File | Size | Status | Repaired | Unescaped | Layers | Time |",
        "|---|------|------|--------|----------|-----------|--------|------|",
    ]

    for i, r in enumerate(results, 1):
        status = "OK" if r["success"] else "FAIL"
        lines.append(
            f"| {i} | {r['file']} | {r['size_kb']}KB | {status} "
            f"| {'yes' if r['repaired'] else ''} | {'yes' if r['unescaped'] else ''} "
            f"| {r['layers']} | {r['time_ms']}ms |"
        )

    failures = [r for r in results if not r["success"]]
    if failures:
        lines.extend(["", "## Failures", ""])
        for r in failures:
            lines.append(f"- **{r['file']}**: {r['error']}")

    lines.append("")
    return "\n".join(lines)


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(description="Run the JSON normalizer over a directory")
    parser.add_argument("directory", type=Path, help="Directory of input files")
    parser.add_argument("--action", default=ActionName.FORMAT.value,
                        choices=[a.value for a in ActionName])
    parser.add_argument("--file", type=str, help="Run a single file by name")
    parser.add_argument("--report", type=Path, default=None,
                        help="Where to write the markdown summary (default: DIR/batch_results.md)")
    args = parser.parse_args()

    source_dir: Path = args.directory
    if not source_dir.is_dir():
        logger.error("Not a directory: %s", source_dir)
        sys.exit(1)

    if args.file:
        path = source_dir / args.file
        if not path.exists():
            logger.error("File not found: %s", path)
            sys.exit(1)
        files = [path]
    else:
        files = sorted(
            p for p in source_dir.iterdir()
            if p.suffix.lower() in SUPPORTED_EXTENSIONS and not p.name.startswith(".")
        )

    if not files:
        logger.error("No input files found in %s", source_dir)
        sys.exit(1)

    settings = settings_from_env()
    engine = build_engine(settings)
    command = build_unescape_command(settings)
    action = ActionName(args.action)

    logger.info("Batch %s: %d file(s)", action.value, len(files))
    results = [run_single(p, action, engine, command, settings.indent) for p in files]

    report_path = args.report or source_dir / "batch_results.md"
    report_path.write_text(generate_report(results, action, source_dir))

    passed = sum(1 for r in results if r["success"])
    logger.info("Results: %d/%d ok", passed, len(results))
    logger.info("Report: %s", report_path)

    if passed < len(results):
        sys.exit(1)


if __name__ == "__main__":
    main()
