"""lox-lex: scan a Lox source file and print its tokens."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .reporting import CollectingReporter, ConsoleReporter
from .scanner import Scanner
from .tokens import format_token, token_to_string


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Scan a Lox source file and print its tokens")
    ap.add_argument("path", type=Path, help="Path to Lox source (.lox)")
    ap.add_argument(
        "--table",
        action="store_true",
        help="Print a type/value table instead of one log line per token",
    )
    args = ap.parse_args(argv)

    try:
        text = args.path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log_error(f"file not found: {args.path}")
        return 1

    reporter = CollectingReporter(forward=ConsoleReporter())
    tokens = Scanner(text, reporter).scan()

    if args.table:
        print("=" * 43)
        for row in render_table([format_token(t) for t in tokens]):
            print(row)
    else:
        for t in tokens:
            print(token_to_string(t))

    if reporter.had_error:
        log_error(f"{len(reporter.diagnostics)} lexical error(s) in {args.path}")
        return 1
    return 0


def render_table(rows: List[Dict[str, str]]) -> List[str]:
    width = max([len("type")] + [len(r["type"]) for r in rows])
    lines = [f"{'type':<{width}} | value", f"{'-' * width}-+-{'-' * 5}"]
    lines.extend(f"{r['type']:<{width}} | {r['value']}" for r in rows)
    return lines


def log_error(msg: str) -> None:
    print(f"[lox-lex:error] {msg}")


if __name__ == "__main__":
    raise SystemExit(main())
