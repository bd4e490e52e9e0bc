"""Command-line interface for gpgkey_core.

Reads captured key listing output from a file or stdin and prints the
parsed records as text or JSON.
"""

from __future__ import annotations
import argparse
import json
import sys

from .config import load_parser_config
from .errors import KeyParseError
from .logger import get_logger
from .parser import parse_key, parse_listing


def _read_text(path: str) -> str:
    # bytes from stdin and newline="" for files keep CR/CRLF, so raw text stays verbatim
    if path == "-":
        return sys.stdin.buffer.read().decode("utf-8")
    with open(path, "r", encoding="utf-8", newline="") as fh:
        return fh.read()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="gpgkey-parse", description="Parse key listing output into key records.")
    p.add_argument("path", nargs="?", default="-", help="Captured listing file or '-' for stdin")
    p.add_argument("--format", choices=("text", "json"), default="text", help="Output format")
    p.add_argument("--single", action="store_true", help="Treat the whole input as one key block")
    p.add_argument("--strict", action="store_true", help="Fail on malformed key blocks instead of skipping them")
    p.add_argument("--dayfirst", action="store_true", default=None, help="Read ambiguous dates as day/month")
    args = p.parse_args(argv)

    try:
        cfg = load_parser_config({"dayfirst": args.dayfirst})
    except ValueError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2
    log = get_logger("gpgkey.cli", level=cfg.level, to_file=cfg.log_file)

    try:
        text = _read_text(args.path)
        if args.single:
            records = [parse_key(text, cfg)]
        else:
            records = parse_listing(text, cfg, strict=args.strict)
    except (OSError, UnicodeDecodeError, KeyParseError) as ex:
        log.debug(f"[CLI] {args.path}: {ex}")
        sys.stderr.write(f"error: {ex}\n")
        return 2

    if args.format == "json":
        sys.stdout.write(json.dumps([r.to_dict() for r in records], indent=2) + "\n")
    else:
        sys.stdout.write("\n".join(r.format() for r in records))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
