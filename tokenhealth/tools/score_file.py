#!/usr/bin/env python3
"""
Score token payload files from the command line.

Each file holds one JSON object: the provider payload bag accepted by
POST /api/score. Prints one JSON result per line, in argument order.

Usage:
  python -m tokenhealth.tools.score_file payload.json [more.json ...] [--now 2026-01-01T00:00:00Z]

Exit code 1 when any file is unreadable or not a JSON object; the other
files are still scored.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from tokenhealth.analytics.scan_pipeline import run_token_scan
from tokenhealth.config import get_settings
from tokenhealth.core.exceptions import PayloadError
from tokenhealth.scoring.development import parse_iso8601
from tokenhealth.tokenhealth_logging import configure_structlog, get_logger

logger = get_logger(__name__)


def load_payload(path: Path) -> dict[str, Any]:
    """Read one payload file; raise PayloadError when unreadable or not an object."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PayloadError(f"{path}: {e}") from e
    if not isinstance(data, dict):
        raise PayloadError(f"{path}: payload must be a JSON object")
    return data


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score token payload JSON files.")
    parser.add_argument("paths", nargs="+", type=Path, help="Payload JSON files")
    parser.add_argument("--now", default=None, help="ISO-8601 time for freshness scoring (default: now)")
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print with this indent")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    configure_structlog(settings.log_format, settings.log_level)
    now = None
    if args.now is not None:
        now = parse_iso8601(args.now)
        if now is None:
            print(f"[score_file] ERROR: --now is not an ISO-8601 timestamp: {args.now}", file=sys.stderr)
            return 2

    failures = 0
    for path in args.paths:
        try:
            payload = load_payload(path)
        except PayloadError as e:
            failures += 1
            logger.error("score_file_payload_error", path=str(path), error=str(e))
            print(f"[score_file] ERROR: {e}", file=sys.stderr)
            continue
        result = run_token_scan(payload, now=now).to_dict()
        result.setdefault("source", str(path))
        print(json.dumps(result, indent=args.indent, sort_keys=args.indent is not None))

    logger.info("score_file_done", files=len(args.paths), failures=failures)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
