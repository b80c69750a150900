"""Command-line entrypoint: extract a creative from a saved snapshot or a live page.

Usage (examples)
----------------
# Replay a saved snapshot payload
adcard-extract --input card.json --brand-hint "Acme"

# Read the payload from stdin
cat card.json | adcard-extract --input -

# Capture the first matching element of a live page with Chromium
adcard-extract --url "https://www.facebook.com/ads/library/?id=123" \
  --selector "div[role='article']" --debug-snapshot
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from typing import Any

from .config import ExtractorConfig, get_extractor_version
from .debug import dump_snapshot
from .hashing import creative_fingerprint
from .logging import configure_logging, jlog, logging_context, set_global_context
from .metadata import build_creative_record
from .playwright import DEFAULT_PAGE_TIMEOUT_MS, DEFAULT_USER_AGENT, capture_card_from_url
from .snapshot import CardSnapshot, card_snapshot_from_payload

PIPELINE_NAME = "extract"


@dataclass(frozen=True)
class CliArgs:
    input: str | None
    url: str | None
    selector: str | None
    brand_hint: str
    base_url: str | None
    output: str | None
    include_raw_text: bool
    debug_snapshot: bool
    user_agent: str
    page_timeout_ms: int
    verbose: bool


def validate_args(args: argparse.Namespace) -> None:
    """Reject contradictory or incomplete source options."""

    if args.input and args.url:
        raise ValueError("--input and --url are mutually exclusive")
    if not args.input and not args.url:
        raise ValueError("one of --input or --url is required")
    if args.url and not args.selector:
        raise ValueError("--selector is required with --url")
    if args.page_timeout_ms <= 0:
        raise ValueError(f"--page-timeout-ms must be positive (got {args.page_timeout_ms})")


def parse_args(argv: list[str] | None = None) -> CliArgs:
    p = argparse.ArgumentParser(description="Extract a structured ad creative from a scraped card")
    p.add_argument("--input", help="Snapshot payload JSON file, or '-' for stdin")
    p.add_argument("--url", help="Page to open with Chromium for a live capture")
    p.add_argument("--selector", help="CSS selector of the ad card element (required with --url)")
    p.add_argument("--brand-hint", default="", help="Best-effort brand name, used to strip header prefixes")
    p.add_argument("--base-url", help="Base URL for resolving relative media URLs (defaults to the page URL)")
    p.add_argument("--output", help="Write the JSON record here instead of stdout")
    p.add_argument("--include-raw-text", action="store_true", help="Add the unprocessed card text to the record")
    p.add_argument(
        "--debug-snapshot",
        action="store_true",
        help="Dump the card snapshot to media/debug/snapshot_<fingerprint>.json for replay.",
    )
    p.add_argument("--user-agent", default=DEFAULT_USER_AGENT)
    p.add_argument("--page-timeout-ms", type=int, default=DEFAULT_PAGE_TIMEOUT_MS)
    p.add_argument("--verbose", action="store_true", help="Emit debug-level structured logs")

    ns = p.parse_args(argv)
    validate_args(ns)

    return CliArgs(
        input=ns.input,
        url=ns.url,
        selector=ns.selector,
        brand_hint=ns.brand_hint or "",
        base_url=ns.base_url,
        output=ns.output,
        include_raw_text=ns.include_raw_text,
        debug_snapshot=ns.debug_snapshot,
        user_agent=ns.user_agent,
        page_timeout_ms=ns.page_timeout_ms,
        verbose=ns.verbose,
    )


def load_payload(path: str) -> dict[str, Any]:
    """Read a snapshot payload; a bare string payload is treated as card text."""

    try:
        if path == "-":
            data = json.load(sys.stdin)
        else:
            with open(path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid snapshot payload in {path}: {exc}") from exc
    except FileNotFoundError as exc:
        raise ValueError(f"snapshot payload not found: {path}") from exc
    if isinstance(data, str):
        return {"text": data}
    if not isinstance(data, dict):
        raise ValueError(f"snapshot payload must be a JSON object, got {type(data).__name__}")
    return data


async def load_snapshot(args: CliArgs) -> CardSnapshot:
    if args.url:
        return await capture_card_from_url(
            args.url,
            args.selector or "",
            user_agent=args.user_agent,
            page_timeout_ms=args.page_timeout_ms,
        )
    return card_snapshot_from_payload(load_payload(args.input or "-"))


async def run(args: CliArgs, *, config: ExtractorConfig | None = None) -> dict[str, Any]:
    """Extract one creative and write its record; returns the record."""

    config = config or ExtractorConfig.from_env()
    snapshot = await load_snapshot(args)
    creative = snapshot.extract(args.brand_hint, base_url=args.base_url, config=config)
    record = build_creative_record(
        creative,
        extractor_version=get_extractor_version(),
        page_url=snapshot.page_url,
        include_raw_text=args.include_raw_text,
    )
    if args.debug_snapshot:
        dump_snapshot(snapshot, creative_fingerprint(creative)[:16])

    text = json.dumps(record, ensure_ascii=False, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")
    else:
        print(text)
    jlog("info", event="creative_written", fingerprint=record["fingerprint"], low_confidence=record["low_confidence"])
    return dict(record)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and execute one extraction."""

    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    set_global_context(app="adcard_extractor", pipeline=PIPELINE_NAME)
    with logging_context(extractor_version=get_extractor_version()):
        asyncio.run(run(args))


if __name__ == "__main__":
    main()
