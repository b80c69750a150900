"""Split visually merged lines and turn fragments into Segments."""

from __future__ import annotations

import re

from ..models import Segment
from ..patterns import (
    CTA_INLINE_RE,
    DIGITS_AND_SYMBOLS_RE,
    DOMAIN_INLINE_RE,
    TIMESTAMP_RE,
    ZERO_WIDTH_SPACE,
    collapse_whitespace,
    matches_noise,
)

# Domains first, then CTA labels; the order decides how "acme.io Shop Now" breaks up.
_SPLIT_PATTERNS: tuple[re.Pattern[str], ...] = (DOMAIN_INLINE_RE, CTA_INLINE_RE)


def _split_on(fragment: str, pattern: re.Pattern[str]) -> list[str]:
    out: list[str] = []
    remaining = fragment
    while remaining:
        match = pattern.search(remaining)
        if not match:
            out.append(remaining)
            break
        before = remaining[: match.start()]
        if before:
            out.append(before)
        out.append(match.group(0))
        remaining = remaining[match.end():]
    return out


def split_line(line: str) -> list[str]:
    """Break ``line`` around inline domains and CTA labels.

    >>> split_line("Acme acme.io Shop Now")
    ['Acme ', 'acme.io', 'Shop Now']
    """

    fragments = [line]
    for pattern in _SPLIT_PATTERNS:
        fragments = [piece for fragment in fragments for piece in _split_on(fragment, pattern)]
    return [fragment for fragment in fragments if fragment.strip()]


def detection_form(fragment: str) -> str:
    return TIMESTAMP_RE.sub("", fragment.replace(ZERO_WIDTH_SPACE, "")).strip()


def _is_filler(detection: str, brand_key: str) -> bool:
    if matches_noise(detection):
        return True
    if brand_key and collapse_whitespace(detection).lower() == brand_key:
        return True
    if len(detection) == 1 and detection.lower() not in ("a", "i"):
        return True
    return DIGITS_AND_SYMBOLS_RE.match(detection) is not None


def build_segments(lines: list[str], brand_name: str = "") -> list[Segment]:
    """Split cleaned lines into Segments; ``""`` lines become paragraph breaks."""

    brand_key = collapse_whitespace(brand_name or "").lower()
    segments: list[Segment] = []
    for line in lines:
        if not line.strip():
            segments.append(Segment.blank())
            continue
        for fragment in split_line(line):
            detection = detection_form(fragment)
            if not detection or _is_filler(detection, brand_key):
                continue
            segments.append(Segment(raw=fragment, detection=detection))
    return segments


__all__ = ["build_segments", "detection_form", "split_line"]
