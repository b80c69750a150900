"""Line-level removal of UI chrome and engagement boilerplate."""

from __future__ import annotations

import re

from ..patterns import EXCESS_BLANK_LINES_RE, METADATA_PREFIX_RE, ZERO_WIDTH_SPACE, matches_noise

_SPONSORED = "sponsored"


def normalize_text(text: str | None) -> str:
    """Unify line endings and drop zero-width spaces."""

    if not text:
        return ""
    return text.replace("\r\n", "\n").replace("\r", "\n").replace(ZERO_WIDTH_SPACE, "")


def strip_brand_prefix(line: str, brand_name: str) -> str:
    """Remove a leading ``"{brand} Sponsored"`` or bare ``"{brand}"`` from ``line``."""

    if not brand_name:
        return line
    safe = re.escape(brand_name.strip())
    if not safe:
        return line
    sponsored = re.compile(rf"^\s*{safe}\s*Sponsored\s*", re.IGNORECASE)
    if sponsored.search(line):
        return sponsored.sub("", line, count=1)
    bare = re.compile(rf"^\s*{safe}(?=\W|$)", re.IGNORECASE)
    if bare.search(line):
        return bare.sub("", line, count=1).lstrip()
    return line


def remove_metadata_prefix(line: str) -> str:
    """Drop concatenated UI labels that precede the last "Sponsored" token."""

    idx = line.lower().rfind(_SPONSORED)
    if idx == -1:
        return line
    if METADATA_PREFIX_RE.search(line[:idx]):
        return line[idx + len(_SPONSORED):]
    return line


def filter_noise(text: str | None, brand_name: str = "") -> list[str]:
    """Return cleaned lines in order; ``""`` marks a line that was blank in the source.

    Unknown content always passes through unchanged.
    """

    cleaned: list[str] = []
    for line in normalize_text(text).split("\n"):
        if not line.strip():
            cleaned.append("")
            continue
        value = remove_metadata_prefix(strip_brand_prefix(line, brand_name))
        if not value.strip():
            continue
        if matches_noise(value.strip()):
            continue
        cleaned.append(value)
    return cleaned


def cleaned_text(lines: list[str]) -> str:
    """Join filtered lines the way primary text is joined."""

    joined = "\n".join(line.rstrip() for line in lines)
    return EXCESS_BLANK_LINES_RE.sub("\n\n", joined).strip()


__all__ = ["cleaned_text", "filter_noise", "normalize_text", "remove_metadata_prefix", "strip_brand_prefix"]
