"""Text-only extraction: noise filter, splitter, truncation collapser, classifier."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import Segment
from .classifier import classify_segments, join_primary
from .noise import cleaned_text, filter_noise, normalize_text
from .segments import build_segments
from .truncation import collapse_truncated


@dataclass(frozen=True, slots=True)
class ParsedText:
    raw_text: str
    full_ad_copy: str
    primary_text: str = ""
    domain: str = ""
    headline: str = ""
    description: str = ""
    cta_label: str = ""


def fallback_primary_text(segments: list[Segment], lines: list[str], raw_text: str) -> str:
    """Most-cleaned non-empty rendering of the card text.

    Tries the de-truncated segments, then the noise-filtered lines, then the
    normalised raw text, so a collapsed preview stays dropped whenever fuller
    text exists.
    """

    for candidate in (
        join_primary([segment.raw for segment in segments]),
        cleaned_text(lines),
        normalize_text(raw_text).strip(),
    ):
        if candidate:
            return candidate
    return ""


def parse_ad_text(text: str | None, brand_name: str = "") -> ParsedText:
    """Classify card text into primary copy and link-card fields.

    Primary copy is never empty for non-empty input: when classification leaves
    the primary buffer empty, :func:`fallback_primary_text` fills it, even if
    the same text was also reported as a link-card field.
    """

    raw_text = text or ""
    lines = filter_noise(raw_text, brand_name)
    segments = collapse_truncated(build_segments(lines, brand_name))
    result = classify_segments(segments)

    primary_text = result.primary_text or fallback_primary_text(segments, lines, raw_text)

    return ParsedText(
        raw_text=raw_text,
        full_ad_copy=primary_text or normalize_text(raw_text).strip(),
        primary_text=primary_text,
        domain=result.domain,
        headline=result.headline,
        description=result.description,
        cta_label=result.cta_label,
    )


__all__ = ["ParsedText", "fallback_primary_text", "parse_ad_text"]
