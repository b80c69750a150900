"""Greedy, single-pass assignment of Segments to ad-card fields.

Document order follows visual order on the card (header, body, link card, CTA),
so each slot takes the first segment that qualifies and never changes after.
Rules are evaluated per segment, first match wins:

1. blank segment: paragraph break in the primary text
2. empty key: skipped
3. leftover noise token or social counter: skipped
4. CTA label, while no CTA is set
5. bare domain (optionally with ``http(s)://``), while no domain is set
6. short single-line text without a period, while no headline is set
7. first segment after both domain and headline: description
8. everything else: primary text
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..models import Segment
from ..patterns import (
    CTA_LABEL_SET,
    DOMAIN_ONLY_RE,
    EXCESS_BLANK_LINES_RE,
    HEADLINE_MAX_CHARS,
    HEADLINE_MIN_CHARS,
    NOISE_TOKENS,
    SOCIAL_COUNTER_RE,
    URL_SCHEME_PREFIX_RE,
    collapse_whitespace,
)


class LinkCardStage(Enum):
    AWAITING_DOMAIN = "awaiting_domain"
    AWAITING_HEADLINE = "awaiting_headline"
    COLLECTING_DESCRIPTION = "collecting_description"
    COMPLETE = "complete"


@dataclass(frozen=True, slots=True)
class Classification:
    primary_text: str = ""
    domain: str = ""
    headline: str = ""
    description: str = ""
    cta_label: str = ""


def link_card_stage(domain: str, headline: str, description_parts: list[str]) -> LinkCardStage:
    if not domain:
        return LinkCardStage.AWAITING_DOMAIN
    if not headline:
        return LinkCardStage.AWAITING_HEADLINE
    if not description_parts:
        return LinkCardStage.COLLECTING_DESCRIPTION
    return LinkCardStage.COMPLETE


def is_domain(detection: str) -> bool:
    return DOMAIN_ONLY_RE.match(URL_SCHEME_PREFIX_RE.sub("", detection)) is not None


def is_headline(detection: str) -> bool:
    if not HEADLINE_MIN_CHARS <= len(detection) <= HEADLINE_MAX_CHARS:
        return False
    if "\n" in detection or "." in detection:
        return False
    return detection == collapse_whitespace(detection)


def _is_noise_token(key: str) -> bool:
    return key in NOISE_TOKENS or SOCIAL_COUNTER_RE.match(key) is not None


def join_primary(parts: list[str]) -> str:
    joined = "\n".join(part.rstrip() for part in parts)
    return EXCESS_BLANK_LINES_RE.sub("\n\n", joined).strip()


def classify_segments(segments: list[Segment]) -> Classification:
    primary: list[str] = []
    description_parts: list[str] = []
    domain = ""
    headline = ""
    cta_label = ""

    for segment in segments:
        if segment.is_blank:
            primary.append("")
            continue
        key = segment.key
        if not key or _is_noise_token(key):
            continue
        detection = segment.detection
        if not cta_label and key in CTA_LABEL_SET:
            cta_label = detection
            continue
        if not domain and is_domain(detection):
            domain = detection
            continue
        if not headline and is_headline(detection):
            headline = detection
            continue
        if link_card_stage(domain, headline, description_parts) is LinkCardStage.COLLECTING_DESCRIPTION:
            description_parts.append(detection)
            continue
        primary.append(segment.raw)

    return Classification(
        primary_text=join_primary(primary),
        domain=domain,
        headline=headline,
        description="\n".join(description_parts).strip(),
        cta_label=cta_label,
    )


__all__ = ["Classification", "LinkCardStage", "classify_segments", "is_domain", "is_headline", "join_primary", "link_card_stage"]
