"""Pattern tables used to clean and classify scraped ad-card text."""

from __future__ import annotations

import re

NOISE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"^active$",
        r"^activelibrary id",
        r"^library id",
        r"^started running",
        r"^platforms?",
        r"^\d+\s+ads use this creative",
        r"^open dropdown",
        r"^see ad details",
        r"^see summary details",
        r"^this ad has multiple versions$",
        r"^see translation",
        r"^sponsored$",
        r"^facebook ad library",
        r"^ad library\b",
        r"^landing page\b",
        r"^saved \d+",
        r"^show more$",
        r"^show less$",
        r"^facebook$",
        r"^like$",
        r"^comment$",
        r"^share$",
        r"^\d+\s+(likes|comments|shares)$",
        r"^write a comment",
        r"^press enter to post",
    )
)

# Labels that the DOM-to-text conversion glues in front of "Sponsored".
METADATA_PREFIX_RE = re.compile(
    r"(library id|see ad details|open dropdown|summary details|total active time|platforms?)",
    re.IGNORECASE,
)

# Exact-match tokens the classifier ignores even if they survived filtering.
NOISE_TOKENS = frozenset(
    {
        "like",
        "comment",
        "share",
        "facebook",
        "sponsored",
        "ad library",
        "write a comment",
        "press enter to post",
    }
)
SOCIAL_COUNTER_RE = re.compile(r"^\d+\s+(likes|comments|shares)$")

CTA_LABELS: tuple[str, ...] = (
    "Shop Now",
    "Learn More",
    "Sign Up",
    "Order Now",
    "Subscribe",
    "Get Offer",
    "Contact Us",
    "Apply Now",
    "Download",
    "Install Now",
    "Watch More",
    "Book Now",
    "Get Quote",
    "See Menu",
    "Donate Now",
    "View Details",
)
CTA_LABEL_SET = frozenset(label.lower() for label in CTA_LABELS)
CTA_INLINE_RE = re.compile(r"\b(" + "|".join(re.escape(label) for label in CTA_LABELS) + r")\b", re.IGNORECASE)

DOMAIN_ONLY_RE = re.compile(r"^[a-z0-9][a-z0-9.-]*\.[a-z]{2,}$", re.IGNORECASE)
DOMAIN_INLINE_RE = re.compile(r"[a-z0-9][a-z0-9.-]*\.[a-z]{2,}", re.IGNORECASE)
URL_SCHEME_PREFIX_RE = re.compile(r"^https?://", re.IGNORECASE)

# Video player progress such as "0:12 / 0:30".
TIMESTAMP_RE = re.compile(r"\b\d{1,2}:\d{2}\s*/\s*\d{1,2}:\d{2}\b")
TRAILING_ELLIPSIS_RE = re.compile(r"(…|\.\.\.)\s*$")
WHITESPACE_RE = re.compile(r"\s+")
DIGITS_AND_SYMBOLS_RE = re.compile(r"^[\d\W]+$")
EXCESS_BLANK_LINES_RE = re.compile(r"\n{3,}")

HEADLINE_MIN_CHARS = 11
HEADLINE_MAX_CHARS = 99

ZERO_WIDTH_SPACE = "\u200b"


def matches_noise(value: str) -> bool:
    """Return True when ``value`` is a known UI/engagement boilerplate line."""

    return any(pattern.search(value) for pattern in NOISE_PATTERNS)


def collapse_whitespace(value: str) -> str:
    return WHITESPACE_RE.sub(" ", value).strip()


__all__ = [
    "CTA_INLINE_RE",
    "CTA_LABELS",
    "CTA_LABEL_SET",
    "DIGITS_AND_SYMBOLS_RE",
    "DOMAIN_INLINE_RE",
    "DOMAIN_ONLY_RE",
    "EXCESS_BLANK_LINES_RE",
    "HEADLINE_MAX_CHARS",
    "HEADLINE_MIN_CHARS",
    "METADATA_PREFIX_RE",
    "NOISE_PATTERNS",
    "NOISE_TOKENS",
    "SOCIAL_COUNTER_RE",
    "TIMESTAMP_RE",
    "TRAILING_ELLIPSIS_RE",
    "URL_SCHEME_PREFIX_RE",
    "WHITESPACE_RE",
    "ZERO_WIDTH_SPACE",
    "collapse_whitespace",
    "matches_noise",
]
