"""URL helpers for scraped media and page locations."""

from __future__ import annotations

import re
import urllib.parse

from .logging import jlog

_ALLOWED_SCHEMES = ("http", "https", "blob")
_SRCSET_DESCRIPTOR_RE = re.compile(r"^(\d+(?:\.\d+)?)([wx])$", re.IGNORECASE)


def normalize_media_url(url: str | None, base_url: str | None = None) -> str | None:
    """Return an absolute media URL, or None when the value is unusable.

    ``data:`` payloads, non-web schemes, unparseable values and relative
    paths without a ``base_url`` are all rejected.
    """

    if not url:
        return None
    value = url.strip()
    if not value or value.lower().startswith("data:"):
        return None
    try:
        if value.startswith("//"):
            value = "https:" + value
        parsed = urllib.parse.urlparse(value)
        if not parsed.scheme:
            if not base_url:
                return None
            value = urllib.parse.urljoin(base_url, value)
            parsed = urllib.parse.urlparse(value)
        scheme = parsed.scheme.lower()
        if scheme not in _ALLOWED_SCHEMES:
            return None
        if scheme != "blob" and not parsed.netloc:
            return None
        # Accessing port validates it; malformed hosts raise here.
        _ = parsed.port
        return urllib.parse.urlunparse(parsed)
    except ValueError as exc:
        jlog("debug", event="media_url_rejected", url=value, error=str(exc))
        return None


def parse_srcset(srcset: str | None) -> list[tuple[str, str, float]]:
    """Parse a responsive ``srcset`` into ``(url, unit, value)`` tuples.

    Entries without a descriptor count as ``1x``; malformed descriptors are skipped.
    """

    if not srcset:
        return []
    entries: list[tuple[str, str, float]] = []
    for item in srcset.split(","):
        parts = item.strip().split()
        if not parts:
            continue
        url = parts[0]
        if len(parts) == 1:
            entries.append((url, "x", 1.0))
            continue
        match = _SRCSET_DESCRIPTOR_RE.match(parts[1])
        if not match:
            continue
        entries.append((url, match.group(2).lower(), float(match.group(1))))
    return entries


def select_srcset_url(srcset: str | None) -> str | None:
    """Pick the highest-resolution ``srcset`` entry; width descriptors outrank densities."""

    entries = parse_srcset(srcset)
    if not entries:
        return None
    widths = [entry for entry in entries if entry[1] == "w"]
    pool = widths or entries
    best = pool[0]
    for entry in pool[1:]:
        if entry[2] > best[2]:
            best = entry
    return best[0]


def detect_platform(page_url: str | None) -> str:
    if not page_url:
        return "unknown"
    url = page_url.lower()
    if "instagram.com" in url:
        return "instagram"
    if "facebook.com" in url:
        if re.search(r"/ads/(library|archive)", url):
            return "facebook-ad-library"
        return "facebook-feed"
    return "unknown"


__all__ = ["detect_platform", "normalize_media_url", "parse_srcset", "select_srcset_url"]
