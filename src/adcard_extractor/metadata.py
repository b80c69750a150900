"""Ordered output records for extracted creatives."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any
from typing import OrderedDict as OrderedDictType

from .hashing import creative_fingerprint
from .models import CapturedCreative
from .urls import detect_platform


def build_creative_record(
    creative: CapturedCreative,
    *,
    extractor_version: str,
    page_url: str | None = None,
    include_raw_text: bool = False,
) -> OrderedDictType[str, Any]:
    """Return the creative with deterministic key ordering for auditability."""

    md: OrderedDictType[str, Any] = OrderedDict()
    md["extractor_version"] = extractor_version
    md["platform"] = detect_platform(page_url)
    if page_url:
        md["page_url"] = page_url
    md["fingerprint"] = creative_fingerprint(creative)
    md["low_confidence"] = creative.is_low_confidence
    md.update(creative.to_dict())
    md["ranked_media"] = list(creative.ranked_media)
    if include_raw_text:
        md["raw_text"] = creative.raw_text
    return md


__all__ = ["build_creative_record"]
