"""Deterministic fingerprints for extracted creatives."""

from __future__ import annotations

import hashlib
import json

from .models import CapturedCreative


def creative_fingerprint(creative: CapturedCreative) -> str:
    """sha256 over the classified fields and ranked media.

    Two captures of the same ad share a fingerprint even when the surrounding
    raw text (counters, timestamps) differs.
    """

    payload = {
        "brand": creative.brand.name.lower(),
        "primary_text": creative.primary_text,
        "domain": creative.domain.lower(),
        "headline": creative.headline,
        "description": creative.description,
        "cta_label": creative.cta_label.lower(),
        "media": list(creative.ranked_media),
    }
    blob = json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()


__all__ = ["creative_fingerprint"]
