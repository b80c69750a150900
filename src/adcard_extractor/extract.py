"""Single entry point composing brand, text and media extraction."""

from __future__ import annotations

from collections.abc import Iterable

from .brand import clean_brand_name, identify_brand
from .config import DEFAULT_CONFIG, ExtractorConfig
from .logging import jlog
from .media import detect_aspect_ratio, rank_media
from .models import BrandContext, CapturedCreative, MediaCandidate
from .text import parse_ad_text


def _clamp_text(text: str, max_chars: int) -> str:
    if max_chars <= 0 or len(text) <= max_chars:
        return text
    jlog("warning", event="raw_text_truncated", original_length=len(text), max_length=max_chars)
    return text[:max_chars]


def extract_creative(
    raw_text: str | None,
    brand_hint: str | None = "",
    media: Iterable[MediaCandidate] | None = (),
    *,
    brand_context: BrandContext | None = None,
    base_url: str | None = None,
    config: ExtractorConfig | None = None,
) -> CapturedCreative:
    """Turn scraped card text, a brand hint and media candidates into a creative.

    Pure and deterministic: no I/O and no shared state between calls. Empty or
    garbage input yields empty fields rather than an exception.
    """

    config = config or DEFAULT_CONFIG
    text = raw_text if isinstance(raw_text, str) else ""
    hint = brand_hint if isinstance(brand_hint, str) else ""
    candidates = [c for c in (media or ()) if isinstance(c, MediaCandidate)]

    brand = identify_brand(brand_context, hint, base_url=base_url, config=config)
    parsed = parse_ad_text(_clamp_text(text, config.max_text_chars), clean_brand_name(hint) or brand.name)
    ranked = rank_media(candidates, base_url=base_url, config=config)

    creative = CapturedCreative(
        primary_text=parsed.primary_text,
        domain=parsed.domain,
        headline=parsed.headline,
        description=parsed.description,
        cta_label=parsed.cta_label,
        brand=brand,
        ranked_images=ranked.images,
        ranked_videos=ranked.videos,
        raw_text=text,
        full_ad_copy=parsed.full_ad_copy,
        aspect_ratio=detect_aspect_ratio(candidates, config=config),
    )
    jlog(
        "debug",
        event="creative_extracted",
        brand_known=not brand.is_unknown,
        primary_chars=len(creative.primary_text),
        has_domain=bool(creative.domain),
        has_headline=bool(creative.headline),
        has_cta=bool(creative.cta_label),
        images=len(creative.ranked_images),
        videos=len(creative.ranked_videos),
        low_confidence=creative.is_low_confidence,
    )
    return creative


__all__ = ["extract_creative"]
