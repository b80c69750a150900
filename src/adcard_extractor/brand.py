"""Brand name and logo inference for an ad card."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .config import DEFAULT_CONFIG, ExtractorConfig
from .models import BrandContext, BrandInfo, LogoCandidate, NameNode, Rect
from .patterns import collapse_whitespace
from .urls import normalize_media_url

_SPONSORED_WORD_RE = re.compile(r"\bsponsored\b", re.IGNORECASE)
_POSSESSIVE_POST_RE = re.compile(r"['’]s\s+post$", re.IGNORECASE)
_LOGO_ALT_HINTS = ("profile", "logo")


def sanitize_brand_name(name: str | None) -> str:
    """Clear placeholder values; "Sponsored" is never a brand."""

    value = collapse_whitespace(name or "")
    if value.lower() == "sponsored":
        return ""
    return value


def clean_brand_name(text: str | None) -> str:
    """Reduce header text such as ``"Acme's Post • Sponsored"`` to ``"Acme"``."""

    value = collapse_whitespace(text or "")
    value = value.split("•", 1)[0]
    match = _SPONSORED_WORD_RE.search(value)
    if match:
        value = value[: match.start()]
    value = _POSSESSIVE_POST_RE.sub("", value.strip())
    return sanitize_brand_name(value)


def _ordered_name_nodes(names: Iterable[NameNode]) -> list[NameNode]:
    nodes = list(names)
    return [n for n in nodes if n.sponsored_adjacent] + [n for n in nodes if not n.sponsored_adjacent]


def resolve_brand_name(context: BrandContext | None, brand_hint: str = "") -> tuple[str, NameNode | None]:
    """Return the cleaned name and the node it came from (None for the hint)."""

    if context is not None:
        for node in _ordered_name_nodes(context.names):
            name = clean_brand_name(node.text)
            if name:
                return name, node
    return clean_brand_name(brand_hint), None


def is_logo_match(logo: LogoCandidate, config: ExtractorConfig = DEFAULT_CONFIG) -> bool:
    width, height = logo.width, logo.height
    if width <= 0 or height <= 0:
        return False
    if width > config.logo_max_dimension or height > config.logo_max_dimension:
        return False
    alt = (logo.alt or "").lower()
    if any(hint in alt for hint in _LOGO_ALT_HINTS):
        return True
    approx_square = abs(width - height) <= min(width, height) * config.logo_square_tolerance
    in_range = config.logo_min_side <= width <= config.logo_max_side and config.logo_min_side <= height <= config.logo_max_side
    return approx_square and in_range


def select_logo(
    logos: Iterable[LogoCandidate],
    *,
    near: Rect | None = None,
    base_url: str | None = None,
    config: ExtractorConfig = DEFAULT_CONFIG,
) -> str | None:
    """Pick a logo URL, searching candidates close to ``near`` before the rest of the card."""

    usable: list[tuple[LogoCandidate, str]] = []
    for logo in logos:
        if not is_logo_match(logo, config):
            continue
        url = normalize_media_url(logo.source_url, base_url)
        if url:
            usable.append((logo, url))
    if near is not None:
        for logo, url in usable:
            if logo.rect is not None and logo.rect.distance_to(near) <= config.logo_near_distance:
                return url
    return usable[0][1] if usable else None


def identify_brand(
    context: BrandContext | None,
    brand_hint: str = "",
    *,
    base_url: str | None = None,
    config: ExtractorConfig = DEFAULT_CONFIG,
) -> BrandInfo:
    """Infer the advertiser; an empty name and no logo mean "unknown"."""

    name, node = resolve_brand_name(context, brand_hint)
    logo_url = None
    if context is not None:
        logo_url = select_logo(
            context.logos,
            near=node.rect if node is not None else None,
            base_url=base_url,
            config=config,
        )
    return BrandInfo(name=name, logo_url=logo_url)


__all__ = [
    "clean_brand_name",
    "identify_brand",
    "is_logo_match",
    "resolve_brand_name",
    "sanitize_brand_name",
    "select_logo",
]
