"""Rank and deduplicate image/video candidates by rendered area."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import DEFAULT_CONFIG, ExtractorConfig
from ..models import MediaCandidate, MediaKind, RankedMedia
from ..urls import normalize_media_url, select_srcset_url


def resolve_candidate_url(candidate: MediaCandidate, base_url: str | None = None) -> str | None:
    """Prefer the best ``srcset`` variant, then ``source_url``."""

    for option in (select_srcset_url(candidate.srcset), candidate.source_url):
        resolved = normalize_media_url(option, base_url)
        if resolved:
            return resolved
    return None


def is_large_enough(candidate: MediaCandidate, config: ExtractorConfig = DEFAULT_CONFIG) -> bool:
    if not candidate.has_dimensions:
        return False
    if max(candidate.width, candidate.height) >= config.min_media_dimension:
        return True
    return candidate.area >= config.min_media_area


def rank_urls(
    candidates: Iterable[MediaCandidate],
    *,
    base_url: str | None = None,
    config: ExtractorConfig = DEFAULT_CONFIG,
) -> list[str]:
    """Return resolved URLs, largest first, without duplicates.

    Undersized candidates are used only when nothing clears the size threshold.
    """

    usable: list[tuple[MediaCandidate, str]] = []
    for candidate in candidates:
        url = resolve_candidate_url(candidate, base_url)
        if url:
            usable.append((candidate, url))
    large = [pair for pair in usable if is_large_enough(pair[0], config)]
    pool = large or usable
    ordered = sorted(pool, key=lambda pair: pair[0].area, reverse=True)

    seen: set[str] = set()
    urls: list[str] = []
    for _, url in ordered:
        if url in seen:
            continue
        seen.add(url)
        urls.append(url)
    return urls


def rank_media(
    candidates: Iterable[MediaCandidate],
    *,
    base_url: str | None = None,
    config: ExtractorConfig = DEFAULT_CONFIG,
) -> RankedMedia:
    items = list(candidates or ())
    images = [c for c in items if c.kind is MediaKind.IMAGE]
    videos = [c for c in items if c.kind is MediaKind.VIDEO]
    return RankedMedia(
        images=tuple(rank_urls(images, base_url=base_url, config=config)),
        videos=tuple(rank_urls(videos, base_url=base_url, config=config)),
    )


def detect_aspect_ratio(
    candidates: Iterable[MediaCandidate],
    *,
    config: ExtractorConfig = DEFAULT_CONFIG,
) -> float | None:
    """Width/height of the leading video, else of the leading image."""

    items = list(candidates or ())
    for kind in (MediaKind.VIDEO, MediaKind.IMAGE):
        sized = [c for c in items if c.kind is kind and c.has_dimensions]
        if not sized:
            continue
        large = [c for c in sized if is_large_enough(c, config)]
        first = max(large or sized, key=lambda c: c.area)
        return round(first.width / first.height, 4)
    return None


__all__ = ["detect_aspect_ratio", "is_large_enough", "rank_media", "rank_urls", "resolve_candidate_url"]
