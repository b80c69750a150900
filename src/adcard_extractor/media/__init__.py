"""Media candidate ranking exports."""

from __future__ import annotations

from .ranking import detect_aspect_ratio, is_large_enough, rank_media, rank_urls, resolve_candidate_url

__all__ = ["detect_aspect_ratio", "is_large_enough", "rank_media", "rank_urls", "resolve_candidate_url"]
