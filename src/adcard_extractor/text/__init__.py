"""Card text cleaning and classification."""

from __future__ import annotations

from .classifier import Classification, LinkCardStage, classify_segments
from .noise import filter_noise, normalize_text
from .pipeline import ParsedText, parse_ad_text
from .segments import build_segments, split_line
from .truncation import collapse_truncated

__all__ = [
    "Classification",
    "LinkCardStage",
    "ParsedText",
    "build_segments",
    "classify_segments",
    "collapse_truncated",
    "filter_noise",
    "normalize_text",
    "parse_ad_text",
    "split_line",
]
