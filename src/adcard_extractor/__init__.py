"""Structured extraction of ad creatives from scraped social-network cards."""

from .brand import clean_brand_name, identify_brand, sanitize_brand_name
from .config import DEFAULT_CONFIG, ExtractorConfig, get_extractor_version
from .extract import extract_creative
from .hashing import creative_fingerprint
from .logging import configure_logging, jlog, logging_context, set_global_context
from .media import detect_aspect_ratio, rank_media
from .metadata import build_creative_record
from .models import (
    BrandContext,
    BrandInfo,
    CapturedCreative,
    LogoCandidate,
    MediaCandidate,
    MediaKind,
    NameNode,
    RankedMedia,
    Rect,
    Segment,
)
from .text import parse_ad_text
from .urls import detect_platform, normalize_media_url, select_srcset_url

__all__ = [
    "BrandContext",
    "BrandInfo",
    "build_creative_record",
    "CapturedCreative",
    "clean_brand_name",
    "configure_logging",
    "creative_fingerprint",
    "DEFAULT_CONFIG",
    "detect_aspect_ratio",
    "detect_platform",
    "ExtractorConfig",
    "extract_creative",
    "get_extractor_version",
    "identify_brand",
    "jlog",
    "logging_context",
    "LogoCandidate",
    "MediaCandidate",
    "MediaKind",
    "NameNode",
    "normalize_media_url",
    "parse_ad_text",
    "rank_media",
    "RankedMedia",
    "Rect",
    "sanitize_brand_name",
    "Segment",
    "select_srcset_url",
    "set_global_context",
]
