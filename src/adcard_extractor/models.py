"""Immutable value types passed between the extraction stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .patterns import TRAILING_ELLIPSIS_RE, collapse_whitespace


@dataclass(frozen=True, slots=True)
class Segment:
    """One classifiable unit of card text.

    ``raw`` is kept verbatim for ``primary_text``; ``detection`` is the trimmed,
    timestamp-free form used for matching and for the link-card fields.
    """

    raw: str
    detection: str = ""
    is_blank: bool = False

    @classmethod
    def blank(cls) -> Segment:
        return cls(raw="", detection="", is_blank=True)

    @property
    def key(self) -> str:
        return collapse_whitespace(self.detection).lower()

    @property
    def is_truncated(self) -> bool:
        return bool(self.detection) and TRAILING_ELLIPSIS_RE.search(self.detection) is not None

    @property
    def truncation_base(self) -> str:
        return TRAILING_ELLIPSIS_RE.sub("", self.key).strip()


class MediaKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


@dataclass(frozen=True, slots=True)
class MediaCandidate:
    source_url: str
    width: int = 0
    height: int = 0
    kind: MediaKind = MediaKind.IMAGE
    srcset: str = ""
    alt: str = ""

    @property
    def area(self) -> int:
        return max(self.width, 0) * max(self.height, 0)

    @property
    def has_dimensions(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def distance_to(self, other: Rect) -> float:
        """Edge-to-edge gap between two boxes; 0 when they touch or overlap."""

        dx = max(other.x - (self.x + self.width), self.x - (other.x + other.width), 0.0)
        dy = max(other.y - (self.y + self.height), self.y - (other.y + other.height), 0.0)
        return (dx * dx + dy * dy) ** 0.5


@dataclass(frozen=True, slots=True)
class NameNode:
    """Heading-like text that may carry the advertiser name."""

    text: str
    sponsored_adjacent: bool = False
    rect: Rect | None = None


@dataclass(frozen=True, slots=True)
class LogoCandidate:
    source_url: str
    width: int = 0
    height: int = 0
    alt: str = ""
    rect: Rect | None = None


@dataclass(frozen=True, slots=True)
class BrandContext:
    names: tuple[NameNode, ...] = ()
    logos: tuple[LogoCandidate, ...] = ()


@dataclass(frozen=True, slots=True)
class BrandInfo:
    name: str = ""
    logo_url: str | None = None

    @property
    def is_unknown(self) -> bool:
        return not self.name


@dataclass(frozen=True, slots=True)
class RankedMedia:
    images: tuple[str, ...] = ()
    videos: tuple[str, ...] = ()

    @property
    def combined(self) -> tuple[str, ...]:
        return self.videos + self.images

    @property
    def primary(self) -> str | None:
        combined = self.combined
        return combined[0] if combined else None


@dataclass(frozen=True, slots=True)
class CapturedCreative:
    primary_text: str = ""
    domain: str = ""
    headline: str = ""
    description: str = ""
    cta_label: str = ""
    brand: BrandInfo = field(default_factory=BrandInfo)
    ranked_images: tuple[str, ...] = ()
    ranked_videos: tuple[str, ...] = ()
    raw_text: str = ""
    full_ad_copy: str = ""
    aspect_ratio: float | None = None

    @property
    def ranked_media(self) -> tuple[str, ...]:
        return self.ranked_videos + self.ranked_images

    @property
    def is_low_confidence(self) -> bool:
        """True when neither a brand nor any link-card field was detected."""

        link_card = (self.domain, self.headline, self.description, self.cta_label)
        return self.brand.is_unknown and not any(link_card)

    def to_dict(self) -> dict[str, Any]:
        return {
            "primary_text": self.primary_text,
            "domain": self.domain,
            "headline": self.headline,
            "description": self.description,
            "cta_label": self.cta_label,
            "brand": {"name": self.brand.name, "logo_url": self.brand.logo_url},
            "ranked_images": list(self.ranked_images),
            "ranked_videos": list(self.ranked_videos),
            "full_ad_copy": self.full_ad_copy,
            "aspect_ratio": self.aspect_ratio,
        }


__all__ = [
    "BrandContext",
    "BrandInfo",
    "CapturedCreative",
    "LogoCandidate",
    "MediaCandidate",
    "MediaKind",
    "NameNode",
    "RankedMedia",
    "Rect",
    "Segment",
]
