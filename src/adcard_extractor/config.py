"""Extractor thresholds and version string with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass

EXTRACTOR_NAME = "extractor"
EXTRACTOR_VERSION = "2026-10-19.1"

DEFAULT_MIN_MEDIA_DIMENSION = 140
DEFAULT_LOGO_MAX_DIMENSION = 160
DEFAULT_LOGO_MIN_SIDE = 20
DEFAULT_LOGO_MAX_SIDE = 120
DEFAULT_LOGO_SQUARE_TOLERANCE = 0.4
DEFAULT_LOGO_NEAR_DISTANCE = 80
DEFAULT_MAX_TEXT_CHARS = 0  # 0 disables clamping


@dataclass(frozen=True, slots=True)
class ExtractorConfig:
    min_media_dimension: int = DEFAULT_MIN_MEDIA_DIMENSION
    logo_max_dimension: int = DEFAULT_LOGO_MAX_DIMENSION
    logo_min_side: int = DEFAULT_LOGO_MIN_SIDE
    logo_max_side: int = DEFAULT_LOGO_MAX_SIDE
    logo_square_tolerance: float = DEFAULT_LOGO_SQUARE_TOLERANCE
    logo_near_distance: int = DEFAULT_LOGO_NEAR_DISTANCE  # px between name and logo boxes
    max_text_chars: int = DEFAULT_MAX_TEXT_CHARS

    @property
    def min_media_area(self) -> int:
        return self.min_media_dimension * self.min_media_dimension

    @classmethod
    def from_env(cls) -> ExtractorConfig:
        """Build a config from ``ADCARD_*`` environment variables, falling back to defaults."""

        return cls(
            min_media_dimension=int(os.getenv("ADCARD_MIN_MEDIA_DIMENSION", str(DEFAULT_MIN_MEDIA_DIMENSION))),
            logo_max_dimension=int(os.getenv("ADCARD_LOGO_MAX_DIMENSION", str(DEFAULT_LOGO_MAX_DIMENSION))),
            logo_min_side=int(os.getenv("ADCARD_LOGO_MIN_SIDE", str(DEFAULT_LOGO_MIN_SIDE))),
            logo_max_side=int(os.getenv("ADCARD_LOGO_MAX_SIDE", str(DEFAULT_LOGO_MAX_SIDE))),
            logo_square_tolerance=float(os.getenv("ADCARD_LOGO_SQUARE_TOLERANCE", str(DEFAULT_LOGO_SQUARE_TOLERANCE))),
            logo_near_distance=int(os.getenv("ADCARD_LOGO_NEAR_DISTANCE", str(DEFAULT_LOGO_NEAR_DISTANCE))),
            max_text_chars=int(os.getenv("ADCARD_MAX_TEXT_CHARS", str(DEFAULT_MAX_TEXT_CHARS))),
        )


DEFAULT_CONFIG = ExtractorConfig()


def get_extractor_version(name: str = EXTRACTOR_NAME, version: str = EXTRACTOR_VERSION) -> str:
    """Return ``name:version`` unless ``ADCARD_EXTRACTOR_VERSION`` overrides it."""

    return os.getenv("ADCARD_EXTRACTOR_VERSION", f"{name}:{version}")


__all__ = ["DEFAULT_CONFIG", "EXTRACTOR_NAME", "EXTRACTOR_VERSION", "ExtractorConfig", "get_extractor_version"]
