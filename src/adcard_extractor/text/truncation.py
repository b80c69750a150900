"""Drop "See more…" previews that duplicate fuller text later in the card."""

from __future__ import annotations

from ..models import Segment


def _has_expansion(base: str, later: list[Segment]) -> bool:
    return any(seg.detection and seg.key.startswith(base) for seg in later)


def collapse_truncated(segments: list[Segment]) -> list[Segment]:
    kept: list[Segment] = []
    for index, segment in enumerate(segments):
        if segment.is_blank or not segment.is_truncated:
            kept.append(segment)
            continue
        base = segment.truncation_base
        if not base:
            continue
        if _has_expansion(base, segments[index + 1:]):
            continue
        kept.append(segment)
    return kept


__all__ = ["collapse_truncated"]
