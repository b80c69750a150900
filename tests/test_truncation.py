from adcard_extractor.models import Segment
from adcard_extractor.text.segments import build_segments
from adcard_extractor.text.truncation import collapse_truncated


def _details(segments):
    return [s.detection for s in segments]


def test_collapse_truncated_drops_preview_with_later_expansion():
    segments = build_segments(["Great deal on shoes…", "Great deal on shoes this weekend only"])
    assert _details(collapse_truncated(segments)) == ["Great deal on shoes this weekend only"]


def test_collapse_truncated_accepts_three_dot_ellipsis_and_ignores_case():
    segments = build_segments(["GREAT DEAL ON SHOES...", "great deal on shoes this weekend only"])
    assert _details(collapse_truncated(segments)) == ["great deal on shoes this weekend only"]


def test_collapse_truncated_keeps_preview_without_expansion():
    segments = build_segments(["Limited stock left…", "Order before Friday."])
    assert _details(collapse_truncated(segments)) == ["Limited stock left…", "Order before Friday."]


def test_collapse_truncated_only_looks_forward():
    segments = build_segments(["Great deal on shoes this weekend only", "Great deal on shoes…"])
    assert len(collapse_truncated(segments)) == 2


def test_collapse_truncated_drops_bare_ellipsis():
    segments = [Segment(raw="…", detection="…"), Segment(raw="Copy.", detection="Copy.")]
    assert _details(collapse_truncated(segments)) == ["Copy."]


def test_collapse_truncated_keeps_paragraph_breaks():
    segments = [Segment(raw="One.", detection="One."), Segment.blank(), Segment(raw="Two.", detection="Two.")]
    assert collapse_truncated(segments) == segments
