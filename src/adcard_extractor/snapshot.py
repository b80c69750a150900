"""Convert an already-located ad-card element into extractor inputs.

The browser side collects raw facts only (text, media boxes, header nodes);
every decision about them is made by the pure pipeline in :mod:`extract`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from playwright.async_api import ElementHandle

from .config import ExtractorConfig
from .extract import extract_creative
from .models import BrandContext, CapturedCreative, LogoCandidate, MediaCandidate, MediaKind, NameNode, Rect

CARD_SNAPSHOT_JS = """
(card) => {
  const rectOf = (el) => {
    const r = el.getBoundingClientRect();
    return { x: r.x + window.scrollX, y: r.y + window.scrollY, width: r.width, height: r.height };
  };
  const textOf = (el) => (el.textContent || '').replace(/\\s+/g, ' ').trim();

  const images = Array.from(card.querySelectorAll('img')).map((img) => {
    const r = img.getBoundingClientRect();
    return {
      src: img.currentSrc || img.src || '',
      srcset: img.getAttribute('srcset') || '',
      alt: img.getAttribute('alt') || '',
      width: Math.round(r.width || img.naturalWidth || img.clientWidth || 0),
      height: Math.round(r.height || img.naturalHeight || img.clientHeight || 0),
      rect: rectOf(img),
    };
  });

  const videos = Array.from(card.querySelectorAll('video')).map((video) => {
    const r = video.getBoundingClientRect();
    const urls = [video.currentSrc, video.src];
    video.querySelectorAll('source').forEach((source) => urls.push(source.src));
    return {
      urls: Array.from(new Set(urls.filter(Boolean))),
      width: Math.round(video.videoWidth || r.width || video.clientWidth || 0),
      height: Math.round(video.videoHeight || r.height || video.clientHeight || 0),
    };
  });

  const markers = Array.from(card.querySelectorAll('span, a, div'))
    .filter((el) => el.children.length === 0 && /^sponsored$/i.test(textOf(el)));
  const adjacent = [];
  markers.forEach((marker) => {
    let node = marker;
    for (let depth = 0; node && node !== card && depth < 4; depth += 1) {
      const prev = node.previousElementSibling;
      if (prev && textOf(prev)) {
        adjacent.push(prev);
        break;
      }
      node = node.parentElement;
    }
  });

  const headingSelector = [
    'strong a', 'strong span', '[role="heading"] a', '[role="heading"] span',
    'h3 a', 'h3 span', 'h4 a', 'h4 span', 'strong', 'h3', 'h4', '[role="heading"]',
  ].join(', ');
  const seen = new Set();
  const names = [];
  const pushName = (el, sponsoredAdjacent) => {
    if (seen.has(el)) return;
    seen.add(el);
    const text = textOf(el);
    if (text) names.push({ text, sponsored_adjacent: sponsoredAdjacent, rect: rectOf(el) });
  };
  adjacent.forEach((el) => pushName(el, true));
  card.querySelectorAll(headingSelector).forEach((el) => pushName(el, false));

  return {
    text: (card.innerText || '').replace(/\\u200b/g, ''),
    images,
    videos,
    names,
  };
}
"""


@dataclass(frozen=True, slots=True)
class CardSnapshot:
    text: str = ""
    page_url: str | None = None
    media: tuple[MediaCandidate, ...] = ()
    brand_context: BrandContext = field(default_factory=BrandContext)

    def extract(self, brand_hint: str = "", *, base_url: str | None = None, config: ExtractorConfig | None = None) -> CapturedCreative:
        return extract_creative(
            self.text,
            brand_hint,
            self.media,
            brand_context=self.brand_context,
            base_url=base_url or self.page_url,
            config=config,
        )


def _int(value: Any) -> int:
    try:
        return max(int(round(float(value))), 0)
    except (TypeError, ValueError):
        return 0


def _rect(value: Any) -> Rect | None:
    if not isinstance(value, dict):
        return None
    try:
        return Rect(
            x=float(value.get("x", 0)),
            y=float(value.get("y", 0)),
            width=float(value.get("width", 0)),
            height=float(value.get("height", 0)),
        )
    except (TypeError, ValueError):
        return None


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def card_snapshot_from_payload(payload: dict[str, Any], *, page_url: str | None = None) -> CardSnapshot:
    """Build a typed snapshot from the evaluated JSON (or a saved payload file).

    Every ``<img>`` becomes both an image candidate and a potential logo; each
    ``<video>`` contributes one candidate per distinct source URL.
    """

    media: list[MediaCandidate] = []
    logos: list[LogoCandidate] = []
    for img in payload.get("images") or ():
        if not isinstance(img, dict):
            continue
        src, width, height = _str(img.get("src")), _int(img.get("width")), _int(img.get("height"))
        media.append(
            MediaCandidate(
                source_url=src,
                width=width,
                height=height,
                kind=MediaKind.IMAGE,
                srcset=_str(img.get("srcset")),
                alt=_str(img.get("alt")),
            )
        )
        logos.append(LogoCandidate(source_url=src, width=width, height=height, alt=_str(img.get("alt")), rect=_rect(img.get("rect"))))
    for video in payload.get("videos") or ():
        if not isinstance(video, dict):
            continue
        width, height = _int(video.get("width")), _int(video.get("height"))
        urls = video.get("urls") or ([video["src"]] if video.get("src") else [])
        if isinstance(urls, str):
            urls = [urls]
        for url in urls:
            media.append(MediaCandidate(source_url=_str(url), width=width, height=height, kind=MediaKind.VIDEO))

    names = tuple(
        NameNode(text=_str(node.get("text")), sponsored_adjacent=bool(node.get("sponsored_adjacent")), rect=_rect(node.get("rect")))
        for node in payload.get("names") or ()
        if isinstance(node, dict)
    )
    return CardSnapshot(
        text=_str(payload.get("text")),
        page_url=page_url or _str(payload.get("page_url")) or None,
        media=tuple(media),
        brand_context=BrandContext(names=names, logos=tuple(logos)),
    )


def _rect_payload(rect: Rect | None) -> dict[str, float] | None:
    if rect is None:
        return None
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def card_snapshot_to_payload(snapshot: CardSnapshot) -> dict[str, Any]:
    """Inverse of :func:`card_snapshot_from_payload`, used for debug dumps and fixtures."""

    logos = {logo.source_url: logo for logo in snapshot.brand_context.logos}
    images = []
    videos = []
    for candidate in snapshot.media:
        if candidate.kind is MediaKind.VIDEO:
            videos.append({"urls": [candidate.source_url], "width": candidate.width, "height": candidate.height})
            continue
        logo = logos.get(candidate.source_url)
        images.append(
            {
                "src": candidate.source_url,
                "srcset": candidate.srcset,
                "alt": candidate.alt,
                "width": candidate.width,
                "height": candidate.height,
                "rect": _rect_payload(logo.rect if logo else None),
            }
        )
    return {
        "text": snapshot.text,
        "page_url": snapshot.page_url,
        "images": images,
        "videos": videos,
        "names": [
            {"text": node.text, "sponsored_adjacent": node.sponsored_adjacent, "rect": _rect_payload(node.rect)}
            for node in snapshot.brand_context.names
        ],
    }


async def snapshot_card(handle: ElementHandle, *, page_url: str | None = None) -> CardSnapshot:
    """Evaluate :data:`CARD_SNAPSHOT_JS` on ``handle`` and convert the result."""

    payload = await handle.evaluate(CARD_SNAPSHOT_JS)
    return card_snapshot_from_payload(payload or {}, page_url=page_url)


__all__ = ["CARD_SNAPSHOT_JS", "CardSnapshot", "card_snapshot_from_payload", "card_snapshot_to_payload", "snapshot_card"]
