from adcard_extractor import extract_creative
from adcard_extractor.config import ExtractorConfig
from adcard_extractor.models import BrandContext, LogoCandidate, MediaCandidate, MediaKind, NameNode, Rect

CARD_TEXT = """Acme Outdoors
Sponsored
Gear up for the trail this spring.
Our new packs are lighter than ever.


See translation
acmeoutdoors.com
Trail Packs Built To Last
Free returns within thirty days
Shop Now
48 comments"""


def test_empty_input_yields_empty_creative():
    creative = extract_creative("", "", [])
    assert creative.primary_text == ""
    assert creative.domain == creative.headline == creative.description == creative.cta_label == ""
    assert creative.brand.name == ""
    assert creative.brand.logo_url is None
    assert creative.ranked_images == ()
    assert creative.ranked_videos == ()
    assert creative.aspect_ratio is None


def test_garbage_input_does_not_raise():
    creative = extract_creative(None, None, ["not a candidate", None])
    assert creative.primary_text == ""
    assert creative.ranked_media == ()


def test_inline_domain_and_cta_split():
    creative = extract_creative("Acme acme.io Shop Now", "", [])
    assert creative.domain == "acme.io"
    assert creative.cta_label == "Shop Now"
    assert creative.primary_text == "Acme"


def test_sponsored_brand_hint_is_cleared():
    assert extract_creative("Some copy.", "Sponsored", []).brand.name == ""
    assert extract_creative("Some copy.", "sPoNsOrEd", []).brand.name == ""


def test_truncated_preview_is_not_reported():
    creative = extract_creative("Great deal on shoes…\nGreat deal on shoes this weekend only", "", [])
    assert "Great deal on shoes…" not in creative.primary_text


def test_repeated_extraction_does_not_lose_copy():
    first = extract_creative(CARD_TEXT, "Acme Outdoors", [])
    second = extract_creative(first.primary_text, "Acme Outdoors", [])
    assert first.primary_text == "Gear up for the trail this spring.\nOur new packs are lighter than ever."
    assert second.primary_text == first.primary_text


def test_repeated_extraction_keeps_short_copy_without_period():
    first = extract_creative("Summer sale starts today\nAnother great line here", "", [])
    assert first.primary_text == "Another great line here"
    second = extract_creative(first.primary_text, "", [])
    third = extract_creative(second.primary_text, "", [])
    assert second.primary_text == first.primary_text
    assert third.primary_text == first.primary_text


def test_link_card_only_text_is_kept_as_primary():
    creative = extract_creative("acme.io\nShop Now", "", [])
    assert creative.domain == "acme.io"
    assert creative.cta_label == "Shop Now"
    assert creative.primary_text == "acme.io\nShop Now"


def test_noise_only_text_falls_back_to_raw_text():
    assert extract_creative("Sponsored\nLike", "", []).primary_text == "Sponsored\nLike"


def test_unclassified_text_is_never_dropped():
    assert extract_creative("12\n$$", "", []).primary_text == "12\n$$"
    plain = "We make tents.\nThey are warm."
    assert extract_creative(plain, "", []).primary_text == plain


def test_first_domain_is_kept():
    creative = extract_creative("first.com\nsecond.com\nthird.com", "", [])
    assert creative.domain == "first.com"
    assert "second.com" in creative.primary_text
    assert "third.com" in creative.primary_text


def test_media_ranking_through_entry_point():
    media = [
        MediaCandidate("https://cdn.example.com/square.jpg", 100, 100),
        MediaCandidate("https://cdn.example.com/wide.jpg", 200, 100),
    ]
    assert extract_creative("", "", media).ranked_images[0] == "https://cdn.example.com/wide.jpg"


def test_full_card_with_brand_context_and_media():
    context = BrandContext(
        names=(NameNode("Acme Outdoors", sponsored_adjacent=True, rect=Rect(56, 12, 120, 18)),),
        logos=(LogoCandidate("https://cdn.example.com/avatar.jpg", 40, 40, alt="Acme Outdoors profile", rect=Rect(8, 8, 40, 40)),),
    )
    media = [
        MediaCandidate("https://cdn.example.com/avatar.jpg", 40, 40),
        MediaCandidate("https://cdn.example.com/hero.jpg", 600, 600),
        MediaCandidate("https://video.example.com/clip.mp4", 720, 1280, MediaKind.VIDEO),
    ]
    creative = extract_creative(CARD_TEXT, "", media, brand_context=context)

    assert creative.brand.name == "Acme Outdoors"
    assert creative.brand.logo_url == "https://cdn.example.com/avatar.jpg"
    assert creative.primary_text == "Gear up for the trail this spring.\nOur new packs are lighter than ever."
    assert creative.domain == "acmeoutdoors.com"
    assert creative.headline == "Trail Packs Built To Last"
    assert creative.description == "Free returns within thirty days"
    assert creative.cta_label == "Shop Now"
    assert creative.ranked_images == ("https://cdn.example.com/hero.jpg",)
    assert creative.ranked_videos == ("https://video.example.com/clip.mp4",)
    assert creative.ranked_media[0] == "https://video.example.com/clip.mp4"
    assert creative.aspect_ratio == 0.5625
    assert not creative.is_low_confidence


def test_low_confidence_when_nothing_is_detected():
    creative = extract_creative("Just some words here.", "", [])
    assert creative.is_low_confidence
    assert creative.full_ad_copy == "Just some words here."


def test_extraction_is_deterministic():
    media = [MediaCandidate("https://cdn.example.com/hero.jpg", 600, 600)]
    assert extract_creative(CARD_TEXT, "Acme Outdoors", media) == extract_creative(CARD_TEXT, "Acme Outdoors", media)


def test_long_text_is_not_clamped_by_default():
    text = "Word " * 5000 + "\nThe real offer line."
    creative = extract_creative(text, "", [])
    assert creative.primary_text.endswith("The real offer line.")


def test_long_text_is_clamped_when_configured_but_raw_text_is_kept():
    text = "Hello world this is long."
    creative = extract_creative(text, "", [], config=ExtractorConfig(max_text_chars=10))
    assert creative.primary_text == "Hello worl"
    assert creative.raw_text == text
