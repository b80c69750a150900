from adcard_extractor.text.noise import (
    cleaned_text,
    filter_noise,
    normalize_text,
    remove_metadata_prefix,
    strip_brand_prefix,
)


def test_normalize_text_unifies_line_endings_and_zero_width_spaces():
    assert normalize_text("a\r\nb\u200bc\rd") == "a\nbc\nd"
    assert normalize_text(None) == ""


def test_strip_brand_prefix_removes_brand_and_sponsored_label():
    assert strip_brand_prefix("Acme Sponsored Big summer sale", "Acme") == "Big summer sale"
    assert strip_brand_prefix("acme   sponsored Big summer sale", "Acme") == "Big summer sale"
    assert strip_brand_prefix("Acme great shoes.", "Acme") == "great shoes."


def test_strip_brand_prefix_requires_a_word_boundary():
    assert strip_brand_prefix("AcmeCorp rocks", "Acme") == "AcmeCorp rocks"
    assert strip_brand_prefix("Acme (US) deals", "Acme (US)") == "deals"
    assert strip_brand_prefix("Anything", "") == "Anything"


def test_remove_metadata_prefix_only_drops_known_ui_labels():
    line = "Library ID: 123456See ad detailsSponsored Fresh coffee daily"
    assert remove_metadata_prefix(line) == " Fresh coffee daily"
    assert remove_metadata_prefix("Proudly sponsored by Acme") == "Proudly sponsored by Acme"
    assert remove_metadata_prefix("No marker here") == "No marker here"


def test_filter_noise_drops_boilerplate_and_keeps_copy():
    text = "12 likes\nLike\nShow more\nSponsored\nReal ad copy here.\nSee ad details\n3 comments"
    assert filter_noise(text) == ["Real ad copy here."]


def test_filter_noise_keeps_blank_markers_only_for_blank_source_lines():
    assert filter_noise("First\n\n   \nSecond") == ["First", "", "", "Second"]
    # A line emptied by brand stripping disappears without leaving a paragraph break.
    assert filter_noise("Acme\nText", "Acme") == ["Text"]


def test_filter_noise_passes_unknown_content_through():
    assert filter_noise("Totally new label") == ["Totally new label"]
    assert filter_noise("Like our page for more deals") == ["Like our page for more deals"]


def test_cleaned_text_collapses_runs_of_blank_lines():
    assert cleaned_text(["One", "", "", "", "Two", ""]) == "One\n\nTwo"
