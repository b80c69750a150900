from adcard_extractor.brand import clean_brand_name, identify_brand, is_logo_match, sanitize_brand_name, select_logo
from adcard_extractor.models import BrandContext, LogoCandidate, NameNode, Rect


def test_clean_brand_name_strips_header_decorations():
    assert clean_brand_name("Acme's Post • Sponsored") == "Acme"
    assert clean_brand_name("Acme’s Post") == "Acme"
    assert clean_brand_name("Acme Sponsored") == "Acme"
    assert clean_brand_name("  Acme   Outdoors ") == "Acme Outdoors"
    assert clean_brand_name("Sponsored") == ""
    assert clean_brand_name(None) == ""


def test_sanitize_brand_name_clears_sponsored_in_any_case():
    assert sanitize_brand_name("SPONSORED") == ""
    assert sanitize_brand_name("sPoNsOrEd") == ""
    assert sanitize_brand_name("Sponsored Goods Co") == "Sponsored Goods Co"


def test_identify_brand_prefers_text_next_to_sponsored_marker():
    context = BrandContext(names=(NameNode("Suggested for you"), NameNode("Acme Outdoors", sponsored_adjacent=True)))
    assert identify_brand(context).name == "Acme Outdoors"


def test_identify_brand_falls_back_to_first_usable_heading():
    context = BrandContext(names=(NameNode("Sponsored"), NameNode("Beta Labs • Follow")))
    assert identify_brand(context).name == "Beta Labs"


def test_identify_brand_uses_hint_without_context():
    brand = identify_brand(None, "Gamma Co")
    assert brand.name == "Gamma Co"
    assert brand.logo_url is None
    assert identify_brand(None, "Sponsored").is_unknown


def test_is_logo_match_rules():
    assert is_logo_match(LogoCandidate("https://cdn.example.com/p.jpg", 150, 60, alt="Acme profile picture"))
    assert is_logo_match(LogoCandidate("https://cdn.example.com/l.jpg", 40, 40))
    assert not is_logo_match(LogoCandidate("https://cdn.example.com/big.jpg", 130, 130))
    assert not is_logo_match(LogoCandidate("https://cdn.example.com/wide.jpg", 60, 30))
    assert not is_logo_match(LogoCandidate("https://cdn.example.com/huge.jpg", 600, 600, alt="logo"))
    assert not is_logo_match(LogoCandidate("https://cdn.example.com/unknown.jpg", 0, 0, alt="logo"))


def test_select_logo_searches_near_the_name_first():
    name_rect = Rect(100, 100, 80, 20)
    far = LogoCandidate("https://cdn.example.com/far.jpg", 40, 40, rect=Rect(500, 500, 40, 40))
    near = LogoCandidate("https://cdn.example.com/near.jpg", 40, 40, rect=Rect(50, 95, 40, 40))
    assert select_logo([far, near], near=name_rect) == "https://cdn.example.com/near.jpg"
    assert select_logo([far], near=name_rect) == "https://cdn.example.com/far.jpg"


def test_identify_brand_attaches_logo_near_chosen_name():
    context = BrandContext(
        names=(NameNode("Acme", sponsored_adjacent=True, rect=Rect(60, 10, 80, 20)),),
        logos=(
            LogoCandidate("https://cdn.example.com/banner.jpg", 600, 400),
            LogoCandidate("https://cdn.example.com/other.jpg", 36, 36, rect=Rect(400, 400, 36, 36)),
            LogoCandidate("https://cdn.example.com/avatar.jpg", 36, 36, rect=Rect(10, 5, 36, 36)),
        ),
    )
    brand = identify_brand(context)
    assert brand.name == "Acme"
    assert brand.logo_url == "https://cdn.example.com/avatar.jpg"


def test_select_logo_skips_unusable_urls():
    logos = [LogoCandidate("data:image/png;base64,AAAA", 40, 40)]
    assert select_logo(logos) is None
