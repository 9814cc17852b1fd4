from aicloset.core.tags import mentions, normalize_style_key, normalize_weather


def test_normalize_style_key_slash_spacing():
    assert normalize_style_key("Party / Dressy") == "party/dressy"
    assert normalize_style_key("party/dressy") == "party/dressy"
    assert normalize_style_key("  Smart   Casual ") == "smart casual"


def test_normalize_empty():
    assert normalize_style_key(None) == ""
    assert normalize_style_key("   ") == ""
    assert normalize_weather(None) == ""


def test_mentions_name_and_tags():
    assert mentions(["umbrella"], "Black Umbrella")
    assert mentions(["rain"], "Shell", ["Rainproof"])
    assert not mentions(["rain"], "Shell", ["cotton"])
    assert not mentions(["rain"], None)
