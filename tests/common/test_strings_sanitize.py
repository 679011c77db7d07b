import pytest

from videocatalog.common.strings.sanitize import normalize_text


def test_trims_then_escapes():
    assert normalize_text("  <b>Hi</b>  ") == "&lt;b&gt;Hi&lt;/b&gt;"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Tom & Jerry", "Tom &amp; Jerry"),
        ('say "hi"', "say &quot;hi&quot;"),
        ("it's", "it&#x27;s"),
        ("a < b > c", "a &lt; b &gt; c"),
    ],
)
def test_escapes_markup_characters(raw, expected):
    assert normalize_text(raw) == expected


def test_empty_and_none():
    assert normalize_text("") == ""
    assert normalize_text("   ") == ""
    assert normalize_text(None) == ""


def test_inner_whitespace_is_kept():
    assert normalize_text("\t a   b \n") == "a   b"
