"""Unit tests for leadernet.normalization.language."""

import pytest

from leadernet.normalization.language import count_non_latin, is_likely_english


@pytest.mark.parametrize("text", ["", None])
def test_missing_text_counts_as_english(text):
    assert is_likely_english(text) is True


@pytest.mark.parametrize(
    "text,expected",
    [
        ("vladimir putin", True),
        ("Mar-a-Lago", True),
        ("владимир путин", False),
        ("βλαντιμίρ πούτιν", False),
        ("도널드 트럼프", False),
        ("习近平", False),
        ("بوتين", False),
    ],
)
def test_script_classification(text, expected):
    assert is_likely_english(text) is expected


def test_threshold_boundary_on_twenty_characters():
    three = "a" * 17 + "жжж"
    four = "a" * 16 + "жжжж"
    assert len(three) == len(four) == 20

    assert is_likely_english(three) is True
    assert is_likely_english(four) is False


def test_cjk_characters_are_counted_twice():
    assert count_non_latin("习近平") == 6
    assert count_non_latin("ひらがな") == 4
    assert count_non_latin("putin") == 0


def test_short_foreign_name_inside_english_sentence_stays_english():
    assert is_likely_english("Talks with Путин were cancelled on Monday morning") is True
