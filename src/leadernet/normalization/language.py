"""Script-based language heuristics for entity surface forms.

This is a coarse detector, not a language model: a string counts as
English-like when at most 15% of its characters come from a handful of
non-Latin scripts. The Japanese pattern overlaps the CJK ideograph range, so
Chinese characters are counted twice and CJK text is flagged more readily.
"""

from __future__ import annotations

import re
from typing import Pattern, Tuple

NON_LATIN_THRESHOLD = 0.15

_SCRIPT_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"[\u0400-\u04FF]"),  # Cyrillic
    re.compile(r"[\u4E00-\u9FFF]"),  # CJK unified ideographs
    re.compile(r"[\u0600-\u06FF]"),  # Arabic
    re.compile(r"[\uAC00-\uD7AF]"),  # Hangul syllables
    re.compile(r"[\u0370-\u03FF]"),  # Greek
    re.compile(r"[\u0E00-\u0E7F]"),  # Thai
    re.compile(r"[\u3040-\u309F]|[\u30A0-\u30FF]|[\u4E00-\u9FAF]"),  # Hiragana, Katakana, CJK
)


def count_non_latin(text: str | None) -> int:
    """Return the weighted count of non-Latin script characters in ``text``."""

    if not text:
        return 0
    return sum(len(pattern.findall(text)) for pattern in _SCRIPT_PATTERNS)


def is_likely_english(text: str | None) -> bool:
    """Return True when ``text`` looks like Latin-script (English) text.

    Empty input is treated as English so that a missing signal never excludes
    an entity.

    Args:
        text: Surface form to classify.

    Returns:
        ``True`` when the non-Latin character count does not exceed 15% of
        the string length (a 20-character string may carry 3 such characters).
    """

    if not text:
        return True
    return count_non_latin(text) <= len(text) * NON_LATIN_THRESHOLD


__all__ = ["NON_LATIN_THRESHOLD", "count_non_latin", "is_likely_english"]
