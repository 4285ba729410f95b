"""Hashtag extraction for post text."""

from __future__ import annotations

import re

# Characters allowed in a tag body: ASCII word chars, hiragana, katakana,
# 々〆〇, CJK unified ideographs, fullwidth digits.
HASHTAG_PATTERN = re.compile(
    r"[#＃]([a-zA-Z0-9_\u3040-\u309F\u30A0-\u30FF\u3005-\u3007\u4E00-\u9FCF\uFF10-\uFF19]+)"
)

# Lean profile: anything up to whitespace or the next marker
LEAN_HASHTAG_PATTERN = re.compile(r"[#＃]([^\s#＃]+)")


class HashtagExtractor:
    """
    Finds hashtags in text.

    The leading marker is normalized to "#"; no other normalization is done,
    so tags differing in case stay distinct.
    """

    def __init__(self, pattern: re.Pattern[str] | None = None):
        self._pattern = pattern or HASHTAG_PATTERN

    def extract(self, text: str | None) -> list[str]:
        """
        Extract hashtags in first-seen order with exact duplicates removed.

        Args:
            text: Post text.

        Returns:
            List of "#"-prefixed tags.
        """
        if not text:
            return []

        seen: set[str] = set()
        tags: list[str] = []
        for match in self._pattern.finditer(text):
            tag = "#" + match.group(1)
            if tag not in seen:
                seen.add(tag)
                tags.append(tag)
        return tags
