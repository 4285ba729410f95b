"""Keyword-tier classification of art event posts.

A post is tested against four tiers in a fixed order and the first tier that
decides wins:

1. exclude: news, reports, greetings and commission work are never events.
2. strong: unambiguous event vocabulary (contest, exhibition, anthology, ...).
3. weak + structure: ambiguous vocabulary counts only together with an
   announcement header (period, how to apply, rules, deadline, ...).
4. hashtag: a tag shaped like "#<name>イベント" / "#<name>企画" / ... that does
   not start with "AI".

All comparisons are case-insensitive substring containment.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from src.art_events.schemas import Classification

logger = logging.getLogger(__name__)


EXCLUDE_KEYWORDS: tuple[str, ...] = (
    "ニュース", "記事", "まとめ", "速報", "ブログ", "動画紹介",
    "定期", "宣伝", "commission", "skeb", "納品", "作業報告",
    # greetings
    "ご無沙汰", "おはよう", "こんにちは", "こんばんは", "おやすみ",
)

STRONG_KEYWORDS: tuple[str, ...] = (
    "コンテスト", "contest", "企画", "展示", "募集",
    "選手権", "杯", "マッチ", "バトル", "アンソロジー",
)

WEAK_KEYWORDS: tuple[str, ...] = (
    "AIアート", "AIイラスト", "AI art", "AI illustration",
    "AI生成", "生成AI", "プロンプト",
    "イベント", "フェス", "チャレンジ", "お題", "コラボ",
)

STRUCTURE_KEYWORDS: tuple[str, ...] = (
    "開催期間", "参加方法", "テーマ：", "テーマ:", "テーマ ",
    "ルール", "注意事項", "応募方法", "参加条件",
    "イベントタグ", "指定タグ", "期間：", "期間:",
    "〆切", "締切", "締め切り", "deadline",
)

# Dedicated tag shape, distinct from generic hashtag extraction
EVENT_TAG_PATTERN = re.compile(
    r"#(?!AI)[^\s#]+(?:イベント|企画|コンテスト|杯|祭|フェス)",
    re.IGNORECASE,
)

# Lean profile: one flat keyword list and a slightly different exclude list
LEAN_EXCLUDE_KEYWORDS: tuple[str, ...] = (
    "ニュース", "記事", "まとめ", "速報", "ブログ", "動画紹介",
    "質問", "アンケート", "定期", "宣伝", "commission", "skeb",
)

LEAN_EVENT_KEYWORDS: tuple[str, ...] = (
    "AIアート", "AIイラスト", "AI art", "AI illustration",
    "AI生成", "生成AI", "プロンプト",
    "コンテスト", "contest", "企画", "展示", "募集",
    "イベント", "フェス", "チャレンジ", "お題", "コラボ",
    "選手権", "杯", "マッチ", "バトル",
    "開催期間", "参加方法", "テーマ：", "テーマ:",
    "ルール", "注意事項", "応募方法", "参加条件",
    "イベントタグ", "指定タグ",
)


@dataclass(frozen=True)
class KeywordTiers:
    """Immutable keyword tables for one classifier profile."""

    exclude: tuple[str, ...]
    strong: tuple[str, ...]
    weak: tuple[str, ...] = ()
    structure: tuple[str, ...] = ()
    event_tag: re.Pattern[str] | None = None


FULL_TIERS = KeywordTiers(
    exclude=EXCLUDE_KEYWORDS,
    strong=STRONG_KEYWORDS,
    weak=WEAK_KEYWORDS,
    structure=STRUCTURE_KEYWORDS,
    event_tag=EVENT_TAG_PATTERN,
)

LEAN_TIERS = KeywordTiers(
    exclude=LEAN_EXCLUDE_KEYWORDS,
    strong=LEAN_EVENT_KEYWORDS,
)


def find_keyword(text: str, keywords: tuple[str, ...]) -> str | None:
    """Return the first keyword contained in text (case-insensitive), or None."""
    lower = text.lower()
    for keyword in keywords:
        if keyword.lower() in lower:
            return keyword
    return None


class KeywordClassifier:
    """
    Decides whether a post announces an art event.

    Stateless apart from its immutable keyword tables, so one instance can
    be shared freely.

    Usage:
        classifier = KeywordClassifier()
        classifier.is_event("AIアートコンテスト開催！")  # True
    """

    def __init__(self, tiers: KeywordTiers | None = None):
        self._tiers = tiers or FULL_TIERS

    @property
    def tiers(self) -> KeywordTiers:
        return self._tiers

    def classify(self, text: str | None) -> Classification:
        """
        Classify text and report the deciding tier.

        Args:
            text: Post text. None and empty strings are never events.

        Returns:
            Classification with the decision, tier and matched term(s).
        """
        if not text:
            return Classification(is_event=False, tier="none")

        tiers = self._tiers

        excluded = find_keyword(text, tiers.exclude)
        if excluded:
            logger.debug(f"Excluded by keyword: {excluded}")
            return Classification(is_event=False, tier="exclude", matched=(excluded,))

        strong = find_keyword(text, tiers.strong)
        if strong:
            return Classification(is_event=True, tier="strong", matched=(strong,))

        weak = find_keyword(text, tiers.weak)
        structure = find_keyword(text, tiers.structure)
        if weak and structure:
            return Classification(
                is_event=True, tier="weak+structure", matched=(weak, structure)
            )

        if tiers.event_tag is not None:
            tag = tiers.event_tag.search(text)
            if tag:
                return Classification(is_event=True, tier="hashtag", matched=(tag.group(0),))

        if weak:
            logger.debug(f"Weak keyword without structure: {weak}")
        elif structure:
            logger.debug(f"Structure keyword without event vocabulary: {structure}")

        return Classification(is_event=False, tier="none")

    def is_event(self, text: str | None) -> bool:
        """Return True if text announces an event."""
        return self.classify(text).is_event
