"""Rule text extraction.

The full profile keeps the whole post body as lines so downstream readers
retain full context. The lean profile keeps only sentences mentioning
participation rules.
"""

from __future__ import annotations

import re
from typing import Literal

RulePolicy = Literal["verbatim", "keyword"]

RULE_KEYWORDS: tuple[str, ...] = (
    "枚", "加筆", "モデル", "NG", "禁止", "ルール", "条件", "参加",
    "応募", "サイズ", "タグ", "引用", "ID", "リポスト", "RP",
)

_SENTENCE_SPLIT = re.compile(r"[。\n\r]")
_LINE_SPLIT = re.compile(r"[\n\r]")


class RuleTextExtractor:
    """Turns post text into an ordered list of rule lines."""

    def __init__(self, policy: RulePolicy = "verbatim"):
        self._policy = policy

    @property
    def policy(self) -> RulePolicy:
        return self._policy

    def extract(self, text: str | None) -> list[str]:
        if not text:
            return []
        if self._policy == "keyword":
            return self._keyword_sentences(text)
        return [line.strip() for line in _LINE_SPLIT.split(text) if line.strip()]

    @staticmethod
    def _keyword_sentences(text: str) -> list[str]:
        sentences = (s.strip() for s in _SENTENCE_SPLIT.split(text))
        return [
            s for s in sentences
            if len(s) > 3 and any(k in s for k in RULE_KEYWORDS)
        ]
