"""Event name selection.

The name is chosen by an ordered cascade of small rule objects; the first
rule returning a value wins. Each rule can be exercised on its own.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Protocol, Sequence

from src.art_events.keywords import STRONG_KEYWORDS, WEAK_KEYWORDS

logger = logging.getLogger(__name__)

TITLE_KEYWORDS: tuple[str, ...] = STRONG_KEYWORDS + ("開催", "イベント")

# Bracket contents with these terms are rule notes ("タグは2/15まで"), not titles
BRACKET_IGNORE_KEYWORDS: tuple[str, ...] = (
    "タグ", "推奨", "まで", "必須", "NG", "禁止", "ルール", "注意事項", "お守り",
)

BRACKET_PATTERN = re.compile(r"[【『「](.+?)[】』」]")

LINE_BREAK = re.compile(r"[\n\r]")


def split_lines(text: str) -> list[str]:
    """Split text into trimmed, non-empty lines."""
    return [line.strip() for line in LINE_BREAK.split(text) if line.strip()]


def truncate(line: str, max_length: int) -> str:
    """Cut line to max_length characters, marking the cut with '...'."""
    if len(line) > max_length:
        return line[:max_length] + "..."
    return line


@dataclass(frozen=True)
class NameContext:
    """Inputs shared by all name rules."""

    text: str
    lines: list[str]
    hashtags: Sequence[str]


class NameRule(Protocol):
    name: str

    def apply(self, ctx: NameContext) -> str | None: ...


@dataclass(frozen=True)
class TitleLineRule:
    """First line reads like a title: it names the event and is short."""

    keywords: tuple[str, ...] = TITLE_KEYWORDS
    max_length: int = 50
    name: str = "title_line"

    def apply(self, ctx: NameContext) -> str | None:
        if not ctx.lines:
            return None
        first = ctx.lines[0]
        if any(k in first for k in self.keywords) and len(first) < self.max_length:
            return first
        return None


@dataclass(frozen=True)
class FirstHashtagRule:
    name: str = "first_hashtag"

    def apply(self, ctx: NameContext) -> str | None:
        return ctx.hashtags[0] if ctx.hashtags else None


@dataclass(frozen=True)
class BracketRule:
    """First bracketed span, unless it reads like a rule note or has odd length."""

    pattern: re.Pattern[str] = BRACKET_PATTERN
    ignore: tuple[str, ...] = BRACKET_IGNORE_KEYWORDS
    min_length: int = 2
    max_length: int = 40
    name: str = "bracket"

    def apply(self, ctx: NameContext) -> str | None:
        match = self.pattern.search(ctx.text)
        if match is None:
            return None
        inner = match.group(1)
        if any(term in inner for term in self.ignore):
            return None
        if self.min_length < len(inner) < self.max_length:
            return inner
        return None


@dataclass(frozen=True)
class KeywordLineRule:
    keywords: tuple[str, ...] = STRONG_KEYWORDS + WEAK_KEYWORDS
    max_length: int = 50
    name: str = "keyword_line"

    def apply(self, ctx: NameContext) -> str | None:
        for line in ctx.lines:
            if any(k in line for k in self.keywords) and len(line) < self.max_length:
                return line
        return None


@dataclass(frozen=True)
class FirstLineRule:
    max_length: int = 50
    name: str = "first_line"

    def apply(self, ctx: NameContext) -> str | None:
        first = ctx.lines[0] if ctx.lines else ""
        return truncate(first, self.max_length)


@dataclass(frozen=True)
class LeanBracketRule:
    """Lean profile: a specific bracket style, trimmed, no filtering."""

    pattern: re.Pattern[str]
    name: str = "lean_bracket"

    def apply(self, ctx: NameContext) -> str | None:
        match = self.pattern.search(ctx.text)
        return match.group(1).strip() if match else None


@dataclass(frozen=True)
class RawFirstLineRule:
    """Lean profile: the first raw line, even when it is blank."""

    max_length: int = 50
    name: str = "raw_first_line"

    def apply(self, ctx: NameContext) -> str | None:
        first = LINE_BREAK.split(ctx.text, maxsplit=1)[0].strip()
        return truncate(first, self.max_length)


def full_name_rules(
    max_length: int = 50,
    bracket_min_length: int = 2,
    bracket_max_length: int = 40,
) -> tuple[NameRule, ...]:
    return (
        TitleLineRule(max_length=max_length),
        FirstHashtagRule(),
        BracketRule(min_length=bracket_min_length, max_length=bracket_max_length),
        KeywordLineRule(max_length=max_length),
        FirstLineRule(max_length=max_length),
    )


def lean_name_rules(max_length: int = 50) -> tuple[NameRule, ...]:
    return (
        LeanBracketRule(pattern=re.compile(r"【(.+?)】"), name="lean_lenticular"),
        LeanBracketRule(pattern=re.compile(r"「(.+?)」"), name="lean_quote"),
        RawFirstLineRule(max_length=max_length),
    )


class EventNameExtractor:
    """
    Selects an event name with a first-match-wins rule cascade.

    Usage:
        extractor = EventNameExtractor()
        extractor.extract("第3回AIアート選手権\\n...", hashtags=[])
    """

    def __init__(self, rules: Sequence[NameRule] | None = None):
        self._rules = tuple(rules) if rules is not None else full_name_rules()

    @property
    def rules(self) -> tuple[NameRule, ...]:
        return self._rules

    def extract(self, text: str | None, hashtags: Sequence[str] = ()) -> str:
        """
        Select a name for the event announced in text.

        Args:
            text: Post text.
            hashtags: Hashtags of the post in first-seen order.

        Returns:
            The selected name. Empty only when text has no visible content;
            the record builder substitutes its fallback title in that case.
        """
        if not text:
            return ""

        ctx = NameContext(text=text, lines=split_lines(text), hashtags=hashtags)
        for rule in self._rules:
            result = rule.apply(ctx)
            if result:
                logger.debug(f"Event name from rule {rule.name}: {result}")
                return result
        return ""
