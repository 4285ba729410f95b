"""Event record assembly.

EventRecordBuilder is the single entry point used by collaborators: it gates
a post through the keyword classifier and, for events, runs the independent
extractors and assembles an EventRecord.
"""

from __future__ import annotations

import logging
from datetime import datetime
from functools import lru_cache
from typing import Sequence

from src.art_events.config import ArtEventsConfig
from src.art_events.deadline import (
    DEADLINE_PATTERNS,
    END_OF_DAY,
    LEAN_DEADLINE_PATTERNS,
    MIDNIGHT,
    DeadlineExtractor,
)
from src.art_events.event_name import EventNameExtractor, full_name_rules, lean_name_rules
from src.art_events.hashtags import HASHTAG_PATTERN, LEAN_HASHTAG_PATTERN, HashtagExtractor
from src.art_events.keywords import FULL_TIERS, LEAN_TIERS, KeywordClassifier
from src.art_events.rules import RuleTextExtractor
from src.art_events.schemas import EventRecord

logger = logging.getLogger(__name__)


class EventRecordBuilder:
    """
    Builds EventRecord objects from post text.

    Holds only immutable configuration, so one builder can serve many
    threads. ``now`` is always supplied by the caller, so the same input
    yields the same record.

    Usage:
        builder = EventRecordBuilder()
        record = builder.build(text, "https://x.com/u/status/1", now=datetime(2024, 3, 1))
        if record is None:
            ...  # not an event
    """

    def __init__(
        self,
        config: ArtEventsConfig | None = None,
        classifier: KeywordClassifier | None = None,
        hashtag_extractor: HashtagExtractor | None = None,
        deadline_extractor: DeadlineExtractor | None = None,
        name_extractor: EventNameExtractor | None = None,
        rule_extractor: RuleTextExtractor | None = None,
    ):
        self._config = config or ArtEventsConfig()
        lean = self._config.mode == "lean"

        self.classifier = classifier or KeywordClassifier(LEAN_TIERS if lean else FULL_TIERS)
        self.hashtag_extractor = hashtag_extractor or HashtagExtractor(
            LEAN_HASHTAG_PATTERN if lean else HASHTAG_PATTERN
        )
        self.deadline_extractor = deadline_extractor or DeadlineExtractor(
            patterns=LEAN_DEADLINE_PATTERNS if lean else DEADLINE_PATTERNS,
            time_of_day=MIDNIGHT if lean else END_OF_DAY,
            rollover_days=self._config.year_rollover_days,
        )
        self.name_extractor = name_extractor or EventNameExtractor(
            lean_name_rules(self._config.title_max_length)
            if lean
            else full_name_rules(
                max_length=self._config.title_max_length,
                bracket_min_length=self._config.bracket_min_length,
                bracket_max_length=self._config.bracket_max_length,
            )
        )
        self.rule_extractor = rule_extractor or RuleTextExtractor(
            "keyword" if lean else "verbatim"
        )

    @classmethod
    def from_config(cls, config: ArtEventsConfig) -> "EventRecordBuilder":
        return cls(config=config)

    @property
    def config(self) -> ArtEventsConfig:
        return self._config

    def build(
        self,
        text: str | None,
        origin_ref: str,
        images: Sequence[str] | None = None,
        *,
        now: datetime,
    ) -> EventRecord | None:
        """
        Classify a post and extract its event record.

        Args:
            text: Full text of a single post.
            origin_ref: Opaque identifier of the post, passed through.
            images: Image URLs resolved by the caller, passed through.
            now: Reference instant for year inference.

        Returns:
            EventRecord for event posts, None otherwise.
        """
        classification = self.classifier.classify(text)
        if not classification.is_event:
            logger.debug(
                f"Not an event ({classification.tier}): {origin_ref}"
            )
            return None

        logger.debug(
            f"Event detected via {classification.tier} {list(classification.matched)}: {origin_ref}"
        )
        return self._assemble(text, origin_ref, images, now, self._config.unknown_title)

    def collect(
        self,
        text: str | None,
        origin_ref: str,
        images: Sequence[str] | None = None,
        *,
        now: datetime,
    ) -> EventRecord:
        """
        Extract a record without the classification gate.

        Used for manual collection, where the user has already decided the
        post is an event.
        """
        return self._assemble(text or "", origin_ref, images, now, self._config.manual_title)

    def _assemble(
        self,
        text: str,
        origin_ref: str,
        images: Sequence[str] | None,
        now: datetime,
        fallback_name: str,
    ) -> EventRecord:
        hashtags = self.hashtag_extractor.extract(text)
        deadline = self.deadline_extractor.extract(text, now)
        event_name = self.name_extractor.extract(text, hashtags) or fallback_name
        rules = self.rule_extractor.extract(text)

        return EventRecord(
            origin_ref=origin_ref,
            event_name=event_name,
            raw_text=text,
            deadline=deadline.isoformat() if deadline else None,
            hashtags=hashtags,
            rules=rules,
            images=list(images or []),
        )


@lru_cache
def get_builder() -> EventRecordBuilder:
    """
    Get cached builder using environment configuration.

    Clear cache with get_builder.cache_clear() after changing ART_EVENTS_* variables.
    """
    return EventRecordBuilder()


def is_event(text: str | None) -> bool:
    return get_builder().classifier.is_event(text)


def extract_hashtags(text: str | None) -> list[str]:
    return get_builder().hashtag_extractor.extract(text)


def extract_deadline(text: str | None, now: datetime) -> datetime | None:
    return get_builder().deadline_extractor.extract(text, now)


def extract_event_name(text: str | None, hashtags: Sequence[str] = ()) -> str:
    return get_builder().name_extractor.extract(text, hashtags)


def extract_rules(text: str | None) -> list[str]:
    return get_builder().rule_extractor.extract(text)


def build(
    text: str | None,
    origin_ref: str,
    images: Sequence[str] | None = None,
    *,
    now: datetime,
) -> EventRecord | None:
    return get_builder().build(text, origin_ref, images=images, now=now)
